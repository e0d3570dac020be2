"""
Serviço de sugestão do nome do pagador para um comprovante.

Fluxo de cada requisição:
1.  **Leitura**: OCR (ou leitura nativa) do comprovante.
2.  **Destinatário**: verifica se o comprovante cita a nossa empresa.
3.  **Extração**: executa o PayerNameEngine sobre o texto.
4.  **Publicação**: só publica se ainda for a requisição mais recente.

Cancelamento: a tela pode pedir um novo comprovante antes do OCR anterior
terminar. Cada requisição recebe um id crescente no momento em que é
feita; resultados de ids antigos são descartados e nunca sobrescrevem o
resultado de uma requisição mais nova.

Usage:
    service = NameSuggestionService(on_name_detected=print)
    future = service.suggest_async("comprovante.jpg")
    sugestao = future.result()  # None se foi substituída
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from config import settings
from core.engine import PayerNameEngine
from core.exceptions import ReceiptReadError
from core.interfaces import TextExtractionStrategy
from core.models import Candidate
from strategies.fallback import SmartExtractionStrategy

logger = logging.getLogger(__name__)


def has_recipient_marker(text: str, markers: Optional[Iterable[str]] = None) -> bool:
    """
    Verifica se o comprovante menciona a empresa recebedora (nós).

    Args:
        text: Texto OCR do comprovante
        markers: Termos que identificam a empresa. Padrão: settings.RECIPIENT_MARKERS

    Returns:
        True se algum termo aparecer (sem diferenciar maiúsculas)

    Example:
        >>> has_recipient_marker("Recebedor\\nTCR FINANCE LTDA", ["tcr finance"])
        True
    """
    if not text:
        return False
    markers = settings.RECIPIENT_MARKERS if markers is None else markers
    lower = text.lower()
    return any(marker.strip().lower() in lower for marker in markers if marker and marker.strip())


@dataclass(frozen=True)
class NameSuggestion:
    """
    Sugestão publicada para a tela de revisão.

    Attributes:
        request_id (int): Id da requisição que gerou a sugestão.
        name (str): Nome sugerido; "" quando não encontrado.
        target_name_found (Optional[bool]): Se o comprovante cita a nossa empresa.
            None quando o OCR falhou.
        error (Optional[str]): Mensagem de erro da leitura, quando houver.
        candidate (Optional[Candidate]): Diagnóstico da etapa vencedora.
    """
    request_id: int
    name: str = ""
    target_name_found: Optional[bool] = None
    error: Optional[str] = None
    candidate: Optional[Candidate] = None

    @property
    def found(self) -> bool:
        return bool(self.name)

    @property
    def display_text(self) -> str:
        """Texto para exibição: o nome, ou o rótulo de "não identificado"."""
        return self.name or settings.PLACEHOLDER_NOME


class NameSuggestionService:
    """
    Sugere o nome do pagador de um comprovante, descartando requisições antigas.

    Args:
        reader: Estratégia de leitura. Se None, usa SmartExtractionStrategy.
        engine: Motor de extração. Se None, usa PayerNameEngine padrão.
        recipient_markers: Termos da empresa recebedora. Se None, usa settings.
        on_name_detected: Callback chamado com o nome quando encontrado.
        on_target_name_check: Callback chamado com o resultado da checagem do destinatário.
        max_workers: Threads para suggest_async.
    """

    def __init__(
        self,
        reader: Optional[TextExtractionStrategy] = None,
        engine: Optional[PayerNameEngine] = None,
        recipient_markers: Optional[Iterable[str]] = None,
        on_name_detected: Optional[Callable[[str], None]] = None,
        on_target_name_check: Optional[Callable[[bool], None]] = None,
        max_workers: int = 2,
    ):
        self.reader = reader if reader is not None else SmartExtractionStrategy()
        self.engine = engine if engine is not None else PayerNameEngine()
        self.recipient_markers = (
            tuple(recipient_markers) if recipient_markers is not None else settings.RECIPIENT_MARKERS
        )
        self.on_name_detected = on_name_detected
        self.on_target_name_check = on_target_name_check
        self.max_workers = max_workers

        # RLock: callbacks podem disparar uma nova requisição
        self._lock = threading.RLock()
        self._latest_request_id = 0
        self._latest: Optional[NameSuggestion] = None
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def latest(self) -> Optional[NameSuggestion]:
        """Última sugestão publicada (da requisição mais recente)."""
        with self._lock:
            return self._latest

    def _next_request_id(self) -> int:
        with self._lock:
            self._latest_request_id += 1
            self._latest = None
            return self._latest_request_id

    def is_current(self, request_id: int) -> bool:
        with self._lock:
            return request_id == self._latest_request_id

    def cancel(self) -> None:
        """Invalida qualquer requisição em andamento (ex: tela fechada)."""
        with self._lock:
            self._latest_request_id += 1
            self._latest = None
        logger.debug("Requisições de sugestão em andamento canceladas")

    def suggest(self, receipt: Any) -> Optional[NameSuggestion]:
        """
        Processa o comprovante de forma síncrona.

        Args:
            receipt: Caminho, bytes ou imagem base64 do comprovante.

        Returns:
            NameSuggestion publicada, ou None se a requisição foi substituída.
        """
        return self._run(self._next_request_id(), receipt)

    def suggest_async(self, receipt: Any) -> Future:
        """
        Agenda o processamento em uma thread. O id é reservado agora,
        então a ordem das chamadas define qual resultado vale.

        Returns:
            Future cujo resultado é a NameSuggestion ou None (substituída).
        """
        request_id = self._next_request_id()
        return self._get_executor().submit(self._run, request_id, receipt)

    def _get_executor(self) -> ThreadPoolExecutor:
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.max_workers, thread_name_prefix="ocr-sugestao"
                )
            return self._executor

    def _run(self, request_id: int, receipt: Any) -> Optional[NameSuggestion]:
        if not receipt:
            return self._publish(NameSuggestion(request_id=request_id))

        try:
            text = self.reader.extract(receipt)
        except ReceiptReadError as e:
            logger.error(f"Erro ao processar OCR (requisição {request_id}): {e}")
            return self._publish(NameSuggestion(request_id=request_id, error=str(e)))

        target_found = has_recipient_marker(text, self.recipient_markers)
        result = self.engine.extract(text)
        return self._publish(
            NameSuggestion(
                request_id=request_id,
                name=result.name,
                target_name_found=target_found,
                candidate=result.candidate,
            )
        )

    def _publish(self, suggestion: NameSuggestion) -> Optional[NameSuggestion]:
        # Checagem e publicação sob a mesma trava: uma requisição antiga
        # não consegue publicar depois que uma nova foi feita.
        with self._lock:
            if suggestion.request_id != self._latest_request_id:
                logger.info(
                    f"Requisição {suggestion.request_id} descartada "
                    f"(mais recente: {self._latest_request_id})"
                )
                return None

            self._latest = suggestion

            if self.on_target_name_check and suggestion.target_name_found is not None:
                self.on_target_name_check(suggestion.target_name_found)
            if self.on_name_detected and suggestion.name:
                self.on_name_detected(suggestion.name)

        logger.info(f"Nome identificado pelo OCR: {suggestion.display_text}")
        return suggestion

    def close(self) -> None:
        """Encerra o pool de threads, aguardando as tarefas pendentes."""
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)

    def __enter__(self) -> "NameSuggestionService":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
