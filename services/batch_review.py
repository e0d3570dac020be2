"""
Revisão em lote de comprovantes (Batch Review).

Processa uma pasta (ou lista de arquivos) de comprovantes Pix e gera a
planilha de revisão com o nome do pagador sugerido para cada um.

Cada arquivo roda com timeout próprio: um OCR travado marca apenas
aquele comprovante como TIMEOUT e o lote segue.

Usage:
    service = BatchReviewService()
    itens = service.review(["comprovantes/"])
    service.export(itens, "data/output/revisao.csv")
"""
import logging
import time
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from config import settings
from core.engine import PayerNameEngine
from core.exceptions import ReceiptReadError
from core.exporters import CsvExporter, DataExporter
from core.interfaces import TextExtractionStrategy
from core.models import ReviewItem
from services.suggestion_service import has_recipient_marker
from strategies.fallback import SmartExtractionStrategy
from strategies.sources import SUPPORTED_EXTENSIONS

logger = logging.getLogger(__name__)

STATUS_OK = "OK"
STATUS_SEM_NOME = "SEM_NOME"
STATUS_ERRO = "ERRO"
STATUS_TIMEOUT = "TIMEOUT"


class BatchReviewService:
    """
    Gera sugestões de pagador para vários comprovantes.

    Attributes:
        reader: Estratégia de leitura (padrão: SmartExtractionStrategy)
        engine: Motor de extração do nome
        recipient_markers: Termos da empresa recebedora
        timeout_seconds: Limite por arquivo. Se None, usa settings.FILE_TIMEOUT_SECONDS
    """

    # Arquivos a ignorar ao varrer pastas
    IGNORED_FILES = {'.gitkeep', 'thumbs.db', 'desktop.ini'}

    def __init__(
        self,
        reader: Optional[TextExtractionStrategy] = None,
        engine: Optional[PayerNameEngine] = None,
        recipient_markers: Optional[Iterable[str]] = None,
        timeout_seconds: Optional[float] = None,
        exporter: Optional[DataExporter] = None,
    ):
        self.reader = reader if reader is not None else SmartExtractionStrategy()
        self.engine = engine if engine is not None else PayerNameEngine()
        self.recipient_markers = (
            tuple(recipient_markers) if recipient_markers is not None else settings.RECIPIENT_MARKERS
        )
        self.timeout_seconds = timeout_seconds
        self.exporter = exporter if exporter is not None else CsvExporter()

    @property
    def timeout(self) -> float:
        return self.timeout_seconds if self.timeout_seconds is not None else settings.FILE_TIMEOUT_SECONDS

    def collect_files(self, paths: Iterable[Union[str, Path]]) -> List[Path]:
        """
        Expande pastas e filtra extensões suportadas.

        Pastas são varridas recursivamente e em ordem alfabética. Caminhos
        inexistentes ou com extensão não suportada são ignorados com aviso.
        """
        arquivos: List[Path] = []
        for raw in paths:
            path = Path(raw)
            if path.is_dir():
                candidatos = sorted(p for p in path.rglob('*') if p.is_file())
            elif path.is_file():
                candidatos = [path]
            else:
                logger.warning(f"⚠️ Caminho não encontrado: {path}")
                continue

            for arquivo in candidatos:
                if arquivo.name.lower() in self.IGNORED_FILES:
                    continue
                if arquivo.suffix.lower() not in SUPPORTED_EXTENSIONS:
                    logger.debug(f"Extensão não suportada, ignorando: {arquivo.name}")
                    continue
                if arquivo not in arquivos:
                    arquivos.append(arquivo)
        return arquivos

    def review_file(self, file_path: Path) -> ReviewItem:
        """
        Lê o comprovante e sugere o pagador (sem timeout).

        Raises:
            ReceiptReadError: Se a leitura/OCR falhar.
        """
        texto = self.reader.extract(str(file_path))
        result = self.engine.extract(texto)
        candidate = result.candidate

        return ReviewItem(
            arquivo=file_path.name,
            nome_sugerido=result.name,
            estagio=candidate.source_stage.value if candidate and result.found else None,
            distancia=candidate.distance if candidate and result.found else None,
            destinatario_confirmado=has_recipient_marker(texto, self.recipient_markers),
            status=STATUS_OK if result.found else STATUS_SEM_NOME,
        )

    def _review_single_file(self, file_path: Path) -> ReviewItem:
        timeout = self.timeout
        start_time = time.time()

        # Sem context manager: o `with` aguardaria a thread travada no shutdown
        executor = ThreadPoolExecutor(max_workers=1)
        try:
            future = executor.submit(self.review_file, file_path)
            return future.result(timeout=timeout)
        except FuturesTimeoutError:
            elapsed = time.time() - start_time
            logger.error(f"⏱️ TIMEOUT ARQUIVO: {file_path.name} excedeu {timeout}s (elapsed: {elapsed:.1f}s)")
            return ReviewItem(
                arquivo=file_path.name,
                status=STATUS_TIMEOUT,
                erro=f"Processamento excedeu {timeout}s",
            )
        except ReceiptReadError as e:
            logger.error(f"❌ Erro ao ler {file_path.name}: {e}")
            return ReviewItem(arquivo=file_path.name, status=STATUS_ERRO, erro=str(e))
        except Exception as e:
            logger.exception(f"❌ Erro inesperado em {file_path.name}")
            return ReviewItem(arquivo=file_path.name, status=STATUS_ERRO, erro=str(e))
        finally:
            executor.shutdown(wait=False)

    def review(self, paths: Iterable[Union[str, Path]]) -> List[ReviewItem]:
        """
        Processa todos os comprovantes encontrados nos caminhos.

        Args:
            paths: Arquivos e/ou pastas.

        Returns:
            Um ReviewItem por arquivo, na ordem de processamento.
        """
        arquivos = self.collect_files(paths)
        total = len(arquivos)
        if not total:
            logger.warning("⚠️ Nenhum comprovante suportado encontrado.")
            return []

        logger.info(f"⏳ Revisando {total} comprovante(s) (timeout: {self.timeout}s por arquivo)...")

        itens: List[ReviewItem] = []
        for idx, arquivo in enumerate(arquivos, start=1):
            item = self._review_single_file(arquivo)
            itens.append(item)
            logger.info(f"[{idx}/{total}] {item.status}: {arquivo.name} -> {item.nome_sugerido or '-'}")

        resumo = self.summarize(itens)
        logger.info(f"✅ Revisão concluída: {resumo}")
        return itens

    @staticmethod
    def summarize(itens: Iterable[ReviewItem]) -> Dict[str, int]:
        """Contagem de itens por status."""
        contagem = Counter(item.status for item in itens)
        return {status: contagem.get(status, 0) for status in (STATUS_OK, STATUS_SEM_NOME, STATUS_ERRO, STATUS_TIMEOUT)}

    def export(self, itens: List[ReviewItem], destination: Union[str, Path, None] = None) -> Path:
        """
        Grava a planilha de revisão.

        Args:
            itens: Resultado de review()
            destination: Caminho do CSV. Padrão: settings.DIR_SAIDA / settings.ARQUIVO_REVISAO

        Returns:
            Path do arquivo gerado.

        Raises:
            ValueError: Se não houver itens.
            ExportError: Se a gravação falhar.
        """
        destino = Path(destination) if destination else Path(settings.DIR_SAIDA) / settings.ARQUIVO_REVISAO
        self.exporter.export(itens, destino)
        logger.info(f"💾 Relatório salvo em: {destino}")
        return destino
