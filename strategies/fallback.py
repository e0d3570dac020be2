from typing import Any, List, Optional

from core.interfaces import TextExtractionStrategy
from .native import NativePdfStrategy
from .ocr import TesseractOcrStrategy
from .text import PlainTextStrategy


class SmartExtractionStrategy(TextExtractionStrategy):
    """
    Estratégia composta (Composite) que gerencia tentativas de leitura.

    Implementa um padrão de **Fallback**:
    1.  Texto já extraído (.txt) é lido direto.
    2.  PDF com camada de texto usa a leitura nativa (rápida).
    3.  Demais casos (ou PDF digitalizado) acionam o OCR (lento e robusto).

    Args:
        strategies: Estratégias em ordem de prioridade. Permite injeção
                    de dependência para testes (DIP).
    """

    def __init__(self, strategies: Optional[List[TextExtractionStrategy]] = None):
        self.strategies = strategies if strategies is not None else [
            PlainTextStrategy(),
            NativePdfStrategy(),      # Tenta ser rápido
            TesseractOcrStrategy(),   # Se falhar, usa força bruta
        ]

    def can_read(self, source: Any) -> bool:
        return any(strategy.can_read(source) for strategy in self.strategies)

    def extract(self, source: Any) -> str:
        """
        Tenta extrair texto usando as estratégias em ordem de prioridade.

        Returns:
            str: Texto da primeira estratégia bem-sucedida, ou "" se todas
                 devolverem vazio (comprovante em branco).

        Raises:
            ReceiptReadError: Propagado da estratégia que falhou (ex: OCR).
        """
        for strategy in self.strategies:
            if not strategy.can_read(source):
                continue
            texto = strategy.extract(source)
            if texto and texto.strip():
                return texto
        return ""
