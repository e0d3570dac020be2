from typing import Any

from core.exceptions import ReceiptReadError
from core.interfaces import TextExtractionStrategy
from .sources import TEXT_EXTENSIONS, as_file_path, has_extension


class PlainTextStrategy(TextExtractionStrategy):
    """
    Estratégia para comprovantes já convertidos em texto (.txt).

    Útil para reprocessar saídas de OCR guardadas sem rodar o Tesseract
    de novo.
    """

    def can_read(self, source: Any) -> bool:
        return has_extension(source, TEXT_EXTENSIONS)

    def extract(self, source: Any) -> str:
        """
        Lê o arquivo de texto em UTF-8.

        Raises:
            ReceiptReadError: Se o arquivo não puder ser lido.
        """
        path = as_file_path(source)
        if path is None:
            raise ReceiptReadError(f"Arquivo de texto não encontrado: {source}")
        try:
            return path.read_text(encoding='utf-8', errors='replace')
        except OSError as e:
            raise ReceiptReadError(f"Erro ao ler {path.name}: {e}") from e
