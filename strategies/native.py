import logging
from typing import Any

import pdfplumber

from config import settings
from core.interfaces import TextExtractionStrategy
from .sources import PDF_EXTENSIONS, as_file_path, has_extension

logger = logging.getLogger(__name__)


class NativePdfStrategy(TextExtractionStrategy):
    """
    Estratégia de leitura rápida para comprovantes em PDF com camada de texto.

    Utiliza a biblioteca `pdfplumber` para acessar o texto do PDF diretamente.
    É a estratégia preferencial por ser mais rápida e precisa que o OCR.
    """

    def can_read(self, source: Any) -> bool:
        return has_extension(source, PDF_EXTENSIONS)

    def extract(self, source: Any) -> str:
        """
        Extrai texto da primeira página de um PDF vetorial.

        Args:
            source: Caminho do arquivo.

        Returns:
            str: Texto extraído ou string vazia se a extração falhar/for insuficiente.
        """
        path = as_file_path(source)
        if path is None:
            return ""
        try:
            with pdfplumber.open(str(path)) as pdf:
                if not pdf.pages:
                    return ""
                text = pdf.pages[0].extract_text() or ""

                # Regra de Ouro: Se extraiu pouco texto, considere falha!
                if len(text.strip()) < settings.PDF_MIN_TEXT_CHARS:
                    return ""  # Força o fallback para OCR

                return text
        except Exception as e:
            logger.debug(f"Leitura nativa falhou para {path.name}: {e}")
            return ""
