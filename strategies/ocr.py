import base64
import binascii
import io
import logging
from typing import Any, List

import pytesseract
from pdf2image import convert_from_path
from PIL import Image

from config import settings
from core.exceptions import ReceiptReadError
from core.interfaces import TextExtractionStrategy
from .sources import IMAGE_EXTENSIONS, PDF_EXTENSIONS, as_file_path

logger = logging.getLogger(__name__)


class TesseractOcrStrategy(TextExtractionStrategy):
    """
    Estratégia de leitura baseada em OCR (Reconhecimento Óptico de Caracteres).

    Aceita a imagem do comprovante como:
        - caminho de arquivo de imagem (png, jpg, ...)
        - caminho de PDF (rasterizado com `pdf2image`, primeira página)
        - bytes da imagem
        - data URL ("data:image/jpeg;base64,...") ou base64 puro

    Args:
        lang: Modelo de idioma do Tesseract. Padrão: settings.OCR_LANG ('por').
        config: Parâmetros extras do Tesseract. Padrão: settings.OCR_CONFIG.
    """

    def __init__(self, lang: str = None, config: str = None):
        # Configurar o caminho do Tesseract (VITAL NO WINDOWS)
        pytesseract.pytesseract.tesseract_cmd = settings.TESSERACT_CMD
        self.lang = lang or settings.OCR_LANG
        self.config = config if config is not None else settings.OCR_CONFIG

    def can_read(self, source: Any) -> bool:
        if isinstance(source, (bytes, bytearray)):
            return bool(source)
        path = as_file_path(source)
        if path is not None:
            return path.suffix.lower() in IMAGE_EXTENSIONS | PDF_EXTENSIONS
        # String que não é caminho: data URL ou base64 puro
        return isinstance(source, str) and bool(source.strip())

    @staticmethod
    def _decode_base64(data: str) -> Image.Image:
        try:
            raw = base64.b64decode(data.strip(), validate=False)
        except (binascii.Error, ValueError) as e:
            raise ReceiptReadError(f"Imagem base64 inválida: {e}") from e
        return Image.open(io.BytesIO(raw))

    def _load_images(self, source: Any) -> List[Image.Image]:
        if isinstance(source, (bytes, bytearray)):
            return [Image.open(io.BytesIO(bytes(source)))]

        if isinstance(source, str) and source.startswith('data:'):
            return [self._decode_base64(source.split(',', 1)[-1])]

        path = as_file_path(source)
        if path is not None:
            if path.suffix.lower() in PDF_EXTENSIONS:
                # Passar o poppler_path explicitamente
                return convert_from_path(
                    str(path),
                    first_page=1,
                    last_page=1,
                    poppler_path=settings.POPPLER_PATH,
                )
            return [Image.open(path)]

        if isinstance(source, str):
            return [self._decode_base64(source)]

        raise ReceiptReadError(f"Origem de comprovante não suportada: {type(source).__name__}")

    def extract(self, source: Any) -> str:
        """
        Executa OCR sobre a imagem do comprovante.

        Returns:
            str: Texto reconhecido (linhas separadas por '\\n').

        Raises:
            ReceiptReadError: Se houver erro na decodificação da imagem ou no OCR.
        """
        try:
            imagens = self._load_images(source)

            texto_final = ""
            for img in imagens:
                texto_final += pytesseract.image_to_string(
                    img,
                    lang=self.lang,
                    config=self.config,
                )
            return texto_final

        except ReceiptReadError:
            raise
        except Exception as e:
            raise ReceiptReadError(f"Erro fatal no OCR: {e}") from e
