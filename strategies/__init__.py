from .fallback import SmartExtractionStrategy
from .native import NativePdfStrategy
from .ocr import TesseractOcrStrategy
from .sources import SUPPORTED_EXTENSIONS
from .text import PlainTextStrategy

__all__ = [
    "SmartExtractionStrategy",
    "NativePdfStrategy",
    "TesseractOcrStrategy",
    "PlainTextStrategy",
    "SUPPORTED_EXTENSIONS",
]
