from pathlib import Path
from typing import Any, Optional

IMAGE_EXTENSIONS = {'.png', '.jpg', '.jpeg', '.webp', '.bmp', '.tif', '.tiff'}
PDF_EXTENSIONS = {'.pdf'}
TEXT_EXTENSIONS = {'.txt'}

SUPPORTED_EXTENSIONS = IMAGE_EXTENSIONS | PDF_EXTENSIONS | TEXT_EXTENSIONS


def as_file_path(source: Any) -> Optional[Path]:
    """
    Converte a origem em Path se ela apontar para um arquivo existente.

    Strings base64 longas não são caminhos; o sistema operacional pode
    recusar o nome (OSError), o que também resulta em None.
    """
    if not isinstance(source, (str, Path)):
        return None
    if isinstance(source, str) and source.startswith('data:'):
        return None
    try:
        path = Path(source)
        return path if path.is_file() else None
    except (OSError, ValueError):
        return None


def has_extension(source: Any, extensions: set) -> bool:
    path = as_file_path(source)
    return path is not None and path.suffix.lower() in extensions
