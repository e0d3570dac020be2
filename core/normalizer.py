"""
Normalização do texto OCR em linhas.

A ordem das linhas é a ordem visual do comprovante (de cima para baixo)
e é a única ordem usada pelo pipeline: nenhuma etapa reordena ou
remove duplicatas.
"""

import re
from typing import Any, List

from core.models import Line

_NEWLINE_RE = re.compile(r"\r\n|\r|\n")


def normalize_lines(raw_text: Any) -> List[Line]:
    """
    Quebra o texto em linhas com trim, descartando as vazias.

    Args:
        raw_text: Texto completo do OCR. None, vazio ou não-string
            resultam em lista vazia.

    Returns:
        List[Line]: Linhas não vazias, na ordem original.

    Example:
        >>> [l.normalized for l in normalize_lines("  PAGO POR \\n\\n NOME ")]
        ['PAGO POR', 'NOME']
    """
    if not raw_text or not isinstance(raw_text, str):
        return []

    lines: List[Line] = []
    for segment in _NEWLINE_RE.split(raw_text):
        normalized = segment.strip()
        if not normalized:
            continue
        lines.append(
            Line(
                index=len(lines),
                raw=segment,
                normalized=normalized,
                lower=normalized.lower(),
            )
        )
    return lines
