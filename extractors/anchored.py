"""
Extrator ancorado: "<âncora>" → "Nome" → <nome do pagador>.

Vários bancos montam o bloco do pagador assim:

    PAGO POR            ORIGEM
    Nome                Nome:
    JOAO DA SILVA       MARIA OLIVEIRA
    CPF ***.456.789-**  Instituição ...

A âncora precisa ser a linha inteira (não substring). O marcador "nome"
precisa estar em uma das duas linhas seguintes; o nome é a primeira linha
válida depois do marcador.
"""

import logging
from typing import Optional, Sequence

from core.extractors import BaseStage
from core.models import Candidate, Line, ReferenceData, SourceStage
from extractors.validator import accept_candidate

logger = logging.getLogger(__name__)


def _is_nome_marker(line: Line) -> bool:
    return line.lower.rstrip(":").strip() == "nome"


class AnchoredExtractor(BaseStage):
    """
    Etapa ancorada, parametrizada pela frase âncora.

    Args:
        anchor: Frase âncora em minúsculas (ex: "pago por", "origem").
        stage: Etiqueta da etapa para diagnóstico.
        marker_lookahead: Quantas linhas após a âncora procurar o "nome".
    """

    def __init__(self, anchor: str, stage: SourceStage, marker_lookahead: int = 2):
        self.anchor = anchor.strip().lower()
        self.stage = stage
        self.marker_lookahead = marker_lookahead

    def _find_marker(self, lines: Sequence[Line], anchor_idx: int) -> Optional[int]:
        # O marcador mais próximo vence
        last = min(anchor_idx + self.marker_lookahead, len(lines) - 1)
        for j in range(anchor_idx + 1, last + 1):
            if _is_nome_marker(lines[j]):
                return j
        return None

    def extract(self, lines: Sequence[Line], reference: ReferenceData) -> Optional[Candidate]:
        for i, line in enumerate(lines):
            if line.lower != self.anchor:
                continue

            nome_idx = self._find_marker(lines, i)
            if nome_idx is None:
                logger.debug(f"Âncora '{self.anchor}' na linha {i + 1} sem marcador 'nome'")
                continue

            for candidate_line in lines[nome_idx + 1:]:
                name = accept_candidate(candidate_line.normalized, reference.ignore_phrases)
                if name:
                    logger.debug(
                        f"✅ '{self.anchor}' → nome → '{name}' (linha {candidate_line.index + 1})"
                    )
                    return Candidate(
                        text=name,
                        source_stage=self.stage,
                        line_index=candidate_line.index,
                    )
        return None
