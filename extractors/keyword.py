import logging
from typing import Optional, Sequence

from core.extractors import BaseStage
from core.models import Candidate, Line, ReferenceData, SourceStage
from extractors.validator import accept_candidate

logger = logging.getLogger(__name__)


class GenericKeywordExtractor(BaseStage):
    """
    Busca padrão: qualquer palavra-chave do pagador (igual ou substring)
    seguida de um nome válido em até `lookahead` linhas.

    Uma palavra-chave sem nome logo abaixo não encerra a busca: a
    varredura continua na próxima ocorrência.
    """

    stage = SourceStage.KEYWORD_GENERIC

    def __init__(self, lookahead: int = 2):
        self.lookahead = lookahead

    @staticmethod
    def _matched_keyword(line: Line, reference: ReferenceData) -> Optional[str]:
        for keyword in reference.payer_anchors:
            if line.lower == keyword or keyword in line.lower:
                return keyword
        return None

    def extract(self, lines: Sequence[Line], reference: ReferenceData) -> Optional[Candidate]:
        for i, line in enumerate(lines):
            keyword = self._matched_keyword(line, reference)
            if keyword is None:
                continue

            logger.debug(f"Palavra-chave '{keyword}' na linha {i + 1}: '{line.normalized}'")
            for following in lines[i + 1:i + 1 + self.lookahead]:
                name = accept_candidate(following.normalized, reference.ignore_phrases)
                if name:
                    logger.debug(f"✅ Encontrado como nome: '{name}'")
                    return Candidate(
                        text=name,
                        source_stage=self.stage,
                        line_index=following.index,
                    )
        return None
