import logging
from typing import Optional, Sequence

from core.extractors import BaseStage
from core.models import Candidate, Line, ReferenceData, SourceStage
from extractors.utils import is_name_charset, letter_count

logger = logging.getLogger(__name__)


class LastResortExtractor(BaseStage):
    """
    Último recurso: a linha só de letras/espaços/asteriscos com mais letras.

    Não consulta listas de referência; a checagem final do motor
    descarta frases proibidas.
    """

    stage = SourceStage.LAST_RESORT

    def extract(self, lines: Sequence[Line], reference: ReferenceData) -> Optional[Candidate]:
        eligible = [
            line for line in lines
            if is_name_charset(line.normalized) and letter_count(line.normalized) >= 3
        ]
        if not eligible:
            return None

        # max() mantém a primeira linha em caso de empate
        best = max(eligible, key=lambda line: letter_count(line.normalized))
        logger.debug(f"Selecionado como nome (último recurso): '{best.normalized}'")
        return Candidate(text=best.normalized, source_stage=self.stage, line_index=best.index)
