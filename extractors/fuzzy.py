"""
Fallback por similaridade com nomes comuns (distância de Levenshtein).

Usado quando nenhuma palavra-chave levou a um nome. Considera apenas
linhas em maiúsculas (como os bancos imprimem o nome do titular) e
escolhe a que tem a palavra mais próxima de um nome/sobrenome comum.
Se nenhuma chegar a `max_distance`, fica com a linha de mais letras.

Complexidade: linhas × palavras × |corpus|. São poucas linhas e algumas
centenas de nomes, então não há índice.
"""

import logging
from typing import List, Optional, Sequence

from rapidfuzz import process
from rapidfuzz.distance import Levenshtein

from core.extractors import BaseStage
from core.models import Candidate, Line, ReferenceData, SourceStage
from extractors.utils import (
    contains_any,
    has_document_noise,
    is_upper_name_line,
    letter_count,
    strip_nome_label,
)

logger = logging.getLogger(__name__)


def closest_name_distance(text: str, name_tokens: Sequence[str]) -> Optional[int]:
    """
    Menor distância de Levenshtein entre qualquer palavra do texto e o corpus.

    Comparação sem diferenciar maiúsculas. Inserção, remoção e troca
    custam 1.

    Args:
        text: Linha candidata
        name_tokens: Nomes comuns em minúsculas

    Returns:
        A menor distância, ou None se o corpus ou o texto estiverem vazios.

    Example:
        >>> closest_name_distance("JULYA SOUZA", ("julia", "souza"))
        0
        >>> closest_name_distance("JULYA", ("julia",))
        1
    """
    if not name_tokens:
        return None

    best: Optional[int] = None
    for word in text.lower().split():
        # extractOne retorna (match, score, index); com distância, menor é melhor
        match = process.extractOne(word, name_tokens, scorer=Levenshtein.distance)
        if match is None:
            continue
        _, distance, _ = match
        if best is None or distance < best:
            best = int(distance)
            if best == 0:
                break
    return best


class FuzzyReferenceExtractor(BaseStage):
    """
    Etapa de fallback por distância de edição contra o corpus de nomes.

    Args:
        max_distance: Distância máxima aceita para o vizinho mais próximo.
    """

    stage = SourceStage.FUZZY

    def __init__(self, max_distance: int = 2):
        self.max_distance = max_distance

    def _candidates(self, lines: Sequence[Line], reference: ReferenceData) -> List[Line]:
        selected = []
        for line in lines:
            text = line.normalized
            if not is_upper_name_line(text):
                continue
            if letter_count(text) < 3:
                continue
            if contains_any(line.lower, reference.ignore_phrases):
                continue
            if line.lower in reference.banned_phrases:
                continue
            if has_document_noise(text):
                continue
            selected.append(line)
        return selected

    def extract(self, lines: Sequence[Line], reference: ReferenceData) -> Optional[Candidate]:
        pool = []
        for line in self._candidates(lines, reference):
            name = strip_nome_label(line.normalized)
            if name:
                pool.append((line, name))

        if not pool:
            return None

        best_line, best_name, best_distance = None, None, None
        for line, name in pool:
            distance = closest_name_distance(name, reference.name_tokens)
            if distance is None:
                continue
            if best_distance is None or distance < best_distance:
                best_line, best_name, best_distance = line, name, distance

        if best_name is not None and best_distance <= self.max_distance:
            logger.debug(f"✅ Encontrado por similaridade: '{best_name}' (distância {best_distance})")
            return Candidate(
                text=best_name,
                source_stage=self.stage,
                distance=best_distance,
                line_index=best_line.index,
            )

        # Sem vizinho próximo: fica com a linha de mais letras (primeira em caso de empate)
        line, name = max(pool, key=lambda item: letter_count(item[1]))
        logger.debug(f"Selecionado maior nome do fallback: '{name}' (melhor distância {best_distance})")
        return Candidate(text=name, source_stage=self.stage, line_index=line.index)
