"""
Motor de extração do nome do pagador em comprovantes Pix.

Pipeline sequencial com curto-circuito: cada etapa só roda se todas as
anteriores não produziram candidato.

    1. "pago por" → "nome" → <nome>
    2. "origem"   → "nome" → <nome>
    3. Palavra-chave genérica do pagador + 1-2 linhas seguintes
    4. Similaridade (Levenshtein) com nomes comuns
    5. Último recurso: linha só de letras com mais letras

O motor é puro: mesma entrada e mesmos dados de referência produzem a
mesma saída. Nunca levanta exceção; "não encontrado" é a string vazia.
O resultado é uma sugestão para confirmação humana, não uma decisão.

Example:
    >>> from core.engine import extract_payer_name
    >>> extract_payer_name("PAGO POR\\nNOME\\nJOAO DA SILVA")
    'JOAO DA SILVA'
"""

import logging
from functools import lru_cache
from typing import Any, List, Optional, Sequence

from config import reference_data
from core.extractors import BaseStage
from core.models import ExtractionResult, ReferenceData, SourceStage
from core.normalizer import normalize_lines

logger = logging.getLogger(__name__)

FUZZY_MAX_DISTANCE = 2


@lru_cache(maxsize=1)
def default_reference_data() -> ReferenceData:
    """Carrega (uma única vez) as listas de config/reference_data.py."""
    return ReferenceData.build(
        payer_anchors=reference_data.PAYER_KEYWORDS,
        ignore_phrases=reference_data.IGNORE_KEYWORDS,
        name_tokens=reference_data.COMMON_NAMES,
        banned_phrases=reference_data.BANNED_PHRASES,
    )


def default_stages() -> List[BaseStage]:
    """Etapas na ordem de precedência."""
    # Import tardio: o pacote extractors depende de core.extractors
    from extractors.anchored import AnchoredExtractor
    from extractors.fuzzy import FuzzyReferenceExtractor
    from extractors.keyword import GenericKeywordExtractor
    from extractors.last_resort import LastResortExtractor

    return [
        AnchoredExtractor("pago por", SourceStage.ANCHORED_PAGOPOR),
        AnchoredExtractor("origem", SourceStage.ANCHORED_ORIGEM),
        GenericKeywordExtractor(),
        FuzzyReferenceExtractor(max_distance=FUZZY_MAX_DISTANCE),
        LastResortExtractor(),
    ]


class PayerNameEngine:
    """
    Orquestrador das etapas de extração.

    Args:
        reference: Dados de referência. Se None, usa o padrão do projeto.
                   Permite injetar listas menores em testes.
        stages: Etapas em ordem. Se None, usa default_stages().
    """

    def __init__(
        self,
        reference: Optional[ReferenceData] = None,
        stages: Optional[Sequence[BaseStage]] = None,
    ):
        self.reference = reference if reference is not None else default_reference_data()
        self.stages = list(stages) if stages is not None else default_stages()

    def _is_banned(self, name: str) -> bool:
        return name.strip().lower() in self.reference.banned_phrases

    def extract(self, raw_text: Any) -> ExtractionResult:
        """
        Executa o pipeline sobre o texto OCR de um comprovante.

        Args:
            raw_text: Texto completo do OCR (str ou None).

        Returns:
            ExtractionResult: name == "" quando nenhum candidato foi aceito.
        """
        lines = normalize_lines(raw_text)
        if not lines:
            return ExtractionResult()

        try:
            for stage in self.stages:
                candidate = stage.extract(lines, self.reference)
                if candidate is None:
                    logger.debug(f"{stage!r}: nenhum candidato")
                    continue

                if self._is_banned(candidate.text):
                    logger.debug(f"❌ REJEITADO: '{candidate.text}' é uma frase indesejada")
                    return ExtractionResult()

                logger.debug(
                    f"Nome sugerido: '{candidate.text}' via {candidate.source_stage.value}"
                )
                return ExtractionResult(name=candidate.text, candidate=candidate)
        except Exception:
            # Falha inesperada vira "não encontrado"; o chamador nunca recebe exceção
            logger.exception("Erro inesperado na extração do nome do pagador")
            return ExtractionResult()

        logger.debug("Nenhum método encontrou um nome válido")
        return ExtractionResult()

    def extract_name(self, raw_text: Any) -> str:
        """Atalho que devolve apenas o nome ("" se não encontrado)."""
        return self.extract(raw_text).name


@lru_cache(maxsize=1)
def _default_engine() -> PayerNameEngine:
    return PayerNameEngine()


def extract_payer_name(raw_text: Any) -> str:
    """
    Sugere o nome do pagador a partir do texto OCR do comprovante.

    Args:
        raw_text: Texto completo do OCR. None ou vazio resultam em "".

    Returns:
        str: Nome sugerido (pode conter asteriscos de mascaramento) ou "".
    """
    return _default_engine().extract_name(raw_text)
