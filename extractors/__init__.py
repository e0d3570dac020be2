from .anchored import AnchoredExtractor
from .fuzzy import FuzzyReferenceExtractor, closest_name_distance
from .keyword import GenericKeywordExtractor
from .last_resort import LastResortExtractor
from .validator import accept_candidate, is_valid_candidate

__all__ = [
    "AnchoredExtractor",
    "FuzzyReferenceExtractor",
    "GenericKeywordExtractor",
    "LastResortExtractor",
    "accept_candidate",
    "closest_name_distance",
    "is_valid_candidate",
]
