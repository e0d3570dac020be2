from abc import ABC, abstractmethod
from typing import Optional, Sequence

from core.models import Candidate, Line, ReferenceData, SourceStage


class BaseStage(ABC):
    """Contrato que toda etapa do pipeline de nome deve implementar."""

    stage: SourceStage

    @abstractmethod
    def extract(self, lines: Sequence[Line], reference: ReferenceData) -> Optional[Candidate]:
        """Recebe as linhas normalizadas e retorna um candidato ou None."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.stage.value})"
