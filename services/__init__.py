"""
Camada de Serviços.

Este módulo agrupa serviços de alto nível que orquestram
leitura do comprovante e extração do pagador.

Serviços disponíveis:
- NameSuggestionService: Sugestão do pagador para um comprovante (com cancelamento)
- BatchReviewService: Revisão em lote com planilha CSV
"""

from services.batch_review import BatchReviewService
from services.suggestion_service import (
    NameSuggestion,
    NameSuggestionService,
    has_recipient_marker,
)

__all__ = [
    'BatchReviewService',
    'NameSuggestion',
    'NameSuggestionService',
    'has_recipient_marker',
]
