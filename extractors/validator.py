"""
Validação de linhas candidatas a nome do pagador.

Uma linha só é candidata se TODAS as regras valem:
    1. Mais de 2 caracteres.
    2. Pelo menos 3 letras (asteriscos não contam).
    3. Apenas letras, espaços e asteriscos.
    4. Não é o próprio rótulo "nome" / "nome:".
    5. Não contém termo da lista de ignorados.
    6-8. Não tem ruído de documento (dígitos longos, pix/cpf/cnpj/R$,
         datas, CPF/CNPJ).
"""

from typing import Iterable, Optional

from extractors.utils import (
    contains_any,
    has_document_noise,
    is_name_charset,
    letter_count,
    strip_nome_label,
)

MIN_LETTERS = 3


def is_valid_candidate(line: str, ignore_phrases: Iterable[str]) -> bool:
    """
    Predicado puro: a linha pode ser o nome do pagador?

    Args:
        line: Linha já com trim
        ignore_phrases: Termos em minúsculas que desqualificam a linha

    Returns:
        True se todas as regras forem satisfeitas
    """
    if not line or len(line) <= 2:
        return False
    if letter_count(line) < MIN_LETTERS:
        return False
    if not is_name_charset(line):
        return False

    lower = line.lower()
    if lower in ("nome", "nome:"):
        return False
    if contains_any(lower, ignore_phrases):
        return False

    return not has_document_noise(line)


def accept_candidate(line: str, ignore_phrases: Iterable[str]) -> Optional[str]:
    """
    Valida a linha e devolve o nome sem o rótulo "Nome:".

    Returns:
        O nome limpo, ou None se a linha for rejeitada (inclusive quando
        sobram menos de 3 caracteres depois de remover o rótulo).

    Example:
        >>> accept_candidate("NOME JOAO DA SILVA", ())
        'JOAO DA SILVA'
        >>> accept_candidate("123.456.789-00", ()) is None
        True
    """
    if not is_valid_candidate(line, ignore_phrases):
        return None
    name = strip_nome_label(line)
    if len(name) < MIN_LETTERS:
        return None
    return name
