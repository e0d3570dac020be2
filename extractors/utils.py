"""
Módulo de utilidades compartilhadas pelas etapas de extração do pagador.

Contém os padrões e testes de caracteres usados por mais de uma etapa:
- Contagem de letras (latinas, com acentos do português)
- Detecção de ruído de documento (CPF/CNPJ, valores, datas, IDs Pix)
- Remoção do rótulo "Nome:" no início da linha
- Busca de termos (palavras-chave) por substring

Princípio DRY: as etapas usam exatamente os mesmos testes.
"""

import re
from typing import Iterable

# =============================================================================
# REGEX COMPILADOS (evita recompilação a cada chamada)
# =============================================================================

# Linha composta apenas por letras, espaços e asteriscos (máscara de alguns bancos)
NAME_CHARSET_RE = re.compile(r"[A-Za-zÀ-ú\s*]+")

# Linha em maiúsculas com pelo menos 5 caracteres (usada pelo fallback por distância)
UPPER_NAME_RE = re.compile(r"[A-ZÀ-Ú\s*]{5,}")

# Tudo que não é letra nem asterisco
NON_LETTER_RE = re.compile(r"[^A-Za-zÀ-ú*]")

# Sequência de 5 ou mais dígitos (IDs, contas, valores longos)
LONG_DIGITS_RE = re.compile(r"\d{5,}")

# Termos de documento/transação: pix, cpf, cnpj, R$ e datas dd/mm/aaaa
DOCUMENT_TERMS_RE = re.compile(r"pix|cpf|cnpj|r\$|\d{2}/\d{2}/\d{4}", re.IGNORECASE)

# CPF, CNPJ ou 11+ dígitos, aplicado depois de remover separadores
CPF_CNPJ_RE = re.compile(
    r"\b(\d{3}\.?\d{3}\.?\d{3}-?\d{2}|\d{2}\.?\d{3}\.?\d{3}/?\d{4}-?\d{2}|\d{11,})\b"
)

# Separadores removidos antes do teste de CPF/CNPJ
DOCUMENT_SEPARATORS_RE = re.compile(r"[ .\-/]")

# Rótulo "Nome:" / "Nome " no início da linha
NOME_LABEL_RE = re.compile(r"^nome[:\s]+", re.IGNORECASE)


# =============================================================================
# TESTES DE CARACTERES
# =============================================================================


def letter_count(text: str) -> int:
    """
    Conta as letras de uma linha, ignorando asteriscos e demais símbolos.

    Args:
        text: Linha a analisar

    Returns:
        Quantidade de letras (inclui acentuadas)

    Example:
        >>> letter_count("J*** SILVA")
        6
    """
    if not text:
        return 0
    return len(NON_LETTER_RE.sub("", text).replace("*", ""))


def is_name_charset(text: str) -> bool:
    """
    Verifica se a linha inteira tem apenas letras, espaços e asteriscos.

    Example:
        >>> is_name_charset("MARIA DA SILVA")
        True
        >>> is_name_charset("R$ 150,00")
        False
    """
    return bool(text) and NAME_CHARSET_RE.fullmatch(text) is not None


def is_upper_name_line(text: str) -> bool:
    """
    Verifica se a linha está toda em maiúsculas e tem pelo menos 5 caracteres.

    Example:
        >>> is_upper_name_line("JULIA SOUZA")
        True
        >>> is_upper_name_line("Julia Souza")
        False
    """
    return bool(text) and UPPER_NAME_RE.fullmatch(text) is not None


def is_cpf_or_cnpj(text: str) -> bool:
    """
    Verifica se a linha contém CPF, CNPJ ou 11+ dígitos.

    Pontos, hífens, barras e espaços são removidos antes do teste,
    pois o OCR costuma quebrar a formatação.

    Example:
        >>> is_cpf_or_cnpj("123.456.789-00")
        True
        >>> is_cpf_or_cnpj("12 . 345 . 678 / 0001 - 90")
        True
    """
    if not text:
        return False
    return CPF_CNPJ_RE.search(DOCUMENT_SEPARATORS_RE.sub("", text)) is not None


def has_document_noise(text: str) -> bool:
    """
    Verifica se a linha tem cara de dado de transação e não de nome.

    Rejeita: 5+ dígitos seguidos, termos pix/cpf/cnpj/R$, datas e CPF/CNPJ.

    Example:
        >>> has_document_noise("CPF: ***.456.789-**")
        True
        >>> has_document_noise("JOAO DA SILVA")
        False
    """
    if not text:
        return False
    return bool(
        LONG_DIGITS_RE.search(text)
        or DOCUMENT_TERMS_RE.search(text)
        or is_cpf_or_cnpj(text)
    )


# =============================================================================
# NORMALIZAÇÃO
# =============================================================================


def contains_any(text_lower: str, phrases: Iterable[str]) -> bool:
    """
    Verifica se algum termo aparece como substring do texto (já em minúsculas).

    Example:
        >>> contains_any("banco inter s.a.", ("banco inter", "cora"))
        True
    """
    if not text_lower:
        return False
    return any(phrase in text_lower for phrase in phrases)


def strip_nome_label(text: str) -> str:
    """
    Remove o rótulo "Nome:" do início da linha.

    Example:
        >>> strip_nome_label("Nome: Maria Oliveira")
        'Maria Oliveira'
        >>> strip_nome_label("NOMEADO")
        'NOMEADO'
    """
    if not text:
        return ""
    return NOME_LABEL_RE.sub("", text).strip()
