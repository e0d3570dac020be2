from dataclasses import dataclass, asdict
from enum import Enum
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True)
class Line:
    """
    Uma linha não vazia do texto OCR.

    Attributes:
        index (int): Posição da linha na lista já normalizada.
        raw (str): Texto original da linha, antes do trim.
        normalized (str): Texto com trim aplicado. Nunca vazio.
        lower (str): Espelho em minúsculas de `normalized`, usado nas comparações.
    """
    index: int
    raw: str
    normalized: str
    lower: str


class SourceStage(Enum):
    """Etapa do pipeline que produziu o candidato."""
    ANCHORED_PAGOPOR = "ANCHORED_PAGOPOR"
    ANCHORED_ORIGEM = "ANCHORED_ORIGEM"
    KEYWORD_GENERIC = "KEYWORD_GENERIC"
    FUZZY = "FUZZY"
    LAST_RESORT = "LAST_RESORT"


@dataclass(frozen=True)
class Candidate:
    """
    Nome candidato produzido por exatamente uma etapa.

    `source_stage`, `distance` e `line_index` são diagnósticos
    (log e relatório de revisão), não fazem parte do contrato do nome.
    """
    text: str
    source_stage: SourceStage
    distance: Optional[int] = None
    line_index: Optional[int] = None


@dataclass(frozen=True)
class ExtractionResult:
    """
    Resultado da extração. `name == ""` significa "nenhum candidato".
    """
    name: str = ""
    candidate: Optional[Candidate] = None

    @property
    def found(self) -> bool:
        return bool(self.name)


def _keyword_set(values: Iterable[str]) -> Tuple[str, ...]:
    # Conjunto ordenado: minúsculas, sem espaços nas pontas, sem duplicatas
    cleaned = (str(v).strip().lower() for v in values or ())
    return tuple(dict.fromkeys(v for v in cleaned if v))


@dataclass(frozen=True)
class ReferenceData:
    """
    Dados de referência injetados no motor de extração.

    Todos os campos são tuplas imutáveis em minúsculas, o que permite
    leitura concorrente sem trava.

    Attributes:
        payer_anchors: Rótulos que indicam o bloco do pagador.
        ignore_phrases: Termos que desqualificam uma linha.
        name_tokens: Nomes/sobrenomes comuns (apenas para distância).
        banned_phrases: Frases nunca aceitas como resultado final.
    """
    payer_anchors: Tuple[str, ...] = ()
    ignore_phrases: Tuple[str, ...] = ()
    name_tokens: Tuple[str, ...] = ()
    banned_phrases: Tuple[str, ...] = ()

    @classmethod
    def build(
        cls,
        payer_anchors: Iterable[str] = (),
        ignore_phrases: Iterable[str] = (),
        name_tokens: Iterable[str] = (),
        banned_phrases: Iterable[str] = (),
    ) -> "ReferenceData":
        """Cria a instância normalizando as listas de entrada."""
        return cls(
            payer_anchors=_keyword_set(payer_anchors),
            ignore_phrases=_keyword_set(ignore_phrases),
            name_tokens=_keyword_set(name_tokens),
            banned_phrases=_keyword_set(banned_phrases),
        )


@dataclass
class ReviewItem:
    """
    Linha do relatório de revisão de comprovantes em lote.

    Attributes:
        arquivo (str): Nome do arquivo do comprovante.
        nome_sugerido (str): Nome sugerido pelo OCR ("" quando não encontrado).
        estagio (Optional[str]): Etapa do pipeline que encontrou o nome.
        distancia (Optional[int]): Distância de Levenshtein (apenas etapa FUZZY).
        destinatario_confirmado (Optional[bool]): Se o comprovante cita nossa empresa.
        status (str): 'OK', 'SEM_NOME', 'ERRO' ou 'TIMEOUT'.
        erro (Optional[str]): Mensagem de erro, quando houver.
    """
    arquivo: str
    nome_sugerido: str = ""
    estagio: Optional[str] = None
    distancia: Optional[int] = None
    destinatario_confirmado: Optional[bool] = None
    status: str = "SEM_NOME"
    erro: Optional[str] = None

    def to_dict(self) -> dict:
        """Converte para dicionário. Usado para exportação."""
        return asdict(self)
