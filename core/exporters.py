"""
Módulo de exportação do relatório de revisão de comprovantes.

Implementa o padrão Strategy para exportação, permitindo adicionar novos
formatos sem modificar código existente (OCP).
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Union

import pandas as pd

from core.exceptions import ExportError
from core.models import ReviewItem

# Ordem das colunas na planilha de revisão
REVIEW_COLUMNS = [
    'arquivo',
    'nome_sugerido',
    'estagio',
    'distancia',
    'destinatario_confirmado',
    'status',
    'erro',
]


class DataExporter(ABC):
    """
    Interface abstrata para exportadores do relatório de revisão.
    """

    @abstractmethod
    def export(self, data: List[ReviewItem], destination: Union[str, Path]) -> None:
        """
        Exporta uma lista de itens de revisão para um destino.

        Args:
            data: Lista de ReviewItem
            destination: Caminho ou identificador do destino

        Raises:
            ExportError: Se houver falha na exportação
        """
        pass


class CsvExporter(DataExporter):
    """
    Exportador para formato CSV usando pandas.

    Separador ';' e BOM UTF-8 para abrir direto no Excel em português.
    """

    def export(self, data: List[ReviewItem], destination: Union[str, Path]) -> None:
        """
        Exporta itens de revisão para arquivo CSV.

        Raises:
            ValueError: Se a lista de dados estiver vazia
            ExportError: Se houver erro ao salvar o arquivo
        """
        if not data:
            raise ValueError("Lista de dados vazia. Nada para exportar.")

        records = [item.to_dict() for item in data]
        df = pd.DataFrame(records, columns=REVIEW_COLUMNS)
        # Mantém a distância como inteiro mesmo com valores ausentes
        df['distancia'] = df['distancia'].astype('Int64')

        try:
            Path(destination).parent.mkdir(parents=True, exist_ok=True)
            df.to_csv(
                destination,
                index=False,
                encoding='utf-8-sig',  # BOM para Excel no Windows
                sep=';',
            )
        except OSError as e:
            raise ExportError(f"Falha ao salvar relatório em {destination}: {e}") from e
