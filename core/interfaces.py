from abc import ABC, abstractmethod
from typing import Any


class TextExtractionStrategy(ABC):
    """
    Contrato (Interface) para qualquer motor de leitura de comprovantes.

    Define como as estratégias de leitura (texto puro, PDF nativo, OCR)
    devem se comportar.
    """

    def can_read(self, source: Any) -> bool:
        """
        Indica se a estratégia sabe ler esta origem.

        Args:
            source: Caminho, bytes ou string base64 do comprovante.

        Returns:
            bool: True por padrão. Estratégias específicas restringem.
        """
        return True

    @abstractmethod
    def extract(self, source: Any) -> str:
        """
        Extrai o texto bruto de um comprovante.

        Args:
            source: Caminho do arquivo, bytes da imagem ou imagem em base64.

        Returns:
            str: O texto extraído (pode ser vazio).

        Raises:
            ReceiptReadError: Se houver falha crítica na leitura.
        """
        pass
