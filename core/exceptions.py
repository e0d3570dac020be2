class PagadorException(Exception):
    """Exceção base para o projeto de identificação do pagador."""
    pass

class ReceiptReadError(PagadorException):
    """Levantada quando falha a leitura (OCR) de um comprovante."""
    pass

class ExportError(PagadorException):
    """Levantada quando falha a gravação do relatório de revisão."""
    pass
