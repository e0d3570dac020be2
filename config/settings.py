import os
import logging
import platform
from logging.handlers import RotatingFileHandler
from pathlib import Path
from dotenv import load_dotenv

# Carrega as variáveis do arquivo .env para o ambiente
load_dotenv()

# Caminhos Base
BASE_DIR = Path(__file__).resolve().parent.parent
DIR_SAIDA = Path(os.getenv('DIR_SAIDA', str(BASE_DIR / "data" / "output")))
ARQUIVO_REVISAO = 'revisao_comprovantes.csv'

# --- Caminhos de Binários Externos ---
# Detecta automaticamente se está no Docker (Linux) ou Windows
is_linux = platform.system() == 'Linux'

if is_linux:
    TESSERACT_CMD = os.getenv('TESSERACT_CMD', '/usr/bin/tesseract')
    POPPLER_PATH = os.getenv('POPPLER_PATH', '/usr/bin')
else:
    TESSERACT_CMD = os.getenv('TESSERACT_CMD', r'C:\Program Files\Tesseract-OCR\tesseract.exe')
    POPPLER_PATH = os.getenv('POPPLER_PATH', r'C:\Poppler\Library\bin')

# --- Parâmetros do OCR ---
# Comprovantes Pix são lidos com o modelo em português
OCR_LANG = os.getenv('OCR_LANG', 'por')
# --psm 6: Assume um bloco único de texto uniforme
OCR_CONFIG = os.getenv('OCR_CONFIG', r'--psm 6')

# Abaixo disso o PDF é tratado como imagem (sem camada de texto)
PDF_MIN_TEXT_CHARS = int(os.getenv('PDF_MIN_TEXT_CHARS', '50'))

# --- Revisão em lote ---
FILE_TIMEOUT_SECONDS = float(os.getenv('FILE_TIMEOUT_SECONDS', '60'))

# --- Destinatário (nossa empresa) ---
# Se algum destes termos aparece no comprovante, o Pix foi feito para nós.
RECIPIENT_MARKERS = tuple(
    marker.strip().lower()
    for marker in os.getenv(
        'RECIPIENT_MARKERS', 'tcr finance,fraguismo,ttf finance,ter finance'
    ).split(',')
    if marker.strip()
)

# Texto exibido quando nenhum nome foi encontrado. É um rótulo, nunca um nome.
PLACEHOLDER_NOME = os.getenv('PLACEHOLDER_NOME', 'Nome não identificado')

# --- Configuração de Logging com Rotação ---
LOG_DIR = Path(os.getenv('LOG_DIR', str(BASE_DIR / "logs")))
LOG_FILE = LOG_DIR / "pagador.log"
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'


def setup_logging(level: str = None) -> logging.Logger:
    """
    Configura o logger raiz com arquivo rotativo e saída no console.

    RotatingFileHandler evita crescimento descontrolado de logs:
    10MB por arquivo, mantém 5 backups.

    Args:
        level: Nível de log (ex: 'DEBUG'). Se None, usa LOG_LEVEL.

    Returns:
        logging.Logger: O logger raiz configurado.
    """
    logger = logging.getLogger()
    logger.setLevel(level or LOG_LEVEL)

    # Evita handlers duplicados quando chamado mais de uma vez
    if getattr(logger, '_pagador_configured', False):
        return logger

    LOG_DIR.mkdir(parents=True, exist_ok=True)

    log_formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    rotating_handler = RotatingFileHandler(
        LOG_FILE,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    rotating_handler.setFormatter(log_formatter)
    logger.addHandler(rotating_handler)

    # Também envia para console
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(log_formatter)
    logger.addHandler(console_handler)

    logger._pagador_configured = True
    return logger
