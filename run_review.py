"""
Revisão em lote de comprovantes Pix.

Lê cada comprovante (imagem, PDF ou texto de OCR), sugere o nome do
pagador e grava a planilha de revisão.

Usage:
    python run_review.py comprovantes/
    python run_review.py a.jpg b.pdf --saida revisao.csv --timeout 30
    python run_review.py comprovantes/ --verbose
"""

import argparse
import logging
import sys

from config import settings
from core.exceptions import ExportError
from services.batch_review import BatchReviewService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sugere o nome do pagador para comprovantes Pix"
    )
    parser.add_argument(
        "paths",
        nargs="+",
        metavar="PATH",
        help="Arquivos ou pastas de comprovantes",
    )
    parser.add_argument(
        "--saida",
        "-o",
        type=str,
        default=None,
        help=f"CSV de saída (default: {settings.DIR_SAIDA / settings.ARQUIVO_REVISAO})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help=f"Timeout por arquivo em segundos (default: {settings.FILE_TIMEOUT_SECONDS})",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log em nível DEBUG"
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings.setup_logging("DEBUG" if args.verbose else None)

    service = BatchReviewService(timeout_seconds=args.timeout)
    itens = service.review(args.paths)

    if not itens:
        print("📭 Nenhum comprovante encontrado.")
        return 1

    try:
        destino = service.export(itens, args.saida)
    except ExportError as e:
        logger.error(f"❌ {e}")
        return 2

    resumo = service.summarize(itens)
    print(f"\n{'=' * 40}")
    print("RESUMO")
    print(f"{'=' * 40}")
    for status, total in resumo.items():
        print(f"{status}: {total}")
    print(f"\n💾 Relatório salvo em: {destino}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
