"""
Core module for payer-name extraction from Pix receipts.

This module provides the main classes and interfaces for:
- Data models (Line, Candidate, ExtractionResult, ReferenceData, ReviewItem)
- Text extraction strategy interface (receipt readers)
- Stage contract and the extraction engine
- CSV export of review results

SOLID Principles applied:
- SRP: Each stage has a single responsibility
- OCP: New stages plug in through BaseStage
- DIP: Engine receives reference data and stages by injection
"""

from .exceptions import ExportError, PagadorException, ReceiptReadError
from .models import (
    Candidate,
    ExtractionResult,
    Line,
    ReferenceData,
    ReviewItem,
    SourceStage,
)
from .interfaces import TextExtractionStrategy
from .extractors import BaseStage
from .normalizer import normalize_lines
from .engine import (
    PayerNameEngine,
    default_reference_data,
    default_stages,
    extract_payer_name,
)
from .exporters import CsvExporter, DataExporter

__all__ = [
    # Models
    "Line",
    "Candidate",
    "ExtractionResult",
    "ReferenceData",
    "ReviewItem",
    "SourceStage",
    # Interfaces
    "TextExtractionStrategy",
    "BaseStage",
    # Engine
    "normalize_lines",
    "PayerNameEngine",
    "default_reference_data",
    "default_stages",
    "extract_payer_name",
    # Export
    "DataExporter",
    "CsvExporter",
    # Exceptions
    "PagadorException",
    "ReceiptReadError",
    "ExportError",
]
