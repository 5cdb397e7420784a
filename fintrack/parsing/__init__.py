"""
Bank CSV ingestion for the finance tracker.

This module consolidates:
- Field normalization (amounts, dates)
- Keyword categorization
- Bank row parsers (BCA, Mandiri) and the generic fallback
- Pipeline orchestration and the upload facade
- Simulated receipt OCR
"""

# Base classes
from .base import BaseRowParser, FixedLayoutParser

# Normalization & categorization
from .normalizer import normalize_amount, normalize_date, ParsedAmount
from .categorizer import categorize, CATEGORIES

# Configuration
from .config.layout import BankLayout
from .config.registry import BankKey, get_parser, list_banks

# Banks
from .banks import BCAParser, MandiriParser, BNIParser, BRIParser

# Extractors
from .extractors.generic import GenericRowParser

# Sources
from .sources.receipt import ReceiptScanner

# Pipeline & Facade
from .pipeline import ingest, IngestionResult, records_to_dataframe
from .facade import IngestionFacade

__all__ = [
    # Base
    'BaseRowParser',
    'FixedLayoutParser',
    # Normalization
    'normalize_amount',
    'normalize_date',
    'ParsedAmount',
    'categorize',
    'CATEGORIES',
    # Config
    'BankLayout',
    'BankKey',
    'get_parser',
    'list_banks',
    # Banks
    'BCAParser',
    'MandiriParser',
    'BNIParser',
    'BRIParser',
    # Extractors
    'GenericRowParser',
    # Sources
    'ReceiptScanner',
    # Pipeline
    'ingest',
    'IngestionResult',
    'records_to_dataframe',
    'IngestionFacade',
]
