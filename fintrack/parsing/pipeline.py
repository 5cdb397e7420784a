"""
Ingestion Pipeline

Orchestrates a bank CSV import:
- Selects the row parser for the bank key (generic when unknown)
- Runs it over every line after the header
- Aggregates the accepted records into a summary

The pipeline is a pure function of its inputs. It never raises for a bad row.
"""
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

import pandas as pd

from fintrack.common.logging_config import get_logger
from fintrack.common.models import DraftTransaction, ImportSummary
from .config.registry import BankKey, get_parser

logger = get_logger(__name__)

BOM = '\ufeff'


@dataclass(frozen=True)
class IngestionResult:
    records: List[DraftTransaction]
    summary: ImportSummary

    def to_dict(self):
        return {
            'transactions': [r.to_dict() for r in self.records],
            'summary': self.summary.to_dict(),
        }


def ingest(csv_text: str, bank_key: Optional[str], today: Optional[date] = None) -> IngestionResult:
    """
    Parses a raw bank CSV export.

    Args:
        csv_text: Full export text; the first line is a header and is skipped
        bank_key: Bank identifier hint; unknown keys fall back to generic parsing
        today: Date used when a row has no usable date (defaults to the current date)

    Returns:
        IngestionResult with the accepted records in line order and their summary
    """
    bank = BankKey.lookup(bank_key)
    parser = get_parser(bank)
    # Records carry the recognized key, or the caller's key as given
    record_key = bank.value if bank else (bank_key.strip() if bank_key and bank_key.strip() else None)
    today = today or date.today()

    text = csv_text[1:] if csv_text.startswith(BOM) else csv_text
    lines = text.replace('\r\n', '\n').split('\n')[1:]

    records = []
    candidates = 0
    for line in lines:
        if not line.strip():
            continue
        candidates += 1
        record = parser.parse_line(line, bank_key=record_key, today=today)
        if record is not None:
            records.append(record)

    summary = ImportSummary.from_records(records)

    logger.info(
        f"CSV ingested with {parser.__class__.__name__}",
        bank_key=record_key,
        recognized=bank is not None,
        rows=candidates,
        accepted=len(records),
        dropped=candidates - len(records),
    )
    return IngestionResult(records=records, summary=summary)


def records_to_dataframe(records: List[DraftTransaction]) -> pd.DataFrame:
    """
    Tabular view of a batch of records.
    Columns: date, type, amount, description, category, bank
    """
    columns = ['date', 'type', 'amount', 'description', 'category', 'bank']
    if not records:
        return pd.DataFrame(columns=columns)

    df = pd.DataFrame([
        {
            'date': r.date,
            'type': r.kind.value,
            'amount': float(r.amount),
            'description': r.description,
            'category': r.category,
            'bank': r.bank,
        }
        for r in records
    ], columns=columns)
    return df
