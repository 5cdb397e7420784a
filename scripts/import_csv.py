"""
Command-line bank CSV import.

Usage:
    python scripts/import_csv.py statement.csv --bank bca
    python scripts/import_csv.py statement.csv --bank mandiri --json
"""
import argparse
import json
import os
import sys

# Allow running from a source checkout without installing
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fintrack.common.exceptions import UnreadableInputError
from fintrack.common.logging_config import setup_logging
from fintrack.parsing.facade import IngestionFacade
from fintrack.parsing.pipeline import records_to_dataframe


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Parse an internet banking CSV export.")
    parser.add_argument("path", help="CSV file exported from internet banking")
    parser.add_argument("--bank", default="", help="Bank key (bca, mandiri, bni, bri); anything else is parsed generically")
    parser.add_argument("--json", action="store_true", help="Print records and summary as JSON")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    setup_logging(args.log_level, log_file=None)

    try:
        with open(args.path, 'rb') as f:
            raw = f.read()
    except OSError as e:
        print(f"Cannot read {args.path}: {e}", file=sys.stderr)
        return 2

    try:
        result = IngestionFacade().import_bytes(raw, args.bank, filename=os.path.basename(args.path))
    except UnreadableInputError as e:
        print(str(e), file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return 0

    df = records_to_dataframe(result.records)
    if df.empty:
        print("No transactions found.")
    else:
        print(df.to_string(index=False))

    summary = result.summary.to_dict()
    print(f"\nTotal: {summary['total']} | Pemasukan: {summary['income']} | Pengeluaran: {summary['expense']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
