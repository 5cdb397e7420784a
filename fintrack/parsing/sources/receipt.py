"""
Simulated Receipt OCR

Stands in for a real OCR engine: after validating the upload it returns one
of a few canned receipts, picked at random.
"""
import random
from datetime import date
from decimal import Decimal
from typing import Optional

from fintrack.common.exceptions import InvalidReceiptError
from fintrack.common.logging_config import get_logger
from fintrack.common.models import DraftTransaction, TransactionKind
from ..categorizer import categorize

logger = get_logger(__name__)

DEFAULT_MAX_BYTES = 5 * 1024 * 1024

CANNED_RECEIPTS = [
    (TransactionKind.EXPENSE, Decimal('85000'), 'Makan siang di Restoran Padang'),
    (TransactionKind.EXPENSE, Decimal('250000'), 'Belanja bulanan Supermarket'),
    (TransactionKind.EXPENSE, Decimal('45000'), 'Isi bensin Pertamina'),
    (TransactionKind.EXPENSE, Decimal('120000'), 'Tebus obat di Apotek'),
    (TransactionKind.EXPENSE, Decimal('350000'), 'Tagihan listrik PLN'),
    (TransactionKind.INCOME, Decimal('1500000'), 'Pembayaran proyek freelance'),
]


class ReceiptScanner:
    """
    Fake OCR extractor for receipt images.

    Args:
        max_bytes: Largest accepted upload
        rng: Random source (injectable for deterministic tests)
    """

    def __init__(self, max_bytes: int = DEFAULT_MAX_BYTES, rng: Optional[random.Random] = None):
        self.max_bytes = max_bytes
        self.rng = rng or random.Random()

    def validate(self, filename: Optional[str], content_type: Optional[str], size: int) -> None:
        if not content_type or not content_type.startswith('image/'):
            raise InvalidReceiptError("Hanya file gambar yang diizinkan")
        if size <= 0:
            raise InvalidReceiptError("File gambar kosong")
        if size > self.max_bytes:
            raise InvalidReceiptError(f"Ukuran file maksimal {self.max_bytes // (1024 * 1024)}MB")

    def scan(self, filename: Optional[str], content_type: Optional[str], size: int,
             today: Optional[date] = None) -> DraftTransaction:
        """
        Validates the upload and returns the "recognized" transaction.

        Raises:
            InvalidReceiptError: when the upload is not an image or is too large
        """
        self.validate(filename, content_type, size)

        kind, amount, description = self.rng.choice(CANNED_RECEIPTS)
        draft = DraftTransaction(
            kind=kind,
            amount=amount,
            description=description,
            category=categorize(description, kind),
            date=(today or date.today()).isoformat(),
        )
        logger.info(f"Receipt scanned: {filename}", size=size, category=draft.category)
        return draft
