from decimal import Decimal

import pytest

from fintrack.common.exceptions import InvalidReceiptError
from fintrack.common.models import TransactionKind
from fintrack.parsing.sources.receipt import CANNED_RECEIPTS, ReceiptScanner


@pytest.fixture
def scanner(first_receipt_rng):
    return ReceiptScanner(max_bytes=1024, rng=first_receipt_rng)


class TestReceiptScanner:

    def test_scan_returns_canned_receipt(self, scanner, today):
        draft = scanner.scan("struk.jpg", "image/jpeg", 512, today=today)

        assert draft.kind is TransactionKind.EXPENSE
        assert draft.amount == Decimal("85000")
        assert draft.description == "Makan siang di Restoran Padang"
        assert draft.category == "makanan"
        assert draft.date == "2024-03-01"
        assert draft.bank is None

    def test_canned_receipts_have_positive_amounts(self):
        assert all(amount > 0 for _, amount, _ in CANNED_RECEIPTS)

    def test_default_random_source(self):
        draft = ReceiptScanner().scan("struk.png", "image/png", 10)
        assert (draft.kind, draft.amount, draft.description) in CANNED_RECEIPTS

    @pytest.mark.parametrize("content_type", ["text/plain", "application/pdf", None, ""])
    def test_rejects_non_images(self, scanner, content_type):
        with pytest.raises(InvalidReceiptError):
            scanner.scan("struk.txt", content_type, 10)

    def test_rejects_oversized(self, scanner):
        with pytest.raises(InvalidReceiptError):
            scanner.scan("struk.jpg", "image/jpeg", 2048)

    def test_rejects_empty(self, scanner):
        with pytest.raises(InvalidReceiptError):
            scanner.scan("struk.jpg", "image/jpeg", 0)
