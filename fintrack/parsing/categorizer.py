"""
Keyword Categorizer

Maps a free-text transaction description to a category label. The table is
scanned in declaration order and the first category with a matching keyword
wins, so reordering entries changes results.
"""
from typing import List, Tuple

from fintrack.common.models import TransactionKind

CATEGORY_KEYWORDS: List[Tuple[str, List[str]]] = [
    ('gaji', ['gaji', 'salary', 'payroll']),
    ('investasi', ['investasi', 'dividen', 'saham', 'reksadana', 'deposito', 'bunga']),
    ('freelance', ['freelance', 'project', 'proyek', 'honor']),
    ('makanan', ['restoran', 'makan', 'warung', 'cafe', 'food', 'minum']),
    ('transportasi', ['transport', 'bensin', 'parkir', 'gojek', 'grab', 'taxi', 'kereta', 'pertamina']),
    ('belanja', ['belanja', 'shopping', 'supermarket', 'indomaret', 'alfamart', 'tokopedia', 'shopee']),
    ('hiburan', ['hiburan', 'bioskop', 'movie', 'netflix', 'spotify', 'game', 'konser']),
    ('kesehatan', ['kesehatan', 'dokter', 'apotek', 'obat', 'klinik', 'rumah sakit', 'bpjs']),
    ('utilitas', ['listrik', 'pln', 'pdam', 'internet', 'wifi', 'pulsa', 'telepon']),
]

INCOME_FALLBACK = 'pendapatan'
EXPENSE_FALLBACK = 'lainnya'

CATEGORIES: List[str] = [name for name, _ in CATEGORY_KEYWORDS] + [INCOME_FALLBACK, EXPENSE_FALLBACK]


def categorize(description: str, kind: TransactionKind) -> str:
    """
    Returns the first category whose keyword occurs in the lower-cased description.

    Falls back to 'pendapatan' for income and 'lainnya' for everything else.
    """
    text = (description or '').lower()

    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return category

    return INCOME_FALLBACK if kind is TransactionKind.INCOME else EXPENSE_FALLBACK
