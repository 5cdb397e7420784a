"""
Field Normalizer

Parses single raw date and amount tokens taken from bank exports into
canonical forms. Nothing here raises on bad input.
"""
import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import NamedTuple, Optional

# Indonesian/European numeral: 1.234.567,89 (grouping dots, optional decimal comma)
GENERIC_AMOUNT_PATTERN = re.compile(r"\d{1,3}(?:\.\d{3})*(?:,\d{2})?")

# Same numeral as a whole token, optionally signed and prefixed with a currency marker
_LOCALE_TOKEN_PATTERN = re.compile(
    r"^\s*(-)?\s*(?:Rp\.?\s*)?(\d{1,3}(?:\.\d{3})+(?:,\d{2})?|\d{1,3}(?:\.\d{3})*,\d{2})\s*$",
    re.IGNORECASE,
)

_NON_NUMERIC = re.compile(r"[^\d.\-]")

# DD/MM/YYYY or DD-MM-YYYY
_DAY_FIRST = re.compile(r"(\d{1,2})[/-](\d{1,2})[/-](\d{4})")
# YYYY/MM/DD or YYYY-MM-DD
_YEAR_FIRST = re.compile(r"(\d{4})[/-](\d{1,2})[/-](\d{1,2})")


class ParsedAmount(NamedTuple):
    value: Decimal  # Absolute value
    negative: bool


def parse_generic_numeral(numeral: str) -> Optional[Decimal]:
    """
    Converts a thousands-dot/decimal-comma numeral to a Decimal.
    Examples:
        "1.234,56" -> Decimal("1234.56")
        "150.000"  -> Decimal("150000")
    """
    clean = numeral.replace('.', '').replace(',', '.')
    try:
        value = Decimal(clean)
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def normalize_amount(raw_token) -> Optional[ParsedAmount]:
    """
    Parses a raw amount token to its absolute value and sign.

    Locale numerals ("1.234,56", "Rp 150.000") are converted first. Any other
    token is stripped of every character that is not a digit, '.' or '-'.

    Returns:
        ParsedAmount, or None when the token does not parse as a finite number.
    """
    if not isinstance(raw_token, str):
        return None

    locale_match = _LOCALE_TOKEN_PATTERN.match(raw_token)
    if locale_match:
        sign, numeral = locale_match.groups()
        value = parse_generic_numeral(numeral)
        if value is None:
            return None
        return ParsedAmount(abs(value), bool(sign) and value != 0)

    clean = _NON_NUMERIC.sub('', raw_token)
    if not clean:
        return None

    try:
        value = Decimal(clean)
    except InvalidOperation:
        return None

    if not value.is_finite():
        return None

    return ParsedAmount(abs(value), value < 0)


def normalize_date(raw_token, today: Optional[date] = None) -> str:
    """
    Parses a raw date token to YYYY-MM-DD.

    Tries DD/MM/YYYY (or DD-MM-YYYY) first, then YYYY/MM/DD (or YYYY-MM-DD).
    Components are reassembled positionally without range checks, so
    "13/40/2024" becomes "2024-40-13". Unmatched tokens degrade to today.
    """
    if isinstance(raw_token, str):
        m = _DAY_FIRST.search(raw_token)
        if m:
            day, month, year = m.groups()
            return f"{year}-{month.zfill(2)}-{day.zfill(2)}"

        m = _YEAR_FIRST.search(raw_token)
        if m:
            year, month, day = m.groups()
            return f"{year}-{month.zfill(2)}-{day.zfill(2)}"

    return (today or date.today()).isoformat()


def clean_description(raw_token) -> str:
    """Trims whitespace and strips surrounding/embedded double quotes."""
    if not raw_token:
        return ''
    return str(raw_token).replace('"', '').strip()
