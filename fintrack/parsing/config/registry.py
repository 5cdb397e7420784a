"""
Bank Registry

Closed set of recognized bank keys and the static table mapping each one to
its row parser. Anything outside the set is parsed generically.
"""
from enum import Enum
from typing import Dict, List, Optional

from ..base import BaseRowParser
from ..banks import BCAParser, BNIParser, BRIParser, MandiriParser
from ..extractors.generic import GenericRowParser


class BankKey(str, Enum):
    BCA = 'bca'
    MANDIRI = 'mandiri'
    BNI = 'bni'
    BRI = 'bri'

    @classmethod
    def lookup(cls, raw: Optional[str]) -> Optional["BankKey"]:
        """Case- and whitespace-insensitive lookup. Unknown keys return None."""
        if not raw:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


# Parsers are stateless, so one shared instance per layout is enough
PARSERS: Dict[BankKey, BaseRowParser] = {
    BankKey.BCA: BCAParser(),
    BankKey.MANDIRI: MandiriParser(),
    BankKey.BNI: BNIParser(),
    BankKey.BRI: BRIParser(),
}

GENERIC_PARSER = GenericRowParser()


def get_parser(bank: Optional[BankKey]) -> BaseRowParser:
    """Dispatch table lookup; the unknown-key arm is the generic parser."""
    if bank is None:
        return GENERIC_PARSER
    return PARSERS[bank]


def has_dedicated_layout(bank: BankKey) -> bool:
    """True when the key has its own column layout rather than the generic heuristics."""
    return not isinstance(PARSERS[bank], GenericRowParser)


def list_banks() -> List[dict]:
    """List all recognized bank keys."""
    return [
        {
            'key': bank.value,
            'name': PARSERS[bank].bank_name,
            'dedicated_layout': has_dedicated_layout(bank),
        }
        for bank in BankKey
    ]
