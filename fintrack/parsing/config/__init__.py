# Configuration submodule; the bank registry lives in .registry
from .layout import BankLayout

__all__ = ['BankLayout']
