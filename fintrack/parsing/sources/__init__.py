# Source parsers
from .receipt import ReceiptScanner

__all__ = ['ReceiptScanner']
