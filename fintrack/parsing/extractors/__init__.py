# Extractors
from .generic import GenericRowParser

__all__ = ['GenericRowParser']
