from .bca import BCAParser
from .mandiri import MandiriParser
from .bni import BNIParser
from .bri import BRIParser

__all__ = [
    'BCAParser',
    'MandiriParser',
    'BNIParser',
    'BRIParser',
]
