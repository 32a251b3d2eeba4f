from .errors import AbsentValueError
from .metadata import VERSION
from .optional import Optional

__version__ = VERSION

__all__ = [
    "Optional",
    "AbsentValueError",
]
