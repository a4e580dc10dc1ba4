__all__ = (
    "exc",
    "CHARS_DIGITS",
    "CHARS_LOWER",
    "CHARS_SYMBOLS",
    "CHARS_UPPER",
    "CharsetRule",
    "PasswordGenerator",
    "PasswordGeneratorBuilder",
    "PasswordPolicy",
    "Settings",
    "is_identifier",
    "is_snake",
    "password_hash",
)
__version__ = "0.1.0"

from . import exc
from ._conf import Settings
from .generator import PasswordGenerator, PasswordGeneratorBuilder
from .hashing import password_hash
from .policy import (
    CHARS_DIGITS,
    CHARS_LOWER,
    CHARS_SYMBOLS,
    CHARS_UPPER,
    CharsetRule,
    PasswordPolicy,
)
from .validators import is_identifier, is_snake
