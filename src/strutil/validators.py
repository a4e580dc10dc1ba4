import re

__all__ = ("IDENTIFIER_PATTERN", "SNAKE_PATTERN", "is_identifier", "is_snake")

# Equivalent to ``x([...]*y)*`` without the nested quantifier, which backtracks
# exponentially on non-matching input.
IDENTIFIER_PATTERN = r"[a-zA-Z](?:[a-zA-Z0-9_]*[a-zA-Z0-9])?"
SNAKE_PATTERN = r"[a-z](?:[a-z0-9_]*[a-z0-9])?"

_identifier_re = re.compile(IDENTIFIER_PATTERN)
_snake_re = re.compile(SNAKE_PATTERN)


def is_identifier(value: str) -> bool:
    """Letters, digits and underscores; starts with a letter, never ends with an
    underscore."""
    return _identifier_re.fullmatch(value) is not None


def is_snake(value: str) -> bool:
    """Same as :func:`is_identifier` but restricted to lowercase letters."""
    return _snake_re.fullmatch(value) is not None
