from typing import Annotated

import annotated_types
import pydantic
from pydantic.alias_generators import to_camel
from typing_extensions import Self

__all__ = (
    "CHARS_LOWER",
    "CHARS_UPPER",
    "CHARS_DIGITS",
    "CHARS_SYMBOLS",
    "CharsetRule",
    "PasswordPolicy",
    "default_rules",
)

CHARS_LOWER = "abcdefghijkmlnopqrstuvwxyz"
CHARS_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
CHARS_DIGITS = "0123456789"
CHARS_SYMBOLS = "!@#$%*()_+-={}[]:;\"'<>,./?|\\~`"

_config = pydantic.ConfigDict(
    alias_generator=to_camel, populate_by_name=True, frozen=True, extra="forbid"
)


class CharsetRule(pydantic.BaseModel):
    """
    A set of allowed characters together with its quota.

    A bound of ``0`` does not apply, e.g. ``max_count=0`` lets the generator use
    the charset as often as it needs to.
    """

    model_config = _config

    charset: str = pydantic.Field(min_length=1)
    min_count: Annotated[int, annotated_types.Ge(0)] = 0
    max_count: Annotated[int, annotated_types.Ge(0)] = 0

    @pydantic.field_validator("charset")
    @classmethod
    def unique_chars(cls, value: str) -> str:
        if len(set(value)) != len(value):
            raise ValueError("charset must not contain duplicate characters")
        return value

    @pydantic.model_validator(mode="after")
    def min_within_max(self) -> Self:
        if self.max_count and self.min_count > self.max_count:
            raise ValueError(
                "minCount (%d) must not exceed maxCount (%d)"
                % (self.min_count, self.max_count)
            )
        return self


def default_rules() -> tuple[CharsetRule, ...]:
    return (
        CharsetRule(charset=CHARS_LOWER + CHARS_UPPER + CHARS_DIGITS + CHARS_SYMBOLS),
    )


class PasswordPolicy(pydantic.BaseModel):
    model_config = _config

    rules: tuple[CharsetRule, ...] = pydantic.Field(default_factory=default_rules)

    @pydantic.field_validator("rules")
    @classmethod
    def fallback_to_default(
        cls, value: tuple[CharsetRule, ...]
    ) -> tuple[CharsetRule, ...]:
        return value or default_rules()
