from dataclasses import dataclass
from typing import TypedDict

from typing_extensions import override

__all__ = (
    "ApplicationError",
    "PasswordValidationError",
    "TooFewCharsError",
    "TooManyCharsError",
)


@dataclass(slots=True)
class ApplicationError(Exception):
    class Context(TypedDict): ...

    message: str
    ctx: Context | None

    def format_message(self) -> str:
        return self.message.format(ctx=self.ctx or {})

    @override
    def __str__(self) -> str:
        return self.format_message()


@dataclass(slots=True)
class PasswordValidationError(ApplicationError):
    """
    Raised when a password does not satisfy the quota of one of the charset rules.
    """

    class Context(TypedDict):
        """
        Attributes:
            charset: The characters of the offending rule.
            expected: The bound that was violated.
            actual: How many characters of the password belong to the charset.
        """

        charset: str
        expected: int
        actual: int

    ctx: Context


@dataclass(slots=True)
class TooFewCharsError(PasswordValidationError):
    @classmethod
    def from_count(
        cls, charset: str, expected: int, actual: int
    ) -> "TooFewCharsError":
        return cls(
            message="too few of {ctx[charset]} (min {ctx[expected]}, you have "
            "{ctx[actual]})",
            ctx=cls.Context(charset=charset, expected=expected, actual=actual),
        )


@dataclass(slots=True)
class TooManyCharsError(PasswordValidationError):
    @classmethod
    def from_count(
        cls, charset: str, expected: int, actual: int
    ) -> "TooManyCharsError":
        return cls(
            message="too many of {ctx[charset]} (max {ctx[expected]}, you have "
            "{ctx[actual]})",
            ctx=cls.Context(charset=charset, expected=expected, actual=actual),
        )
