import pathlib
from dataclasses import dataclass, field
from typing import NotRequired, TypedDict

import click
import pydantic_core
from typing_extensions import override


class Location(TypedDict):
    filename: pathlib.Path
    line: NotRequired[int]
    col: NotRequired[int]


def describe_location(loc: Location) -> str:
    if "line" not in loc:
        return str(loc["filename"])
    return "%s:%d:%d" % (loc["filename"], loc["line"], loc.get("col", 1))


@dataclass(slots=True)
class CLIError(click.ClickException):
    """
    Signals that an error has occurred in the application.

    Provides an `exit_code` attribute for specifying a specific exit code, and a
    `message` attribute containing a human-readable description of the error.

    Warning:
        Allowed exit codes are defined in the Advanced Bash-Scripting Guide at
        https://tldp.org/LDP/abs/html/exitcodes.html. Note that user-defined exit
        codes are restricted to the range 64 - 113.
    """

    message: str
    exit_code: int = 1

    def __post_init__(self) -> None:
        click.ClickException.__init__(self, self.message)


@dataclass(slots=True)
class ConfigError(CLIError):
    pass


@dataclass(slots=True, kw_only=True)
class ConfigSyntaxError(ConfigError):
    """
    Raised when the configuration file is not well-formed YAML.

    Attributes:
        loc: Where the parser gave up. Line and column are 1-based.
    """

    loc: Location

    @override
    def format_message(self) -> str:
        return "Cannot parse configuration file %s as YAML.\n\n%s" % (
            describe_location(self.loc),
            self.message,
        )


@dataclass(slots=True, kw_only=True)
class ConfigValidationError(ConfigError):
    """
    Raised when the configuration does not describe valid settings.

    Only the location and message of each error are shown, never the input value,
    so a misplaced salt does not end up on the terminal.
    """

    errors: list[pydantic_core.ErrorDetails] = field(default_factory=list)

    @override
    def format_message(self) -> str:
        lines = [self.message]
        for error in self.errors:
            path = ".".join(str(part) for part in error["loc"]) or "<root>"
            lines.append("  %s: %s" % (path, error["msg"]))
        return "\n".join(lines)
