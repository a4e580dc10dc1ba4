import sys
from typing import Optional

import click

from ... import exc
from ..._conf import Settings
from ...generator import PasswordGenerator
from ..exc import CLIError

__all__ = ["validate"]


@click.command()
@click.argument("password", required=False)
@click.pass_obj
def validate(settings: Settings, password: Optional[str]) -> None:
    """Check PASSWORD against the configured policy. Reads a single line from the
    standard input when PASSWORD is omitted."""
    if password is None:
        password = sys.stdin.readline().rstrip("\r\n")

    try:
        PasswordGenerator.from_policy(settings.policy).validate(password)
    except exc.PasswordValidationError as ex:
        raise CLIError("Invalid password: %s" % ex) from ex

    click.secho("Password is valid", fg="green")
