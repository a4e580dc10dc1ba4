import click

from ..._conf import Settings
from ...hashing import password_hash

__all__ = ["hash_"]


@click.command("hash")
@click.argument("values", nargs=-1)
@click.option(
    "--salt/--no-salt",
    default=False,
    help="Prepend the configured PASSWORD_SALT to the values.",
)
@click.pass_obj
def hash_(settings: Settings, values: tuple[str, ...], salt: bool) -> None:
    """Print the uppercase SHA-1 digest of the concatenated VALUES."""
    click.echo(settings.salted_hash(*values) if salt else password_hash(*values))
