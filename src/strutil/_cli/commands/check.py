import click

from ...validators import is_identifier, is_snake

__all__ = ["check"]


_PREDICATES = {
    "identifier": is_identifier,
    "snake": is_snake,
}


@click.command()
@click.argument("kind", type=click.Choice(tuple(_PREDICATES)))
@click.argument("value")
@click.pass_context
def check(ctx: click.Context, kind: str, value: str) -> None:
    """Exit with status 0 if VALUE is a valid KIND, 1 otherwise."""
    if not _PREDICATES[kind](value):
        ctx.exit(1)
