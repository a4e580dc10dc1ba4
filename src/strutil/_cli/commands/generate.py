import random
from logging import getLogger
from typing import Optional

import click

from ..._conf import Settings
from ...generator import PasswordGenerator

__all__ = ["generate"]


logger = getLogger(__name__)


@click.command()
@click.argument("length", type=click.IntRange(min=0))
@click.option(
    "-n",
    "--count",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of passwords to generate.",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed the random source to get reproducible passwords. Do not use for "
    "real credentials.",
)
@click.pass_obj
def generate(settings: Settings, length: int, count: int, seed: Optional[int]) -> None:
    """Generate passwords of LENGTH characters from the configured policy."""
    rng = random.Random(seed) if seed is not None else None
    generator = PasswordGenerator.from_policy(settings.policy, rng=rng)

    logger.debug(
        "generating %d password(s) using %d charset rule(s)",
        count,
        len(generator.rules),
    )
    for _ in range(count):
        click.echo(generator.generate(length))
