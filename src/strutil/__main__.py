#!/usr/bin/env python3

import logging
import pathlib

import click
import lazy_object_proxy
import pydantic

from strutil._cli.commands.check import check
from strutil._cli.commands.generate import generate
from strutil._cli.commands.hash import hash_
from strutil._cli.commands.validate import validate
from strutil._cli.exc import ConfigSyntaxError, ConfigValidationError, Location
from strutil._conf import Settings
from strutil.util.model import convert_errors

ConfigOption = pathlib.Path | None

ENVVAR_PREFIX = "STRUTIL"


def validate_config(ctx: click.Context, fn: ConfigOption) -> Settings:
    payload = {}

    if fn is not None:
        from ruamel import yaml
        from ruamel.yaml.error import YAMLError

        _loader = yaml.YAML(typ="safe")

        try:
            payload = _loader.load(fn.read_bytes()) or {}
        except YAMLError as ex:
            loc = Location(filename=fn)
            if (mark := getattr(ex, "problem_mark", None)) is not None:
                loc["line"], loc["col"] = mark.line + 1, mark.column + 1
            raise ConfigSyntaxError(str(ex), loc=loc) from ex

    if not isinstance(payload, dict):
        raise ConfigValidationError(
            "Configuration must be a mapping, got %s" % type(payload).__name__
        )

    try:
        res = Settings(**payload)
    except pydantic.ValidationError as ex:
        raise ConfigValidationError(
            "Invalid configuration input.", errors=convert_errors(ex)
        ) from ex

    assert isinstance(res, Settings), "Expected %r, got %r" % (
        Settings.__name__,
        res,
    )
    return res


@click.group(context_settings={"auto_envvar_prefix": ENVVAR_PREFIX})
@click.option("-D", "--debug/--no-debug", default=False, help="Enable debug mode.")
@click.option(
    "-c",
    "--config",
    type=click.Path(
        dir_okay=False,
        exists=True,
        readable=True,
        path_type=pathlib.Path,
    ),
    help="Path to a YAML configuration file.",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config: ConfigOption) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
    )
    ctx.obj = lazy_object_proxy.Proxy(lambda: validate_config(ctx=ctx, fn=config))


cli.add_command(generate)
cli.add_command(validate)
cli.add_command(hash_)
cli.add_command(check)

if __name__ == "__main__":
    cli()
