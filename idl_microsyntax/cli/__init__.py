"""CLI command group for IDL micro-syntax inspection.

This module exposes the root Click command group `idl_microsyntax` which
aggregates subcommands implemented in sibling modules (`parse`, `render`).

Example usage:

        idl-microsyntax parse "Foo.bar.baz(arg1, arg2)"
        idl-microsyntax render "request.[[state]]" --index index.yml --section sec-show
"""

from __future__ import annotations

import logging
import os

import click

from .. import __version__
from .parse import parse_cmd
from .render import render_cmd

LOG_LEVEL_ENV = "IDL_MICROSYNTAX_LOG_LEVEL"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def configure_logging(level: str | None = None) -> None:  # lightweight, idempotent
    level_name = (level or os.getenv(LOG_LEVEL_ENV, "WARNING")).upper()
    resolved = getattr(logging, level_name, logging.WARNING)
    if not getattr(configure_logging, "_done", False):  # type: ignore[attr-defined]
        logging.basicConfig(
            level=resolved, format="[%(levelname)s] %(name)s: %(message)s"
        )
        configure_logging._done = True  # type: ignore[attr-defined]
    logging.getLogger("idl_microsyntax").setLevel(resolved)


def _print_version(
    ctx: click.Context, param: click.Parameter, value: bool
) -> None:  # pragma: no cover - simple utility
    """Callback to print only the raw version and exit early."""
    if not value or ctx.resilient_parsing:
        return
    click.echo(__version__)
    ctx.exit()


@click.group()
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the idl-microsyntax version and exit.",
)
@click.option(
    "--log-level",
    envvar=LOG_LEVEL_ENV,
    default="WARNING",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help=f"Set the logging level (env: {LOG_LEVEL_ENV})",
)
def idl_microsyntax(log_level: str):
    """IDL micro-syntax parsing and rendering commands."""
    configure_logging(log_level)


# Register subcommands
idl_microsyntax.add_command(parse_cmd)
idl_microsyntax.add_command(render_cmd)

__all__ = ["configure_logging", "idl_microsyntax"]
