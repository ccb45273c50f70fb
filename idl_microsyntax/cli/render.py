"""Render command.

Provides the `render` Click command which prints the HTML fragment for a
micro-syntax string, optionally resolving types against a YAML index.
"""

from __future__ import annotations

from pathlib import Path

import click

from ..grammar import MicroSyntaxError
from ..rendering import idl_string_to_html
from ..resolver import DocumentIndex
from ..yaml_store import load_index


@click.command("render")
@click.argument("text", type=str)
@click.option(
    "--index",
    "index_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="YAML file or directory describing definitions and variables",
)
@click.option(
    "--section",
    default=None,
    help="Section id enclosing the reference (scopes variable lookups)",
)
def render_cmd(text: str, index_path: Path | None, section: str | None):
    """Render TEXT as an HTML cross-reference fragment."""
    try:
        index = load_index(index_path) if index_path else DocumentIndex()
    except (OSError, ValueError) as e:  # unreadable or malformed index
        raise click.ClickException(str(e)) from e
    try:
        html = idl_string_to_html(text, index, section)
    except MicroSyntaxError as e:
        raise click.ClickException(str(e)) from e
    click.echo(html)


__all__ = ["render_cmd"]
