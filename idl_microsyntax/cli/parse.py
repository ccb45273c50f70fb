"""Parse command.

Provides the `parse` Click command which prints the classified segments of
a micro-syntax string, one per line, or the chain as JSON.
"""

from __future__ import annotations

import click

from ..grammar import MicroSyntaxError, Segment, parse_idl


def _describe(position: int, segment: Segment) -> str:
    line = f"{position} {segment.kind} {segment.identifier}"
    if segment.args:
        line += f" args={','.join(segment.args)}"
    if segment.enum_value is not None:
        line += f' value="{segment.enum_value}"'
    if segment.parent is not None:
        line += f" parent={segment.parent + 1}"
    return line


@click.command("parse")
@click.argument("text", type=str)
@click.option("--json", "as_json", is_flag=True, help="Emit the chain as JSON")
def parse_cmd(text: str, as_json: bool):
    """Parse TEXT and print its segments (positions are 1-based)."""
    try:
        chain = parse_idl(text)
    except MicroSyntaxError as e:
        raise click.ClickException(str(e)) from e
    if as_json:
        click.echo(chain.model_dump_json(indent=2))
        return
    for position, segment in enumerate(chain, start=1):
        click.echo(_describe(position, segment))


__all__ = ["parse_cmd"]
