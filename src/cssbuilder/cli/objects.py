"""CLI commands for the object and JSON helpers."""

from __future__ import annotations

import sys
from typing import TextIO

import click

from cssbuilder.errors import DecodeError
from cssbuilder.objects import Rectangle, decode_json, to_json


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--indent", type=int, default=None, help="Indent width (compact if unset)")
def canonical(source: TextIO, indent: int | None) -> None:
    """Read JSON from SOURCE (or stdin) and print it in canonical form."""
    from cssbuilder.config import CSSBuilderConfig

    try:
        value = decode_json(source.read())
    except DecodeError as exc:
        click.echo(f"Decode error: {exc} (line {exc.line}, column {exc.column})", err=True)
        sys.exit(1)
    click.echo(to_json(value, config=CSSBuilderConfig(json_indent=indent)))


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    click.echo(f"{Rectangle(width, height).area:g}")
