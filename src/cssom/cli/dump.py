"""CLI command: cssom dump -- write the parsed tree as JSON."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from cssom.config import ParserOptions
from cssom.model.serialize import to_dict
from cssom.parser import CSSParseError, parse_css


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--indent", default=2, type=int, help="JSON indentation (0 for compact).")
@click.option("--silent", is_flag=True, help="Record errors in the output instead of failing.")
def dump(cssfile: str, indent: int, silent: bool) -> None:
    """Parse a CSS file and print its object model as JSON."""
    css_path = Path(cssfile)

    try:
        source = css_path.read_text(encoding="utf-8")
        stylesheet = parse_css(
            source, ParserOptions(source=css_path.name, silent=silent)
        )
    except CSSParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(json.dumps(to_dict(stylesheet), indent=indent or None))
