"""CLI command: cssom validate -- parse a stylesheet and report every error."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cssom.config import ParserOptions
from cssom.parser import parse_css


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
def validate(cssfile: str) -> None:
    """Parse a CSS file in silent mode and print the errors found.

    Exits with code 0 when the file parses cleanly, or code 1 if there are
    errors.
    """
    css_path = Path(cssfile)
    source = css_path.read_text(encoding="utf-8")
    stylesheet = parse_css(source, ParserOptions(source=css_path.name, silent=True))

    if not stylesheet.errors:
        click.echo(f"OK: {css_path.name} ({len(stylesheet.css_rules)} rules)")
        sys.exit(0)

    for error in stylesheet.errors:
        click.echo(str(error))
    click.echo()
    click.echo(f"Summary: {len(stylesheet.errors)} error(s)")
    sys.exit(1)
