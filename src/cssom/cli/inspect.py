"""CLI command: cssom inspect -- display the rule tree."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cssom.config import ParserOptions
from cssom.model.rules import (
    CSSFontFaceRule,
    CSSGroupingRule,
    CSSKeyframeRule,
    CSSPageRule,
    CSSRule,
    CSSStyleRule,
)
from cssom.parser import CSSParseError, parse_css


def _describe(rule: CSSRule) -> str:
    if isinstance(rule, (CSSStyleRule, CSSKeyframeRule, CSSFontFaceRule, CSSPageRule)):
        # Drop the declaration block, it is listed underneath.
        return rule.css_text.split(" { ", 1)[0]
    if isinstance(rule, CSSGroupingRule):
        return rule.css_text.removesuffix(" {  }")
    return rule.css_text


def _echo_rule(rule: CSSRule, depth: int) -> None:
    indent = "  " * depth
    span = f"[{rule.position}]" if rule.position else ""
    click.echo(f"{indent}{rule.type.name.lower()} {span}  {_describe(rule)}")
    style = getattr(rule, "style", None)
    if style is not None:
        for declaration in style:
            click.echo(f"{indent}    {declaration.property}: {declaration.value}")
    if isinstance(rule, CSSGroupingRule):
        for child in rule.css_rules:
            _echo_rule(child, depth + 1)


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
def inspect(cssfile: str) -> None:
    """Parse a CSS file and display its rule tree.

    Shows each rule with its kind and line:column span, and the declarations
    of every block.
    """
    css_path = Path(cssfile)

    try:
        source = css_path.read_text(encoding="utf-8")
        stylesheet = parse_css(source, ParserOptions(source=css_path.name))
    except CSSParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Stylesheet: {css_path.name}")
    if stylesheet.encoding:
        click.echo(f"Charset: {stylesheet.encoding}")
    click.echo(f"Rules: {len(stylesheet.css_rules)}")
    click.echo()
    for rule in stylesheet.css_rules:
        _echo_rule(rule, 0)
