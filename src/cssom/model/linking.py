"""Second pass over a finished tree: attach parent back-references."""

from __future__ import annotations

from cssom.model.rules import CSSGroupingRule, CSSRule, CSSStyleSheet


def link_parents(stylesheet: CSSStyleSheet) -> CSSStyleSheet:
    """Set ``parent_rule`` and ``parent_style_sheet`` on every rule.

    Runs after the whole tree is built, because a grouping rule does not exist
    yet while its children are being parsed.  Returns *stylesheet*.
    """
    for child in stylesheet.css_rules:
        _link(child, stylesheet, None)
    return stylesheet


def _link(
    rule: CSSRule, stylesheet: CSSStyleSheet, parent: CSSRule | None
) -> None:
    if isinstance(rule, CSSGroupingRule):
        for child in rule.css_rules:
            _link(child, stylesheet, rule)
    rule.parent_rule = parent
    rule.parent_style_sheet = stylesheet
