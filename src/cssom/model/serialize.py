"""Convert a parsed tree into JSON-ready dictionaries.

Parent back-references are left out so the output is a plain tree.
"""

from __future__ import annotations

from typing import Any

from cssom.model.lists import MediaList, StyleDeclaration
from cssom.model.position import Position
from cssom.model.rules import (
    CSSCustomMediaRule,
    CSSDocumentRule,
    CSSFontFaceRule,
    CSSGroupingRule,
    CSSImportRule,
    CSSKeyframeRule,
    CSSKeyframesRule,
    CSSMediaRule,
    CSSNamespaceRule,
    CSSPageRule,
    CSSRule,
    CSSStyleRule,
    CSSStyleSheet,
    CSSSupportsRule,
)

# Rule-specific attributes emitted after the common ones, per rule class.
_RULE_FIELDS: dict[type, tuple[str, ...]] = {
    CSSStyleRule: ("selector_text", "selectors", "style"),
    CSSMediaRule: ("media", "condition_text"),
    CSSSupportsRule: ("condition_text",),
    CSSDocumentRule: ("condition_text", "vendor"),
    CSSKeyframesRule: ("name", "vendor"),
    CSSKeyframeRule: ("key_text", "style"),
    CSSFontFaceRule: ("style",),
    CSSPageRule: ("selector_text", "style"),
    CSSImportRule: ("href", "media"),
    CSSNamespaceRule: ("namespace_uri", "prefix"),
    CSSCustomMediaRule: ("name", "media"),
}


def position_to_dict(position: Position | None) -> dict[str, Any] | None:
    if position is None:
        return None
    return {
        "start": {"line": position.start.line, "column": position.start.column},
        "end": {"line": position.end.line, "column": position.end.column},
        "source": position.source,
    }


def _value(value: object) -> object:
    if isinstance(value, MediaList):
        return list(value.queries)
    if isinstance(value, StyleDeclaration):
        return [
            {
                "property": d.property,
                "value": d.value,
                "position": position_to_dict(d.position),
            }
            for d in value
        ]
    return value


def rule_to_dict(rule: CSSRule) -> dict[str, Any]:
    """Serialise one rule and, for grouping rules, its children."""
    data: dict[str, Any] = {
        "type": int(rule.type),
        "kind": rule.type.name.lower(),
        "css_text": rule.css_text,
        "position": position_to_dict(rule.position),
    }
    for name in _RULE_FIELDS.get(type(rule), ()):
        data[name] = _value(getattr(rule, name))
    if isinstance(rule, CSSGroupingRule):
        data["css_rules"] = [rule_to_dict(child) for child in rule.css_rules]
    return data


def to_dict(stylesheet: CSSStyleSheet) -> dict[str, Any]:
    """Serialise a whole stylesheet, recorded errors included."""
    return {
        "type": stylesheet.type,
        "media": list(stylesheet.media.queries),
        "encoding": stylesheet.encoding,
        "css_rules": [rule_to_dict(rule) for rule in stylesheet.css_rules],
        "errors": [error.to_dict() for error in stylesheet.errors],
    }
