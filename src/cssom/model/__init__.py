from cssom.model.linking import link_parents
from cssom.model.lists import Declaration, MediaList, RuleList, StyleDeclaration
from cssom.model.position import Location, Position
from cssom.model.selectors import split_selectors
from cssom.model.rules import (
    Comment,
    CSSCharsetRule,
    CSSCustomMediaRule,
    CSSDocumentRule,
    CSSFontFaceRule,
    CSSGroupingRule,
    CSSHostRule,
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
    RuleType,
)

__all__ = [
    "Comment",
    "CSSCharsetRule",
    "CSSCustomMediaRule",
    "CSSDocumentRule",
    "CSSFontFaceRule",
    "CSSGroupingRule",
    "CSSHostRule",
    "CSSImportRule",
    "CSSKeyframeRule",
    "CSSKeyframesRule",
    "CSSMediaRule",
    "CSSNamespaceRule",
    "CSSPageRule",
    "CSSRule",
    "CSSStyleRule",
    "CSSStyleSheet",
    "CSSSupportsRule",
    "Declaration",
    "Location",
    "MediaList",
    "Position",
    "RuleList",
    "RuleType",
    "StyleDeclaration",
    "link_parents",
    "split_selectors",
]
