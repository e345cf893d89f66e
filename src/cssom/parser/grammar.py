"""Hand-written recursive-descent parser for CSS stylesheets.

Grammar:
    stylesheet   := rules
    rules        := ('{')? WS comment* ((at_rule | rule) WS comment*)* ('}')?
    rule         := selector comment* declarations
    declarations := WS '{' comment* (declaration WS comment*)* '}'
    declaration  := property ':' value ';'*

Every grammar method answers with a node, ``None`` when its construct is not
present, or a :class:`~cssom.parser.cursor.Failure` that must be propagated.
"""

from __future__ import annotations

import logging
import re
from typing import cast

from cssom.config import ParserOptions
from cssom.model.linking import link_parents
from cssom.model.lists import Declaration, RuleList, StyleDeclaration
from cssom.model.rules import (
    Comment,
    CSSCharsetRule,
    CSSRule,
    CSSStyleRule,
    CSSStyleSheet,
)
from cssom.model.selectors import split_selectors
from cssom.parser.atrules import AtRuleMixin
from cssom.parser.cursor import Cursor, Failure, Outcome
from cssom.parser.errors import MissingSelectorError, UnterminatedCommentError

__all__ = ["CSSParser", "parse_css"]

logger = logging.getLogger("cssom")

# http://www.w3.org/TR/CSS21/grammar.html
COMMENT_RE = re.compile(r"/\*[^*]*\*+(?:[^/*][^*]*\*+)*/")

_SELECTOR_RE = re.compile(r"[^{]+")

_PROPERTY_RE = re.compile(r"(\*?[-#/*\\\w]+(?:\[[0-9a-z_-]+\])?)\s*")
_COLON_RE = re.compile(r":\s*")
_VALUE_RE = re.compile(
    r"""
    (?:
        '(?:\\'|.)*?'       # single-quoted string
      | "(?:\\"|.)*?"       # double-quoted string
      | \([^)]*?\)          # parenthesized group, e.g. url(...)
      | [^};]               # anything else up to ; or }
    )+
    """,
    re.VERBOSE,
)
_SEMICOLON_RE = re.compile(r"[;\s]*")


def strip_comments(text: str) -> str:
    return COMMENT_RE.sub("", text)


class CSSParser(AtRuleMixin):
    """Parses one CSS source text into a :class:`CSSStyleSheet`.

    A parser instance owns its cursor and is meant for a single call to
    :meth:`parse`.
    """

    def __init__(self, css: str, options: ParserOptions | None = None) -> None:
        self.cursor = Cursor(css, options)

    def parse(self) -> CSSStyleSheet:
        """Parse the whole input and link parents.

        Raises:
            CSSParseError: On the first error, unless the options are silent.
        """
        options = self.cursor.options
        logger.debug(
            "Parsing %s (%d chars)", options.source or "<unknown>", len(self.cursor.css)
        )
        # The unscoped list never fails, it returns what it read.
        rules = cast(RuleList, self.rules())
        stylesheet = CSSStyleSheet(
            css_rules=rules,
            owner_node=options.owner_node,
            encoding=self.cursor.encoding,
            errors=list(self.cursor.errors),
        )
        link_parents(stylesheet)
        logger.debug(
            "Parsed %d top-level rules with %d error(s)",
            len(stylesheet.css_rules),
            len(stylesheet.errors),
        )
        return stylesheet

    # --- rule lists -----------------------------------------------------------

    def rules(self, scope: str = "") -> Outcome[RuleList]:
        """Parse rules until the input or the enclosing block ends.

        A non-empty *scope* names the enclosing at-rule and makes the braces
        around the list mandatory.  Without a scope (the stylesheet itself) a
        failure stops the loop but the rules read so far are still returned.
        """
        cur = self.cursor
        if scope and not cur.open():
            return cur.error(f"{scope}missing '{{'")

        collected: list[CSSRule] = []
        failure = self.skip_comments()
        while failure is None and not cur.at_end and cur.peek() != "}":
            node = self.at_rule()
            if node is None:
                node = self.rule()
            if isinstance(node, Failure):
                failure = node
                break
            if isinstance(node, CSSCharsetRule):
                self._record_charset(node)
            else:
                collected.append(node)
            failure = self.skip_comments()

        if failure is not None:
            if scope:
                return failure
            return RuleList(collected)

        if scope and not cur.close():
            return cur.error(f"{scope}missing '}}'")
        if not scope and not cur.at_end:
            logger.debug("Stopped at unbalanced '}' on line %d", cur.line)
        return RuleList(collected)

    def _record_charset(self, node: CSSCharsetRule) -> None:
        if self.cursor.encoding is not None and self.cursor.encoding != node.encoding:
            logger.debug(
                "Charset changed from %s to %s", self.cursor.encoding, node.encoding
            )
        self.cursor.encoding = node.encoding

    # --- comments -------------------------------------------------------------

    def comment(self) -> Outcome[Comment]:
        cur = self.cursor
        if not cur.css.startswith("/*"):
            return None
        pos = cur.position()
        end = cur.css.find("*/", 2)
        if end == -1:
            return cur.error("End of comment missing", UnterminatedCommentError)
        cur.skip(2)
        text = cur.skip(end - 2)
        cur.skip(2)
        return pos(Comment(text))

    def comments(self) -> Outcome[list[Comment]]:
        """Consume consecutive comments."""
        found: list[Comment] = []
        while True:
            node = self.comment()
            if node is None:
                return found
            if isinstance(node, Failure):
                return node
            found.append(node)

    def skip_comments(self) -> Failure | None:
        """Skip whitespace and comments; returns a Failure on an open comment."""
        self.cursor.whitespace()
        skipped = self.comments()
        if isinstance(skipped, Failure):
            return skipped
        self.cursor.whitespace()
        return None

    # --- selectors ------------------------------------------------------------

    def selector(self) -> list[str] | None:
        """Read the selector list in front of a ``{``.

        Commas inside quoted strings, parentheses or brackets do not separate
        selectors.
        """
        m = self.cursor.match(_SELECTOR_RE)
        if m is None:
            return None
        return split_selectors(strip_comments(m.group(0)))

    def rule(self) -> Outcome[CSSStyleRule]:
        cur = self.cursor
        pos = cur.position()
        selectors = self.selector()
        if not selectors:
            return cur.error("selector missing", MissingSelectorError)

        skipped = self.comments()
        if isinstance(skipped, Failure):
            return skipped

        style = self.declarations()
        if isinstance(style, Failure):
            return style
        return pos(CSSStyleRule(selectors=selectors, style=style))

    # --- declarations ---------------------------------------------------------

    def declaration(self) -> Outcome[Declaration]:
        cur = self.cursor
        pos = cur.position()

        prop = cur.match(_PROPERTY_RE)
        if prop is None:
            return None
        name = strip_comments(prop.group(1)).strip()

        if cur.match(_COLON_RE) is None:
            return cur.error("property missing ':'")

        value = cur.match(_VALUE_RE)
        node = pos(
            Declaration(
                property=name,
                value=strip_comments(value.group(0)).strip() if value else "",
            )
        )
        cur.match(_SEMICOLON_RE)
        return node

    def declarations(self, scope: str = "") -> Outcome[StyleDeclaration]:
        """Parse a ``{ ... }`` block of declarations.

        Repeated properties are kept in source order.
        """
        cur = self.cursor
        cur.whitespace()
        if not cur.open():
            return cur.error(f"{scope}missing '{{'")

        skipped = self.comments()
        if isinstance(skipped, Failure):
            return skipped

        found: list[Declaration] = []
        while True:
            node = self.declaration()
            if node is None:
                break
            if isinstance(node, Failure):
                return node
            found.append(node)
            failure = self.skip_comments()
            if failure is not None:
                return failure

        if not cur.close():
            return cur.error(f"{scope}missing '}}'")
        return StyleDeclaration(found)


def parse_css(css: str, options: ParserOptions | None = None) -> CSSStyleSheet:
    """Parse *css* into a stylesheet tree.

    Returns a CSSStyleSheet whose rules keep their source order.  With
    ``options.silent`` the errors are collected on ``stylesheet.errors`` and
    the rules read before the first error are returned.
    """
    return CSSParser(css, options).parse()
