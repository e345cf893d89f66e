"""At-rule grammars, tried in a fixed order when the input starts with ``@``.

Each method returns None when its introducer does not match, so the
dispatcher can move on to the next one.  Once an introducer has matched, a
missing continuation is reported through the cursor and the resulting Failure
is returned.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Callable

from cssom.model.lists import MediaList, RuleList, StyleDeclaration
from cssom.model.rules import (
    CSSCharsetRule,
    CSSCustomMediaRule,
    CSSDocumentRule,
    CSSFontFaceRule,
    CSSHostRule,
    CSSImportRule,
    CSSKeyframeRule,
    CSSKeyframesRule,
    CSSMediaRule,
    CSSNamespaceRule,
    CSSPageRule,
    CSSRule,
    CSSSupportsRule,
)
from cssom.parser.cursor import Cursor, Failure, Outcome
from cssom.parser.errors import MissingNameError

if TYPE_CHECKING:
    from cssom.model.rules import Comment

__all__ = ["AtRuleMixin"]

_KEYFRAMES_RE = re.compile(r"@([-\w]+)?keyframes\s*")
_KEYFRAMES_NAME_RE = re.compile(r"([-\w]+)\s*")
_KEYFRAME_KEY_RE = re.compile(r"((\d+\.\d+|\.\d+|\d+)%?|from\b|to\b)\s*")
_KEYFRAME_COMMA_RE = re.compile(r",\s*")
_MEDIA_RE = re.compile(r"@media *([^{]+)")
_CUSTOM_MEDIA_RE = re.compile(r"@custom-media\s+(--\S+)\s*([^{;]+);")
_SUPPORTS_RE = re.compile(r"@supports *([^{]+)")
_CHARSET_RE = re.compile(r"@charset\s*([^;]+);")
_DOCUMENT_RE = re.compile(r"@([-\w]+)?document *([^{]+)")
_PAGE_RE = re.compile(r"@page *")
_HOST_RE = re.compile(r"@host\s*")
_FONT_FACE_RE = re.compile(r"@font-face\s*")

_IMPORT_RE = re.compile(
    r"""
    @import\s*
    (?:
        "(?P<dq>[^"]+)"
      | url\("(?P<url_dq>[^"]+)"\)
      | '(?P<sq>[^']+)'
      | url\('(?P<url_sq>[^']+)'\)
      | url\((?P<url>[^)]+)\)
    )
    (?P<media>[^;]*)
    ;
    """,
    re.VERBOSE,
)
# The href is the first alternative that captured something, in this order.
_IMPORT_HREF_GROUPS = ("dq", "url_dq", "sq", "url_sq", "url")

_NAMESPACE_RE = re.compile(
    r"""
    @namespace\s+
    (?:(?P<prefix>\w+)\s+)?
    (?:
        url\('(?P<url_sq>[^']+)'\)
      | url\("(?P<url_dq>[^"]+)"\)
      | "(?P<dq>[^"]+)"
      | '(?P<sq>[^']+)'
      | url\((?P<url>[^)]+)\)
    )
    ;
    """,
    re.VERBOSE,
)
_NAMESPACE_URI_GROUPS = ("url_sq", "url_dq", "dq", "sq", "url")

_KEYFRAME_ALIASES = {"from": "0%", "to": "100%"}


def _first_group(m: re.Match[str], names: tuple[str, ...]) -> str:
    for name in names:
        value = m.group(name)
        if value:
            return value.strip()
    return ""


class AtRuleMixin:
    """At-rule grammars of :class:`~cssom.parser.grammar.CSSParser`."""

    cursor: Cursor

    if TYPE_CHECKING:

        def rules(self, scope: str = "") -> Outcome[RuleList]: ...

        def declarations(self, scope: str = "") -> Outcome[StyleDeclaration]: ...

        def selector(self) -> list[str] | None: ...

        def comments(self) -> Outcome[list[Comment]]: ...

        def skip_comments(self) -> Failure | None: ...

    def at_rule(self) -> Outcome[CSSRule]:
        """Dispatch to the first at-rule grammar whose introducer matches."""
        if self.cursor.peek() != "@":
            return None
        grammars: tuple[Callable[[], Outcome[CSSRule]], ...] = (
            self.at_keyframes,
            self.at_media,
            self.at_custom_media,
            self.at_supports,
            self.at_import,
            self.at_charset,
            self.at_namespace,
            self.at_document,
            self.at_page,
            self.at_host,
            self.at_font_face,
        )
        for grammar in grammars:
            node = grammar()
            if node is not None:
                return node
        return None

    # --- grouping rules -------------------------------------------------------

    def at_keyframes(self) -> Outcome[CSSKeyframesRule]:
        cur = self.cursor
        pos = cur.position()
        m = cur.match(_KEYFRAMES_RE)
        if m is None:
            return None
        vendor = m.group(1) or ""

        name = cur.match(_KEYFRAMES_NAME_RE)
        if name is None:
            return cur.error("@keyframes missing name", MissingNameError)

        if not cur.open():
            return cur.error("@keyframes missing '{'")

        skipped = self.comments()
        if isinstance(skipped, Failure):
            return skipped

        frames: list[CSSRule] = []
        while True:
            frame = self.keyframe()
            if frame is None:
                break
            if isinstance(frame, Failure):
                return frame
            frames.append(frame)
            failure = self.skip_comments()
            if failure is not None:
                return failure

        if not cur.close():
            return cur.error("@keyframes missing '}'")

        return pos(
            CSSKeyframesRule(
                name=name.group(1), vendor=vendor, css_rules=RuleList(frames)
            )
        )

    def keyframe(self) -> Outcome[CSSKeyframeRule]:
        """One keyframe: ``from``, ``to`` or percentages, then a block."""
        cur = self.cursor
        pos = cur.position()
        keys: list[str] = []
        while True:
            m = cur.match(_KEYFRAME_KEY_RE)
            if m is None:
                break
            keys.append(_KEYFRAME_ALIASES.get(m.group(1), m.group(1)))
            cur.match(_KEYFRAME_COMMA_RE)

        if not keys:
            return None

        style = self.declarations("keyframe ")
        if isinstance(style, Failure):
            return style
        return pos(CSSKeyframeRule(key_text=", ".join(keys), style=style))

    def at_media(self) -> Outcome[CSSMediaRule]:
        cur = self.cursor
        pos = cur.position()
        m = cur.match(_MEDIA_RE)
        if m is None:
            return None
        media = MediaList.from_text(m.group(1))
        rules = self.rules("@media ")
        if isinstance(rules, Failure):
            return rules
        return pos(CSSMediaRule(media=media, css_rules=rules))

    def at_supports(self) -> Outcome[CSSSupportsRule]:
        cur = self.cursor
        pos = cur.position()
        m = cur.match(_SUPPORTS_RE)
        if m is None:
            return None
        rules = self.rules("@supports ")
        if isinstance(rules, Failure):
            return rules
        return pos(CSSSupportsRule(condition_text=m.group(1).strip(), css_rules=rules))

    def at_document(self) -> Outcome[CSSDocumentRule]:
        cur = self.cursor
        pos = cur.position()
        m = cur.match(_DOCUMENT_RE)
        if m is None:
            return None
        rules = self.rules("@document ")
        if isinstance(rules, Failure):
            return rules
        return pos(
            CSSDocumentRule(
                condition_text=m.group(2).strip(),
                vendor=(m.group(1) or "").strip(),
                css_rules=rules,
            )
        )

    def at_host(self) -> Outcome[CSSHostRule]:
        cur = self.cursor
        pos = cur.position()
        if cur.match(_HOST_RE) is None:
            return None
        rules = self.rules("@host")
        if isinstance(rules, Failure):
            return rules
        return pos(CSSHostRule(css_rules=rules))

    # --- declaration blocks ---------------------------------------------------

    def at_page(self) -> Outcome[CSSPageRule]:
        cur = self.cursor
        pos = cur.position()
        if cur.match(_PAGE_RE) is None:
            return None
        selector_text = ", ".join(self.selector() or [])
        style = self.declarations("@page ")
        if isinstance(style, Failure):
            return style
        return pos(CSSPageRule(selector_text=selector_text, style=style))

    def at_font_face(self) -> Outcome[CSSFontFaceRule]:
        cur = self.cursor
        pos = cur.position()
        if cur.match(_FONT_FACE_RE) is None:
            return None
        style = self.declarations("@font-face ")
        if isinstance(style, Failure):
            return style
        return pos(CSSFontFaceRule(style=style))

    # --- statements -----------------------------------------------------------

    def at_import(self) -> Outcome[CSSImportRule]:
        cur = self.cursor
        pos = cur.position()
        m = cur.match(_IMPORT_RE)
        if m is None:
            return None
        return pos(
            CSSImportRule(
                css_text=m.group(0),
                href=_first_group(m, _IMPORT_HREF_GROUPS),
                media=MediaList.from_text(m.group("media")),
            )
        )

    def at_namespace(self) -> Outcome[CSSNamespaceRule]:
        cur = self.cursor
        pos = cur.position()
        m = cur.match(_NAMESPACE_RE)
        if m is None:
            return None
        return pos(
            CSSNamespaceRule(
                css_text=m.group(0),
                namespace_uri=_first_group(m, _NAMESPACE_URI_GROUPS),
                prefix=(m.group("prefix") or "").strip(),
            )
        )

    def at_custom_media(self) -> Outcome[CSSCustomMediaRule]:
        cur = self.cursor
        pos = cur.position()
        m = cur.match(_CUSTOM_MEDIA_RE)
        if m is None:
            return None
        return pos(
            CSSCustomMediaRule(
                name=m.group(1).strip(), media=MediaList.from_text(m.group(2))
            )
        )

    def at_charset(self) -> Outcome[CSSCharsetRule]:
        cur = self.cursor
        pos = cur.position()
        m = cur.match(_CHARSET_RE)
        if m is None:
            return None
        encoding = m.group(1).replace('"', "").replace("'", "").strip()
        return pos(CSSCharsetRule(encoding=encoding))
