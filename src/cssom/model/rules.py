"""Rule model: one dataclass per CSS rule kind, plus the root stylesheet.

Every rule builds its shallow ``css_text`` from its own fields when it is
constructed.  Nested rule bodies are never serialized into it.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Any, ClassVar

from cssom.model.lists import MediaList, RuleList, StyleDeclaration
from cssom.model.position import Position
from cssom.model.selectors import split_selectors

if TYPE_CHECKING:
    from cssom.parser.errors import CSSParseError


class RuleType(IntEnum):
    """CSSOM rule type codes."""

    STYLE = 1
    CHARSET = 2
    IMPORT = 3
    MEDIA = 4
    FONT_FACE = 5
    PAGE = 6
    KEYFRAMES = 7
    KEYFRAME = 8
    NAMESPACE = 10
    SUPPORTS = 12
    DOCUMENT = 13
    CUSTOM_MEDIA = 17
    HOST = 1001


@dataclass(kw_only=True)
class CSSRule:
    """Fields shared by every rule.

    ``parent_rule`` and ``parent_style_sheet`` stay None until the tree is
    linked; they are left out of comparisons and repr.
    """

    type: ClassVar[RuleType]

    css_text: str = ""
    position: Position | None = None
    parent_rule: CSSRule | None = field(default=None, compare=False, repr=False)
    parent_style_sheet: CSSStyleSheet | None = field(
        default=None, compare=False, repr=False
    )


@dataclass(kw_only=True)
class CSSGroupingRule(CSSRule):
    """A rule holding nested rules."""

    css_rules: RuleList = field(default_factory=RuleList)


@dataclass(kw_only=True)
class CSSStyleRule(CSSRule):
    """A selector list with its declaration block.

    Built from either ``selectors`` or ``selector_text``.  When ``selectors``
    is given, ``selector_text`` is its ``", "`` join; otherwise the text is
    split on its top-level commas.
    """

    type: ClassVar[RuleType] = RuleType.STYLE

    selectors: list[str] = field(default_factory=list)
    selector_text: str = ""
    style: StyleDeclaration

    def __post_init__(self) -> None:
        if self.selectors:
            self.selector_text = ", ".join(self.selectors)
        else:
            self.selectors = split_selectors(self.selector_text)
        self.css_text = f"{self.selector_text} {{ {self.style.css_text} }}"


@dataclass(kw_only=True)
class CSSMediaRule(CSSGroupingRule):
    type: ClassVar[RuleType] = RuleType.MEDIA

    media: MediaList

    def __post_init__(self) -> None:
        self.css_text = f"@media {self.media.media_text} {{  }}"

    @property
    def condition_text(self) -> str:
        return self.media.media_text


@dataclass(kw_only=True)
class CSSSupportsRule(CSSGroupingRule):
    type: ClassVar[RuleType] = RuleType.SUPPORTS

    condition_text: str

    def __post_init__(self) -> None:
        self.css_text = f"@supports {self.condition_text} {{  }}"


@dataclass(kw_only=True)
class CSSDocumentRule(CSSGroupingRule):
    type: ClassVar[RuleType] = RuleType.DOCUMENT

    condition_text: str
    vendor: str = ""

    def __post_init__(self) -> None:
        self.css_text = f"@document {self.condition_text} {{  }}"


@dataclass(kw_only=True)
class CSSHostRule(CSSGroupingRule):
    type: ClassVar[RuleType] = RuleType.HOST

    def __post_init__(self) -> None:
        self.css_text = "@host {  }"


@dataclass(kw_only=True)
class CSSKeyframesRule(CSSGroupingRule):
    type: ClassVar[RuleType] = RuleType.KEYFRAMES

    name: str
    vendor: str = ""

    def __post_init__(self) -> None:
        self.css_text = f"@keyframes {self.name} {{  }}"


@dataclass(kw_only=True)
class CSSKeyframeRule(CSSRule):
    type: ClassVar[RuleType] = RuleType.KEYFRAME

    key_text: str
    style: StyleDeclaration

    def __post_init__(self) -> None:
        self.css_text = f"{self.key_text} {{ {self.style.css_text} }}"


@dataclass(kw_only=True)
class CSSFontFaceRule(CSSRule):
    type: ClassVar[RuleType] = RuleType.FONT_FACE

    style: StyleDeclaration

    def __post_init__(self) -> None:
        self.css_text = f"@font-face {{ {self.style.css_text} }}"


@dataclass(kw_only=True)
class CSSPageRule(CSSRule):
    type: ClassVar[RuleType] = RuleType.PAGE

    selector_text: str
    style: StyleDeclaration

    def __post_init__(self) -> None:
        prelude = f"@page {self.selector_text}" if self.selector_text else "@page"
        self.css_text = f"{prelude} {{ {self.style.css_text} }}"


@dataclass(kw_only=True)
class CSSImportRule(CSSRule):
    """``@import``; ``css_text`` is the statement as written."""

    type: ClassVar[RuleType] = RuleType.IMPORT

    href: str
    media: MediaList = field(default_factory=MediaList)
    style_sheet: CSSStyleSheet | None = None


@dataclass(kw_only=True)
class CSSNamespaceRule(CSSRule):
    """``@namespace``; ``css_text`` is the statement as written."""

    type: ClassVar[RuleType] = RuleType.NAMESPACE

    namespace_uri: str
    prefix: str = ""


@dataclass(kw_only=True)
class CSSCustomMediaRule(CSSRule):
    type: ClassVar[RuleType] = RuleType.CUSTOM_MEDIA

    name: str
    media: MediaList

    def __post_init__(self) -> None:
        self.css_text = f"@custom-media {self.name} {self.media.media_text}"


@dataclass(kw_only=True)
class CSSCharsetRule(CSSRule):
    """Read to record the encoding; never stored in a rule list."""

    type: ClassVar[RuleType] = RuleType.CHARSET

    encoding: str

    def __post_init__(self) -> None:
        self.css_text = f'@charset "{self.encoding}";'


@dataclass
class Comment:
    """A ``/* ... */`` comment, skipped between rules and declarations."""

    text: str
    position: Position | None = None

    type = "comment"


@dataclass
class CSSStyleSheet:
    """Root of a parsed tree."""

    css_rules: RuleList = field(default_factory=RuleList)
    media: MediaList = field(default_factory=MediaList)
    owner_node: Any = field(default=None, compare=False, repr=False)
    encoding: str | None = None
    errors: list[CSSParseError] = field(default_factory=list, compare=False)
    disabled: bool = False
    href: str | None = None
    title: str | None = None
    owner_rule: CSSRule | None = None
    parent_style_sheet: CSSStyleSheet | None = None

    type: ClassVar[str] = "text/css"

    def walk(self) -> Iterator[CSSRule]:
        """Yield every rule of the tree, parents before their children."""
        stack = list(reversed(self.css_rules.rules))
        while stack:
            rule = stack.pop()
            yield rule
            if isinstance(rule, CSSGroupingRule):
                stack.extend(reversed(rule.css_rules.rules))
