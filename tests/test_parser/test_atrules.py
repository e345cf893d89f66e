"""Tests for the at-rule grammars."""

import pytest

from cssom.model.rules import (
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
    CSSStyleRule,
    CSSSupportsRule,
    RuleType,
)
from cssom.parser import parse_css


def _only(css: str):
    sheet = parse_css(css)
    assert len(sheet.css_rules) == 1
    return sheet.css_rules[0]


# ---------------------------------------------------------------------------
# @media
# ---------------------------------------------------------------------------


class TestMedia:
    def test_media_with_one_rule(self) -> None:
        rule = _only("@media screen{a{color:red}}")
        assert isinstance(rule, CSSMediaRule)
        assert rule.type is RuleType.MEDIA
        assert list(rule.media) == ["screen"]
        assert len(rule.css_rules) == 1
        child = rule.css_rules[0]
        assert isinstance(child, CSSStyleRule)
        assert len(child.style) == 1
        assert (child.style[0].property, child.style[0].value) == ("color", "red")

    def test_media_list_normalized(self) -> None:
        rule = _only("@media screen and (min-width:600px) ,  print { }")
        assert list(rule.media) == ["screen and (min-width: 600px)", "print"]
        assert rule.condition_text == "screen and (min-width: 600px), print"

    def test_css_text_is_shallow(self) -> None:
        rule = _only("@media print { a { color: red } }")
        assert rule.css_text == "@media print {  }"

    def test_nested_at_rules(self) -> None:
        rule = _only("@media print { @supports (display: grid) { a { display: grid } } }")
        inner = rule.css_rules[0]
        assert isinstance(inner, CSSSupportsRule)
        assert isinstance(inner.css_rules[0], CSSStyleRule)

    def test_empty_media(self) -> None:
        rule = _only("@media print {}")
        assert len(rule.css_rules) == 0


# ---------------------------------------------------------------------------
# @import
# ---------------------------------------------------------------------------


class TestImport:
    @pytest.mark.parametrize(
        "css, media",
        [
            ("@import url(foo.css);", []),
            ('@import "foo.css";', []),
            ("@import 'foo.css' screen;", ["screen"]),
            ("@import url('foo.css');", []),
            ('@import url("foo.css") print, screen;', ["print", "screen"]),
        ],
    )
    def test_href_and_media(self, css: str, media: list[str]) -> None:
        rule = _only(css)
        assert isinstance(rule, CSSImportRule)
        assert rule.href == "foo.css"
        assert list(rule.media) == media

    def test_css_text_is_statement(self) -> None:
        rule = _only("@import 'foo.css' screen;")
        assert rule.css_text == "@import 'foo.css' screen;"

    def test_style_sheet_not_loaded(self) -> None:
        assert _only("@import 'foo.css';").style_sheet is None


# ---------------------------------------------------------------------------
# @namespace
# ---------------------------------------------------------------------------


class TestNamespace:
    def test_prefixed_url(self) -> None:
        rule = _only("@namespace svg url(http://www.w3.org/2000/svg);")
        assert isinstance(rule, CSSNamespaceRule)
        assert rule.prefix == "svg"
        assert rule.namespace_uri == "http://www.w3.org/2000/svg"

    @pytest.mark.parametrize(
        "css",
        [
            '@namespace "http://example.com/ns";',
            "@namespace 'http://example.com/ns';",
            "@namespace url('http://example.com/ns');",
            '@namespace url("http://example.com/ns");',
        ],
    )
    def test_default_namespace_forms(self, css: str) -> None:
        rule = _only(css)
        assert rule.prefix == ""
        assert rule.namespace_uri == "http://example.com/ns"
        assert rule.css_text == css


# ---------------------------------------------------------------------------
# @keyframes
# ---------------------------------------------------------------------------


class TestKeyframes:
    def test_keyframes(self) -> None:
        rule = _only("@keyframes fade { from { opacity: 0 } 50% { opacity: .5 } to { opacity: 1 } }")
        assert isinstance(rule, CSSKeyframesRule)
        assert rule.name == "fade"
        assert rule.vendor == ""
        assert [k.key_text for k in rule.css_rules] == ["0%", "50%", "100%"]
        assert all(isinstance(k, CSSKeyframeRule) for k in rule.css_rules)
        assert rule.css_text == "@keyframes fade {  }"

    def test_key_list(self) -> None:
        rule = _only("@keyframes k { from, 50.5% ,to { top: 0 } }")
        frame = rule.css_rules[0]
        assert frame.key_text == "0%, 50.5%, 100%"
        assert frame.css_text == "0%, 50.5%, 100% { top: 0 }"

    def test_vendor_prefix(self) -> None:
        rule = _only("@-webkit-keyframes pulse { 0% { top: 0 } }")
        assert rule.vendor == "-webkit-"
        assert rule.name == "pulse"

    def test_comments_inside(self) -> None:
        rule = _only("@keyframes k { /* a */ from { top: 0 } /* b */ to { top: 1px } }")
        assert len(rule.css_rules) == 2


# ---------------------------------------------------------------------------
# Other grouping rules
# ---------------------------------------------------------------------------


class TestSupports:
    def test_condition(self) -> None:
        rule = _only("@supports (display: grid) and (not (display: inline-grid)) { a { b: c } }")
        assert isinstance(rule, CSSSupportsRule)
        assert rule.condition_text == "(display: grid) and (not (display: inline-grid))"
        assert rule.css_text == (
            "@supports (display: grid) and (not (display: inline-grid)) {  }"
        )
        assert len(rule.css_rules) == 1


class TestDocument:
    def test_vendor_document(self) -> None:
        rule = _only("@-moz-document url-prefix() { a { color: red } }")
        assert isinstance(rule, CSSDocumentRule)
        assert rule.vendor == "-moz-"
        assert rule.condition_text == "url-prefix()"
        assert len(rule.css_rules) == 1

    def test_plain_document(self) -> None:
        rule = _only("@document domain(example.com) { }")
        assert rule.vendor == ""
        assert rule.condition_text == "domain(example.com)"


class TestHost:
    def test_host(self) -> None:
        rule = _only("@host { :scope { color: red } }")
        assert isinstance(rule, CSSHostRule)
        assert rule.type is RuleType.HOST
        assert rule.css_rules[0].selector_text == ":scope"


# ---------------------------------------------------------------------------
# Declaration-block at-rules
# ---------------------------------------------------------------------------


class TestPage:
    def test_page_with_selector(self) -> None:
        rule = _only("@page :first { margin: 1in; }")
        assert isinstance(rule, CSSPageRule)
        assert rule.selector_text == ":first"
        assert rule.style.get_property_value("margin") == "1in"
        assert rule.css_text == "@page :first { margin: 1in }"

    def test_page_without_selector(self) -> None:
        rule = _only("@page { size: A4 }")
        assert rule.selector_text == ""
        assert rule.css_text == "@page { size: A4 }"


class TestFontFace:
    def test_font_face(self) -> None:
        rule = _only('@font-face { font-family: "Icons"; src: url(icons.woff) format("woff") }')
        assert isinstance(rule, CSSFontFaceRule)
        assert rule.style.get_property_value("font-family") == '"Icons"'
        assert rule.style.get_property_value("src") == 'url(icons.woff) format("woff")'
        assert rule.css_text.startswith("@font-face { font-family")


# ---------------------------------------------------------------------------
# @custom-media and @charset
# ---------------------------------------------------------------------------


class TestCustomMedia:
    def test_custom_media(self) -> None:
        rule = _only("@custom-media --small-viewport (max-width:30em);")
        assert isinstance(rule, CSSCustomMediaRule)
        assert rule.name == "--small-viewport"
        assert list(rule.media) == ["(max-width: 30em)"]
        assert rule.css_text == "@custom-media --small-viewport (max-width: 30em)"


class TestCharset:
    def test_charset_not_in_rules(self) -> None:
        sheet = parse_css('@charset "utf-8"; a {}')
        assert len(sheet.css_rules) == 1
        assert sheet.encoding == "utf-8"

    def test_single_quotes(self) -> None:
        assert parse_css("@charset 'iso-8859-15';").encoding == "iso-8859-15"

    def test_last_charset_wins(self) -> None:
        sheet = parse_css('@charset "a"; @charset "b";')
        assert sheet.encoding == "b"
        assert len(sheet.css_rules) == 0

    def test_no_charset(self) -> None:
        assert parse_css("a {}").encoding is None


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


class TestDispatch:
    def test_mixed_stylesheet_order(self) -> None:
        css = (
            "@import 'a.css';"
            "@namespace 'ns';"
            "@custom-media --m print;"
            "a { b: c }"
            "@media print {}"
            "@font-face { font-family: x }"
        )
        kinds = [rule.type for rule in parse_css(css).css_rules]
        assert kinds == [
            RuleType.IMPORT,
            RuleType.NAMESPACE,
            RuleType.CUSTOM_MEDIA,
            RuleType.STYLE,
            RuleType.MEDIA,
            RuleType.FONT_FACE,
        ]

    def test_unknown_at_rule_parses_as_style_rule(self) -> None:
        rule = _only("@unknown foo { a: b }")
        assert isinstance(rule, CSSStyleRule)
        assert rule.selector_text == "@unknown foo"
