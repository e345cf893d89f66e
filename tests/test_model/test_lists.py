"""Tests for MediaList, StyleDeclaration and RuleList."""

import pytest

from cssom.model.lists import Declaration, MediaList, RuleList, StyleDeclaration
from cssom.model.position import Location, Position
from cssom.model.rules import CSSStyleRule


# ---------------------------------------------------------------------------
# MediaList
# ---------------------------------------------------------------------------


class TestMediaList:
    def test_split_and_trim(self) -> None:
        media = MediaList.from_text("  screen ,print  ")
        assert media.queries == ("screen", "print")
        assert media.media_text == "screen, print"

    def test_colon_normalized(self) -> None:
        media = MediaList.from_text("(min-width:100px) and (orientation :  landscape)")
        assert media.queries == ("(min-width: 100px) and (orientation: landscape)",)

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_blank_is_empty(self, text: str | None) -> None:
        media = MediaList.from_text(text)
        assert len(media) == 0
        assert media.media_text == ""

    def test_item_bounds(self) -> None:
        media = MediaList.from_text("screen, print")
        assert media.item(0) == "screen"
        assert media.item(1) == "print"
        assert media.item(2) is None
        assert media.item(-1) is None
        assert media.length == 2

    def test_immutable(self) -> None:
        media = MediaList.from_text("screen")
        with pytest.raises(AttributeError):
            media.queries = ("print",)  # type: ignore[misc]

    def test_equality(self) -> None:
        assert MediaList.from_text("a,b") == MediaList(("a", "b"))


# ---------------------------------------------------------------------------
# StyleDeclaration
# ---------------------------------------------------------------------------


class TestStyleDeclaration:
    @pytest.fixture()
    def style(self) -> StyleDeclaration:
        return StyleDeclaration(
            [
                Declaration("color", "red"),
                Declaration("margin", "0"),
                Declaration("color", "blue"),
            ]
        )

    def test_order_and_duplicates(self, style: StyleDeclaration) -> None:
        assert [d.property for d in style] == ["color", "margin", "color"]
        assert len(style) == 3

    def test_css_text(self, style: StyleDeclaration) -> None:
        assert style.css_text == "color: red; margin: 0; color: blue"

    def test_last_wins_lookup(self, style: StyleDeclaration) -> None:
        assert style.get_property_value("color") == "blue"
        assert style.get_property_value("padding") == ""
        assert "margin" in style
        assert "padding" not in style

    def test_as_dict(self, style: StyleDeclaration) -> None:
        assert style.as_dict() == {"color": "blue", "margin": "0"}

    def test_item_returns_property_name(self, style: StyleDeclaration) -> None:
        assert style.item(1) == "margin"
        assert style.item(3) is None

    def test_empty(self) -> None:
        style = StyleDeclaration()
        assert style.css_text == ""
        assert len(style) == 0

    def test_equality_ignores_positions(self) -> None:
        span = Position(Location(1, 1), Location(1, 5))
        a = StyleDeclaration([Declaration("color", "red", span)])
        b = StyleDeclaration([Declaration("color", "red")])
        assert a == b


# ---------------------------------------------------------------------------
# RuleList / Position
# ---------------------------------------------------------------------------


class TestRuleList:
    def test_item_bounds(self) -> None:
        rule = CSSStyleRule(selector_text="a", style=StyleDeclaration())
        rules = RuleList([rule])
        assert rules.item(0) is rule
        assert rules.item(1) is None
        assert rules[0] is rule
        assert list(rules) == [rule]


class TestPosition:
    def test_end_before_start_rejected(self) -> None:
        with pytest.raises(ValueError):
            Position(Location(2, 1), Location(1, 9))

    def test_locations_order_by_line_then_column(self) -> None:
        assert Location(1, 80) < Location(2, 1)
        assert Location(3, 2) < Location(3, 10)

    def test_str(self) -> None:
        assert str(Position(Location(1, 1), Location(2, 3))) == "1:1-2:3"
