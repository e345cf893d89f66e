"""Ordered collections of the object model: declarations, media and rules."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from cssom.model.position import Position

if TYPE_CHECKING:
    from cssom.model.rules import CSSRule

T = TypeVar("T")


class _Indexed(Generic[T]):
    """Sequence behaviour shared by the list types.

    Subclasses keep their entries in ``self._items``.
    """

    _items: list[T] | tuple[T, ...]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    @property
    def length(self) -> int:
        return len(self._items)

    def item(self, index: int) -> T | None:
        """Return the entry at *index*, or None when it is out of bounds."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None


@dataclass
class Declaration:
    """A single ``property: value`` pair inside a declaration block."""

    property: str
    value: str
    position: Position | None = None

    type = "declaration"

    @property
    def css_text(self) -> str:
        return f"{self.property}: {self.value}"


class StyleDeclaration(_Indexed[Declaration]):
    """The declarations of one block, in source order.

    Repeated properties are all kept.  :meth:`get_property_value` answers with
    the last occurrence.
    """

    def __init__(self, declarations: list[Declaration] | None = None) -> None:
        self._items = list(declarations or [])
        self._last: dict[str, str] = {d.property: d.value for d in self._items}
        self.css_text = "; ".join(d.css_text for d in self._items)

    @property
    def declarations(self) -> list[Declaration]:
        return list(self._items)

    def item(self, index: int) -> str | None:  # type: ignore[override]
        """Return the property name at *index*, or None when out of bounds."""
        declaration = super().item(index)
        return declaration.property if declaration is not None else None

    def get_property_value(self, name: str) -> str:
        """Return the last value declared for *name*, or an empty string."""
        return self._last.get(name, "")

    def as_dict(self) -> dict[str, str]:
        return dict(self._last)

    def __contains__(self, name: object) -> bool:
        return name in self._last

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyleDeclaration):
            return NotImplemented
        return [(d.property, d.value) for d in self._items] == [
            (d.property, d.value) for d in other._items
        ]

    def __repr__(self) -> str:
        return f"StyleDeclaration({self.css_text!r})"


def _normalize_query(query: str) -> str:
    return ": ".join(part.strip() for part in query.strip().split(":"))


@dataclass(frozen=True)
class MediaList(_Indexed[str]):
    """Normalized media queries, fixed once built."""

    queries: tuple[str, ...] = ()

    @property
    def _items(self) -> tuple[str, ...]:  # type: ignore[override]
        return self.queries

    @classmethod
    def from_text(cls, text: str | None) -> MediaList:
        """Split *text* on commas and normalize spacing around colons.

        ``"screen and (min-width:100px),print"`` becomes
        ``("screen and (min-width: 100px)", "print")``.  Blank text gives an
        empty list.
        """
        text = (text or "").strip()
        if not text:
            return cls()
        return cls(tuple(_normalize_query(piece) for piece in text.split(",")))

    @property
    def media_text(self) -> str:
        return ", ".join(self.queries)

    def __str__(self) -> str:
        return self.media_text


@dataclass
class RuleList(_Indexed["CSSRule"]):
    """Rules of a stylesheet or grouping rule, in source order."""

    rules: list[CSSRule] = field(default_factory=list)

    @property
    def _items(self) -> list[CSSRule]:  # type: ignore[override]
        return self.rules
