"""Selector list splitting shared by the parser and the rule model."""

from __future__ import annotations

_OPENERS = "(["
_CLOSERS = ")]"
_QUOTES = "\"'"


def split_selectors(text: str) -> list[str]:
    """Split a selector list on its top-level commas.

    Commas inside quoted strings, parentheses or attribute brackets belong to
    the selector they appear in, at any nesting depth::

        >>> split_selectors(':is(.a, :not(.b)), d[foo="x, y"]')
        [':is(.a, :not(.b))', 'd[foo="x, y"]']

    Pieces are trimmed and empty pieces dropped.
    """
    pieces: list[str] = []
    current: list[str] = []
    depth = 0
    quote: str | None = None
    escaped = False

    for char in text:
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif quote is not None:
            if char == quote:
                quote = None
        elif char in _QUOTES:
            quote = char
        elif char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth = max(depth - 1, 0)
        elif char == "," and depth == 0:
            pieces.append("".join(current))
            current = []
            continue
        current.append(char)
    pieces.append("".join(current))

    return [piece.strip() for piece in pieces if piece.strip()]
