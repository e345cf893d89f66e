"""Parser error types."""

from __future__ import annotations

from typing import Any


class CSSParseError(Exception):
    """Raised when CSS source cannot be parsed.

    In silent mode the parser records these on the stylesheet instead of
    raising them.
    """

    def __init__(
        self,
        reason: str,
        source: str | None = None,
        line: int | None = None,
        column: int | None = None,
        css: str = "",
    ):
        self.reason = reason
        self.source = source
        self.line = line
        self.column = column
        self.css = css
        super().__init__(f"{source or '<unknown>'}:{line}:{column}: {reason}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": type(self).__name__,
            "reason": self.reason,
            "source": self.source,
            "line": self.line,
            "column": self.column,
        }


class StructuralError(CSSParseError):
    """A required ``{``, ``}`` or ``:`` is missing."""


class MissingNameError(CSSParseError):
    """An at-rule that needs an identifier has none."""


class MissingSelectorError(CSSParseError):
    """A style rule has no selector text."""


class UnterminatedCommentError(CSSParseError):
    """A comment was opened and never closed."""
