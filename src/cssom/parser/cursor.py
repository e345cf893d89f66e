"""Position-tracked consumption of CSS source text."""

from __future__ import annotations

import logging
import re
from typing import Callable, TypeVar, Union

from cssom.config import ParserOptions
from cssom.model.position import Location, Position
from cssom.parser.errors import CSSParseError, StructuralError

__all__ = ["Cursor", "Failure", "Outcome"]

logger = logging.getLogger("cssom")

N = TypeVar("N")

_WHITESPACE_RE = re.compile(r"\s*")
_OPEN_RE = re.compile(r"\{\s*")
_CLOSE_RE = re.compile(r"\}")


class Failure:
    """Returned by a grammar rule whose required continuation is missing.

    Grammar methods answer with a node, ``None`` when their construct is simply
    not there (the caller may try something else), or a Failure.  A Failure
    must be handed upwards unchanged; it is never a reason to try the next
    alternative.
    """

    __slots__ = ("error",)

    def __init__(self, error: CSSParseError) -> None:
        self.error = error

    def __repr__(self) -> str:
        return f"Failure({self.error.reason!r})"


Outcome = Union[N, None, Failure]


class Cursor:
    """The remaining input of one parse call and where it sits in the source.

    Attributes:
        css: Text not consumed yet.
        line: 1-based line of the next character.
        column: 1-based column of the next character.
        options: Options of the parse call.
        errors: Errors recorded in silent mode, in order.
        encoding: Last encoding named by ``@charset``.
    """

    def __init__(self, css: str, options: ParserOptions | None = None) -> None:
        self.text = css
        self.css = css
        self.line = 1
        self.column = 1
        self.options = options or ParserOptions()
        self.errors: list[CSSParseError] = []
        self.encoding: str | None = None

    # --- consumption ----------------------------------------------------------

    def match(self, pattern: re.Pattern[str]) -> re.Match[str] | None:
        """Consume the prefix of the remaining text matched by *pattern*.

        Nothing changes when the pattern does not match at the very start.
        """
        m = pattern.match(self.css)
        if m is None:
            return None
        self._consume(m.group(0))
        return m

    def skip(self, count: int) -> str:
        """Consume exactly *count* characters and return them."""
        consumed = self.css[:count]
        self._consume(consumed)
        return consumed

    def whitespace(self) -> None:
        self.match(_WHITESPACE_RE)

    def open(self) -> bool:
        """Consume an opening brace and the whitespace after it."""
        return self.match(_OPEN_RE) is not None

    def close(self) -> bool:
        return self.match(_CLOSE_RE) is not None

    def peek(self, offset: int = 0) -> str:
        """Return the character *offset* places ahead, or '' past the end."""
        return self.css[offset : offset + 1]

    @property
    def at_end(self) -> bool:
        return not self.css

    def _consume(self, consumed: str) -> None:
        self.line += consumed.count("\n")
        last_newline = consumed.rfind("\n")
        if last_newline == -1:
            self.column += len(consumed)
        else:
            self.column = len(consumed) - last_newline
        self.css = self.css[len(consumed) :]

    # --- positions ------------------------------------------------------------

    def location(self) -> Location:
        return Location(self.line, self.column)

    def position(self) -> Callable[[N], N]:
        """Snapshot the current location and return the node finalizer.

        The finalizer stamps ``position`` on the node it is given, spanning
        from the snapshot to the current location, then consumes any
        whitespace that follows.
        """
        start = self.location()

        def finish(node: N) -> N:
            node.position = Position(  # type: ignore[attr-defined]
                start=start,
                end=self.location(),
                source=self.options.source,
                content=self.text,
            )
            self.whitespace()
            return node

        return finish

    # --- errors ---------------------------------------------------------------

    def error(
        self, reason: str, kind: type[CSSParseError] = StructuralError
    ) -> Failure:
        """Report *reason* at the current location.

        Raises the error unless the parse is silent, in which case it is
        recorded and a :class:`Failure` is returned for the caller to
        propagate.
        """
        err = kind(
            reason,
            source=self.options.source,
            line=self.line,
            column=self.column,
            css=self.text,
        )
        if not self.options.silent:
            raise err
        logger.warning("CSS parse error: %s", err)
        self.errors.append(err)
        return Failure(err)
