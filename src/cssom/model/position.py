"""Source location model: Location and Position dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, order=True)
class Location:
    """A 1-based line/column pair inside the parsed source."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Position:
    """The span a node occupies in its source text.

    ``end`` is taken right after the node's own content, before the trailing
    whitespace the parser swallows next.
    """

    start: Location
    end: Location
    source: str | None = None
    content: str = field(default="", repr=False)

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError("Position end must not precede its start")

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"
