from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ParserOptions:
    source: str | None = None  # label used in positions and error messages
    silent: bool = False  # record errors instead of raising the first one
    owner_node: Any = None  # handed through to CSSStyleSheet.owner_node
