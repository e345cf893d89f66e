from cssom.parser.cursor import Cursor, Failure
from cssom.parser.errors import (
    CSSParseError,
    MissingNameError,
    MissingSelectorError,
    StructuralError,
    UnterminatedCommentError,
)
from cssom.parser.grammar import CSSParser, parse_css

__all__ = [
    "CSSParseError",
    "CSSParser",
    "Cursor",
    "Failure",
    "MissingNameError",
    "MissingSelectorError",
    "StructuralError",
    "UnterminatedCommentError",
    "parse_css",
]
