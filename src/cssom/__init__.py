"""cssom - parse CSS source into a position-annotated CSS object model tree."""

__version__ = "0.1.0"

from cssom.config import ParserOptions  # noqa: E402
from cssom.model import CSSStyleSheet, RuleType  # noqa: E402
from cssom.parser import CSSParseError, parse_css  # noqa: E402

parse = parse_css

__all__ = [
    "CSSParseError",
    "CSSStyleSheet",
    "ParserOptions",
    "RuleType",
    "__version__",
    "parse",
    "parse_css",
]
