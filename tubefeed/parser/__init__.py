"""Response parsing: navigable nodes, the shape registry and the shape catalog."""

from tubefeed.parser.helpers import Maybe, ObservedArray, SuperParsedResult, YTNode
from tubefeed.parser.memo import Memo
from tubefeed.parser.parser import (
    ParsedResponse,
    Parser,
    get_shape,
    parse_response,
    register_shape,
    registered_shapes,
)
from tubefeed.parser import classes  # noqa: F401  (registers the catalog)

__all__ = [
    "Maybe",
    "Memo",
    "ObservedArray",
    "ParsedResponse",
    "Parser",
    "SuperParsedResult",
    "YTNode",
    "get_shape",
    "parse_response",
    "register_shape",
    "registered_shapes",
]
