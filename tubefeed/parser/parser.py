"""Response parser and the shape catalog registry."""

import logging
from dataclasses import dataclass, field
from typing import Any

from tubefeed.constants import RENDERER_SUFFIX
from tubefeed.errors import InvalidStructureError, TypeMismatchError
from tubefeed.parser.helpers import ObservedArray, SuperParsedResult, YTNode
from tubefeed.parser.memo import Memo
from tubefeed.utils import sanitize_shape_key

logger = logging.getLogger(__name__)

_SHAPES: dict[str, type[YTNode]] = {}

# Top-level keys the parser understands; a response must carry at least one
TOP_LEVEL_ANCHORS = (
    "contents",
    "header",
    "metadata",
    "microformat",
    "sidebar",
    "onResponseReceivedActions",
    "onResponseReceivedEndpoints",
    "onResponseReceivedCommands",
    "continuationContents",
)


def register_shape(cls: type[YTNode]) -> type[YTNode]:
    """Class decorator adding a shape to the catalog under its ``type`` tag."""
    existing = _SHAPES.get(cls.type)
    if existing is not None and existing is not cls:
        logger.warning("Shape %s re-registered: %s replaces %s", cls.type, cls.__name__, existing.__name__)
    _SHAPES[cls.type] = cls
    return cls


def get_shape(tag: str) -> type[YTNode] | None:
    return _SHAPES.get(tag)


def registered_shapes() -> list[str]:
    return sorted(_SHAPES)


class Parser:
    """
    One parse pass.

    Every node the pass builds is filed in ``self.memo``. Shapes build their
    children through the parser they were handed, so a whole region of the
    response ends up in one memo.
    """

    def __init__(self) -> None:
        self.memo = Memo()

    def classify(self, data: Any) -> tuple[type[YTNode], Any] | None:
        """Find the shape class of a raw ``{"<key>Renderer": {...}}`` node."""
        if not isinstance(data, dict) or not data:
            return None
        raw_key = next(iter(data))
        tag = sanitize_shape_key(raw_key, RENDERER_SUFFIX)
        shape = _SHAPES.get(tag)
        if shape is None:
            logger.debug("Unknown shape %s (raw key %s), skipping", tag, raw_key)
            return None
        return shape, data[raw_key]

    def parse_item(self, data: Any, *valid_types: type[YTNode]) -> YTNode | None:
        """Build the node for one raw node, or None if it is unknown or not one of ``valid_types``."""
        classified = self.classify(data)
        if classified is None:
            return None
        shape, body = classified
        if valid_types and not issubclass(shape, valid_types):
            logger.debug("Shape %s is not one of %s, skipping", shape.type, [t.type for t in valid_types])
            return None
        node = shape(body if isinstance(body, dict) else {}, self)
        self.memo.add(node)
        return node

    def parse_array(self, data: Any, *valid_types: type[YTNode]) -> ObservedArray:
        if data is None:
            return ObservedArray()
        if not isinstance(data, list):
            raise TypeMismatchError(f"Expected a list of nodes, got {type(data).__name__}")
        nodes = (self.parse_item(item, *valid_types) for item in data)
        return ObservedArray(node for node in nodes if node is not None)

    def parse(self, data: Any, *valid_types: type[YTNode]) -> SuperParsedResult | None:
        """Parse a field holding either one node or a list of nodes."""
        if data is None:
            return None
        if isinstance(data, list):
            return SuperParsedResult(self.parse_array(data, *valid_types))
        return SuperParsedResult(self.parse_item(data, *valid_types))


def _empty_memo() -> Memo:
    return Memo().freeze()


@dataclass(frozen=True)
class ParsedResponse:
    """Parsed top-level regions of a response, each with the memo built while parsing it."""

    contents: SuperParsedResult | None = None
    contents_memo: Memo = field(default_factory=_empty_memo)
    header: SuperParsedResult | None = None
    header_memo: Memo = field(default_factory=_empty_memo)
    metadata: SuperParsedResult | None = None
    microformat: YTNode | None = None
    sidebar: YTNode | None = None
    on_response_received_actions: ObservedArray | None = None
    on_response_received_actions_memo: Memo = field(default_factory=_empty_memo)
    on_response_received_endpoints: ObservedArray | None = None
    on_response_received_endpoints_memo: Memo = field(default_factory=_empty_memo)
    on_response_received_commands: ObservedArray | None = None
    on_response_received_commands_memo: Memo = field(default_factory=_empty_memo)
    continuation_contents: YTNode | None = None
    continuation_contents_memo: Memo = field(default_factory=_empty_memo)


def _parse_region(data: Any) -> tuple[SuperParsedResult | None, Memo]:
    parser = Parser()
    return parser.parse(data), parser.memo.freeze()


def _parse_array_region(data: Any) -> tuple[ObservedArray | None, Memo]:
    if data is None:
        return None, Memo().freeze()
    parser = Parser()
    return parser.parse_array(data), parser.memo.freeze()


def _parse_item_region(data: Any) -> tuple[YTNode | None, Memo]:
    parser = Parser()
    return parser.parse_item(data), parser.memo.freeze()


def parse_response(data: Any) -> ParsedResponse:
    """
    Parse a raw response into its regions.

    Args:
        data: Decoded JSON body of an endpoint call.

    Returns:
        ParsedResponse with one memo per region.

    Raises:
        InvalidStructureError: If ``data`` is not an object or carries none of
            the known top-level anchors.
    """
    if not isinstance(data, dict):
        raise InvalidStructureError(
            f"Expected a JSON object, got {type(data).__name__}", {"type": type(data).__name__}
        )
    if not any(key in data for key in TOP_LEVEL_ANCHORS):
        raise InvalidStructureError(
            "Response has none of the expected top-level keys",
            {"keys": sorted(data), "expected": list(TOP_LEVEL_ANCHORS)},
        )

    contents, contents_memo = _parse_region(data.get("contents"))
    header, header_memo = _parse_region(data.get("header"))
    metadata, _ = _parse_region(data.get("metadata"))
    microformat, _ = _parse_item_region(data.get("microformat"))
    sidebar, _ = _parse_item_region(data.get("sidebar"))
    actions, actions_memo = _parse_array_region(data.get("onResponseReceivedActions"))
    endpoints, endpoints_memo = _parse_array_region(data.get("onResponseReceivedEndpoints"))
    commands, commands_memo = _parse_array_region(data.get("onResponseReceivedCommands"))
    continuation, continuation_memo = _parse_item_region(data.get("continuationContents"))

    parsed = ParsedResponse(
        contents=contents,
        contents_memo=contents_memo,
        header=header,
        header_memo=header_memo,
        metadata=metadata,
        microformat=microformat,
        sidebar=sidebar,
        on_response_received_actions=actions,
        on_response_received_actions_memo=actions_memo,
        on_response_received_endpoints=endpoints,
        on_response_received_endpoints_memo=endpoints_memo,
        on_response_received_commands=commands,
        on_response_received_commands_memo=commands_memo,
        continuation_contents=continuation,
        continuation_contents_memo=continuation_memo,
    )
    logger.debug(
        "Parsed response: %d content shapes, %d header shapes, %d actions",
        sum(len(nodes) for nodes in contents_memo.values()),
        sum(len(nodes) for nodes in header_memo.values()),
        len(actions or ()),
    )
    return parsed
