"""Navigable node primitives.

Every parsed shape is a ``YTNode``. Values pulled off a node (or off raw JSON)
are wrapped in ``Maybe`` so a call site can walk as deep as it likes and only
pay for a missing key at the point where it insists on a concrete type.
Parsed fields that may hold one node or many are ``SuperParsedResult``s, and
sequences of nodes are ``ObservedArray``s.
"""

import logging
from typing import Any, ClassVar

from tubefeed.errors import TypeMismatchError

logger = logging.getLogger(__name__)

_MISSING = object()


def _type_names(types: tuple[type, ...]) -> str:
    return ", ".join(getattr(t, "type", t.__name__) for t in types)


class _FrozenAfterInit(type):
    """Metaclass that locks a node's attributes once its constructor returns."""

    def __call__(cls, *args, **kwargs):
        instance = super().__call__(*args, **kwargs)
        object.__setattr__(instance, "_frozen", True)
        return instance


class YTNode(metaclass=_FrozenAfterInit):
    """Base class of every shape. ``type`` is the shape tag."""

    type: ClassVar[str] = "YTNode"
    _frozen = False

    def __setattr__(self, name: str, value: Any) -> None:
        if self._frozen:
            raise AttributeError(f"{self.type} is immutable, cannot set '{name}'")
        object.__setattr__(self, name, value)

    @classmethod
    def tags(cls) -> list[str]:
        """Shape tags of this class and every shape class it derives from, most specific first."""
        return [
            klass.__dict__["type"]
            for klass in cls.__mro__
            if issubclass(klass, YTNode) and klass is not YTNode and "type" in klass.__dict__
        ]

    def is_(self, *types: "type[YTNode]") -> bool:
        return isinstance(self, types)

    def as_(self, *types: "type[YTNode]") -> "YTNode | None":
        """Return this node if it matches one of ``types`` (checked in order), else None."""
        for candidate in types:
            if isinstance(self, candidate):
                return self
        return None

    def has_key(self, name: str) -> bool:
        return not name.startswith("_") and hasattr(self, name)

    def key(self, name: str) -> "Maybe":
        if not self.has_key(name):
            return Maybe(None)
        return Maybe(getattr(self, name))

    def to_dict(self) -> dict[str, Any]:
        return {k: v for k, v in vars(self).items() if not k.startswith("_")}

    def __repr__(self) -> str:
        return f"<{self.type}>"


class ObservedArray(list):
    """List of nodes with shape-aware lookups. Lookups never mutate the list."""

    @staticmethod
    def _matches(item: Any, rules: dict[str, Any]) -> bool:
        for name, expected in rules.items():
            if isinstance(item, dict):
                actual = item.get(name, _MISSING)
            else:
                actual = getattr(item, name, _MISSING)
            if actual is _MISSING or actual != expected:
                return False
        return True

    def get(self, **rules: Any) -> Any:
        """Return the first element whose fields equal every rule, or None."""
        for item in self:
            if self._matches(item, rules):
                return item
        return None

    def get_all(self, **rules: Any) -> "ObservedArray":
        return ObservedArray(item for item in self if self._matches(item, rules))

    def filter_type(self, *types: type[YTNode]) -> "ObservedArray":
        return ObservedArray(item for item in self if isinstance(item, types))

    def first_of_type(self, *types: type[YTNode]) -> YTNode | None:
        for item in self:
            if isinstance(item, types):
                return item
        return None

    def as_(self, *types: type[YTNode]) -> "ObservedArray":
        """Assert every element is one of ``types``."""
        for item in self:
            if not isinstance(item, types):
                raise TypeMismatchError(
                    f"Expected every item to be one of {_type_names(types)}, "
                    f"got {getattr(item, 'type', type(item).__name__)}",
                    {"expected": [t.__name__ for t in types]},
                )
        return ObservedArray(self)

    def without(self, index: int) -> "ObservedArray":
        """Return a copy without the element at ``index``."""
        copy = ObservedArray(self)
        del copy[index]
        return copy


class SuperParsedResult:
    """Result of parsing a field that may be a single node, a node array or nothing."""

    __slots__ = ("_result",)

    def __init__(self, result: YTNode | ObservedArray | None):
        self._result = result

    def is_null(self) -> bool:
        return self._result is None

    def is_item(self) -> bool:
        return isinstance(self._result, YTNode)

    def is_array(self) -> bool:
        return isinstance(self._result, ObservedArray)

    def item(self) -> YTNode | None:
        if self.is_array():
            raise TypeMismatchError("Expected a single item, got an array")
        return self._result  # type: ignore[return-value]

    def array(self) -> ObservedArray:
        if not self.is_array():
            raise TypeMismatchError(
                f"Expected an array, got {'nothing' if self.is_null() else 'a single item'}"
            )
        return self._result  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"SuperParsedResult({self._result!r})"


class Maybe:
    """Absence-tolerant wrapper around a raw or parsed value."""

    __slots__ = ("_value",)

    def __init__(self, value: Any = None):
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    def is_none(self) -> bool:
        return self._value is None

    def is_present(self) -> bool:
        return self._value is not None

    def key(self, name: str) -> "Maybe":
        value = self._value
        if isinstance(value, dict):
            return Maybe(value.get(name))
        if isinstance(value, YTNode):
            return value.key(name)
        return Maybe(None)

    def _expect(self, kind: type | tuple[type, ...], label: str) -> Any:
        if not isinstance(self._value, kind):
            raise TypeMismatchError(
                f"Expected {label}, got {'nothing' if self._value is None else type(self._value).__name__}"
            )
        return self._value

    def string(self) -> str:
        return self._expect(str, "a string")

    def number(self) -> int | float:
        if isinstance(self._value, bool):
            raise TypeMismatchError("Expected a number, got bool")
        return self._expect((int, float), "a number")

    def boolean(self) -> bool:
        return self._expect(bool, "a boolean")

    def any(self) -> Any:
        return self._value

    def array(self) -> ObservedArray:
        value = self._value
        if isinstance(value, SuperParsedResult):
            return value.array()
        if isinstance(value, list):
            return value if isinstance(value, ObservedArray) else ObservedArray(value)
        raise TypeMismatchError(
            f"Expected an array, got {'nothing' if value is None else type(value).__name__}"
        )

    def node(self) -> YTNode:
        return self._expect(YTNode, "a node")

    def node_of_type(self, *types: type[YTNode]) -> YTNode:
        node = self.node()
        matched = node.as_(*types)
        if matched is None:
            raise TypeMismatchError(f"Expected one of {_type_names(types)}, got {node.type}")
        return matched

    def parsed(self) -> SuperParsedResult:
        return self._expect(SuperParsedResult, "a parsed result")

    def __repr__(self) -> str:
        return f"Maybe({self._value!r})"
