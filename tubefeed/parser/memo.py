"""Per-parse registry of shape instances, keyed by shape tag."""

from collections.abc import Iterable, Mapping

from tubefeed.parser.helpers import ObservedArray, YTNode

ShapeRef = type[YTNode] | str


def _tag(ref: ShapeRef) -> str:
    return ref if isinstance(ref, str) else ref.type


class Memo(dict[str, tuple[YTNode, ...]]):
    """
    Shape tag -> instances, in the order the parser finished building them.

    A node is filed under every tag of its class lineage, so one instance can
    appear under several tags. A memo is filled by exactly one parse pass and
    frozen afterwards; ``seeded`` and ``concat`` build new frozen memos.
    """

    _frozen = False

    def _check_writable(self) -> None:
        if self._frozen:
            raise TypeError("Memo is read-only once its parse has finished")

    def __setitem__(self, tag: str, nodes: Iterable[YTNode]) -> None:
        self._check_writable()
        super().__setitem__(tag, tuple(nodes))

    def __delitem__(self, tag: str) -> None:
        self._check_writable()
        super().__delitem__(tag)

    def __ior__(self, other):
        self.update(other)
        return self

    def update(self, *args, **kwargs) -> None:
        self._check_writable()
        for tag, nodes in dict(*args, **kwargs).items():
            self[tag] = nodes

    def setdefault(self, tag, default=()):
        self._check_writable()
        if tag not in self:
            self[tag] = default
        return self[tag]

    def pop(self, *args):
        self._check_writable()
        return super().pop(*args)

    def popitem(self):
        self._check_writable()
        return super().popitem()

    def clear(self) -> None:
        self._check_writable()
        super().clear()

    def freeze(self) -> "Memo":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def add(self, node: YTNode) -> None:
        for tag in type(node).tags():
            self[tag] = self.get(tag, ()) + (node,)

    def get_type(self, *types: ShapeRef) -> ObservedArray:
        """Instances filed under any of ``types``, grouped by type in argument order, without duplicates."""
        seen: set[int] = set()
        result = ObservedArray()
        for ref in types:
            for node in self.get(_tag(ref), ()):
                if id(node) not in seen:
                    seen.add(id(node))
                    result.append(node)
        return result

    def first_of_type(self, *types: ShapeRef) -> YTNode | None:
        found = self.get_type(*types)
        return found[0] if found else None

    def has_type(self, *types: ShapeRef) -> bool:
        return any(self.get(_tag(ref)) for ref in types)

    def seeded(self, seed: Mapping[str, Iterable[YTNode]] | None) -> "Memo":
        """Frozen copy of this memo with each seeded tag's entries replaced by the given ones."""
        memo = Memo(self)
        for tag, nodes in (seed or {}).items():
            memo[tag] = nodes
        return memo.freeze()

    @classmethod
    def concat(cls, *memos: "Memo | None") -> "Memo":
        merged = cls()
        for memo in memos:
            if not memo:
                continue
            for tag, nodes in memo.items():
                merged[tag] = merged.get(tag, ()) + tuple(nodes)
        return merged.freeze()
