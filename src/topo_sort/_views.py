"""Iterators presenting a traversal's results.

Every view drives one `Traversal` and yields one item per step. A cycle is
yielded as a `CycleError` instance (a value, not an exception) as the final
item, so the nodes resolved before it remain available to the caller.
"""

from collections.abc import Hashable, Iterable, Mapping
from typing import Self

from ._errors import CycleError
from ._graph import Traversal


class TopoSortIter[T: Hashable]:
    """Iterator over ``(node, dependencies)`` pairs in dependency order.

    Both items are the objects held by the source mapping, which must not be
    modified while the iterator is in use.
    """

    __slots__ = ("_inner", "_node_depends")

    def __init__(self, node_depends: Mapping[T, frozenset[T]]) -> None:
        self._inner: Traversal[T] = Traversal(node_depends)
        self._node_depends = node_depends

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> tuple[T, frozenset[T]] | CycleError:
        result = self._inner.step()
        if result is None:
            raise StopIteration
        if isinstance(result, CycleError):
            return result
        node = self._inner.node(result)
        return node, self._node_depends[node]

    def __length_hint__(self) -> int:
        return self._inner.remaining


class TopoSortNodeIter[T: Hashable]:
    """Iterator over nodes only, in dependency order."""

    __slots__ = ("_inner",)

    def __init__(self, node_depends: Mapping[T, frozenset[T]]) -> None:
        self._inner: Traversal[T] = Traversal(node_depends)

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> T | CycleError:
        result = self._inner.step()
        if result is None:
            raise StopIteration
        if isinstance(result, CycleError):
            return result
        return self._inner.node(result)

    def __length_hint__(self) -> int:
        return self._inner.remaining


class IntoTopoSortIter[T: Hashable]:
    """Consuming iterator that hands out the mapping's entries in dependency order.

    The iterator owns the mapping it was given: each yielded
    ``(node, dependencies)`` entry is removed from it, and the entries left
    when a cycle is found are discarded.
    """

    __slots__ = ("_inner", "_node_depends")

    def __init__(self, node_depends: dict[T, frozenset[T]]) -> None:
        self._inner: Traversal[T] = Traversal(node_depends)
        self._node_depends = node_depends

    @property
    def unresolved(self) -> dict[T, frozenset[T]]:
        """Entries not handed out yet (empty once a cycle has been reported)."""
        return dict(self._node_depends)

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> tuple[T, frozenset[T]] | CycleError:
        result = self._inner.step()
        if result is None:
            raise StopIteration
        if isinstance(result, CycleError):
            self._node_depends.clear()
            return result
        node = self._inner.node(result)
        return node, self._node_depends.pop(node)

    def __length_hint__(self) -> int:
        return self._inner.remaining


def collect[I](results: Iterable[I | CycleError]) -> list[I]:
    """Drain a view into a list.

    Raises:
        CycleError: On the first cycle reported; items gathered so far are dropped.

    """
    items: list[I] = []
    for result in results:
        if isinstance(result, CycleError):
            raise result
        items.append(result)
    return items
