"""Dependency store: the collection of nodes and what each depends on."""

from __future__ import annotations

import copy
from collections.abc import Hashable, Iterable, Mapping, Sequence
from typing import TYPE_CHECKING

from ._views import IntoTopoSortIter, TopoSortIter, TopoSortNodeIter, collect

if TYPE_CHECKING:
    from collections.abc import Set as AbstractSet


class TopoSort[T: Hashable]:
    """A mapping from each node to the set of nodes it depends on.

    Sorting is lazy: nothing is computed until one of the views (`iter`,
    `nodes`, `into_iter`) or eager forms (`try_vec`, `try_owned_vec`) is
    requested, and each request is an independent pass over the current
    contents.

    Dependencies that are not themselves nodes of the store, and nodes that
    list themselves as a dependency, are kept as inserted but do not affect
    the order.

    Example:
        >>> topo_sort = TopoSort()
        >>> topo_sort.insert("C", ["A", "B"])  # read: "C" depends on "A" and "B"
        >>> topo_sort.insert("B", ["A"])
        >>> topo_sort.insert("A", [])
        >>> topo_sort.try_owned_vec()
        ['A', 'B', 'C']

    """

    __slots__ = ("_node_depends",)

    def __init__(self) -> None:
        self._node_depends: dict[T, frozenset[T]] = {}

    @classmethod
    def from_map(cls, nodes: Mapping[T, Iterable[T]]) -> TopoSort[T]:
        """Create a store from a complete mapping of node to dependencies."""
        topo_sort: TopoSort[T] = cls()
        topo_sort._node_depends = {node: frozenset(depends) for node, depends in nodes.items()}
        return topo_sort

    @classmethod
    def with_capacity(cls, capacity: int) -> TopoSort[T]:  # noqa: ARG003
        """Create an empty store.

        The capacity is only a hint of the expected number of nodes;
        the underlying dict grows on demand.
        """
        return cls()

    def insert(self, node: T, dependencies: Iterable[T]) -> None:
        """Insert a node with its dependencies, replacing any previous entry."""
        self._node_depends[node] = frozenset(dependencies)

    def insert_from_slice(self, node: T, dependencies: Sequence[T]) -> None:
        """Insert a node with a sequence of dependencies (duplicates collapse)."""
        self.insert(node, dependencies)

    def insert_from_set(self, node: T, dependencies: AbstractSet[T]) -> None:
        """Insert a node with a set of dependencies."""
        self.insert(node, dependencies)

    def get(self, node: T) -> frozenset[T] | None:
        """Return the dependency set of a node as inserted, or None if absent."""
        return self._node_depends.get(node)

    def __getitem__(self, node: T) -> frozenset[T]:
        """Return the dependency set of a node.

        Raises:
            KeyError: If the node is not in the store.

        """
        return self._node_depends[node]

    def __contains__(self, node: object) -> bool:
        return node in self._node_depends

    def __len__(self) -> int:
        """Return the number of nodes added."""
        return len(self._node_depends)

    def is_empty(self) -> bool:
        """Return True if no node has been added."""
        return not self._node_depends

    def as_map(self) -> dict[T, frozenset[T]]:
        """Return a shallow copy of the node -> dependencies mapping."""
        return dict(self._node_depends)

    def copy(self) -> TopoSort[T]:
        return TopoSort.from_map(self._node_depends)

    def iter(self) -> TopoSortIter[T]:
        """Start a sort, yielding each node with its dependency set."""
        return TopoSortIter(self._node_depends)

    def __iter__(self) -> TopoSortIter[T]:
        return self.iter()

    def nodes(self) -> TopoSortNodeIter[T]:
        """Start a sort, yielding nodes only."""
        return TopoSortNodeIter(self._node_depends)

    def into_iter(self) -> IntoTopoSortIter[T]:
        """Start a sort that hands the store's entries over to the caller.

        The store is left empty: its entries now belong to the returned
        iterator, which gives each one up as it is reached in the order.
        Views started earlier keep the entries they were started with.
        """
        node_depends = dict(self._node_depends)
        self._node_depends = {}
        return IntoTopoSortIter(node_depends)

    def try_vec(self) -> list[T]:
        """Sort and return the nodes as stored.

        Raises:
            CycleError: If the dependency graph contains a cycle.

        """
        return collect(self.nodes())

    def try_owned_vec(self) -> list[T]:
        """Sort and return copies of the nodes.

        Raises:
            CycleError: If the dependency graph contains a cycle.

        """
        return [copy.copy(node) for node in collect(self.nodes())]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TopoSort):
            return NotImplemented
        return self._node_depends == other._node_depends

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._node_depends!r})"
