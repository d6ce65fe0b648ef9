"""Graph algorithms for dependency ordering."""

import logging
from collections.abc import Hashable, Iterable, Mapping

from topo_sort._errors import CycleError

logger = logging.getLogger(__name__)


class Traversal[T: Hashable]:
    """A single pass of Kahn's algorithm over a dependency mapping.

    Every key of the mapping is assigned a handle (its index in an arena of
    the canonical key objects), and the graph is built over handles only:
    reverse edges (dependency -> dependents) and the number of dependencies
    each node is still waiting on.

    Dependencies that are not keys of the mapping, and nodes listed as their
    own dependency, impose no ordering and are skipped.

    The traversal is pulled one node at a time with `step`. It is not
    restartable: build a new instance for a new pass.

    Args:
        node_depends: Mapping from node to the nodes it depends on.

    Example:
        >>> traversal = Traversal({"b": ["a"], "a": []})
        >>> traversal.node(traversal.step())
        'a'

    """

    __slots__ = ("_dependents", "_indegree", "_nodes", "_ready")

    def __init__(self, node_depends: Mapping[T, Iterable[T]]) -> None:
        self._nodes: list[T] = list(node_depends)
        handles = {node: handle for handle, node in enumerate(self._nodes)}

        # Dependency -> dependents, and dependent -> number of pending dependencies
        self._dependents: dict[int, set[int]] = {handle: set() for handle in range(len(self._nodes))}
        self._indegree: dict[int, int] = dict.fromkeys(self._dependents, 0)

        edges = 0
        for dependent, dependencies in node_depends.items():
            dependent_handle = handles[dependent]
            for dependency in dependencies:
                dependency_handle = handles.get(dependency)
                if dependency_handle is None or dependency_handle == dependent_handle:
                    continue
                waiting = self._dependents[dependency_handle]
                if dependent_handle in waiting:
                    continue
                waiting.add(dependent_handle)
                self._indegree[dependent_handle] += 1
                edges += 1

        self._ready: list[int] = [handle for handle, count in self._indegree.items() if count == 0]
        logger.debug(
            "Built traversal graph with %d nodes, %d edges, %d ready",
            len(self._nodes),
            edges,
            len(self._ready),
        )

    @property
    def remaining(self) -> int:
        """Number of nodes neither emitted nor discarded yet."""
        return len(self._indegree)

    def __len__(self) -> int:
        return self.remaining

    def node(self, handle: int) -> T:
        """Resolve a handle to the key object stored in the source mapping."""
        return self._nodes[handle]

    def step(self) -> int | CycleError | None:
        """Advance the traversal by one node.

        Returns:
            The handle of the next node in dependency order, a `CycleError`
            when the remaining nodes cannot be ordered, or None once the
            traversal is over. A cycle is reported exactly once; every call
            after it returns None.

        """
        if self._ready:
            handle = self._ready.pop()
            del self._indegree[handle]
            for dependent in self._dependents.pop(handle):
                self._indegree[dependent] -= 1
                if self._indegree[dependent] == 0:
                    self._ready.append(dependent)
            return handle

        if not self._indegree:
            return None

        logger.debug("Cycle detected, discarding %d unresolved nodes", len(self._indegree))
        self._indegree.clear()
        self._dependents.clear()
        return CycleError()


def topological_sort[T: Hashable](dependencies: Mapping[T, Iterable[T]]) -> list[T]:
    """Sort nodes so that every node comes after the nodes it depends on.

    Args:
        dependencies: Mapping from node to the nodes it depends on.
            Dependencies that are not keys, and self-dependencies, are ignored.

    Returns:
        List of the mapping's keys in dependency order.

    Raises:
        CycleError: If the graph contains a cycle.

    Example:
        >>> # c depends on b, b depends on a
        >>> topological_sort({"c": ["b"], "b": ["a"], "a": []})
        ['a', 'b', 'c']

    """
    traversal = Traversal(dependencies)
    order: list[T] = []
    while (result := traversal.step()) is not None:
        if isinstance(result, CycleError):
            raise result
        order.append(traversal.node(result))
    return order
