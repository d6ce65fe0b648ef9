"""Error types raised or yielded by topo_sort."""


class CycleError(ValueError):
    """The remaining nodes contain a circular dependency and admit no order.

    Carries no data: every instance compares equal to every other, so a lazy
    result sequence can be compared directly, e.g.
    ``list(store.nodes()) == ["a", CycleError()]``.
    """

    def __init__(self) -> None:
        super().__init__("Cycle detected in dependency graph")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CycleError):
            return True
        return NotImplemented

    def __hash__(self) -> int:
        return hash(CycleError)

    def __repr__(self) -> str:
        return "CycleError()"


class InputError(Exception):
    """A dependency file could not be read or does not match the expected layout."""
