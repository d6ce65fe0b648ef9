"""Cycle-safe topological sorting of nodes by their dependencies."""

__all__ = [
    "CycleError",
    "DependencyFile",
    "InputError",
    "IntoTopoSortIter",
    "OrderFile",
    "TopoSort",
    "TopoSortIter",
    "TopoSortNodeIter",
    "Traversal",
    "export_order_to_toml",
    "load_store_from_toml",
    "topological_sort",
]

from ._errors import CycleError, InputError
from ._graph import Traversal, topological_sort
from ._io import DependencyFile, OrderFile, export_order_to_toml, load_store_from_toml
from ._store import TopoSort
from ._views import IntoTopoSortIter, TopoSortIter, TopoSortNodeIter
