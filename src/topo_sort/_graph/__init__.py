"""Graph module providing the dependency traversal engine.

This module contains:
- Traversal[T]: A single-use, pull-driven Kahn traversal over handles
- topological_sort: Function form returning the whole order at once
"""

from ._algorithms import Traversal, topological_sort

__all__ = ["Traversal", "topological_sort"]
