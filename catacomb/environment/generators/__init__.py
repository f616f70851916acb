"""Maze generation algorithms for Catacomb.

Every algorithm takes a freshly built, unlinked Grid and carves passages
into it in place, leaving every cell reachable from every other:
- BinaryTree: linear time, strong north-east diagonal bias
- RecursiveBacktracker: long winding corridors, few short dead ends
- RecursiveDivision: room-like blocks joined by single doorways
- AldousBroder: uniformly random spanning tree, no time bound

Algorithms are selected by registry name through create_algorithm().
"""

from .aldous_broder import AldousBroder
from .base import MazeAlgorithm
from .binary_tree import BinaryTree
from .factory import ALGORITHMS, create_algorithm
from .recursive_backtracker import RecursiveBacktracker
from .recursive_division import RecursiveDivision

__all__ = [
    "ALGORITHMS",
    "AldousBroder",
    "BinaryTree",
    "MazeAlgorithm",
    "RecursiveBacktracker",
    "RecursiveDivision",
    "create_algorithm",
]
