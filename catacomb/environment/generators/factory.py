"""Algorithm registry and lookup by name.

Configuration and callers select algorithms by their registry name, e.g.
``create_algorithm("recursive_backtracker")``, instead of importing and
inspecting classes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .aldous_broder import AldousBroder
from .base import MazeAlgorithm
from .binary_tree import BinaryTree
from .recursive_backtracker import RecursiveBacktracker
from .recursive_division import RecursiveDivision

if TYPE_CHECKING:
    from catacomb.util.rng import RNG

ALGORITHMS: dict[str, type[MazeAlgorithm]] = {
    algorithm.name: algorithm
    for algorithm in (BinaryTree, RecursiveBacktracker, RecursiveDivision, AldousBroder)
}


def create_algorithm(name: str, rng: RNG | None = None) -> MazeAlgorithm:
    """Instantiate a registered algorithm by name.

    Args:
        name: Registry name, one of ``ALGORITHMS``.
        rng: Optional random source. Defaults to the algorithm's own stream.

    Returns:
        A ready-to-use algorithm instance with default settings.

    Raises:
        ValueError: If the name is not registered.
    """
    algorithm = ALGORITHMS.get(name)
    if algorithm is None:
        raise ValueError(f"Unknown maze algorithm: {name!r}")
    return algorithm(rng)
