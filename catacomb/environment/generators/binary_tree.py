"""Binary tree maze generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import MazeAlgorithm

if TYPE_CHECKING:
    from catacomb.environment.grid import Grid


class BinaryTree(MazeAlgorithm):
    """Links every cell to its north or east neighbor.

    Linear time with no extra memory, but strongly biased: the top row and
    the right column are always straight corridors, and passages trend
    diagonally toward the north-east corner.
    """

    name = "binary_tree"
    rng_domain = "maze.binary_tree"

    def generate(self, grid: Grid) -> None:
        for cell in grid:
            north = cell.north
            east = cell.east
            if north is not None and east is not None:
                cell.link(north if self.rng.getrandbits(1) else east)
            elif north is not None:
                cell.link(north)
            elif east is not None:
                cell.link(east)
            # The north-east corner has neither and gets its links from others.
