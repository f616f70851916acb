"""Depth-first (recursive backtracker) maze generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from .base import MazeAlgorithm

if TYPE_CHECKING:
    from catacomb.environment.grid import Cell, Grid


class RecursiveBacktracker(MazeAlgorithm):
    """Random depth-first walk that backtracks from dead ends.

    Produces long winding corridors with comparatively few short dead ends.
    The walk keeps its own stack, so its depth is bounded by the cell count
    rather than by the interpreter's recursion limit.
    """

    name = "recursive_backtracker"
    rng_domain = "maze.recursive_backtracker"

    def generate(self, grid: Grid) -> None:
        visited = np.zeros(grid.size, dtype=np.bool_)

        start = grid.random_cell(self.rng)
        visited[start.index] = True
        stack: list[Cell] = [start]

        while stack:
            current = stack[-1]
            unvisited = [n for n in current.neighbors if not visited[n.index]]
            if not unvisited:
                stack.pop()
                continue

            neighbor = self.rng.choice(unvisited)
            current.link(neighbor)
            visited[neighbor.index] = True
            stack.append(neighbor)
