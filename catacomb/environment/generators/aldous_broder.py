"""Aldous-Broder maze generation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from catacomb import config

from .base import MazeAlgorithm

if TYPE_CHECKING:
    from catacomb.environment.grid import Grid

logger = logging.getLogger(__name__)


class AldousBroder(MazeAlgorithm):
    """Uniform random walk that links each cell on its first visit.

    The walk ignores existing links and stops once every cell has been
    visited, so full coverage is its termination condition. The result is a
    spanning tree drawn uniformly from all spanning trees of the grid.

    There is no time bound. The walk takes roughly O(n log n) steps on a
    square grid and approaches O(n^2) on long narrow ones.
    """

    name = "aldous_broder"
    rng_domain = "maze.aldous_broder"

    def generate(self, grid: Grid) -> None:
        if grid.size > config.ALDOUS_BRODER_WARN_CELLS:
            logger.warning(
                "Aldous-Broder on %dx%d grid (%d cells); the walk may take a long time",
                grid.rows,
                grid.columns,
                grid.size,
            )

        visited = np.zeros(grid.size, dtype=np.bool_)
        cell = grid.random_cell(self.rng)
        visited[cell.index] = True
        unvisited = grid.size - 1
        steps = 0

        while unvisited > 0:
            neighbor = self.rng.choice(cell.neighbors)
            if not visited[neighbor.index]:
                cell.link(neighbor)
                visited[neighbor.index] = True
                unvisited -= 1
            cell = neighbor
            steps += 1

        logger.debug("Aldous-Broder visited %d cells in %d steps", grid.size, steps)
