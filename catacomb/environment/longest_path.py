"""Two-pass approximation of a maze's diameter.

Runs a breadth-first build from a start cell, then another from the
farthest cell that build found. On a spanning tree, which every generation
algorithm here produces by default, the two farthest cells found this way
are the endpoints of a longest shortest path in the maze.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from catacomb.types import GridPos, StepCount

if TYPE_CHECKING:
    from catacomb.environment.grid import Cell, Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LongestPath:
    """Endpoints, length and cells of the longest path found in a grid.

    Attributes:
        endpoint1: The farthest cell from the start, and the path's first cell.
        endpoint2: The farthest cell from endpoint1, and the path's last cell.
        length: Number of steps between the endpoints.
        path: Cells from endpoint1 to endpoint2, both included.
    """

    endpoint1: Cell
    endpoint2: Cell
    length: StepCount
    path: tuple[Cell, ...]

    @classmethod
    def compute(cls, grid: Grid, start: Cell) -> LongestPath:
        """Find the longest path in the part of *grid* reachable from *start*.

        The distance maps built along the way are discarded. A 1x1 grid, or
        a start cell with no links, yields ``start`` as both endpoints with
        length 0.

        Raises:
            ValueError: If *start* is not a cell of *grid*.
        """
        if start not in grid:
            raise ValueError(f"{start!r} does not belong to {grid!r}")

        first_pass = start.distances()
        endpoint1, first_distance = first_pass.max()
        logger.debug(
            "Longest path first pass - new start: %s, distance: %d",
            endpoint1.pos,
            first_distance,
        )

        second_pass = endpoint1.distances()
        endpoint2, length = second_pass.max()
        logger.debug(
            "Longest path second pass - goal: %s, distance: %d",
            endpoint2.pos,
            length,
        )

        return cls(
            endpoint1=endpoint1,
            endpoint2=endpoint2,
            length=length,
            path=tuple(second_pass.path_to(endpoint2)),
        )

    @property
    def endpoints(self) -> tuple[GridPos, GridPos]:
        return self.endpoint1.pos, self.endpoint2.pos
