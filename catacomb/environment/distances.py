"""Breadth-first distance maps over a carved grid.

Every passage costs exactly one step, so expanding the link graph one
frontier at a time from a root cell is the unweighted form of Dijkstra's
algorithm and yields exact shortest-path distances. The same map answers
per-cell distance, farthest-cell and path reconstruction queries.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from catacomb.types import StepCount

if TYPE_CHECKING:
    from catacomb.environment.grid import Cell, Grid

# Marker stored for cells the build never reached.
UNREACHED = -1


class NotReachable(Exception):
    """Raised when a path is requested to a cell the distance map never reached."""

    def __init__(self, cell: Cell) -> None:
        super().__init__(f"{cell!r} is not reachable from the distance map root")
        self.cell = cell


class DistanceMap:
    """Shortest link distances from one root cell to every cell it reaches.

    Distances live in a flat numpy array indexed like ``Grid.cells``, with
    ``UNREACHED`` for cells outside the root's connected component. Maps are
    built fresh per query and never updated; if the grid's links change,
    build a new one.
    """

    def __init__(self, root: Cell, grid: Grid, distances: NDArray[np.int32]) -> None:
        self.root = root
        self.grid = grid
        self._distances = distances

    @classmethod
    def build(cls, root: Cell) -> DistanceMap:
        """Expand outward from *root* one frontier at a time.

        Each frontier is expanded in order, and each cell's links in
        ``Cell.links`` order. A cell gets the distance of the first frontier
        that touches it.
        """
        grid = root.grid

        distances = np.full(grid.size, UNREACHED, dtype=np.int32)
        distances[root.index] = 0

        frontier = [root]
        distance = 0
        while frontier:
            distance += 1
            next_frontier: list[Cell] = []
            for cell in frontier:
                for linked in cell.links:
                    if distances[linked.index] == UNREACHED:
                        distances[linked.index] = distance
                        next_frontier.append(linked)
            frontier = next_frontier

        return cls(root, grid, distances)

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def at(self, cell: Cell) -> StepCount | None:
        """Distance from the root to *cell*, or None if it was not reached."""
        if cell.grid is not self.grid:
            return None
        distance = int(self._distances[cell.index])
        return None if distance == UNREACHED else distance

    def __contains__(self, cell: Cell) -> bool:
        return self.at(cell) is not None

    def __len__(self) -> int:
        return int(np.count_nonzero(self._distances != UNREACHED))

    def __iter__(self) -> Iterator[tuple[Cell, StepCount]]:
        """Yield (cell, distance) for every reached cell in row-major order."""
        for index in np.flatnonzero(self._distances != UNREACHED):
            yield self.grid.cells[index], int(self._distances[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DistanceMap):
            return NotImplemented
        return (
            self.grid is other.grid
            and self.root is other.root
            and np.array_equal(self._distances, other._distances)
        )

    __hash__ = None  # type: ignore[assignment]

    @property
    def cells(self) -> list[Cell]:
        """Every reached cell in row-major order."""
        return [cell for cell, _ in self]

    def to_array(self) -> NDArray[np.int32]:
        """Distances as a (rows, columns) array, ``UNREACHED`` where unreached.

        Returns a copy, so renderers can use it for heat-map overlays
        without touching the map itself.
        """
        return self._distances.reshape(self.grid.rows, self.grid.columns).copy()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def max(self) -> tuple[Cell, StepCount]:
        """Return the farthest reached cell and its distance.

        Ties go to the cell that comes first in row-major order. A map that
        only reached its root returns (root, 0).
        """
        # argmax returns the first occurrence, which gives the row-major
        # tie-break. Unreached cells are -1 and never win over the root's 0.
        index = int(np.argmax(self._distances))
        return self.grid.cells[index], int(self._distances[index])

    def step_toward_root(self, cell: Cell) -> Cell | None:
        """Return the linked cell one step closer to the root than *cell*.

        The first qualifying link in ``Cell.links`` order wins. Returns None
        for the root itself.

        Raises:
            NotReachable: If *cell* has no distance, or none of its links is
                one step closer (the grid was re-linked after the build).
        """
        distance = self.at(cell)
        if distance is None:
            raise NotReachable(cell)
        if distance == 0:
            return None
        for linked in cell.links:
            if self.at(linked) == distance - 1:
                return linked
        raise NotReachable(cell)

    def path_to(self, goal: Cell) -> list[Cell]:
        """Reconstruct a shortest path from the root to *goal*.

        Returns:
            Cells from the root to *goal*, both included. Its length is
            ``self.at(goal) + 1``.

        Raises:
            NotReachable: If *goal* was not reached by this map. No partial
                path is returned.
        """
        path = [goal]
        current = self.step_toward_root(goal)
        while current is not None:
            path.append(current)
            current = self.step_toward_root(current)
        path.reverse()
        return path


def shortest_path(start: Cell, goal: Cell) -> list[Cell]:
    """Shortest path from *start* to *goal*, both included.

    Raises:
        NotReachable: If no passage sequence connects the two cells.
    """
    return start.distances().path_to(goal)


def next_step_toward(start: Cell, goal: Cell) -> Cell | None:
    """Return the cell to move to from *start* to get one step closer to *goal*.

    Used by pursuit AI. The map is rooted at *goal*, so callers chasing a
    stationary target can build it once with ``goal.distances()`` and call
    ``step_toward_root`` for every pursuer instead.

    Returns:
        The next cell, or None when *start* already is *goal*.

    Raises:
        NotReachable: If *goal* cannot be reached from *start*.
    """
    return goal.distances().step_toward_root(start)
