"""Connectivity checks for carved grids."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from catacomb.environment.grid import Cell, Grid

# How many orphaned coordinates an error message lists.
_ERROR_SAMPLE_SIZE = 5


class DisconnectedMazeError(Exception):
    """Raised when some cells of a generated maze cannot be reached.

    Attributes:
        unreachable: Every cell with no passage route to the checked root.
    """

    def __init__(self, root: Cell, unreachable: list[Cell]) -> None:
        sample = ", ".join(str(cell.pos) for cell in unreachable[:_ERROR_SAMPLE_SIZE])
        if len(unreachable) > _ERROR_SAMPLE_SIZE:
            sample += ", ..."
        super().__init__(
            f"{len(unreachable)} cell(s) unreachable from {root.pos}: {sample}"
        )
        self.root = root
        self.unreachable = unreachable


def find_unreachable_cells(grid: Grid, root: Cell | None = None) -> list[Cell]:
    """Return the cells of *grid* with no passage route to *root*.

    Args:
        grid: The grid to check.
        root: Cell to measure from. Defaults to the north-west corner.
    """
    if root is None:
        root = grid.cells[0]
    distances = root.distances()
    return [cell for cell in grid if cell not in distances]


def is_fully_connected(grid: Grid) -> bool:
    return not find_unreachable_cells(grid)


def ensure_connected(grid: Grid) -> None:
    """Raise DisconnectedMazeError unless every cell of *grid* is reachable."""
    root = grid.cells[0]
    unreachable = find_unreachable_cells(grid, root)
    if unreachable:
        raise DisconnectedMazeError(root, unreachable)
