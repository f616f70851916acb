"""Rectangular cell grid that maze algorithms carve passages into.

The grid owns a flat, row-major list of cells. Each cell records its
in-bounds neighbors as indices into that list rather than as direct object
references. A cell keeps its grid alive, so cells handed out by a query
stay fully usable after the caller drops the grid itself.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import TYPE_CHECKING

from catacomb.types import CellIndex, GridPos
from catacomb.util import rng

if TYPE_CHECKING:
    from catacomb.environment.distances import DistanceMap
    from catacomb.util.rng import RNG

_rng = rng.get("maze.placement")


class ConfigurationError(ValueError):
    """Raised when a grid or an algorithm is given unusable parameters."""


class Direction(Enum):
    """Cardinal directions as (row, column) offsets. Row 0 is the north edge."""

    NORTH = (-1, 0)
    SOUTH = (1, 0)
    EAST = (0, 1)
    WEST = (0, -1)

    @property
    def opposite(self) -> Direction:
        d_row, d_col = self.value
        return Direction((-d_row, -d_col))


# Order used by Cell.neighbors.
NEIGHBOR_ORDER = (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)


class Cell:
    """A single grid position with up to four neighbors and a set of links.

    A link is an open passage. Neighbor relations are fixed when the grid is
    built; links are added and removed by generation algorithms.

    Attributes:
        row: Row of the cell, 0 at the northern edge.
        column: Column of the cell, 0 at the western edge.
        index: Position of the cell in its grid's row-major cell list.
        tile: Opaque marker owned by renderers. Never read here.
    """

    def __init__(
        self,
        grid: Grid,
        row: int,
        column: int,
        neighbor_indices: dict[Direction, CellIndex],
    ) -> None:
        self.row = row
        self.column = column
        self.index = CellIndex(row * grid.columns + column)
        self.tile: object | None = None
        self._grid = grid
        self._neighbor_indices = neighbor_indices
        self._links: set[Cell] = set()

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.column})"

    @property
    def pos(self) -> GridPos:
        return (self.row, self.column)

    @property
    def grid(self) -> Grid:
        return self._grid

    # -------------------------------------------------------------------------
    # Neighbors
    # -------------------------------------------------------------------------

    def neighbor(self, direction: Direction) -> Cell | None:
        """Return the adjacent cell in *direction*, or None at the grid edge."""
        index = self._neighbor_indices.get(direction)
        if index is None:
            return None
        return self._grid.cells[index]

    @property
    def north(self) -> Cell | None:
        return self.neighbor(Direction.NORTH)

    @property
    def south(self) -> Cell | None:
        return self.neighbor(Direction.SOUTH)

    @property
    def east(self) -> Cell | None:
        return self.neighbor(Direction.EAST)

    @property
    def west(self) -> Cell | None:
        return self.neighbor(Direction.WEST)

    @property
    def neighbors(self) -> list[Cell]:
        """In-bounds neighbors in north, south, east, west order."""
        result = []
        for direction in NEIGHBOR_ORDER:
            cell = self.neighbor(direction)
            if cell is not None:
                result.append(cell)
        return result

    # -------------------------------------------------------------------------
    # Links
    # -------------------------------------------------------------------------

    def link(self, other: Cell | None, bidirectional: bool = True) -> None:
        """Open a passage to *other*. Does nothing when *other* is None."""
        if other is None:
            return
        self._links.add(other)
        if bidirectional:
            other._links.add(self)

    def unlink(self, other: Cell | None, bidirectional: bool = True) -> None:
        """Close the passage to *other*, if there is one."""
        if other is None:
            return
        self._links.discard(other)
        if bidirectional:
            other._links.discard(self)

    def is_linked(self, other: Cell | None) -> bool:
        return other in self._links

    def is_linked_toward(self, direction: Direction) -> bool:
        """True when the boundary in *direction* is an open passage.

        This is the check movement and collision code uses before letting
        something cross from this cell into its neighbor.
        """
        other = self.neighbor(direction)
        return other is not None and other in self._links

    @property
    def links(self) -> list[Cell]:
        """Linked cells in ascending grid index order.

        For geometric neighbors that is north, west, east, south. Distance
        builds and path walks visit links in exactly this order, which makes
        their tie-breaking deterministic.
        """
        return sorted(self._links, key=lambda cell: cell.index)

    @property
    def link_degree(self) -> int:
        return len(self._links)

    def distances(self) -> DistanceMap:
        """Build a breadth-first distance map rooted at this cell."""
        from catacomb.environment.distances import DistanceMap

        return DistanceMap.build(self)


class Grid:
    """A rows x columns layout of cells with fixed neighbor topology.

    Topology never changes after construction. Link state is written during
    generation and treated as read-only afterwards.
    """

    def __init__(self, rows: int, columns: int) -> None:
        if not _is_dimension(rows) or not _is_dimension(columns):
            raise ConfigurationError(
                f"Grid dimensions must be positive integers, got {rows!r}x{columns!r}"
            )
        self.rows = rows
        self.columns = columns
        # Registry name of the algorithm that carved this grid, when known.
        self.algorithm: str | None = None
        self.cells: list[Cell] = [
            Cell(self, row, column, self._neighbor_indices(row, column))
            for row in range(rows)
            for column in range(columns)
        ]

    def __repr__(self) -> str:
        return f"Grid({self.rows}, {self.columns})"

    def _neighbor_indices(self, row: int, column: int) -> dict[Direction, CellIndex]:
        indices: dict[Direction, CellIndex] = {}
        for direction in NEIGHBOR_ORDER:
            d_row, d_col = direction.value
            n_row, n_col = row + d_row, column + d_col
            if 0 <= n_row < self.rows and 0 <= n_col < self.columns:
                indices[direction] = CellIndex(n_row * self.columns + n_col)
        return indices

    @property
    def size(self) -> int:
        return self.rows * self.columns

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Cell]:
        """Iterate over every cell in row-major order."""
        return iter(self.cells)

    def __contains__(self, cell: object) -> bool:
        return isinstance(cell, Cell) and cell.grid is self

    def __getitem__(self, pos: GridPos) -> Cell | None:
        row, column = pos
        return self.cell(row, column)

    def cell(self, row: int, column: int) -> Cell | None:
        """Return the cell at (row, column), or None if it is off the grid."""
        if not isinstance(row, int) or not isinstance(column, int):
            return None
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            return None
        return self.cells[row * self.columns + column]

    def each_row(self) -> Iterator[list[Cell]]:
        for start in range(0, self.size, self.columns):
            yield self.cells[start : start + self.columns]

    def random_cell(self, rng: RNG | None = None) -> Cell:
        """Pick a cell uniformly at random.

        Args:
            rng: Random source to draw from. Defaults to the "maze.placement"
                stream.
        """
        source = _rng if rng is None else rng
        return source.choice(self.cells)

    def dead_ends(self) -> list[Cell]:
        """Cells with exactly one open passage."""
        return [cell for cell in self.cells if cell.link_degree == 1]

    def link_count(self) -> int:
        """Number of undirected links between cells of this grid."""
        pairs = {
            (min(cell.index, other.index), max(cell.index, other.index))
            for cell in self.cells
            for other in cell._links
        }
        return len(pairs)


def _is_dimension(value: object) -> bool:
    # bool is an int subclass; Grid(True, 3) is a caller bug, not a 1x3 grid.
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
