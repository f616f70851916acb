"""Recursive division maze generation."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from catacomb import config
from catacomb.environment.grid import ConfigurationError

from .base import MazeAlgorithm

if TYPE_CHECKING:
    from catacomb.environment.grid import Grid
    from catacomb.util.rng import RNG


class _Partition(NamedTuple):
    """A rectangular block of cells still waiting to be divided."""

    row: int
    column: int
    height: int
    width: int


class RecursiveDivision(MazeAlgorithm):
    """Starts fully open and splits the grid with walls that each keep one door.

    Every partition is cut by a wall along one axis at a random offset. The
    wall closes every passage across it except a single random doorway, and
    both halves are divided again until a side drops below ``min_size``.
    Pending partitions sit on an explicit stack, so deep divisions of large
    grids never hit the interpreter's recursion limit.

    With rooms disabled and ``min_size`` at 2 the result is a perfect maze
    (a spanning tree). A larger ``min_size`` leaves every partition with a
    side below it fully open, so blocks two or more cells wide keep loops.
    Rooms likewise leave small partitions undivided. Open blocks stay
    connected through their doorways but contain loops.

    Args:
        rng: Random source. Defaults to the "maze.recursive_division" stream.
        min_size: A partition is only divided while both sides are at least
            this long. Must be at least 2. Values above 2 leave open blocks.
        room_size: Partitions with both sides shorter than this may be left
            open as rooms. 0 disables rooms.
        room_chance: Probability that an eligible partition becomes a room.
    """

    name = "recursive_division"
    rng_domain = "maze.recursive_division"

    def __init__(
        self,
        rng: RNG | None = None,
        *,
        min_size: int = config.DIVISION_MIN_SIZE,
        room_size: int = config.DIVISION_ROOM_SIZE,
        room_chance: float = config.DIVISION_ROOM_CHANCE,
    ) -> None:
        super().__init__(rng)
        if min_size < 2:
            raise ConfigurationError(
                f"Division min_size must be at least 2, got {min_size}"
            )
        if room_size < 0:
            raise ConfigurationError(f"Room size cannot be negative, got {room_size}")
        if not 0.0 <= room_chance <= 1.0:
            raise ConfigurationError(
                f"Room chance must be between 0 and 1, got {room_chance}"
            )
        self.min_size = min_size
        self.room_size = room_size
        self.room_chance = room_chance

    def generate(self, grid: Grid) -> None:
        for cell in grid:
            cell.link(cell.south)
            cell.link(cell.east)

        stack = [_Partition(0, 0, grid.rows, grid.columns)]
        while stack:
            partition = stack.pop()
            if partition.height < self.min_size or partition.width < self.min_size:
                continue
            if self._keep_as_room(partition):
                continue

            if self._wall_runs_east_west(partition):
                stack.extend(self._divide_horizontally(grid, partition))
            else:
                stack.extend(self._divide_vertically(grid, partition))

    def _keep_as_room(self, partition: _Partition) -> bool:
        return (
            partition.height < self.room_size
            and partition.width < self.room_size
            and self.rng.random() < self.room_chance
        )

    def _wall_runs_east_west(self, partition: _Partition) -> bool:
        # Cut across the longer side; square partitions pick at random.
        if partition.height != partition.width:
            return partition.height > partition.width
        return bool(self.rng.getrandbits(1))

    def _divide_horizontally(
        self, grid: Grid, partition: _Partition
    ) -> tuple[_Partition, _Partition]:
        row, column, height, width = partition
        wall_row = row + self.rng.randrange(height - 1)
        door_column = column + self.rng.randrange(width)

        for c in range(column, column + width):
            if c == door_column:
                continue
            cell = grid.cells[wall_row * grid.columns + c]
            cell.unlink(cell.south)

        top_height = wall_row - row + 1
        return (
            _Partition(row, column, top_height, width),
            _Partition(wall_row + 1, column, height - top_height, width),
        )

    def _divide_vertically(
        self, grid: Grid, partition: _Partition
    ) -> tuple[_Partition, _Partition]:
        row, column, height, width = partition
        wall_column = column + self.rng.randrange(width - 1)
        door_row = row + self.rng.randrange(height)

        for r in range(row, row + height):
            if r == door_row:
                continue
            cell = grid.cells[r * grid.columns + wall_column]
            cell.unlink(cell.east)

        left_width = wall_column - column + 1
        return (
            _Partition(row, column, height, left_width),
            _Partition(row, wall_column + 1, height, width - left_width),
        )
