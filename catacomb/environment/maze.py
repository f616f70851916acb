"""Level layout generation: carve a maze and place the level's objectives.

This is the entry point level code uses. It picks or accepts a seed, runs a
generation algorithm, validates the result and puts the player and the
stairs at the two ends of the longest path through the maze, so reaching
the stairs means crossing as much of the level as possible.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from catacomb import config
from catacomb.environment.generators import ALGORITHMS, MazeAlgorithm
from catacomb.environment.grid import Cell, Grid
from catacomb.environment.longest_path import LongestPath
from catacomb.environment.validation import ensure_connected
from catacomb.types import GridPos, RandomSeed, StepCount
from catacomb.util.rng import RNG, RNGProvider

logger = logging.getLogger(__name__)

# Upper bound (exclusive) for generated seeds.
_MAX_SEED = 999_999_999_999_999


@dataclass(frozen=True)
class MazeStats:
    """Structural measurements used to score how complex a maze is."""

    cell_count: int
    link_count: int
    dead_end_count: int
    diameter: StepCount

    @property
    def dead_end_ratio(self) -> float:
        return self.dead_end_count / self.cell_count

    @classmethod
    def from_grid(cls, grid: Grid, longest: LongestPath) -> MazeStats:
        return cls(
            cell_count=grid.size,
            link_count=grid.link_count(),
            dead_end_count=len(grid.dead_ends()),
            diameter=longest.length,
        )


@dataclass
class MazeLayout:
    """A carved grid together with its objective placement.

    Attributes:
        grid: The carved grid.
        algorithm: Registry name of the algorithm that carved it.
        seed: Master seed that reproduces this layout.
        player_start: Where the player spawns (one end of the longest path).
        stairs: Where the exit stairs go (the other end).
        longest_path: The path between player_start and stairs.
        stats: Complexity measurements for the maze.
    """

    grid: Grid
    algorithm: str
    seed: RandomSeed
    player_start: GridPos
    stairs: GridPos
    longest_path: LongestPath
    stats: MazeStats


def create_maze(
    rows: int = config.DEFAULT_ROWS,
    columns: int = config.DEFAULT_COLUMNS,
    algorithm: str | MazeAlgorithm | None = None,
    seed: RandomSeed = None,
) -> Grid:
    """Build a grid and carve a maze into it.

    Args:
        rows: Number of rows.
        columns: Number of columns.
        algorithm: Registry name or algorithm instance. None uses
            ``config.DEFAULT_ALGORITHM``, or a random registered algorithm
            when that is None too. A named algorithm draws from a stream of
            the run's seed; an instance keeps its own random source.
        seed: Master seed. None uses ``config.RANDOM_SEED``, or a fresh
            seed (logged) when that is None too.

    Raises:
        ConfigurationError: If the dimensions are not positive integers.
        ValueError: If the algorithm name is not registered.
        DisconnectedMazeError: If validation is enabled and some cells
            ended up unreachable.
    """
    provider = RNGProvider(_resolve_seed(seed))
    return _carve_maze(rows, columns, algorithm, provider)


def generate_layout(
    rows: int = config.DEFAULT_ROWS,
    columns: int = config.DEFAULT_COLUMNS,
    algorithm: str | MazeAlgorithm | None = None,
    seed: RandomSeed = None,
) -> MazeLayout:
    """Carve a maze and place the player and stairs on its longest path.

    Same arguments and errors as create_maze(). The search for the longest
    path starts from a random cell in the north-west quadrant.
    """
    seed = _resolve_seed(seed)
    logger.info(
        "Creating new level with rows: %d, columns: %d, seed: %s", rows, columns, seed
    )
    provider = RNGProvider(seed)
    grid = _carve_maze(rows, columns, algorithm, provider)

    start = _start_cell(grid, provider.get("maze.placement"))
    logger.debug("Start position selected: %s", start.pos)

    longest = LongestPath.compute(grid, start)
    player_start, stairs = longest.endpoints
    logger.info(
        "Player placed at %s, stairs at %s, %d steps apart",
        player_start,
        stairs,
        longest.length,
    )

    return MazeLayout(
        grid=grid,
        algorithm=grid.algorithm or "",
        seed=seed,
        player_start=player_start,
        stairs=stairs,
        longest_path=longest,
        stats=MazeStats.from_grid(grid, longest),
    )


def random_layout(seed: RandomSeed = None) -> MazeLayout:
    """Generate a layout with dimensions drawn from the configured range."""
    seed = _resolve_seed(seed)
    dimensions = RNGProvider(seed).get("maze.dimensions")
    low, high = config.RANDOM_LEVEL_MIN_SIZE, config.RANDOM_LEVEL_MAX_SIZE
    rows = dimensions.randint(low, high)
    columns = dimensions.randint(low, high)
    logger.info("Generating random level with rows: %d, columns: %d", rows, columns)
    return generate_layout(rows, columns, seed=seed)


def _resolve_seed(seed: RandomSeed) -> RandomSeed:
    if seed is None:
        seed = config.RANDOM_SEED
    if seed is None:
        seed = random.randrange(_MAX_SEED)
        logger.info("Map initialized with seed: %s", seed)
    return seed


def _resolve_algorithm(
    algorithm: str | MazeAlgorithm | None, provider: RNGProvider
) -> MazeAlgorithm:
    if isinstance(algorithm, MazeAlgorithm):
        return algorithm
    if algorithm is None:
        algorithm = config.DEFAULT_ALGORITHM
    if algorithm is None:
        algorithm = provider.get("maze.algorithm_choice").choice(sorted(ALGORITHMS))
    algorithm_cls = ALGORITHMS.get(algorithm)
    if algorithm_cls is None:
        raise ValueError(f"Unknown maze algorithm: {algorithm!r}")
    return algorithm_cls(provider.get(algorithm_cls.rng_domain))


def _carve_maze(
    rows: int,
    columns: int,
    algorithm: str | MazeAlgorithm | None,
    provider: RNGProvider,
) -> Grid:
    grid = Grid(rows, columns)
    maze_algorithm = _resolve_algorithm(algorithm, provider)
    logger.debug(
        "Applying algorithm %s to %dx%d grid", maze_algorithm.name, rows, columns
    )

    maze_algorithm.generate(grid)
    grid.algorithm = maze_algorithm.name
    logger.debug("Map created with %d dead ends", len(grid.dead_ends()))

    if config.VALIDATE_CONNECTIVITY:
        ensure_connected(grid)
    return grid


def _start_cell(grid: Grid, rng: RNG) -> Cell:
    row = rng.randint(0, (grid.rows - 1) // 2)
    column = rng.randint(0, (grid.columns - 1) // 2)
    return grid.cells[row * grid.columns + column]
