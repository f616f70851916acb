from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from catacomb.environment.grid import Grid
from catacomb.util import rng


@pytest.fixture(autouse=True)
def deterministic_rng() -> Iterator[None]:
    """Seed the global RNG streams identically for every test."""
    rng.init("tests")
    yield
    rng.init(None)


def link_all(grid: Grid) -> Grid:
    """Open every passage between neighboring cells."""
    for cell in grid:
        cell.link(cell.south)
        cell.link(cell.east)
    return grid


@pytest.fixture
def open_grid() -> Callable[[int, int], Grid]:
    """Factory for grids with every neighboring pair linked (no walls at all)."""

    def make(rows: int, columns: int) -> Grid:
        return link_all(Grid(rows, columns))

    return make


@pytest.fixture
def corridor() -> Callable[[int], Grid]:
    """Factory for a single-row grid linked west to east."""

    def make(length: int) -> Grid:
        grid = Grid(1, length)
        for cell in grid:
            cell.link(cell.east)
        return grid

    return make
