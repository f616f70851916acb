"""Base class for maze generation algorithms."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, ClassVar

from catacomb.util import rng as rng_streams

if TYPE_CHECKING:
    from catacomb.environment.grid import Grid
    from catacomb.util.rng import RNG


class MazeAlgorithm(abc.ABC):
    """Abstract base class for maze generation algorithms.

    Algorithms keep no state between runs beyond their random source, so one
    instance can carve any number of grids.

    Attributes:
        name: Registry name used to select the algorithm from configuration.
        rng_domain: Stream used when no random source is injected.
    """

    name: ClassVar[str]
    rng_domain: ClassVar[str]

    def __init__(self, rng: RNG | None = None) -> None:
        self.rng: RNG = rng_streams.get(self.rng_domain) if rng is None else rng

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @abc.abstractmethod
    def generate(self, grid: Grid) -> None:
        """Carve passages into a freshly built *grid* in place.

        On return every cell must be reachable from every other cell.
        """
        raise NotImplementedError
