"""Grid model, maze generation, distance maps and level layout."""

from .distances import DistanceMap, NotReachable, next_step_toward, shortest_path
from .grid import Cell, ConfigurationError, Direction, Grid
from .longest_path import LongestPath
from .validation import DisconnectedMazeError, ensure_connected, is_fully_connected

__all__ = [
    "Cell",
    "ConfigurationError",
    "Direction",
    "DisconnectedMazeError",
    "DistanceMap",
    "Grid",
    "LongestPath",
    "NotReachable",
    "ensure_connected",
    "is_fully_connected",
    "next_step_toward",
    "shortest_path",
]
