from __future__ import annotations

from typing import NewType, TypeAlias

# =============================================================================
# SPATIAL TYPES
# =============================================================================

GridCoord: TypeAlias = int  # Always integer row or column

# Grid positions are (row, column), row 0 is the northern edge.
GridPos: TypeAlias = tuple[GridCoord, GridCoord]  # Example: (2, 5) = row 2, column 5

# Position of a cell in the grid's flat row-major cell array.
# index = row * columns + column
CellIndex = NewType("CellIndex", int)

# Number of single steps between two cells along open passages.
StepCount: TypeAlias = int

# =============================================================================
# GENERATION TYPES
# =============================================================================

# Random seed for deterministic generation.
# Can be an int for numeric seeds or a descriptive string like "burrito1".
RandomSeed: TypeAlias = int | str | None
