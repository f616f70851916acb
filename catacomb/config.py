"""
Configuration constants.

Centralizes the tunable values used by maze generation and placement.
Organized by functional area for easy maintenance.
"""

import sys

from catacomb.types import RandomSeed

# =============================================================================
# GENERAL
# =============================================================================

# Master seed used when a caller does not supply one. None picks a fresh
# seed per run (the chosen seed is logged so a run can be reproduced).
RANDOM_SEED: RandomSeed = None

# Test environment detection
IS_TEST_ENVIRONMENT = "pytest" in sys.modules

# =============================================================================
# LEVEL DIMENSIONS
# =============================================================================

DEFAULT_ROWS = 10
DEFAULT_COLUMNS = 10

# Bounds (inclusive) for randomly sized levels
RANDOM_LEVEL_MIN_SIZE = 8
RANDOM_LEVEL_MAX_SIZE = 20

# =============================================================================
# ALGORITHM SELECTION
# =============================================================================

# Registry name of the algorithm used by the level orchestrator.
# None picks one of the registered algorithms at random per level.
DEFAULT_ALGORITHM: str | None = None

# Recursive division: a partition is only split while both of its sides
# are at least this long. Must be at least 2. Only 2 carves every block down
# to single-cell corridors; larger values leave open blocks with loops.
DIVISION_MIN_SIZE = 2

# Recursive division rooms: partitions with both sides below DIVISION_ROOM_SIZE
# are left open with probability DIVISION_ROOM_CHANCE. Open rooms contain
# loops, so the result is no longer a spanning tree. 0 disables rooms.
DIVISION_ROOM_SIZE = 0
DIVISION_ROOM_CHANCE = 0.25

# Aldous-Broder has no time bound; a random walk over a large or narrow grid
# can take a very long time. Runs above this many cells log a warning.
ALDOUS_BRODER_WARN_CELLS = 2500

# =============================================================================
# VALIDATION
# =============================================================================

# Check every generated maze for orphaned cells before handing it out.
VALIDATE_CONNECTIVITY = True
