#!/usr/bin/env python3
"""Benchmark maze generation, distance maps and grid memory use.

Times every registered algorithm across a range of grid sizes, then the
distance and longest-path queries that level placement runs on each maze,
and finally measures how much memory large grids take.

Usage:
    uv run python scripts/benchmark_mazes.py
"""

# ruff: noqa: E402  # Allow path setup before importing project modules

from __future__ import annotations

import gc
import sys
import timeit
import tracemalloc
from collections.abc import Callable
from pathlib import Path
from random import Random

import numpy as np

# Add the project root to Python path so running as a script works.
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from catacomb.environment.generators import ALGORITHMS, create_algorithm
from catacomb.environment.grid import Grid
from catacomb.environment.longest_path import LongestPath

SIZES = (10, 20, 50, 100)

# Aldous-Broder's walk grows too slow to time repeatedly past this size.
ALDOUS_BRODER_MAX_SIZE = 50

SEED = 42

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _carve(name: str, size: int, seed: int = SEED) -> Grid:
    grid = Grid(size, size)
    create_algorithm(name, Random(seed)).generate(grid)
    return grid


def _bench(fn: Callable[[], object]) -> float:
    """Time *fn()* and return average ms per call."""
    # Warm up
    fn()
    timer = timeit.Timer(fn)
    number, total = timer.autorange()
    return (total / number) * 1000


def _sizes_for(name: str) -> tuple[int, ...]:
    if name == "aldous_broder":
        return tuple(size for size in SIZES if size <= ALDOUS_BRODER_MAX_SIZE)
    return SIZES


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


def bench_generation() -> None:
    print("Generation (ms per maze)")
    print("=" * 78)
    header = "".join(f"{f'{size}x{size}':>12}" for size in SIZES)
    print(f"{'Algorithm':<26}{header}")
    print("-" * 78)

    for name in sorted(ALGORITHMS):
        timings = {
            size: _bench(lambda name=name, size=size: _carve(name, size))
            for size in _sizes_for(name)
        }
        row = "".join(
            f"{timings[size]:>10.2f}ms" if size in timings else f"{'-':>12}"
            for size in SIZES
        )
        print(f"{name:<26}{row}")
    print()


def bench_structure() -> None:
    print("Structure of a 30x30 maze (mean over 10 seeds)")
    print("=" * 78)
    print(f"{'Algorithm':<26}{'dead ends':>12}{'dead-end %':>12}{'diameter':>12}")
    print("-" * 78)

    for name in sorted(ALGORITHMS):
        dead_ends = []
        diameters = []
        for seed in range(10):
            grid = _carve(name, 30, seed)
            dead_ends.append(len(grid.dead_ends()))
            diameters.append(LongestPath.compute(grid, grid.cells[0]).length)
        mean_dead_ends = float(np.mean(dead_ends))
        print(
            f"{name:<26}{mean_dead_ends:>12.1f}"
            f"{100 * mean_dead_ends / 900:>11.1f}%"
            f"{float(np.mean(diameters)):>12.1f}"
        )
    print()


def bench_queries() -> None:
    print("Queries on a recursive backtracker maze (ms per call)")
    print("=" * 78)
    print(f"{'Size':<26}{'distances':>12}{'path_to':>12}{'longest':>12}")
    print("-" * 78)

    for size in SIZES:
        grid = _carve("recursive_backtracker", size)
        root = grid.cells[0]
        goal = grid.cells[-1]
        distances = root.distances()

        build_ms = _bench(root.distances)
        path_ms = _bench(lambda distances=distances, goal=goal: distances.path_to(goal))
        longest_ms = _bench(
            lambda grid=grid, root=root: LongestPath.compute(grid, root)
        )
        label = f"{size}x{size}"
        print(f"{label:<26}{build_ms:>10.3f}ms{path_ms:>10.3f}ms{longest_ms:>10.3f}ms")
    print()


def bench_memory() -> None:
    print("Grid memory use (unlinked grids)")
    print("=" * 78)

    for size in (100, 200, 500):
        gc.collect()
        tracemalloc.start()
        grid = Grid(size, size)
        current, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()
        per_cell = current / grid.size
        print(
            f"  {size}x{size}: {current / 1_048_576:>8.2f} MB "
            f"(peak {peak / 1_048_576:.2f} MB, {per_cell:.0f} bytes/cell)"
        )
        del grid
    print()


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main() -> None:
    bench_generation()
    bench_structure()
    bench_queries()
    bench_memory()

    # ------------------------------------------------------------------
    # Sanity checks
    # ------------------------------------------------------------------
    print("Sanity checks...")
    for name in sorted(ALGORITHMS):
        grid = _carve(name, 20)
        links = grid.link_count()
        status = "OK!" if links == grid.size - 1 else "FAIL"
        print(f"  {name}: {links} links for {grid.size} cells. {status}")


if __name__ == "__main__":
    main()
