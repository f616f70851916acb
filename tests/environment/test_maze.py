"""Tests for the level orchestrator."""

from __future__ import annotations

import logging

import pytest

from catacomb import config
from catacomb.environment.generators import ALGORITHMS, MazeAlgorithm
from catacomb.environment.grid import ConfigurationError, Grid
from catacomb.environment.longest_path import LongestPath
from catacomb.environment.maze import (
    MazeStats,
    create_maze,
    generate_layout,
    random_layout,
)
from catacomb.environment.validation import DisconnectedMazeError, is_fully_connected


class _LeaveUncarved(MazeAlgorithm):
    """Test algorithm that opens no passages at all."""

    name = "leave_uncarved"
    rng_domain = "maze.test"

    def generate(self, grid: Grid) -> None:
        pass


def _link_set(grid: Grid) -> set[tuple[int, int]]:
    return {(cell.index, other.index) for cell in grid for other in cell.links}


class TestCreateMaze:
    """Tests for create_maze()."""

    @pytest.mark.parametrize("name", sorted(ALGORITHMS))
    def test_named_algorithm_carves_connected_grid(self, name: str) -> None:
        grid = create_maze(6, 9, algorithm=name, seed=7)

        assert (grid.rows, grid.columns) == (6, 9)
        assert grid.algorithm == name
        assert is_fully_connected(grid)

    @pytest.mark.parametrize("name", sorted(ALGORITHMS))
    def test_same_seed_reproduces_maze(self, name: str) -> None:
        first = create_maze(8, 8, algorithm=name, seed="crypt")
        second = create_maze(8, 8, algorithm=name, seed="crypt")
        assert _link_set(first) == _link_set(second)

    def test_different_seeds_differ(self) -> None:
        first = create_maze(8, 8, algorithm="recursive_backtracker", seed=1)
        second = create_maze(8, 8, algorithm="recursive_backtracker", seed=2)
        assert _link_set(first) != _link_set(second)

    def test_random_algorithm_choice_follows_seed(self) -> None:
        names = {create_maze(4, 4, seed=99).algorithm for _ in range(3)}
        assert len(names) == 1
        assert names <= set(ALGORITHMS)

    def test_default_algorithm_from_config(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(config, "DEFAULT_ALGORITHM", "binary_tree")
        assert create_maze(4, 4, seed=3).algorithm == "binary_tree"

    def test_default_seed_from_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(config, "RANDOM_SEED", 1234)
        first = create_maze(6, 6, algorithm="aldous_broder")
        second = create_maze(6, 6, algorithm="aldous_broder", seed=1234)
        assert _link_set(first) == _link_set(second)

    def test_fresh_seed_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="catacomb.environment.maze"):
            create_maze(3, 3, algorithm="binary_tree")
        assert "Map initialized with seed:" in caplog.text

    def test_unknown_algorithm_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown maze algorithm: 'growing_tree'"):
            create_maze(4, 4, algorithm="growing_tree", seed=0)

    @pytest.mark.parametrize(("rows", "columns"), [(0, 4), (4, -2)])
    def test_bad_dimensions_raise(self, rows: int, columns: int) -> None:
        with pytest.raises(ConfigurationError):
            create_maze(rows, columns, algorithm="binary_tree", seed=0)

    def test_algorithm_instance_is_used_as_is(self) -> None:
        from random import Random

        from catacomb.environment.generators import BinaryTree

        algorithm = BinaryTree(Random(5))
        grid = create_maze(5, 5, algorithm=algorithm, seed=0)

        expected = Grid(5, 5)
        BinaryTree(Random(5)).generate(expected)
        assert _link_set(grid) == _link_set(expected)

    def test_cell_outlives_the_returned_grid(self) -> None:
        cell = create_maze(4, 4, algorithm="recursive_backtracker", seed=1).cell(0, 0)
        assert cell is not None

        far_cell, distance = cell.distances().max()

        assert len(cell.distances()) == 16
        assert cell.distances().path_to(far_cell)[-1] is far_cell
        assert distance > 0
        assert cell.neighbors

    def test_disconnected_result_is_rejected(self) -> None:
        with pytest.raises(DisconnectedMazeError):
            create_maze(3, 3, algorithm=_LeaveUncarved(), seed=0)

    def test_validation_can_be_disabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(config, "VALIDATE_CONNECTIVITY", False)
        grid = create_maze(3, 3, algorithm=_LeaveUncarved(), seed=0)
        assert grid.link_count() == 0
        assert grid.algorithm == "leave_uncarved"


class TestGenerateLayout:
    """Tests for objective placement on the longest path."""

    @pytest.mark.parametrize("name", sorted(ALGORITHMS))
    def test_objectives_sit_on_longest_path_ends(self, name: str) -> None:
        layout = generate_layout(9, 7, algorithm=name, seed=21)

        assert layout.algorithm == name
        assert layout.seed == 21
        assert (layout.player_start, layout.stairs) == layout.longest_path.endpoints

        player = layout.grid.cell(*layout.player_start)
        stairs = layout.grid.cell(*layout.stairs)
        assert player is not None
        assert stairs is not None
        assert player.distances().at(stairs) == layout.longest_path.length

    def test_longest_path_spans_the_maze(self) -> None:
        layout = generate_layout(8, 8, algorithm="recursive_backtracker", seed=4)
        diameter = max(cell.distances().max()[1] for cell in layout.grid)
        assert layout.longest_path.length == diameter

    def test_layout_is_reproducible(self) -> None:
        first = generate_layout(10, 10, seed="stairs")
        second = generate_layout(10, 10, seed="stairs")

        assert first.algorithm == second.algorithm
        assert first.player_start == second.player_start
        assert first.stairs == second.stairs
        assert _link_set(first.grid) == _link_set(second.grid)

    def test_stats_describe_the_grid(self) -> None:
        layout = generate_layout(6, 6, algorithm="aldous_broder", seed=2)
        stats = layout.stats

        assert stats == MazeStats.from_grid(layout.grid, layout.longest_path)
        assert stats.cell_count == 36
        assert stats.link_count == 35
        assert stats.diameter == layout.longest_path.length
        assert stats.dead_end_ratio == stats.dead_end_count / 36

    def test_single_cell_level(self) -> None:
        layout = generate_layout(1, 1, algorithm="binary_tree", seed=0)
        assert layout.player_start == layout.stairs == (0, 0)
        assert layout.longest_path.length == 0

    def test_layout_logs_placement(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="catacomb.environment.maze"):
            generate_layout(5, 5, algorithm="binary_tree", seed=8)
        assert "Creating new level with rows: 5, columns: 5, seed: 8" in caplog.text
        assert "Player placed at" in caplog.text

    def test_longest_path_type(self) -> None:
        layout = generate_layout(3, 3, algorithm="binary_tree", seed=1)
        assert isinstance(layout.longest_path, LongestPath)


class TestRandomLayout:
    """Tests for randomly sized levels."""

    @pytest.mark.parametrize("seed", range(5))
    def test_dimensions_within_configured_range(self, seed: int) -> None:
        layout = random_layout(seed)
        low, high = config.RANDOM_LEVEL_MIN_SIZE, config.RANDOM_LEVEL_MAX_SIZE

        assert low <= layout.grid.rows <= high
        assert low <= layout.grid.columns <= high
        assert is_fully_connected(layout.grid)

    def test_same_seed_same_dimensions(self) -> None:
        first = random_layout("depths")
        second = random_layout("depths")
        assert (first.grid.rows, first.grid.columns) == (
            second.grid.rows,
            second.grid.columns,
        )
