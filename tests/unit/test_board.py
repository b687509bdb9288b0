"""
Unit tests for Board class.

Tests configuration validation, mine placement, flood-fill reveal,
status evaluation, and observation generation.
"""
import pytest
import numpy as np
from minesweeper import Board, BoardConfig, GameStatus, OutOfBoundsError, TileStatus


# Full column of mines at x = 2 splits a 5x5 board in two
WALL_MINES = [(2, y) for y in range(5)]


def count_status(board: Board, status: TileStatus) -> int:
    return sum(1 for tile in board.tiles() if tile.status == status)


# ============================================================================
# Board Configuration Tests
# ============================================================================

class TestBoardConfig:
    """Test board configuration validation."""

    def test_defaults(self) -> None:
        """Default board is 7x7 with 10 mines."""
        config = BoardConfig()
        assert config.size == 7
        assert config.num_mines == 10
        assert config.area == 49

    def test_zero_size_raises_error(self) -> None:
        with pytest.raises(ValueError, match="size must be positive"):
            BoardConfig(0, 0)

    def test_negative_mines_raises_error(self) -> None:
        with pytest.raises(ValueError, match="cannot be negative"):
            BoardConfig(7, -1)

    def test_mines_filling_board_raises_error(self) -> None:
        """Mine count must stay below the tile count."""
        with pytest.raises(ValueError, match="Too many mines"):
            BoardConfig(3, 9)

    def test_max_mines_is_valid(self) -> None:
        assert BoardConfig(3, 8).num_mines == 8


# ============================================================================
# Mine Placement Tests
# ============================================================================

class TestMinePlacement:
    """Test random and explicit mine layouts."""

    @pytest.mark.parametrize("seed", range(20))
    def test_generated_mines_are_unique_and_in_bounds(self, seed: int) -> None:
        """Every generated board has exactly the configured mine count."""
        board = Board.generate(BoardConfig(7, 10), np.random.default_rng(seed))
        assert len(board.mines) == 10
        for x, y in board.mines:
            assert board.is_valid_position(x, y)

    def test_dense_board_fills_all_but_one(self) -> None:
        """Rejection sampling still terminates on a nearly full board."""
        board = Board.generate(BoardConfig(3, 8), np.random.default_rng(0))
        assert len(board.mines) == 8

    def test_tile_mine_flags_match_mine_set(self, default_board: Board) -> None:
        mines = {tile.position for tile in default_board.tiles() if tile.is_mine}
        assert mines == set(default_board.mines)

    def test_new_board_all_hidden(self, default_board: Board) -> None:
        assert count_status(default_board, TileStatus.HIDDEN) == 49

    def test_same_seed_same_layout(self) -> None:
        first = Board.generate(rng=np.random.default_rng(7))
        second = Board.generate(rng=np.random.default_rng(7))
        assert first.mines == second.mines

    def test_from_mines_rejects_duplicates(self) -> None:
        with pytest.raises(ValueError, match="unique"):
            Board.from_mines(3, [(0, 0), (0, 0)])

    def test_from_mines_rejects_out_of_bounds(self) -> None:
        with pytest.raises(OutOfBoundsError):
            Board.from_mines(3, [(3, 0)])


# ============================================================================
# Neighbor Tests
# ============================================================================

class TestNeighbors:
    """Test neighbour enumeration and counting."""

    @pytest.mark.parametrize(
        "position, expected",
        [((0, 0), 3), ((2, 0), 5), ((2, 2), 8), ((4, 4), 3)],
    )
    def test_neighbor_count(self, empty_board: Board, position, expected) -> None:
        assert len(empty_board.get_neighbors(*position)) == expected

    def test_neighbors_exclude_center(self, empty_board: Board) -> None:
        assert (2, 2) not in empty_board.get_neighbors(2, 2)

    def test_count_adjacent_mines(self, corner_board: Board) -> None:
        assert corner_board.count_adjacent_mines(0, 0) == 0
        assert corner_board.count_adjacent_mines(2, 0) == 2
        assert corner_board.count_adjacent_mines(2, 2) == 1
        assert corner_board.count_adjacent_mines(4, 2) == 2


# ============================================================================
# Reveal Tests
# ============================================================================

class TestReveal:
    """Test tile revealing and cascade behavior."""

    def test_reveal_numbered_tile_does_not_cascade(
        self, corner_board: Board
    ) -> None:
        """A tile next to a mine opens alone."""
        assert corner_board.reveal(2, 0) is True
        assert count_status(corner_board, TileStatus.REVEALED) == 1
        assert corner_board.get_tile(2, 0).adjacent_mine_count == 2

    def test_empty_board_cascades_everywhere(self, empty_board: Board) -> None:
        """Revealing one tile of a mine-free board opens all of it."""
        empty_board.reveal(2, 2)
        for tile in empty_board.tiles():
            assert tile.is_revealed
            assert tile.adjacent_mine_count == 0

    def test_cascade_stops_at_numbered_border(self) -> None:
        """Flood fill opens the zero region and its numbered edge only."""
        board = Board.from_mines(5, WALL_MINES)
        board.reveal(0, 0)

        for y in range(5):
            assert board.get_tile(0, y).adjacent_mine_count == 0
            assert board.get_tile(1, y).is_revealed
            assert board.get_tile(3, y).is_hidden
            assert board.get_tile(4, y).is_hidden
        assert board.get_tile(1, 0).adjacent_mine_count == 2
        assert board.get_tile(1, 2).adjacent_mine_count == 3

    def test_cascade_skips_flagged_tiles(self, empty_board: Board) -> None:
        """Flags survive a cascade."""
        empty_board.toggle_flag(4, 4)
        empty_board.reveal(0, 0)
        assert empty_board.get_tile(4, 4).is_flagged
        assert count_status(empty_board, TileStatus.REVEALED) == 24

    def test_reveal_is_idempotent(self, corner_board: Board) -> None:
        corner_board.reveal(0, 4)
        before = corner_board.get_observation()
        assert corner_board.reveal(0, 4) is False
        np.testing.assert_array_equal(corner_board.get_observation(), before)

    def test_reveal_mine_explodes(self, corner_board: Board) -> None:
        corner_board.reveal(3, 0)
        assert corner_board.get_tile(3, 0).status == TileStatus.EXPLODED_MINE
        assert count_status(corner_board, TileStatus.REVEALED) == 0

    def test_reveal_out_of_bounds_raises(self, corner_board: Board) -> None:
        with pytest.raises(OutOfBoundsError):
            corner_board.reveal(5, 0)
        with pytest.raises(OutOfBoundsError):
            corner_board.reveal(0, -1)

    def test_large_board_cascade(self) -> None:
        """Cascade over a big empty board does not hit recursion limits."""
        board = Board.from_mines(60, [])
        board.reveal(0, 0)
        assert count_status(board, TileStatus.REVEALED) == 60 * 60


# ============================================================================
# Status Evaluation Tests
# ============================================================================

class TestEvaluateStatus:
    """Test status derivation from tile states."""

    def test_new_board_in_progress(self, corner_board: Board) -> None:
        assert corner_board.evaluate_status() == GameStatus.IN_PROGRESS

    def test_exploded_mine_loses(self, corner_board: Board) -> None:
        corner_board.reveal(4, 1)
        assert corner_board.evaluate_status() == GameStatus.LOST

    def test_all_safe_revealed_wins(self, corner_board: Board) -> None:
        corner_board.reveal(0, 4)
        assert corner_board.evaluate_status() == GameStatus.WON

    def test_flagged_mines_still_win(self, corner_board: Board) -> None:
        corner_board.toggle_flag(3, 0)
        corner_board.toggle_flag(4, 1)
        corner_board.reveal(0, 4)
        assert corner_board.evaluate_status() == GameStatus.WON

    def test_flagged_safe_tile_blocks_win(self) -> None:
        """A flag on a safe tile keeps the game running."""
        board = Board.from_mines(2, [(0, 0)])
        board.toggle_flag(1, 1)
        board.reveal(1, 0)
        board.reveal(0, 1)
        assert board.evaluate_status() == GameStatus.IN_PROGRESS

    def test_single_tile_board(self) -> None:
        board = Board.from_mines(1, [])
        board.reveal(0, 0)
        assert board.get_tile(0, 0).adjacent_mine_count == 0
        assert board.evaluate_status() == GameStatus.WON


# ============================================================================
# Flag and Counter Tests
# ============================================================================

class TestFlags:
    """Test flagging and mines-left bookkeeping."""

    def test_mines_left_tracks_flags(self, corner_board: Board) -> None:
        assert corner_board.mines_left == 4
        corner_board.toggle_flag(0, 0)
        corner_board.toggle_flag(3, 0)
        assert corner_board.mines_left == 2
        corner_board.toggle_flag(0, 0)
        assert corner_board.mines_left == 3

    def test_flag_revealed_tile_fails(self, corner_board: Board) -> None:
        corner_board.reveal(2, 0)
        assert corner_board.toggle_flag(2, 0) is False

    def test_expose_mines(self, corner_board: Board) -> None:
        """Expose shows every untouched mine without cascading."""
        corner_board.toggle_flag(4, 0)
        corner_board.reveal(3, 0)
        assert corner_board.expose_mines() == 3
        assert corner_board.get_tile(3, 0).is_exploded
        for x, y in [(4, 0), (3, 1), (4, 1)]:
            assert corner_board.get_tile(x, y).is_revealed
        assert corner_board.get_tile(0, 0).is_hidden


# ============================================================================
# Observation Tests
# ============================================================================

class TestObservation:
    """Test observation array."""

    def test_shape_and_dtype(self, default_board: Board) -> None:
        obs = default_board.get_observation()
        assert obs.shape == (7, 7)
        assert obs.dtype == np.int8

    def test_new_board_all_hidden(self, default_board: Board) -> None:
        assert np.all(default_board.get_observation() == -1)

    def test_observation_indexed_y_x(self, corner_board: Board) -> None:
        corner_board.toggle_flag(4, 0)
        corner_board.reveal(2, 1)
        obs = corner_board.get_observation()
        assert obs[0, 4] == -2
        assert obs[1, 2] == 2

    def test_hidden_positions(self, corner_board: Board) -> None:
        corner_board.reveal(2, 0)
        positions = corner_board.hidden_positions()
        assert (2, 0) not in positions
        assert len(positions) == 24
