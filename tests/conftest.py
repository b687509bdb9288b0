"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, GameEngine, Tile


# ============================================================================
# Board Fixtures
# ============================================================================

# Mines in the two right-hand columns of a 5x5 board:
#
#   . . . * *      x = 3, 4
#   . . . * *
#   . . . . .
#   . . . . .
#   . . . . .
CORNER_MINES = [(3, 0), (4, 0), (3, 1), (4, 1)]


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator for reproducible layouts."""
    return np.random.default_rng(1234)


@pytest.fixture
def default_board(rng: np.random.Generator) -> Board:
    """Create a default 7x7 board with 10 mines."""
    return Board.generate(rng=rng)


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board.from_mines(5, [])


@pytest.fixture
def corner_board() -> Board:
    """5x5 board with a 2x2 mine block in the top-right corner."""
    return Board.from_mines(5, CORNER_MINES)


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def engine(rng: np.random.Generator) -> GameEngine:
    """Engine running a seeded default game."""
    engine = GameEngine()
    engine.new_game(rng=rng)
    return engine


@pytest.fixture
def corner_engine() -> GameEngine:
    """Engine running the corner mine layout."""
    return GameEngine.from_mines(5, CORNER_MINES)


# ============================================================================
# Tile Fixtures
# ============================================================================

@pytest.fixture
def hidden_tile() -> Tile:
    """Create a hidden safe tile."""
    return Tile(0, 0)


@pytest.fixture
def mine_tile() -> Tile:
    """Create a tile containing a mine."""
    return Tile(0, 0, is_mine=True)
