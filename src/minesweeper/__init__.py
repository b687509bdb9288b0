"""
Minesweeper game module.

Provides the game engine, board and tile state, read-only snapshots for
presentation layers, and a gymnasium adapter.
"""
from .tile import Tile, TileStatus
from .board import Board, BoardConfig, GameStatus, OutOfBoundsError
from .snapshot import Snapshot, TileView
from .engine import GameEngine
from .environment import MinesweeperEnv

__all__ = [
    "Tile",
    "TileStatus",
    "Board",
    "BoardConfig",
    "GameStatus",
    "OutOfBoundsError",
    "Snapshot",
    "TileView",
    "GameEngine",
    "MinesweeperEnv",
]
