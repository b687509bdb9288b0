"""
Read-only view of a game for presentation layers.

A Snapshot is built from a Board after each change and never refers back
to it, so renderers can hold on to it freely.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .board import Board, GameStatus, OutOfBoundsError
from .tile import TileStatus


# ============================================================================
# Status Line
# ============================================================================

WIN_MESSAGE = "You Win!"
LOSE_MESSAGE = "You Lose!"


def format_status_line(status: GameStatus, mines_left: int) -> str:
    """Text shown above the board."""
    if status == GameStatus.WON:
        return WIN_MESSAGE
    if status == GameStatus.LOST:
        return LOSE_MESSAGE
    return f"Mines left: {mines_left}"


# ============================================================================
# Snapshot Data Classes
# ============================================================================

@dataclass(frozen=True)
class TileView:
    """Visible part of one tile. Hidden tiles never expose is_mine."""

    x: int
    y: int
    status: TileStatus
    adjacent_mine_count: Optional[int] = None

    def to_observation(self) -> int:
        if self.status == TileStatus.HIDDEN:
            return -1
        if self.status == TileStatus.FLAGGED:
            return -2
        if self.adjacent_mine_count is None:
            return 9
        return self.adjacent_mine_count


@dataclass(frozen=True)
class Snapshot:
    """
    Immutable projection of the game state.

    Attributes:
        size: Number of rows and columns.
        tiles: Tile views in row-major order.
        status: Current game status.
        mines_left: Mine count minus placed flags.
        status_line: "Mines left: n", "You Win!" or "You Lose!".
    """

    size: int
    tiles: Tuple[TileView, ...]
    status: GameStatus
    mines_left: int
    status_line: str

    @classmethod
    def from_board(cls, board: Board) -> "Snapshot":
        """Capture the current state of a board."""
        status = board.evaluate_status()
        mines_left = board.mines_left
        tiles = tuple(
            TileView(tile.x, tile.y, tile.status, tile.adjacent_mine_count)
            for tile in board.tiles()
        )
        return cls(
            size=board.size,
            tiles=tiles,
            status=status,
            mines_left=mines_left,
            status_line=format_status_line(status, mines_left),
        )

    def tile(self, x: int, y: int) -> TileView:
        """Get the view of the tile at (x, y)."""
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise OutOfBoundsError(x, y, self.size)
        return self.tiles[y * self.size + x]

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    def to_observation(self) -> np.ndarray:
        """Snapshot as an int8 array indexed [y, x]."""
        obs = np.array(
            [view.to_observation() for view in self.tiles], dtype=np.int8
        )
        return obs.reshape(self.size, self.size)

    def render(self) -> str:
        """Render status line and board as plain text."""
        lines = [self.status_line]
        for y in range(self.size):
            row = self.tiles[y * self.size:(y + 1) * self.size]
            lines.append(" ".join(_tile_char(view) for view in row))
        return "\n".join(lines)


def _tile_char(view: TileView) -> str:
    if view.status == TileStatus.HIDDEN:
        return "."
    if view.status == TileStatus.FLAGGED:
        return "F"
    if view.status == TileStatus.EXPLODED_MINE:
        return "X"
    if view.adjacent_mine_count is None:
        return "*"
    if view.adjacent_mine_count == 0:
        return " "
    return str(view.adjacent_mine_count)
