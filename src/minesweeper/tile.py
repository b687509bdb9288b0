"""
Tile module for Minesweeper game.

Represents individual tiles on the game board with their position,
mine flag, and visibility status.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, Tuple


# ============================================================================
# Constants
# ============================================================================

class TileStatus(Enum):
    """Possible visual states of a tile."""

    HIDDEN = auto()
    FLAGGED = auto()
    REVEALED = auto()
    EXPLODED_MINE = auto()


# ============================================================================
# Tile Data Class
# ============================================================================

@dataclass
class Tile:
    """
    Represents a single tile in the Minesweeper grid.

    Attributes:
        x: Column index.
        y: Row index.
        is_mine: Whether this tile contains a mine.
        status: Current visual status.
        adjacent_mine_count: Mines among the neighbours, set only once a
            safe tile has been revealed.
    """

    x: int
    y: int
    is_mine: bool = False
    status: TileStatus = TileStatus.HIDDEN
    adjacent_mine_count: Optional[int] = None

    def reveal(self, adjacent_mine_count: int) -> bool:
        """
        Reveal this safe tile with its neighbour mine count.

        Returns:
            True if the tile was revealed, False if it was not hidden.
        """
        if self.status != TileStatus.HIDDEN:
            return False
        self.status = TileStatus.REVEALED
        self.adjacent_mine_count = adjacent_mine_count
        return True

    def explode(self) -> bool:
        """Mark a hidden mine as the one the player stepped on."""
        if self.status != TileStatus.HIDDEN:
            return False
        self.status = TileStatus.EXPLODED_MINE
        return True

    def expose_mine(self) -> bool:
        """Show an untouched mine after the game is lost."""
        if self.status not in (TileStatus.HIDDEN, TileStatus.FLAGGED):
            return False
        self.status = TileStatus.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this tile.

        Returns:
            True if flag was toggled, False if tile is already open.
        """
        if self.status == TileStatus.HIDDEN:
            self.status = TileStatus.FLAGGED
        elif self.status == TileStatus.FLAGGED:
            self.status = TileStatus.HIDDEN
        else:
            return False
        return True

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def is_hidden(self) -> bool:
        """Check if tile is hidden."""
        return self.status == TileStatus.HIDDEN

    @property
    def is_flagged(self) -> bool:
        """Check if tile is flagged."""
        return self.status == TileStatus.FLAGGED

    @property
    def is_revealed(self) -> bool:
        """Check if tile is revealed."""
        return self.status == TileStatus.REVEALED

    @property
    def is_exploded(self) -> bool:
        return self.status == TileStatus.EXPLODED_MINE

    def to_observation(self) -> int:
        """
        Convert tile to observation value.

        Returns:
            -1: Hidden tile
            -2: Flagged tile
            0-8: Revealed tile with adjacent mine count
            9: Visible mine (game over state)
        """
        if self.status == TileStatus.HIDDEN:
            return -1
        if self.status == TileStatus.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mine_count or 0
