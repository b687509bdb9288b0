"""
Board module for Minesweeper game.

Implements the square game board with mine placement, tile revealing,
flagging, and game status evaluation.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import FrozenSet, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .tile import Tile, TileStatus


Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


class OutOfBoundsError(ValueError):
    """Raised when a coordinate lies outside the board."""

    def __init__(self, x: int, y: int, size: int) -> None:
        super().__init__(f"Tile ({x}, {y}) is outside the {size}x{size} board")
        self.x = x
        self.y = y
        self.size = size


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        size: Number of rows and columns.
        num_mines: Total mines to place.
    """

    size: int = 7
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < 1:
            raise ValueError("Board size must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.size * self.size - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def area(self) -> int:
        return self.size * self.size


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Holds the grid of tiles and the mine set. Mines are fixed when the
    board is built; only tile statuses change afterwards.
    """

    config: BoardConfig
    mines: FrozenSet[Position]
    _grid: List[List[Tile]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Check the mine set and build the grid."""
        self._validate_mines()
        self._init_grid()

    # ========================================================================
    # Construction (Low-level)
    # ========================================================================

    @classmethod
    def generate(
        cls,
        config: Optional[BoardConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> "Board":
        """
        Build a board with randomly placed mines.

        Args:
            config: Board configuration (default: 7x7 with 10 mines).
            rng: Random generator used for placement.

        Returns:
            A fresh board with every tile hidden.
        """
        config = config or BoardConfig()
        rng = rng if rng is not None else np.random.default_rng()
        return cls(config, cls._sample_mines(config, rng))

    @classmethod
    def from_mines(cls, size: int, mines: Iterable[Position]) -> "Board":
        """Build a board from an explicit mine layout."""
        mine_list = [(int(x), int(y)) for x, y in mines]
        mine_set = frozenset(mine_list)
        if len(mine_set) != len(mine_list):
            raise ValueError("Mine positions must be unique")
        return cls(BoardConfig(size, len(mine_set)), mine_set)

    @staticmethod
    def _sample_mines(
        config: BoardConfig, rng: np.random.Generator
    ) -> FrozenSet[Position]:
        """Draw distinct mine positions, resampling on duplicates."""
        positions = set()
        while len(positions) < config.num_mines:
            x = int(rng.integers(config.size))
            y = int(rng.integers(config.size))
            positions.add((x, y))
        return frozenset(positions)

    def _validate_mines(self) -> None:
        if len(self.mines) != self.config.num_mines:
            raise ValueError(
                f"Expected {self.config.num_mines} mines, got {len(self.mines)}"
            )
        for x, y in self.mines:
            if not self.is_valid_position(x, y):
                raise OutOfBoundsError(x, y, self.config.size)

    def _init_grid(self) -> None:
        """Create grid of hidden tiles, indexed [y][x]."""
        self._grid = [
            [Tile(x, y, is_mine=(x, y) in self.mines) for x in range(self.size)]
            for y in range(self.size)
        ]

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    @property
    def size(self) -> int:
        return self.config.size

    def is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.size and 0 <= y < self.config.size

    def get_neighbors(self, x: int, y: int) -> List[Position]:
        """
        Get valid neighboring tile positions.

        Args:
            x: Column index of center tile.
            y: Row index of center tile.

        Returns:
            List of (x, y) tuples for in-bounds neighbours.
        """
        neighbors = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self.is_valid_position(new_x, new_y):
                    neighbors.append((new_x, new_y))
        return neighbors

    def count_adjacent_mines(self, x: int, y: int) -> int:
        """Count mines adjacent to a specific tile."""
        return sum(1 for pos in self.get_neighbors(x, y) if pos in self.mines)

    # ========================================================================
    # Tile Actions (Mid-level)
    # ========================================================================

    def get_tile(self, x: int, y: int) -> Tile:
        """Get tile at position, raising OutOfBoundsError if invalid."""
        if not self.is_valid_position(x, y):
            raise OutOfBoundsError(x, y, self.config.size)
        return self._grid[y][x]

    def reveal(self, x: int, y: int) -> bool:
        """
        Reveal the tile at the given position.

        A mine explodes. A safe tile with no adjacent mines opens its
        neighbours, worked off an explicit stack so large empty regions
        do not recurse.

        Returns:
            True if any tile changed, False if the tile was not hidden.
        """
        tile = self.get_tile(x, y)
        if not tile.is_hidden:
            return False

        if tile.is_mine:
            return tile.explode()

        pending = [(x, y)]
        while pending:
            cur_x, cur_y = pending.pop()
            current = self._grid[cur_y][cur_x]
            if not current.is_hidden:
                continue
            count = self.count_adjacent_mines(cur_x, cur_y)
            current.reveal(count)
            if count > 0:
                continue
            for nx, ny in self.get_neighbors(cur_x, cur_y):
                neighbor = self._grid[ny][nx]
                if neighbor.is_hidden and not neighbor.is_mine:
                    pending.append((nx, ny))
        return True

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle flag on a tile.

        Returns:
            True if flag was toggled, False otherwise.
        """
        return self.get_tile(x, y).toggle_flag()

    def expose_mines(self) -> int:
        """Make every untouched mine visible. Returns how many changed."""
        exposed = 0
        for x, y in self.mines:
            if self._grid[y][x].expose_mine():
                exposed += 1
        return exposed

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def tiles(self) -> Iterator[Tile]:
        """Iterate over tiles in row-major order."""
        for row in self._grid:
            yield from row

    def evaluate_status(self) -> GameStatus:
        """Derive the game status from tile statuses."""
        if any(tile.is_exploded for tile in self.tiles()):
            return GameStatus.LOST
        if all(self._is_settled(tile) for tile in self.tiles()):
            return GameStatus.WON
        return GameStatus.IN_PROGRESS

    @staticmethod
    def _is_settled(tile: Tile) -> bool:
        if tile.is_mine:
            return tile.status in (TileStatus.HIDDEN, TileStatus.FLAGGED)
        return tile.is_revealed

    @property
    def flagged_count(self) -> int:
        return sum(1 for tile in self.tiles() if tile.is_flagged)

    @property
    def mines_left(self) -> int:
        """Mine count minus placed flags; negative when over-flagged."""
        return self.config.num_mines - self.flagged_count

    def hidden_positions(self) -> List[Position]:
        """
        Get list of tiles that can still be revealed.

        Returns:
            List of (x, y) positions in row-major order.
        """
        return [tile.position for tile in self.tiles() if tile.is_hidden]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array indexed [y, x].

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = visible mine
        """
        obs = np.zeros((self.size, self.size), dtype=np.int8)
        for tile in self.tiles():
            obs[tile.y, tile.x] = tile.to_observation()
        return obs
