"""
Game engine for Minesweeper.

Owns the current board, applies the two player intents (reveal and flag),
and pushes a Snapshot to subscribed presentation layers after every
change. Once a game is won or lost the board is frozen until new_game.
"""
import logging
from typing import Callable, Iterable, List, Optional

import numpy as np

from .board import Board, BoardConfig, GameStatus, Position
from .snapshot import Snapshot, format_status_line


logger = logging.getLogger(__name__)

SnapshotListener = Callable[[Snapshot], None]

DEFAULT_BOARD_SIZE = BoardConfig().size
DEFAULT_MINE_COUNT = BoardConfig().num_mines


# ============================================================================
# Game Engine
# ============================================================================

class GameEngine:
    """
    Single-player Minesweeper engine.

    Construct one per session and wire its snapshots to a renderer:

        engine = GameEngine(Board.generate(config, rng))
        engine.subscribe(renderer.draw)
        engine.reveal_tile(3, 3)
    """

    def __init__(self, board: Optional[Board] = None) -> None:
        """
        Initialize the engine.

        Args:
            board: Board to start from. A random default board is
                generated when omitted.
        """
        self._listeners: List[SnapshotListener] = []
        self._board = board if board is not None else Board.generate()

    # ========================================================================
    # Game Lifecycle
    # ========================================================================

    def new_game(
        self,
        board_size: int = DEFAULT_BOARD_SIZE,
        mine_count: int = DEFAULT_MINE_COUNT,
        rng: Optional[np.random.Generator] = None,
    ) -> Board:
        """
        Replace the current board with a freshly generated one.

        Args:
            board_size: Number of rows and columns.
            mine_count: Mines to place, fewer than board_size squared.
            rng: Random generator used for mine placement.

        Returns:
            The new board.
        """
        board = Board.generate(BoardConfig(board_size, mine_count), rng)
        return self._start(board)

    @classmethod
    def from_mines(
        cls, board_size: int, mines: Iterable[Position]
    ) -> "GameEngine":
        """Create an engine whose first game uses the given mines."""
        return cls(Board.from_mines(board_size, mines))

    def _start(self, board: Board) -> Board:
        self._board = board
        logger.info(
            "New game: %dx%d board with %d mines",
            board.size, board.size, board.config.num_mines,
        )
        self._publish()
        return board

    # ========================================================================
    # Player Intents
    # ========================================================================

    def reveal_tile(self, x: int, y: int) -> None:
        """
        Reveal the tile at (x, y).

        Out-of-bounds coordinates raise OutOfBoundsError. Revealing a
        tile that is not hidden, or playing after the game ended, does
        nothing.
        """
        tile = self._board.get_tile(x, y)
        if self.status != GameStatus.IN_PROGRESS or not tile.is_hidden:
            logger.debug("Ignoring reveal at (%d, %d)", x, y)
            return

        logger.debug("Reveal (%d, %d)", x, y)
        self._board.reveal(x, y)
        self.evaluate_game_status()
        self._publish()

    def flag_tile(self, x: int, y: int) -> None:
        """
        Toggle the flag on the tile at (x, y).

        Out-of-bounds coordinates raise OutOfBoundsError. Revealed tiles
        and finished games are left unchanged.
        """
        tile = self._board.get_tile(x, y)
        if self.status != GameStatus.IN_PROGRESS:
            logger.debug("Ignoring flag at (%d, %d): game over", x, y)
            return
        if not self._board.toggle_flag(x, y):
            logger.debug("Ignoring flag at (%d, %d)", x, y)
            return

        logger.debug("Flag (%d, %d) -> %s", x, y, tile.status.name)
        self._publish()

    def evaluate_game_status(self) -> GameStatus:
        """
        Evaluate the board and apply end-of-game effects.

        A lost game shows every remaining mine.
        """
        status = self._board.evaluate_status()
        if status == GameStatus.LOST:
            exposed = self._board.expose_mines()
            logger.info("Game lost, %d mines exposed", exposed)
        elif status == GameStatus.WON:
            logger.info("Game won")
        return status

    # ========================================================================
    # Snapshots
    # ========================================================================

    def subscribe(self, listener: SnapshotListener) -> None:
        """Register a callback receiving a Snapshot after each change."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: SnapshotListener) -> None:
        self._listeners.remove(listener)

    def snapshot(self) -> Snapshot:
        """Capture the current game state."""
        return Snapshot.from_board(self._board)

    def _publish(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        return self._board

    @property
    def status(self) -> GameStatus:
        """Current game status, derived from the board."""
        return self._board.evaluate_status()

    @property
    def is_playing(self) -> bool:
        return self.status == GameStatus.IN_PROGRESS

    @property
    def mines_left(self) -> int:
        return self._board.mines_left

    @property
    def status_line(self) -> str:
        return format_status_line(self.status, self.mines_left)

    def hidden_positions(self) -> List[Position]:
        """Tiles that still accept a reveal, empty once the game is over."""
        if not self.is_playing:
            return []
        return self._board.hidden_positions()
