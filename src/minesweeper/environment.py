"""
Gymnasium environment wrapper for Minesweeper.

Exposes the engine's reveal and flag intents as a discrete action space
so scripted or learning players can drive a game.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, GameStatus
from .engine import GameEngine
from .snapshot import Snapshot


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array indexed [y, x] where:
        - -1 = hidden tile
        - -2 = flagged tile
        - 0-8 = revealed tile with adjacent mine count
        - 9 = visible mine

    Actions:
        Discrete action space of size 2 * size * size.
        Action a < size * size reveals tile (a % size, a // size);
        the remaining actions flag the same tiles.

    Rewards:
        - +1 for revealing a safe tile
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 7x7 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.engine = GameEngine(Board.generate(self.config))
        self.render_mode = render_mode
        self._area = self.config.area

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.size, self.config.size),
            dtype=np.int8,
        )

        # One reveal and one flag action per tile
        self.action_space = spaces.Discrete(2 * self._area)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.engine.new_game(
            self.config.size, self.config.num_mines, rng=self.np_random
        )
        self._steps = 0

        snapshot = self.engine.snapshot()
        return snapshot.to_observation(), self._get_info(snapshot)

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Reveal or flag action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        is_flag, x, y = self._decode_action(int(action))
        self._steps += 1

        before = self.engine.snapshot()
        if is_flag:
            self.engine.flag_tile(x, y)
        else:
            self.engine.reveal_tile(x, y)
        after = self.engine.snapshot()

        reward = self._calculate_reward(before, after, is_flag)
        terminated = after.is_over

        return after.to_observation(), reward, terminated, False, self._get_info(after)

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (is_flag, x, y)."""
        if not 0 <= action < 2 * self._area:
            raise ValueError(f"Action {action} outside [0, {2 * self._area})")
        is_flag = action >= self._area
        index = action % self._area
        return is_flag, index % self.config.size, index // self.config.size

    def _calculate_reward(
        self, before: Snapshot, after: Snapshot, is_flag: bool
    ) -> float:
        """Score the transition between two snapshots."""
        if before.tiles == after.tiles:
            return -0.1
        if after.status == GameStatus.WON:
            return 10.0
        if after.status == GameStatus.LOST:
            return -10.0
        if is_flag:
            return 0.0
        return 1.0

    def _get_info(self, snapshot: Snapshot) -> Dict[str, Any]:
        """Get info dictionary for a snapshot."""
        return {
            "steps": self._steps,
            "game_state": snapshot.status.name,
            "mines_left": snapshot.mines_left,
            "status_line": snapshot.status_line,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        text = self.engine.snapshot().render()
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the board.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        snapshot = self.engine.snapshot()
        if snapshot.is_over:
            return mask
        obs = snapshot.to_observation().flatten()
        mask[:self._area] = obs == -1
        mask[self._area:] = (obs == -1) | (obs == -2)
        return mask
