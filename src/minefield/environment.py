"""
Gymnasium environment wrapper for Minesweeper.

Drives a game session through the standard RL interface so scripted
players can exercise the engine.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .cell import FLAGGED_VALUE, MINE_VALUE
from .config import GameConfig
from .render import render_board
from .session import GameSession, Outcome, create_session

SAFE_REWARD = 1.0
WIN_REWARD = 10.0
LOSS_REWARD = -10.0
INVALID_REWARD = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinefieldEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size rows * cols.
        Action i reveals the cell at (i // cols, i % cols).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Game configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or GameConfig()
        self.render_mode = render_mode
        self.session: GameSession = create_session(self.config)

        self.observation_space = spaces.Box(
            low=FLAGGED_VALUE,
            high=MINE_VALUE,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed for reproducible mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        # Derive the placement RNG from the env's seeded generator.
        placement_seed = int(self.np_random.integers(0, 2**32))
        self.session = create_session(
            self.config, rng=random.Random(placement_seed)
        )
        self._steps = 0
        return self._observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal one cell.

        Args:
            action: Cell index to reveal (row * cols + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        terminated = self.session.is_terminal

        return self._observation(), reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return divmod(int(action), self.config.cols)

    def _calculate_reward(self, row: int, col: int) -> float:
        if not self.session.board.cell(row, col).is_hidden:
            return INVALID_REWARD

        outcome = self.session.reveal(row, col)
        if outcome == Outcome.WON:
            return WIN_REWARD
        if outcome == Outcome.LOST:
            return LOSS_REWARD
        return SAFE_REWARD

    def _observation(self) -> np.ndarray:
        return np.array(self.session.snapshot().to_array())

    def _get_info(self) -> Dict[str, Any]:
        revealed = sum(
            1 for cell in self.session.board.cells()
            if cell.is_revealed and not cell.is_mine
        )
        return {
            "steps": self._steps,
            "revealed": revealed,
            "total_safe": self.config.safe_cells,
            "phase": self.session.phase.value,
            "valid_actions": len(self.session.hidden_positions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        text = render_board(self.session.snapshot())
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            int8 array where 1 = hidden cell that can be revealed.
        """
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        for row, col in self.session.hidden_positions():
            mask[row * self.config.cols + col] = 1
        return mask
