"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface on top of Board. Every reset builds a
new Board whose mines are drawn from the environment's seeded
``np_random``, so ``reset(seed=...)`` reproduces a layout exactly.
"""
from functools import partial
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, OpenOutcome, Position
from .cell import OBS_FLAGGED, OBS_MINE
from .random_source import NumpyRandomSource
from .render import ASCII_SYMBOLS


# Rewards
REWARD_NO_OP = -0.1
REWARD_MINE = -10.0
REWARD_WIN = 10.0
REWARD_SAFE = 1.0


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array indexed [y, x] where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size width * height.
        Action i opens the cell at (i % width, i // width). Opening a
        revealed cell chords.

    Rewards:
        - +1 for a safe open
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for an open that changed nothing
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
            config: Board configuration (default: 10x10 with 5 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=OBS_FLAGGED,
            high=OBS_MINE,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self.board = self._new_board()
        self._steps = 0

    def _new_board(self) -> Board:
        return Board(self.config, NumpyRandomSource(self.np_random))

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
        self.board = self._new_board()
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Open one cell.

        Args:
            action: Cell index (y * width + x).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        pos = self.action_to_position(action)
        self._steps += 1

        result = self.board.open(pos)
        if result.outcome == OpenOutcome.NO_OP:
            reward = REWARD_NO_OP
        elif result.outcome == OpenOutcome.MINE:
            reward = REWARD_MINE
        elif self.board.is_won:
            reward = REWARD_WIN
        else:
            reward = REWARD_SAFE

        observation = self.board.get_observation()
        terminated = not self.board.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def action_to_position(self, action: int) -> Position:
        """Convert flat action index to (x, y) position."""
        action = int(action)
        return action % self.config.width, action // self.config.width

    def position_to_action(self, pos: Position) -> int:
        x, y = pos
        return y * self.config.width + x

    def _get_info(self) -> Dict[str, Any]:
        return {
            "steps": self._steps,
            "revealed": self.board.cells_revealed,
            "total_safe": self.config.safe_cells,
            "game_state": self.board.game_state.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self.board.render(ASCII_SYMBOLS)
        if self.render_mode == "human":
            print(self.board.render(ASCII_SYMBOLS))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of cells that can still be opened.

        Returns:
            int8 array where 1 = hidden, unflagged cell.
        """
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        for pos in self.board.get_valid_actions():
            mask[self.position_to_action(pos)] = 1
        return mask


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    config: Optional[BoardConfig] = None,
    asynchronous: bool = True,
) -> gym.vector.VectorEnv:
    """
    Create a batch of independent Minesweeper games.

    Each sub-env gets its own board; seeding ``reset(seed=s)`` seeds
    sub-env i with ``s + i``, so every game has a distinct layout.

    Args:
        n_envs: Number of games in the batch.
        config: Board configuration shared by all games.
        asynchronous: Run each game in a worker process instead of
            stepping them in the calling process.

    Returns:
        Vectorized environment; close it when done.
    """
    config = config or BoardConfig()
    env_fns = [partial(MinesweeperEnv, config=config) for _ in range(n_envs)]
    if asynchronous:
        return gym.vector.AsyncVectorEnv(env_fns)
    return gym.vector.SyncVectorEnv(env_fns)
