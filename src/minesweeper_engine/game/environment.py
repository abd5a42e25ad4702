"""
Gymnasium environment wrapper for the Minesweeper engine.

Drives a Session through the standard RL interface, so agents and
evaluation loops can play the engine like any other shell.
"""
import random
from typing import Any, Dict, Optional, SupportsFloat, Tuple, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .difficulty import DEFAULT_DIFFICULTY, DifficultyProfile, get_difficulty
from .flags import toggle_flag
from .reveal import reveal
from .session import Session, reset, select_difficulty


# ============================================================================
# Observation Encoding
# ============================================================================

def to_observation(session: Session) -> np.ndarray:
    """
    Encode the board as a player sees it.

    Returns:
        2D int8 array where:
            -1 = hidden
            -2 = flagged
            0-8 = revealed with neighbor count
            9 = revealed mine
    """
    obs = np.full((session.rows, session.cols), -1, dtype=np.int8)
    if session.board is None:
        return obs
    for row in range(session.rows):
        for col in range(session.cols):
            obs[row, col] = session.board[row][col].to_observation()
    return obs


def action_mask(session: Session) -> np.ndarray:
    """Flat boolean mask, True where a reveal would be processed."""
    mask = np.zeros(session.rows * session.cols, dtype=bool)
    for row, col in session.hidden_positions():
        mask[row * session.cols + col] = True
    return mask


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array, see to_observation().

    Actions:
        Discrete action space of size 2 * rows * cols.
        Action i < rows * cols reveals cell (i // cols, i % cols).
        Action i >= rows * cols toggles the flag on cell
        i - rows * cols.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
        - -0.1 for invalid action (already revealed, no board yet to flag)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        difficulty: Union[str, DifficultyProfile, None] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            difficulty: Tier name or profile (default: normal, 9x9/10).
            render_mode: How to render the environment.
        """
        super().__init__()

        if difficulty is None:
            difficulty = DEFAULT_DIFFICULTY
        if isinstance(difficulty, str):
            difficulty = get_difficulty(difficulty)
        self.profile = difficulty
        self.session = select_difficulty(self.profile)
        self.render_mode = render_mode
        self._rng: Optional[random.Random] = None

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.profile.rows, self.profile.cols),
            dtype=np.int8,
        )

        self._cell_count = self.profile.cell_count
        self.action_space = spaces.Discrete(2 * self._cell_count)

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
            seed: Seed for mine placement in this and later games.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self._rng = random.Random(seed)
        reset(self.session)
        self._steps = 0

        return to_observation(self.session), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action.

        Args:
            action: Flat action index, see class docstring.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._steps += 1

        if action >= self._cell_count:
            row, col = self.action_to_position(action - self._cell_count)
            reward = self._apply_flag(row, col)
        else:
            row, col = self.action_to_position(action)
            reward = self._apply_reveal(row, col)

        observation = to_observation(self.session)
        terminated = self.session.is_over
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat cell index to (row, col) position."""
        row = int(action) // self.profile.cols
        col = int(action) % self.profile.cols
        return row, col

    def describe_action(self, action: int) -> str:
        """Human-readable form of an action, e.g. 'Flag (2, 3)'."""
        if action >= self._cell_count:
            row, col = self.action_to_position(action - self._cell_count)
            return f"Flag ({row}, {col})"
        row, col = self.action_to_position(action)
        return f"Reveal ({row}, {col})"

    def _apply_reveal(self, row: int, col: int) -> float:
        """Reveal a cell and score the outcome."""
        if (row, col) not in self.session.hidden_positions():
            return -0.1

        reveal(self.session, row, col, rng=self._rng)

        if self.session.is_won:
            return 10.0
        if self.session.is_lost:
            return -10.0
        return 1.0

    def _apply_flag(self, row: int, col: int) -> float:
        """Toggle a flag; flags are not rewarded."""
        before = self.session.flag_count
        toggle_flag(self.session, row, col)
        if self.session.flag_count == before:
            return -0.1
        return 0.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.session.revealed_count,
            "total_safe": self.profile.safe_cell_count,
            "game_state": self.session.phase.name,
            "flags": self.session.flag_count,
            "valid_actions": len(self.session.hidden_positions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board as plain text."""
        return board_to_text(to_observation(self.session))

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask over the whole action space.

        Returns:
            Boolean array where True = valid action.
        """
        reveal_mask = action_mask(self.session)
        flag_mask = np.zeros(self._cell_count, dtype=bool)
        if self.session.is_playing and self.session.board is not None:
            obs = to_observation(self.session).flatten()
            flag_mask = (obs == -1) | (obs == -2)
        return np.concatenate([reveal_mask, flag_mask])


def board_to_text(obs: np.ndarray) -> str:
    """Plain-text dump of an observation, one line per row."""
    glyphs = {-1: ".", -2: "F", 9: "*", 0: " "}
    lines = []
    for row in obs:
        lines.append(
            " ".join(glyphs.get(int(val), str(int(val))) for val in row)
        )
    return "\n".join(lines)
