"""
Base agent interface for automated Minesweeper players.

Agents are shells that drive the engine through MinesweeperEnv: they
read an observation and pick a flat action index.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    Actions follow MinesweeperEnv: indices below rows * cols reveal a
    cell, indices from rows * cols upward flag one.
    """

    def __init__(self, board_height: int, board_width: int) -> None:
        """
        Initialize the agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
        """
        self.board_height = board_height
        self.board_width = board_width
        self.total_cells = board_height * board_width

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index.
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat cell index to (row, col) position."""
        action = int(action) % self.total_cells
        return action // self.board_width, action % self.board_width

    def position_to_action(self, row: int, col: int) -> int:
        """Convert (row, col) position to a reveal action."""
        return row * self.board_width + col

    def position_to_flag_action(self, row: int, col: int) -> int:
        """Convert (row, col) position to a flag action."""
        return self.total_cells + self.position_to_action(row, col)

    def reveal_indices(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> np.ndarray:
        """
        Indices of cells that may be revealed.

        Accepts either a reveal-only mask or a mask over the whole
        action space; only the reveal half is used.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)
        return np.where(np.asarray(valid_actions)[: self.total_cells])[0]

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """Reveal mask from observation: hidden cells (value -1) only."""
        return observation.flatten() == -1

    def reset(self) -> None:
        """Reset agent state for new game."""
