"""
Random agent for Minesweeper.

Serves as a baseline by revealing random hidden cells.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """
    Agent that reveals hidden cells uniformly at random.

    Never flags. Expected win rate on normal: ~10-15%.
    """

    def __init__(
        self,
        board_height: int = 9,
        board_width: int = 9,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
            seed: Random seed for reproducibility.
        """
        super().__init__(board_height, board_width)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """Pick a random legal reveal."""
        valid_indices = self.reveal_indices(observation, valid_actions)

        if len(valid_indices) == 0:
            # Nothing to reveal; the environment scores this as invalid.
            return 0

        return int(self.rng.choice(valid_indices))
