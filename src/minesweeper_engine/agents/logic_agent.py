"""
Logic-based agent for Minesweeper.

Makes single-constraint deductions from revealed numbers and guesses
by local mine probability when no deduction applies.
"""
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

import numpy as np

from .base_agent import BaseAgent

Position = Tuple[int, int]


@dataclass
class CellInfo:
    """Information about a revealed number for constraint analysis."""

    row: int
    col: int
    neighbor_count: int
    hidden_neighbors: Set[Position]
    flagged_neighbors: Set[Position]

    @property
    def remaining_mines(self) -> int:
        """Mines still to be found among hidden neighbors."""
        return self.neighbor_count - len(self.flagged_neighbors)


# ============================================================================
# Logic Agent
# ============================================================================

class LogicAgent(BaseAgent):
    """
    Agent that plays by the two basic Minesweeper rules.

    Strategy:
        1. Open a corner on the first move (corners cascade well)
        2. A number whose flags already account for all its mines makes
           its other hidden neighbors safe: reveal one
        3. A number with as many hidden neighbors as missing mines makes
           them all mines: flag one
        4. Otherwise reveal the hidden cell with the lowest local
           mine probability

    Flags are trusted, so they must only come from rule 3.
    """

    def __init__(
        self,
        board_height: int = 9,
        board_width: int = 9,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the logic agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
            seed: Seed for tie-breaking on the first move.
        """
        super().__init__(board_height, board_width)
        self._first_move = True
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select the best action by deduction.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Reveal or flag action index.
        """
        valid_indices = self.reveal_indices(observation, valid_actions)

        if len(valid_indices) == 0:
            return 0

        if self._first_move:
            self._first_move = False
            return self._select_first_move(valid_indices)

        safe_cells, mine_cells = self.deduce(observation)

        for row, col in sorted(safe_cells):
            action = self.position_to_action(row, col)
            if action in valid_indices:
                return action

        for row, col in sorted(mine_cells):
            if observation[row, col] == -1:
                return self.position_to_flag_action(row, col)

        return self._select_by_probability(observation, valid_indices)

    def _select_first_move(self, valid_indices: np.ndarray) -> int:
        """Pick a random corner that is still hidden."""
        corners = [
            self.position_to_action(0, 0),
            self.position_to_action(0, self.board_width - 1),
            self.position_to_action(self.board_height - 1, 0),
            self.position_to_action(self.board_height - 1, self.board_width - 1),
        ]
        for index in self.rng.permutation(len(corners)):
            corner = corners[index]
            if corner in valid_indices:
                return corner
        return int(self.rng.choice(valid_indices))

    # ========================================================================
    # Deduction
    # ========================================================================

    def deduce(
        self, observation: np.ndarray
    ) -> Tuple[Set[Position], Set[Position]]:
        """
        Apply the basic rules to every revealed number.

        Returns:
            Tuple of (safe_cells, mine_cells); mine_cells holds hidden
            cells only.
        """
        safe_cells: Set[Position] = set()
        mine_cells: Set[Position] = set()

        for info in self._numbered_cells(observation):
            if not info.hidden_neighbors:
                continue
            if info.remaining_mines == 0:
                safe_cells.update(info.hidden_neighbors)
            elif info.remaining_mines == len(info.hidden_neighbors):
                mine_cells.update(info.hidden_neighbors)

        # A wrong flag can make a cell look both ways; do not trust it.
        conflicted = safe_cells & mine_cells
        return safe_cells - conflicted, mine_cells - conflicted

    def _numbered_cells(self, observation: np.ndarray) -> List[CellInfo]:
        """Collect analysis info for every revealed 1-8."""
        result = []
        for row in range(self.board_height):
            for col in range(self.board_width):
                value = observation[row, col]
                if 1 <= value <= 8:
                    result.append(self._get_cell_info(observation, row, col))
        return result

    def _get_cell_info(
        self, observation: np.ndarray, row: int, col: int
    ) -> CellInfo:
        """Get analysis info for a revealed cell."""
        hidden_neighbors: Set[Position] = set()
        flagged_neighbors: Set[Position] = set()

        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                nr, nc = row + dr, col + dc
                if 0 <= nr < self.board_height and 0 <= nc < self.board_width:
                    val = observation[nr, nc]
                    if val == -1:
                        hidden_neighbors.add((nr, nc))
                    elif val == -2:
                        flagged_neighbors.add((nr, nc))

        return CellInfo(
            row=row,
            col=col,
            neighbor_count=int(observation[row, col]),
            hidden_neighbors=hidden_neighbors,
            flagged_neighbors=flagged_neighbors,
        )

    # ========================================================================
    # Guessing
    # ========================================================================

    def _select_by_probability(
        self, observation: np.ndarray, valid_indices: np.ndarray
    ) -> int:
        """Reveal the hidden cell with the lowest estimated mine probability."""
        probabilities = self.estimate_mine_probabilities(observation)

        best_action = int(valid_indices[0])
        best_prob = 1.0
        for action in valid_indices:
            prob = probabilities.get(self.action_to_position(action), 0.5)
            if prob < best_prob:
                best_prob = prob
                best_action = int(action)
        return best_action

    def estimate_mine_probabilities(
        self, observation: np.ndarray
    ) -> Dict[Position, float]:
        """
        Estimate mine probability for hidden cells next to numbers.

        Each number spreads its missing mines evenly over its hidden
        neighbors; a cell keeps the highest estimate it receives.
        """
        estimates: Dict[Position, List[float]] = defaultdict(list)

        for info in self._numbered_cells(observation):
            if not info.hidden_neighbors or info.remaining_mines < 0:
                continue
            prob = info.remaining_mines / len(info.hidden_neighbors)
            for neighbor in info.hidden_neighbors:
                estimates[neighbor].append(prob)

        return {cell: max(probs) for cell, probs in estimates.items()}

    def reset(self) -> None:
        """Reset for new game."""
        self._first_move = True
