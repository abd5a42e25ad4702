"""
Cell module for the Minesweeper engine.

Represents individual grid positions with their visibility state
(hidden/revealed/flagged) and content (mine/neighbor count).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import List


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visibility states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single position in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine. Fixed once the
            board is generated.
        neighbor_count: Mines among the up-to-8 neighboring cells (0-8).
            Mines keep 0.
        state: Current visibility state.
    """

    is_mine: bool = False
    neighbor_count: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Open this cell.

        Returns:
            True if the cell went from hidden to revealed, False if it
            was already revealed or is flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle the flag on this cell.

        Returns:
            True if the flag was toggled, False if the cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Encode the cell as seen by a player.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with its neighbor count
            9: Revealed mine (only after a loss)
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.neighbor_count


# A board is a list of rows; board[row][col] is a Cell.
Board = List[List[Cell]]
