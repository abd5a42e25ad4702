"""
Game session state machine.

A Session is the mutable aggregate a UI shell owns: the board, the
current phase, the selected difficulty and the flag counter. Every
operation takes a session and returns it, so shells can re-render
from the return value.
"""
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Tuple

from .cell import Board, Cell, CellState
from .difficulty import DifficultyProfile
from .generator import in_bounds

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class Phase(Enum):
    """Coarse lifecycle of a game."""

    DIFFICULTY_SELECTION = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


TERMINAL_PHASES = (Phase.WON, Phase.LOST)


# ============================================================================
# Session Data Class
# ============================================================================

@dataclass
class Session:
    """
    State of one game as seen by its shell.

    Attributes:
        board: Grid of cells, or None until the first reveal generates it.
        phase: Current lifecycle phase.
        difficulty: Selected profile, or None before any selection.
        flag_count: Number of cells currently flagged.
        awaiting_first_click: True until the first reveal places mines.
    """

    board: Optional[Board] = None
    phase: Phase = Phase.DIFFICULTY_SELECTION
    difficulty: Optional[DifficultyProfile] = None
    flag_count: int = 0
    awaiting_first_click: bool = True

    @classmethod
    def from_board(
        cls, profile: DifficultyProfile, board: Board
    ) -> "Session":
        """
        Start a game on an already generated board.

        Skips deferred generation, so the first reveal acts on the
        given mines. The board must match the profile's dimensions.
        """
        if len(board) != profile.rows or any(
            len(cells) != profile.cols for cells in board
        ):
            raise ValueError("Board dimensions do not match the profile")
        flags = sum(cell.is_flagged for cells in board for cell in cells)
        return cls(
            board=board,
            phase=Phase.PLAYING,
            difficulty=profile,
            flag_count=flags,
            awaiting_first_click=False,
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def rows(self) -> int:
        """Grid height of the selected difficulty (0 if none)."""
        return self.difficulty.rows if self.difficulty else 0

    @property
    def cols(self) -> int:
        """Grid width of the selected difficulty (0 if none)."""
        return self.difficulty.cols if self.difficulty else 0

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.phase == Phase.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.phase == Phase.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.phase == Phase.LOST

    @property
    def is_over(self) -> bool:
        """Check if game reached a terminal phase."""
        return self.phase in TERMINAL_PHASES

    def cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if there is no such cell."""
        if self.board is None:
            return None
        if not in_bounds(self.rows, self.cols, row, col):
            return None
        return self.board[row][col]

    def cells(self) -> List[Cell]:
        """All cells in row-major order (empty before generation)."""
        if self.board is None:
            return []
        return [cell for cells in self.board for cell in cells]

    @property
    def revealed_count(self) -> int:
        """Number of revealed cells."""
        return sum(cell.is_revealed for cell in self.cells())

    @property
    def hidden_safe_count(self) -> int:
        """Non-mine cells that are not revealed yet (flagged included)."""
        if self.board is None:
            return self.difficulty.safe_cell_count if self.difficulty else 0
        return sum(
            not cell.is_mine and not cell.is_revealed
            for cell in self.cells()
        )

    def hidden_positions(self) -> List[Tuple[int, int]]:
        """
        Positions that can still be revealed.

        Before generation every position of the grid qualifies.
        """
        if not self.is_playing:
            return []
        if self.board is None:
            return [
                (row, col)
                for row in range(self.rows)
                for col in range(self.cols)
            ]
        return [
            (row, col)
            for row in range(self.rows)
            for col in range(self.cols)
            if self.board[row][col].state == CellState.HIDDEN
        ]


# ============================================================================
# Phase Transitions
# ============================================================================

def new_session() -> Session:
    """Create a session waiting for a difficulty choice."""
    return Session()


def select_difficulty(
    profile: DifficultyProfile, session: Optional[Session] = None
) -> Session:
    """
    Start a fresh game at the given difficulty.

    Works from any phase. Mine placement is deferred to the first
    reveal, so the board stays empty here.

    Args:
        profile: Difficulty to play.
        session: Session to restart; a new one is created if omitted.

    Returns:
        The session, now in the PLAYING phase.
    """
    if session is None:
        session = Session()
    session.difficulty = profile
    session.board = None
    session.awaiting_first_click = True
    session.flag_count = 0
    session.phase = Phase.PLAYING
    logger.debug("Started %s game", profile.label)
    return session


def reset(session: Session) -> Session:
    """Start over at the current difficulty."""
    if session.difficulty is None:
        return session
    return select_difficulty(session.difficulty, session)


def back_to_selection(session: Session) -> Session:
    """Drop the current game and return to difficulty selection."""
    session.board = None
    session.awaiting_first_click = True
    session.flag_count = 0
    session.phase = Phase.DIFFICULTY_SELECTION
    return session
