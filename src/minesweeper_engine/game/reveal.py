"""
Reveal and flood-fill engine.

Opens cells, cascades through zero-count regions with an explicit
worklist and detects wins and losses.
"""
import logging
import random
from collections import deque
from typing import Optional

from .cell import Board, CellState
from .generator import generate, in_bounds, neighbors
from .session import Phase, Session

logger = logging.getLogger(__name__)


# ============================================================================
# Reveal (High-level)
# ============================================================================

def reveal(
    session: Session,
    row: int,
    col: int,
    rng: Optional[random.Random] = None,
) -> Session:
    """
    Reveal the cell at (row, col).

    On the first reveal of a game the board is generated with that cell
    kept mine-free. Revealing a mine loses the game and opens every
    mine. Revealing a zero-count cell opens the surrounding region.
    Stale or malformed input is ignored.

    Args:
        session: Session to act on.
        row: Row index to reveal.
        col: Column index to reveal.
        rng: Random source for deferred generation.

    Returns:
        The same session, updated.
    """
    if not _can_reveal(session, row, col):
        return session

    if session.awaiting_first_click:
        _handle_first_click(session, row, col, rng)

    board = session.board
    cell = board[row][col]
    cell.reveal()

    if cell.is_mine:
        _reveal_all_mines(session)
        session.phase = Phase.LOST
        logger.debug("Mine hit at (%d, %d)", row, col)
        return session

    if cell.neighbor_count == 0:
        _flood_fill(board, row, col)

    _check_win_condition(session)
    return session


def _can_reveal(session: Session, row: int, col: int) -> bool:
    """Check if a reveal at (row, col) should be processed."""
    if session.phase != Phase.PLAYING:
        return False
    if not in_bounds(session.rows, session.cols, row, col):
        return False
    if session.board is None:
        return session.awaiting_first_click
    return session.board[row][col].state == CellState.HIDDEN


def _handle_first_click(
    session: Session, row: int, col: int, rng: Optional[random.Random]
) -> None:
    """Generate the board now, keeping the clicked cell safe."""
    session.board = generate(session.difficulty, excluded=(row, col), rng=rng)
    session.awaiting_first_click = False


# ============================================================================
# Consequences (Low-level)
# ============================================================================

def _flood_fill(board: Board, row: int, col: int) -> None:
    """
    Open the zero-count region around (row, col).

    Numbered cells on the border are opened but not expanded. A cell
    is only ever opened while hidden, so nothing is processed twice.
    """
    rows = len(board)
    cols = len(board[0])
    queue = deque([(row, col)])
    while queue:
        current_row, current_col = queue.popleft()
        for nr, nc in neighbors(rows, cols, current_row, current_col):
            neighbor = board[nr][nc]
            if neighbor.state != CellState.HIDDEN or neighbor.is_mine:
                continue
            neighbor.reveal()
            if neighbor.neighbor_count == 0:
                queue.append((nr, nc))


def _reveal_all_mines(session: Session) -> None:
    """Open every mine, flagged ones included."""
    for cell in session.cells():
        if cell.is_mine:
            cell.state = CellState.REVEALED
    session.flag_count = sum(cell.is_flagged for cell in session.cells())


def _check_win_condition(session: Session) -> None:
    """Win once no non-mine cell is left unrevealed."""
    if session.hidden_safe_count == 0:
        session.phase = Phase.WON
        logger.debug("Game won")
