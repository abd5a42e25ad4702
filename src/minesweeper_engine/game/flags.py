"""
Flag manager.

Flags are a bookkeeping aid for the player; they never influence
reveal, win or loss.
"""
from .generator import in_bounds
from .session import Phase, Session


def toggle_flag(session: Session, row: int, col: int) -> Session:
    """
    Toggle the flag on a hidden cell.

    No-op outside the PLAYING phase, for out-of-range coordinates,
    before the board exists and on revealed cells.

    Returns:
        The same session, updated.
    """
    if session.phase != Phase.PLAYING or session.board is None:
        return session
    if not in_bounds(session.rows, session.cols, row, col):
        return session

    cell = session.board[row][col]
    if cell.toggle_flag():
        session.flag_count += 1 if cell.is_flagged else -1
    return session


def mines_remaining(session: Session) -> int:
    """Mines not yet accounted for by a flag; negative when over-flagged."""
    if session.difficulty is None:
        return 0
    return session.difficulty.mine_count - session.flag_count
