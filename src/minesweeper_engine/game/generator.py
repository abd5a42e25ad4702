"""
Board generator for the Minesweeper engine.

Builds grids, places mines by rejection sampling and computes
neighbor counts.
"""
import logging
import numbers
import random
from typing import Iterable, List, Optional, Tuple

from .cell import Board, Cell
from .difficulty import DifficultyProfile

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Grid Utilities (Low-level)
# ============================================================================

def empty_grid(rows: int, cols: int) -> Board:
    """Create a grid of hidden, mine-free cells."""
    return [[Cell() for _ in range(cols)] for _ in range(rows)]


def in_bounds(rows: int, cols: int, row: object, col: object) -> bool:
    """
    Check if (row, col) is an integer position inside the grid.

    Booleans are integers to Python but not coordinates, so they are
    rejected.
    """
    if isinstance(row, bool) or isinstance(col, bool):
        return False
    if not isinstance(row, numbers.Integral):
        return False
    if not isinstance(col, numbers.Integral):
        return False
    return 0 <= row < rows and 0 <= col < cols


def neighbors(rows: int, cols: int, row: int, col: int) -> List[Position]:
    """
    Get valid neighboring positions.

    Args:
        rows: Grid height.
        cols: Grid width.
        row: Row index of center cell.
        col: Column index of center cell.

    Returns:
        List of (row, col) tuples for the up-to-8 in-bounds neighbors.
    """
    result = []
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            new_row = row + delta_row
            new_col = col + delta_col
            if 0 <= new_row < rows and 0 <= new_col < cols:
                result.append((new_row, new_col))
    return result


def compute_neighbor_counts(board: Board) -> None:
    """Fill in neighbor_count for every non-mine cell of the board."""
    rows = len(board)
    cols = len(board[0]) if rows else 0
    for row in range(rows):
        for col in range(cols):
            cell = board[row][col]
            if cell.is_mine:
                cell.neighbor_count = 0
                continue
            cell.neighbor_count = sum(
                1 for nr, nc in neighbors(rows, cols, row, col)
                if board[nr][nc].is_mine
            )


# ============================================================================
# Mine Placement (Mid-level)
# ============================================================================

def _place_mines(
    board: Board,
    mine_count: int,
    excluded: Optional[Position],
    rng,
) -> None:
    """
    Place mines by drawing random cells until enough are accepted.

    A draw is rejected if the cell already holds a mine or is the
    excluded cell.
    """
    rows = len(board)
    cols = len(board[0])
    placed = 0
    while placed < mine_count:
        row = rng.randrange(rows)
        col = rng.randrange(cols)
        if board[row][col].is_mine or (row, col) == excluded:
            continue
        board[row][col].is_mine = True
        placed += 1


def generate(
    profile: DifficultyProfile,
    excluded: Optional[Position] = None,
    rng: Optional[random.Random] = None,
) -> Board:
    """
    Build a fully generated board for a profile.

    Args:
        profile: Grid size and mine count.
        excluded: Position that must stay mine-free (the first click).
        rng: Random source; defaults to the process-wide generator.

    Returns:
        A rows x cols board with exactly profile.mine_count mines.
    """
    if excluded is not None:
        excluded = (int(excluded[0]), int(excluded[1]))
    board = empty_grid(profile.rows, profile.cols)
    _place_mines(board, profile.mine_count, excluded, rng or random)
    compute_neighbor_counts(board)
    logger.debug(
        "Generated %dx%d board with %d mines (excluded=%s)",
        profile.rows, profile.cols, profile.mine_count, excluded,
    )
    return board


def board_from_mines(
    rows: int, cols: int, mine_positions: Iterable[Position]
) -> Board:
    """
    Build a board with mines at exact positions.

    Args:
        rows: Grid height.
        cols: Grid width.
        mine_positions: (row, col) positions holding a mine.

    Returns:
        Board with neighbor counts computed.

    Raises:
        ValueError: If a position is outside the grid or repeated.
    """
    board = empty_grid(rows, cols)
    for row, col in mine_positions:
        if not in_bounds(rows, cols, row, col):
            raise ValueError(f"Mine position {(row, col)} is off the board")
        if board[row][col].is_mine:
            raise ValueError(f"Duplicate mine position {(row, col)}")
        board[row][col].is_mine = True
    compute_neighbor_counts(board)
    return board


def mine_positions(board: Board) -> List[Position]:
    """List every (row, col) holding a mine."""
    return [
        (row, col)
        for row, cells in enumerate(board)
        for col, cell in enumerate(cells)
        if cell.is_mine
    ]
