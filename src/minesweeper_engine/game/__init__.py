"""
Minesweeper game module.

Provides the engine: difficulty tiers, board generation, reveal and
flag operations, and the session state machine.
"""
from .cell import Board, Cell, CellState
from .difficulty import (
    DIFFICULTIES,
    DEFAULT_DIFFICULTY,
    DifficultyProfile,
    EXPERT,
    HARD,
    NORMAL,
    get_difficulty,
)
from .generator import board_from_mines, generate, mine_positions, neighbors
from .session import (
    Phase,
    Session,
    back_to_selection,
    new_session,
    reset,
    select_difficulty,
)
from .reveal import reveal
from .flags import mines_remaining, toggle_flag
from .environment import MinesweeperEnv, action_mask, board_to_text, to_observation

__all__ = [
    "Board",
    "Cell",
    "CellState",
    "DIFFICULTIES",
    "DEFAULT_DIFFICULTY",
    "DifficultyProfile",
    "NORMAL",
    "HARD",
    "EXPERT",
    "get_difficulty",
    "board_from_mines",
    "generate",
    "mine_positions",
    "neighbors",
    "Phase",
    "Session",
    "new_session",
    "select_difficulty",
    "reset",
    "back_to_selection",
    "reveal",
    "toggle_flag",
    "mines_remaining",
    "MinesweeperEnv",
    "action_mask",
    "board_to_text",
    "to_observation",
]
