"""
Minesweeper engine.

A UI-independent game engine plus the shells that drive it: a
Gymnasium environment, baseline agents and an evaluation harness.
"""
from .errors import InvalidProfileError, MinesweeperError, UnknownDifficultyError

__version__ = "0.1.0"

__all__ = [
    "InvalidProfileError",
    "MinesweeperError",
    "UnknownDifficultyError",
    "__version__",
]
