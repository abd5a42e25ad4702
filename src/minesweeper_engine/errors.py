"""
Exceptions raised by the Minesweeper engine.

Only configuration mistakes raise. Gameplay input that makes no sense
(stale clicks, out-of-range coordinates) is ignored by the engine.
"""


class MinesweeperError(Exception):
    """Base class for engine configuration errors."""


class InvalidProfileError(MinesweeperError, ValueError):
    """A difficulty profile that cannot be generated."""


class UnknownDifficultyError(MinesweeperError, KeyError):
    """A difficulty name with no preset tier."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""
