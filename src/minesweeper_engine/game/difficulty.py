"""
Difficulty configuration for the Minesweeper engine.

Holds the static table of difficulty tiers. Profiles validate
themselves on construction, so a bad table fails at import time.
"""
from dataclasses import dataclass
from typing import Dict

from ..errors import InvalidProfileError, UnknownDifficultyError


# ============================================================================
# Difficulty Profile
# ============================================================================

@dataclass(frozen=True)
class DifficultyProfile:
    """
    Grid size and mine count for one difficulty tier.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mine_count: Total mines to place.
        label: Human readable name shown by shells.
    """

    rows: int = 9
    cols: int = 9
    mine_count: int = 10
    label: str = "Custom"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure the profile can always be generated."""
        if self.rows < 1 or self.cols < 1:
            raise InvalidProfileError("Board dimensions must be positive")
        if self.mine_count < 0:
            raise InvalidProfileError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.mine_count > max_mines:
            raise InvalidProfileError(f"Too many mines (max {max_mines})")

    @property
    def cell_count(self) -> int:
        """Total cells on the grid."""
        return self.rows * self.cols

    @property
    def safe_cell_count(self) -> int:
        """Cells that are not mines."""
        return self.cell_count - self.mine_count

    @property
    def density(self) -> float:
        """Fraction of cells holding a mine."""
        return self.mine_count / self.cell_count


# ============================================================================
# Preset Tiers
# ============================================================================

NORMAL = DifficultyProfile(9, 9, 10, "Normal (9x9)")
HARD = DifficultyProfile(16, 16, 40, "Hard (16x16)")
EXPERT = DifficultyProfile(16, 30, 99, "Expert (16x30)")

DIFFICULTIES: Dict[str, DifficultyProfile] = {
    "normal": NORMAL,
    "hard": HARD,
    "expert": EXPERT,
}

DEFAULT_DIFFICULTY = "normal"


def get_difficulty(name: str) -> DifficultyProfile:
    """
    Look up a preset tier by name.

    Args:
        name: Tier identifier, case-insensitive.

    Returns:
        The matching profile.

    Raises:
        UnknownDifficultyError: If no tier has that name.
    """
    try:
        return DIFFICULTIES[name.strip().lower()]
    except KeyError:
        known = ", ".join(sorted(DIFFICULTIES))
        raise UnknownDifficultyError(
            f"Unknown difficulty {name!r} (choose from {known})"
        ) from None
