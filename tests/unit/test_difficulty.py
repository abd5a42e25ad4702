"""
Unit tests for difficulty profiles and the preset table.
"""
import pytest

from minesweeper_engine import InvalidProfileError, MinesweeperError, UnknownDifficultyError
from minesweeper_engine.game import DIFFICULTIES, DifficultyProfile, get_difficulty


class TestProfileValidation:
    """Test profile validation at construction time."""

    def test_valid_profile_creation(self) -> None:
        """Valid profile keeps its values."""
        profile = DifficultyProfile(9, 9, 10, "Normal (9x9)")
        assert (profile.rows, profile.cols, profile.mine_count) == (9, 9, 10)
        assert profile.label == "Normal (9x9)"

    @pytest.mark.parametrize("rows, cols", [(0, 9), (9, 0), (-1, 5)])
    def test_non_positive_dimensions_raise(self, rows: int, cols: int) -> None:
        """Grids need at least one row and one column."""
        with pytest.raises(InvalidProfileError, match="dimensions must be positive"):
            DifficultyProfile(rows, cols, 0)

    def test_negative_mines_raise(self) -> None:
        """Negative mine count is rejected."""
        with pytest.raises(InvalidProfileError, match="cannot be negative"):
            DifficultyProfile(9, 9, -1)

    def test_mines_filling_every_cell_raise(self) -> None:
        """At least one cell must stay free for the first click."""
        with pytest.raises(InvalidProfileError, match="Too many mines"):
            DifficultyProfile(3, 3, 9)

    def test_max_mines_is_valid(self) -> None:
        """rows * cols - 1 mines is the upper bound."""
        assert DifficultyProfile(3, 3, 8).mine_count == 8

    def test_single_cell_board_is_valid(self) -> None:
        """A 1x1 board with no mines can be played."""
        assert DifficultyProfile(1, 1, 0).cell_count == 1

    def test_invalid_profile_is_value_error(self) -> None:
        """Profile errors can be caught as ValueError or MinesweeperError."""
        with pytest.raises(ValueError):
            DifficultyProfile(2, 2, 4)
        with pytest.raises(MinesweeperError):
            DifficultyProfile(2, 2, 4)

    def test_profiles_are_immutable(self) -> None:
        """Profiles cannot be edited after validation."""
        profile = DifficultyProfile(9, 9, 10)
        with pytest.raises(AttributeError):
            profile.mine_count = 100


class TestPresetTiers:
    """Test the shipped difficulty table."""

    def test_normal_tier(self) -> None:
        """Normal is 9x9 with 10 mines."""
        normal = DIFFICULTIES["normal"]
        assert (normal.rows, normal.cols, normal.mine_count) == (9, 9, 10)

    def test_larger_tiers(self) -> None:
        """Hard and expert match the classic sizes."""
        hard = DIFFICULTIES["hard"]
        expert = DIFFICULTIES["expert"]
        assert (hard.rows, hard.cols, hard.mine_count) == (16, 16, 40)
        assert (expert.rows, expert.cols, expert.mine_count) == (16, 30, 99)

    @pytest.mark.parametrize("name", sorted(DIFFICULTIES))
    def test_tier_density_is_moderate(self, name: str) -> None:
        """Every tier keeps mine density between 12% and 21%."""
        assert 0.12 <= DIFFICULTIES[name].density <= 0.21

    def test_safe_cell_count(self) -> None:
        """Safe cells are the cells without mines."""
        assert DIFFICULTIES["normal"].safe_cell_count == 71


class TestLookup:
    """Test tier lookup by name."""

    def test_lookup_is_case_insensitive(self) -> None:
        """Names are matched regardless of case and padding."""
        assert get_difficulty(" Expert ") is DIFFICULTIES["expert"]

    def test_unknown_name_raises(self) -> None:
        """Unknown names raise a KeyError subclass listing the choices."""
        with pytest.raises(UnknownDifficultyError, match="normal"):
            get_difficulty("impossible")
        with pytest.raises(KeyError):
            get_difficulty("impossible")
