"""
Unit tests for the session state machine.
"""
import pytest

from minesweeper_engine.game import (
    EXPERT,
    HARD,
    NORMAL,
    DifficultyProfile,
    Phase,
    Session,
    back_to_selection,
    board_from_mines,
    new_session,
    reset,
    reveal,
    select_difficulty,
    toggle_flag,
)


class TestNewSession:
    """Test the initial state."""

    def test_starts_in_selection(self) -> None:
        """New session waits for a difficulty with no board."""
        session = new_session()
        assert session.phase == Phase.DIFFICULTY_SELECTION
        assert session.board is None
        assert session.difficulty is None
        assert session.flag_count == 0
        assert (session.rows, session.cols) == (0, 0)


class TestSelectDifficulty:
    """Test starting games."""

    def test_select_starts_playing_without_mines(self) -> None:
        """Selecting a difficulty defers generation to the first reveal."""
        session = select_difficulty(HARD)
        assert session.phase == Phase.PLAYING
        assert session.difficulty is HARD
        assert session.board is None
        assert session.awaiting_first_click is True
        assert (session.rows, session.cols) == (16, 16)

    def test_select_reuses_given_session(self) -> None:
        """An existing session is restarted in place."""
        session = new_session()
        assert select_difficulty(NORMAL, session) is session

    def test_select_from_terminal_phase(self, two_mine_session: Session) -> None:
        """A lost game can switch difficulty directly."""
        reveal(two_mine_session, 0, 0)
        select_difficulty(EXPERT, two_mine_session)
        assert two_mine_session.phase == Phase.PLAYING
        assert two_mine_session.board is None
        assert two_mine_session.cols == 30

    def test_select_mid_game_drops_flags(self, corner_mine_session: Session) -> None:
        """Changing difficulty clears the flag counter."""
        toggle_flag(corner_mine_session, 1, 1)
        select_difficulty(NORMAL, corner_mine_session)
        assert corner_mine_session.flag_count == 0


class TestReset:
    """Test starting over at the same difficulty."""

    def test_reset_after_loss(self, two_mine_session: Session) -> None:
        """Reset returns to a fresh game at the same difficulty."""
        profile = two_mine_session.difficulty
        toggle_flag(two_mine_session, 1, 1)
        reveal(two_mine_session, 0, 0)

        reset(two_mine_session)

        assert two_mine_session.phase == Phase.PLAYING
        assert two_mine_session.difficulty is profile
        assert two_mine_session.board is None
        assert two_mine_session.awaiting_first_click is True
        assert two_mine_session.flag_count == 0

    def test_reset_generates_a_fresh_board(self, normal_session: Session) -> None:
        """The next first reveal builds a new board."""
        reveal(normal_session, 0, 0)
        old_board = normal_session.board
        reset(normal_session)
        reveal(normal_session, 8, 8)
        assert normal_session.board is not old_board
        assert normal_session.cell(8, 8).is_mine is False

    def test_reset_without_difficulty_is_noop(self) -> None:
        """Nothing to restart before a difficulty is chosen."""
        session = new_session()
        assert reset(session) is session
        assert session.phase == Phase.DIFFICULTY_SELECTION


class TestBackToSelection:
    """Test leaving a game."""

    def test_back_drops_board(self, corner_mine_session: Session) -> None:
        """Going back discards the board and flags."""
        toggle_flag(corner_mine_session, 2, 2)
        back_to_selection(corner_mine_session)
        assert corner_mine_session.phase == Phase.DIFFICULTY_SELECTION
        assert corner_mine_session.board is None
        assert corner_mine_session.flag_count == 0

    def test_actions_ignored_in_selection(self, corner_mine_session: Session) -> None:
        """Reveal and flag do nothing while selecting."""
        back_to_selection(corner_mine_session)
        reveal(corner_mine_session, 0, 0)
        toggle_flag(corner_mine_session, 0, 0)
        assert corner_mine_session.board is None
        assert corner_mine_session.flag_count == 0

    def test_back_then_reset_replays_last_difficulty(
        self, normal_session: Session
    ) -> None:
        """The last difficulty is remembered for a quick restart."""
        back_to_selection(normal_session)
        reset(normal_session)
        assert normal_session.phase == Phase.PLAYING
        assert normal_session.difficulty is NORMAL


class TestFromBoard:
    """Test starting on a prepared board."""

    def test_from_board_skips_generation(self, corner_mine_session: Session) -> None:
        """Prepared boards are played as given."""
        assert corner_mine_session.awaiting_first_click is False
        assert corner_mine_session.phase == Phase.PLAYING
        reveal(corner_mine_session, 0, 0)
        assert corner_mine_session.phase == Phase.LOST

    def test_from_board_counts_existing_flags(self) -> None:
        """Flags already on the board are counted."""
        board = board_from_mines(2, 2, [(0, 0)])
        board[1][1].toggle_flag()
        session = Session.from_board(DifficultyProfile(2, 2, 1), board)
        assert session.flag_count == 1

    def test_from_board_rejects_wrong_size(self) -> None:
        """The board must match the profile."""
        with pytest.raises(ValueError, match="do not match"):
            Session.from_board(NORMAL, board_from_mines(3, 3, []))


class TestAccessors:
    """Test read-only helpers."""

    def test_cell_lookup(self, corner_mine_session: Session) -> None:
        """cell() returns cells in bounds and None elsewhere."""
        assert corner_mine_session.cell(0, 0).is_mine
        assert corner_mine_session.cell(3, 0) is None
        assert new_session().cell(0, 0) is None

    def test_hidden_positions_before_generation(self, normal_session: Session) -> None:
        """Every position can be revealed before the first click."""
        assert len(normal_session.hidden_positions()) == 81

    def test_hidden_positions_exclude_open_and_flagged(
        self, strip_session: Session
    ) -> None:
        """Only hidden cells are offered."""
        reveal(strip_session, 0, 0)
        toggle_flag(strip_session, 0, 2)
        assert strip_session.hidden_positions() == [(0, 3), (0, 4)]

    def test_hidden_safe_count(self, strip_session: Session) -> None:
        """Counts unopened safe cells, flagged ones included."""
        assert strip_session.hidden_safe_count == 4
        toggle_flag(strip_session, 0, 4)
        assert strip_session.hidden_safe_count == 4
        reveal(strip_session, 0, 0)
        assert strip_session.hidden_safe_count == 2

    def test_phase_flags(self, two_mine_session: Session) -> None:
        """is_playing/is_over follow the phase."""
        assert two_mine_session.is_playing and not two_mine_session.is_over
        reveal(two_mine_session, 2, 2)
        assert two_mine_session.is_lost and two_mine_session.is_over
