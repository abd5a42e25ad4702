"""
Pytest configuration and shared fixtures.
"""
import random

import pytest

from minesweeper_engine.game import (
    NORMAL,
    Cell,
    DifficultyProfile,
    Session,
    board_from_mines,
    select_difficulty,
)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def normal_session() -> Session:
    """A fresh 9x9 game with 10 mines, waiting for the first click."""
    return select_difficulty(NORMAL)


@pytest.fixture
def tiny_profile() -> DifficultyProfile:
    """3x3 profile with a single mine."""
    return DifficultyProfile(3, 3, 1, "Tiny")


@pytest.fixture
def corner_mine_session(tiny_profile: DifficultyProfile) -> Session:
    """3x3 game with its only mine at (0, 0)."""
    return Session.from_board(tiny_profile, board_from_mines(3, 3, [(0, 0)]))


@pytest.fixture
def two_mine_session() -> Session:
    """3x3 game with mines in opposite corners (0, 0) and (2, 2)."""
    profile = DifficultyProfile(3, 3, 2, "Two")
    return Session.from_board(profile, board_from_mines(3, 3, [(0, 0), (2, 2)]))


@pytest.fixture
def strip_session() -> Session:
    """1x5 game with a mine in the middle: [0, 1, *, 1, 0]."""
    profile = DifficultyProfile(1, 5, 1, "Strip")
    return Session.from_board(profile, board_from_mines(1, 5, [(0, 2)]))


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible boards."""
    return random.Random(1234)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)
