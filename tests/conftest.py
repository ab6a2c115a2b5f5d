"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import (
    Board,
    Cell,
    GameConfig,
    GameSession,
    create_board,
    create_session,
    place_mines_at,
)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def easy_config() -> GameConfig:
    """Easy difficulty configuration."""
    return GameConfig(9, 9, 10)


@pytest.fixture
def small_config() -> GameConfig:
    """Smallest supported board with a single mine."""
    return GameConfig(5, 5, 1)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def empty_board() -> Board:
    """A 9x9 board with no mines placed yet."""
    return create_board(9, 9, 10)


@pytest.fixture
def center_mine_board() -> Board:
    """A 5x5 board with one mine in the middle."""
    board = create_board(5, 5, 1)
    return place_mines_at(board, [(2, 2)])


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible mine placement."""
    return random.Random(1234)


@pytest.fixture
def easy_session(easy_config: GameConfig, rng: random.Random) -> GameSession:
    """Fresh easy session with seeded placement."""
    return create_session(easy_config, rng=rng)


@pytest.fixture
def center_mine_session(small_config: GameConfig) -> GameSession:
    """5x5 session with its single mine injected at (2, 2)."""
    session = create_session(small_config)
    place_mines_at(session.board, [(2, 2)])
    return session


@pytest.fixture
def corner_mines_session() -> GameSession:
    """5x5 session with mines injected in all four corners."""
    session = create_session(GameConfig(5, 5, 4))
    place_mines_at(session.board, [(0, 0), (0, 4), (4, 0), (4, 4)])
    return session


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
