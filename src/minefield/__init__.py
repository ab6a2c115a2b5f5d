"""
Minesweeper game engine.

Provides board generation, mine placement, reveal and flag transitions,
win/loss detection and read-only snapshots for rendering.
"""
from .errors import MinefieldError, ConfigurationError, CellOutOfBoundsError
from .cell import Cell, CellState
from .config import (
    GameConfig,
    EASY,
    MEDIUM,
    HARD,
    PRESETS,
    clamp_setting,
    update_setting,
)
from .board import (
    Board,
    FlagHint,
    create_board,
    place_mines,
    place_mines_at,
    flag_count_around,
    flag_hint,
)
from .snapshot import BoardSnapshot, CellView
from .session import (
    GamePhase,
    GameSession,
    Outcome,
    create_session,
    reset,
    reveal,
    toggle_flag,
)
from .render import render_board
from .environment import MinefieldEnv

__all__ = [
    "MinefieldError",
    "ConfigurationError",
    "CellOutOfBoundsError",
    "Cell",
    "CellState",
    "GameConfig",
    "EASY",
    "MEDIUM",
    "HARD",
    "PRESETS",
    "clamp_setting",
    "update_setting",
    "Board",
    "FlagHint",
    "create_board",
    "place_mines",
    "place_mines_at",
    "flag_count_around",
    "flag_hint",
    "BoardSnapshot",
    "CellView",
    "GamePhase",
    "GameSession",
    "Outcome",
    "create_session",
    "reset",
    "reveal",
    "toggle_flag",
    "render_board",
    "MinefieldEnv",
]
