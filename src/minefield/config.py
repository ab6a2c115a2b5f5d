"""
Game configuration for the Minesweeper engine.

Holds the validated board dimensions and mine count, the fixed
difficulty presets, and the clamping rules applied to custom settings.
"""
from dataclasses import dataclass, replace
from typing import Dict

from .errors import ConfigurationError


# ============================================================================
# Constants
# ============================================================================

MIN_ROWS = 5
MAX_ROWS = 40
MIN_COLS = 5
MAX_COLS = 40
MIN_MINES = 1

SETTING_KEYS = ("rows", "cols", "mines")


def max_mines_for(rows: int, cols: int) -> int:
    """Largest mine count that still leaves one safe cell."""
    return rows * cols - 1


def _clamp(value: int, low: int, high: int) -> int:
    return min(high, max(low, value))


# ============================================================================
# Game Configuration
# ============================================================================

@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a Minesweeper game.

    Attributes:
        rows: Number of rows, between 5 and 40.
        cols: Number of columns, between 5 and 40.
        mines: Total mines to place, between 1 and rows * cols - 1.
    """

    rows: int = 9
    cols: int = 9
    mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are within the supported ranges."""
        if not MIN_ROWS <= self.rows <= MAX_ROWS:
            raise ConfigurationError(
                f"Rows must be between {MIN_ROWS} and {MAX_ROWS}, got {self.rows}",
                config_key="rows",
            )
        if not MIN_COLS <= self.cols <= MAX_COLS:
            raise ConfigurationError(
                f"Columns must be between {MIN_COLS} and {MAX_COLS}, got {self.cols}",
                config_key="cols",
            )
        max_mines = max_mines_for(self.rows, self.cols)
        if not MIN_MINES <= self.mines <= max_mines:
            raise ConfigurationError(
                f"Mines must be between {MIN_MINES} and {max_mines}, got {self.mines}",
                config_key="mines",
            )

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.total_cells - self.mines

    @classmethod
    def custom(cls, rows: int, cols: int, mines: int) -> "GameConfig":
        """
        Build a configuration from user-supplied values, clamping each.

        Rows and columns are clamped first so the mine ceiling reflects
        the final board size.

        Args:
            rows: Requested number of rows.
            cols: Requested number of columns.
            mines: Requested number of mines.

        Returns:
            A valid configuration.
        """
        rows = _clamp(rows, MIN_ROWS, MAX_ROWS)
        cols = _clamp(cols, MIN_COLS, MAX_COLS)
        mines = _clamp(mines, MIN_MINES, max_mines_for(rows, cols))
        return cls(rows, cols, mines)

    @classmethod
    def from_preset(cls, name: str) -> "GameConfig":
        """Look up a difficulty preset by name (easy, medium, hard)."""
        try:
            return PRESETS[name.lower()]
        except KeyError:
            raise ConfigurationError(
                f"Unknown difficulty '{name}' "
                f"(expected one of: {', '.join(PRESETS)})",
                config_key="difficulty",
            ) from None


# Preset difficulty levels
EASY = GameConfig(9, 9, 10)
MEDIUM = GameConfig(16, 16, 40)
HARD = GameConfig(24, 24, 80)

PRESETS: Dict[str, GameConfig] = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
}


def clamp_setting(key: str, value: int, current: GameConfig) -> int:
    """
    Clamp a single edited setting against the current configuration.

    Mirrors a settings form where one field changes at a time: rows and
    columns are clamped to their fixed range, mines to the ceiling of
    the current board size.

    Args:
        key: One of "rows", "cols" or "mines".
        value: The newly entered value.
        current: The configuration being edited.

    Returns:
        The clamped value.
    """
    if key == "rows":
        return _clamp(value, MIN_ROWS, MAX_ROWS)
    if key == "cols":
        return _clamp(value, MIN_COLS, MAX_COLS)
    if key == "mines":
        return _clamp(value, MIN_MINES, max_mines_for(current.rows, current.cols))
    raise ConfigurationError(
        f"Unknown setting '{key}' (expected one of: {', '.join(SETTING_KEYS)})",
        config_key=key,
    )


def update_setting(current: GameConfig, key: str, value: int) -> GameConfig:
    """
    Return a new configuration with one setting changed and clamped.

    When rows or columns shrink, the mine count is pulled down to the
    new ceiling so the result is always valid.
    """
    value = clamp_setting(key, value, current)
    if key == "mines":
        return replace(current, mines=value)
    rows = value if key == "rows" else current.rows
    cols = value if key == "cols" else current.cols
    mines = min(current.mines, max_mines_for(rows, cols))
    return GameConfig(rows, cols, mines)
