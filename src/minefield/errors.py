"""Custom exceptions used throughout the minefield package."""
from typing import Any, Dict, Optional


class MinefieldError(Exception):
    """Base exception for all minefield errors.

    Catch this to handle any error raised by the engine with a single
    except clause.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            details: Additional context about the error.
        """
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(MinefieldError, ValueError):
    """Raised when a board or game configuration is invalid.

    This includes:
    - Board dimensions outside the supported range
    - Mine counts that do not fit the board
    - Unknown difficulty preset names
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.config_key = config_key or "configuration"


class CellOutOfBoundsError(MinefieldError, IndexError):
    """Raised when a coordinate falls outside the board."""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        super().__init__(
            f"Cell ({row}, {col}) is outside a {rows}x{cols} board",
            details={"row": row, "col": col, "rows": rows, "cols": cols},
        )
        self.row = row
        self.col = col
