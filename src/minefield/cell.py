"""
Cell module for the Minesweeper engine.

Represents individual cells on the game board with their state
(hidden/revealed/flagged) and content (mine/number).
"""
from enum import Enum
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = "hidden"
    REVEALED = "revealed"
    FLAGGED = "flagged"


HIDDEN_VALUE = -1
FLAGGED_VALUE = -2
MINE_VALUE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
            Only meaningful when the cell is not a mine.
        state: Current visual state (hidden, revealed, or flagged).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was revealed, False if it was not hidden.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Flip the cell between hidden and flagged.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    @property
    def is_settled(self) -> bool:
        """True when the cell is in its winning state.

        Mines must stay unrevealed and safe cells must be revealed.
        """
        if self.is_mine:
            return self.state != CellState.REVEALED
        return self.state == CellState.REVEALED


# ============================================================================
# Observation Encoding
# ============================================================================

def observation_value(
    state: CellState,
    is_mine: Optional[bool] = None,
    adjacent_mines: Optional[int] = None,
) -> int:
    """
    Encode what a player sees of a cell as one integer.

    Returns:
        -1: Hidden cell
        -2: Flagged cell
        0-8: Revealed cell with adjacent mine count
        9: Revealed mine (game over state)
    """
    if state == CellState.HIDDEN:
        return HIDDEN_VALUE
    if state == CellState.FLAGGED:
        return FLAGGED_VALUE
    if is_mine:
        return MINE_VALUE
    return adjacent_mines
