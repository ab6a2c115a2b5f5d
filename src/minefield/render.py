"""
Plain-text rendering of board snapshots.

Used by the terminal game and the environment's ansi render mode.
"""
from typing import List

from .board import FlagHint
from .cell import CellState
from .snapshot import BoardSnapshot, CellView

HIDDEN_SYMBOL = "."
FLAG_SYMBOL = "F"
MINE_SYMBOL = "*"
EMPTY_SYMBOL = " "
OVER_FLAGGED_MARK = "!"


def cell_symbol(view: CellView) -> str:
    """Single character for a cell."""
    if view.state == CellState.HIDDEN:
        return HIDDEN_SYMBOL
    if view.state == CellState.FLAGGED:
        return FLAG_SYMBOL
    if view.is_mine:
        return MINE_SYMBOL
    if view.adjacent_mines == 0:
        return EMPTY_SYMBOL
    return str(view.adjacent_mines)


def render_board(snapshot: BoardSnapshot, coordinates: bool = False) -> str:
    """
    Render a snapshot as ASCII text.

    Each cell takes two characters: its symbol, then a space, or "!" when
    the number has more flags around it than mines.

    Args:
        snapshot: Board state to draw.
        coordinates: Prefix rows and columns with their indices.

    Returns:
        Multi-line string, one line per row.
    """
    lines: List[str] = []
    if coordinates:
        header = "    " + "".join(f"{col % 100:<3}" for col in range(snapshot.cols))
        lines.append(header.rstrip())

    for row in range(snapshot.rows):
        row_str = f"{row:>3} " if coordinates else ""
        for col in range(snapshot.cols):
            view = snapshot.cell(row, col)
            row_str += cell_symbol(view)
            if view.flag_hint == FlagHint.OVER:
                row_str += OVER_FLAGGED_MARK
            else:
                row_str += " "
            if coordinates:
                row_str += " "
        lines.append(row_str)

    return "\n".join(lines)
