"""
Read-only views of a board for the presentation layer.

Snapshots copy what a player is allowed to see: mine and adjacency
information is exposed only for revealed cells.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

import numpy as np

from .board import Board, FlagHint, flag_hint
from .cell import CellState, observation_value

if TYPE_CHECKING:
    from .session import GamePhase


@dataclass(frozen=True)
class CellView:
    """
    What the player can see of one cell.

    Attributes:
        state: Current visual state.
        is_mine: Whether the cell is a mine, or None while unrevealed.
        adjacent_mines: Neighbouring mine count, or None unless the cell
            is a revealed safe cell.
        flag_hint: How surrounding flags compare to a revealed number.
    """

    state: CellState
    is_mine: Optional[bool] = None
    adjacent_mines: Optional[int] = None
    flag_hint: FlagHint = FlagHint.NONE

    def to_observation(self) -> int:
        return observation_value(self.state, self.is_mine, self.adjacent_mines)


@dataclass(frozen=True)
class BoardSnapshot:
    """Immutable copy of a board's visible state."""

    rows: int
    cols: int
    phase: "GamePhase"
    remaining_mines: int
    cells: Tuple[Tuple[CellView, ...], ...]

    @classmethod
    def from_board(
        cls, board: Board, phase: "GamePhase", remaining_mines: int
    ) -> "BoardSnapshot":
        grid = []
        for row in range(board.rows):
            views = []
            for col in range(board.cols):
                cell = board.cell(row, col)
                if cell.is_revealed:
                    views.append(CellView(
                        state=cell.state,
                        is_mine=cell.is_mine,
                        adjacent_mines=None if cell.is_mine else cell.adjacent_mines,
                        flag_hint=flag_hint(board, row, col),
                    ))
                else:
                    views.append(CellView(state=cell.state))
            grid.append(tuple(views))
        return cls(board.rows, board.cols, phase, remaining_mines, tuple(grid))

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def cell(self, row: int, col: int) -> CellView:
        return self.cells[row][col]

    def to_array(self) -> np.ndarray:
        """
        Get the visible state as a read-only numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.array(
            [[view.to_observation() for view in row] for row in self.cells],
            dtype=np.int8,
        ).reshape(self.rows, self.cols)
        obs.setflags(write=False)
        return obs
