"""
Board module for the Minesweeper engine.

Implements the grid of cells, mine placement and adjacency counting,
plus the neighbour queries the presentation layer uses for flag hints.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

from .cell import Cell, CellState
from .config import GameConfig
from .errors import CellOutOfBoundsError, ConfigurationError

logger = logging.getLogger(__name__)

Position = Tuple[int, int]

NEIGHBOR_OFFSETS: Tuple[Position, ...] = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if (delta_row, delta_col) != (0, 0)
)

PLACEMENT_METHODS = ("rejection", "permutation")


class FlagHint(Enum):
    """How the flags around a revealed number compare to the number."""

    NONE = "none"
    UNDER = "under"
    SATISFIED = "satisfied"
    OVER = "over"


# ============================================================================
# Board Class
# ============================================================================

@dataclass(eq=True)
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells. Mines are not placed at construction time;
    call place_mines (or place_mines_at) once the safe cell is known.
    """

    config: GameConfig = field(default_factory=GameConfig)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    mines_placed: bool = False

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        if not self._grid:
            self._grid = [
                [Cell() for _ in range(self.config.cols)]
                for _ in range(self.config.rows)
            ]

    # ========================================================================
    # Dimensions and Lookup
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def check_bounds(self, row: int, col: int) -> None:
        """Raise CellOutOfBoundsError unless position is on the board."""
        if not self.in_bounds(row, col):
            raise CellOutOfBoundsError(row, col, self.rows, self.cols)

    def cell(self, row: int, col: int) -> Cell:
        """Get the cell at a position."""
        self.check_bounds(row, col)
        return self._grid[row][col]

    def positions(self) -> Iterator[Position]:
        """Iterate over every (row, col) in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    def cells(self) -> Iterator[Cell]:
        for row in self._grid:
            yield from row

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get in-bounds neighbouring positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            Up to 8 (row, col) tuples, fewer at edges and corners.
        """
        neighbors = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self.in_bounds(new_row, new_col):
                neighbors.append((new_row, new_col))
        return neighbors

    # ========================================================================
    # Counts
    # ========================================================================

    @property
    def mine_count(self) -> int:
        return sum(1 for cell in self.cells() if cell.is_mine)

    @property
    def flag_count(self) -> int:
        return sum(1 for cell in self.cells() if cell.is_flagged)

    def count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(
            1 for r, c in self.neighbors(row, col) if self._grid[r][c].is_mine
        )

    def recompute_adjacency(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        for row, col in self.positions():
            cell = self._grid[row][col]
            cell.adjacent_mines = (
                0 if cell.is_mine else self.count_adjacent_mines(row, col)
            )

    def mine_positions(self) -> List[Position]:
        return [
            (row, col) for row, col in self.positions()
            if self._grid[row][col].is_mine
        ]

    def is_cleared(self) -> bool:
        """True when every safe cell is revealed and no mine is."""
        return all(cell.is_settled for cell in self.cells())

    def reveal_all_mines(self) -> int:
        """Reveal every mine cell, leaving other cells untouched."""
        revealed = 0
        for cell in self.cells():
            if cell.is_mine and cell.state != CellState.REVEALED:
                cell.state = CellState.REVEALED
                revealed += 1
        return revealed


# ============================================================================
# Engine Operations
# ============================================================================

def create_board(rows: int, cols: int, mines: int) -> Board:
    """
    Allocate an empty board.

    Every cell starts hidden with no mine. Invalid dimensions or mine
    counts raise ConfigurationError.
    """
    return Board(GameConfig(rows, cols, mines))


def place_mines(
    board: Board,
    mines: int,
    exclude: Optional[Position] = None,
    rng: Optional[random.Random] = None,
    method: str = "rejection",
) -> Board:
    """
    Place mines uniformly at random, optionally sparing one cell.

    The default rejection method draws a random position and redraws on
    duplicates or the excluded cell. The permutation method samples
    without replacement from the candidate cells, with bounded cost.
    Both produce the same distribution.

    Args:
        board: Board without mines.
        mines: Number of mines to place; must match the board config.
        exclude: Optional (row, col) position to keep mine-free.
        rng: Random source; defaults to the module-level generator.
        method: "rejection" or "permutation".

    Returns:
        The same board, with mines placed and adjacency computed.
    """
    if method not in PLACEMENT_METHODS:
        raise ConfigurationError(
            f"Unknown placement method '{method}'", config_key="method"
        )
    if board.mines_placed:
        raise ConfigurationError("Mines have already been placed on this board")
    if exclude is not None:
        board.check_bounds(*exclude)

    _check_mine_count(board, mines)

    rng = rng or random
    if method == "rejection":
        draws = _place_by_rejection(board, mines, exclude, rng)
        logger.debug(
            "Placed %d mines on %dx%d board in %d draws",
            mines, board.rows, board.cols, draws,
        )
    else:
        positions = [pos for pos in board.positions() if pos != exclude]
        for row, col in rng.sample(positions, mines):
            board._grid[row][col].is_mine = True
        logger.debug(
            "Placed %d mines on %dx%d board by permutation",
            mines, board.rows, board.cols,
        )

    board.recompute_adjacency()
    board.mines_placed = True
    return board


def _check_mine_count(board: Board, mines: int) -> None:
    """Reject placements that disagree with the configured mine count."""
    if mines != board.config.mines:
        raise ConfigurationError(
            f"Cannot place {mines} mines on a board configured for "
            f"{board.config.mines}",
            config_key="mines",
        )


def _place_by_rejection(
    board: Board, mines: int, exclude: Optional[Position], rng
) -> int:
    """Draw random positions until enough distinct mines are accepted."""
    placed = 0
    draws = 0
    while placed < mines:
        draws += 1
        row = rng.randrange(board.rows)
        col = rng.randrange(board.cols)
        cell = board._grid[row][col]
        if (row, col) == exclude or cell.is_mine:
            continue
        cell.is_mine = True
        placed += 1
    return draws


def place_mines_at(board: Board, positions: Iterable[Position]) -> Board:
    """
    Place mines at fixed positions and compute adjacency.

    Used for deterministic boards. Duplicate positions count once, and
    the number of distinct positions must match the board config.
    """
    if board.mines_placed:
        raise ConfigurationError("Mines have already been placed on this board")
    unique = set(positions)
    for row, col in unique:
        board.check_bounds(row, col)
    _check_mine_count(board, len(unique))
    for row, col in unique:
        board._grid[row][col].is_mine = True
    board.recompute_adjacency()
    board.mines_placed = True
    logger.debug("Injected %d mines at fixed positions", len(unique))
    return board


def flag_count_around(board: Board, row: int, col: int) -> int:
    """Count flagged cells among the up-to-8 neighbours of a position."""
    board.check_bounds(row, col)
    return sum(
        1 for r, c in board.neighbors(row, col) if board._grid[r][c].is_flagged
    )


def flag_hint(board: Board, row: int, col: int) -> FlagHint:
    """
    Compare nearby flags with a revealed number.

    Only revealed, non-mine cells with a positive count get a hint; all
    other cells report FlagHint.NONE.
    """
    cell = board.cell(row, col)
    if not cell.is_revealed or cell.is_mine or cell.adjacent_mines == 0:
        return FlagHint.NONE
    flags = flag_count_around(board, row, col)
    if flags > cell.adjacent_mines:
        return FlagHint.OVER
    if flags == cell.adjacent_mines:
        return FlagHint.SATISFIED
    return FlagHint.UNDER
