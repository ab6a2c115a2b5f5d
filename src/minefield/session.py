"""
Game session module for the Minesweeper engine.

Wraps a board with the game phase and the first-click bookkeeping, and
implements the reveal, flag and reset transitions.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .board import Board, Position, create_board, place_mines
from .cell import CellState
from .config import GameConfig
from .snapshot import BoardSnapshot

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GamePhase(Enum):
    """Lifecycle phase of a session."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self in (GamePhase.WON, GamePhase.LOST)


class Outcome(Enum):
    """Result of a reveal."""

    CONTINUE = "continue"
    WON = "won"
    LOST = "lost"


_TERMINAL_OUTCOMES = {
    GamePhase.WON: Outcome.WON,
    GamePhase.LOST: Outcome.LOST,
}


# ============================================================================
# Game Session
# ============================================================================

@dataclass
class GameSession:
    """
    A single game: the board plus its phase.

    Mines are placed on the first reveal so the opening click is always
    safe. Once the phase is WON or LOST, reveal and flag calls leave the
    session untouched until a new session is created.

    Attributes:
        board: The board this session owns.
        phase: Current lifecycle phase.
        first_click_consumed: Whether the opening reveal has happened.
        rng: Random source used for mine placement.
        placement_method: "rejection" or "permutation".
    """

    board: Board
    phase: GamePhase = GamePhase.PENDING
    first_click_consumed: bool = False
    rng: Optional[random.Random] = field(default=None, compare=False, repr=False)
    placement_method: str = field(default="rejection", compare=False)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def config(self) -> GameConfig:
        return self.board.config

    @property
    def is_terminal(self) -> bool:
        return self.phase.is_terminal

    @property
    def is_playing(self) -> bool:
        return not self.phase.is_terminal

    @property
    def is_won(self) -> bool:
        return self.phase == GamePhase.WON

    @property
    def is_lost(self) -> bool:
        return self.phase == GamePhase.LOST

    @property
    def remaining_mines(self) -> int:
        """Mines minus flags placed; negative when over-flagged."""
        return self.config.mines - self.board.flag_count

    def hidden_positions(self) -> List[Position]:
        """Positions that can still be revealed."""
        return [
            (row, col) for row, col in self.board.positions()
            if self.board.cell(row, col).is_hidden
        ]

    def snapshot(self) -> BoardSnapshot:
        """Immutable view of the board for rendering."""
        return BoardSnapshot.from_board(self.board, self.phase, self.remaining_mines)

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> Outcome:
        """
        Reveal a cell.

        On first click, places mines avoiding this cell. Revealing a mine
        loses the game and exposes every mine. Revealing a zero cell
        flood-fills its connected zero region and the numbered border.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            The outcome after the reveal.
        """
        cell = self.board.cell(row, col)
        if self.is_terminal:
            return _TERMINAL_OUTCOMES[self.phase]
        if cell.state != CellState.HIDDEN:
            return Outcome.CONTINUE

        if not self.first_click_consumed:
            self._handle_first_click(row, col)

        if cell.is_mine:
            self.board.reveal_all_mines()
            self.phase = GamePhase.LOST
            logger.info("Mine revealed at (%d, %d); game lost", row, col)
            return Outcome.LOST

        self._flood_reveal(row, col)

        if self.board.is_cleared():
            self.phase = GamePhase.WON
            logger.info("All safe cells revealed; game won")
            return Outcome.WON
        return Outcome.CONTINUE

    def _handle_first_click(self, row: int, col: int) -> None:
        """Place mines around the opening click unless already injected."""
        if not self.board.mines_placed:
            place_mines(
                self.board,
                self.config.mines,
                exclude=(row, col),
                rng=self.rng,
                method=self.placement_method,
            )
        self.first_click_consumed = True
        self.phase = GamePhase.IN_PROGRESS
        logger.debug("First click at (%d, %d) consumed", row, col)

    def _flood_reveal(self, row: int, col: int) -> int:
        """Reveal from a safe cell, expanding through zero cells."""
        revealed = 0
        stack = [(row, col)]
        while stack:
            r, c = stack.pop()
            cell = self.board.cell(r, c)
            if not cell.reveal():
                continue
            revealed += 1
            if cell.adjacent_mines == 0:
                for neighbor in self.board.neighbors(r, c):
                    if self.board.cell(*neighbor).is_hidden:
                        stack.append(neighbor)
        logger.debug("Revealed %d cells from (%d, %d)", revealed, row, col)
        return revealed

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Returns:
            True if the flag changed, False if the call was a no-op.
        """
        cell = self.board.cell(row, col)
        if self.is_terminal:
            return False
        return cell.toggle_flag()


# ============================================================================
# Engine API
# ============================================================================

def create_session(
    config: GameConfig,
    rng: Optional[random.Random] = None,
    placement_method: str = "rejection",
) -> GameSession:
    """Start a fresh session; mines are placed on the first reveal."""
    board = create_board(config.rows, config.cols, config.mines)
    return GameSession(board=board, rng=rng, placement_method=placement_method)


def reset(
    config: GameConfig,
    rng: Optional[random.Random] = None,
    placement_method: str = "rejection",
) -> GameSession:
    """Discard any current game and start a new one from config."""
    logger.debug(
        "New %dx%d session with %d mines", config.rows, config.cols, config.mines
    )
    return create_session(config, rng=rng, placement_method=placement_method)


def reveal(session: GameSession, row: int, col: int) -> Tuple[GameSession, Outcome]:
    """Reveal a cell and return the session with the outcome."""
    outcome = session.reveal(row, col)
    return session, outcome


def toggle_flag(session: GameSession, row: int, col: int) -> GameSession:
    """Flip a hidden cell to flagged or a flagged cell back to hidden."""
    session.toggle_flag(row, col)
    return session
