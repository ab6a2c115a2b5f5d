"""
Unit tests for Cell class.

Tests cell state management, reveal/flag behavior, and observation conversion.
"""
import pytest
from minefield import Cell, CellState
from minefield.cell import observation_value


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_hidden_safe_and_zero(self) -> None:
        """New cell is hidden, not a mine, with no adjacent mines."""
        cell = Cell()
        assert cell.is_mine is False
        assert cell.state == CellState.HIDDEN
        assert cell.adjacent_mines == 0

    def test_state_values_match_names(self) -> None:
        """State values are the lowercase names used by front ends."""
        assert [s.value for s in CellState] == ["hidden", "revealed", "flagged"]


# ============================================================================
# Cell Reveal and Flag Tests
# ============================================================================

class TestCellTransitions:
    """Test reveal and flag transitions on a single cell."""

    def test_reveal_hidden_cell(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell succeeds and changes state."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_revealed is True

    def test_reveal_twice_fails(self, hidden_cell: Cell) -> None:
        """Revealing an already revealed cell is rejected."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False

    def test_reveal_flagged_cell_fails(self, hidden_cell: Cell) -> None:
        """A flagged cell is not revealed."""
        hidden_cell.toggle_flag()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_flagged is True

    def test_flag_round_trip(self, hidden_cell: Cell) -> None:
        """Toggling twice returns the cell to hidden."""
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.state == CellState.FLAGGED
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.state == CellState.HIDDEN

    def test_flag_revealed_cell_fails(self, hidden_cell: Cell) -> None:
        """A revealed cell cannot be flagged."""
        hidden_cell.reveal()
        assert hidden_cell.toggle_flag() is False
        assert hidden_cell.is_revealed is True


# ============================================================================
# Settled State Tests
# ============================================================================

class TestCellSettled:
    """Test the per-cell winning condition."""

    def test_hidden_safe_cell_is_not_settled(self, hidden_cell: Cell) -> None:
        """A hidden safe cell still has to be revealed."""
        assert hidden_cell.is_settled is False

    def test_revealed_safe_cell_is_settled(self, hidden_cell: Cell) -> None:
        """A revealed safe cell is done."""
        hidden_cell.reveal()
        assert hidden_cell.is_settled is True

    def test_hidden_or_flagged_mine_is_settled(self, mine_cell: Cell) -> None:
        """An unrevealed mine is settled whether or not it is flagged."""
        assert mine_cell.is_settled is True
        mine_cell.toggle_flag()
        assert mine_cell.is_settled is True

    def test_revealed_mine_is_not_settled(self, mine_cell: Cell) -> None:
        """A revealed mine can never be part of a win."""
        mine_cell.reveal()
        assert mine_cell.is_settled is False


# ============================================================================
# Observation Encoding Tests
# ============================================================================

class TestObservationValue:
    """Test the integer encoding of visible cell contents."""

    def test_hidden_cell_is_negative_one(self) -> None:
        """Hidden cells encode as -1 whatever they contain."""
        assert observation_value(CellState.HIDDEN) == -1
        assert observation_value(CellState.HIDDEN, True, 0) == -1

    def test_flagged_cell_is_negative_two(self) -> None:
        """Flagged cells encode as -2."""
        assert observation_value(CellState.FLAGGED) == -2

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_matches_adjacent_count(self, count: int) -> None:
        """Revealed safe cells encode their adjacent mine count."""
        assert observation_value(CellState.REVEALED, False, count) == count

    def test_revealed_mine_is_nine(self) -> None:
        """A revealed mine encodes as 9."""
        assert observation_value(CellState.REVEALED, True, None) == 9
