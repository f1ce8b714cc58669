"""
Unit tests for Cell class and per-cell rendering.

Tests cell state tags, reveal/flag behavior, observation codes and
symbol selection.
"""
import pytest
from minesweeper import ASCII_SYMBOLS, EMOJI_SYMBOLS, Cell, CellState


# ============================================================================
# Cell State Tests
# ============================================================================

class TestCellState:
    """Test cell creation and state transitions."""

    def test_default_cell_is_hidden_safe_cell(self) -> None:
        """New cell should be hidden, not a mine, with no count."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True
        assert cell.is_mine is False
        assert cell.adjacent_mines == 0

    def test_reveal_hidden_cell(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed once."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_revealed is True
        assert hidden_cell.reveal() is False

    def test_flagged_cell_cannot_be_revealed(self, hidden_cell: Cell) -> None:
        """A flag protects the cell from reveal."""
        hidden_cell.toggle_flag()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_flagged is True

    def test_toggle_flag_twice_returns_to_hidden(
        self, hidden_cell: Cell
    ) -> None:
        """Flagging twice should restore the hidden state."""
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.state == CellState.FLAGGED
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.state == CellState.HIDDEN

    def test_revealed_cell_cannot_be_flagged(self, hidden_cell: Cell) -> None:
        """Cannot flag a revealed cell."""
        hidden_cell.reveal()
        assert hidden_cell.toggle_flag() is False
        assert hidden_cell.is_revealed is True
        assert hidden_cell.is_flagged is False


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test integer observation codes."""

    def test_hidden_and_flagged_codes(self, hidden_cell: Cell) -> None:
        """Hidden is -1, flagged is -2."""
        assert hidden_cell.to_observation() == -1
        hidden_cell.toggle_flag()
        assert hidden_cell.to_observation() == -2

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its adjacent mine count."""
        cell = Cell(adjacent_mines=count)
        cell.reveal()
        assert cell.to_observation() == count

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        """Revealed mine should return 9."""
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9


# ============================================================================
# Symbol Selection Tests
# ============================================================================

class TestSymbols:
    """Test marker priority for a single cell."""

    def test_hidden_cell_symbol(self, hidden_cell: Cell) -> None:
        """Hidden safe cell draws the hidden marker."""
        assert ASCII_SYMBOLS.for_cell(hidden_cell, lost=False) == "."

    def test_hidden_mine_is_shown_only_after_loss(
        self, mine_cell: Cell
    ) -> None:
        """Unrevealed mines stay hidden until the game is lost."""
        assert ASCII_SYMBOLS.for_cell(mine_cell, lost=False) == "."
        assert ASCII_SYMBOLS.for_cell(mine_cell, lost=True) == "*"

    def test_flagged_mine_after_loss_shows_mine(self, mine_cell: Cell) -> None:
        """Mine marker takes priority over the flag once lost."""
        mine_cell.toggle_flag()
        assert ASCII_SYMBOLS.for_cell(mine_cell, lost=False) == "F"
        assert ASCII_SYMBOLS.for_cell(mine_cell, lost=True) == "*"

    def test_flagged_safe_cell_after_loss_keeps_flag(
        self, hidden_cell: Cell
    ) -> None:
        """A wrong flag still shows as a flag after loss."""
        hidden_cell.toggle_flag()
        assert ASCII_SYMBOLS.for_cell(hidden_cell, lost=True) == "F"

    def test_revealed_number_and_blank(self) -> None:
        """Revealed cells show their count, or blank for zero."""
        numbered = Cell(adjacent_mines=3)
        numbered.reveal()
        blank = Cell()
        blank.reveal()
        assert ASCII_SYMBOLS.for_cell(numbered, lost=False) == "3"
        assert ASCII_SYMBOLS.for_cell(blank, lost=False) == " "
        assert EMOJI_SYMBOLS.for_cell(blank, lost=False) == "⬜"

    def test_revealed_mine_symbol(self, mine_cell: Cell) -> None:
        """Detonated mine draws the mine marker."""
        mine_cell.reveal()
        assert EMOJI_SYMBOLS.for_cell(mine_cell, lost=True) == "💣"
