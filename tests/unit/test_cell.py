"""
Unit tests for Cell class.

Tests cell defaults, reveal/flag behavior, glyph rendering and
observation conversion.
"""
import pytest
from termsweeper import Cell, CellState
from termsweeper.cell import GLYPH_EMPTY, GLYPH_FLAG, GLYPH_HIDDEN


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_empty(self) -> None:
        """New cell should have every flag off and no neighbors."""
        cell = Cell()
        assert cell.is_bomb is False
        assert cell.is_flagged is False
        assert cell.is_visible is False
        assert cell.neighbor_count == 0

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        assert Cell().state == CellState.HIDDEN

    def test_clear_restores_defaults(self) -> None:
        """Clearing should restore a fresh cell."""
        cell = Cell(is_bomb=True, is_flagged=True, is_visible=True,
                    neighbor_count=4)
        cell.clear()
        assert cell == Cell()


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_visible is True

    def test_reveal_twice_returns_false(self, hidden_cell: Cell) -> None:
        """Revealing an already visible cell changes nothing."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_visible is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_changes_state_to_flagged(self, hidden_cell: Cell) -> None:
        """Flagging a cell should change its state."""
        hidden_cell.toggle_flag()
        assert hidden_cell.state == CellState.FLAGGED
        assert hidden_cell.is_flagged is True

    def test_double_toggle_restores_cell(self, bomb_cell: Cell) -> None:
        """Flagging twice should leave the cell as it was."""
        bomb_cell.toggle_flag()
        bomb_cell.toggle_flag()
        assert bomb_cell == Cell(is_bomb=True)

    def test_visible_cell_can_be_flagged(self, numbered_cell: Cell) -> None:
        """Flags on open cells are allowed and keep visibility."""
        numbered_cell.toggle_flag()
        assert numbered_cell.is_flagged is True
        assert numbered_cell.is_visible is True


# ============================================================================
# Cell Glyph Tests
# ============================================================================

class TestCellGlyph:
    """Test the single-character rendering rule."""

    def test_hidden_cell_glyph(self, hidden_cell: Cell) -> None:
        """Hidden cells draw the opaque glyph."""
        assert hidden_cell.glyph == GLYPH_HIDDEN

    def test_flag_wins_over_everything(self) -> None:
        """Flagged cells always draw F."""
        cell = Cell(is_bomb=True, is_flagged=True, is_visible=True,
                    neighbor_count=2)
        assert cell.glyph == GLYPH_FLAG

    def test_visible_bomb_stays_hidden(self, bomb_cell: Cell) -> None:
        """Bombs never show their own glyph."""
        bomb_cell.neighbor_count = 3
        bomb_cell.reveal()
        assert bomb_cell.glyph == GLYPH_HIDDEN

    def test_visible_zero_is_blank(self, hidden_cell: Cell) -> None:
        """Open cells without neighbors are blank."""
        hidden_cell.reveal()
        assert hidden_cell.glyph == GLYPH_EMPTY

    @pytest.mark.parametrize("count", range(1, 9))
    def test_visible_count_is_digit(self, count: int) -> None:
        """Open cells show their neighbor count."""
        cell = Cell(neighbor_count=count, is_visible=True)
        assert cell.glyph == str(count)
        assert str(cell) == str(count)


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values for automated play."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        """Hidden cell should return -1 for observation."""
        assert hidden_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, numbered_cell: Cell
    ) -> None:
        """Flagged cell should return -2, even when open."""
        numbered_cell.toggle_flag()
        assert numbered_cell.to_observation() == -2

    def test_revealed_cell_observation_is_count(
        self, numbered_cell: Cell
    ) -> None:
        """Revealed cell returns its neighbor count."""
        assert numbered_cell.to_observation() == 3

    def test_revealed_bomb_observation_reads_hidden(
        self, bomb_cell: Cell
    ) -> None:
        """A visible bomb is observed like a hidden cell, as it is drawn."""
        bomb_cell.reveal()
        assert bomb_cell.to_observation() == -1
