"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their bomb,
flag and visibility flags plus the neighbouring bomb count.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

GLYPH_FLAG = "F"
GLYPH_HIDDEN = "▒"
GLYPH_EMPTY = " "


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Flag and visibility are independent: a visible cell may still be
    flagged, in which case it keeps showing the flag.

    Attributes:
        is_bomb: Whether this cell contains a bomb.
        is_flagged: Whether the player has flagged this cell.
        is_visible: Whether this cell has been opened.
        neighbor_count: Count of bombs in neighboring cells (0-8).
    """

    is_bomb: bool = False
    is_flagged: bool = False
    is_visible: bool = False
    neighbor_count: int = 0

    def reveal(self) -> bool:
        """
        Mark this cell visible.

        Returns:
            True if the cell was hidden before, False otherwise.
        """
        if self.is_visible:
            return False
        self.is_visible = True
        return True

    def toggle_flag(self) -> None:
        """Flip the flag on this cell."""
        self.is_flagged = not self.is_flagged

    def clear(self) -> None:
        """Restore the freshly constructed state."""
        self.is_bomb = False
        self.is_flagged = False
        self.is_visible = False
        self.neighbor_count = 0

    @property
    def glyph(self) -> str:
        """
        Single character used to draw this cell.

        Bombs are never drawn with their own glyph, even when visible.
        """
        if self.is_flagged:
            return GLYPH_FLAG
        if not self.is_visible or self.is_bomb:
            return GLYPH_HIDDEN
        if self.neighbor_count == 0:
            return GLYPH_EMPTY
        return str(self.neighbor_count)

    @property
    def state(self) -> CellState:
        """Visual state, with the flag taking priority."""
        if self.is_flagged:
            return CellState.FLAGGED
        if self.is_visible:
            return CellState.REVEALED
        return CellState.HIDDEN

    def to_observation(self) -> int:
        """
        Convert cell to observation value for automated play.

        Follows the glyph rule, so bombs opened by a fill still read as
        hidden.

        Returns:
            -1: Hidden cell or visible bomb
            -2: Flagged cell
            0-8: Revealed cell with neighbor bomb count
        """
        if self.is_flagged:
            return -2
        if not self.is_visible or self.is_bomb:
            return -1
        return self.neighbor_count

    def __str__(self) -> str:
        return self.glyph
