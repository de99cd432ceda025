"""
Board module for Minesweeper game.

Implements the grid of cells with bomb placement, neighbor counting,
terminal coordinate translation and the flood-fill reveal.
"""
import math
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell


# ============================================================================
# Constants
# ============================================================================

# Each cell is drawn as its glyph followed by a separator.
CELL_WIDTH = 2

# Terminal rows below the field kept free for the help line.
BOTTOM_MARGIN = 4

NEIGHBOR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


def _round_half_away(value: float) -> int:
    """Round to nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Largest column index (the grid has width + 1 columns).
        height: Largest row index (the grid has height + 1 rows).
        field_origin: Terminal (x, y) where the top-left cell is drawn.
    """

    width: int = 8
    height: int = 8
    field_origin: Tuple[int, int] = (8, 9)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure the grid holds at least one cell."""
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Terminal too small to fit the board "
                f"(width index {self.width}, height index {self.height})"
            )
        if self.field_origin[0] < 0 or self.field_origin[1] < 0:
            raise ValueError("Field origin must not be negative")

    @classmethod
    def from_terminal(
        cls,
        field_origin: Tuple[int, int],
        terminal_size: Tuple[int, int],
    ) -> "BoardConfig":
        """
        Size the board to fit a terminal.

        Args:
            field_origin: Terminal (x, y) of the top-left cell.
            terminal_size: Terminal (columns, lines).
        """
        origin_x, origin_y = field_origin
        columns, lines = terminal_size
        width = columns // CELL_WIDTH - 1 - origin_x
        height = lines - origin_y - BOTTOM_MARGIN
        return cls(width, height, tuple(field_origin))

    @property
    def columns(self) -> int:
        """Number of cells per row."""
        return self.width + 1

    @property
    def rows(self) -> int:
        """Number of rows of cells."""
        return self.height + 1


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Cells are addressed as (x, y) = (column, row); both bounds are
    inclusive: 0 <= x <= width and 0 <= y <= height.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    rng: np.random.Generator = field(
        default_factory=np.random.default_rng, repr=False
    )
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._init_grid()
        self.update_neighbor_counts()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.columns)]
            for _ in range(self.config.rows)
        ]

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def field_origin(self) -> Tuple[int, int]:
        return self.config.field_origin

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x <= self.width and 0 <= y <= self.height

    def neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yield in-bounds neighboring positions.

        Args:
            x: Column of center cell.
            y: Row of center cell.
        """
        for delta_x, delta_y in NEIGHBOR_OFFSETS:
            new_x = x + delta_x
            new_y = y + delta_y
            if self.in_bounds(new_x, new_y):
                yield new_x, new_y

    def iter_cells(self) -> Iterator[Cell]:
        """Yield every cell, row by row."""
        for row in self._grid:
            yield from row

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.in_bounds(x, y):
            return None
        return self._grid[y][x]

    # ========================================================================
    # Bomb Placement
    # ========================================================================

    def place_bombs(self, probability: float) -> None:
        """
        Draw a fresh bomb layout.

        Every cell independently becomes a bomb with the given
        probability; any previous layout is replaced.
        """
        draws = self.rng.random((self.config.rows, self.config.columns))
        for y, row in enumerate(self._grid):
            for x, cell in enumerate(row):
                cell.is_bomb = bool(draws[y, x] < probability)

    def update_neighbor_counts(self) -> None:
        """Recompute every cell's neighbor bomb count from scratch."""
        for y, row in enumerate(self._grid):
            for x, cell in enumerate(row):
                cell.neighbor_count = self._count_adjacent_bombs(x, y)

    def _count_adjacent_bombs(self, x: int, y: int) -> int:
        """Count bombs adjacent to a specific cell."""
        count = 0
        for neighbor_x, neighbor_y in self.neighbors(x, y):
            if self._grid[neighbor_y][neighbor_x].is_bomb:
                count += 1
        return count

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> None:
        """
        Open a cell and flood outward.

        Every opened cell exposes its full ring of neighbors. Hidden
        neighbors with a zero count are opened in turn, so the fill
        spreads through connected zero cells.
        """
        if not self.in_bounds(x, y):
            return
        self._grid[y][x].reveal()
        pending = [(x, y)]
        while pending:
            current_x, current_y = pending.pop()
            for neighbor_x, neighbor_y in self.neighbors(current_x, current_y):
                neighbor = self._grid[neighbor_y][neighbor_x]
                if neighbor.neighbor_count == 0 and not neighbor.is_visible:
                    pending.append((neighbor_x, neighbor_y))
                neighbor.reveal()

    def toggle_flag(self, x: int, y: int) -> None:
        """Flip the flag on a cell."""
        if not self.in_bounds(x, y):
            return
        self._grid[y][x].toggle_flag()

    def reset(self) -> None:
        """Clear every cell, keeping the grid dimensions."""
        for cell in self.iter_cells():
            cell.clear()

    # ========================================================================
    # Coordinate Translation
    # ========================================================================

    def terminal_to_grid(self, term_x: int, term_y: int) -> Tuple[int, int]:
        """
        Map a terminal character position onto a grid position.

        The result may lie outside the board; check with in_bounds.
        """
        origin_x, origin_y = self.field_origin
        x = _round_half_away((term_x - origin_x) / CELL_WIDTH) - 1
        y = term_y - origin_y
        return x, y

    def grid_to_terminal(self, x: int, y: int) -> Tuple[int, int]:
        """Terminal position of the glyph drawn for a grid position."""
        origin_x, origin_y = self.field_origin
        return origin_x + CELL_WIDTH * x + 1, origin_y + y

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def bomb_count(self) -> int:
        """Number of bombs currently placed."""
        return sum(1 for cell in self.iter_cells() if cell.is_bomb)

    @property
    def hidden_safe_count(self) -> int:
        """Number of safe cells still waiting to be opened."""
        return sum(
            1 for cell in self.iter_cells()
            if not cell.is_bomb and not cell.is_visible
        )

    @property
    def all_safe_revealed(self) -> bool:
        """Check if every non-bomb cell is visible."""
        return self.hidden_safe_count == 0

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D int8 array shaped (rows, columns), see
            Cell.to_observation for the encoding.
        """
        obs = np.zeros((self.config.rows, self.config.columns), dtype=np.int8)
        for y, row in enumerate(self._grid):
            for x, cell in enumerate(row):
                obs[y, x] = cell.to_observation()
        return obs

    def render_rows(self) -> List[str]:
        """One text line per grid row, indented by the origin column."""
        indent = " " * self.field_origin[0]
        return [
            indent + "".join(cell.glyph + " " for cell in row)
            for row in self._grid
        ]
