"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

import numpy as np

# Add src (and the root, for main.py) to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(ROOT / "src"))

from termsweeper import (
    Board, BoardConfig, Cell, GameConfig, GameStateMachine, Page,
)


# ============================================================================
# Helpers
# ============================================================================

def plant_bombs(board: Board, positions) -> Board:
    """Put bombs at the given (x, y) positions and recount neighbors."""
    for x, y in positions:
        board.get_cell(x, y).is_bomb = True
    board.update_neighbor_counts()
    return board


@pytest.fixture
def plant():
    """Helper that puts bombs at (x, y) positions and recounts."""
    return plant_bombs


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def small_board() -> Board:
    """Create a 3x3 board for neighbor tests."""
    return Board(BoardConfig(2, 2), rng=np.random.default_rng(7))


@pytest.fixture
def wide_board() -> Board:
    """Create a 10x4 board for reveal tests."""
    return Board(BoardConfig(9, 3), rng=np.random.default_rng(42))


@pytest.fixture
def terminal_board() -> Board:
    """Create a board sized for an 80x24 terminal."""
    config = BoardConfig.from_terminal((8, 9), (80, 24))
    return Board(config, rng=np.random.default_rng(0))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def bomb_cell() -> Cell:
    """Create a cell containing a bomb."""
    return Cell(is_bomb=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with neighboring bombs."""
    cell = Cell(neighbor_count=3)
    cell.reveal()
    return cell


# ============================================================================
# State Machine Fixtures
# ============================================================================

@pytest.fixture
def machine() -> GameStateMachine:
    """Create a session for an 80x24 terminal with a fixed seed."""
    return GameStateMachine.from_terminal((80, 24), GameConfig(seed=2024))


@pytest.fixture
def playing_machine(machine: GameStateMachine) -> GameStateMachine:
    """Session already on the game screen."""
    machine.page = Page.GAMESCREEN
    return machine
