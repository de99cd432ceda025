"""
Screen state machine driving a game session.

Receives one input event at a time, dispatches it to the handler of
the current page and keeps the level, move count and board in step.
"""
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable, Dict, Optional, Tuple

import numpy as np

from .board import Board, BoardConfig
from .config import GameConfig
from .difficulty import bomb_probability, clamp_level
from .events import Button, Event, KeyPress, MousePress

if TYPE_CHECKING:
    from .screens import Frame


# ============================================================================
# Pages
# ============================================================================

class Page(Enum):
    """Screens of the game. QUIT is terminal."""

    HOMESCREEN = auto()
    GAMESCREEN = auto()
    GAMEOVER = auto()
    QUIT = auto()


# ============================================================================
# Game State Machine
# ============================================================================

class GameStateMachine:
    """
    Page/state machine for one game session.

    Attributes:
        board: The board played on; owned exclusively by this session.
        page: Current screen.
        level: Difficulty level, kept across rounds.
        moves: Successful reveals in the current round.
        won: Whether the last finished round was won.
    """

    def __init__(
        self, board: Board, config: Optional[GameConfig] = None
    ) -> None:
        """
        Initialize the state machine on the home screen.

        Args:
            board: Board to play on.
            config: Session configuration (default: GameConfig()).
        """
        self.config = config or GameConfig()
        self.board = board
        self.page = Page.HOMESCREEN
        self.level = self.config.initial_level
        self.moves = 0
        self.won = False

        self._handlers: Dict[Page, Callable[[Event], None]] = {
            Page.HOMESCREEN: self._handle_homescreen,
            Page.GAMESCREEN: self._handle_gamescreen,
            Page.GAMEOVER: self._handle_gameover,
        }

    @classmethod
    def from_terminal(
        cls,
        terminal_size: Tuple[int, int],
        config: Optional[GameConfig] = None,
    ) -> "GameStateMachine":
        """
        Build a session whose board fits the given terminal.

        Args:
            terminal_size: Terminal (columns, lines).
            config: Session configuration.

        Raises:
            ValueError: If the terminal cannot fit a single cell.
        """
        config = config or GameConfig()
        board_config = BoardConfig.from_terminal(
            config.field_origin, terminal_size
        )
        board = Board(board_config, rng=np.random.default_rng(config.seed))
        return cls(board, config)

    @property
    def is_running(self) -> bool:
        """False once the session has quit."""
        return self.page != Page.QUIT

    # ========================================================================
    # Event Dispatch
    # ========================================================================

    def handle(self, event: Event) -> None:
        """Process one input event on the current page."""
        handler = self._handlers.get(self.page)
        if handler is None:
            return
        handler(event)

    def _handle_homescreen(self, event: Event) -> None:
        if not isinstance(event, KeyPress):
            return
        if event.char == "q":
            self.page = Page.QUIT
        elif event.char == "p":
            self.reset()
            self.page = Page.GAMESCREEN
        # either key of the +/= pair, shifted or not
        elif event.char in ("+", "="):
            self.level = clamp_level(self.level + 1)
        elif event.char == "-":
            self.level = clamp_level(self.level - 1)

    def _handle_gamescreen(self, event: Event) -> None:
        if isinstance(event, MousePress):
            self.make_move(event)
        elif isinstance(event, KeyPress):
            if event.char == "q":
                self.page = Page.HOMESCREEN
                self.reset()
            elif event.char == "r":
                self.reset()

    def _handle_gameover(self, event: Event) -> None:
        if isinstance(event, KeyPress) and event.char == "r":
            self.page = Page.HOMESCREEN

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reset(self) -> None:
        """Start the round over at the current level."""
        self.board.reset()
        self.moves = 0
        self.won = False

    def make_move(self, event: MousePress) -> None:
        """
        Apply a mouse press to the board.

        Presses outside the grid are ignored. Bombs are laid out on the
        first press of a round, with the pressed cell kept safe.
        """
        x, y = self.board.terminal_to_grid(event.x, event.y)
        if not self.board.in_bounds(x, y):
            return

        if self.moves == 0:
            self._place_bombs(x, y)

        if event.button == Button.RIGHT:
            self.board.toggle_flag(x, y)
            return

        cell = self.board.get_cell(x, y)
        if cell.is_flagged:
            return
        if cell.is_bomb:
            self.won = False
            self.page = Page.GAMEOVER
            return
        if cell.is_visible:
            return

        self.board.reveal(x, y)
        self.moves += 1
        if self.board.all_safe_revealed:
            self.won = True
            self.page = Page.GAMEOVER

    def _place_bombs(self, safe_x: int, safe_y: int) -> None:
        """Lay out bombs for the current level around a safe cell."""
        self.board.place_bombs(bomb_probability(self.level))
        self.board.get_cell(safe_x, safe_y).is_bomb = False
        self.board.update_neighbor_counts()

    # ========================================================================
    # Rendering
    # ========================================================================

    def describe(self) -> "Frame":
        """Text to draw for the current page."""
        from .screens import describe_screen
        return describe_screen(self)
