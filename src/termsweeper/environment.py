"""
Gymnasium environment wrapper for Minesweeper.

Drives a GameStateMachine with left clicks so agents and scripts can
play without a terminal.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .config import GameConfig
from .events import Button, MousePress
from .machine import GameStateMachine, Page


DEFAULT_TERMINAL_SIZE = (80, 24)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell (bombs always read as hidden)
        - -2 = flagged cell
        - 0-8 = revealed cell with neighbor bomb count

    Actions:
        Discrete action space of size rows * columns.
        Action i is a left click on cell (x = i % columns, y = i // columns).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the round
        - -10 for clicking a bomb
        - -0.1 for a click that changed nothing
        - 0 for any click after the round has ended
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        terminal_size: Tuple[int, int] = DEFAULT_TERMINAL_SIZE,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Session configuration; initial_level sets the level.
            terminal_size: Terminal (columns, lines) the board is sized for.
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or GameConfig()
        self.machine = GameStateMachine.from_terminal(terminal_size, self.config)
        self.board = self.machine.board
        self.render_mode = render_mode

        rows = self.board.config.rows
        columns = self.board.config.columns

        self.observation_space = spaces.Box(
            low=-2,
            high=8,
            shape=(rows, columns),
            dtype=np.int8,
        )

        # One action per cell
        self.action_space = spaces.Discrete(rows * columns)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a fresh round on the game screen.

        Args:
            seed: Random seed for reproducible bomb layouts.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board.rng = self.np_random
        self.machine.reset()
        self.machine.page = Page.GAMESCREEN
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Left-click one cell.

        Args:
            action: Cell index (y * columns + x).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        x, y = self._action_to_position(action)
        self._steps += 1

        already_over = self.machine.page == Page.GAMEOVER
        hidden_before = self.board.hidden_safe_count
        term_x, term_y = self.board.grid_to_terminal(x, y)
        self.machine.handle(MousePress(Button.LEFT, term_x, term_y))

        reward = 0.0 if already_over else self._calculate_reward(hidden_before)
        terminated = self.machine.page == Page.GAMEOVER

        return (
            self.board.get_observation(), reward, terminated, False,
            self._get_info(),
        )

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (x, y) position."""
        columns = self.board.config.columns
        return int(action) % columns, int(action) // columns

    def _calculate_reward(self, hidden_before: int) -> float:
        """Reward for the click just handled."""
        if self.machine.page == Page.GAMEOVER:
            return 10.0 if self.machine.won else -10.0
        if self.board.hidden_safe_count < hidden_before:
            return 1.0
        return -0.1

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "moves": self.machine.moves,
            "level": self.machine.level,
            "hidden_safe": self.board.hidden_safe_count,
            "page": self.machine.page.name,
            "won": self.machine.won,
        }

    def render(self) -> Optional[str]:
        """Render the current screen as text."""
        text = self.machine.describe().text()
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = cell drawn hidden and unflagged,
            including bombs exposed by a fill.
        """
        return (self.board.get_observation() == -1).flatten()
