"""
Terminal Minesweeper.

Provides the game engine (cells, board, difficulty curve, page state
machine), screen descriptions, a curses front end and a gymnasium
environment for headless play.
"""
from .cell import Cell, CellState
from .difficulty import bomb_probability, clamp_level, MIN_LEVEL, MAX_LEVEL
from .board import Board, BoardConfig
from .events import Button, Event, KeyPress, MousePress, OtherEvent
from .config import GameConfig
from .machine import GameStateMachine, Page
from .screens import Frame, describe_screen, welcome_frame
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "bomb_probability",
    "clamp_level",
    "MIN_LEVEL",
    "MAX_LEVEL",
    "Board",
    "BoardConfig",
    "Button",
    "Event",
    "KeyPress",
    "MousePress",
    "OtherEvent",
    "GameConfig",
    "GameStateMachine",
    "Page",
    "Frame",
    "describe_screen",
    "welcome_frame",
    "MinesweeperEnv",
]
