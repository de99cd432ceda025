"""
Input events delivered to the game state machine.

The terminal front end decodes raw input into these values; the game
core never sees escape sequences or curses key codes.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class Button(Enum):
    """Mouse buttons the game reacts to."""

    LEFT = auto()
    RIGHT = auto()


@dataclass(frozen=True)
class KeyPress:
    """A printable key."""

    char: str


@dataclass(frozen=True)
class MousePress:
    """
    A mouse button press.

    Attributes:
        button: Which button was pressed.
        x: Terminal column, 1-based.
        y: Terminal row, 1-based.
    """

    button: Button
    x: int
    y: int


@dataclass(frozen=True)
class OtherEvent:
    """Any input the game ignores."""


Event = Union[KeyPress, MousePress, OtherEvent]
