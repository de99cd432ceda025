"""
Curses front end.

Decodes raw terminal input into game events, draws frames and runs the
input loop. Raw mode and mouse reporting live inside curses.wrapper, so
the terminal is restored however the session ends.
"""
import curses
import locale
from typing import Optional, Tuple

from .config import GameConfig
from .events import Button, Event, KeyPress, MousePress, OtherEvent
from .machine import GameStateMachine
from .screens import Frame, welcome_frame


LEFT_BUTTON_MASK = curses.BUTTON1_PRESSED | curses.BUTTON1_CLICKED
RIGHT_BUTTON_MASK = curses.BUTTON3_PRESSED | curses.BUTTON3_CLICKED

MouseState = Tuple[int, int, int, int, int]


def safe_addstr(win, y, x, text, attr=0):
    """addstr that silently ignores curses errors at screen edges."""
    try:
        win.addstr(y, x, text, attr)
    except curses.error:
        pass


def decode_event(key: int, mouse: Optional[MouseState] = None) -> Event:
    """
    Turn a curses key code into a game event.

    Args:
        key: Value returned by getch().
        mouse: Result of curses.getmouse() when key is KEY_MOUSE.
            Its 0-based coordinates become the 1-based ones the board
            expects.
    """
    if key == curses.KEY_MOUSE:
        if mouse is None:
            return OtherEvent()
        _, x, y, _, button_state = mouse
        if button_state & LEFT_BUTTON_MASK:
            return MousePress(Button.LEFT, x + 1, y + 1)
        if button_state & RIGHT_BUTTON_MASK:
            return MousePress(Button.RIGHT, x + 1, y + 1)
        return OtherEvent()
    if 32 <= key < 127:
        return KeyPress(chr(key))
    return OtherEvent()


def read_event(win) -> Event:
    """Block for the next input and decode it."""
    key = win.getch()
    mouse = None
    if key == curses.KEY_MOUSE:
        try:
            mouse = curses.getmouse()
        except curses.error:
            return OtherEvent()
    return decode_event(key, mouse)


def draw_frame(win, frame: Frame) -> None:
    """Draw a frame, row 0 of the window being terminal row 1."""
    if frame.clear:
        win.erase()
    for row, text in enumerate(frame.lines()):
        safe_addstr(win, row, 0, text)
    if frame.cursor_home:
        win.move(0, 0)
    win.refresh()


def run(stdscr, config: GameConfig) -> GameStateMachine:
    """
    Input loop for one session.

    Returns:
        The machine after it reached the quit page.
    """
    curses.curs_set(0)
    curses.mousemask(curses.ALL_MOUSE_EVENTS)
    curses.mouseinterval(0)
    stdscr.keypad(True)

    lines, columns = stdscr.getmaxyx()
    machine = GameStateMachine.from_terminal((columns, lines), config)

    draw_frame(stdscr, welcome_frame())
    while True:
        machine.handle(read_event(stdscr))
        if not machine.is_running:
            break
        draw_frame(stdscr, machine.describe())
    return machine


def play(config: Optional[GameConfig] = None) -> GameStateMachine:
    """Run an interactive session in the current terminal."""
    locale.setlocale(locale.LC_ALL, "")
    return curses.wrapper(run, config or GameConfig())
