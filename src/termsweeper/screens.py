"""
Screen descriptions for each page.

Builds the text the terminal front end draws after every event. Nothing
here touches the terminal or changes game state.
"""
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from .machine import GameStateMachine, Page


INDENT = " " * 8

TITLE = "| M | I | N | E | S | W | E | E | P | E | R |"
MENU_LABEL = "|  MENU |"
MENU_ITEMS = (
    "| p: play!  | q: quit game  |  "
    "+/- : change difficulty level (currently {level})  |"
)
GAME_STATUS = "| difficulty level: {level} | move: {moves} | r: reset game | q: quit |"
GAMEOVER_LOST = "| G | A | M | E | O | V | E | R |  r: return to menu  |"
GAMEOVER_WON = "| Y | O | U |   | W | O | N | ! |  r: return to menu  |"
GAME_HELP = " Left click to dig up a spot, right click to place a flag!"


def border_for(text: str) -> str:
    """Alternating +-+- rule as wide as ``text``."""
    return "".join("+" if i % 2 == 0 else "-" for i in range(len(text)))


def banner(text: str, indent: str = INDENT) -> List[str]:
    """Three-line boxed banner."""
    rule = indent + border_for(text)
    return [rule, indent + text, rule]


# ============================================================================
# Frame
# ============================================================================

@dataclass
class Frame:
    """
    Text content of one screen.

    Attributes:
        header: Lines drawn from the first terminal row.
        field: Board lines, one per grid row.
        field_row: Terminal row (1-based) of the first board line.
        footer: Lines drawn right below the board.
        clear: Whether the screen is cleared before drawing.
        cursor_home: Whether drawing starts from the top-left corner.
    """

    header: Tuple[str, ...] = ()
    field: Tuple[str, ...] = ()
    field_row: int = 1
    footer: Tuple[str, ...] = ()
    clear: bool = True
    cursor_home: bool = True

    def lines(self) -> List[str]:
        """
        Lay the frame out as terminal rows.

        Index 0 is terminal row 1. The board starts at field_row and
        the footer follows it.
        """
        rows = list(self.header)
        if self.field:
            start = self.field_row - 1
            if len(rows) < start:
                rows.extend([""] * (start - len(rows)))
            rows[start:start + len(self.field)] = list(self.field)
            del rows[start + len(self.field):]
        rows.extend(self.footer)
        return rows

    def text(self) -> str:
        return "\n".join(self.lines())


# ============================================================================
# Page Descriptions
# ============================================================================

def welcome_frame() -> Frame:
    """Splash shown before the first input event."""
    return Frame(header=(
        "", "", "",
        "Welcome to MineSweeper! ",
        "", "", "",
        "Press any button to start playing!",
    ))


def _homescreen(machine: GameStateMachine) -> Frame:
    space = " " * (machine.board.width // 4)
    menu = MENU_ITEMS.format(level=machine.level)
    header = ["", ""]
    header += banner(TITLE, INDENT + space)
    header += ["", "", "", ""]
    header += [INDENT + border_for(MENU_LABEL), INDENT + MENU_LABEL]
    header += [INDENT + border_for(menu), INDENT + menu, INDENT + border_for(menu)]
    return Frame(header=tuple(header))


def _gamescreen(machine: GameStateMachine) -> Frame:
    status = GAME_STATUS.format(level=machine.level, moves=machine.moves)
    return Frame(
        header=tuple(["", ""] + banner(status)),
        field=tuple(machine.board.render_rows()),
        field_row=machine.board.field_origin[1],
        footer=(GAME_HELP,),
    )


def _gameover(machine: GameStateMachine) -> Frame:
    text = GAMEOVER_WON if machine.won else GAMEOVER_LOST
    return Frame(
        header=tuple(["", ""] + banner(text)),
        field=tuple(machine.board.render_rows()),
        field_row=machine.board.field_origin[1],
    )


def _quit(machine: GameStateMachine) -> Frame:
    return Frame()


_DESCRIBERS: Dict[Page, Callable[[GameStateMachine], Frame]] = {
    Page.HOMESCREEN: _homescreen,
    Page.GAMESCREEN: _gamescreen,
    Page.GAMEOVER: _gameover,
    Page.QUIT: _quit,
}


def describe_screen(machine: GameStateMachine) -> Frame:
    """Frame for the machine's current page."""
    return _DESCRIBERS[machine.page](machine)
