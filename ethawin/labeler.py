"""A label printer shell built on the windowing interface."""

from __future__ import annotations

import sys
import time
from typing import List, Optional

from ethawin.menuloop import Desktop, MenuEvent
from ethawin.menus import UNDERLINE_OFF, UNDERLINE_ON, Menu, MenuBar, MenuOption
from ethawin.screen import Screen, session

USAGE = (
    "\nLabeler V0.00\n"
    "Syntax: Labeler [-opts]\n"
    "Usage : A nifty label printer...\n"
    "Opts  : -? = display this message.\n"
)


def _u(before: str, letter: str, after: str) -> str:
    return before + UNDERLINE_ON + letter + UNDERLINE_OFF + after


def build_menu_bar() -> MenuBar:
    """The File and Misc menus."""
    return MenuBar([
        Menu(_u("", "F", "ile"), "F", [
            MenuOption(_u("", "O", "pen"), "O"),
            MenuOption(_u("", "S", "ave"), "S"),
            MenuOption(_u("Save ", "A", "s..."), "A"),
            MenuOption(_u("", "Q", "uit"), "Q"),
        ]),
        Menu(_u("", "M", "isc"), "M", [
            MenuOption(_u("", "A", " aaa"), "A"),
            MenuOption(_u("", "B", " bbb"), "B"),
            MenuOption(_u("", "C", " ccc"), "C"),
            MenuOption(_u("", "D", " ddd"), "D"),
        ]),
    ])


def about(screen: Screen) -> None:
    screen.popup("ABOUT", 18, 4, 44, 17)
    screen.print_at(11, 1, "/) Labeler  V0.00 (\\")
    screen.print_at(8, 2, "A Labeler Program ... Duh!")
    screen.print_at(1, 10, "Support the future of OS-9 and the CoCo.")
    screen.print_at(4, 11, "Please do not pirate this program.")
    screen.print_at(5, 13, "Press Any Key or Click Button...")
    screen.wait()
    screen.end_window()


def help_screen(screen: Screen) -> None:
    screen.popup("HELP!", 9, 3, 62, 19)
    screen.wait()
    screen.end_window()


def run(screen: Screen) -> MenuEvent:
    """Show the desktop until any menu option is chosen, and return that choice."""
    bar = build_menu_bar()
    screen.clear()
    screen.top_text("", "", "")
    screen.menu_bar(bar)
    screen.top_text("Don't", "Labeler V0.00", "Panic!")
    about(screen)
    desktop = Desktop(screen, bar, about, help_screen)
    while True:
        event = desktop.check_menu()
        if event.selected:
            return event
        if event.key is None and event.x is None:
            time.sleep(0.01)


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if any(arg[:2] == "-?" for arg in args):
        sys.stderr.write(USAGE)
        return 0
    with session() as screen:
        run(screen)
    return 0


if __name__ == "__main__":
    sys.exit(main())