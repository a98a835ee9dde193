"""A demonstration program for the windowing interface."""

from __future__ import annotations

import sys
import time
from typing import List, Optional

from ethawin.dialogs import yes_no
from ethawin.menuloop import Desktop
from ethawin.menus import UNDERLINE_OFF, UNDERLINE_ON, Menu, MenuBar, MenuOption
from ethawin.screen import Screen, session

FILE_MENU = 0
TEXT_MENU = 2
QUIT_OPTION = 5
STATUS_ROW = 23

USAGE = (
    "\nEthaDemo V1.01\n"
    "Syntax: EthaDemo [-opts]\n"
    "Usage : Useless demonstration of the EthaWin interface.\n"
    "Opts  : -? = display this message.\n"
    "        -s = use existing screen.\n"
)

_BABBLE = (
    (3, "Greetings!  This is a sample of the EthaWin text-based"),
    (4, "windowing interface."),
    (7, "Please read the 'ethademo.doc' file included with this archive for more"),
    (8, "information on this interface and developing programs for it.  Usage:"),
    (10, "MOUSE/JOYSTICK - Position text-cursor on the menu-bar and click button"),
    (11, "to select a menu.  Once the menu is displayed, move up/down to choose an"),
    (12, "item then click button to select.  To abort a pull-down menu, move below"),
    (13, "the options then click.  (Keyboard mouse may also be used.)"),
    (15, "KEYBOARD - Press ALT+UNDERLINED LETTER of the menu to select.  Once the"),
    (16, "menu is displayed, use up/down arrow keys to choose an item and press"),
    (17, "ENTER to select it.  You may also press the underlined letter of option"),
    (18, "you wish to choose.  Use left/right arrow keys to move from menu to"),
    (19, "menu, or press BREAK to abort a menu."),
)


def _u(before: str, letter: str, after: str) -> str:
    return before + UNDERLINE_ON + letter + UNDERLINE_OFF + after


def _options(entries, disabled=()) -> List[MenuOption]:
    return [MenuOption(text, key, disabled=index in disabled)
            for index, (text, key) in enumerate(entries)]


def build_menu_bar() -> MenuBar:
    """The File, Edit and Text menus of the demo."""
    return MenuBar([
        Menu(_u("", "F", "ile"), "F", _options([
            (_u("", "N", "ew"), "N"),
            (_u("", "O", "pen"), "O"),
            (_u("", "S", "ave"), "S"),
            (_u("Save ", "A", "s..."), "A"),
            (_u("", "P", "rint"), "P"),
            (_u("", "Q", "uit"), "Q"),
        ], disabled={2})),
        Menu(_u("", "E", "dit"), "E", _options([
            (_u("", "U", "ndo"), "U"),
            (_u("", "C", "ut"), "C"),
            (_u("C", "o", "py"), "O"),
            (_u("", "P", "aste"), "P"),
            (_u("", "D", "elete"), "D"),
        ], disabled={0})),
        Menu(_u("", "T", "ext"), "T", _options([
            (_u("", "B", "old"), "B"),
            (_u("", "I", "talics"), "I"),
            (_u("", "U", "nderline"), "U"),
        ])),
    ])


def about(screen: Screen) -> None:
    screen.popup("ABOUT", 20, 6, 40, 13)
    screen.print_at(2, 1, "EthaDemo V1.01")
    screen.print_at(6, 2, "Text-Based User Interface.")
    screen.print_at(3, 9, "Press Any Key or Click Button...")
    screen.wait()
    screen.end_window()


def help_screen(screen: Screen) -> None:
    screen.popup("HELP", 20, 6, 40, 13)
    screen.print_at(5, 5, "Sorry, no help available...")
    screen.wait()
    screen.end_window()


def _show_settings(screen: Screen) -> None:
    settings = screen.settings
    screen.print_at(10, STATUS_ROW, "Hotkeys ON" if settings.hotkey else "Hotkeys OFF")
    screen.print_at(25, STATUS_ROW,
                    "MousePort LEFT" if settings.mouse_port == 0 else "MousePort RIGHT")
    screen.print_at(40, STATUS_ROW,
                    "MouseRes LOW" if settings.mouse_res == 0 else "MouseRes HIGH")
    screen.print_at(55, STATUS_ROW, "Mouse ON" if settings.mouse_on else "Mouse OFF")


def run(screen: Screen) -> MenuBar:
    """Run the demo until Quit is confirmed; returns the menu bar with its check marks."""
    bar = build_menu_bar()
    screen.clear()
    screen.top_text("", "", "")
    screen.menu_bar(bar)
    screen.top_text("Left", "EthaWin DEMO", "Right")
    about(screen)
    _show_settings(screen)
    for y, text in _BABBLE:
        screen.print_at(4, y, text)
    desktop = Desktop(screen, bar, about, help_screen)
    while True:
        event = desktop.check_menu()
        if not event.selected:
            if event.key is None and event.x is None:
                time.sleep(0.01)
            continue
        option = bar.menus[event.menu].options[event.option]
        screen.print_at(0, STATUS_ROW, option.text)
        if event.menu == TEXT_MENU:
            option.checked = not option.checked
        if (event.menu == FILE_MENU and event.option == QUIT_OPTION
                and yes_no(screen, "QUIT DEMO")):
            break
    return bar


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