"""The menu bar loop: mouse and ALT-key access to the pull-down menus."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from ethawin.config import Key
from ethawin.menus import (
    CHECK_MARK,
    MENU_BAR_ROW,
    UNDERLINE_OFF,
    UNDERLINE_ON,
    Menu,
    MenuBar,
)
from ethawin.screen import Screen

ABOUT_LABEL = UNDERLINE_ON + "A" + UNDERLINE_OFF + "bout"
HELP_LABEL = UNDERLINE_ON + "H" + UNDERLINE_OFF + "elp"
ABOUT_COLUMN = 2
PULLDOWN_ROW = 2
ALT_BASE = 128

ScreenAction = Callable[[Screen], None]


@dataclass(frozen=True)
class MenuEvent:
    """What one pass of the menu loop saw: a chosen option, a key or a click."""

    menu: Optional[int] = None
    option: Optional[int] = None
    key: Optional[int] = None
    click: int = 0
    x: Optional[int] = None
    y: Optional[int] = None

    @property
    def selected(self) -> bool:
        return self.menu is not None and self.option is not None


class Desktop:
    """Drives the menu bar of a screen, calling the About and Help boxes when asked."""

    def __init__(self, screen: Screen, bar: MenuBar,
                 about: Optional[ScreenAction] = None,
                 help: Optional[ScreenAction] = None) -> None:
        if not bar.menus:
            raise ValueError("a desktop needs at least one menu")
        self.screen = screen
        self.bar = bar
        self.about = about
        self.help = help

    @property
    def _help_column(self) -> int:
        return self.screen.width - 6

    def check_menu(self) -> MenuEvent:
        """Look at the next input; open a menu when the bar is clicked or ALT+key pressed."""
        event = self.screen.poll()
        if event is None:
            return MenuEvent()
        base = dict(key=event.key, click=event.click, x=event.x, y=event.y)
        if (self.screen.settings.mouse_on and event.click > 0
                and event.y == MENU_BAR_ROW and event.x is not None):
            x = event.x
            if ABOUT_COLUMN <= x <= ABOUT_COLUMN + 4:
                self.do_about()
                return MenuEvent(**base)
            if self._help_column <= x <= self._help_column + 3:
                self.do_help()
                return MenuEvent(**base)
            index = self.bar.menu_at(x)
            if index is not None:
                return self._open(index, base)
        if event.key is not None and ALT_BASE <= event.key < 2 * ALT_BASE:
            letter = chr(event.key - ALT_BASE).upper()
            base["key"] = ord(letter)
            if letter == "A":
                self.do_about()
                return MenuEvent(**base)
            if letter == "H":
                self.do_help()
                return MenuEvent(**base)
            index = self.bar.menu_for_key(letter)
            if index is not None:
                return self._open(index, base)
        return MenuEvent(**base)

    def _open(self, index: int, base: dict) -> MenuEvent:
        chosen = self.do_menu(index)
        if chosen is None:
            return MenuEvent(**base)
        return MenuEvent(menu=chosen[0], option=chosen[1], **base)

    def _show_option(self, menu: Menu, index: int, highlighted: bool) -> None:
        self.screen.move(1, index)
        if highlighted:
            with self.screen.reverse():
                self.screen.write(menu.options[index].text)
        else:
            self.screen.write(menu.options[index].text)

    def do_menu(self, index: int) -> Optional[Tuple[int, int]]:
        """Pull down menu ``index`` and let the user choose; (menu, option) or None."""
        if not 0 <= index < len(self.bar.menus):
            raise IndexError(f"no menu {index}")
        screen = self.screen
        settings = screen.settings
        maclike = False
        checkit = True
        aborted = False
        while True:
            menu = self.bar.menus[index]
            column = self.bar.positions[index]
            count = len(menu.options)
            self.highlight_title(column, menu.name, True)
            screen.pulldown(column, PULLDOWN_ROW, menu.width, menu.height)
            for row, entry in enumerate(menu.options):
                screen.move(0, row)
                screen.write((CHECK_MARK if entry.checked else " ") + entry.text)
            first = menu.first_selectable()
            option = count if first is None else first
            drawn: Optional[int] = None
            last_row: Optional[int] = None
            done = finished = False
            while not done:
                if option != drawn:
                    if drawn is not None and drawn < count:
                        self._show_option(menu, drawn, False)
                    if option < count:
                        self._show_option(menu, option, True)
                    drawn = option
                event = screen.poll()
                if event is None:
                    time.sleep(0.01)
                    continue
                if event.key is not None:
                    key = event.key
                    letter = chr(key).upper() if 0 <= key < 0x110000 else ""
                    hot = menu.option_for_key(letter) if letter else None
                    if hot is not None:
                        option = hot
                        if settings.hotkey:
                            done = finished = True
                        continue
                    if key == Key.ENTER:
                        aborted = option >= count
                        done = finished = True
                    elif key in (Key.UP, Key.DOWN):
                        if first is not None:
                            option = menu.step(option, -1 if key == Key.UP else 1)
                    elif key == Key.LEFT:
                        index = self.bar.neighbour(index, -1)
                        done = True
                    elif key == Key.RIGHT:
                        index = self.bar.neighbour(index, 1)
                        done = True
                    elif key == Key.QUIT:
                        aborted = True
                        done = finished = True
                if done or not settings.mouse_on or event.x is None or event.y is None:
                    continue
                if checkit:
                    maclike = maclike or event.button_down
                    checkit = False
                row = min(max(event.y, 0), count)
                if row != last_row:
                    last_row = row
                    if row >= count or not menu.options[row].disabled:
                        option = row
                if (not maclike and event.click > 0) or (maclike and not event.button_down):
                    aborted = option >= count
                    done = finished = True
            screen.end_window()
            self.highlight_title(column, menu.name, False)
            if finished:
                break
        return None if aborted else (index, option)

    def do_about(self) -> None:
        self.highlight_title(ABOUT_COLUMN, ABOUT_LABEL, True)
        if self.about is not None:
            self.about(self.screen)
        self.highlight_title(ABOUT_COLUMN, ABOUT_LABEL, False)

    def do_help(self) -> None:
        self.highlight_title(self._help_column, HELP_LABEL, True)
        if self.help is not None:
            self.help(self.screen)
        self.highlight_title(self._help_column, HELP_LABEL, False)

    def highlight_title(self, x: int, text: str, on: bool) -> None:
        """Draw a menu bar title at column ``x``, reversed when ``on``."""
        self.screen.move(x, MENU_BAR_ROW)
        if on:
            with self.screen.reverse():
                self.screen.write(text)
        else:
            self.screen.write(text)