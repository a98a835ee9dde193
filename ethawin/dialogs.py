"""Standard dialogs: yes/no confirmation, line input and the item chooser."""

from __future__ import annotations

import time
from typing import Optional, Sequence

from ethawin.config import SCREEN_LINES, Key
from ethawin.listview import ListView
from ethawin.screen import Screen

_X_POS = 1
_Y_POS = 2


def _next(screen: Screen):
    event = screen.poll()
    if event is None:
        time.sleep(0.01)
    return event


def yes_no(screen: Screen, title: str) -> bool:
    """Ask "Are You Sure?"; NO is the default answer."""
    choice = False
    drawn = None
    screen.popup(title, 30, 9, 19, 7)
    screen.print_at(2, 1, "Are You Sure?")
    while True:
        if choice != drawn:
            if choice:
                with screen.reverse():
                    screen.print_at(2, 3, " YES ")
            else:
                screen.print_at(2, 3, " YES ")
            if not choice:
                with screen.reverse():
                    screen.print_at(11, 3, " NO ")
            else:
                screen.print_at(11, 3, " NO ")
            drawn = choice
        event = _next(screen)
        if event is None:
            continue
        done = False
        if event.key is not None:
            key = event.key
            if 0 <= key < 0x110000:
                key = ord(chr(key).upper())
            if key == Key.RIGHT:
                choice = False
            elif key == ord("N"):
                choice = False
                done = screen.settings.hotkey
            elif key == Key.LEFT:
                choice = True
            elif key == ord("Y"):
                choice = True
                done = screen.settings.hotkey
            elif key == Key.ENTER:
                done = True
            elif key == Key.QUIT:
                choice = False
                done = True
        if screen.settings.mouse_on and event.x is not None:
            if event.y == 3:
                choice = 1 <= event.x <= 5
            if event.click > 0:
                done = True
        if done:
            break
    screen.end_window()
    return choice


def line_input(screen: Screen, x: int, y: int, prompt: str, length: int) -> str:
    """Read up to ``length`` characters at (x, y) after a prompt.

    With ``length`` 1 a single key is read and returned upper-cased.
    An empty string means ENTER alone was pressed.
    """
    if length < 1:
        raise ValueError("length must be at least 1")
    screen.print_at(x, y, prompt)
    if length == 1:
        while True:
            event = _next(screen)
            if event is not None and event.key is not None:
                break
        return "" if event.key == Key.ENTER else chr(event.key).upper()
    text = ""
    start = screen.cursor_x
    while True:
        event = _next(screen)
        if event is None or event.key is None:
            continue
        if event.key == Key.ENTER:
            return text
        if event.key == Key.LEFT:
            if text:
                text = text[:-1]
                screen.print_at(start + len(text), y, " ")
                screen.move(start + len(text), y)
        elif event.key >= 32 and len(text) < length:
            text += chr(event.key)
            screen.write(chr(event.key))


def choose(screen: Screen, label: str, lines: int, items: Sequence[str]) -> Optional[int]:
    """Let the user pick one item from a scrolling list; None if aborted."""
    view = ListView(items, lines)
    width = max([17] + [len(item) for item in view.items])
    screen.popup(label, 38 - width // 2, SCREEN_LINES // 2 - lines // 2 - 3, width + 4, lines + 4)
    spc = (width - 16) // 2
    with screen.reverse():
        screen.print_at(_X_POS + spc, 0, " UP ")
        screen.print_at(_X_POS + 6 + spc, 0, "DOWN")
        screen.print_at(_X_POS + 12 + spc, 0, "QUIT")
    drawn = None
    while not view.finished:
        if view.redraw or drawn != view.pointer:
            for row in range(lines):
                screen.move(_X_POS, row + _Y_POS)
                screen.erase_to_end()
            for row, (index, text) in enumerate(view.visible()):
                if row == view.pointer:
                    with screen.reverse():
                        screen.print_at(_X_POS, row + _Y_POS, text)
                else:
                    screen.print_at(_X_POS, row + _Y_POS, text)
            view.redraw = False
            drawn = view.pointer
        event = _next(screen)
        if event is None:
            continue
        key = event.key
        if screen.settings.mouse_on and event.x is not None and event.y is not None:
            mx, my = event.x, event.y
            if my == _Y_POS - 2 and (event.click > 0 or event.button_down):
                if _X_POS + spc <= mx <= _X_POS + 3 + spc:
                    key = Key.SHIFT_UP if event.click > 1 else Key.UP
                elif _X_POS + 6 + spc <= mx <= _X_POS + 9 + spc:
                    key = Key.SHIFT_DOWN if event.click > 1 else Key.DOWN
                elif _X_POS + 12 + spc <= mx <= _X_POS + 15 + spc:
                    key = Key.QUIT
            elif _Y_POS <= my < _Y_POS + lines:
                row = my - _Y_POS
                if view.start + row < len(view.items):
                    text = view.items[view.start + row]
                    if _X_POS <= mx <= _X_POS + len(text) - 1 and view.select_row(row):
                        if event.click > 0:
                            key = Key.ENTER
        if key is not None:
            view.handle_key(key)
    screen.end_window()
    return view.selection