"""A character-cell screen with overlay windows, drawn onto a terminal."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, List, Optional, Sequence, Union

from ethawin.config import Key, Settings, load_config
from ethawin.menus import MENU_BAR_ROW, MenuBar, plain_text

SCREEN_WIDTH = 80
SCREEN_HEIGHT = 24


@dataclass(frozen=True)
class Event:
    """A key press or a mouse report; mouse coordinates are in character cells."""

    key: Optional[int] = None
    click: int = 0
    x: Optional[int] = None
    y: Optional[int] = None
    button_down: bool = False


class HeadlessTerminal:
    """A terminal fed from a list of events, keeping every frame shown."""

    def __init__(self, events: Iterable[Union[Event, int, str]] = ()) -> None:
        self.events: List[Event] = []
        for item in events:
            if isinstance(item, Event):
                self.events.append(item)
            elif isinstance(item, str):
                self.events.extend(Event(key=ord(ch)) for ch in item)
            else:
                self.events.append(Event(key=int(item)))
        self.frames: List[List[str]] = []

    def read_event(self) -> Optional[Event]:
        """Next queued event; EOFError once the queue is empty."""
        if not self.events:
            raise EOFError("no more input events")
        return self.events.pop(0)

    def show(self, rows: Sequence[str]) -> None:
        self.frames.append(list(rows))


class CursesTerminal:
    """A terminal backed by a curses window."""

    def __init__(self, stdscr) -> None:
        import curses

        self._curses = curses
        self.stdscr = stdscr
        stdscr.nodelay(True)
        stdscr.keypad(True)
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.mousemask(curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION)
        c = curses
        self._keys = {
            c.KEY_UP: Key.UP,
            c.KEY_DOWN: Key.DOWN,
            c.KEY_LEFT: Key.LEFT,
            c.KEY_RIGHT: Key.RIGHT,
            c.KEY_PPAGE: Key.SHIFT_UP,
            c.KEY_NPAGE: Key.SHIFT_DOWN,
            c.KEY_HOME: Key.CTRL_UP,
            c.KEY_END: Key.CTRL_DOWN,
            c.KEY_ENTER: Key.ENTER,
            c.KEY_BACKSPACE: Key.LEFT,
            10: Key.ENTER,
            127: Key.LEFT,
            27: Key.QUIT,
        }

    def read_event(self) -> Optional[Event]:
        c = self._curses
        code = self.stdscr.getch()
        if code == -1:
            return None
        if code == c.KEY_MOUSE:
            try:
                _, x, y, _, state = c.getmouse()
            except c.error:
                return None
            if state & c.BUTTON1_DOUBLE_CLICKED:
                clicks = 2
            elif state & (c.BUTTON1_CLICKED | c.BUTTON1_RELEASED):
                clicks = 1
            else:
                clicks = 0
            return Event(click=clicks, x=x, y=y, button_down=bool(state & c.BUTTON1_PRESSED))
        return Event(key=int(self._keys.get(code, code)))

    def show(self, rows: Sequence[str]) -> None:
        height, width = self.stdscr.getmaxyx()
        for y, row in enumerate(rows[:height]):
            try:
                self.stdscr.addstr(y, 0, row[: width - 1])
            except self._curses.error:
                pass
        self.stdscr.refresh()


@dataclass
class _Window:
    x: int
    y: int
    w: int
    h: int
    saved_cells: Optional[List[List[str]]] = None
    saved_reverse: Optional[List[List[bool]]] = None
    saved_cursor: tuple = (0, 0)


class Screen:
    """Text screen with a stack of overlay windows; output goes to the current one."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                 settings: Optional[Settings] = None, terminal=None) -> None:
        if width < 1 or height < 1:
            raise ValueError("screen size must be positive")
        self.width = width
        self.height = height
        self.settings = settings if settings is not None else Settings()
        self.terminal = terminal if terminal is not None else HeadlessTerminal()
        self.cells = [[" "] * width for _ in range(height)]
        self.reversed = [[False] * width for _ in range(height)]
        self._windows = [_Window(0, 0, width, height)]
        self.cursor_x = 0
        self.cursor_y = 0
        self._reverse = False
        self.mouse_x = 0
        self.mouse_y = 0

    @property
    def _area(self) -> _Window:
        return self._windows[-1]

    def move(self, x: int, y: int) -> None:
        self.cursor_x, self.cursor_y = x, y

    def _put(self, x: int, y: int, ch: str) -> None:
        area = self._area
        if 0 <= x < area.w and 0 <= y < area.h:
            ax, ay = area.x + x, area.y + y
            if 0 <= ax < self.width and 0 <= ay < self.height:
                self.cells[ay][ax] = ch
                self.reversed[ay][ax] = self._reverse

    def write(self, text: str) -> None:
        """Write at the cursor; underline codes are dropped, newlines start a new line."""
        for ch in plain_text(text):
            if ch == "\n":
                self.cursor_x = 0
                self.cursor_y += 1
                continue
            self._put(self.cursor_x, self.cursor_y, ch)
            self.cursor_x += 1

    def print_at(self, x: int, y: int, text: str) -> None:
        self.move(x, y)
        self.write(text)

    def _blank(self, x: int, y: int) -> None:
        saved, self._reverse = self._reverse, False
        self._put(x, y, " ")
        self._reverse = saved

    def erase_line(self) -> None:
        for x in range(self._area.w):
            self._blank(x, self.cursor_y)

    def erase_to_end(self) -> None:
        for x in range(self.cursor_x, self._area.w):
            self._blank(x, self.cursor_y)

    def _row(self, y: int) -> tuple:
        area = self._area
        ay = area.y + y
        return (self.cells[ay][area.x:area.x + area.w], self.reversed[ay][area.x:area.x + area.w])

    def _set_row(self, y: int, row: tuple) -> None:
        area = self._area
        ay = area.y + y
        self.cells[ay][area.x:area.x + area.w] = row[0]
        self.reversed[ay][area.x:area.x + area.w] = row[1]

    def _visible_rows(self) -> range:
        area = self._area
        return range(0, min(area.h, self.height - area.y))

    def insert_line(self) -> None:
        """Insert a blank line at the cursor row, pushing the rest down."""
        rows = self._visible_rows()
        if self.cursor_y not in rows:
            return
        for y in reversed(range(self.cursor_y + 1, rows.stop)):
            self._set_row(y, self._row(y - 1))
        self.erase_line()

    def delete_line(self) -> None:
        """Delete the cursor row, pulling the rest up."""
        rows = self._visible_rows()
        if self.cursor_y not in rows:
            return
        for y in range(self.cursor_y, rows.stop - 1):
            self._set_row(y, self._row(y + 1))
        saved = self.cursor_y
        self.cursor_y = rows.stop - 1
        self.erase_line()
        self.cursor_y = saved

    def clear(self) -> None:
        for y in range(self._area.h):
            self.cursor_y = y
            self.erase_line()
        self.move(0, 0)

    @contextmanager
    def reverse(self) -> Iterator[None]:
        """Write in reverse video while the block runs."""
        saved, self._reverse = self._reverse, True
        try:
            yield
        finally:
            self._reverse = saved

    def _open(self, x: int, y: int, w: int, h: int, inner: _Window) -> None:
        if w < 2 or h < 2:
            raise ValueError("window too small")
        inner.saved_cells = [row[:] for row in self.cells]
        inner.saved_reverse = [row[:] for row in self.reversed]
        inner.saved_cursor = (self.cursor_x, self.cursor_y)
        self._windows.append(_Window(0, 0, self.width, self.height))
        for yy in range(y + 1, y + h + 1):
            for xx in range(x + 1, x + w + 1):
                self._blank(xx, yy)
        for yy in range(y, y + h):
            for xx in range(x, x + w):
                self._blank(xx, yy)
        self._windows[-1] = inner

    def popup(self, title: str, x: int, y: int, w: int, h: int) -> None:
        """Open a shaded dialog box with a centred title on its border."""
        inner = _Window(x + 1, y + 1, w - 2, h - 2)
        self._open(x, y, w, h, inner)
        frame = _Window(x, y, w, h)
        self._windows[-1] = frame
        self.print_at(w // 2 - len(plain_text(title)) // 2, 0, title)
        self._windows[-1] = inner
        self.clear()

    def pulldown(self, x: int, y: int, w: int, h: int) -> None:
        """Open a pull-down menu window."""
        self._open(x, y, w, h, _Window(x + 1, y + 1, w - 1, h - 1))
        self.move(0, 0)

    def end_window(self) -> None:
        """Close the newest overlay window, restoring what lay beneath."""
        if len(self._windows) == 1:
            raise RuntimeError("no overlay window is open")
        window = self._windows.pop()
        self.cells = window.saved_cells
        self.reversed = window.saved_reverse
        self.cursor_x, self.cursor_y = window.saved_cursor

    def top_text(self, left: str, title: str, right: str) -> None:
        self.move(0, 0)
        self.erase_line()
        self.print_at(2, 0, left)
        self.print_at(self.width // 2 - len(title) // 2, 0, title)
        self.print_at(self.width - 2 - len(right), 0, right)

    def menu_bar(self, bar: MenuBar) -> None:
        self.move(0, MENU_BAR_ROW)
        self.erase_line()
        self.print_at(2, MENU_BAR_ROW, "About")
        self.print_at(self.width - 6, MENU_BAR_ROW, "Help")
        for column, menu in zip(bar.positions, bar.menus):
            self.print_at(column, MENU_BAR_ROW, menu.name)

    def button(self, x: int, y: int, text: str) -> None:
        """Draw a bracketed push button whose label starts at column ``x``."""
        self.print_at(x - 1, y, "[")
        with self.reverse():
            self.write(text)
        self.write("]")

    def row_text(self, y: int) -> str:
        return "".join(self.cells[y])

    def poll(self) -> Optional[Event]:
        """Show the screen and return the next event, or None when none is waiting.

        Mouse coordinates come back relative to the current window.
        """
        self.refresh()
        event = self.terminal.read_event()
        if event is not None and event.x is not None and event.y is not None:
            area = self._area
            event = replace(event, x=event.x - area.x, y=event.y - area.y)
            self.mouse_x, self.mouse_y = event.x, event.y
        return event

    def wait(self) -> Event:
        """Block until a key is pressed or the mouse is clicked."""
        while True:
            event = self.poll()
            if event is None:
                time.sleep(0.01)
            elif event.key is not None or event.click > 0:
                return event

    def refresh(self) -> None:
        self.terminal.show([self.row_text(y) for y in range(self.height)])


@contextmanager
def session(settings: Optional[Settings] = None) -> Iterator[Screen]:
    """Run a full-screen session on the controlling terminal."""
    import curses

    if settings is None:
        settings = load_config()
    stdscr = curses.initscr()
    try:
        curses.noecho()
        curses.cbreak()
        yield Screen(SCREEN_WIDTH, SCREEN_HEIGHT, settings, CursesTerminal(stdscr))
    finally:
        stdscr.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()