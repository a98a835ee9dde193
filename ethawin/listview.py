"""Scrolling list with a highlight bar, as used by the item chooser."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from ethawin.config import Key


class ListView:
    """A window of ``lines`` rows over a list of items with one row highlighted."""

    def __init__(self, items: Iterable[str], lines: int) -> None:
        self.items: List[str] = list(items)
        if not self.items:
            raise ValueError("a list view needs at least one item")
        if lines < 1:
            raise ValueError("a list view needs at least one line")
        self.lines = lines
        self.start = 0
        self.pointer = 0
        self.redraw = True
        self.finished = False
        self.selection: Optional[int] = None

    @property
    def selected(self) -> int:
        return self.start + self.pointer

    def up(self) -> None:
        if self.pointer > 0:
            self.pointer -= 1
        elif self.start > 0:
            self.start -= 1
            self.redraw = True

    def down(self) -> None:
        count = len(self.items)
        if self.pointer < self.lines - 1 and self.pointer < count - 1:
            self.pointer += 1
        elif self.start < count - self.lines:
            self.start += 1
            self.redraw = True

    def page_up(self) -> None:
        if self.pointer > 0:
            self.pointer = 0
        elif self.start > 0:
            self.start = max(0, self.start - self.lines)
            self.pointer = self.lines - 1
            self.redraw = True

    def page_down(self) -> None:
        count = len(self.items)
        if self.pointer < self.lines - 1:
            self.pointer = min(self.lines - 1, count - 1)
        elif self.start < count - self.lines:
            self.start = min(self.start + self.lines, count - self.lines)
            self.pointer = 0
            self.redraw = True

    def home(self) -> None:
        self.pointer = 0
        if self.start != 0:
            self.start = 0
            self.redraw = True

    def end(self) -> None:
        count = len(self.items)
        self.pointer = self.lines - 1
        if self.pointer >= count:
            self.pointer = count - 1
            return
        if self.start < count - self.lines:
            self.start = count - self.lines
            self.redraw = True

    def select_row(self, row: int) -> bool:
        """Move the highlight to a visible row; False if the row holds no item."""
        if 0 <= row < self.lines and self.start + row < len(self.items):
            self.pointer = row
            return True
        return False

    def visible(self) -> List[Tuple[int, str]]:
        """The (index, text) pairs currently shown, top to bottom."""
        stop = min(self.start + self.lines, len(self.items))
        return [(index, self.items[index]) for index in range(self.start, stop)]

    def handle_key(self, key: int) -> bool:
        """Act on a key; True once the list is finished (chosen or aborted)."""
        actions = {
            Key.UP: self.up,
            Key.DOWN: self.down,
            Key.SHIFT_UP: self.page_up,
            Key.SHIFT_DOWN: self.page_down,
            Key.CTRL_UP: self.home,
            Key.CTRL_DOWN: self.end,
        }
        action = actions.get(key)
        if action is not None:
            action()
        elif key == Key.ENTER:
            self.finished = True
            self.selection = self.selected
        elif key == Key.QUIT:
            self.finished = True
            self.selection = None
        return self.finished