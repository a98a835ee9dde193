"""Pull-down menu data: options, menus and the menu bar layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

UNDERLINE_ON = "\x1f\x22"
UNDERLINE_OFF = "\x1f\x23"
CHECK_MARK = "\xae"
FIRST_MENU_COLUMN = 9
MENU_BAR_ROW = 1


def plain_text(text: str) -> str:
    """Return the text as it appears on screen, without underline codes."""
    return text.replace(UNDERLINE_ON, "").replace(UNDERLINE_OFF, "")


@dataclass
class MenuOption:
    """One entry of a pull-down menu."""

    text: str
    hotkey: str
    disabled: bool = False
    checked: bool = False


@dataclass
class Menu:
    """A pull-down menu with its bar title and hot key."""

    name: str
    key: str
    options: List[MenuOption] = field(default_factory=list)

    @property
    def width(self) -> int:
        return max((len(option.text) for option in self.options), default=0)

    @property
    def height(self) -> int:
        return len(self.options) + 2

    def option_for_key(self, key: str) -> Optional[int]:
        """Index of the selectable option whose hot key is ``key``, if any."""
        key = key.upper()
        for index, option in enumerate(self.options):
            if option.hotkey.upper() == key:
                return None if option.disabled else index
        return None

    def first_selectable(self) -> Optional[int]:
        return next(
            (index for index, option in enumerate(self.options) if not option.disabled),
            None,
        )

    def step(self, index: int, delta: int) -> int:
        """Move from ``index`` up or down, wrapping and skipping disabled options."""
        if delta == 0:
            raise ValueError("delta must be non-zero")
        if self.first_selectable() is None:
            raise ValueError("menu has no selectable option")
        direction = 1 if delta > 0 else -1
        count = len(self.options)
        while True:
            index += direction
            if index < 0:
                index = count - 1
            elif index >= count:
                index = 0
            if not self.options[index].disabled:
                return index


@dataclass
class MenuBar:
    """The row of menu titles and where each one sits."""

    menus: List[Menu]
    positions: List[int] = field(init=False)

    def __post_init__(self) -> None:
        self.positions = []
        column = FIRST_MENU_COLUMN
        for menu in self.menus:
            self.positions.append(column)
            column += len(menu.name) - 2

    def menu_at(self, column: int) -> Optional[int]:
        """Index of the menu whose title covers ``column`` on the bar."""
        for index, (start, menu) in enumerate(zip(self.positions, self.menus)):
            if start <= column <= start + len(menu.name) - 5:
                return index
        return None

    def menu_for_key(self, key: str) -> Optional[int]:
        key = key.upper()
        for index, menu in enumerate(self.menus):
            if menu.key.upper() == key:
                return index
        return None

    def neighbour(self, index: int, delta: int) -> int:
        """The menu ``delta`` places away, wrapping around the bar."""
        return (index + delta) % len(self.menus)