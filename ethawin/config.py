"""Screen settings and the .cfg file that adjusts them."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

DEFAULT_CONFIG_PATH = Path("/DD/SYS/ETHAWIN/EthaWin.cfg")

SCREEN_LINES = 24
MAX_OPTIONS = 8
PALETTE_SIZE = 8


class Key(enum.IntEnum):
    """Key codes delivered by the keyboard."""

    QUIT = 5
    LEFT = 8
    RIGHT = 9
    DOWN = 10
    UP = 12
    ENTER = 13
    CTRL_DOWN = 18
    CTRL_UP = 19
    SHIFT_DOWN = 26
    SHIFT_UP = 28
    SPACE = 32


class ColorSlot(enum.IntEnum):
    """Screen elements whose colour can be chosen in the .cfg file."""

    FORE = 0
    BACK = 1
    BORDER = 2
    HIGHLIGHTED = 3
    DESELECTED = 4
    MENUBAR_FORE = 5
    MENUBAR_BACK = 6
    TOPTEXT_FORE = 7
    TOPTEXT_BACK = 8
    POPUP_FORE = 9
    POPUP_BACK = 10
    POPUP_SHADOW = 11
    POPUP_BORDER = 12
    PULLDOWN_FORE = 13
    PULLDOWN_BACK = 14
    PULLDOWN_SHADOW = 15


DEFAULT_PALETTE = (0, 7, 56, 63, 0, 7, 56, 63)
DEFAULT_COLORS = (3, 0, 1, 3, 2, 0, 2, 0, 3, 3, 0, 2, 1, 0, 3, 1)

CONFIG_KEYWORDS = (
    "COLOR",
    "FOREGROUND",
    "BACKGROUND",
    "BORDER",
    "HIGHLIGHTED",
    "DESELECTED",
    "MENUBARFORE",
    "MENUBARBACK",
    "TOPTEXTFORE",
    "TOPTEXTBACK",
    "POPUPFORE",
    "POPUPBACK",
    "POPUPSHADOW",
    "POPUPBORDER",
    "PULLDOWNFORE",
    "PULLDOWNBACK",
    "PULLDOWNSHADOW",
    "USEMOUSE",
    "MOUSEPORT",
    "MOUSERES",
    "HOTKEYS",
)

_COLOR_SLOTS = {name: ColorSlot(i) for i, name in enumerate(CONFIG_KEYWORDS[1:17])}

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class Settings:
    """Palette, colour assignments and input options."""

    palette: list = field(default_factory=lambda: list(DEFAULT_PALETTE))
    colors: list = field(default_factory=lambda: list(DEFAULT_COLORS))
    hotkey: bool = False
    mouse_on: bool = True
    mouse_port: int = 1
    mouse_res: int = 1

    def apply(self, keyword: str, line: str, value: str) -> None:
        """Apply one matched keyword; ``line`` is the text naming it, ``value`` follows '='."""
        slot = _COLOR_SLOTS.get(keyword)
        if slot is not None:
            self.colors[slot] = _atoi(value)
        elif keyword == "COLOR":
            index = _atoi(line[len("COLOR"):])
            if 0 <= index < PALETTE_SIZE:
                self.palette[index] = _atoi(value)
        elif keyword == "USEMOUSE":
            self.mouse_on = not value.startswith("N")
        elif keyword == "MOUSEPORT":
            self.mouse_port = 0 if value.startswith("L") else 1
        elif keyword == "MOUSERES":
            self.mouse_res = 0 if value.startswith("L") else 1
        elif keyword == "HOTKEYS":
            self.hotkey = value.startswith("Y")
        else:
            raise ValueError(f"unknown configuration keyword: {keyword!r}")


def split_config_line(line: str) -> Optional[Tuple[str, str]]:
    """Split a .cfg line into its upper-cased keyword text and its value.

    Returns None for lines without '=', remarks ('*' before '=') and blank keywords.
    """
    line = line.rstrip("\r\n")
    if "=" not in line:
        return None
    head, _, value = line.partition("=")
    if "*" in head:
        return None
    head = head.lstrip(" ")
    if not head:
        return None
    return head.upper(), value


def _match_keyword(text: str) -> Optional[str]:
    return next((word for word in CONFIG_KEYWORDS if text.startswith(word)), None)


def parse_config(lines: Iterable[str]) -> Settings:
    """Build settings from the lines of a .cfg file, starting from the defaults."""
    settings = Settings()
    for raw in lines:
        parts = split_config_line(raw)
        if parts is None:
            continue
        text, value = parts
        keyword = _match_keyword(text)
        if keyword is not None:
            settings.apply(keyword, text, value)
    return settings


def load_config(path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> Settings:
    """Read a .cfg file; the defaults are used when it cannot be opened."""
    try:
        with open(path, encoding="latin-1") as handle:
            return parse_config(handle)
    except OSError:
        return Settings()