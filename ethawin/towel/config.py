"""Commands and options of the disk utility, read from its Towel.cfg file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Optional, Sequence, Union

from ethawin.config import split_config_line

COMMAND_NAMES = (
    "COPY",
    "DELETE",
    "FILEINFO",
    "RENAME",
    "BACKUP",
    "COBBLER",
    "DCHECK",
    "FORMAT",
    "DISKINFO",
    "DELDIR",
    "MAKEDIR",
    "USER1",
    "USER2",
    "USER3",
    "USER4",
    "USER5",
    "USER6",
    "USER7",
    "USER8",
    "LIST",
    "MOVE",
)

DEFAULT_COMMANDS = (
    "copy",
    "del",
    "ident",
    "rename",
    "backup",
    "cobbler",
    "dcheck",
    "format",
    "free",
    "deldir",
    "makdir",
    "dir",
    "dir",
    "dir",
    "dir",
    "dir",
    "dir",
    "dir",
    "dir",
    "list",
    "move",
)

KEYWORDS = COMMAND_NAMES + ("SORTDIR", "SHOWHIDDEN")

USER_SLOTS = 8
MAX_COMMAND_LENGTH = 20

DEFAULT_PATHS = (Path("/DD/SYS/ETHAWIN/Towel.cfg"), Path("Towel.cfg"))


def _default_commands() -> Dict[str, str]:
    return {name: command + " " for name, command in zip(COMMAND_NAMES, DEFAULT_COMMANDS)}


@dataclass
class TowelConfig:
    """Shell command prefixes for each action, each ending in a space."""

    commands: Dict[str, str] = field(default_factory=_default_commands)
    sort_dir: bool = False
    show_hidden: bool = False


def _match_keyword(text: str) -> Optional[str]:
    return next((word for word in KEYWORDS if text.startswith(word)), None)


def parse_towel_config(lines: Iterable[str]) -> TowelConfig:
    """Build the configuration from .cfg lines, starting from the default commands."""
    config = TowelConfig()
    for raw in lines:
        parts = split_config_line(raw)
        if parts is None:
            continue
        text, value = parts
        keyword = _match_keyword(text)
        if keyword is None:
            continue
        if keyword in config.commands:
            config.commands[keyword] = value[:MAX_COMMAND_LENGTH] + " "
        elif keyword == "SORTDIR":
            if value.startswith("Y"):
                config.sort_dir = True
        elif keyword == "SHOWHIDDEN":
            if value.startswith("Y"):
                config.show_hidden = True
    return config


def load_towel_config(
    paths: Sequence[Union[str, Path]] = DEFAULT_PATHS,
) -> TowelConfig:
    """Read the first of ``paths`` that can be opened; defaults if none can."""
    for path in paths:
        try:
            with open(path, encoding="latin-1") as handle:
                return parse_towel_config(handle)
        except OSError:
            continue
    return TowelConfig()