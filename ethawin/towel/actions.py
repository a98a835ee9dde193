"""The disk utility's menu actions: building shell commands and running them."""

from __future__ import annotations

import os
import subprocess
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from ethawin.config import Key
from ethawin.dialogs import line_input, yes_no
from ethawin.screen import Screen
from ethawin.towel.config import USER_SLOTS, TowelConfig

FILE_MENU = 0
DISK_MENU = 1
DIRECTORY_MENU = 2
USER_MENU = 3

DEVICES = ("PATH", "/DD", "/D0", "/D1", "/D2", "/H0", "/H1", "/R0", "QUIT")

_IO_LINES = 17
_IO_WIDTH = 77


@dataclass
class FileEntry:
    """A directory entry and whether the user has tagged it."""

    name: str
    flagged: bool = False


def copy_command(config: TowelConfig, name: str, dest: str) -> str:
    return f"{config.commands['COPY']}{name} {dest}/{name}"


def move_command(config: TowelConfig, name: str, dest: str) -> str:
    return f"{config.commands['MOVE']}{name} {dest}"


def rename_command(config: TowelConfig, old: str, new: str) -> str:
    return f"{config.commands['RENAME']}{old} {new}"


def simple_command(config: TowelConfig, key: str, arg: str) -> str:
    """The command configured under ``key`` followed by one argument."""
    if key not in config.commands:
        raise KeyError(f"no command named {key!r}")
    return config.commands[key] + arg


def backup_command(config: TowelConfig, source: str, dest: str) -> str:
    return f"{config.commands['BACKUP']}{source} {dest}"


def user_command(config: TowelConfig, slot: int, name: Optional[str] = None) -> str:
    """User command ``slot`` (0-7); a leading '$' means it takes a file name."""
    if not 0 <= slot < USER_SLOTS:
        raise ValueError(f"user slot must be 0..{USER_SLOTS - 1}")
    command = config.commands[f"USER{slot + 1}"]
    if command.startswith("$"):
        if name is None:
            raise ValueError("this user command needs a file name")
        return command[1:] + name
    return command


@contextmanager
def io_box(screen: Screen) -> Iterator[Screen]:
    """Open the shell monitor window for command output while the block runs."""
    screen.popup("Shell Monitor", 0, 3, 79, 19)
    try:
        yield screen
    finally:
        screen.end_window()


def _emit(screen: Screen, text: str) -> None:
    for line in text.splitlines():
        if screen.cursor_y >= _IO_LINES:
            screen.move(0, 0)
            screen.delete_line()
            screen.move(0, _IO_LINES - 1)
        screen.move(0, screen.cursor_y)
        screen.write(line[:_IO_WIDTH])
        screen.move(0, screen.cursor_y + 1)


def _pause(screen: Screen):
    event = screen.poll()
    if event is None:
        time.sleep(0.01)
    return event


def run_command(screen: Screen, cmd: str) -> bool:
    """Run a shell command, showing its output; True if the user chose to abort."""
    result = subprocess.run(
        cmd,
        shell=True,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        errors="replace",
    )
    if result.stdout:
        _emit(screen, result.stdout)
    while True:
        event = screen.poll()
        if event is None:
            break
        if event.key == Key.QUIT and yes_no(screen, "Keyboard Abort!"):
            return True
    if result.returncode == 0:
        return False
    return yes_no(screen, f"Err #{result.returncode:03d} Abort!")


def drive_path(screen: Screen, title: str) -> Optional[str]:
    """Let the user pick a drive or type a path; None if aborted or left empty."""
    screen.popup(title, 5, 5, 69, 7)
    screen.print_at(23, 1, "Select Drive or Path:")
    for index, name in enumerate(DEVICES):
        screen.print_at(11 + index * 5, 3, name)
    last = len(DEVICES) - 1
    selected = 0
    drawn: Optional[int] = None
    aborted = False
    while True:
        if selected != drawn:
            if drawn is not None:
                screen.print_at(11 + drawn * 5, 3, DEVICES[drawn])
            with screen.reverse():
                screen.print_at(11 + selected * 5, 3, DEVICES[selected])
            drawn = selected
        event = _pause(screen)
        if event is None:
            continue
        if screen.settings.mouse_on and event.x is not None and event.y is not None:
            if event.y == 3 and 10 < event.x < 55:
                selected = (event.x - 11) // 5
            if event.click > 0:
                aborted = selected == last
                break
        if event.key == Key.LEFT:
            selected = (selected - 1) % len(DEVICES)
        elif event.key == Key.RIGHT:
            selected = (selected + 1) % len(DEVICES)
        elif event.key == Key.ENTER:
            aborted = selected == last
            break
        elif event.key == Key.QUIT:
            aborted = True
            break
    result: Optional[str] = None
    if not aborted:
        if selected == 0:
            screen.move(0, 3)
            screen.erase_line()
            result = line_input(screen, 1, 3, "> ", 60) or None
        else:
            result = DEVICES[selected]
    screen.end_window()
    return result


def _run_each(screen: Screen, commands: Sequence[str], show: bool = True,
              wait_each: bool = False) -> int:
    """Run commands in turn until one is aborted; returns how many completed."""
    completed = 0
    for cmd in commands:
        if show:
            _emit(screen, cmd)
        if run_command(screen, cmd):
            break
        completed += 1
        if wait_each:
            screen.wait()
    return completed


def _file_menu(screen: Screen, config: TowelConfig, option: int,
               names: List[str]) -> bool:
    if not names:
        screen.popup("ERROR", 27, 9, 26, 5)
        screen.print_at(4, 1, "No Files Marked!")
        screen.wait()
        screen.end_window()
        return False
    reread = False
    if option == 0:
        dest = drive_path(screen, "COPY TO")
        if dest:
            with io_box(screen):
                _run_each(screen, [copy_command(config, n, dest) for n in names])
    elif option == 1:
        if yes_no(screen, "DELETE FILES"):
            with io_box(screen):
                done = _run_each(screen, [simple_command(config, "DELETE", n) for n in names])
            reread = done > 0
    elif option == 2:
        with io_box(screen):
            _run_each(screen, [simple_command(config, "FILEINFO", n) for n in names])
            screen.wait()
    elif option == 3:
        with io_box(screen):
            _run_each(screen, [simple_command(config, "LIST", n) for n in names],
                      wait_each=True)
    elif option == 4:
        dest = drive_path(screen, "MOVE TO")
        if dest:
            with io_box(screen):
                done = _run_each(screen, [move_command(config, n, dest) for n in names])
            reread = done > 0
    elif option == 5:
        if yes_no(screen, "RENAME FILES"):
            with io_box(screen):
                screen.print_at(27, 1, "Press [ENTER] to Abort")
                for name in names:
                    screen.print_at(1, 3, "Old Name: ")
                    screen.erase_to_end()
                    screen.write(name)
                    new = line_input(screen, 1, 5, "New Name: ", 29)
                    if new:
                        if run_command(screen, rename_command(config, name, new)):
                            break
                        reread = True
    return reread


def _disk_menu(screen: Screen, config: TowelConfig, option: int) -> bool:
    reread = False
    if option == 0:
        source = drive_path(screen, "BACKUP SOURCE")
        if source:
            dest = drive_path(screen, "DESTINATION")
            if dest:
                with io_box(screen):
                    run_command(screen, backup_command(config, source, dest))
    elif option == 1:
        dest = drive_path(screen, "COBBLE TO")
        if dest:
            cmd = simple_command(config, "COBBLER", dest)
            if yes_no(screen, "COBBLER"):
                with io_box(screen):
                    reread = not run_command(screen, cmd)
    elif option == 2:
        dest = drive_path(screen, "DCHECK")
        if dest:
            cmd = simple_command(config, "DCHECK", dest)
            if yes_no(screen, "DCHECK"):
                with io_box(screen):
                    if not run_command(screen, cmd):
                        screen.wait()
    elif option == 3:
        dest = drive_path(screen, "FORMAT")
        if dest:
            cmd = simple_command(config, "FORMAT", dest)
            if yes_no(screen, "FORMAT"):
                with io_box(screen):
                    reread = not run_command(screen, cmd)
    elif option == 4:
        dest = drive_path(screen, "DISK INFO")
        if dest:
            cmd = simple_command(config, "DISKINFO", dest)
            with io_box(screen):
                if not run_command(screen, cmd):
                    screen.wait()
    return reread


def _directory_menu(screen: Screen, config: TowelConfig, option: int,
                    names: List[str]) -> bool:
    reread = False
    if option == 0:
        path = drive_path(screen, "CHDIR")
        if path:
            try:
                os.chdir(path)
            except OSError:
                pass
            reread = True
    elif option == 1:
        if yes_no(screen, "DELDIR"):
            with io_box(screen):
                done = _run_each(screen, [simple_command(config, "DELDIR", n) for n in names])
            reread = done > 0
    elif option == 2:
        with io_box(screen):
            screen.print_at(27, 1, "Press [ENTER] to Abort")
            name = line_input(screen, 1, 4, "Make Directory: ", 30)
            if name:
                reread = True
                run_command(screen, simple_command(config, "MAKEDIR", name))
    return reread


def _user_menu(screen: Screen, config: TowelConfig, option: int,
               names: List[str]) -> bool:
    template = user_command(config, option) if not config.commands.get(
        f"USER{option + 1}", "").startswith("$") else None
    with io_box(screen):
        if template is None:
            for name in names:
                cmd = user_command(config, option, name)
                _emit(screen, cmd)
                run_command(screen, cmd)
        else:
            _emit(screen, template)
            run_command(screen, template)
        screen.wait()
    return True


def process(screen: Screen, config: TowelConfig, menu: int, option: int,
            files: Sequence[FileEntry]) -> bool:
    """Carry out a menu choice on the tagged files; True if the directory must be re-read."""
    names = [entry.name for entry in files if entry.flagged]
    if menu == FILE_MENU:
        return _file_menu(screen, config, option, names)
    if menu == DISK_MENU:
        return _disk_menu(screen, config, option)
    if menu == DIRECTORY_MENU:
        return _directory_menu(screen, config, option, names)
    if menu == USER_MENU:
        return _user_menu(screen, config, option, names)
    return False