import os
import sys

import pytest

from ethawin.config import Key
from ethawin.screen import Event, HeadlessTerminal, Screen
from ethawin.towel.actions import (
    DEVICES,
    DIRECTORY_MENU,
    DISK_MENU,
    FILE_MENU,
    USER_MENU,
    FileEntry,
    backup_command,
    copy_command,
    drive_path,
    io_box,
    move_command,
    process,
    rename_command,
    run_command,
    simple_command,
    user_command,
)
from ethawin.towel.config import TowelConfig, parse_towel_config

PY = f'"{sys.executable}" -c'


class ScriptedTerminal:
    """Feeds events; None stands for 'nothing waiting'."""

    def __init__(self, events):
        self.events = list(events)
        self.frames = []

    def read_event(self):
        if not self.events:
            raise EOFError("no more events")
        item = self.events.pop(0)
        if item is None or isinstance(item, Event):
            return item
        return Event(key=int(item))

    def show(self, rows):
        self.frames.append(list(rows))


def make_screen(*events):
    terminal = ScriptedTerminal(events)
    return Screen(terminal=terminal), terminal


def typed(text):
    return [Event(key=ord(ch)) for ch in text]


def seen(terminal, text):
    return any(text in row for frame in terminal.frames for row in frame)


def echo_config(**names):
    config = TowelConfig()
    for name in names.get("keys", ()):
        config.commands[name] = "echo "
    return config


def test_copy_command_pinned():
    assert copy_command(TowelConfig(), "a.txt", "/D1") == "copy a.txt /D1/a.txt"


def test_rename_command_pinned():
    assert rename_command(TowelConfig(), "old", "new") == "rename old new"


def test_move_and_backup_commands():
    config = TowelConfig()
    cmd = move_command(config, "f", "/D0")
    assert cmd.startswith(config.commands["MOVE"])
    assert cmd.split()[-2:] == ["f", "/D0"]
    cmd = backup_command(config, "/D0", "/D1")
    assert cmd.startswith(config.commands["BACKUP"])
    assert cmd.split()[-2:] == ["/D0", "/D1"]


def test_simple_command_and_unknown_key():
    config = TowelConfig()
    assert simple_command(config, "DELETE", "x") == config.commands["DELETE"] + "x"
    with pytest.raises(KeyError):
        simple_command(config, "NOPE", "x")


def test_user_command_dollar_and_plain():
    config = parse_towel_config(["USER1=$ident", "USER2=free"])
    assert user_command(config, 0, "f") == "ident f"
    assert user_command(config, 1, "f") == config.commands["USER2"]
    with pytest.raises(ValueError):
        user_command(config, 8, "f")
    with pytest.raises(ValueError):
        user_command(config, 0)


def test_io_box_restores_screen():
    screen = Screen(terminal=HeadlessTerminal())
    before = screen.row_text(3)
    with io_box(screen):
        assert "Shell Monitor" in screen.row_text(3)
    assert screen.row_text(3) == before


def test_run_command_success_shows_output():
    screen, terminal = make_screen(None)
    with io_box(screen):
        aborted = run_command(screen, f"{PY} \"print('hello there')\"")
    assert aborted is False
    assert seen(terminal, "hello there")


def test_run_command_error_confirmed_abort():
    screen, terminal = make_screen(None, Event(key=Key.LEFT), Event(key=Key.ENTER))
    aborted = run_command(screen, f'{PY} "import sys; sys.exit(3)"')
    assert aborted is True
    assert seen(terminal, "Err #003 Abort!")


def test_run_command_error_declined():
    screen, _ = make_screen(None, Event(key=Key.ENTER))
    assert run_command(screen, f'{PY} "import sys; sys.exit(3)"') is False


def test_run_command_keyboard_abort():
    screen, terminal = make_screen(Event(key=Key.QUIT), Event(key=Key.LEFT),
                                   Event(key=Key.ENTER))
    assert run_command(screen, f'{PY} "pass"') is True
    assert seen(terminal, "Keyboard Abort!")


def test_drive_path_keys():
    screen = Screen(terminal=HeadlessTerminal([Key.RIGHT, Key.ENTER]))
    assert drive_path(screen, "COPY TO") == DEVICES[1]


def test_drive_path_wraps_to_quit_and_aborts():
    screen = Screen(terminal=HeadlessTerminal([Key.LEFT, Key.ENTER]))
    assert drive_path(screen, "COPY TO") is None
    screen = Screen(terminal=HeadlessTerminal([Key.QUIT]))
    assert drive_path(screen, "COPY TO") is None


def test_drive_path_typed_path():
    screen = Screen(terminal=HeadlessTerminal([Key.ENTER, "abc", Key.ENTER]))
    assert drive_path(screen, "CHDIR") == "abc"


def test_drive_path_mouse_click():
    # popup inner area starts at column 6, row 6
    screen = Screen(terminal=HeadlessTerminal([Event(click=1, x=6 + 16, y=6 + 3)]))
    assert drive_path(screen, "MOVE TO") == DEVICES[1]


def test_process_file_menu_needs_marked_files():
    screen, terminal = make_screen(Event(key=Key.ENTER))
    assert process(screen, TowelConfig(), FILE_MENU, 0, [FileEntry("a")]) is False
    assert seen(terminal, "No Files Marked!")


def test_process_copy_aborted_drive_runs_nothing():
    screen, terminal = make_screen(Event(key=Key.QUIT))
    result = process(screen, TowelConfig(), FILE_MENU, 0, [FileEntry("a", True)])
    assert result is False
    assert not seen(terminal, "Shell Monitor")


def test_process_copy_runs_for_flagged():
    config = echo_config(keys=["COPY"])
    screen, terminal = make_screen(Event(key=Key.RIGHT), Event(key=Key.ENTER), None)
    files = [FileEntry("a", True), FileEntry("b")]
    assert process(screen, config, FILE_MENU, 0, files) is False
    assert seen(terminal, "echo a /DD/a")
    assert not seen(terminal, "echo b")


def test_process_delete_rereads():
    config = echo_config(keys=["DELETE"])
    screen, terminal = make_screen(Event(key=Key.LEFT), Event(key=Key.ENTER), None)
    files = [FileEntry("a", True), FileEntry("b")]
    assert process(screen, config, FILE_MENU, 1, files) is True
    assert seen(terminal, "echo a")
    assert not seen(terminal, "echo b")


def test_process_info_waits():
    config = echo_config(keys=["FILEINFO"])
    screen, terminal = make_screen(None, Event(key=Key.ENTER))
    assert process(screen, config, FILE_MENU, 2, [FileEntry("a", True)]) is False
    assert seen(terminal, "echo a")
    assert terminal.events == []


def test_process_disk_info():
    config = echo_config(keys=["DISKINFO"])
    screen, terminal = make_screen(Event(key=Key.RIGHT), Event(key=Key.ENTER), None,
                                   Event(key=Key.ENTER))
    assert process(screen, config, DISK_MENU, 4, []) is False
    assert terminal.events == []


def test_process_change_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "sub").mkdir()
    screen, _ = make_screen(Event(key=Key.ENTER), *typed("sub"), Event(key=Key.ENTER))
    assert process(screen, TowelConfig(), DIRECTORY_MENU, 0, []) is True
    assert os.path.samefile(os.getcwd(), tmp_path / "sub")


def test_process_make_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = TowelConfig()
    config.commands["MAKEDIR"] = "mkdir "
    screen, _ = make_screen(*typed("newdir"), Event(key=Key.ENTER), None)
    assert process(screen, config, DIRECTORY_MENU, 2, []) is True
    assert (tmp_path / "newdir").is_dir()


def test_process_user_dollar_command():
    config = TowelConfig()
    config.commands["USER1"] = "$echo "
    screen, terminal = make_screen(None, Event(key=Key.ENTER))
    files = [FileEntry("x", True), FileEntry("y")]
    assert process(screen, config, USER_MENU, 0, files) is True
    assert seen(terminal, "echo x")
    assert not seen(terminal, "echo y")


def test_process_unknown_menu():
    screen, terminal = make_screen()
    assert process(screen, TowelConfig(), 9, 0, [FileEntry("a", True)]) is False
    assert terminal.frames == []