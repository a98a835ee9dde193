import pytest

from ethawin.config import (
    DEFAULT_COLORS,
    DEFAULT_PALETTE,
    ColorSlot,
    Settings,
    load_config,
    parse_config,
    split_config_line,
)


def test_defaults_match_documented_values():
    settings = Settings()
    assert settings.palette == list(DEFAULT_PALETTE)
    assert settings.colors == list(DEFAULT_COLORS)
    assert settings.hotkey is False
    assert settings.mouse_on is True
    assert settings.mouse_port == 1
    assert settings.mouse_res == 1


def test_split_uppercases_keyword_and_skips_leading_spaces():
    assert split_config_line("  hotkeys=Yes\n") == ("HOTKEYS", "Yes")


@pytest.mark.parametrize("line", ["no equals here", "* COLOR1=5", "   =3", "x*y=1"])
def test_split_rejects_remarks_and_bad_lines(line):
    assert split_config_line(line) is None


def test_color_sets_palette_entry():
    settings = parse_config(["COLOR3=7\n"])
    assert settings.palette[3] == 7
    assert settings.palette[:3] == list(DEFAULT_PALETTE[:3])


def test_color_out_of_range_ignored():
    settings = parse_config(["COLOR9=5"])
    assert settings.palette == list(DEFAULT_PALETTE)


def test_color_slot_keywords():
    settings = parse_config(["FOREGROUND=2", "pulldownshadow = 1"])
    assert settings.colors[ColorSlot.FORE] == 2
    assert settings.colors[ColorSlot.PULLDOWN_SHADOW] == 1


def test_mouse_and_hotkey_options():
    settings = parse_config(["USEMOUSE=NO", " mouseport=LEFT", "MOUSERES=LOW", "HOTKEYS=YES"])
    assert settings.mouse_on is False
    assert settings.mouse_port == 0
    assert settings.mouse_res == 0
    assert settings.hotkey is True


def test_value_is_case_sensitive():
    settings = parse_config(["usemouse=no", "hotkeys=yes"])
    assert settings.mouse_on is True
    assert settings.hotkey is False


def test_remark_lines_change_nothing():
    assert parse_config(["*HOTKEYS=YES", "USEMOUSE"]) == Settings()


def test_apply_rejects_unknown_keyword():
    with pytest.raises(ValueError):
        Settings().apply("BOGUS", "BOGUS", "1")


def test_load_missing_file_gives_defaults(tmp_path):
    assert load_config(tmp_path / "missing.cfg") == Settings()


def test_load_reads_file(tmp_path):
    path = tmp_path / "EthaWin.cfg"
    path.write_text("* sample\nHOTKEYS=YES\nBORDER=2\n", encoding="latin-1")
    settings = load_config(path)
    assert settings.hotkey is True
    assert settings.colors[ColorSlot.BORDER] == 2