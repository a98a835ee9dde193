from ethawin.towel.config import (
    COMMAND_NAMES,
    MAX_COMMAND_LENGTH,
    TowelConfig,
    load_towel_config,
    parse_towel_config,
)


def test_defaults_have_trailing_space():
    config = TowelConfig()
    assert config.commands["COPY"] == "copy "
    assert config.commands["MAKEDIR"] == "makdir "
    assert set(config.commands) == set(COMMAND_NAMES)
    assert all(cmd.endswith(" ") for cmd in config.commands.values())
    assert config.sort_dir is False
    assert config.show_hidden is False


def test_command_is_replaced_with_space_added():
    config = parse_towel_config(["COPY=mycopy\n"])
    assert config.commands["COPY"] == "mycopy" + " "
    assert config.commands["DELETE"] == TowelConfig().commands["DELETE"]


def test_keyword_is_case_insensitive_and_leading_spaces_allowed():
    config = parse_towel_config(["   delete=zap"])
    assert config.commands["DELETE"] == "zap "


def test_remark_and_lines_without_equals_are_ignored():
    config = parse_towel_config(["* COPY=bad", "COPY nothing here", "LIST"])
    assert config.commands == TowelConfig().commands


def test_value_is_truncated():
    config = parse_towel_config(["MOVE=" + "m" * 40])
    assert config.commands["MOVE"] == "m" * MAX_COMMAND_LENGTH + " "


def test_user_slots():
    config = parse_towel_config(["USER1=$ident", "USER8=free"])
    assert config.commands["USER1"] == "$ident "
    assert config.commands["USER8"] == "free "
    assert config.commands["USER2"] == TowelConfig().commands["USER2"]


def test_sortdir_and_showhidden_need_upper_case_y():
    assert parse_towel_config(["SORTDIR=Y"]).sort_dir is True
    assert parse_towel_config(["SORTDIR=y"]).sort_dir is False
    assert parse_towel_config(["SHOWHIDDEN=Yes"]).show_hidden is True
    assert parse_towel_config(["SHOWHIDDEN=N"]).show_hidden is False


def test_load_uses_first_existing_file(tmp_path):
    first = tmp_path / "first.cfg"
    second = tmp_path / "second.cfg"
    first.write_text("COPY=one\n")
    second.write_text("COPY=two\n")
    config = load_towel_config([tmp_path / "missing.cfg", first, second])
    assert config.commands["COPY"] == "one "


def test_load_falls_back_to_defaults(tmp_path):
    config = load_towel_config([tmp_path / "nope.cfg"])
    assert config == TowelConfig()