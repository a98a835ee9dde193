from ethawin.config import Key
from ethawin.labeler import about, build_menu_bar, help_screen, main, run
from ethawin.menus import plain_text
from ethawin.screen import HeadlessTerminal, Screen


def _screen(events):
    return Screen(terminal=HeadlessTerminal(events))


def test_menu_bar_layout():
    bar = build_menu_bar()
    assert [plain_text(m.name) for m in bar.menus] == ["File", "Misc"]
    assert "".join(o.hotkey for o in bar.menus[0].options) == "OSAQ"
    assert "".join(o.hotkey for o in bar.menus[1].options) == "ABCD"
    assert not any(o.disabled for m in bar.menus for o in m.options)


def test_run_returns_first_choice():
    screen = _screen([" ", 128 + ord("M"), Key.ENTER])
    event = run(screen)
    assert (event.menu, event.option) == (1, 0)


def test_plain_keys_are_ignored():
    screen = _screen([" ", ord("x"), 128 + ord("F"), ord("Q"), Key.ENTER])
    event = run(screen)
    assert (event.menu, event.option) == (0, 3)
    assert screen.terminal.events == []


def test_top_text_shows_title():
    screen = _screen([" ", 128 + ord("F"), Key.ENTER])
    run(screen)
    top = screen.row_text(0)
    assert "Labeler V0.00" in top
    assert top.startswith("  Don't")
    assert top.rstrip().endswith("Panic!")


def test_alt_a_shows_about_again():
    screen = _screen([" ", 128 + ord("A"), " ", 128 + ord("F"), Key.ENTER])
    event = run(screen)
    assert event.option == 0
    shown = [f for f in screen.terminal.frames
             if any("Press Any Key or Click Button..." in row for row in f)]
    assert len(shown) >= 2


def test_about_closes_window():
    screen = _screen([" "])
    before = screen.row_text(10)
    about(screen)
    assert screen.row_text(10) == before


def test_help_shows_title():
    screen = _screen([" "])
    help_screen(screen)
    assert any("HELP!" in row for row in screen.terminal.frames[-1])


def test_usage(capsys):
    assert main(["-?"]) == 0
    assert "Syntax: Labeler [-opts]" in capsys.readouterr().err