import pytest

from ethawin.config import Key
from ethawin.labor.app import (
    GRIDX,
    GRIDY,
    about,
    build_menu_bar,
    edit_employee,
    edit_system,
    get_hours,
    main,
    run,
    show_graph,
)
from ethawin.labor.schedule import (
    DEFAULT_NAMES,
    Employee,
    Schedule,
    default_employees,
    time_to_int,
)
from ethawin.menus import plain_text
from ethawin.screen import HeadlessTerminal, Screen

ENTER = int(Key.ENTER)
QUIT_SEQUENCE = [128 + ord("F"), "Q", ENTER, "Y", ENTER]


def make_screen(events):
    terminal = HeadlessTerminal(events)
    return Screen(terminal=terminal), terminal


def test_menu_bar_names():
    bar = build_menu_bar()
    assert [plain_text(m.name) for m in bar.menus] == ["File", "Edit", "Day"]


def test_file_menu_disabled_options():
    bar = build_menu_bar()
    disabled = [i for i, o in enumerate(bar.menus[0].options) if o.disabled]
    assert disabled == [0, 2, 3, 4]


def test_day_menu_hotkeys():
    day_menu = build_menu_bar().menus[2]
    assert len(day_menu.options) == 7
    assert day_menu.option_for_key("H") == 4
    assert day_menu.option_for_key("A") == 6


def test_about_restores_screen():
    screen, terminal = make_screen(["x"])
    about(screen)
    assert any("ABOUT" in row for frame in terminal.frames for row in frame)
    assert all("ABOUT" not in screen.row_text(y) for y in range(screen.height))


def test_get_hours_sets_times():
    screen, _ = make_screen(["9:00", ENTER, "17:30", ENTER])
    employee = Employee("Ann")
    get_hours(screen, employee, 2)
    assert employee.time_in[2] == time_to_int("9:00")
    assert employee.time_out[2] == time_to_int("17:30")
    assert employee.time_in[0] == 0


def test_get_hours_empty_keeps_times():
    screen, _ = make_screen([ENTER, ENTER])
    employee = Employee("Ann")
    employee.time_in[1], employee.time_out[1] = 480, 600
    get_hours(screen, employee, 1)
    assert (employee.time_in[1], employee.time_out[1]) == (480, 600)


def test_edit_system_sets_minimum():
    screen, _ = make_screen(["3", ENTER])
    schedule = Schedule(default_employees())
    edit_system(screen, schedule)
    assert schedule.min_warning == 3


def test_edit_system_empty_keeps_minimum():
    screen, _ = make_screen([ENTER])
    schedule = Schedule(default_employees())
    edit_system(screen, schedule)
    assert schedule.min_warning == 1


def test_edit_employee_changes_name_and_flag():
    events = ["Zed", ENTER] + [ENTER] * 4 + [ENTER, ENTER, ENTER, "N"] + [ENTER] * 31
    screen, _ = make_screen(events)
    employee = Employee("Ann")
    before = employee.min_week
    edit_employee(screen, employee)
    assert employee.name == "Zed"
    assert employee.min_week == before
    assert employee.can_open[0] is False
    assert employee.can_open[1] is True


def test_show_graph_draws_marks():
    screen, _ = make_screen([])
    schedule = Schedule(default_employees())
    e = schedule.employees[0]
    e.time_in[0], e.time_out[0] = 540, 600
    counts = show_graph(screen, schedule, 0, 7 * 60)
    first = (540 - 420) // 15
    assert screen.row_text(GRIDY)[GRIDX + first] == "X"
    assert screen.row_text(GRIDY)[GRIDX + first - 1] == "."
    count_row = screen.row_text(GRIDY + len(schedule.employees))
    assert count_row[GRIDX + first] == str(counts[first])


def test_run_quits_with_defaults():
    screen, _ = make_screen(["x"] + QUIT_SEQUENCE)
    schedule = run(screen)
    assert [e.name for e in schedule.employees] == list(DEFAULT_NAMES)


def test_run_enter_edits_hours():
    events = ["x", ENTER, "9:00", ENTER, "10:00", ENTER] + QUIT_SEQUENCE
    screen, _ = make_screen(events)
    schedule = run(screen)
    assert schedule.employees[0].time_in[0] == time_to_int("9:00")
    assert schedule.employees[0].time_out[0] == time_to_int("10:00")


def test_run_delete_employee():
    events = ["x", 128 + ord("E"), "D", ENTER, "Y", ENTER] + QUIT_SEQUENCE
    screen, _ = make_screen(events)
    schedule = run(screen)
    assert [e.name for e in schedule.employees] == list(DEFAULT_NAMES[1:])


def test_run_without_input_stops():
    screen, _ = make_screen(["x"])
    with pytest.raises(EOFError):
        run(screen)


def test_main_usage(capsys):
    assert main(["-?"]) == 0
    assert "Syntax: Labor" in capsys.readouterr().err