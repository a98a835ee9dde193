"""An employee schedule maker built on the windowing interface."""

from __future__ import annotations

import sys
import time
from typing import List, Optional

from ethawin.config import Key
from ethawin.dialogs import line_input, yes_no
from ethawin.menuloop import Desktop
from ethawin.menus import UNDERLINE_OFF, UNDERLINE_ON, Menu, MenuBar, MenuOption
from ethawin.screen import Screen, session
from ethawin.labor.schedule import (
    DAYS,
    NAME_LENGTH,
    SLOTS,
    SLOT_MINUTES,
    Employee,
    Schedule,
    default_employees,
    int_to_time,
    time_to_int,
)

FILE_MENU = 0
EDIT_MENU = 1
DAY_MENU = 2
QUIT_OPTION = 5
EDIT_ADD, EDIT_DELETE, EDIT_EDIT, EDIT_SYSTEM = range(4)

DAYX = 13
DAYY = 3
DAYW = 10
NAMEX = 0
NAME_FIELD = NAME_LENGTH + 1
GRIDX = 11
GRIDY = 6
START_OF_DAY = 7 * 60
HEADER = " 7.. 8.. 9..10..11..12..13..14..15..16..17..18..19..20..21..22..23.."

ITEMS = ("Employee :", "Min/Week :", "Max/Week :", "Min/Shift:", "Max/Shift:")

USAGE = (
    "\nLabor V0.00\n"
    "Syntax: Labor [-opts]\n"
    "Usage : EthaWin employee schedule maker.\n"
    "Opts  : -? = display this message.\n"
    "        -s = use existing screen.\n"
)


def _u(before: str, letter: str, after: str) -> str:
    return before + UNDERLINE_ON + letter + UNDERLINE_OFF + after


def build_menu_bar() -> MenuBar:
    """The File, Edit and Day menus."""
    file_entries = [
        (_u("", "N", "ew"), "N"),
        (_u("", "O", "pen"), "O"),
        (_u("", "S", "ave"), "S"),
        (_u("Save ", "A", "s..."), "A"),
        (_u("", "P", "rint"), "P"),
        (_u("", "Q", "uit"), "Q"),
    ]
    disabled = {0, 2, 3, 4}
    return MenuBar([
        Menu(_u("", "F", "ile"), "F", [
            MenuOption(text, key, disabled=index in disabled)
            for index, (text, key) in enumerate(file_entries)
        ]),
        Menu(_u("", "E", "dit"), "E", [
            MenuOption(_u("", "A", "dd"), "A"),
            MenuOption(_u("", "D", "elete"), "D"),
            MenuOption(_u("", "E", "dit"), "E"),
            MenuOption(_u("", "S", "ystem"), "S"),
        ]),
        Menu(_u("", "D", "ay"), "D", [
            MenuOption(_u("", "S", "unday"), "S"),
            MenuOption(_u("", "M", "onday"), "M"),
            MenuOption(_u("", "T", "uesday"), "T"),
            MenuOption(_u("", "W", "ednesday"), "W"),
            MenuOption(_u("T", "h", "ursday"), "H"),
            MenuOption(_u("", "F", "riday"), "F"),
            MenuOption(_u("S", "a", "turday"), "A"),
        ]),
    ])


def about(screen: Screen) -> None:
    screen.popup("ABOUT", 20, 6, 40, 13)
    screen.print_at(2, 1, "Labor V0.00")
    screen.print_at(6, 2, "Employee Schedule Maker.")
    screen.print_at(3, 9, "Press Any Key or Click Button...")
    screen.wait()
    screen.end_window()


def help_screen(screen: Screen) -> None:
    screen.popup("HELP", 20, 6, 40, 13)
    screen.print_at(5, 5, "Sorry, no help available...")
    screen.wait()
    screen.end_window()


def _input_time(screen: Screen, x: int, y: int, current: int) -> int:
    text = line_input(screen, x, y, "", 5)
    if not text:
        return current
    value = time_to_int(text)
    screen.print_at(x, y, int_to_time(value))
    return value


def _input_yes_no(screen: Screen, x: int, y: int, current: bool) -> bool:
    answer = line_input(screen, x, y, "", 1)
    if not answer:
        return current
    value = answer == "Y"
    screen.print_at(x, y, "Yes" if value else "No ")
    return value


def _yes(flag: bool) -> str:
    return "Yes" if flag else "No"


def edit_employee(screen: Screen, employee: Employee) -> None:
    """Show an employee's record and let the user change each field in turn."""
    screen.popup("Edit Employee", 10, 5, 60, 12)
    screen.print_at(20, 1, "Day  In-Avail-Out  Set?  Open? Close?")
    for row, label in enumerate(ITEMS):
        screen.print_at(1, row + 2, label)
    screen.print_at(11, 2, employee.name)
    limits = (employee.min_week, employee.max_week, employee.min_shift, employee.max_shift)
    for row, value in enumerate(limits):
        screen.print_at(11, row + 3, int_to_time(value))
    for day, label in enumerate(DAYS):
        y = day + 2
        screen.print_at(20, y, label)
        screen.print_at(25, y, int_to_time(employee.avail_in[day]))
        screen.print_at(32, y, int_to_time(employee.avail_out[day]))
        screen.print_at(40, y, _yes(employee.set_days[day]))
        screen.print_at(46, y, _yes(employee.can_open[day]))
        screen.print_at(52, y, _yes(employee.can_close[day]))
    name = line_input(screen, 11, 2, "", NAME_LENGTH)
    if name:
        employee.name = name[:NAME_LENGTH]
    employee.min_week = _input_time(screen, 11, 3, employee.min_week)
    employee.max_week = _input_time(screen, 11, 4, employee.max_week)
    employee.min_shift = _input_time(screen, 11, 5, employee.min_shift)
    employee.max_shift = _input_time(screen, 11, 6, employee.max_shift)
    for day in range(len(DAYS)):
        y = day + 2
        employee.avail_in[day] = _input_time(screen, 25, y, employee.avail_in[day])
        employee.avail_out[day] = _input_time(screen, 32, y, employee.avail_out[day])
        employee.set_days[day] = _input_yes_no(screen, 40, y, employee.set_days[day])
        employee.can_open[day] = _input_yes_no(screen, 46, y, employee.can_open[day])
        employee.can_close[day] = _input_yes_no(screen, 52, y, employee.can_close[day])
    screen.end_window()


def _leading_digits(text: str) -> int:
    digits = ""
    for ch in text.strip():
        if not ch.isdigit():
            break
        digits += ch
    return int(digits) if digits else 0


def edit_system(screen: Screen, schedule: Schedule) -> None:
    """Ask how many employees should be on duty at any time."""
    screen.popup("Edit System", 10, 5, 60, 5)
    answer = line_input(screen, 1, 1, "Minimum Employees Desired On-Duty at a time? ", 2)
    if answer:
        schedule.min_warning = _leading_digits(answer)
    screen.end_window()


def get_hours(screen: Screen, employee: Employee, day: int) -> None:
    """Enter the time in and time out of one employee on one day."""
    screen.popup("Enter Schedule", 30, 10, 20, 6)
    screen.print_at(1, 1, "Time In  :")
    screen.print_at(12, 1, int_to_time(employee.time_in[day]))
    screen.print_at(1, 2, "Time Out :")
    screen.print_at(12, 2, int_to_time(employee.time_out[day]))
    employee.time_in[day] = _input_time(screen, 12, 1, employee.time_in[day])
    employee.time_out[day] = _input_time(screen, 12, 2, employee.time_out[day])
    screen.end_window()


def show_graph(screen: Screen, schedule: Schedule, day: int, start: int) -> List[int]:
    """Draw who is on duty in each quarter hour, with a count row; returns the counts."""
    counts = schedule.coverage(day, start)
    bottom = GRIDY + len(schedule.employees)
    for slot in range(SLOTS):
        x = GRIDX + slot
        moment = start + slot * SLOT_MINUTES
        for row, employee in enumerate(schedule.employees):
            on = employee.time_in[day] <= moment < employee.time_out[day]
            screen.print_at(x, GRIDY + row, "X" if on else ".")
        mark = chr(ord("0") + counts[slot])
        if counts[slot] < schedule.min_warning:
            with screen.reverse():
                screen.print_at(x, bottom, mark)
        else:
            screen.print_at(x, bottom, mark)
    return counts


def _draw_flags(screen: Screen, schedule: Schedule, day: int, selected: int) -> None:
    for row in range(len(schedule.employees)):
        screen.print_at(NAMEX, GRIDY + row, schedule.shift_flag(row, day, selected))
        mark = schedule.week_flag(row)
        if mark:
            screen.print_at(NAMEX + NAME_FIELD + 1, GRIDY + row, mark)


def _draw_names(screen: Screen, schedule: Schedule, selected: int) -> None:
    for row, employee in enumerate(schedule.employees):
        screen.print_at(NAMEX + 1, GRIDY + row, " " * NAME_FIELD)
        if row == selected:
            with screen.reverse():
                screen.print_at(NAMEX + 1, GRIDY + row, employee.name)
        else:
            screen.print_at(NAMEX + 1, GRIDY + row, employee.name)


def _draw_days(screen: Screen, day: int) -> None:
    for index, label in enumerate(DAYS):
        if index == day:
            with screen.reverse():
                screen.print_at(DAYX + index * DAYW, DAYY, label)
        else:
            screen.print_at(DAYX + index * DAYW, DAYY, label)


def _edit(screen: Screen, schedule: Schedule, option: int, selected: int) -> int:
    """Carry out an Edit menu option; returns the new selected row."""
    if option == EDIT_ADD:
        if schedule.full:
            screen.popup("ALERT", 30, 8, 20, 5)
            screen.print_at(1, 1, "No more room...")
            screen.wait()
            screen.end_window()
            return selected
        employee = Employee("")
        edit_employee(screen, employee)
        schedule.add(employee)
    elif option == EDIT_DELETE:
        if len(schedule.employees) < 2 or not yes_no(screen, "DELETE"):
            return selected
        schedule.delete(selected)
        remaining = len(schedule.employees)
        for row in (GRIDY + remaining, GRIDY + remaining + 1):
            screen.move(NAMEX, row)
            screen.erase_line()
        selected = max(selected - 1, 0)
    elif option == EDIT_EDIT:
        edit_employee(screen, schedule.employees[selected])
    elif option == EDIT_SYSTEM:
        edit_system(screen, schedule)
    return selected


def run(screen: Screen) -> Schedule:
    """Edit the week's schedule until Quit is confirmed; returns the schedule."""
    bar = build_menu_bar()
    screen.clear()
    screen.top_text("", "", "")
    screen.menu_bar(bar)
    screen.top_text("", "Labor V0.00", "")
    about(screen)
    schedule = Schedule(default_employees())
    screen.print_at(GRIDX, GRIDY - 1, HEADER)
    desktop = Desktop(screen, bar, about, help_screen)
    day = selected = 0
    dirty = True
    drawn = None
    while True:
        if dirty:
            show_graph(screen, schedule, day, START_OF_DAY)
            _draw_flags(screen, schedule, day, selected)
            dirty = False
            drawn = None
        state = (day, selected, len(schedule.employees))
        if state != drawn:
            _draw_days(screen, day)
            _draw_names(screen, schedule, selected)
            drawn = state
        event = desktop.check_menu()
        if event.selected:
            if event.menu == FILE_MENU and event.option == QUIT_OPTION:
                if yes_no(screen, "QUIT LABOR"):
                    return schedule
            elif event.menu == EDIT_MENU:
                selected = _edit(screen, schedule, event.option, selected)
                dirty = True
            elif event.menu == DAY_MENU:
                day = event.option
                dirty = True
            continue
        key = event.key
        if key is None:
            if event.x is None:
                time.sleep(0.01)
            continue
        count = len(schedule.employees)
        if key == Key.LEFT:
            day = (day - 1) % len(DAYS)
            dirty = True
        elif key == Key.RIGHT:
            day = (day + 1) % len(DAYS)
            dirty = True
        elif key == Key.UP:
            selected = (selected - 1) % count
        elif key == Key.DOWN:
            selected = (selected + 1) % count
        elif key == Key.ENTER:
            get_hours(screen, schedule.employees[selected], day)
            dirty = True


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if any(arg[:2] == "-?" for arg in args):
        sys.stderr.write(USAGE)
        return 0
    with session() as screen:
        run(screen)
    return 0


if __name__ == "__main__":
    sys.exit(main())