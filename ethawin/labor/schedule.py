"""Employee availability and weekly shift schedules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

DAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
DEFAULT_NAMES = ("Jeremy", "Allen", "Kirsten", "Scott", "Reyna")
NAME_LENGTH = 8
CAPACITY = 10
SLOTS = 68
SLOT_MINUTES = 15
MAX_COUNT = 10


def _week(value):
    return lambda: [value] * len(DAYS)


def _leading_int(text: str) -> int:
    """The integer at the start of ``text``, as atoi reads it; 0 if there is none."""
    text = text.lstrip(" \t\n\r\f\v")
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for ch in text:
        if not ch.isdigit():
            break
        digits += ch
    return sign * int(digits) if digits else 0


def int_to_time(minutes: int) -> str:
    """Format minutes past midnight as HH:MM; negative values give 00:00."""
    if minutes <= 0:
        return "00:00"
    hours, mins = divmod(minutes, 60)
    return chr(ord("0") + hours // 10) + chr(ord("0") + hours % 10) + f":{mins:02d}"


def time_to_int(text: str) -> int:
    """Parse "H:MM" (any non-digit separates hours and minutes) into minutes."""
    text = text[:6]
    delimiter: Optional[int] = next(
        (i for i, ch in enumerate(text) if not "0" <= ch <= "9"), None)
    if delimiter is None:
        if len(text) >= 6:
            raise ValueError(f"no hour/minute separator in {text!r}")
        delimiter = len(text)
    hour = _leading_int(text[:delimiter])
    minute = _leading_int(text[delimiter + 1:])
    return hour * 60 + minute


@dataclass
class Employee:
    """One employee's limits, weekly availability and scheduled hours."""

    name: str
    avail_in: List[int] = field(default_factory=_week(9 * 60 + 30))
    avail_out: List[int] = field(default_factory=_week(21 * 60 + 30))
    time_in: List[int] = field(default_factory=_week(0))
    time_out: List[int] = field(default_factory=_week(0))
    set_days: List[bool] = field(default_factory=_week(False))
    can_open: List[bool] = field(default_factory=_week(True))
    can_close: List[bool] = field(default_factory=_week(True))
    min_week: int = 20 * 60
    max_week: int = 40 * 60
    min_shift: int = 3 * 60
    max_shift: int = 9 * 60

    def __post_init__(self) -> None:
        self.name = self.name[:NAME_LENGTH]
        for week in (self.avail_in, self.avail_out, self.time_in, self.time_out,
                     self.set_days, self.can_open, self.can_close):
            if len(week) != len(DAYS):
                raise ValueError("a week needs one value per day")

    def shift_minutes(self, day: int) -> int:
        return self.time_out[day] - self.time_in[day]

    def week_minutes(self) -> int:
        return sum(self.shift_minutes(day) for day in range(len(DAYS)))


def default_employees() -> List[Employee]:
    return [Employee(name) for name in DEFAULT_NAMES]


@dataclass
class Schedule:
    """The staff list and the minimum number wanted on duty at once."""

    employees: List[Employee] = field(default_factory=list)
    min_warning: int = 1
    capacity: int = CAPACITY

    def __post_init__(self) -> None:
        self.employees = list(self.employees)
        if len(self.employees) > self.capacity:
            raise ValueError("more employees than the schedule has room for")

    @property
    def full(self) -> bool:
        return len(self.employees) >= self.capacity

    def add(self, employee: Employee) -> int:
        """Append an employee and return its index."""
        if self.full:
            raise ValueError("No more room...")
        self.employees.append(employee)
        return len(self.employees) - 1

    def delete(self, index: int) -> Employee:
        """Remove an employee; the last one cannot be removed."""
        if len(self.employees) < 2:
            raise ValueError("cannot delete the only employee")
        return self.employees.pop(index)

    def coverage(self, day: int, start: int) -> List[int]:
        """Employees on duty in each quarter-hour slot from ``start``, capped at 10."""
        counts = []
        for slot in range(SLOTS):
            moment = start + slot * SLOT_MINUTES
            on_duty = sum(1 for e in self.employees
                          if e.time_in[day] <= moment < e.time_out[day])
            counts.append(min(on_duty, MAX_COUNT))
        return counts

    def shift_flag(self, index: int, day: int, selected: int) -> str:
        """'+', '-' or ' ' for a shift, judged by the selected employee's shift limits."""
        shift = self.employees[index].shift_minutes(day)
        limits = self.employees[selected]
        if shift > limits.max_shift:
            return "+"
        if shift < limits.min_shift:
            return "-"
        return " "

    def week_flag(self, index: int) -> str:
        """'-' below the weekly minimum, '+' above the maximum, '' otherwise."""
        employee = self.employees[index]
        total = employee.week_minutes()
        if total < employee.min_week:
            return "-"
        if total > employee.max_week:
            return "+"
        return ""

    @classmethod
    def with_defaults(cls, employees: Optional[Iterable[Employee]] = None) -> "Schedule":
        return cls(list(employees) if employees is not None else default_employees())