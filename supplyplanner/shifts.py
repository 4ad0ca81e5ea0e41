"""Work shifts, their values, and helpers for laying them out on a weekly grid."""

from __future__ import annotations

import random as _random
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "Day",
    "Shift",
    "STANDARD_SHIFTS",
    "STANDARD_HOURS",
    "LOW_WEIGHT",
    "HIGH_WEIGHT",
    "hour_to_string",
    "assign_subcolumns",
    "total_profit",
    "total_length",
    "randomize_values",
]

# Hours an employee may work in the standard scenario.
STANDARD_HOURS = 30

# Range of per-hour values used when randomizing shifts.
LOW_WEIGHT = 0
HIGH_WEIGHT = 99 // 8


class Day(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True, order=True)
class Shift:
    """A shift on one day, running from ``start_hour`` to ``end_hour``, worth ``value``.

    Shifts order by day, then start hour, then end hour, then value.
    """

    day: Day
    start_hour: int
    end_hour: int
    value: int = 0

    def __post_init__(self) -> None:
        if self.start_hour > self.end_hour:
            raise ValueError("Shift ends before it starts?")
        object.__setattr__(self, "day", Day(self.day))

    def overlaps_with(self, other: Shift) -> bool:
        """Tell whether the two shifts share any time on the same day."""
        return self.day == other.day and (
            self.start_hour <= other.start_hour < self.end_hour
            or other.start_hour <= self.start_hour < other.end_hour
        )

    def length(self) -> int:
        """Return the number of hours the shift lasts."""
        return self.end_hour - self.start_hour

    def __str__(self) -> str:
        return (
            f"{{ {self.day}, {self.start_hour:02d}:00 - {self.end_hour:02d}:00,"
            f" value ${self.value} }}"
        )


def _standard_shifts() -> tuple[Shift, ...]:
    weekday_slots = ((8, 12), (12, 16), (16, 20), (8, 16), (12, 20))
    weekend_slots = ((8, 14), (12, 18))
    shifts: list[Shift] = []
    for day in Day:
        slots = weekend_slots if day in (Day.SUNDAY, Day.SATURDAY) else weekday_slots
        shifts.extend(Shift(day, start, end, 0) for start, end in slots)
    return tuple(sorted(shifts))


STANDARD_SHIFTS: tuple[Shift, ...] = _standard_shifts()


def hour_to_string(hour: int) -> str:
    """Return a human-readable form of an hour of the day, such as ``3PM``."""
    hour %= 24
    if hour == 0:
        return "12AM"
    if hour < 12:
        return f"{hour}AM"
    if hour == 12:
        return "12PM"
    return f"{hour - 12}PM"


def assign_subcolumns(shifts: Iterable[Shift]) -> dict[Shift, int]:
    """Place each shift in the first subcolumn where it fits, in sorted order.

    Overlapping shifts never share a subcolumn, and the number of subcolumns
    used is minimal for shifts on a single day.
    """
    assignment: dict[Shift, int] = {}
    bottoms: list[int] = []
    for shift in sorted(set(shifts)):
        for index, bottom in enumerate(bottoms):
            if bottom <= shift.start_hour:
                bottoms[index] = shift.end_hour
                assignment[shift] = index
                break
        else:
            assignment[shift] = len(bottoms)
            bottoms.append(shift.end_hour)
    return assignment


def total_profit(shifts: Iterable[Shift]) -> int:
    """Return the combined value of the shifts."""
    return sum(shift.value for shift in shifts)


def total_length(shifts: Iterable[Shift]) -> int:
    """Return the combined number of hours of the shifts."""
    return sum(shift.length() for shift in shifts)


def randomize_values(
    shifts: Iterable[Shift],
    rng: _random.Random | None = None,
    low: int = LOW_WEIGHT,
    high: int = HIGH_WEIGHT,
) -> set[Shift]:
    """Return copies of the shifts valued at a random per-hour rate in ``[low, high]``."""
    source = rng if rng is not None else _random
    return {
        Shift(
            shift.day,
            shift.start_hour,
            shift.end_hour,
            source.randint(low, high) * shift.length(),
        )
        for shift in sorted(set(shifts))
    }