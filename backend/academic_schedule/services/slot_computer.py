# backend/academic_schedule/services/slot_computer.py
"""
Slot computation.

Derives the bookable lesson slots of each shift from the shift
configuration. Everything here is a pure function of its arguments: the
configuration is always passed in, never loaded, so one request sees one
consistent set of slots.

Slots do not depend on the day of the week; the same three shifts apply
Monday through Saturday.
"""

from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence, Tuple

from ..core.enums import Shift
from ..core.exceptions import ConfigurationException
from ..core.time_of_day import MINUTES_PER_DAY, TimeOfDay, format_window


class SlotConfiguration(Protocol):
    """Anything that carries the shift configuration fields."""

    lesson_duration_minutes: int
    lessons_per_shift: int
    morning_start: TimeOfDay
    afternoon_start: TimeOfDay
    evening_start: TimeOfDay


@dataclass(frozen=True)
class ShiftSettings:
    """Detached configuration values, used to check a candidate before it is stored."""

    lesson_duration_minutes: int
    lessons_per_shift: int
    morning_start: TimeOfDay
    afternoon_start: TimeOfDay
    evening_start: TimeOfDay


@dataclass(frozen=True)
class Slot:
    shift: Shift
    start: TimeOfDay
    end: TimeOfDay

    def __str__(self) -> str:
        return format_window(self.start, self.end)


@dataclass(frozen=True)
class ShiftSlots:
    """The ordered, contiguous slots of one shift."""

    shift: Shift
    slots: Tuple[Slot, ...]

    @property
    def start(self) -> TimeOfDay:
        return self.slots[0].start

    @property
    def end(self) -> TimeOfDay:
        return self.slots[-1].end


_START_FIELDS = {
    Shift.MORNING: "morning_start",
    Shift.AFTERNOON: "afternoon_start",
    Shift.EVENING: "evening_start",
}


def shift_start(config: SlotConfiguration, shift: Shift) -> TimeOfDay:
    return getattr(config, _START_FIELDS[shift])


def compute_slots(config: SlotConfiguration, shift: Shift) -> ShiftSlots:
    """
    Compute the slots of one shift.

    Starting at the shift's start time, emits ``lessons_per_shift``
    consecutive windows of ``lesson_duration_minutes`` each.

    Raises:
        ConfigurationException: duration or lesson count is not positive,
            or the shift would run past 24:00
    """
    duration = config.lesson_duration_minutes
    count = config.lessons_per_shift
    if duration is None or duration <= 0:
        raise ConfigurationException(
            "Lesson duration must be a positive number of minutes",
            details={"lesson_duration_minutes": duration},
        )
    if count is None or count <= 0:
        raise ConfigurationException(
            "Lessons per shift must be a positive number",
            details={"lessons_per_shift": count},
        )

    start = shift_start(config, shift)
    if start is None:
        raise ConfigurationException(
            f"{shift.value} start time is not configured", details={"shift": shift.value}
        )

    shift_end_minutes = start.minutes + duration * count
    if shift_end_minutes > MINUTES_PER_DAY:
        raise ConfigurationException(
            f"{shift.value} shift starting at {start} with {count} lessons of "
            f"{duration} minutes would end after midnight",
            details={"shift": shift.value, "start": str(start)},
        )

    slots: List[Slot] = []
    cursor = start
    for _ in range(count):
        slot_end = cursor.plus_minutes(duration)
        slots.append(Slot(shift=shift, start=cursor, end=slot_end))
        cursor = slot_end
    return ShiftSlots(shift=shift, slots=tuple(slots))


def compute_all_slots(config: SlotConfiguration) -> List[ShiftSlots]:
    """Slots of every shift in MORNING, AFTERNOON, EVENING order."""
    return [compute_slots(config, shift) for shift in Shift]


def find_covering_run(
    shift_slots: ShiftSlots, start: TimeOfDay, end: TimeOfDay
) -> Optional[Tuple[Slot, ...]]:
    """
    Find the contiguous run of slots that exactly covers ``[start, end)``.

    The run must begin on a slot start and finish on a slot end of the same
    shift. Returns None when no such run exists.
    """
    slots = shift_slots.slots
    first = next((i for i, slot in enumerate(slots) if slot.start == start), None)
    if first is None:
        return None
    for last in range(first, len(slots)):
        if slots[last].end == end:
            return slots[first : last + 1]
        if slots[last].end > end:
            break
    return None


def find_covering_run_any_shift(
    all_slots: Sequence[ShiftSlots], start: TimeOfDay, end: TimeOfDay
) -> Optional[Tuple[Slot, ...]]:
    for shift_slots in all_slots:
        run = find_covering_run(shift_slots, start, end)
        if run is not None:
            return run
    return None


def describe_slot_boundaries(all_slots: Sequence[ShiftSlots]) -> str:
    """Render e.g. ``MORNING: 07:30-08:20, 08:20-09:10; AFTERNOON: ...``."""
    return "; ".join(
        f"{shift_slots.shift.value}: " + ", ".join(str(slot) for slot in shift_slots.slots)
        for shift_slots in all_slots
    )
