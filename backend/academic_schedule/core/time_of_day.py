# backend/academic_schedule/core/time_of_day.py
"""
Time-of-day value type.

Lesson times are kept as minutes since midnight so comparisons and
arithmetic never depend on string formatting. Text only appears at the
boundaries (request parsing, responses, error messages).
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
import re

MINUTES_PER_DAY = 24 * 60

_HHMM_PATTERN = re.compile(r"([01]?\d|2[0-3]):([0-5]\d)")
_STRICT_HHMM_PATTERN = re.compile(r"([01]\d|2[0-3]):([0-5]\d)")
END_OF_DAY_TEXT = "24:00"


class InvalidTimeFormatError(ValueError):
    """Raised when a string is not a valid HH:mm time."""


@total_ordering
@dataclass(frozen=True)
class TimeOfDay:
    """
    A wall-clock time with minute resolution.

    ``minutes`` ranges over 0..1440. The upper bound is only reachable as
    the computed end of the last lesson of a day and renders as "24:00".
    """

    minutes: int

    def __post_init__(self) -> None:
        if isinstance(self.minutes, bool) or not isinstance(self.minutes, int):
            raise TypeError(f"minutes must be an int, got {type(self.minutes).__name__}")
        if not 0 <= self.minutes <= MINUTES_PER_DAY:
            raise ValueError(f"minutes out of range: {self.minutes}")

    @classmethod
    def parse(
        cls, value: str, *, strict: bool = False, allow_end_of_day: bool = False
    ) -> "TimeOfDay":
        """
        Parse a 24h clock time.

        Accepts ``H:mm`` or ``HH:mm`` with surrounding whitespace ignored.
        ``strict`` requires exactly ``HH:mm``. ``allow_end_of_day`` also
        accepts "24:00", the end of a lesson finishing at midnight.
        """
        if not isinstance(value, str):
            raise InvalidTimeFormatError(f"Expected an HH:mm string, got {value!r}")
        text = value if strict else value.strip()
        if allow_end_of_day and text == END_OF_DAY_TEXT:
            return cls(MINUTES_PER_DAY)
        pattern = _STRICT_HHMM_PATTERN if strict else _HHMM_PATTERN
        match = pattern.fullmatch(text)
        if not match:
            raise InvalidTimeFormatError(f"Invalid time {value!r}, expected HH:mm")
        return cls(int(match.group(1)) * 60 + int(match.group(2)))

    @classmethod
    def of(cls, hour: int, minute: int = 0) -> "TimeOfDay":
        return cls(hour * 60 + minute)

    @property
    def hour(self) -> int:
        return self.minutes // 60

    @property
    def minute(self) -> int:
        return self.minutes % 60

    def plus_minutes(self, delta: int) -> "TimeOfDay":
        """Advance by ``delta`` minutes; raises ValueError past 24:00."""
        return TimeOfDay(self.minutes + delta)

    def minutes_until(self, other: "TimeOfDay") -> int:
        return other.minutes - self.minutes

    def isoformat(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"

    def __str__(self) -> str:
        return self.isoformat()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self.minutes < other.minutes


def format_window(start: TimeOfDay, end: TimeOfDay) -> str:
    return f"{start}-{end}"
