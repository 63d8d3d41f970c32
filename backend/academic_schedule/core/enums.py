# backend/academic_schedule/core/enums.py
"""
Core enums for the academic schedule service.

Values are stored as-is in the database and returned verbatim by the API.
"""

from enum import Enum


class RoleName(str, Enum):
    """
    Roles a user can hold.

    Users and their roles are owned by the identity collaborator; this
    service only reads them to make authorization decisions.
    """

    PROFESSOR = "PROFESSOR"
    COORDINATOR = "COORDINATOR"
    ADMIN = "ADMIN"
    DIRECTOR = "DIRECTOR"


class DayOfWeek(str, Enum):
    """Teaching days. Sunday is never a teaching day."""

    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"

    @property
    def ordinal(self) -> int:
        return _DAY_ORDER[self]


_DAY_ORDER = {day: index for index, day in enumerate(DayOfWeek)}


class AvailabilityStatus(str, Enum):
    AVAILABLE = "AVAILABLE"
    UNAVAILABLE = "UNAVAILABLE"


class PeriodStatus(str, Enum):
    """Lifecycle of a teaching period."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    CLOSED = "CLOSED"


class Shift(str, Enum):
    """Teaching shifts, in the order their slots are listed."""

    MORNING = "MORNING"
    AFTERNOON = "AFTERNOON"
    EVENING = "EVENING"
