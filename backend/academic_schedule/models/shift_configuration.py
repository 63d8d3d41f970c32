# backend/academic_schedule/models/shift_configuration.py
"""
Institution-wide shift configuration.

A single row drives slot computation for every weekday. The ``scope``
column is pinned to ``"global"`` and unique, so the table can never hold
two competing configurations.
"""

from sqlalchemy import CheckConstraint, Column, Integer, String

from ..core.ulid_helper import generate_ulid
from ..database import Base
from .types import TimeOfDayType, TimestampMixin

GLOBAL_SCOPE = "global"


class ShiftConfiguration(TimestampMixin, Base):
    """Lesson duration, lessons per shift and the three shift start times."""

    __tablename__ = "shift_configurations"

    id = Column(String(26), primary_key=True, default=generate_ulid)
    scope = Column(String(16), nullable=False, unique=True, default=GLOBAL_SCOPE)
    lesson_duration_minutes = Column(Integer, nullable=False)
    lessons_per_shift = Column(Integer, nullable=False)
    morning_start = Column(TimeOfDayType(), nullable=False)
    afternoon_start = Column(TimeOfDayType(), nullable=False)
    evening_start = Column(TimeOfDayType(), nullable=False)

    __table_args__ = (
        CheckConstraint("lesson_duration_minutes > 0", name="check_lesson_duration_positive"),
        CheckConstraint("lessons_per_shift > 0", name="check_lessons_per_shift_positive"),
    )

    def __repr__(self) -> str:
        return (
            f"<ShiftConfiguration {self.lesson_duration_minutes}min x{self.lessons_per_shift} "
            f"{self.morning_start}/{self.afternoon_start}/{self.evening_start}>"
        )
