# backend/academic_schedule/models/availability.py
"""
Professor availability model.

One row is a weekly window (day of week + start/end) that a professor
declares for a teaching period. Windows are aligned to the configured
lesson slots and never overlap for the same professor, period and day.

Classes:
    ProfessorAvailability: A declared availability window
"""

import logging

from sqlalchemy import CheckConstraint, Column, Enum, ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.orm import relationship

from ..core.enums import AvailabilityStatus, DayOfWeek
from ..core.ulid_helper import generate_ulid
from ..database import Base
from .types import TimeOfDayType, TimestampMixin

logger = logging.getLogger(__name__)


class ProfessorAvailability(TimestampMixin, Base):
    """Weekly availability window of a professor within a teaching period"""

    __tablename__ = "professor_availabilities"

    id = Column(String(26), primary_key=True, default=generate_ulid)
    professor_id = Column(String(26), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    period_id = Column(
        String(26), ForeignKey("teaching_periods.id", ondelete="CASCADE"), nullable=False
    )
    day_of_week = Column(
        Enum(DayOfWeek, name="day_of_week", native_enum=False, length=16), nullable=False
    )
    start_time = Column(TimeOfDayType(), nullable=False)
    end_time = Column(TimeOfDayType(), nullable=False)
    status = Column(
        Enum(AvailabilityStatus, name="availability_status", native_enum=False, length=16),
        nullable=False,
        default=AvailabilityStatus.AVAILABLE,
    )

    # Relationships
    professor = relationship("User", back_populates="availabilities")
    period = relationship("TeachingPeriod", back_populates="availabilities")

    # Constraints
    __table_args__ = (
        CheckConstraint("end_time > start_time", name="check_availability_time_order"),
        UniqueConstraint(
            "professor_id",
            "period_id",
            "day_of_week",
            "start_time",
            name="unique_professor_period_day_start",
        ),
        Index("idx_availability_professor_period_day", "professor_id", "period_id", "day_of_week"),
        Index("idx_availability_period", "period_id"),
    )

    def __repr__(self) -> str:
        return f"<ProfessorAvailability {self.day_of_week} {self.start_time}-{self.end_time}>"
