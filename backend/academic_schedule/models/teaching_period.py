# backend/academic_schedule/models/teaching_period.py
"""Teaching period (academic term) model, owned by the period collaborator."""

from sqlalchemy import Column, Date, Enum, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from ..core.enums import PeriodStatus
from ..core.ulid_helper import generate_ulid
from ..database import Base
from .types import TimestampMixin


class TeachingPeriod(TimestampMixin, Base):
    """An academic term such as 2025/1"""

    __tablename__ = "teaching_periods"

    id = Column(String(26), primary_key=True, default=generate_ulid)
    year = Column(Integer, nullable=False)
    semester = Column(Integer, nullable=False)
    status = Column(
        Enum(PeriodStatus, name="period_status", native_enum=False, length=16),
        nullable=False,
        default=PeriodStatus.INACTIVE,
    )
    starts_on = Column(Date, nullable=True)
    ends_on = Column(Date, nullable=True)

    availabilities = relationship(
        "ProfessorAvailability", back_populates="period", passive_deletes=True
    )

    __table_args__ = (UniqueConstraint("year", "semester", name="unique_period_year_semester"),)

    @property
    def label(self) -> str:
        return f"{self.year}/{self.semester}"

    @property
    def is_active(self) -> bool:
        return self.status == PeriodStatus.ACTIVE

    def __repr__(self) -> str:
        return f"<TeachingPeriod {self.label} ({self.status})>"
