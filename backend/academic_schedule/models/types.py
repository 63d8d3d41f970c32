# backend/academic_schedule/models/types.py
"""
Custom SQLAlchemy types and mixins shared by the models.
"""

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Optional

from sqlalchemy import Column, DateTime, Integer, TypeDecorator
from sqlalchemy.sql import func

from ..core.time_of_day import TimeOfDay

if TYPE_CHECKING:
    from sqlalchemy.sql.type_api import TypeDecorator as _TypeDecorator

    TypeDecoratorProtocol = _TypeDecorator[Any]
else:
    TypeDecoratorProtocol = TypeDecorator


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TimeOfDayType(TypeDecoratorProtocol):
    """
    Stores a TimeOfDay as minutes since midnight.

    Integer storage keeps range comparisons correct in SQL on every backend,
    which string columns holding "HH:mm" cannot guarantee.
    """

    impl = Integer
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Any) -> Optional[int]:
        if value is None:
            return None
        if isinstance(value, TimeOfDay):
            return value.minutes
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            return TimeOfDay.parse(value).minutes
        raise TypeError(f"Cannot store {type(value).__name__} as a time of day")

    def process_result_value(self, value: Any, dialect: Any) -> Optional[TimeOfDay]:
        if value is None:
            return None
        return TimeOfDay(int(value))


class TimestampMixin:
    """Mixin class for automatic timestamp tracking."""

    created_at = Column(
        DateTime(timezone=True), nullable=False, default=utc_now, server_default=func.now()
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
        server_default=func.now(),
    )
