# backend/academic_schedule/schemas/availability.py
"""
Professor availability schemas.

Times are "HH:mm" strings on the wire and are parsed by the service.
"""

import datetime
from typing import Optional

from pydantic import Field

from ..core.enums import AvailabilityStatus, DayOfWeek
from ._strict_base import StrictRequestModel
from .base import StandardizedModel, TimeText


class AvailabilityCreate(StrictRequestModel):
    """
    Schema for declaring an availability window.

    ``professor_id`` may be omitted by professors, who always declare
    their own availability.
    """

    professor_id: Optional[str] = Field(None, max_length=26)
    period_id: str = Field(..., max_length=26)
    day_of_week: DayOfWeek
    start_time: str = Field(..., examples=["07:30"])
    end_time: str = Field(..., examples=["09:10"])
    status: Optional[AvailabilityStatus] = None


class AvailabilityUpdate(StrictRequestModel):
    """
    Partial update; omitted fields keep their stored value.

    The owning professor and the teaching period cannot be changed.
    """

    day_of_week: Optional[DayOfWeek] = None
    start_time: Optional[str] = Field(None, examples=["13:30"])
    end_time: Optional[str] = Field(None, examples=["14:20"])
    status: Optional[AvailabilityStatus] = None


class AvailabilityResponse(StandardizedModel):
    id: str
    professor_id: str
    period_id: str
    day_of_week: DayOfWeek
    start_time: TimeText
    end_time: TimeText
    status: AvailabilityStatus
    created_at: Optional[datetime.datetime] = None
    updated_at: Optional[datetime.datetime] = None
