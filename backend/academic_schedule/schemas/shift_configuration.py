# backend/academic_schedule/schemas/shift_configuration.py
"""
Shift configuration schemas.

Start times travel as "HH:mm" strings. Requests keep them as plain strings
so malformed values reach the service and fail as INVALID_FORMAT rather
than as a generic request validation error.
"""

from typing import List, Optional

from pydantic import Field

from ..core.enums import Shift
from ..models.shift_configuration import ShiftConfiguration
from ..services.slot_computer import ShiftSlots, compute_all_slots
from ._strict_base import StrictRequestModel
from .base import StandardizedModel, TimeText


class ShiftConfigurationUpsert(StrictRequestModel):
    """
    Create or partially update the shift configuration.

    All fields are required when no configuration exists yet; afterwards
    only the supplied fields change.
    """

    lesson_duration_minutes: Optional[int] = Field(None, examples=[50])
    lessons_per_shift: Optional[int] = Field(None, examples=[4])
    morning_start: Optional[str] = Field(None, examples=["07:30"])
    afternoon_start: Optional[str] = Field(None, examples=["13:30"])
    evening_start: Optional[str] = Field(None, examples=["19:00"])


class SlotResponse(StandardizedModel):
    shift: Shift
    start: TimeText
    end: TimeText


class ShiftSlotsResponse(StandardizedModel):
    """One shift with its computed end and lessons."""

    shift: Shift
    start: TimeText
    end: TimeText
    lessons: List[SlotResponse]

    @classmethod
    def from_shift_slots(cls, shift_slots: ShiftSlots) -> "ShiftSlotsResponse":
        return cls(
            shift=shift_slots.shift,
            start=shift_slots.start,
            end=shift_slots.end,
            lessons=[SlotResponse.model_validate(slot) for slot in shift_slots.slots],
        )


class ShiftConfigurationResponse(StandardizedModel):
    """Stored configuration plus the shift ends and lessons it produces."""

    id: str
    lesson_duration_minutes: int
    lessons_per_shift: int
    morning_start: TimeText
    morning_end: TimeText
    afternoon_start: TimeText
    afternoon_end: TimeText
    evening_start: TimeText
    evening_end: TimeText
    shifts: List[ShiftSlotsResponse]

    @classmethod
    def from_configuration(cls, config: ShiftConfiguration) -> "ShiftConfigurationResponse":
        morning, afternoon, evening = compute_all_slots(config)
        return cls(
            id=config.id,
            lesson_duration_minutes=config.lesson_duration_minutes,
            lessons_per_shift=config.lessons_per_shift,
            morning_start=config.morning_start,
            morning_end=morning.end,
            afternoon_start=config.afternoon_start,
            afternoon_end=afternoon.end,
            evening_start=config.evening_start,
            evening_end=evening.end,
            shifts=[
                ShiftSlotsResponse.from_shift_slots(shift_slots)
                for shift_slots in (morning, afternoon, evening)
            ],
        )


class ValidSlotsResponse(StandardizedModel):
    """Every bookable slot for a period, grouped by shift and flattened."""

    period_id: str
    shifts: List[ShiftSlotsResponse]
    slots: List[SlotResponse]

    @classmethod
    def build(cls, period_id: str, all_slots: List[ShiftSlots]) -> "ValidSlotsResponse":
        return cls(
            period_id=period_id,
            shifts=[ShiftSlotsResponse.from_shift_slots(shift_slots) for shift_slots in all_slots],
            slots=[
                SlotResponse.model_validate(slot)
                for shift_slots in all_slots
                for slot in shift_slots.slots
            ],
        )
