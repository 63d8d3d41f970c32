# backend/academic_schedule/services/availability_validator.py
"""
Availability validation.

Checks a candidate availability window in a fixed order and stops at the
first failure:

1. end after start
2. teaching period exists and is active
3. owner exists and is a professor
4. window is exactly one slot, or a contiguous run of slots, of one shift
5. no overlap with the professor's other windows on that day and period

The validator reads but never writes.
"""

from dataclasses import dataclass
import logging
from typing import Optional

from ..core.enums import AvailabilityStatus, DayOfWeek
from ..core.exceptions import (
    ConfigurationException,
    DomainException,
    InvalidRangeException,
    ScheduleConflictException,
    SlotMisalignmentException,
)
from ..core.time_of_day import TimeOfDay, format_window
from ..monitoring.prometheus_metrics import prometheus_metrics
from ..repositories.availability_repository import AvailabilityRepository
from .academic_directory import AcademicDirectory
from .slot_computer import (
    SlotConfiguration,
    compute_all_slots,
    describe_slot_boundaries,
    find_covering_run_any_shift,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AvailabilityCandidate:
    """A window about to be created, or the merged result of an update."""

    professor_id: str
    period_id: str
    day_of_week: DayOfWeek
    start_time: TimeOfDay
    end_time: TimeOfDay
    status: AvailabilityStatus = AvailabilityStatus.AVAILABLE

    @property
    def window(self) -> str:
        return format_window(self.start_time, self.end_time)


def windows_conflict(
    a_start: TimeOfDay, a_end: TimeOfDay, b_start: TimeOfDay, b_end: TimeOfDay
) -> bool:
    """
    True when half-open windows ``[a_start, a_end)`` and ``[b_start, b_end)`` overlap.

    Covers the three shapes: a starts inside b, a ends inside b, a contains b.
    Windows that only touch (one ends where the other starts) do not conflict.
    """
    starts_inside = b_start <= a_start < b_end
    ends_inside = b_start < a_end <= b_end
    contains = a_start <= b_start and b_end <= a_end
    return starts_inside or ends_inside or contains


class AvailabilityValidator:
    def __init__(self, repository: AvailabilityRepository, directory: AcademicDirectory):
        self.repository = repository
        self.directory = directory

    def validate(
        self,
        candidate: AvailabilityCandidate,
        config: Optional[SlotConfiguration],
        exclude_record_id: Optional[str] = None,
    ) -> None:
        """
        Validate a candidate window against the given shift configuration.

        Args:
            candidate: Window to check
            config: Active shift configuration, None when none exists yet
            exclude_record_id: Existing record to ignore in the overlap check

        Raises:
            InvalidRangeException, NotFoundException, InactivePeriodException,
            RoleMismatchException, ConfigurationException,
            SlotMisalignmentException, ScheduleConflictException
        """
        try:
            self._check_range(candidate)
            self.directory.get_active_period(candidate.period_id)
            self.directory.get_professor(candidate.professor_id)
            self._check_alignment(candidate, config)
            self._check_conflicts(candidate, exclude_record_id)
        except DomainException as e:
            prometheus_metrics.record_validation_failure(e.code)
            raise

    @staticmethod
    def _check_range(candidate: AvailabilityCandidate) -> None:
        if candidate.end_time <= candidate.start_time:
            raise InvalidRangeException(str(candidate.start_time), str(candidate.end_time))

    @staticmethod
    def _check_alignment(
        candidate: AvailabilityCandidate, config: Optional[SlotConfiguration]
    ) -> None:
        if config is None:
            raise ConfigurationException(
                "Shift configuration has not been defined; availability cannot be validated"
            )
        all_slots = compute_all_slots(config)
        run = find_covering_run_any_shift(all_slots, candidate.start_time, candidate.end_time)
        if run is None:
            raise SlotMisalignmentException(candidate.window, describe_slot_boundaries(all_slots))

    def _check_conflicts(
        self, candidate: AvailabilityCandidate, exclude_record_id: Optional[str]
    ) -> None:
        existing_windows = self.repository.get_windows_for_conflict_check(
            candidate.professor_id,
            candidate.period_id,
            candidate.day_of_week,
            exclude_id=exclude_record_id,
        )
        for existing in existing_windows:
            if windows_conflict(
                candidate.start_time, candidate.end_time, existing.start_time, existing.end_time
            ):
                logger.info(
                    f"Availability {candidate.window} on {candidate.day_of_week.value} "
                    f"conflicts with {existing.id}"
                )
                raise ScheduleConflictException(
                    candidate.day_of_week.value,
                    candidate.window,
                    format_window(existing.start_time, existing.end_time),
                    conflicting_id=existing.id,
                )
