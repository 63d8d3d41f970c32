"""Tests for availability validation order and rules."""

from unittest.mock import MagicMock, call

import pytest

from academic_schedule.core.enums import DayOfWeek
from academic_schedule.core.exceptions import (
    ConfigurationException,
    InactivePeriodException,
    InvalidRangeException,
    NotFoundException,
    RoleMismatchException,
    ScheduleConflictException,
    SlotMisalignmentException,
)
from academic_schedule.core.time_of_day import TimeOfDay
from academic_schedule.models.availability import ProfessorAvailability
from academic_schedule.monitoring.prometheus_metrics import REGISTRY
from academic_schedule.repositories.availability_repository import AvailabilityRepository
from academic_schedule.services.academic_directory import SqlAcademicDirectory
from academic_schedule.services.availability_validator import (
    AvailabilityCandidate,
    AvailabilityValidator,
    windows_conflict,
)
from academic_schedule.services.slot_computer import ShiftSettings

TWO_LESSON_CONFIG = ShiftSettings(
    lesson_duration_minutes=50,
    lessons_per_shift=2,
    morning_start=TimeOfDay.parse("07:30"),
    afternoon_start=TimeOfDay.parse("13:30"),
    evening_start=TimeOfDay.parse("19:00"),
)


def t(text: str) -> TimeOfDay:
    return TimeOfDay.parse(text)


@pytest.fixture
def validator(db):
    return AvailabilityValidator(AvailabilityRepository(db), SqlAcademicDirectory(db))


@pytest.fixture
def candidate(professor, active_period):
    def _make(start, end, day=DayOfWeek.MONDAY, **overrides):
        fields = dict(
            professor_id=professor.id,
            period_id=active_period.id,
            day_of_week=day,
            start_time=t(start),
            end_time=t(end),
        )
        fields.update(overrides)
        return AvailabilityCandidate(**fields)

    return _make


def store(db, candidate):
    record = ProfessorAvailability(
        professor_id=candidate.professor_id,
        period_id=candidate.period_id,
        day_of_week=candidate.day_of_week,
        start_time=candidate.start_time,
        end_time=candidate.end_time,
    )
    db.add(record)
    db.commit()
    return record


class TestWindowsConflict:
    @pytest.mark.parametrize(
        "a,b",
        [
            (("08:00", "09:00"), ("07:30", "08:20")),  # starts inside
            (("07:00", "08:00"), ("07:30", "08:20")),  # ends inside
            (("07:30", "09:10"), ("08:20", "09:10")),  # contains
            (("07:30", "08:20"), ("07:30", "08:20")),  # identical
        ],
    )
    def test_overlaps_are_symmetric(self, a, b):
        assert windows_conflict(t(a[0]), t(a[1]), t(b[0]), t(b[1]))
        assert windows_conflict(t(b[0]), t(b[1]), t(a[0]), t(a[1]))

    def test_touching_windows_do_not_conflict(self):
        assert not windows_conflict(t("07:30"), t("08:20"), t("08:20"), t("09:10"))
        assert not windows_conflict(t("08:20"), t("09:10"), t("07:30"), t("08:20"))

    def test_disjoint_windows(self):
        assert not windows_conflict(t("07:30"), t("08:20"), t("13:30"), t("14:20"))


class TestValidate:
    def test_two_contiguous_slots_accepted(self, validator, candidate):
        validator.validate(candidate("07:30", "09:10"), TWO_LESSON_CONFIG)

    def test_mid_slot_start_rejected(self, validator, candidate):
        with pytest.raises(SlotMisalignmentException) as exc_info:
            validator.validate(candidate("07:45", "08:30"), TWO_LESSON_CONFIG)
        assert "MORNING: 07:30-08:20, 08:20-09:10" in exc_info.value.message

    def test_overlap_rejected_and_touching_accepted(self, db, validator, candidate):
        existing = store(db, candidate("07:30", "08:20"))

        with pytest.raises(ScheduleConflictException) as exc_info:
            validator.validate(candidate("07:30", "09:10"), TWO_LESSON_CONFIG)
        assert exc_info.value.details["conflicting_window"] == "07:30-08:20"
        assert exc_info.value.details["conflicting_id"] == existing.id

        validator.validate(candidate("08:20", "09:10"), TWO_LESSON_CONFIG)

    def test_unaligned_overlap_reports_misalignment_first(self, db, validator, candidate):
        store(db, candidate("07:30", "08:20"))
        with pytest.raises(SlotMisalignmentException):
            validator.validate(candidate("08:00", "09:00"), TWO_LESSON_CONFIG)

    def test_other_day_does_not_conflict(self, db, validator, candidate):
        store(db, candidate("07:30", "08:20"))
        validator.validate(candidate("07:30", "08:20", day=DayOfWeek.TUESDAY), TWO_LESSON_CONFIG)

    def test_excluded_record_ignored(self, db, validator, candidate):
        existing = store(db, candidate("07:30", "08:20"))
        validator.validate(
            candidate("07:30", "09:10"), TWO_LESSON_CONFIG, exclude_record_id=existing.id
        )

    def test_missing_configuration(self, validator, candidate):
        with pytest.raises(ConfigurationException):
            validator.validate(candidate("07:30", "08:20"), None)


class TestFailFastOrder:
    def test_range_checked_before_everything(self, validator, candidate):
        bad = candidate("09:10", "07:30", period_id="missing", professor_id="missing")
        with pytest.raises(InvalidRangeException):
            validator.validate(bad, None)

    def test_equal_start_and_end_is_invalid_range(self, validator, candidate):
        with pytest.raises(InvalidRangeException):
            validator.validate(candidate("07:30", "07:30"), TWO_LESSON_CONFIG)

    def test_unknown_period_before_professor(self, validator, candidate):
        with pytest.raises(NotFoundException) as exc_info:
            validator.validate(
                candidate("07:30", "08:20", period_id="missing", professor_id="missing"), None
            )
        assert "period" in exc_info.value.message.lower()

    def test_inactive_period(self, validator, candidate, closed_period):
        with pytest.raises(InactivePeriodException):
            validator.validate(
                candidate("07:30", "08:20", period_id=closed_period.id), TWO_LESSON_CONFIG
            )

    def test_unknown_professor(self, validator, candidate):
        with pytest.raises(NotFoundException) as exc_info:
            validator.validate(candidate("07:30", "08:20", professor_id="missing"), None)
        assert "professor" in exc_info.value.message.lower()

    def test_role_mismatch_before_configuration(self, validator, candidate, coordinator):
        with pytest.raises(RoleMismatchException):
            validator.validate(candidate("07:30", "08:20", professor_id=coordinator.id), None)

    def test_validation_reads_only(self, candidate, active_period, professor):
        repository = MagicMock()
        repository.get_windows_for_conflict_check.return_value = []
        directory = MagicMock()
        AvailabilityValidator(repository, directory).validate(
            candidate("07:30", "08:20"), TWO_LESSON_CONFIG
        )
        assert repository.method_calls == [
            call.get_windows_for_conflict_check(
                professor.id, active_period.id, DayOfWeek.MONDAY, exclude_id=None
            )
        ]


def test_failures_counted_by_code(validator, candidate):
    def current():
        value = REGISTRY.get_sample_value(
            "academic_schedule_availability_validation_failures_total",
            {"code": "SLOT_MISALIGNMENT"},
        )
        return value or 0.0

    before = current()
    with pytest.raises(SlotMisalignmentException):
        validator.validate(candidate("07:45", "08:30"), TWO_LESSON_CONFIG)
    assert current() == before + 1
