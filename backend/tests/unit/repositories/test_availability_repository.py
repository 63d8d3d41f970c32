"""Tests for AvailabilityRepository queries."""

import pytest
from sqlalchemy.exc import IntegrityError

from academic_schedule.core.enums import AvailabilityStatus, DayOfWeek
from academic_schedule.core.time_of_day import TimeOfDay
from academic_schedule.repositories.availability_repository import (
    AvailabilityFilter,
    AvailabilityRepository,
)


@pytest.fixture
def repository(db):
    return AvailabilityRepository(db)


@pytest.fixture
def add(db, repository, professor, active_period):
    def _add(day, start, end, status=AvailabilityStatus.AVAILABLE):
        record = repository.create(
            professor_id=professor.id,
            period_id=active_period.id,
            day_of_week=day,
            start_time=TimeOfDay.parse(start),
            end_time=TimeOfDay.parse(end),
            status=status,
        )
        db.commit()
        return record

    return _add


def test_days_sort_by_week_not_alphabet(repository, add):
    add(DayOfWeek.WEDNESDAY, "07:30", "08:20")
    add(DayOfWeek.FRIDAY, "07:30", "08:20")
    add(DayOfWeek.MONDAY, "07:30", "08:20")
    add(DayOfWeek.THURSDAY, "07:30", "08:20")

    days = [r.day_of_week for r in repository.list_filtered(AvailabilityFilter())]

    assert days == [DayOfWeek.MONDAY, DayOfWeek.WEDNESDAY, DayOfWeek.THURSDAY, DayOfWeek.FRIDAY]


def test_times_sort_numerically(repository, add):
    add(DayOfWeek.MONDAY, "10:00", "10:50")
    add(DayOfWeek.MONDAY, "09:10", "10:00")
    starts = [str(r.start_time) for r in repository.list_filtered(AvailabilityFilter())]
    assert starts == ["09:10", "10:00"]


def test_filter_by_status_and_count(repository, add):
    add(DayOfWeek.MONDAY, "07:30", "08:20")
    add(DayOfWeek.MONDAY, "13:30", "14:20", status=AvailabilityStatus.UNAVAILABLE)
    criteria = AvailabilityFilter(status=AvailabilityStatus.UNAVAILABLE)

    assert [str(r.start_time) for r in repository.list_filtered(criteria)] == ["13:30"]
    assert repository.count_filtered(criteria) == 1
    assert repository.count_filtered(AvailabilityFilter()) == 2


def test_conflict_candidates_exclude_record(repository, add, professor, active_period):
    first = add(DayOfWeek.MONDAY, "07:30", "08:20")
    add(DayOfWeek.MONDAY, "08:20", "09:10")
    add(DayOfWeek.TUESDAY, "07:30", "08:20")

    windows = repository.get_windows_for_conflict_check(
        professor.id, active_period.id, DayOfWeek.MONDAY, exclude_id=first.id
    )

    assert [str(w.start_time) for w in windows] == ["08:20"]


def test_same_start_rejected_by_database(db, add):
    add(DayOfWeek.MONDAY, "07:30", "08:20")
    with pytest.raises(IntegrityError):
        add(DayOfWeek.MONDAY, "07:30", "09:10")
    db.rollback()


def test_lock_is_noop_on_sqlite(repository, professor):
    assert repository.dialect_name == "sqlite"
    assert repository.lock_professor_scope(professor.id) is None
