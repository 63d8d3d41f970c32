# backend/academic_schedule/services/availability_service.py
"""
Availability Service

Handles professor availability windows:
- Create, update and delete with full validation
- Single lookups and filtered listings

Every write validates and persists in one transaction while holding the
professor's scope lock. Database constraints back the overlap rule, and a
constraint violation surfaces as a schedule conflict.
"""

from dataclasses import replace
import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.enums import AvailabilityStatus, DayOfWeek
from ..core.exceptions import (
    InvalidFormatException,
    NotFoundException,
    ScheduleConflictException,
    ValidationException,
)
from ..core.time_of_day import InvalidTimeFormatError, TimeOfDay
from ..models.availability import ProfessorAvailability
from ..repositories.availability_repository import AvailabilityFilter
from ..repositories.factory import RepositoryFactory
from .academic_directory import AcademicDirectory, SqlAcademicDirectory
from .authorization import Action, AuthorizationPolicy, CallerContext, authorization_policy
from .availability_validator import AvailabilityCandidate, AvailabilityValidator
from .base import BaseService

logger = logging.getLogger(__name__)

# Owner and teaching period are fixed once a window exists
UPDATABLE_FIELDS = ("day_of_week", "start_time", "end_time", "status")


def parse_time_field(field: str, value: Any, *, allow_end_of_day: bool = False) -> TimeOfDay:
    """
    Parse an HH:mm request value, reporting the offending field.

    End times may be "24:00" so a lesson finishing at midnight can be
    declared.
    """
    if isinstance(value, TimeOfDay):
        return value
    try:
        return TimeOfDay.parse(value, allow_end_of_day=allow_end_of_day)
    except InvalidTimeFormatError:
        raise InvalidFormatException(field, value) from None


class AvailabilityService(BaseService):
    """
    Service layer for professor availability.

    The active shift configuration is read once per write and handed to the
    validator, so a single operation never mixes two configurations.
    """

    def __init__(
        self,
        db: Session,
        directory: Optional[AcademicDirectory] = None,
        policy: Optional[AuthorizationPolicy] = None,
    ):
        super().__init__(db)
        self.repository = RepositoryFactory.create_availability_repository(db)
        self.config_repository = RepositoryFactory.create_shift_configuration_repository(db)
        self.directory = directory or SqlAcademicDirectory(db)
        self.policy = policy or authorization_policy
        self.validator = AvailabilityValidator(self.repository, self.directory)

    @BaseService.measure_operation("create_availability")
    def create_availability(
        self, data: Dict[str, Any], caller: CallerContext
    ) -> ProfessorAvailability:
        """
        Create an availability window.

        Args:
            data: professor_id, period_id, day_of_week, start_time, end_time
                and optionally status. Times are HH:mm strings.
            caller: Requesting user; professors always create for themselves

        Returns:
            The stored window

        Raises:
            PermissionDeniedException: Caller may not create for this professor
            InvalidFormatException: A time is not HH:mm
            Any error raised by AvailabilityValidator.validate
        """
        professor_id = self.policy.resolve_professor_id(caller, data.get("professor_id"))
        if not professor_id:
            raise ValidationException(
                "professor_id is required",
                code="MISSING_PROFESSOR",
                details={"field": "professor_id"},
            )
        self.policy.require(caller, Action.CREATE_AVAILABILITY, professor_id)

        candidate = AvailabilityCandidate(
            professor_id=professor_id,
            period_id=data["period_id"],
            day_of_week=DayOfWeek(data["day_of_week"]),
            start_time=parse_time_field("start_time", data["start_time"]),
            end_time=parse_time_field("end_time", data["end_time"], allow_end_of_day=True),
            status=AvailabilityStatus(data.get("status") or AvailabilityStatus.AVAILABLE),
        )

        with self.transaction():
            self.repository.lock_professor_scope(candidate.professor_id)
            config = self.config_repository.get_active()
            self.validator.validate(candidate, config)
            try:
                record = self.repository.create(
                    professor_id=candidate.professor_id,
                    period_id=candidate.period_id,
                    day_of_week=candidate.day_of_week,
                    start_time=candidate.start_time,
                    end_time=candidate.end_time,
                    status=candidate.status,
                )
            except IntegrityError:
                raise self._conflict_from_constraint(candidate) from None

        self.log_operation(
            "create_availability",
            availability_id=record.id,
            professor_id=record.professor_id,
            period_id=record.period_id,
        )
        return record

    @BaseService.measure_operation("update_availability")
    def update_availability(
        self, record_id: str, changes: Dict[str, Any], caller: CallerContext
    ) -> ProfessorAvailability:
        """
        Update supplied fields of a window and re-validate the result.

        The merged window goes through the full validation again, ignoring
        the record itself in the overlap check. The professor and the
        teaching period of a window cannot change.

        Raises:
            NotFoundException: Unknown window
            PermissionDeniedException: Caller may not edit this professor's windows
        """
        supplied = {
            field: value
            for field, value in changes.items()
            if field in UPDATABLE_FIELDS and value is not None
        }

        with self.transaction():
            # Row lock so a concurrent update cannot commit between read and merge
            record = self._get_record(record_id, for_update=True)
            self.policy.require(caller, Action.UPDATE_AVAILABILITY, record.professor_id)
            self.repository.lock_professor_scope(record.professor_id)

            candidate = AvailabilityCandidate(
                professor_id=record.professor_id,
                period_id=record.period_id,
                day_of_week=DayOfWeek(supplied.get("day_of_week", record.day_of_week)),
                start_time=parse_time_field(
                    "start_time", supplied.get("start_time", record.start_time)
                ),
                end_time=parse_time_field(
                    "end_time", supplied.get("end_time", record.end_time), allow_end_of_day=True
                ),
                status=AvailabilityStatus(supplied.get("status", record.status)),
            )
            config = self.config_repository.get_active()
            self.validator.validate(candidate, config, exclude_record_id=record.id)
            try:
                record = self.repository.update(
                    record,
                    day_of_week=candidate.day_of_week,
                    start_time=candidate.start_time,
                    end_time=candidate.end_time,
                    status=candidate.status,
                )
            except IntegrityError:
                raise self._conflict_from_constraint(candidate) from None

        self.log_operation(
            "update_availability", availability_id=record_id, fields=sorted(supplied)
        )
        return record

    @BaseService.measure_operation("delete_availability")
    def delete_availability(self, record_id: str, caller: CallerContext) -> ProfessorAvailability:
        """Delete a window and return it as it was."""
        with self.transaction():
            record = self._get_record(record_id, for_update=True)
            self.policy.require(caller, Action.DELETE_AVAILABILITY, record.professor_id)
            self.repository.delete(record)

        self.log_operation(
            "delete_availability", availability_id=record_id, professor_id=record.professor_id
        )
        return record

    @BaseService.measure_operation("get_availability")
    def get_availability(self, record_id: str, caller: CallerContext) -> ProfessorAvailability:
        record = self._get_record(record_id)
        self.policy.require(caller, Action.READ_AVAILABILITY, record.professor_id)
        return record

    @BaseService.measure_operation("list_availability")
    def list_availability(
        self,
        criteria: AvailabilityFilter,
        caller: CallerContext,
        *,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> List[ProfessorAvailability]:
        """
        List windows matching the filter, ordered by weekday then start time.

        Professors only ever see their own windows, whatever professor the
        filter names.
        """
        criteria = self._scope_filter(criteria, caller)
        return self.repository.list_filtered(criteria, offset=offset, limit=limit)

    @BaseService.measure_operation("list_availability_page")
    def list_availability_page(
        self, criteria: AvailabilityFilter, caller: CallerContext, *, page: int, per_page: int
    ) -> Tuple[List[ProfessorAvailability], int]:
        """One page of list_availability plus the total number of matches."""
        criteria = self._scope_filter(criteria, caller)
        items = self.repository.list_filtered(
            criteria, offset=(page - 1) * per_page, limit=per_page
        )
        return items, self.repository.count_filtered(criteria)

    def list_by_professor(
        self,
        professor_id: str,
        caller: CallerContext,
        period_id: Optional[str] = None,
        day_of_week: Optional[DayOfWeek] = None,
        status: Optional[AvailabilityStatus] = None,
    ) -> List[ProfessorAvailability]:
        """
        Windows of one professor, optionally narrowed by period, day and status.

        Unlike list_availability, naming another professor is not silently
        rewritten for professors: it is denied.

        Raises:
            PermissionDeniedException: Caller may not list this professor's windows
        """
        self.policy.require(caller, Action.LIST_AVAILABILITY, professor_id)
        return self.list_availability(
            AvailabilityFilter(
                professor_id=professor_id,
                period_id=period_id,
                day_of_week=day_of_week,
                status=status,
            ),
            caller,
        )

    def list_by_period(
        self,
        period_id: str,
        caller: CallerContext,
        professor_id: Optional[str] = None,
        day_of_week: Optional[DayOfWeek] = None,
        status: Optional[AvailabilityStatus] = None,
    ) -> List[ProfessorAvailability]:
        """
        Windows declared for a period, optionally narrowed by professor, day
        and status. Professors only see their own windows.

        Raises:
            NotFoundException: Unknown period
        """
        self.directory.get_period(period_id)
        return self.list_availability(
            AvailabilityFilter(
                professor_id=professor_id,
                period_id=period_id,
                day_of_week=day_of_week,
                status=status,
            ),
            caller,
        )

    def _get_record(self, record_id: str, *, for_update: bool = False) -> ProfessorAvailability:
        record = self.repository.get_by_id(record_id, for_update=for_update)
        if record is None:
            raise NotFoundException(
                f"Availability {record_id} not found", details={"availability_id": record_id}
            )
        return record

    def _conflict_from_constraint(
        self, candidate: AvailabilityCandidate
    ) -> ScheduleConflictException:
        self.logger.warning(
            f"Constraint rejected availability {candidate.window} on "
            f"{candidate.day_of_week.value} for professor {candidate.professor_id}"
        )
        return ScheduleConflictException(
            candidate.day_of_week.value, candidate.window, "an existing availability window"
        )

    def _scope_filter(
        self, criteria: AvailabilityFilter, caller: CallerContext
    ) -> AvailabilityFilter:
        professor_id = self.policy.resolve_professor_id(caller, criteria.professor_id)
        self.policy.require(caller, Action.LIST_AVAILABILITY, professor_id)
        return replace(criteria, professor_id=professor_id)
