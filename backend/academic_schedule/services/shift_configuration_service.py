# backend/academic_schedule/services/shift_configuration_service.py
"""
Shift Configuration Service

Business logic for the institution-wide shift configuration:
- Reading the active configuration
- Upserting it (create when absent, otherwise update only supplied fields)
- Listing the lesson slots it produces

A configuration is only stored if every shift still fits inside the day.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.exceptions import (
    ConfigurationException,
    ConflictException,
    InvalidFormatException,
    NotFoundException,
)
from ..core.time_of_day import InvalidTimeFormatError, TimeOfDay
from ..models.shift_configuration import ShiftConfiguration
from ..repositories.factory import RepositoryFactory
from .academic_directory import AcademicDirectory, SqlAcademicDirectory
from .authorization import Action, AuthorizationPolicy, CallerContext, authorization_policy
from .base import BaseService
from .slot_computer import ShiftSettings, ShiftSlots, compute_all_slots

logger = logging.getLogger(__name__)

TIME_FIELDS = ("morning_start", "afternoon_start", "evening_start")
COUNT_FIELDS = ("lesson_duration_minutes", "lessons_per_shift")
CONFIGURATION_FIELDS = COUNT_FIELDS + TIME_FIELDS


class ShiftConfigurationService(BaseService):
    """Service for the shift configuration and its derived slots."""

    def __init__(
        self,
        db: Session,
        directory: Optional[AcademicDirectory] = None,
        policy: Optional[AuthorizationPolicy] = None,
    ):
        super().__init__(db)
        self.repository = RepositoryFactory.create_shift_configuration_repository(db)
        self.directory = directory or SqlAcademicDirectory(db)
        self.policy = policy or authorization_policy

    def find_active_configuration(self) -> Optional[ShiftConfiguration]:
        """The active configuration, or None when it was never defined."""
        return self.repository.get_active()

    @BaseService.measure_operation("get_active_configuration")
    def get_active_configuration(self, caller: CallerContext) -> ShiftConfiguration:
        """
        Get the active shift configuration.

        Raises:
            NotFoundException: No configuration has been defined yet
        """
        self.policy.require(caller, Action.READ_SHIFT_CONFIGURATION)
        config = self.find_active_configuration()
        if config is None:
            raise NotFoundException("Shift configuration has not been defined")
        return config

    @BaseService.measure_operation("upsert_configuration")
    def upsert_configuration(
        self, changes: Dict[str, Any], caller: CallerContext
    ) -> ShiftConfiguration:
        """
        Create the configuration, or update only the supplied fields.

        Args:
            changes: Subset of lesson_duration_minutes, lessons_per_shift,
                morning_start, afternoon_start, evening_start. Start times
                are HH:mm strings.
            caller: Requesting user

        Returns:
            The stored configuration

        Raises:
            PermissionDeniedException: Caller may not manage the configuration
            InvalidFormatException: A start time is not exactly HH:mm
            ConfigurationException: Fields missing on creation, or the merged
                values cannot produce slots
            ConflictException: A concurrent request created the configuration
                first
        """
        self.policy.require(caller, Action.MANAGE_SHIFT_CONFIGURATION)
        parsed = self._parse_changes(changes)

        with self.transaction():
            existing = self.repository.get_active(for_update=True)
            merged = self._merge(existing, parsed)
            # Slot computation rejects non-positive values and shifts past midnight
            compute_all_slots(merged)

            if existing is None:
                try:
                    config = self.repository.create_active(
                        **{field: getattr(merged, field) for field in CONFIGURATION_FIELDS}
                    )
                except IntegrityError:
                    # Another request created the singleton row first
                    raise ConflictException(
                        "Shift configuration was created concurrently, retry the update",
                        code="CONFIGURATION_CONFLICT",
                    ) from None
                self.log_operation("create_shift_configuration", config_id=config.id)
            else:
                config = self.repository.update(existing, **parsed)
                self.log_operation(
                    "update_shift_configuration",
                    config_id=config.id,
                    fields=sorted(parsed),
                )

        return config

    @BaseService.measure_operation("list_valid_slots")
    def list_valid_slots(self, period_id: str, caller: CallerContext) -> List[ShiftSlots]:
        """
        All slots of every shift for a teaching period.

        Slots are the same for every period and weekday; the period is only
        checked for existence.

        Raises:
            NotFoundException: Unknown period
            ConfigurationException: No configuration defined
        """
        self.policy.require(caller, Action.LIST_SLOTS)
        self.directory.get_period(period_id)
        config = self.find_active_configuration()
        if config is None:
            raise ConfigurationException("Shift configuration has not been defined")
        return compute_all_slots(config)

    @staticmethod
    def _parse_changes(changes: Dict[str, Any]) -> Dict[str, Any]:
        parsed: Dict[str, Any] = {}
        for field, value in changes.items():
            if field not in CONFIGURATION_FIELDS or value is None:
                continue
            if field in TIME_FIELDS:
                if isinstance(value, TimeOfDay):
                    parsed[field] = value
                    continue
                try:
                    parsed[field] = TimeOfDay.parse(value, strict=True)
                except InvalidTimeFormatError:
                    raise InvalidFormatException(field, value) from None
            else:
                parsed[field] = value
        return parsed

    @staticmethod
    def _merge(existing: Optional[ShiftConfiguration], parsed: Dict[str, Any]) -> ShiftSettings:
        if existing is None:
            missing = [field for field in CONFIGURATION_FIELDS if field not in parsed]
            if missing:
                raise ConfigurationException(
                    f"Missing fields to create the shift configuration: {', '.join(missing)}",
                    details={"missing_fields": missing},
                )
            return ShiftSettings(**{field: parsed[field] for field in CONFIGURATION_FIELDS})

        values = {
            field: parsed.get(field, getattr(existing, field)) for field in CONFIGURATION_FIELDS
        }
        return ShiftSettings(**values)
