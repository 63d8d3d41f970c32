# backend/academic_schedule/services/academic_directory.py
"""
Academic directory.

Lookups of professors and teaching periods. Both record types belong to
other parts of the institution's system; this service only reads them by
id and turns "missing", "wrong role" and "not active" into domain errors.
"""

import logging
from typing import Optional, Protocol

from sqlalchemy.orm import Session

from ..core.enums import RoleName
from ..core.exceptions import (
    InactivePeriodException,
    NotFoundException,
    RoleMismatchException,
)
from ..models.teaching_period import TeachingPeriod
from ..models.user import User
from ..repositories.factory import RepositoryFactory

logger = logging.getLogger(__name__)


class AcademicDirectory(Protocol):
    """Read access to professors and teaching periods."""

    def get_user(self, user_id: str) -> Optional[User]:
        ...

    def get_professor(self, professor_id: str) -> User:
        ...

    def get_period(self, period_id: str) -> TeachingPeriod:
        ...

    def get_active_period(self, period_id: str) -> TeachingPeriod:
        ...


class SqlAcademicDirectory:
    """AcademicDirectory backed by the users and teaching_periods tables."""

    def __init__(self, db: Session):
        self.user_repository = RepositoryFactory.create_user_repository(db)
        self.period_repository = RepositoryFactory.create_teaching_period_repository(db)

    def get_user(self, user_id: str) -> Optional[User]:
        """Active user by id, or None."""
        return self.user_repository.get_active_by_id(user_id)

    def get_professor(self, professor_id: str) -> User:
        """
        Get a user who holds the PROFESSOR role.

        Raises:
            NotFoundException: No such user
            RoleMismatchException: The user is not a professor
        """
        user = self.user_repository.get_by_id(professor_id)
        if user is None:
            raise NotFoundException(
                f"Professor {professor_id} not found", details={"professor_id": professor_id}
            )
        if not user.is_professor:
            logger.info(f"User {professor_id} has role {user.role}, expected PROFESSOR")
            raise RoleMismatchException(professor_id, RoleName.PROFESSOR.value)
        return user

    def get_period(self, period_id: str) -> TeachingPeriod:
        period = self.period_repository.get_by_id(period_id)
        if period is None:
            raise NotFoundException(
                f"Teaching period {period_id} not found", details={"period_id": period_id}
            )
        return period

    def get_active_period(self, period_id: str) -> TeachingPeriod:
        """
        Get a teaching period that is currently ACTIVE.

        Raises:
            NotFoundException: No such period
            InactivePeriodException: The period is INACTIVE or CLOSED
        """
        period = self.get_period(period_id)
        if not period.is_active:
            raise InactivePeriodException(period.label, period.status.value)
        return period
