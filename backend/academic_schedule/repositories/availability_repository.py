# backend/academic_schedule/repositories/availability_repository.py
"""
Availability Repository

Data access for professor availability windows:
- Filtered listings ordered by day of week, then start time
- Candidate windows for conflict checks
- Scope locking so conflict checks and writes happen atomically
"""

from dataclasses import dataclass
import logging
from typing import List, Optional

from sqlalchemy import case
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.enums import AvailabilityStatus, DayOfWeek
from ..core.exceptions import RepositoryException
from ..models.availability import ProfessorAvailability
from ..models.user import User
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)

_DAY_ORDER = case(
    {day: day.ordinal for day in DayOfWeek},
    value=ProfessorAvailability.day_of_week,
)


@dataclass(frozen=True)
class AvailabilityFilter:
    """Optional criteria for listing availability windows."""

    professor_id: Optional[str] = None
    period_id: Optional[str] = None
    day_of_week: Optional[DayOfWeek] = None
    status: Optional[AvailabilityStatus] = None


class AvailabilityRepository(BaseRepository[ProfessorAvailability]):
    """Repository for availability window data access."""

    def __init__(self, db: Session):
        super().__init__(db, ProfessorAvailability)

    def list_filtered(
        self,
        criteria: AvailabilityFilter,
        *,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> List[ProfessorAvailability]:
        """
        List windows matching every supplied criterion.

        Results are ordered Monday..Saturday, then by start time, then by id
        so paging is stable.
        """
        try:
            query = self._filtered_query(criteria).order_by(
                _DAY_ORDER, ProfessorAvailability.start_time, ProfessorAvailability.id
            )
            if offset:
                query = query.offset(offset)
            if limit is not None:
                query = query.limit(limit)
            return query.all()
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing availability: {str(e)}")
            raise RepositoryException(f"Failed to list availability: {str(e)}")

    def count_filtered(self, criteria: AvailabilityFilter) -> int:
        try:
            return self._filtered_query(criteria).count()
        except SQLAlchemyError as e:
            self.logger.error(f"Error counting availability: {str(e)}")
            raise RepositoryException(f"Failed to count availability: {str(e)}")

    def _filtered_query(self, criteria: AvailabilityFilter):
        query = self.db.query(ProfessorAvailability)
        if criteria.professor_id:
            query = query.filter(ProfessorAvailability.professor_id == criteria.professor_id)
        if criteria.period_id:
            query = query.filter(ProfessorAvailability.period_id == criteria.period_id)
        if criteria.day_of_week:
            query = query.filter(ProfessorAvailability.day_of_week == criteria.day_of_week)
        if criteria.status:
            query = query.filter(ProfessorAvailability.status == criteria.status)
        return query

    def get_windows_for_conflict_check(
        self,
        professor_id: str,
        period_id: str,
        day_of_week: DayOfWeek,
        exclude_id: Optional[str] = None,
    ) -> List[ProfessorAvailability]:
        """
        Get every window of a professor on one day of a period.

        Args:
            professor_id: Owner of the windows
            period_id: Teaching period
            day_of_week: Day to check
            exclude_id: Window to leave out (the one being updated)

        Returns:
            Windows ordered by start time
        """
        try:
            query = self.db.query(ProfessorAvailability).filter(
                ProfessorAvailability.professor_id == professor_id,
                ProfessorAvailability.period_id == period_id,
                ProfessorAvailability.day_of_week == day_of_week,
            )
            if exclude_id:
                query = query.filter(ProfessorAvailability.id != exclude_id)
            return query.order_by(ProfessorAvailability.start_time).all()
        except SQLAlchemyError as e:
            self.logger.error(f"Error getting windows for conflict check: {str(e)}")
            raise RepositoryException(f"Failed to get conflict windows: {str(e)}")

    def lock_professor_scope(self, professor_id: str) -> None:
        """
        Serialize writers for one professor until the transaction ends.

        Locks the professor's user row with SELECT ... FOR UPDATE. SQLite has
        no row locks and already serializes writers per database file.
        """
        if self.dialect_name == "sqlite":
            return
        try:
            self.db.query(User.id).filter(User.id == professor_id).with_for_update().first()
        except SQLAlchemyError as e:
            self.logger.error(f"Error locking professor {professor_id}: {str(e)}")
            raise RepositoryException(f"Failed to lock availability scope: {str(e)}")
