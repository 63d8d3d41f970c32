"""Read-only teaching period lookups."""

from sqlalchemy.orm import Session

from ..models.teaching_period import TeachingPeriod
from .base_repository import BaseRepository


class TeachingPeriodRepository(BaseRepository[TeachingPeriod]):
    def __init__(self, db: Session):
        super().__init__(db, TeachingPeriod)
