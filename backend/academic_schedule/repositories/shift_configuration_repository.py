"""Repository for the singleton shift configuration row."""

import logging
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import RepositoryException
from ..models.shift_configuration import GLOBAL_SCOPE, ShiftConfiguration
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class ShiftConfigurationRepository(BaseRepository[ShiftConfiguration]):
    """Data access for the institution-wide shift configuration."""

    def __init__(self, db: Session):
        super().__init__(db, ShiftConfiguration)

    def get_active(self, *, for_update: bool = False) -> Optional[ShiftConfiguration]:
        try:
            query = self.db.query(ShiftConfiguration).filter(
                ShiftConfiguration.scope == GLOBAL_SCOPE
            )
            if for_update:
                query = query.with_for_update()
            return query.first()
        except SQLAlchemyError as e:
            self.logger.error(f"Error loading shift configuration: {str(e)}")
            raise RepositoryException(f"Failed to load shift configuration: {str(e)}")

    def create_active(self, **fields: Any) -> ShiftConfiguration:
        return self.create(scope=GLOBAL_SCOPE, **fields)
