"""Read-only user lookups."""

from typing import Optional

from sqlalchemy.orm import Session

from ..models.user import User
from .base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_active_by_id(self, user_id: str) -> Optional[User]:
        user = self.get_by_id(user_id)
        if user is None or not user.is_active:
            return None
        return user
