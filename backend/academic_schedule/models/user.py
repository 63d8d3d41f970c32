# backend/academic_schedule/models/user.py
"""
User model.

Users are managed by the identity collaborator. This service reads them to
confirm that an availability owner is a professor and to authorize callers.
"""

from sqlalchemy import Boolean, Column, Enum, String
from sqlalchemy.orm import relationship

from ..core.enums import RoleName
from ..core.ulid_helper import generate_ulid
from ..database import Base
from .types import TimestampMixin


class User(TimestampMixin, Base):
    """
    Platform user with a single role.

    Attributes:
        id: ULID primary key
        name: Display name
        email: Unique email address
        role: PROFESSOR, COORDINATOR, ADMIN or DIRECTOR
        is_active: Inactive users cannot call the API
    """

    __tablename__ = "users"

    id = Column(String(26), primary_key=True, default=generate_ulid)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    role = Column(Enum(RoleName, name="role_name", native_enum=False, length=16), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)

    availabilities = relationship(
        "ProfessorAvailability", back_populates="professor", passive_deletes=True
    )

    @property
    def is_professor(self) -> bool:
        return self.role == RoleName.PROFESSOR

    def __repr__(self) -> str:
        return f"<User {self.email} ({self.role})>"
