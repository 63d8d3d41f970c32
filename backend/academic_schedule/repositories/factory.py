# backend/academic_schedule/repositories/factory.py
"""
Repository Factory

Provides centralized creation of repository instances,
ensuring consistent initialization and dependency injection.
"""

from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

# Avoid circular imports
if TYPE_CHECKING:
    from .availability_repository import AvailabilityRepository
    from .shift_configuration_repository import ShiftConfigurationRepository
    from .teaching_period_repository import TeachingPeriodRepository
    from .user_repository import UserRepository


class RepositoryFactory:
    """
    Factory class for creating repository instances.

    Centralizes repository creation so services and tests can swap
    implementations in one place.
    """

    @staticmethod
    def create_availability_repository(db: Session) -> "AvailabilityRepository":
        """Create repository for availability windows."""
        from .availability_repository import AvailabilityRepository

        return AvailabilityRepository(db)

    @staticmethod
    def create_shift_configuration_repository(db: Session) -> "ShiftConfigurationRepository":
        """Create repository for the shift configuration."""
        from .shift_configuration_repository import ShiftConfigurationRepository

        return ShiftConfigurationRepository(db)

    @staticmethod
    def create_user_repository(db: Session) -> "UserRepository":
        from .user_repository import UserRepository

        return UserRepository(db)

    @staticmethod
    def create_teaching_period_repository(db: Session) -> "TeachingPeriodRepository":
        from .teaching_period_repository import TeachingPeriodRepository

        return TeachingPeriodRepository(db)
