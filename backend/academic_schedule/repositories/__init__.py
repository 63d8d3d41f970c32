"""
Repository Pattern Implementation

This package provides the repository layer for data access,
separating business logic from database queries.

Key Components:
- BaseRepository: Foundation for all repositories with generic CRUD operations
- RepositoryFactory: Factory for creating repository instances
- AvailabilityRepository: Availability windows, filtered listings, scope locks
- ShiftConfigurationRepository: The singleton shift configuration
- UserRepository / TeachingPeriodRepository: Read-only collaborator lookups
"""

from .availability_repository import AvailabilityFilter, AvailabilityRepository
from .base_repository import BaseRepository
from .factory import RepositoryFactory
from .shift_configuration_repository import ShiftConfigurationRepository
from .teaching_period_repository import TeachingPeriodRepository
from .user_repository import UserRepository

__all__ = [
    "AvailabilityFilter",
    "AvailabilityRepository",
    "BaseRepository",
    "RepositoryFactory",
    "ShiftConfigurationRepository",
    "TeachingPeriodRepository",
    "UserRepository",
]
