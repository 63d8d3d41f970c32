# backend/academic_schedule/api/dependencies/services.py
"""
Service layer dependencies for dependency injection.

This module provides factory functions that create service instances
with their required dependencies properly injected.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from ...services.availability_service import AvailabilityService
from ...services.shift_configuration_service import ShiftConfigurationService
from .database import get_db


def get_shift_configuration_service(db: Session = Depends(get_db)) -> ShiftConfigurationService:
    return ShiftConfigurationService(db)


def get_availability_service(db: Session = Depends(get_db)) -> AvailabilityService:
    """Get AvailabilityService with a request-scoped session."""
    return AvailabilityService(db)
