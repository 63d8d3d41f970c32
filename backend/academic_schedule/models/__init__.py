"""
Database models for the academic schedule service.

- ShiftConfiguration: the institution-wide lesson grid
- ProfessorAvailability: declared availability windows
- User, TeachingPeriod: collaborator records referenced by id
"""

from .availability import ProfessorAvailability
from .shift_configuration import GLOBAL_SCOPE, ShiftConfiguration
from .teaching_period import TeachingPeriod
from .user import User

__all__ = [
    "GLOBAL_SCOPE",
    "ProfessorAvailability",
    "ShiftConfiguration",
    "TeachingPeriod",
    "User",
]
