"""FastAPI dependencies shared by the routers."""

from .auth import get_current_caller
from .database import get_db
from .services import get_availability_service, get_shift_configuration_service

__all__ = [
    "get_availability_service",
    "get_current_caller",
    "get_db",
    "get_shift_configuration_service",
]
