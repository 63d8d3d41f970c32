# backend/academic_schedule/core/exceptions.py
"""
Domain-specific exceptions for the academic schedule service.

These exceptions provide clear, business-focused error messages
that can be caught and handled appropriately at the API layer.
Every kind carries a stable ``code`` so clients can tell them apart.
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, status

HTTP_422_UNPROCESSABLE: int = getattr(status, "HTTP_422_UNPROCESSABLE_CONTENT", 422)


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_http_exception(self) -> HTTPException:
        return HTTPException(
            status_code=self.status_code,
            detail={
                "message": self.message,
                "code": self.code,
                "details": self.details,
            },
        )


class ValidationException(DomainException):
    """Raised when business validation fails."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundException(DomainException):
    """Raised when a requested resource is not found."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="NOT_FOUND", details=details)


class ConflictException(DomainException):
    """Raised when there's a conflict with existing data."""

    status_code = status.HTTP_409_CONFLICT


class BusinessRuleException(DomainException):
    """Raised when a business rule is violated."""

    status_code = HTTP_422_UNPROCESSABLE


class UnauthorizedException(DomainException):
    """Raised when the caller could not be identified."""

    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenException(DomainException):
    """Raised when user lacks permission for an action."""

    status_code = status.HTTP_403_FORBIDDEN


class ServiceException(DomainException):
    """Raised when a service operation fails."""

    def to_http_exception(self) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "message": self.message or "An error occurred processing your request",
                "code": self.code,
                "details": self.details if self.details else {},
            },
        )


# Specific business exceptions


class ConfigurationException(BusinessRuleException):
    """Shift configuration is missing or cannot produce valid slots."""

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)


class InvalidFormatException(ValidationException):
    """A supplied value is not in the expected format (e.g. HH:mm)."""

    def __init__(self, field: str, value: Any, expected: str = "HH:mm") -> None:
        super().__init__(
            message=f"{field} must be in {expected} format, got {value!r}",
            code="INVALID_FORMAT",
            details={"field": field, "value": value, "expected": expected},
        )


class InvalidRangeException(ValidationException):
    """End time is not strictly after start time."""

    def __init__(self, start: str, end: str) -> None:
        super().__init__(
            message=f"End time must be after start time ({start} - {end})",
            code="INVALID_RANGE",
            details={"start_time": start, "end_time": end},
        )


class SlotMisalignmentException(ValidationException):
    """Window does not match one slot or a contiguous run of slots."""

    def __init__(self, window: str, valid_boundaries: str) -> None:
        super().__init__(
            message=(
                f"Window {window} does not match the configured lesson slots. "
                f"Valid slots: {valid_boundaries}"
            ),
            code="SLOT_MISALIGNMENT",
            details={"window": window, "valid_slots": valid_boundaries},
        )


class ScheduleConflictException(ConflictException):
    """Raised when an availability window overlaps an existing one."""

    def __init__(
        self,
        day_of_week: str,
        new_range: str,
        conflicting_range: str,
        conflicting_id: Optional[str] = None,
    ) -> None:
        super().__init__(
            message=(
                f"Conflicting availability on {day_of_week}: {new_range} "
                f"overlaps {conflicting_range}"
            ),
            code="SCHEDULE_CONFLICT",
            details={
                "day_of_week": day_of_week,
                "new_window": new_range,
                "conflicting_window": conflicting_range,
                "conflicting_id": conflicting_id,
            },
        )


class RoleMismatchException(ValidationException):
    """Referenced user exists but does not hold the required role."""

    def __init__(self, user_id: str, expected_role: str) -> None:
        super().__init__(
            message=f"User {user_id} is not a {expected_role.lower()}",
            code="ROLE_MISMATCH",
            details={"user_id": user_id, "expected_role": expected_role},
        )


class InactivePeriodException(ValidationException):
    """Referenced teaching period exists but is not active."""

    def __init__(self, period_label: str, period_status: str) -> None:
        super().__init__(
            message=f"Teaching period {period_label} is not active",
            code="INACTIVE_PERIOD",
            details={"period": period_label, "status": period_status},
        )


class PermissionDeniedException(ForbiddenException):
    """Caller is not allowed to act on the target professor."""

    def __init__(self, action: str, message: Optional[str] = None) -> None:
        super().__init__(
            message=message or "You do not have permission to perform this action",
            code="PERMISSION_DENIED",
            details={"action": action},
        )


class RepositoryException(Exception):
    """
    Exception raised for repository layer errors.

    This exception is used when data access operations fail,
    such as database connection issues, query failures, or
    constraint violations.
    """
