# backend/academic_schedule/routes/v1/availability.py
"""
Professor availability routes - API v1

Endpoints:
    POST /                          -> Declare a window
    GET /                           -> Filtered, paginated listing
    GET /professor/{professor_id}   -> Windows of one professor
    GET /period/{period_id}         -> Windows declared for a period
    GET /{record_id}                -> One window
    PATCH /{record_id}              -> Partial update, fully re-validated
    DELETE /{record_id}             -> Remove a window, returning it
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...api.dependencies import get_availability_service, get_current_caller
from ...core.enums import AvailabilityStatus, DayOfWeek
from ...core.exceptions import DomainException
from ...repositories.availability_repository import AvailabilityFilter
from ...schemas.availability import AvailabilityCreate, AvailabilityResponse, AvailabilityUpdate
from ...schemas.base import PaginatedResponse
from ...services.authorization import CallerContext
from ...services.availability_service import AvailabilityService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["availability"])


def _internal_error(action: str, error: Exception) -> HTTPException:
    logger.error(f"Unexpected error {action}: {str(error)}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An internal error occurred",
    )


@router.post("", response_model=AvailabilityResponse, status_code=status.HTTP_201_CREATED)
def create_availability(
    payload: AvailabilityCreate,
    caller: CallerContext = Depends(get_current_caller),
    service: AvailabilityService = Depends(get_availability_service),
) -> AvailabilityResponse:
    """
    Declare an availability window.

    The window must match one lesson slot, or several consecutive slots of
    the same shift, and must not overlap the professor's other windows on
    that day.
    """
    try:
        record = service.create_availability(payload.model_dump(), caller)
        return AvailabilityResponse.model_validate(record)
    except DomainException as e:
        raise e.to_http_exception()
    except Exception as e:
        raise _internal_error("creating availability", e)


@router.get("", response_model=PaginatedResponse[AvailabilityResponse])
def list_availability(
    professor_id: Optional[str] = Query(None),
    period_id: Optional[str] = Query(None),
    day_of_week: Optional[DayOfWeek] = Query(None),
    availability_status: Optional[AvailabilityStatus] = Query(None, alias="status"),
    page: int = Query(1, ge=1),
    per_page: int = Query(50, ge=1, le=200),
    caller: CallerContext = Depends(get_current_caller),
    service: AvailabilityService = Depends(get_availability_service),
) -> PaginatedResponse[AvailabilityResponse]:
    """List windows ordered by day of week, then start time."""
    criteria = AvailabilityFilter(
        professor_id=professor_id,
        period_id=period_id,
        day_of_week=day_of_week,
        status=availability_status,
    )
    try:
        records, total = service.list_availability_page(
            criteria, caller, page=page, per_page=per_page
        )
    except DomainException as e:
        raise e.to_http_exception()
    except Exception as e:
        raise _internal_error("listing availability", e)

    return PaginatedResponse[AvailabilityResponse](
        items=[AvailabilityResponse.model_validate(record) for record in records],
        total=total,
        page=page,
        per_page=per_page,
        has_next=page * per_page < total,
        has_prev=page > 1,
    )


@router.get("/professor/{professor_id}", response_model=List[AvailabilityResponse])
def list_availability_by_professor(
    professor_id: str,
    period_id: Optional[str] = Query(None),
    day_of_week: Optional[DayOfWeek] = Query(None),
    availability_status: Optional[AvailabilityStatus] = Query(None, alias="status"),
    caller: CallerContext = Depends(get_current_caller),
    service: AvailabilityService = Depends(get_availability_service),
) -> List[AvailabilityResponse]:
    """Windows of one professor. Professors asking for someone else get 403."""
    try:
        records = service.list_by_professor(
            professor_id,
            caller,
            period_id=period_id,
            day_of_week=day_of_week,
            status=availability_status,
        )
        return [AvailabilityResponse.model_validate(record) for record in records]
    except DomainException as e:
        raise e.to_http_exception()
    except Exception as e:
        raise _internal_error(f"listing availability of professor {professor_id}", e)


@router.get("/period/{period_id}", response_model=List[AvailabilityResponse])
def list_availability_by_period(
    period_id: str,
    professor_id: Optional[str] = Query(None),
    day_of_week: Optional[DayOfWeek] = Query(None),
    availability_status: Optional[AvailabilityStatus] = Query(None, alias="status"),
    caller: CallerContext = Depends(get_current_caller),
    service: AvailabilityService = Depends(get_availability_service),
) -> List[AvailabilityResponse]:
    try:
        records = service.list_by_period(
            period_id,
            caller,
            professor_id=professor_id,
            day_of_week=day_of_week,
            status=availability_status,
        )
        return [AvailabilityResponse.model_validate(record) for record in records]
    except DomainException as e:
        raise e.to_http_exception()
    except Exception as e:
        raise _internal_error(f"listing availability of period {period_id}", e)


@router.get("/{record_id}", response_model=AvailabilityResponse)
def get_availability(
    record_id: str,
    caller: CallerContext = Depends(get_current_caller),
    service: AvailabilityService = Depends(get_availability_service),
) -> AvailabilityResponse:
    try:
        return AvailabilityResponse.model_validate(service.get_availability(record_id, caller))
    except DomainException as e:
        raise e.to_http_exception()
    except Exception as e:
        raise _internal_error(f"loading availability {record_id}", e)


@router.patch("/{record_id}", response_model=AvailabilityResponse)
def update_availability(
    record_id: str,
    payload: AvailabilityUpdate,
    caller: CallerContext = Depends(get_current_caller),
    service: AvailabilityService = Depends(get_availability_service),
) -> AvailabilityResponse:
    """Update supplied fields; the resulting window is validated again."""
    try:
        record = service.update_availability(
            record_id, payload.model_dump(exclude_none=True), caller
        )
        return AvailabilityResponse.model_validate(record)
    except DomainException as e:
        raise e.to_http_exception()
    except Exception as e:
        raise _internal_error(f"updating availability {record_id}", e)


@router.delete("/{record_id}", response_model=AvailabilityResponse)
def delete_availability(
    record_id: str,
    caller: CallerContext = Depends(get_current_caller),
    service: AvailabilityService = Depends(get_availability_service),
) -> AvailabilityResponse:
    try:
        return AvailabilityResponse.model_validate(service.delete_availability(record_id, caller))
    except DomainException as e:
        raise e.to_http_exception()
    except Exception as e:
        raise _internal_error(f"deleting availability {record_id}", e)
