# backend/academic_schedule/routes/v1/shift_configuration.py
"""
Shift configuration routes - API v1

Endpoints:
    GET /                       -> Active configuration with computed shifts
    PUT /                       -> Create or partially update the configuration
    GET /slots?period_id=...    -> Every bookable slot for a teaching period
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...api.dependencies import get_current_caller, get_shift_configuration_service
from ...core.exceptions import DomainException
from ...schemas.shift_configuration import (
    ShiftConfigurationResponse,
    ShiftConfigurationUpsert,
    ValidSlotsResponse,
)
from ...services.authorization import CallerContext
from ...services.shift_configuration_service import ShiftConfigurationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["shift-configuration"])


@router.get("", response_model=ShiftConfigurationResponse)
def get_shift_configuration(
    caller: CallerContext = Depends(get_current_caller),
    service: ShiftConfigurationService = Depends(get_shift_configuration_service),
) -> ShiftConfigurationResponse:
    """Get the active shift configuration, including shift ends and lessons."""
    try:
        config = service.get_active_configuration(caller)
        return ShiftConfigurationResponse.from_configuration(config)
    except DomainException as e:
        raise e.to_http_exception()
    except Exception as e:
        logger.error(f"Unexpected error loading shift configuration: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An internal error occurred",
        )


@router.put("", response_model=ShiftConfigurationResponse)
def upsert_shift_configuration(
    payload: ShiftConfigurationUpsert,
    caller: CallerContext = Depends(get_current_caller),
    service: ShiftConfigurationService = Depends(get_shift_configuration_service),
) -> ShiftConfigurationResponse:
    """
    Create the configuration or update only the supplied fields.

    Restricted to directors and administrators.
    """
    try:
        config = service.upsert_configuration(payload.model_dump(exclude_none=True), caller)
        return ShiftConfigurationResponse.from_configuration(config)
    except DomainException as e:
        raise e.to_http_exception()
    except Exception as e:
        logger.error(f"Unexpected error saving shift configuration: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An internal error occurred",
        )


@router.get("/slots", response_model=ValidSlotsResponse)
def list_valid_slots(
    period_id: str = Query(..., description="Teaching period"),
    caller: CallerContext = Depends(get_current_caller),
    service: ShiftConfigurationService = Depends(get_shift_configuration_service),
) -> ValidSlotsResponse:
    """List the slots clients can offer when declaring availability."""
    try:
        all_slots = service.list_valid_slots(period_id, caller)
        return ValidSlotsResponse.build(period_id, all_slots)
    except DomainException as e:
        raise e.to_http_exception()
    except Exception as e:
        logger.error(f"Unexpected error listing slots for period {period_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An internal error occurred",
        )
