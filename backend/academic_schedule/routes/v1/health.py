# backend/academic_schedule/routes/v1/health.py
"""
Health check endpoint for monitoring and load balancer probes.
"""

from datetime import datetime, timezone
import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...api.dependencies import get_db
from ...core.config import settings
from ...schemas.main_responses import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("", response_model=HealthResponse)
def health_check(db: Session = Depends(get_db)) -> HealthResponse:
    """
    Health check endpoint.

    Reports service info and whether the database answers a trivial query.
    """
    database_state = "ok"
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check database probe failed: {str(e)}")
        database_state = "unavailable"

    return HealthResponse(
        status="healthy" if database_state == "ok" else "degraded",
        service="academic-schedule-api",
        version=settings.api_version,
        environment=settings.environment,
        database=database_state,
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    )
