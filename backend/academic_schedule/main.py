# backend/academic_schedule/main.py
"""
FastAPI application for the academic schedule service.

Mounts the v1 API under /api/v1 and the Prometheus scrape endpoint at
/metrics. Run with ``uvicorn academic_schedule.main:app``.
"""

import logging

from fastapi import APIRouter, FastAPI

from .core.config import settings
from .errors import register_error_handlers
from .middleware.prometheus_middleware import PrometheusMiddleware
from .routes import metrics
from .routes.v1 import availability as availability_v1
from .routes.v1 import health as health_v1
from .routes.v1 import shift_configuration as shift_configuration_v1

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.api_title,
        description="Lesson slot computation and professor availability scheduling",
        version=settings.api_version,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
    )
    register_error_handlers(application)
    application.add_middleware(PrometheusMiddleware)

    api_v1 = APIRouter(prefix="/api/v1")
    api_v1.include_router(health_v1.router, prefix="/health")
    api_v1.include_router(shift_configuration_v1.router, prefix="/shift-configuration")
    api_v1.include_router(availability_v1.router, prefix="/availabilities")

    application.include_router(api_v1)
    application.include_router(metrics.router)

    logger.info(f"{settings.api_title} {settings.api_version} ready ({settings.environment})")
    return application


app = create_app()
