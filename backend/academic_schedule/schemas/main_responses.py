"""Responses of the service-level endpoints."""

from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: Literal["healthy", "degraded"]
    service: str
    version: str
    environment: str
    database: Literal["ok", "unavailable"]
    timestamp: str
