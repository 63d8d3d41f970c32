# backend/academic_schedule/core/config.py
import logging
import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def is_running_tests() -> bool:
    """
    Detect if code is running under pytest.

    PYTEST_CURRENT_TEST is set automatically by pytest during test runs, and is
    not expected to be present in production environments.
    """
    return os.getenv("PYTEST_CURRENT_TEST") is not None


_BACKEND_ROOT = Path(__file__).resolve().parents[2]

logger = logging.getLogger(__name__)

# Load .env file only outside CI and test runs
if not os.getenv("CI") and not is_running_tests():
    env_path = _BACKEND_ROOT / ".env"
    logger.debug(f"[CONFIG] Looking for .env at: {env_path}")
    load_dotenv(env_path)


class Settings(BaseSettings):
    """Runtime settings for the academic schedule service."""

    model_config = SettingsConfigDict(
        env_file=str(_BACKEND_ROOT / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_title: str = "Academic Schedule API"
    api_version: str = "1.0.0"
    environment: Literal["development", "test", "staging", "production"] = "development"

    database_url: str = Field(
        default="sqlite:///./academic_schedule.db",
        description="SQLAlchemy URL for the relational store",
    )
    database_echo: bool = False

    log_level: str = "INFO"
    slow_operation_threshold_seconds: float = Field(default=1.0, gt=0)

    # Identity is resolved upstream; the gateway forwards the caller id here.
    user_id_header: str = "X-User-Id"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unsupported log level: {v}")
        return level

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


settings = Settings()
