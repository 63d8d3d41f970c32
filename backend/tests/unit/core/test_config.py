import pytest
from pydantic import ValidationError

from academic_schedule.core.config import Settings


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", " debug ")
    assert Settings().log_level == "DEBUG"


def test_unknown_log_level_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        Settings()


def test_production_flag(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    assert Settings().is_production is True
