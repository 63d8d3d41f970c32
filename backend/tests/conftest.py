# backend/tests/conftest.py
"""
Pytest configuration.

Tests run against an in-memory SQLite database that is created fresh for
every test, so no test can see another test's rows.
"""

import os

# Set before any academic_schedule import so Settings picks them up
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from typing import Generator

from fastapi.testclient import TestClient
import pytest
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from academic_schedule.api.dependencies.database import get_db
from academic_schedule.core.enums import PeriodStatus, RoleName
from academic_schedule.core.time_of_day import TimeOfDay
from academic_schedule.database import Base, build_engine
from academic_schedule.main import app
import academic_schedule.models  # noqa: F401
from academic_schedule.models.shift_configuration import ShiftConfiguration
from academic_schedule.models.teaching_period import TeachingPeriod
from academic_schedule.models.user import User


@pytest.fixture
def db() -> Generator[Session, None, None]:
    engine = build_engine("sqlite+pysqlite:///:memory:", poolclass=StaticPool)
    Base.metadata.create_all(engine)
    TestSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=engine, expire_on_commit=False
    )
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def client(db: Session) -> Generator[TestClient, None, None]:
    def _override_get_db():
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


def _create_user(db: Session, name: str, role: RoleName, *, is_active: bool = True) -> User:
    user = User(
        name=name,
        email=f"{name.lower().replace(' ', '.')}@school.test",
        role=role,
        is_active=is_active,
    )
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def professor(db: Session) -> User:
    return _create_user(db, "Ada Lovelace", RoleName.PROFESSOR)


@pytest.fixture
def other_professor(db: Session) -> User:
    return _create_user(db, "Alan Turing", RoleName.PROFESSOR)


@pytest.fixture
def coordinator(db: Session) -> User:
    return _create_user(db, "Grace Hopper", RoleName.COORDINATOR)


@pytest.fixture
def director(db: Session) -> User:
    return _create_user(db, "Edsger Dijkstra", RoleName.DIRECTOR)


@pytest.fixture
def admin(db: Session) -> User:
    return _create_user(db, "Barbara Liskov", RoleName.ADMIN)


@pytest.fixture
def active_period(db: Session) -> TeachingPeriod:
    period = TeachingPeriod(year=2025, semester=1, status=PeriodStatus.ACTIVE)
    db.add(period)
    db.commit()
    return period


@pytest.fixture
def closed_period(db: Session) -> TeachingPeriod:
    period = TeachingPeriod(year=2024, semester=2, status=PeriodStatus.CLOSED)
    db.add(period)
    db.commit()
    return period


@pytest.fixture
def shift_configuration(db: Session) -> ShiftConfiguration:
    """50-minute lessons, 4 per shift, starting 07:30 / 13:30 / 19:00."""
    config = ShiftConfiguration(
        lesson_duration_minutes=50,
        lessons_per_shift=4,
        morning_start=TimeOfDay.of(7, 30),
        afternoon_start=TimeOfDay.of(13, 30),
        evening_start=TimeOfDay.of(19, 0),
    )
    db.add(config)
    db.commit()
    return config
