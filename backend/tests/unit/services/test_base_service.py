"""Tests for BaseService transaction handling and timing."""

import itertools
from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from academic_schedule.core.exceptions import (
    NotFoundException,
    RepositoryException,
    ServiceException,
)
from academic_schedule.services.base import BaseService


class ExampleService(BaseService):
    @BaseService.measure_operation("succeed")
    def succeed(self):
        return "ok"

    @BaseService.measure_operation("fail")
    def fail(self):
        raise NotFoundException("nothing here")


class TestTransaction:
    def test_commits_on_success(self):
        db = MagicMock()
        with ExampleService(db).transaction():
            pass
        db.commit.assert_called_once()
        db.rollback.assert_not_called()

    def test_database_errors_become_service_exception(self):
        db = MagicMock()
        with pytest.raises(ServiceException):
            with ExampleService(db).transaction():
                raise OperationalError("SELECT 1", {}, Exception("connection lost"))
        db.rollback.assert_called_once()
        db.commit.assert_not_called()

    def test_repository_errors_become_service_exception(self):
        db = MagicMock()
        with pytest.raises(ServiceException):
            with ExampleService(db).transaction():
                raise RepositoryException("boom")
        db.rollback.assert_called_once()

    def test_domain_errors_propagate_unchanged(self):
        db = MagicMock()
        with pytest.raises(NotFoundException):
            with ExampleService(db).transaction():
                raise NotFoundException("missing")
        db.rollback.assert_called_once()


class TestMeasureOperation:
    def test_marks_measured_methods(self):
        assert ExampleService.succeed._operation_name == "succeed"
        assert ExampleService.succeed._is_measured is True
        assert not hasattr(BaseService, "get_metrics")

    def test_reports_success(self):
        service = ExampleService(MagicMock())
        with patch("academic_schedule.services.base.prometheus_metrics") as mock_metrics:
            assert service.succeed() == "ok"
        kwargs = mock_metrics.record_service_operation.call_args.kwargs
        assert kwargs["operation"] == "succeed"
        assert kwargs["status"] == "success"
        assert kwargs["error_type"] is None

    def test_reports_to_prometheus(self):
        service = ExampleService(MagicMock())
        with patch("academic_schedule.services.base.prometheus_metrics") as mock_metrics:
            with pytest.raises(NotFoundException):
                service.fail()
        kwargs = mock_metrics.record_service_operation.call_args.kwargs
        assert kwargs["service"] == "ExampleService"
        assert kwargs["status"] == "error"
        assert kwargs["error_type"] == "NotFoundException"

    def test_slow_operation_warning(self):
        service = ExampleService(MagicMock())
        service.logger = MagicMock()
        ticks = itertools.count(0.0, 5.0)
        with patch("academic_schedule.services.base.prometheus_metrics"), patch(
            "academic_schedule.services.base.time.time", side_effect=lambda: next(ticks)
        ):
            service.succeed()
        service.logger.warning.assert_called_once()
        assert "succeed" in service.logger.warning.call_args.args[0]
