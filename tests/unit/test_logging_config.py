"""
Unit tests for SDK logging helpers.
"""

import logging

import grpc
import pytest
import structlog
from structlog.testing import capture_logs

from meterus.logging_config import (
    SDK_LOGGER_NAME,
    clear_correlation_id,
    get_correlation_id,
    log_rpc_call,
    set_correlation_id,
    setup_logging,
)

from tests.conftest import VALID_API_KEY


class TestRpcCallLogging:
    """Test façade round-trips are logged."""

    def test_successful_call_logged_at_debug(self, client):
        with capture_logs() as logs:
            client.new_metering_service().list_meters(limit=1, page=1)

        entries = [e for e in logs if e["event"] == "rpc_call_completed"]
        assert len(entries) == 1
        assert entries[0]["log_level"] == "debug"
        assert entries[0]["service"] == "meters.v1.MeteringService"
        assert entries[0]["method"] == "ListMeters"
        assert entries[0]["status"] == "OK"

    def test_failed_call_logged_with_status(self, client):
        with capture_logs() as logs:
            with pytest.raises(grpc.RpcError):
                client.new_metering_service().get_meter("missing")

        entries = [e for e in logs if e["event"] == "rpc_call_failed"]
        assert len(entries) == 1
        assert entries[0]["log_level"] == "warning"
        assert entries[0]["status"] == "NOT_FOUND"
        assert entries[0]["error"] == "meter missing not found"

    def test_api_key_never_logged(self, client):
        with capture_logs() as logs:
            client.new_metering_service().list_meters(limit=1, page=1)
            client.new_validation_service().validate_api_key(VALID_API_KEY, ["read"])
            client.close()

        assert VALID_API_KEY not in repr(logs)

    def test_log_rpc_call_extra_context(self):
        logger = structlog.get_logger("meterus.test")
        with capture_logs() as logs:
            log_rpc_call(logger, "svc", "Method", "OK", duration_ms=1.23456, attempt=1)

        assert logs[0]["duration_ms"] == 1.235
        assert logs[0]["attempt"] == 1


class TestCorrelationId:
    def test_set_and_clear(self):
        generated = set_correlation_id()
        assert get_correlation_id() == generated
        assert set_correlation_id("req-1") == "req-1"
        clear_correlation_id()
        assert get_correlation_id() is None


class TestSetupLogging:
    @pytest.fixture
    def sdk_logger(self, monkeypatch):
        """Restore the SDK logger and stub out the global structlog configuration."""
        captured = {}
        monkeypatch.setattr(structlog, "configure", lambda **kwargs: captured.update(kwargs))
        logger = logging.getLogger(SDK_LOGGER_NAME)
        saved = (list(logger.handlers), logger.level, logger.propagate)

        yield logger, captured

        for handler in logger.handlers:
            if handler not in saved[0]:
                handler.close()
        logger.handlers[:] = saved[0]
        logger.setLevel(saved[1])
        logger.propagate = saved[2]

    def test_configures_structlog_and_sdk_logger(self, sdk_logger, tmp_path):
        """Test setup_logging wires a file handler and the JSON renderer."""
        logger, captured = sdk_logger

        setup_logging(level="DEBUG", log_file=tmp_path / "logs" / "meterus.log", json_format=True)

        assert logger.level == logging.DEBUG
        assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)
        assert isinstance(captured["processors"][-1], structlog.processors.JSONRenderer)

    def test_leaves_application_handlers_alone(self, sdk_logger):
        """Test the root logger keeps the handlers and level the application set."""
        root = logging.getLogger()
        app_handler = logging.NullHandler()
        root.addHandler(app_handler)
        saved_root_level = root.level

        try:
            setup_logging(level="DEBUG", json_format=False)

            assert app_handler in root.handlers
            assert root.level == saved_root_level
        finally:
            root.removeHandler(app_handler)

    def test_repeated_setup_replaces_its_own_handler(self, sdk_logger):
        """Test calling setup_logging twice leaves one SDK handler and keeps others."""
        logger, _ = sdk_logger
        other = logging.NullHandler()
        logger.addHandler(other)

        setup_logging(level="INFO")
        setup_logging(level="WARNING")

        stream_handlers = [h for h in logger.handlers if type(h) is logging.StreamHandler]
        assert other in logger.handlers
        assert len(stream_handlers) == 1
        assert logger.level == logging.WARNING
