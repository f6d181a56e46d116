"""Unit tests for infrastructure.logging setup and context modules."""

import uuid

import pytest
import structlog

from infrastructure.logging import (
    bind_request_context,
    configure_logging,
    get_correlation_id,
    get_logger,
    get_module_logger,
)
from infrastructure.logging.setup import _is_test_environment


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_detects_pytest(self):
        assert _is_test_environment() is True

    def test_returns_logger(self):
        logger = configure_logging(log_level="DEBUG", is_production=True)
        assert hasattr(logger, "info")
        assert hasattr(logger, "error")

    def test_idempotent(self):
        configure_logging()
        configure_logging()
        get_module_logger().info("still_works")


@pytest.mark.unit
class TestLoggers:
    """Test suite for logger factories."""

    def test_get_module_logger_binds_component(self):
        logger = get_module_logger()
        context = structlog.get_context(logger)
        assert context["component"] == "test_logging_setup"
        assert context["module_path"].endswith("test_logging_setup")

    def test_get_logger_with_name(self):
        logger = get_logger("routing")
        assert structlog.get_context(logger)["logger_name"] == "routing"

    def test_get_logger_defaults_to_caller(self):
        logger = get_logger()
        assert structlog.get_context(logger)["logger_name"].endswith("test_logging_setup")


@pytest.mark.unit
class TestBindRequestContext:
    """Test suite for bind_request_context context manager."""

    def test_auto_generates_correlation_id(self):
        with bind_request_context(request_path="/fr"):
            uuid.UUID(get_correlation_id())

    def test_uses_provided_correlation_id(self):
        with bind_request_context(correlation_id="abc-123"):
            assert get_correlation_id() == "abc-123"

    def test_binds_request_fields(self):
        with bind_request_context(request_path="/xx", request_method="GET", locale="fr"):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx["request_path"] == "/xx"
            assert ctx["request_method"] == "GET"
            assert ctx["locale"] == "fr"

    def test_context_cleared_on_exit(self):
        with bind_request_context(correlation_id="abc", request_path="/xx"):
            pass
        ctx = structlog.contextvars.get_contextvars()
        assert "correlation_id" not in ctx
        assert "request_path" not in ctx

    def test_context_cleared_on_error(self):
        with pytest.raises(ValueError):
            with bind_request_context(correlation_id="abc"):
                raise ValueError("boom")
        assert get_correlation_id() is None
