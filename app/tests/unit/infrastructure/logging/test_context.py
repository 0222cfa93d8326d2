"""Unit tests for infrastructure.logging.context module."""

import uuid

import pytest
import structlog

from infrastructure.logging.context import bind_request_context, get_correlation_id


@pytest.mark.unit
class TestBindRequestContext:
    """Test suite for bind_request_context context manager."""

    def test_auto_generates_correlation_id(self):
        """Correlation ID is auto-generated if not provided."""
        with bind_request_context():
            uuid.UUID(get_correlation_id())

    def test_uses_provided_correlation_id(self):
        with bind_request_context(correlation_id="req-123"):
            assert get_correlation_id() == "req-123"

    def test_binds_request_details(self):
        with bind_request_context(
            request_path="/api/v1/translations", request_method="GET", key="app_title"
        ):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx["request_path"] == "/api/v1/translations"
            assert ctx["request_method"] == "GET"
            assert ctx["key"] == "app_title"

    def test_omitted_details_are_not_bound(self):
        with bind_request_context():
            ctx = structlog.contextvars.get_contextvars()
            assert "request_path" not in ctx
            assert "request_method" not in ctx

    def test_context_is_cleared_on_exit(self):
        with bind_request_context(correlation_id="req-1", request_path="/health"):
            pass
        assert get_correlation_id() is None
        assert "request_path" not in structlog.contextvars.get_contextvars()

    def test_context_is_cleared_on_exception(self):
        with pytest.raises(RuntimeError):
            with bind_request_context(correlation_id="req-2"):
                raise RuntimeError("boom")
        assert get_correlation_id() is None


@pytest.mark.unit
class TestGetCorrelationId:
    def test_none_outside_a_request(self):
        structlog.contextvars.clear_contextvars()
        assert get_correlation_id() is None
