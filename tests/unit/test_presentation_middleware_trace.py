"""Unit tests for TraceMiddleware (request tracing).

Tests cover:
- Trace ID generation for new requests
- Trace ID extraction from X-Trace-Id header
- Contextvars propagation and cleanup
- get_trace_id() function

Architecture:
- Unit tests with mocked Request/Response
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest
import structlog

from newsletter.presentation.api.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)


def make_request(headers=None):
    request = MagicMock()
    request.headers = headers or {}
    return request


def make_call_next():
    response = MagicMock()
    response.headers = {}
    return AsyncMock(return_value=response)


@pytest.mark.unit
class TestTraceMiddlewareTraceId:
    """Test TraceMiddleware trace ID selection."""

    @pytest.mark.asyncio
    async def test_generates_new_trace_id_when_missing(self):
        middleware = TraceMiddleware(app=MagicMock())

        response = await middleware.dispatch(make_request(), make_call_next())

        UUID(response.headers["X-Trace-Id"])

    @pytest.mark.asyncio
    async def test_uses_existing_trace_id_from_header(self):
        existing = "12345678-1234-5678-1234-567812345678"
        request = make_request({"X-Trace-Id": existing})
        middleware = TraceMiddleware(app=MagicMock())

        response = await middleware.dispatch(request, make_call_next())

        assert response.headers["X-Trace-Id"] == existing
        assert request.state.trace_id == existing


@pytest.mark.unit
class TestTraceMiddlewareContextPropagation:
    """Test context propagation during and after the request."""

    @pytest.mark.asyncio
    async def test_trace_id_visible_inside_request(self):
        seen = {}

        async def call_next(request):
            seen["trace_id"] = get_trace_id()
            seen["log_context"] = structlog.contextvars.get_contextvars()
            response = MagicMock()
            response.headers = {}
            return response

        middleware = TraceMiddleware(app=MagicMock())
        await middleware.dispatch(make_request({"X-Trace-Id": "abc"}), call_next)

        assert seen["trace_id"] == "abc"
        assert seen["log_context"]["trace_id"] == "abc"

    @pytest.mark.asyncio
    async def test_context_cleared_after_request(self):
        middleware = TraceMiddleware(app=MagicMock())

        await middleware.dispatch(make_request({"X-Trace-Id": "abc"}), make_call_next())

        assert get_trace_id() is None
        assert "trace_id" not in structlog.contextvars.get_contextvars()

    @pytest.mark.asyncio
    async def test_context_cleared_when_handler_raises(self):
        middleware = TraceMiddleware(app=MagicMock())
        call_next = AsyncMock(side_effect=RuntimeError("boom"))

        with pytest.raises(RuntimeError):
            await middleware.dispatch(make_request(), call_next)

        assert get_trace_id() is None

    def test_get_trace_id_outside_request(self):
        assert get_trace_id() is None
