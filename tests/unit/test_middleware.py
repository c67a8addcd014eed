"""Unit tests for middleware components"""
import uuid

import pytest
from unittest.mock import Mock

from app.middleware.correlation_id import (
    MAX_CORRELATION_ID_LENGTH,
    CorrelationIdMiddleware,
    get_correlation_id,
    set_correlation_id,
)


class MockRequest:
    def __init__(self, headers=None):
        self.headers = headers or {}
        self.state = Mock()


def make_call_next(captured):
    async def call_next(req):
        captured.append(get_correlation_id())
        response = Mock()
        response.headers = {}
        return response
    return call_next


class TestCorrelationIdMiddleware:
    """Test CorrelationIdMiddleware functionality"""

    @pytest.mark.asyncio
    async def test_correlation_id_from_header(self):
        """Inbound correlation ID is reused and echoed"""
        middleware = CorrelationIdMiddleware(Mock())
        request = MockRequest({"X-Correlation-ID": "test-correlation-123"})
        captured = []

        response = await middleware.dispatch(request, make_call_next(captured))

        assert captured == ["test-correlation-123"]
        assert response.headers["X-Correlation-ID"] == "test-correlation-123"
        assert request.state.correlation_id == "test-correlation-123"

    @pytest.mark.asyncio
    async def test_correlation_id_generated(self):
        """A UUID is generated when the header is absent"""
        middleware = CorrelationIdMiddleware(Mock())
        captured = []

        response = await middleware.dispatch(MockRequest(), make_call_next(captured))

        generated_id = captured[0]
        assert generated_id
        assert response.headers["X-Correlation-ID"] == generated_id
        assert uuid.UUID(generated_id)

    @pytest.mark.asyncio
    async def test_oversized_correlation_id_replaced(self):
        middleware = CorrelationIdMiddleware(Mock())
        oversized = "x" * (MAX_CORRELATION_ID_LENGTH + 1)
        captured = []

        await middleware.dispatch(MockRequest({"X-Correlation-ID": oversized}), make_call_next(captured))

        assert captured[0] != oversized
        assert uuid.UUID(captured[0])

    @pytest.mark.asyncio
    async def test_custom_header_name(self):
        middleware = CorrelationIdMiddleware(Mock(), header_name="X-Request-ID")
        captured = []

        response = await middleware.dispatch(
            MockRequest({"X-Request-ID": "req-1"}), make_call_next(captured)
        )

        assert captured == ["req-1"]
        assert response.headers["X-Request-ID"] == "req-1"

    def test_set_and_get_correlation_id(self):
        """Test setting and getting correlation ID"""
        set_correlation_id("test-correlation-456")
        assert get_correlation_id() == "test-correlation-456"

    def test_get_correlation_id_none(self):
        """Test getting correlation ID returns None when not set"""
        set_correlation_id(None)
        assert get_correlation_id() is None
