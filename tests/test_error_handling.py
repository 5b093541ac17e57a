"""
Unit tests for the error handling system.

Tests the exception hierarchy, its JSON serialization and the error
middleware and exception handlers.
"""

from fastapi import FastAPI, Query
from fastapi.testclient import TestClient

from linksnatcher.core.exceptions import (
    LinkSnatcherException, ErrorCode, MissingInputError, InvalidSchemeError,
    UnsupportedSourceError, ResolutionFailedError, InvalidResponseShapeError,
    InternalError
)
from linksnatcher.middleware.error_handler import (
    register_error_handlers, map_http_status_to_error_code
)


class TestLinkSnatcherExceptions:
    """Test custom exception classes."""

    def test_base_exception_creation(self):
        exc = LinkSnatcherException(
            message="Test error",
            error_code=ErrorCode.INTERNAL_ERROR,
            status_code=500,
            suggestion="Try again",
            details={"key": "value"}
        )

        assert str(exc) == "Test error"
        assert exc.message == "Test error"
        assert exc.error_code == ErrorCode.INTERNAL_ERROR
        assert exc.status_code == 500
        assert exc.suggestion == "Try again"
        assert exc.details == {"key": "value"}

    def test_exception_to_dict(self):
        exc = UnsupportedSourceError("https://example.com")

        result = exc.to_dict()

        assert result == {
            "success": False,
            "error": "unsupported_source",
            "message": "Only TikTok, Instagram, and YouTube URLs are supported",
            "suggestion": "Try a link from TikTok, Instagram, or YouTube",
            "details": {"url": "https://example.com"},
        }

    def test_default_suggestion_fallback(self):
        exc = InternalError(reason="boom")
        assert exc.message == "An internal error occurred: boom"
        assert exc.suggestion == "Please try again or contact support if the problem persists"

    def test_status_codes(self):
        assert MissingInputError().status_code == 422
        assert InvalidSchemeError("http://x").status_code == 422
        assert ResolutionFailedError("down").status_code == 502
        assert InvalidResponseShapeError().status_code == 502

    def test_resolution_failed_keeps_message(self):
        exc = ResolutionFailedError("rate limited", status=429)
        assert exc.message == "rate limited"
        assert exc.details == {"upstream_status": 429}

    def test_invalid_response_shape_reason(self):
        exc = InvalidResponseShapeError(reason="expected an object, got list")
        assert exc.message == "Invalid response format from API"
        assert exc.details["reason"] == "expected an object, got list"


def _build_app() -> FastAPI:
    test_app = FastAPI()
    register_error_handlers(test_app)

    @test_app.get("/app-error")
    async def app_error():
        raise ResolutionFailedError("upstream down", status=503)

    @test_app.get("/crash")
    async def crash():
        raise RuntimeError("unexpected")

    @test_app.get("/typed")
    async def typed(count: int = Query(...)):
        return {"count": count}

    return test_app


class TestErrorHandlers:
    """Test the middleware and exception handlers on a throwaway app."""

    def setup_method(self):
        self.client = TestClient(_build_app(), raise_server_exceptions=False)

    def test_app_exception(self):
        response = self.client.get("/app-error")

        assert response.status_code == 502
        data = response.json()
        assert data["success"] is False
        assert data["error"] == "resolution_failed"
        assert data["message"] == "upstream down"
        assert data["details"] == {"upstream_status": 503}
        assert isinstance(data["response_time_ms"], float)

    def test_unexpected_exception(self):
        response = self.client.get("/crash")

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "internal_error"
        assert data["message"] == "An internal error occurred: unexpected"

    def test_validation_error(self):
        response = self.client.get("/typed", params={"count": "many"})

        assert response.status_code == 422
        data = response.json()
        assert data["error"] == "validation_error"
        assert data["details"]["field"] == "count"

    def test_not_found(self):
        response = self.client.get("/does-not-exist")

        assert response.status_code == 404
        data = response.json()
        assert data["error"] == "not_found"
        assert data["message"] == "Not Found"

    def test_status_mapping(self):
        assert map_http_status_to_error_code(404) == ErrorCode.NOT_FOUND
        assert map_http_status_to_error_code(502) == ErrorCode.RESOLUTION_FAILED
        assert map_http_status_to_error_code(418) == ErrorCode.INTERNAL_ERROR
