"""
Error handling for LinkSnatcher.

This module converts errors raised by the JSON API into the shared error
shape, with logging. Application and unexpected exceptions are caught by
ErrorHandlingMiddleware; HTTP and request validation errors are converted by
exception handlers registered with ``register_error_handlers``. The landing
page handles its own errors and never relies on this module.
"""

import time
import logging
import traceback
from typing import Any, Dict
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from linksnatcher.core.exceptions import LinkSnatcherException, InternalError, ErrorCode


logger = logging.getLogger(__name__)


def _elapsed_ms(request: Request) -> float:
    start_time = getattr(request.state, "start_time", None) or time.time()
    return round((time.time() - start_time) * 1000, 2)


def _error_response(status_code: int, content: Dict[str, Any], request: Request) -> JSONResponse:
    content["response_time_ms"] = _elapsed_ms(request)
    return JSONResponse(status_code=status_code, content=content)


def map_http_status_to_error_code(status_code: int) -> ErrorCode:
    """Map HTTP status codes to error codes."""
    mapping = {
        400: ErrorCode.VALIDATION_ERROR,
        404: ErrorCode.NOT_FOUND,
        405: ErrorCode.NOT_FOUND,
        422: ErrorCode.VALIDATION_ERROR,
        502: ErrorCode.RESOLUTION_FAILED,
    }
    return mapping.get(status_code, ErrorCode.INTERNAL_ERROR)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for handling application errors with consistent formatting.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process request and handle any errors that occur.

        Args:
            request: FastAPI request object
            call_next: Next middleware/endpoint in the chain

        Returns:
            Response object with error handling applied
        """
        request.state.start_time = time.time()

        try:
            return await call_next(request)

        except LinkSnatcherException as e:
            return self._handle_app_exception(request, e)

        except Exception as e:
            return self._handle_unexpected_exception(request, e)

    def _handle_app_exception(self, request: Request, exc: LinkSnatcherException) -> JSONResponse:
        """Handle LinkSnatcher exceptions."""
        log_data = {
            "error_code": exc.error_code.value,
            "error_message": exc.message,
            "path": request.url.path,
            "method": request.method,
        }

        if exc.status_code >= 500:
            logger.error(f"LinkSnatcher error: {exc.message}", extra=log_data)
        else:
            logger.warning(f"LinkSnatcher error: {exc.message}", extra=log_data)

        return _error_response(exc.status_code, exc.to_dict(), request)

    def _handle_unexpected_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.error(
            f"Unexpected error: {str(exc)}",
            extra={
                "path": request.url.path,
                "method": request.method,
                "traceback": traceback.format_exc()
            }
        )

        return _error_response(500, InternalError(reason=str(exc)).to_dict(), request)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions such as unknown routes."""
    logger.warning(
        f"HTTP exception: {exc.detail}",
        extra={"status_code": exc.status_code, "path": request.url.path, "method": request.method}
    )

    return _error_response(
        exc.status_code,
        {
            "success": False,
            "error": map_http_status_to_error_code(exc.status_code).value,
            "message": str(exc.detail),
            "suggestion": "Please check your request and try again",
            "details": {},
        },
        request,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors."""
    # Report the first error only
    error_detail = exc.errors()[0] if exc.errors() else {}
    field_name = error_detail.get('loc', ['unknown'])[-1] if error_detail.get('loc') else 'unknown'
    error_msg = error_detail.get('msg', 'Validation error')

    logger.warning(
        f"Validation error: {error_msg}",
        extra={"field": field_name, "path": request.url.path, "method": request.method}
    )

    return _error_response(
        422,
        {
            "success": False,
            "error": ErrorCode.VALIDATION_ERROR.value,
            "message": f"Invalid {field_name}: {error_msg}",
            "suggestion": "Please check your input and try again",
            "details": {"field": str(field_name)},
        },
        request,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the error middleware and exception handlers on an app."""
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
