"""
Error handling system for LinkSnatcher.

This module provides the exception hierarchy shared by the URL validator,
the resolution client and the HTTP layer, together with the JSON error
shape returned by the API.
"""

from typing import Dict, Any, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for consistent error handling."""

    # Input errors
    MISSING_INPUT = "missing_input"
    INVALID_SCHEME = "invalid_scheme"
    UNSUPPORTED_SOURCE = "unsupported_source"
    VALIDATION_ERROR = "validation_error"

    # Resolution errors
    RESOLUTION_FAILED = "resolution_failed"
    INVALID_RESPONSE_SHAPE = "invalid_response_shape"

    # System errors
    NOT_FOUND = "not_found"
    INTERNAL_ERROR = "internal_error"


class LinkSnatcherException(Exception):
    """
    Base exception class for all LinkSnatcher errors.

    Carries a user-facing message, an error code, the HTTP status the API
    answers with and an actionable suggestion.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        status_code: int = 400,
        suggestion: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize LinkSnatcher exception.

        Args:
            message: Human-readable error message
            error_code: Standardized error code
            status_code: HTTP status code
            suggestion: Actionable suggestion for the user
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.suggestion = suggestion or self._get_default_suggestion()
        self.details = details or {}

    def _get_default_suggestion(self) -> str:
        """Get default suggestion based on error code."""
        suggestions = {
            ErrorCode.MISSING_INPUT: "Paste a video link into the url parameter",
            ErrorCode.INVALID_SCHEME: "Copy the full link including the https:// prefix",
            ErrorCode.UNSUPPORTED_SOURCE: "Try a link from TikTok, Instagram, or YouTube",
            ErrorCode.RESOLUTION_FAILED: "Check that the video is public and try again",
            ErrorCode.INVALID_RESPONSE_SHAPE: "The video service returned unexpected data. Please try again later",
        }
        return suggestions.get(self.error_code, "Please try again or contact support if the problem persists")

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "success": False,
            "error": self.error_code.value,
            "message": self.message,
            "suggestion": self.suggestion,
            "details": self.details
        }


# Input errors
class MissingInputError(LinkSnatcherException):
    """Raised when no URL was supplied. The landing page treats this as the default view."""

    def __init__(self, **kwargs):
        super().__init__(
            message="No video URL was provided",
            error_code=ErrorCode.MISSING_INPUT,
            status_code=422,
            **kwargs
        )


class InvalidSchemeError(LinkSnatcherException):
    """Raised when the URL does not start with https://."""

    def __init__(self, url: str, **kwargs):
        super().__init__(
            message="Please provide a valid HTTPS URL",
            error_code=ErrorCode.INVALID_SCHEME,
            status_code=422,
            **kwargs
        )
        self.details["url"] = url


class UnsupportedSourceError(LinkSnatcherException):
    """Raised when the URL does not belong to a supported platform."""

    def __init__(self, url: str, **kwargs):
        super().__init__(
            message="Only TikTok, Instagram, and YouTube URLs are supported",
            error_code=ErrorCode.UNSUPPORTED_SOURCE,
            status_code=422,
            **kwargs
        )
        self.details["url"] = url


# Resolution errors
class ResolutionFailedError(LinkSnatcherException):
    """Raised when the video resolution API call fails at the network or API level."""

    def __init__(self, message: str, status: Optional[int] = None, **kwargs):
        super().__init__(
            message=message,
            error_code=ErrorCode.RESOLUTION_FAILED,
            status_code=502,
            **kwargs
        )
        if status is not None:
            self.details["upstream_status"] = status


class InvalidResponseShapeError(LinkSnatcherException):
    """Raised when the API answers with a body that is not a valid result object."""

    def __init__(self, reason: Optional[str] = None, **kwargs):
        super().__init__(
            message="Invalid response format from API",
            error_code=ErrorCode.INVALID_RESPONSE_SHAPE,
            status_code=502,
            **kwargs
        )
        if reason:
            self.details["reason"] = reason


# System errors
class InternalError(LinkSnatcherException):
    """Raised for unexpected internal errors."""

    def __init__(self, reason: Optional[str] = None, **kwargs):
        message = "An internal error occurred"
        if reason:
            message += f": {reason}"

        super().__init__(
            message=message,
            error_code=ErrorCode.INTERNAL_ERROR,
            status_code=500,
            **kwargs
        )
        if reason:
            self.details["reason"] = reason
