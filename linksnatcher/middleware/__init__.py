"""
Middleware package for LinkSnatcher.

This package contains the error handling middleware and exception handlers.
"""

from .error_handler import ErrorHandlingMiddleware, register_error_handlers

__all__ = ['ErrorHandlingMiddleware', 'register_error_handlers']
