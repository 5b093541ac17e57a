"""
Services package for LinkSnatcher.

This package contains URL validation and the client for the external
video resolution API.
"""

from .target_validator import (
    NormalizedTarget,
    select_raw_input,
    detect_source,
    get_supported_sources,
    validate_target,
)

from .resolution_client import ResolutionClient

__all__ = [
    # Validation
    'NormalizedTarget',
    'select_raw_input',
    'detect_source',
    'get_supported_sources',
    'validate_target',
    # Resolution
    'ResolutionClient',
]
