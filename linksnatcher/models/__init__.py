"""
Data models package for LinkSnatcher.

This package contains the Pydantic models decoded from the video resolution API.
"""

from .video import MediaOption, ResolutionResult, scalar_to_display

__all__ = [
    'MediaOption',
    'ResolutionResult',
    'scalar_to_display',
]
