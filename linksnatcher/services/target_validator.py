"""
Request validation and normalization for LinkSnatcher.

This module turns the raw ``url`` query parameter into a NormalizedTarget:
the trimmed URL, guaranteed to use https:// and to mention one of the
supported platforms.

Platform classification is plain substring containment, not host parsing.
It is a convenience filter for the upstream API, not a security boundary.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from linksnatcher.core.exceptions import (
    MissingInputError, InvalidSchemeError, UnsupportedSourceError
)


logger = logging.getLogger(__name__)

REQUIRED_PREFIX = "https://"

# Ordered: the first matching substring names the platform
SOURCE_PATTERNS = (
    ("tiktok.com", "tiktok"),
    ("instagram.com", "instagram"),
    ("youtu.be", "youtube"),
    ("youtube.com", "youtube"),
)


@dataclass(frozen=True)
class NormalizedTarget:
    """A validated URL that is safe to forward to the resolution API."""
    url: str
    platform: str

    def __str__(self) -> str:
        return self.url


def select_raw_input(values: Union[None, str, Sequence[str]]) -> Optional[str]:
    """
    Pick the raw URL out of a query parameter.

    The parameter may be absent, a single string, or repeated; for repeated
    values the first one is used. An absent parameter or a single empty
    value yields None.
    """
    if values is None:
        return None
    if isinstance(values, str):
        return values or None
    if not values:
        return None
    if len(values) == 1 and not values[0]:
        return None
    return values[0]


def detect_source(url: str) -> Optional[str]:
    """Return the platform whose domain appears in the URL, if any."""
    for needle, platform in SOURCE_PATTERNS:
        if needle in url:
            return platform
    return None


def get_supported_sources() -> List[str]:
    """Get list of supported platforms."""
    platforms = []
    for _, platform in SOURCE_PATTERNS:
        if platform not in platforms:
            platforms.append(platform)
    return platforms


def validate_target(raw: Optional[str]) -> NormalizedTarget:
    """
    Validate and normalize a raw URL.

    Args:
        raw: The raw ``url`` parameter, or None when it was not supplied

    Returns:
        NormalizedTarget with the trimmed URL

    Raises:
        MissingInputError: No URL was supplied
        InvalidSchemeError: The URL does not start with https://
        UnsupportedSourceError: The URL mentions no supported platform
    """
    if raw is None:
        raise MissingInputError()

    url = raw.strip()
    if not url.startswith(REQUIRED_PREFIX):
        logger.info(f"Rejected non-HTTPS URL: {url!r}")
        raise InvalidSchemeError(url)

    platform = detect_source(url)
    if platform is None:
        logger.info(f"Rejected unsupported URL: {url!r}")
        raise UnsupportedSourceError(url)

    return NormalizedTarget(url=url, platform=platform)
