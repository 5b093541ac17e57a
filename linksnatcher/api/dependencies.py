"""
Shared FastAPI dependencies for LinkSnatcher routes.
"""

from linksnatcher.core.config import settings
from linksnatcher.services.resolution_client import ResolutionClient


async def get_resolution_client() -> ResolutionClient:
    """Dependency to get a ResolutionClient built from current settings."""
    return ResolutionClient(api_key=settings.rapidapi_key)
