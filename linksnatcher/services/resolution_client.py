"""
Video resolution client for LinkSnatcher.

This module forwards a NormalizedTarget to the snap-video3 RapidAPI service
and decodes the answer into a ResolutionResult. Exactly one request is made
per call: there is no retry, no backoff and no timeout override.
"""

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from linksnatcher.core.exceptions import ResolutionFailedError, InvalidResponseShapeError
from linksnatcher.models.video import ResolutionResult
from linksnatcher.services.target_validator import NormalizedTarget


# Configure logging
logger = logging.getLogger(__name__)

DEFAULT_API_HOST = "snap-video3.p.rapidapi.com"
DEFAULT_ENDPOINT = f"https://{DEFAULT_API_HOST}/download"


class ResolutionClient:
    """
    Client for the external video resolution API.

    The service credential is injected at construction so the client never
    reads process configuration itself.
    """

    def __init__(
        self,
        api_key: str,
        api_host: str = DEFAULT_API_HOST,
        endpoint: str = DEFAULT_ENDPOINT,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the resolution client.

        Args:
            api_key: RapidAPI key, may be empty
            api_host: Value of the X-RapidAPI-Host header
            endpoint: URL the form is posted to
            transport: Optional httpx transport, used by tests
        """
        self.api_key = api_key
        self.api_host = api_host
        self.endpoint = endpoint
        self._transport = transport

    def _build_headers(self) -> dict:
        return {
            "X-RapidAPI-Key": self.api_key,
            "X-RapidAPI-Host": self.api_host,
            "Content-Type": "application/x-www-form-urlencoded",
        }

    async def resolve(self, target: NormalizedTarget) -> ResolutionResult:
        """
        Resolve a video URL into its metadata and download options.

        Args:
            target: Validated URL to resolve

        Returns:
            ResolutionResult decoded from the API response

        Raises:
            ResolutionFailedError: Network failure or non-2xx answer
            InvalidResponseShapeError: 2xx answer that is not a result object
        """
        logger.info(f"Making API request with URL: {target.url}")

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    self.endpoint,
                    headers=self._build_headers(),
                    data={"url": target.url},
                )
        except httpx.HTTPError as e:
            logger.error(f"Error fetching video details for {target.url}: {e!r}")
            raise ResolutionFailedError(str(e) or "Unknown error")

        logger.info(f"API responded with status {response.status_code} for {target.url}")

        if not response.is_success:
            error_data = self._parse_json(response)
            logger.error(f"API Error Response: {error_data}")
            message = None
            if isinstance(error_data, dict) and error_data.get("message"):
                message = str(error_data["message"])
            raise ResolutionFailedError(
                message or f"API Error: {response.status_code} {response.reason_phrase}",
                status=response.status_code,
            )

        payload = self._parse_json(response)
        logger.debug(f"API Response: {payload}")
        return self.decode(payload)

    @staticmethod
    def _parse_json(response: httpx.Response) -> Any:
        """Parse a JSON body, returning None when it is not valid JSON."""
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def decode(payload: Any) -> ResolutionResult:
        """
        Validate a parsed response body against the result schema.

        Raises:
            InvalidResponseShapeError: The payload is not an object or does
                not match the schema
        """
        if not isinstance(payload, dict):
            raise InvalidResponseShapeError(reason=f"expected an object, got {type(payload).__name__}")

        try:
            return ResolutionResult.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"Response failed schema validation: {e}")
            raise InvalidResponseShapeError(reason=f"{e.error_count()} invalid field(s)")
