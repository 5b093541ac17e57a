"""
Resolve API endpoint for LinkSnatcher.

This module provides GET /api/v1/resolve, the JSON counterpart of the
landing page. Errors are raised as LinkSnatcher exceptions and rendered by
the error handling middleware.
"""

import time
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from linksnatcher.models.video import ResolutionResult
from linksnatcher.services.resolution_client import ResolutionClient
from linksnatcher.services.target_validator import select_raw_input, validate_target
from linksnatcher.api.dependencies import get_resolution_client


# Configure logging
logger = logging.getLogger(__name__)

# Create API router
router = APIRouter(prefix="/api/v1", tags=["resolve"])


class ResolveResponse(BaseModel):
    """Response model for resolve endpoint."""

    success: bool = Field(..., description="Whether the request was successful")
    platform: str = Field(..., description="Platform detected from the URL")
    data: ResolutionResult = Field(..., description="Resolved video")
    response_time_ms: float = Field(..., description="Response time in milliseconds")


class ErrorResponse(BaseModel):
    """Error response model."""

    success: bool = Field(False, description="Always false for errors")
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Human-readable error message")
    suggestion: Optional[str] = Field(None, description="Suggested action for the user")
    response_time_ms: float = Field(..., description="Response time in milliseconds")


@router.get(
    "/resolve",
    response_model=ResolveResponse,
    responses={
        422: {"model": ErrorResponse, "description": "Missing, non-HTTPS or unsupported URL"},
        502: {"model": ErrorResponse, "description": "Video resolution API failed"},
    },
    summary="Resolve a video URL",
    description="Validate a TikTok, Instagram or YouTube URL and return its download options."
)
async def resolve_video(
    url: Optional[List[str]] = Query(None, description="Video URL to resolve"),
    client: ResolutionClient = Depends(get_resolution_client)
) -> JSONResponse:
    """
    Resolve a video URL into metadata and download options.

    Args:
        url: The ``url`` query parameter, possibly repeated
        client: ResolutionClient dependency

    Returns:
        JSONResponse with the resolved video
    """
    start_time = time.time()

    target = validate_target(select_raw_input(url))
    result = await client.resolve(target)

    response_time = (time.time() - start_time) * 1000
    logger.info(f"Resolved {target.url} with {len(result.medias)} option(s) in {response_time:.2f}ms")

    response = ResolveResponse(
        success=True,
        platform=target.platform,
        data=result,
        response_time_ms=round(response_time, 2)
    )
    return JSONResponse(status_code=200, content=response.model_dump(by_alias=True))
