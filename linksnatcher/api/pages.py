"""
Landing page for LinkSnatcher.

The ``/`` route runs the whole pipeline once per request and renders
exactly one of three views:

- DefaultView: no ``url`` parameter, show the landing form
- ErrorView: invalid input or a failed resolution
- ResultView: the resolved video with its download options
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from linksnatcher.core.exceptions import LinkSnatcherException, MissingInputError
from linksnatcher.models.video import ResolutionResult
from linksnatcher.services.resolution_client import ResolutionClient
from linksnatcher.services.target_validator import (
    NormalizedTarget, select_raw_input, validate_target
)
from linksnatcher.api.dependencies import get_resolution_client


logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

router = APIRouter(tags=["pages"])

GITHUB_URL = "https://github.com/Ankitmohanty2/video_downloader"


@dataclass(frozen=True)
class DefaultView:
    pass


@dataclass(frozen=True)
class ErrorView:
    message: str
    status_code: int


@dataclass(frozen=True)
class ResultView:
    result: ResolutionResult
    target: NormalizedTarget


PageState = Union[DefaultView, ErrorView, ResultView]


async def resolve_page_state(raw: Optional[str], client: ResolutionClient) -> PageState:
    """Run validation and resolution and return the terminal page state."""
    try:
        target = validate_target(raw)
    except MissingInputError:
        return DefaultView()
    except LinkSnatcherException as e:
        return ErrorView(message=e.message, status_code=e.status_code)

    try:
        result = await client.resolve(target)
    except LinkSnatcherException as e:
        logger.error(f"Error fetching video details: {e.message}")
        return ErrorView(message=e.message, status_code=e.status_code)

    return ResultView(result=result, target=target)


def render_default(request: Request, state: DefaultView) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {"github_url": GITHUB_URL}
    )


def render_error(request: Request, state: ErrorView) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "error.html",
        {"github_url": GITHUB_URL, "message": state.message},
        status_code=state.status_code,
    )


def render_result(request: Request, state: ResultView) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "result.html",
        {"github_url": GITHUB_URL, "result": state.result, "original_url": state.target.url},
    )


RENDERERS = {
    DefaultView: render_default,
    ErrorView: render_error,
    ResultView: render_result,
}


def render_state(request: Request, state: PageState) -> HTMLResponse:
    """Dispatch to the render function for the state's variant."""
    return RENDERERS[type(state)](request, state)


@router.get("/", response_class=HTMLResponse, summary="Landing page")
async def home(
    request: Request,
    url: Optional[List[str]] = Query(None, description="Video URL to resolve"),
    client: ResolutionClient = Depends(get_resolution_client)
) -> HTMLResponse:
    """
    Serve the landing page, or the resolved video when ``url`` is given.

    Repeated ``url`` parameters are allowed; the first one is used.
    """
    state = await resolve_page_state(select_raw_input(url), client)
    return render_state(request, state)
