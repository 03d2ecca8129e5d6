"""Server-rendered dashboard page."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from docker_status.dependencies import get_aggregator, get_base_url
from docker_status.errors import DockerStatusError
from docker_status.services.aggregator import ContainerAggregator

router = APIRouter(tags=["dashboard"])

log = logging.getLogger(__name__)

_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(_TEMPLATE_DIR))


@router.get("/", response_class=HTMLResponse)
def index(
    request: Request,
    base_url: str = Depends(get_base_url),
    aggregator: ContainerAggregator = Depends(get_aggregator),
):
    """Render the dashboard, or the error page when the daemon call fails."""
    try:
        result = aggregator.collect(base_url)
    except DockerStatusError as exc:
        log.error("Dashboard listing failed: %s", exc)
        return templates.TemplateResponse(
            request, "error.html.j2", {"error": str(exc)}, status_code=500
        )
    return templates.TemplateResponse(
        request, "index.html.j2", {"result": result, "base_url": base_url}
    )
