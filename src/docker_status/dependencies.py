"""FastAPI dependencies shared by the routers."""

from __future__ import annotations

from fastapi import Depends, Request

from docker_status.config import Settings, get_settings
from docker_status.services.aggregator import ContainerAggregator
from docker_status.services.daemon import DaemonClient
from docker_status.services.lifecycle import LifecycleCommander


def base_url_for(request: Request, port: int) -> str:
    """Scheme and host the browser used, minus the server's own listening port.

    Published container ports are appended to this to build their links.
    """
    scheme = "https" if request.url.scheme in ("https", "wss") else "http"
    host = request.headers.get("host", request.url.netloc)
    return f"{scheme}://{host.removesuffix(f':{port}')}"


def get_base_url(request: Request, settings: Settings = Depends(get_settings)) -> str:
    return base_url_for(request, settings.port)


def get_daemon(request: Request) -> DaemonClient:
    return request.app.state.daemon


def get_aggregator(daemon: DaemonClient = Depends(get_daemon)) -> ContainerAggregator:
    return ContainerAggregator(daemon)


def get_commander(daemon: DaemonClient = Depends(get_daemon)) -> LifecycleCommander:
    return LifecycleCommander(daemon)
