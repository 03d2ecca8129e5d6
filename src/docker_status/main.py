"""FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from docker_status import __version__
from docker_status.config import get_settings
from docker_status.errors import DockerStatusError
from docker_status.routers import containers, dashboard, health
from docker_status.services.daemon import DaemonClient

log = logging.getLogger(__name__)


def create_app(daemon: DaemonClient | None = None) -> FastAPI:
    """Build the app; without ``daemon`` one is connected at startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = daemon is None
        if owned:
            app.state.daemon = DaemonClient.connect(get_settings().docker_host)
            log.info("Connected to Docker daemon")
        try:
            yield
        finally:
            if owned:
                app.state.daemon.close()

    app = FastAPI(
        title="Docker Status",
        description="Docker containers grouped by compose project",
        version=__version__,
        lifespan=lifespan,
    )
    if daemon is not None:
        app.state.daemon = daemon

    app.include_router(dashboard.router)
    app.include_router(containers.router)
    app.include_router(health.router)

    @app.exception_handler(DockerStatusError)
    async def docker_status_error_handler(request: Request, exc: DockerStatusError):
        log.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    return app


app = create_app()
