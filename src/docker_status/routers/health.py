"""Daemon health probe."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from docker_status.dependencies import get_daemon
from docker_status.models import StatusResponse
from docker_status.services.daemon import DaemonClient

router = APIRouter(tags=["health"])


@router.get("/health", response_model=StatusResponse)
def health(daemon: DaemonClient = Depends(get_daemon)):
    daemon.ping()
    return StatusResponse()
