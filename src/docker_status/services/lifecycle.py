"""Start / stop / remove forwarding with read-back of the affected container."""

from __future__ import annotations

import logging

from docker_status.constants import STOP_TIMEOUT
from docker_status.errors import ContainerNotFoundError
from docker_status.models import ContainerView, StatusResponse
from docker_status.services.daemon import DaemonClient
from docker_status.services.projection import project_container

log = logging.getLogger(__name__)


class LifecycleCommander:
    """Forward lifecycle commands to the daemon, one call each, no retries.

    The daemon's start/stop calls return nothing, so the container is read
    back by exact id afterwards. Another client may remove the container in
    between; the read-back then fails with ContainerNotFoundError and no view
    is returned.
    """

    def __init__(self, daemon: DaemonClient):
        self._daemon = daemon

    def _read_back(self, container_id: str, base_url: str) -> ContainerView:
        found = self._daemon.list_containers(include_stopped=True, container_id=container_id)
        # The daemon's id filter also matches substrings of other ids
        matches = [c for c in found if c.id.startswith(container_id)]
        if not matches:
            raise ContainerNotFoundError("Container not found")
        return project_container(matches[0], base_url)

    def stop(self, container_id: str, base_url: str) -> ContainerView:
        log.info("Stopping container %s (timeout %ss)", container_id, STOP_TIMEOUT)
        self._daemon.stop_container(container_id, timeout=STOP_TIMEOUT)
        return self._read_back(container_id, base_url)

    def start(self, container_id: str, base_url: str) -> ContainerView:
        log.info("Starting container %s", container_id)
        self._daemon.start_container(container_id)
        return self._read_back(container_id, base_url)

    def remove(self, container_id: str) -> StatusResponse:
        log.info("Removing container %s", container_id)
        self._daemon.remove_container(container_id)
        return StatusResponse()
