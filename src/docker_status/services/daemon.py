"""Docker daemon client built on the docker SDK low-level API."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

import docker
import requests

from docker_status.errors import ContainerNotFoundError, DaemonError, DaemonUnavailableError
from docker_status.models import RawContainer


@contextmanager
def _daemon_call() -> Generator[None, None, None]:
    """Translate SDK and transport errors into docker-status exceptions."""
    try:
        yield
    except docker.errors.NotFound as exc:
        raise ContainerNotFoundError(str(exc)) from exc
    except docker.errors.DockerException as exc:
        raise DaemonError(str(exc)) from exc
    except requests.exceptions.ConnectionError as exc:
        raise DaemonUnavailableError(f"Docker unavailable: {exc}") from exc
    # Timeouts and other transport failures
    except requests.exceptions.RequestException as exc:
        raise DaemonError(str(exc)) from exc


class DaemonClient:
    """Thin wrapper over ``docker.DockerClient`` exposing what the dashboard needs.

    One instance is shared by every request; the SDK client is safe to use
    from the server's worker threads.
    """

    def __init__(self, client: docker.DockerClient):
        self._client = client

    @classmethod
    def connect(cls, base_url: str | None = None) -> DaemonClient:
        """Connect to ``base_url``, or to the daemon described by DOCKER_HOST."""
        try:
            if base_url:
                client = docker.DockerClient(base_url=base_url)
            else:
                client = docker.from_env()
        except docker.errors.DockerException as exc:
            raise DaemonUnavailableError(f"Docker unavailable: {exc}") from exc
        return cls(client)

    def list_containers(
        self, include_stopped: bool = True, container_id: str | None = None
    ) -> list[RawContainer]:
        filters = {"id": container_id} if container_id else None
        with _daemon_call():
            records = self._client.api.containers(all=include_stopped, filters=filters)
        return [RawContainer.model_validate(r) for r in records]

    def start_container(self, container_id: str) -> None:
        with _daemon_call():
            self._client.api.start(container_id)

    def stop_container(self, container_id: str, timeout: int) -> None:
        with _daemon_call():
            self._client.api.stop(container_id, timeout=timeout)

    def remove_container(self, container_id: str) -> None:
        with _daemon_call():
            self._client.api.remove_container(container_id)

    def ping(self) -> bool:
        with _daemon_call():
            return self._client.ping()

    def close(self) -> None:
        self._client.close()
