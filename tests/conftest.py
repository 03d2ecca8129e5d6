"""Shared test fixtures."""

from __future__ import annotations

from typing import Any, Callable
from unittest.mock import MagicMock

import pytest

from docker_status.models import RawContainer
from docker_status.services.daemon import DaemonClient


def _record(
    id: str,
    name: str | None = None,
    state: str = "running",
    project: str | None = None,
    config_file: str | None = None,
    config_dir: str | None = None,
    public_ports: list[int] | None = None,
) -> dict[str, Any]:
    """Build a ``/containers/json`` entry the way the daemon returns it."""
    labels: dict[str, str] = {}
    if project is not None:
        labels["com.docker.compose.project"] = project
    if config_file is not None:
        labels["com.docker.compose.project.config_files"] = config_file
    if config_dir is not None:
        labels["com.docker.compose.project.working_dir"] = config_dir
    ports = []
    for i, public in enumerate(public_ports or []):
        port: dict[str, Any] = {"PrivatePort": 8000 + i, "Type": "tcp"}
        if public:
            port["IP"] = "0.0.0.0"
            port["PublicPort"] = public
        ports.append(port)
    return {
        "Id": id,
        "Names": [f"/{name or id}"],
        "Image": "nginx:1.25-alpine",
        "State": state,
        "Status": "Up 2 hours" if state == "running" else "Exited (0) 1 minute ago",
        "Labels": labels,
        "Ports": ports,
    }


@pytest.fixture
def make_record() -> Callable[..., dict[str, Any]]:
    return _record


@pytest.fixture
def make_raw() -> Callable[..., RawContainer]:
    def factory(id: str, **kwargs: Any) -> RawContainer:
        return RawContainer.model_validate(_record(id, **kwargs))

    return factory


@pytest.fixture
def daemon() -> MagicMock:
    """A DaemonClient stand-in; configure return values per test."""
    mock = MagicMock(spec=DaemonClient)
    mock.list_containers.return_value = []
    mock.ping.return_value = True
    return mock
