"""Group the daemon's container list into standalone containers and compose projects."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from docker_status import labels
from docker_status.models import AggregateResult, ContainerView, GroupView, RawContainer
from docker_status.services.daemon import DaemonClient
from docker_status.services.projection import project_container

log = logging.getLogger(__name__)


def _new_group(name: str, container: RawContainer, base_url: str) -> GroupView:
    return GroupView(
        name=name,
        config_file=labels.config_file(container) or "",
        config_dir=labels.config_dir(container) or "",
        containers=[project_container(container, base_url)],
    )


def aggregate(containers: Iterable[RawContainer], base_url: str) -> AggregateResult:
    """Partition containers by compose project.

    Standalone containers come back sorted by name. Groups keep the order in
    which their project was first seen, and take their config file/dir from
    that first container; later members never overwrite them.
    """
    standalone: list[ContainerView] = []
    groups: dict[str, GroupView] = {}
    seen: list[str] = []

    for container in containers:
        project = labels.project_name(container)
        if project is None:
            standalone.append(project_container(container, base_url))
            continue
        group = groups.get(project)
        if group is None:
            groups[project] = _new_group(project, container, base_url)
            seen.append(project)
        else:
            group.containers.append(project_container(container, base_url))

    return AggregateResult(
        standalone=sorted(standalone, key=lambda c: c.name),
        groups=[groups[name] for name in seen],
    )


class ContainerAggregator:
    """Read path: list every container on the daemon and aggregate it."""

    def __init__(self, daemon: DaemonClient):
        self._daemon = daemon

    def collect(self, base_url: str) -> AggregateResult:
        containers = self._daemon.list_containers(include_stopped=True)
        result = aggregate(containers, base_url)
        log.debug(
            "Aggregated %d containers into %d standalone, %d projects",
            len(containers),
            len(result.standalone),
            len(result.groups),
        )
        return result
