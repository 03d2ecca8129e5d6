"""Raw container -> public ContainerView."""

from __future__ import annotations

from docker_status.models import ContainerView, RawContainer


def display_name(names: list[str]) -> str:
    """Join the daemon's names and drop the leading "/" it prefixes them with.

    An empty name list gives an empty name.
    """
    joined = " ".join(names)
    return joined[1:]


def port_urls(container: RawContainer, base_url: str) -> list[str]:
    return [
        f"{base_url}:{p.public_port}"
        for p in container.ports
        if p.public_port != 0
    ]


def project_container(container: RawContainer, base_url: str) -> ContainerView:
    return ContainerView(
        id=container.id,
        name=display_name(container.names),
        status=container.state,
        ports=port_urls(container, base_url),
    )
