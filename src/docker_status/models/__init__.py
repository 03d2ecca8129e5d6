"""Pydantic models for raw daemon records and dashboard views."""

from docker_status.models.container import PortMapping, RawContainer
from docker_status.models.views import (
    AggregateResult,
    ContainerView,
    GroupView,
    StatusResponse,
)

__all__ = [
    "AggregateResult",
    "ContainerView",
    "GroupView",
    "PortMapping",
    "RawContainer",
    "StatusResponse",
]
