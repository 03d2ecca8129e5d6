"""Container listing and lifecycle endpoints backed by live Docker queries."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from docker_status.dependencies import get_aggregator, get_base_url, get_commander
from docker_status.models import AggregateResult, ContainerView, StatusResponse
from docker_status.services.aggregator import ContainerAggregator
from docker_status.services.lifecycle import LifecycleCommander

router = APIRouter(tags=["containers"])


@router.get("/containers", response_model=AggregateResult)
def list_containers(
    base_url: str = Depends(get_base_url),
    aggregator: ContainerAggregator = Depends(get_aggregator),
):
    """List all containers, grouped by compose project."""
    return aggregator.collect(base_url)


@router.post("/containers/stop/{container_id}", response_model=ContainerView)
def stop_container(
    container_id: str,
    base_url: str = Depends(get_base_url),
    commander: LifecycleCommander = Depends(get_commander),
):
    """Stop a container and return its state afterwards."""
    return commander.stop(container_id, base_url)


@router.post("/containers/start/{container_id}", response_model=ContainerView)
def start_container(
    container_id: str,
    base_url: str = Depends(get_base_url),
    commander: LifecycleCommander = Depends(get_commander),
):
    """Start a container and return its state afterwards."""
    return commander.start(container_id, base_url)


@router.delete("/containers/{container_id}", response_model=StatusResponse)
def remove_container(
    container_id: str,
    commander: LifecycleCommander = Depends(get_commander),
):
    """Remove a container."""
    return commander.remove(container_id)
