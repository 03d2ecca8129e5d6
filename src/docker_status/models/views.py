"""View models handed to the HTTP layer and the CLI."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ContainerView(BaseModel):
    """Public view of a single container."""

    id: str
    name: str
    status: str
    ports: list[str] = Field(default_factory=list)


class GroupView(BaseModel):
    """A compose project and its member containers."""

    name: str
    config_file: str = Field(default="", exclude=True)
    config_dir: str = Field(default="", exclude=True)
    containers: list[ContainerView] = Field(default_factory=list)


class AggregateResult(BaseModel):
    """Standalone containers sorted by name, plus compose projects in first-seen order."""

    model_config = ConfigDict(populate_by_name=True)

    standalone: list[ContainerView] = Field(default_factory=list, alias="containers")
    groups: list[GroupView] = Field(default_factory=list, alias="services")


class StatusResponse(BaseModel):
    status: str = "ok"
