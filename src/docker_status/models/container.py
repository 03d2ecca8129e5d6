"""Raw container records as returned by the Docker ``/containers/json`` API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PortMapping(BaseModel):
    """One entry of a container's ``Ports`` list."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    private_port: int = Field(default=0, alias="PrivatePort")
    public_port: int = Field(default=0, alias="PublicPort")
    type: str = Field(default="tcp", alias="Type")
    ip: str = Field(default="", alias="IP")


class RawContainer(BaseModel):
    """A container summary, read-only to everything but the daemon client."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(alias="Id")
    names: list[str] = Field(default_factory=list, alias="Names")
    state: str = Field(default="", alias="State")
    labels: dict[str, str] = Field(default_factory=dict, alias="Labels")
    ports: list[PortMapping] = Field(default_factory=list, alias="Ports")

    # The daemon sends JSON null instead of empty collections
    @field_validator("names", "ports", mode="before")
    @classmethod
    def _null_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("labels", mode="before")
    @classmethod
    def _null_labels(cls, value: Any) -> Any:
        return {} if value is None else value
