# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Input models and validation for portline port datasets and container snapshots."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

MAX_PORT = 65535


class PortItem(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    value: int = Field(ge=0, le=MAX_PORT)
    owner_id: str
    owner_label: str
    owner_image: str = ""


class PortDataset(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    items: list[PortItem] = Field(default_factory=list)
    declared_max: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def validate_items(self) -> "PortDataset":
        values = [item.value for item in self.items]
        if len(set(values)) != len(values):
            duplicates = sorted({v for v in values if values.count(v) > 1})
            raise ValueError(f"port values must be unique; duplicated: {duplicates}")
        if values and self.declared_max < max(values):
            raise ValueError(
                f"declared_max={self.declared_max} is below the largest port {max(values)}"
            )
        return self


class ContainerPort(BaseModel):
    """One entry of a container's ``Ports`` list as reported by the Docker Engine API."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    private_port: int = Field(default=0, ge=0, le=MAX_PORT, alias="PrivatePort")
    public_port: int = Field(default=0, ge=0, le=MAX_PORT, alias="PublicPort")
    type: str = Field(default="tcp", alias="Type")
    ip: str | None = Field(default=None, alias="IP")


class ContainerRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(alias="Id", min_length=1)
    names: list[str] = Field(alias="Names", min_length=1)
    image: str = Field(default="", alias="Image")
    ports: list[ContainerPort] = Field(default_factory=list, alias="Ports")

    @property
    def name(self) -> str:
        return self.names[0].removeprefix("/")

    @property
    def short_id(self) -> str:
        return self.id[:12]
