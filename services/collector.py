# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Port collection from Docker container listings (``/containers/json`` shape)."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import yaml
from pydantic import TypeAdapter, ValidationError
from yaml import YAMLError

from models import ContainerRecord, PortDataset, PortItem

logger = logging.getLogger(__name__)

# axis floor so a host with only low ports still gets a readable scale
MIN_DECLARED_MAX = 1024

_CONTAINER_LIST = TypeAdapter(list[ContainerRecord])


class SnapshotError(Exception):
    """Raised when a container snapshot cannot be read or validated."""


def load_snapshot(raw: str) -> list[ContainerRecord]:
    try:
        data = yaml.safe_load(raw)
    except YAMLError as exc:
        raise SnapshotError(f"YAML parse error: {exc}") from exc
    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("containers", [])
    try:
        return _CONTAINER_LIST.validate_python(data)
    except ValidationError as exc:
        raise SnapshotError(
            f"Validation error: {exc.error_count()} error(s): {exc.errors()[0]['msg']}"
        ) from exc


def _exposed_port(private_port: int, public_port: int) -> int | None:
    if public_port > 0:
        return public_port
    if private_port > 0:
        return private_port
    return None


def collect_ports(containers: Iterable[ContainerRecord]) -> PortDataset:
    items: list[PortItem] = []
    owners: dict[int, str] = {}
    max_port = 0

    for container in containers:
        for mapping in container.ports:
            port = _exposed_port(mapping.private_port, mapping.public_port)
            if port is None:
                continue
            owner = owners.get(port)
            if owner == container.short_id:
                continue
            if owner is not None:
                logger.warning(
                    "port %d of %s already owned by container %s; skipping",
                    port,
                    container.name,
                    owner,
                )
                continue
            owners[port] = container.short_id
            items.append(
                PortItem(
                    value=port,
                    owner_id=container.short_id,
                    owner_label=container.name,
                    owner_image=container.image,
                )
            )
            max_port = max(max_port, port)

    logger.info("collected %d port(s) from container snapshot", len(items))
    return PortDataset(items=items, declared_max=max(max_port, MIN_DECLARED_MAX))


def read_snapshot_file(path: str | Path) -> PortDataset:
    snapshot = Path(path)
    try:
        raw = snapshot.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotError(f"cannot read snapshot {snapshot}: {exc.strerror}") from exc
    return collect_ports(load_snapshot(raw))
