# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from config import AppSettings
from models import PortDataset, PortItem

API_KEY = "test-key"


def item(value: int, owner: str = "web", image: str = "nginx:latest") -> PortItem:
    return PortItem(value=value, owner_id=owner, owner_label=f"{owner}-1", owner_image=image)


def dataset(*pairs: tuple[int, str], declared_max: int | None = None) -> PortDataset:
    items = [item(value, owner) for value, owner in pairs]
    if declared_max is None:
        declared_max = max((value for value, _ in pairs), default=0)
    return PortDataset(items=items, declared_max=declared_max)


def container(cid: str, name: str, image: str, *ports: tuple[int, int]) -> dict[str, Any]:
    return {
        "Id": cid,
        "Names": [f"/{name}"],
        "Image": image,
        "Ports": [
            {"PrivatePort": private, "PublicPort": public, "Type": "tcp"}
            for private, public in ports
        ],
    }


SNAPSHOT = [
    container("a" * 64, "web", "nginx:1.25", (80, 8080), (443, 8443)),
    container(
        "b" * 64, "ftp", "vsftpd", (21000, 21000), (21001, 21001), (21002, 21002), (21003, 21003)
    ),
    container("c" * 64, "db", "postgres:16", (5432, 0)),
]


@pytest.fixture
def snapshot_path(tmp_path: Path) -> Path:
    path = tmp_path / "containers.yaml"
    path.write_text(yaml.safe_dump(SNAPSHOT), encoding="utf-8")
    return path


@pytest.fixture
def settings(snapshot_path: Path) -> AppSettings:
    return AppSettings(api_key=API_KEY, snapshot_path=str(snapshot_path), log_level="WARNING")


@pytest.fixture
def client(settings: AppSettings):
    from app import create_app

    app = create_app(settings)
    app.config["TESTING"] = True
    return app.test_client()
