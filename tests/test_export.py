# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
from __future__ import annotations

import csv
import io
import json

from conftest import dataset

from services.export import layout_json, layout_result, ports_csv, ports_payload
from services.layout import build_layout


def test_ports_payload_shape() -> None:
    payload = ports_payload(dataset((80, "web"), declared_max=1024))
    assert payload == {
        "ports": [
            {
                "port": 80,
                "containerName": "web-1",
                "imageName": "nginx:latest",
                "containerId": "web",
            }
        ],
        "maxPort": 1024,
    }


def test_layout_result_contains_styles_and_scale() -> None:
    layout = build_layout(dataset((80, "web"), (81, "web"), (82, "web"), (500, "db")))
    result = layout_result(layout)
    assert result["scale"] == {"ceiling": 1000, "ticks": [1000]}
    assert result["ranges"][0]["count"] == 3
    assert result["placements"] == [
        {"value": 500, "owner_id": "db", "direction": "away_from_origin", "tier": 0}
    ]
    assert all("style" in i for i in result["instructions"])


def test_layout_json_is_valid_json() -> None:
    layout = build_layout(dataset((80, "web")), "vertical")
    parsed = json.loads(layout_json(layout))
    assert parsed["orientation"] == "vertical"
    assert parsed["instructions"][0]["style"] == {"top": "0.0%"}


def test_ports_csv_marks_range_members() -> None:
    data = dataset((82, "web"), (80, "web"), (81, "web"), (443, "web"))
    rows = list(csv.DictReader(io.StringIO(ports_csv(data, build_layout(data)))))
    assert [(r["port"], r["placement"]) for r in rows] == [
        ("80", "range"),
        ("81", "range"),
        ("82", "range"),
        ("443", "singleton"),
    ]
