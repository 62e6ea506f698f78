# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Export helpers for layout JSON, the port API payload, and ports CSV."""

from __future__ import annotations

import csv
import io
import json
from typing import Any

from models import PortDataset
from services.geometry import css_style
from services.layout import Layout

PORT_COLUMNS = [
    "port",
    "placement",
    "owner_id",
    "owner_label",
    "owner_image",
]


def ports_payload(dataset: PortDataset) -> dict[str, Any]:
    return {
        "ports": [
            {
                "port": item.value,
                "containerName": item.owner_label,
                "imageName": item.owner_image,
                "containerId": item.owner_id,
            }
            for item in dataset.items
        ],
        "maxPort": dataset.declared_max,
    }


def layout_result(layout: Layout) -> dict[str, Any]:
    return {
        "orientation": layout.orientation,
        "scale": {"ceiling": layout.scale.ceiling, "ticks": list(layout.scale.ticks)},
        "ranges": [r.to_dict() for r in layout.ranges],
        "placements": [p.to_dict() for p in layout.placements],
        "instructions": [
            {**instruction, "style": css_style(instruction, layout.orientation)}
            for instruction in layout.instructions
        ],
    }


def layout_json(layout: Layout) -> str:
    return json.dumps(layout_result(layout), ensure_ascii=False, indent=2, sort_keys=True)


def ports_csv(dataset: PortDataset, layout: Layout) -> str:
    """One row per port, sorted by port, noting whether it was drawn in a range."""
    in_range = {
        value
        for port_range in layout.ranges
        for value in range(port_range.start_value, port_range.end_value + 1)
    }
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=PORT_COLUMNS)
    writer.writeheader()
    for item in sorted(dataset.items, key=lambda i: i.value):
        writer.writerow(
            {
                "port": item.value,
                "placement": "range" if item.value in in_range else "singleton",
                "owner_id": item.owner_id,
                "owner_label": item.owner_label,
                "owner_image": item.owner_image,
            }
        )
    return buf.getvalue()
