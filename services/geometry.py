# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Geometry emitter turning a resolved layout into positioned primitives.

Positions along the axis are percentages of the axis ceiling. Offsets and
lengths on the perpendicular axis are pixels measured from the axis edge;
negative offsets lie beyond the origin edge.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from services.layout import (
    ORIENTATIONS,
    TOWARD_ORIGIN,
    AxisScale,
    PortRange,
    SingletonPlacement,
)

RANGE_CONNECTOR_LENGTH = 50
RANGE_BAR_OFFSET = {"horizontal": 58, "vertical": 55}
RANGE_LABEL_OFFSET = {"horizontal": 78, "vertical": 75}
RANGE_BAR_LEAD = 1
RANGE_BAR_TAIL = 1

# tier -> (connector length, dot offset, label offset)
AWAY_TIER_GEOMETRY = {
    0: (50, 50, 70),
    1: (90, 90, 110),
    2: (130, 130, 150),
}
TOWARD_GEOMETRY = (50, -50, -70)

AXIS_PROPERTIES = {
    "horizontal": {
        "axis": "x",
        "along": "left",
        "along_size": "width",
        "near": "top",
        "far": "bottom",
        "size": "height",
        "center": "translateX(-50%)",
    },
    "vertical": {
        "axis": "y",
        "along": "top",
        "along_size": "height",
        "near": "left",
        "far": "right",
        "size": "width",
        "center": "translateY(-50%)",
    },
}

CENTERED_KINDS = {"range-label", "port-dot", "port-label"}


def _hover(display_value: str, owner_label: str, owner_image: str, owner_id: str) -> dict[str, str]:
    return {
        "display_value": display_value,
        "owner_label": owner_label,
        "owner_image": owner_image,
        "owner_id": owner_id,
    }


def _axis_marker(axis: str, scale: AxisScale, value: int, minmax: bool) -> dict[str, Any]:
    return {
        "kind": "axis-marker",
        "axis": axis,
        "position": scale.position(value),
        "value": value,
        "text": f"{value:,}",
        "minmax": minmax,
    }


def _range_primitives(
    axis: str, orientation: str, scale: AxisScale, port_range: PortRange
) -> list[dict[str, Any]]:
    start_pos = scale.position(port_range.start_value)
    end_pos = scale.position(port_range.end_value)
    hover = _hover(
        f"{port_range.start_value}-{port_range.end_value} ({port_range.count} ports)",
        port_range.owner_label,
        port_range.owner_image,
        port_range.owner_id,
    )
    connectors = [
        {
            "kind": "range-connector",
            "axis": axis,
            "position": pos,
            "offset": 0,
            "length": RANGE_CONNECTOR_LENGTH,
            "hover": dict(hover),
        }
        for pos in (start_pos, end_pos)
    ]
    bar = {
        "kind": "range-bar",
        "axis": axis,
        "position": start_pos - RANGE_BAR_LEAD,
        "span": end_pos - start_pos + RANGE_BAR_LEAD + RANGE_BAR_TAIL,
        "offset": RANGE_BAR_OFFSET[orientation],
        "hover": dict(hover),
    }
    label = {
        "kind": "range-label",
        "axis": axis,
        "position": (start_pos + end_pos) / 2,
        "offset": RANGE_LABEL_OFFSET[orientation],
        "text": f"{port_range.start_value}-{port_range.end_value}",
    }
    return [*connectors, bar, label]


def _singleton_primitives(
    axis: str, scale: AxisScale, placement: SingletonPlacement
) -> list[dict[str, Any]]:
    item = placement.item
    position = scale.position(item.value)
    if placement.direction == TOWARD_ORIGIN:
        length, dot_offset, label_offset = TOWARD_GEOMETRY
        connector_offset = -length
    else:
        length, dot_offset, label_offset = AWAY_TIER_GEOMETRY[placement.tier]
        connector_offset = 0
    hover = _hover(str(item.value), item.owner_label, item.owner_image, item.owner_id)
    common = {"axis": axis, "position": position, "value": item.value}
    slot = {"direction": placement.direction, "tier": placement.tier}
    return [
        {
            "kind": "port-connector",
            **common,
            "offset": connector_offset,
            "length": length,
            **slot,
            "hover": dict(hover),
        },
        {"kind": "port-dot", **common, "offset": dot_offset, **slot, "hover": dict(hover)},
        {"kind": "port-label", **common, "offset": label_offset, "text": str(item.value)},
    ]


def emit_geometry(
    scale: AxisScale,
    ranges: Sequence[PortRange],
    placements: Sequence[SingletonPlacement],
    orientation: str,
) -> list[dict[str, Any]]:
    if orientation not in ORIENTATIONS:
        raise ValueError(f"unsupported orientation: {orientation!r}; allowed: {list(ORIENTATIONS)}")
    axis = AXIS_PROPERTIES[orientation]["axis"]

    instructions = [_axis_marker(axis, scale, 0, minmax=True)]
    instructions.extend(
        _axis_marker(axis, scale, tick, minmax=False) for tick in scale.ticks if tick < scale.ceiling
    )
    instructions.append(_axis_marker(axis, scale, scale.ceiling, minmax=True))

    for port_range in sorted(ranges, key=lambda r: r.start_value):
        instructions.extend(_range_primitives(axis, orientation, scale, port_range))
    for placement in sorted(placements, key=lambda p: p.item.value):
        instructions.extend(_singleton_primitives(axis, scale, placement))
    return instructions


def _perpendicular(props: dict[str, str], offset: int, length: int | None) -> dict[str, str]:
    if offset >= 0:
        style = {props["near"]: f"{offset}px"}
    else:
        edge = -(offset + (length or 0))
        style = {props["far"]: "100%" if edge == 0 else f"calc(100% + {edge}px)"}
    if length is not None:
        style[props["size"]] = f"{length}px"
    return style


def css_style(instruction: dict[str, Any], orientation: str) -> dict[str, str]:
    """Map an instruction onto the CSS properties a browser shell applies."""
    props = AXIS_PROPERTIES[orientation]
    style = {props["along"]: f"{instruction['position']}%"}
    if "span" in instruction:
        style[props["along_size"]] = f"{instruction['span']}%"
    if "offset" in instruction:
        style.update(_perpendicular(props, instruction["offset"], instruction.get("length")))
    if instruction["kind"] in CENTERED_KINDS:
        style["transform"] = props["center"]
    return style
