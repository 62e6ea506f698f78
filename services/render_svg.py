# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""SVG rendering of a port layout along a horizontal or vertical axis."""

from __future__ import annotations

from html import escape
from typing import Any

from services.layout import TOWARD_ORIGIN, Layout

PLOT_MARGIN = 40
PLOT_LENGTH = 920
AXIS_EDGE = 130
MARKER_OFFSET = -105
CROSS_EXTENT = AXIS_EDGE + 190
RANGE_BAR_THICKNESS = 8
DOT_RADIUS = 5

KIND_COLORS = {
    "axis": "#334155",
    "axis-marker": "#64748b",
    "range-connector": "#0ea5e9",
    "range-bar": "#0ea5e9",
    "range-label": "#0f172a",
    "port-connector": "#94a3b8",
    "port-dot": "#2563eb",
    "port-dot-up": "#ea580c",
    "port-label": "#0f172a",
}

EMPTY_CAPTION = "No containers with exposed ports found"


def _point(layout: Layout, position: float, offset: float) -> tuple[float, float]:
    along = PLOT_MARGIN + position * PLOT_LENGTH / 100
    across = AXIS_EDGE + offset
    if layout.orientation == "horizontal":
        return along, across
    return across, along


def _title(hover: dict[str, str] | None) -> str:
    if not hover:
        return ""
    lines = [
        f"Port {hover['display_value']}",
        f"Container: {hover['owner_label']}",
        f"Image: {hover['owner_image']}",
        f"ID: {hover['owner_id']}",
    ]
    text = "\n".join(lines)
    return f"<title>{escape(text)}</title>"


def _line(
    layout: Layout, position: float, start: float, end: float, color: str, inner: str = ""
) -> str:
    x1, y1 = _point(layout, position, start)
    x2, y2 = _point(layout, position, end)
    return (
        f'<line x1="{x1:.2f}" y1="{y1:.2f}" x2="{x2:.2f}" y2="{y2:.2f}" '
        f'stroke="{color}" stroke-width="2">{inner}</line>'
    )


def _text(layout: Layout, position: float, offset: float, text: str, color: str) -> str:
    x, y = _point(layout, position, offset)
    anchor = "middle" if layout.orientation == "horizontal" else "start"
    return (
        f'<text x="{x:.2f}" y="{y + 4:.2f}" font-size="11" text-anchor="{anchor}" '
        f'fill="{color}">{escape(text)}</text>'
    )


def _render_instruction(layout: Layout, instruction: dict[str, Any]) -> str:
    kind = instruction["kind"]
    position = instruction["position"]
    title = _title(instruction.get("hover"))
    if kind == "axis-marker":
        tick = _line(layout, position, -6, 0, KIND_COLORS["axis"])
        weight = ' font-weight="bold"' if instruction["minmax"] else ""
        x, y = _point(layout, position, MARKER_OFFSET)
        return (
            f'{tick}<text x="{x:.2f}" y="{y:.2f}" font-size="10" text-anchor="middle"'
            f'{weight} fill="{KIND_COLORS[kind]}">{escape(instruction["text"])}</text>'
        )
    if kind in {"range-connector", "port-connector"}:
        offset = instruction["offset"]
        return _line(
            layout, position, offset, offset + instruction["length"], KIND_COLORS[kind], title
        )
    if kind == "range-bar":
        x1, y1 = _point(layout, position, instruction["offset"] - RANGE_BAR_THICKNESS / 2)
        x2, y2 = _point(
            layout,
            position + instruction["span"],
            instruction["offset"] + RANGE_BAR_THICKNESS / 2,
        )
        return (
            f'<rect x="{min(x1, x2):.2f}" y="{min(y1, y2):.2f}" width="{abs(x2 - x1):.2f}" '
            f'height="{abs(y2 - y1):.2f}" rx="4" fill="{KIND_COLORS[kind]}">{title}</rect>'
        )
    if kind == "port-dot":
        cx, cy = _point(layout, position, instruction["offset"])
        color = KIND_COLORS["port-dot-up" if instruction["direction"] == TOWARD_ORIGIN else kind]
        return (
            f'<circle cx="{cx:.2f}" cy="{cy:.2f}" r="{DOT_RADIUS}" fill="{color}" '
            f'data-port="{instruction["value"]}">{title}</circle>'
        )
    if kind in {"range-label", "port-label"}:
        return _text(layout, position, instruction["offset"], instruction["text"], KIND_COLORS[kind])
    raise ValueError(f"unknown instruction kind: {kind!r}")


def render_layout_svg(layout: Layout, caption: str | None = None) -> str:
    horizontal = layout.orientation == "horizontal"
    full = PLOT_LENGTH + 2 * PLOT_MARGIN
    width, height = (full, CROSS_EXTENT) if horizontal else (CROSS_EXTENT, full)
    x1, y1 = _point(layout, 0, 0)
    x2, y2 = _point(layout, 100, 0)
    parts = [
        f'<line x1="{x1:.2f}" y1="{y1:.2f}" x2="{x2:.2f}" y2="{y2:.2f}" '
        f'stroke="{KIND_COLORS["axis"]}" stroke-width="3"/>'
    ]
    parts.extend(_render_instruction(layout, instruction) for instruction in layout.instructions)
    if not layout.ranges and not layout.placements:
        parts.append(
            f'<text x="{width / 2:.2f}" y="{height / 2:.2f}" font-size="14" '
            f'text-anchor="middle" fill="#64748b">{escape(EMPTY_CAPTION)}</text>'
        )
    if caption:
        parts.append(f'<text x="10" y="15" font-size="12">{escape(caption)}</text>')
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'data-orientation="{layout.orientation}">{"".join(parts)}</svg>'
    )
