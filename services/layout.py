# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Deterministic layout engine: axis scale, port ranges and collision tiers."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Literal

from models import PortDataset, PortItem

logger = logging.getLogger(__name__)

ORIENTATIONS = ("horizontal", "vertical")

NICE_BREAKPOINTS = (1000, 2500, 5000, 7500, 10000, 15000, 20000, 25000, 30000, 40000, 50000)
LARGE_SCALE_STEP = 10000
MAX_TICKS = 6
MIN_RANGE_LENGTH = 3

Direction = Literal["toward_origin", "away_from_origin"]
TOWARD_ORIGIN: Direction = "toward_origin"
AWAY_FROM_ORIGIN: Direction = "away_from_origin"
TIER_COUNT = 3
# percent-of-axis distances between neighbouring singletons, as halves of a percent
NEAR_HALF_PERCENTS = 3
CLOSE_HALF_PERCENTS = 6


@dataclass(frozen=True)
class AxisScale:
    ceiling: int
    ticks: tuple[int, ...]

    def position(self, value: int) -> float:
        return value * 100 / self.ceiling


@dataclass(frozen=True)
class PortRange:
    start_value: int
    end_value: int
    owner_id: str
    owner_label: str
    owner_image: str

    @property
    def count(self) -> int:
        return self.end_value - self.start_value + 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "start_value": self.start_value,
            "end_value": self.end_value,
            "count": self.count,
            "owner_id": self.owner_id,
            "owner_label": self.owner_label,
            "owner_image": self.owner_image,
        }


@dataclass(frozen=True)
class SingletonPlacement:
    item: PortItem
    direction: Direction
    tier: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "value": self.item.value,
            "owner_id": self.item.owner_id,
            "direction": self.direction,
            "tier": self.tier,
        }


@dataclass(frozen=True)
class Layout:
    orientation: str
    scale: AxisScale
    ranges: tuple[PortRange, ...]
    placements: tuple[SingletonPlacement, ...]
    instructions: tuple[dict[str, Any], ...]


def round_up(declared_max: int) -> int:
    if declared_max < 0:
        raise ValueError(f"declared_max must be non-negative, got {declared_max}")
    for step in NICE_BREAKPOINTS:
        if declared_max <= step:
            return step
    return -(-declared_max // LARGE_SCALE_STEP) * LARGE_SCALE_STEP


def tick_interval(ceiling: int) -> int:
    for step in NICE_BREAKPOINTS:
        if ceiling / step <= MAX_TICKS:
            return step
    # only ceilings above 300000 get here; keep the tick count capped
    return -(-ceiling // (MAX_TICKS * LARGE_SCALE_STEP)) * LARGE_SCALE_STEP


def select_scale(declared_max: int) -> AxisScale:
    """Pick the axis ceiling and tick values for ``declared_max``.

    Ticks start at the interval and step by it up to and including the
    ceiling, so the ceiling itself is a tick whenever it is a multiple.
    """
    ceiling = round_up(declared_max)
    interval = tick_interval(ceiling)
    return AxisScale(ceiling=ceiling, ticks=tuple(range(interval, ceiling + 1, interval)))


def detect_ranges(items: Sequence[PortItem]) -> tuple[list[PortRange], list[PortItem]]:
    """Split ``items`` into same-owner runs of consecutive ports and singletons.

    Only runs of at least ``MIN_RANGE_LENGTH`` ports become ranges. A run ends
    at the first port that is not ``end + 1`` or belongs to another owner.
    """
    ordered = sorted(items, key=lambda item: item.value)
    consumed = [False] * len(ordered)
    ranges: list[PortRange] = []

    for start_idx, start in enumerate(ordered):
        if consumed[start_idx]:
            continue
        end_idx = start_idx
        for next_idx in range(start_idx + 1, len(ordered)):
            candidate = ordered[next_idx]
            if candidate.owner_id != start.owner_id:
                break
            if candidate.value != ordered[end_idx].value + 1:
                break
            end_idx = next_idx
        if end_idx - start_idx + 1 < MIN_RANGE_LENGTH:
            continue
        for idx in range(start_idx, end_idx + 1):
            consumed[idx] = True
        ranges.append(
            PortRange(
                start_value=start.value,
                end_value=ordered[end_idx].value,
                owner_id=start.owner_id,
                owner_label=start.owner_label,
                owner_image=start.owner_image,
            )
        )

    singletons = [item for idx, item in enumerate(ordered) if not consumed[idx]]
    return ranges, singletons


def resolve_collisions(
    singletons: Sequence[PortItem], scale: AxisScale
) -> list[SingletonPlacement]:
    ordered = sorted(singletons, key=lambda item: item.value)
    placements: list[SingletonPlacement] = []
    for idx, item in enumerate(ordered):
        direction, tier = AWAY_FROM_ORIGIN, 0
        if idx > 0:
            previous = placements[-1]
            # compared in integers: 200 * delta / ceiling is the distance in half percents
            delta = abs(item.value - previous.item.value)
            if 200 * delta < NEAR_HALF_PERCENTS * scale.ceiling:
                direction = TOWARD_ORIGIN
            elif 200 * delta < CLOSE_HALF_PERCENTS * scale.ceiling:
                if previous.direction == AWAY_FROM_ORIGIN:
                    tier = (previous.tier + 1) % TIER_COUNT
        placements.append(SingletonPlacement(item=item, direction=direction, tier=tier))
    return placements


def build_layout(dataset: PortDataset, orientation: str = "horizontal") -> Layout:
    # local import: geometry depends on the dataclasses defined above
    from services.geometry import emit_geometry

    if orientation not in ORIENTATIONS:
        raise ValueError(f"unsupported orientation: {orientation!r}; allowed: {list(ORIENTATIONS)}")
    scale = select_scale(dataset.declared_max)
    if not dataset.items:
        scale = AxisScale(ceiling=scale.ceiling, ticks=())
    ranges, singletons = detect_ranges(dataset.items)
    placements = resolve_collisions(singletons, scale)
    instructions = emit_geometry(scale, ranges, placements, orientation)
    logger.debug(
        "layout %s: ceiling=%d ranges=%d singletons=%d instructions=%d",
        orientation,
        scale.ceiling,
        len(ranges),
        len(placements),
        len(instructions),
    )
    return Layout(
        orientation=orientation,
        scale=scale,
        ranges=tuple(ranges),
        placements=tuple(placements),
        instructions=tuple(instructions),
    )
