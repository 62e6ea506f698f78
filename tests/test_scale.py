# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
from __future__ import annotations

import pytest

from services.layout import NICE_BREAKPOINTS, round_up, select_scale, tick_interval


@pytest.mark.parametrize(
    ("declared_max", "expected"),
    [
        (0, 1000),
        (1, 1000),
        (1000, 1000),
        (1001, 2500),
        (1024, 2500),
        (5000, 5000),
        (7501, 10000),
        (32768, 40000),
        (50000, 50000),
        (50001, 60000),
        (65535, 70000),
        (120000, 120000),
    ],
)
def test_round_up_uses_nice_breakpoints(declared_max: int, expected: int) -> None:
    assert round_up(declared_max) == expected


@pytest.mark.parametrize("value", [0, 1, 999, 1024, 7777, 49999, 50001, 65535, 123457, 999999])
def test_round_up_is_idempotent(value: int) -> None:
    assert round_up(round_up(value)) == round_up(value)


def test_round_up_rejects_negative() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        round_up(-1)


def test_scale_ticks_include_ceiling_when_it_is_a_multiple() -> None:
    assert select_scale(0).ticks == (1000,)
    assert select_scale(2000).ticks == (1000, 2000)
    assert select_scale(10000).ticks == (2500, 5000, 7500, 10000)


def test_scale_ticks_for_port_range_ceiling() -> None:
    scale = select_scale(65535)
    assert scale.ceiling == 70000
    assert tick_interval(70000) == 15000
    assert scale.ticks == (15000, 30000, 45000, 60000)


@pytest.mark.parametrize(
    "value", [0, 1000, 2400, 5001, 7500, 14000, 29000, 45000, 65535, 250000, 400000, 1234567]
)
def test_tick_count_is_between_one_and_six(value: int) -> None:
    scale = select_scale(value)
    assert 1 <= len(scale.ticks) <= 6
    assert list(scale.ticks) == sorted(set(scale.ticks))
    assert all(0 < tick <= scale.ceiling for tick in scale.ticks)


def test_interval_comes_from_table_within_port_range() -> None:
    for ceiling in {round_up(v) for v in range(0, 65536, 977)}:
        assert tick_interval(ceiling) in NICE_BREAKPOINTS
