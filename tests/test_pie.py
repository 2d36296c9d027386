"""Unit tests for the pie layout and arc geometry."""

from __future__ import annotations

import math

import pytest

from layout.dto import AggregatedEntry, ArcDescriptor
from layout.pie import arc_geometry, centroid, pie

pytestmark = pytest.mark.unit


def _entries(*values: float) -> list[AggregatedEntry]:
    return [AggregatedEntry(key=f"k{idx}", value=value) for idx, value in enumerate(values)]


def test_pie_spans_are_proportional_and_sum_to_full_circle() -> None:
    """Values [1, 1, 2] yield spans [π/2, π/2, π]."""

    arcs = pie(_entries(1.0, 1.0, 2.0))

    spans = [arc.end_angle - arc.start_angle for arc in arcs]
    assert spans == pytest.approx([math.pi / 2, math.pi / 2, math.pi])
    assert sum(spans) == pytest.approx(2 * math.pi)
    assert arcs[-1].end_angle == pytest.approx(2 * math.pi)


def test_pie_assigns_arcs_sequentially_in_input_order() -> None:
    """Each arc starts where the previous one ended, from start_angle."""

    arcs = pie(_entries(3.0, 1.0), start_angle=1.0)

    assert arcs[0].start_angle == 1.0
    assert arcs[1].start_angle == pytest.approx(arcs[0].end_angle)
    assert arcs[1].end_angle == pytest.approx(1.0 + 2 * math.pi)
    assert [arc.entry.key for arc in arcs] == ["k0", "k1"]


def test_pie_zero_total_degenerates_to_zero_angle_slices() -> None:
    """All-zero values give zero-angle slices at start_angle, not a division error."""

    arcs = pie(_entries(0.0, 0.0), start_angle=0.5)

    assert all(arc.start_angle == arc.end_angle == 0.5 for arc in arcs)
    assert pie([]) == ()


def test_pie_padding_is_removed_from_the_shared_circle() -> None:
    """With padding, spans sum to 2π minus one pad per arc."""

    arcs = pie(_entries(1.0, 1.0, 1.0, 1.0), pad_angle=0.1)

    spans = [arc.end_angle - arc.start_angle for arc in arcs]
    assert sum(spans) == pytest.approx(2 * math.pi - 0.4)
    assert arcs[1].start_angle == pytest.approx(arcs[0].end_angle + 0.1)
    assert all(arc.pad_angle == 0.1 for arc in arcs)


def test_centroid_is_at_mid_angle_and_mid_radius() -> None:
    """A quarter arc from 12 to 3 o'clock has its centroid on the 45° diagonal."""

    arc = ArcDescriptor(start_angle=0.0, end_angle=math.pi / 2, pad_angle=0.0, entry=AggregatedEntry("a", 1.0))

    point = centroid(50.0, 200.0, arc)

    expected = 125.0 / math.sqrt(2)
    assert point.x == pytest.approx(expected)
    assert point.y == pytest.approx(-expected)


def test_arc_geometry_draws_annular_sector() -> None:
    """A donut slice is outer arc, line inward, inner arc back, close."""

    arc = ArcDescriptor(start_angle=0.0, end_angle=math.pi / 2, pad_angle=0.0, entry=AggregatedEntry("a", 1.0))

    commands = arc_geometry(50.0, 200.0, arc)

    assert [command.command for command in commands] == ["M", "A", "L", "A", "Z"]
    assert commands[0].values == pytest.approx((0.0, -200.0))
    assert commands[1].values == pytest.approx((200.0, 200.0, 0.0, 0.0, 1.0, 200.0, 0.0))
    assert commands[2].values == pytest.approx((50.0, 0.0))
    assert commands[3].values == pytest.approx((50.0, 50.0, 0.0, 0.0, 0.0, 0.0, -50.0))


def test_arc_geometry_wedge_and_degenerate_cases() -> None:
    """A zero inner radius meets at the center; zero-angle and full arcs stay drawable."""

    entry = AggregatedEntry("a", 1.0)
    wedge = arc_geometry(0.0, 100.0, ArcDescriptor(0.0, math.pi * 1.5, 0.0, entry))
    assert [command.command for command in wedge] == ["M", "A", "L", "Z"]
    assert wedge[1].values[3] == 1.0
    assert wedge[2].values == (0.0, 0.0)

    empty = arc_geometry(10.0, 100.0, ArcDescriptor(1.0, 1.0, 0.0, entry))
    assert [command.command for command in empty] == ["M", "Z"]

    ring = arc_geometry(10.0, 100.0, ArcDescriptor(0.0, 2 * math.pi, 0.0, entry))
    assert [command.command for command in ring] == ["M", "A", "A", "M", "A", "A", "Z"]

    with pytest.raises(ValueError):
        arc_geometry(200.0, 100.0, ArcDescriptor(0.0, 1.0, 0.0, entry))
