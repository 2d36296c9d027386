"""Pie layout: angular partitioning of a value series and arc outlines.

Angles are in radians, measured clockwise from 12 o'clock, so a point at
angle `a` and radius `r` sits at `(r * sin(a), -r * cos(a))` relative to the
pie center (y grows downward in pixel space).
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from .dto import AggregatedEntry, ArcDescriptor, PathCommand, PathPoint

TAU = 2 * math.pi
_EPSILON = 1e-12


def pie(
    entries: Sequence[AggregatedEntry],
    start_angle: float = 0.0,
    *,
    pad_angle: float = 0.0,
) -> tuple[ArcDescriptor, ...]:
    """Partition the circle between entries proportionally to their values.

    Args:
        entries: Entries in display order. Negative values count as 0.
        start_angle: Angle where the first arc begins.
        pad_angle: Gap left after each arc. The gaps are taken out of the
            circle before it is shared, so arc spans sum to `2π - n * pad`.

    Returns:
        One ArcDescriptor per entry, in input order. When the total is 0 every
        arc is a zero-angle slice at `start_angle`.
    """

    if pad_angle < 0:
        raise ValueError("pad_angle must be >= 0")

    values = [max(entry.value, 0.0) for entry in entries]
    total = sum(values)
    if total == 0:
        return tuple(
            ArcDescriptor(start_angle=start_angle, end_angle=start_angle, pad_angle=0.0, entry=entry)
            for entry in entries
        )

    pad = min(pad_angle, TAU / len(entries))
    scale = (TAU - pad * len(entries)) / total

    arcs: list[ArcDescriptor] = []
    angle = start_angle
    for entry, value in zip(entries, values):
        end = angle + value * scale
        arcs.append(ArcDescriptor(start_angle=angle, end_angle=end, pad_angle=pad, entry=entry))
        angle = end + pad
    return tuple(arcs)


def polar_point(radius: float, angle: float) -> PathPoint:
    """Return the pixel offset of a point at `radius` and `angle` from the center."""

    return PathPoint(x=radius * math.sin(angle), y=-radius * math.cos(angle))


def centroid(inner_radius: float, outer_radius: float, arc: ArcDescriptor) -> PathPoint:
    """Return the label anchor of an arc: its mid-angle at mid-radius."""

    return polar_point((inner_radius + outer_radius) / 2, arc.mid_angle)


def arc_geometry(inner_radius: float, outer_radius: float, arc: ArcDescriptor) -> tuple[PathCommand, ...]:
    """Build the closed outline of an annular sector.

    Args:
        inner_radius: Hole radius; 0 draws a wedge meeting at the center.
        outer_radius: Outer radius.
        arc: Arc angles.

    Returns:
        Path commands relative to the pie center.
    """

    if inner_radius < 0 or outer_radius < inner_radius:
        raise ValueError("Radii must satisfy 0 <= inner_radius <= outer_radius")

    span = arc.end_angle - arc.start_angle
    outer_start = polar_point(outer_radius, arc.start_angle)
    if span <= _EPSILON or outer_radius == 0:
        return (PathCommand("M", (outer_start.x, outer_start.y)), PathCommand("Z"))

    if span >= TAU - _EPSILON:
        return _full_ring(inner_radius, outer_radius, arc.start_angle)

    large_arc = 1.0 if span > math.pi else 0.0
    outer_end = polar_point(outer_radius, arc.end_angle)
    commands = [
        PathCommand("M", (outer_start.x, outer_start.y)),
        PathCommand("A", (outer_radius, outer_radius, 0.0, large_arc, 1.0, outer_end.x, outer_end.y)),
    ]
    if inner_radius > 0:
        inner_end = polar_point(inner_radius, arc.end_angle)
        inner_start = polar_point(inner_radius, arc.start_angle)
        commands.append(PathCommand("L", (inner_end.x, inner_end.y)))
        commands.append(
            PathCommand("A", (inner_radius, inner_radius, 0.0, large_arc, 0.0, inner_start.x, inner_start.y))
        )
    else:
        commands.append(PathCommand("L", (0.0, 0.0)))
    commands.append(PathCommand("Z"))
    return tuple(commands)


def _full_ring(inner_radius: float, outer_radius: float, start_angle: float) -> tuple[PathCommand, ...]:
    """A whole circle cannot be one SVG arc; draw it as two half-circle arcs."""

    commands: list[PathCommand] = []
    for radius, sweep in ((outer_radius, 1.0), (inner_radius, 0.0)):
        if radius == 0:
            continue
        start = polar_point(radius, start_angle)
        opposite = polar_point(radius, start_angle + math.pi)
        commands.extend(
            (
                PathCommand("M", (start.x, start.y)),
                PathCommand("A", (radius, radius, 0.0, 1.0, sweep, opposite.x, opposite.y)),
                PathCommand("A", (radius, radius, 0.0, 1.0, sweep, start.x, start.y)),
            )
        )
    commands.append(PathCommand("Z"))
    return tuple(commands)
