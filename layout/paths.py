"""Line and area path generators.

Both generators consume points already mapped into pixel space and emit path
commands. They draw points in the order given: for function-style charts
(line, simple area) callers must sort by the independent axis first, and the
stacked area sorts by category index. Unsorted input yields a
self-intersecting path, not an error.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Literal, Union

from .dto import PathCommand, PathPoint

InterpolationMode = Literal["linear", "cardinal"]

Baseline = Union[float, Sequence[float], Callable[[PathPoint], float]]


@dataclass(frozen=True, slots=True)
class Interpolation:
    """How consecutive points are joined.

    Args:
        mode: `linear` for straight segments, `cardinal` for a cardinal spline.
        tension: Cardinal tension; 0 gives Catmull-Rom-like curves, 1 gives
            straight segments drawn as curves.
    """

    mode: InterpolationMode = "linear"
    tension: float = 0.0


LINEAR = Interpolation("linear")
CARDINAL = Interpolation("cardinal")


def line_path(points: Sequence[PathPoint], interpolation: Interpolation = LINEAR) -> tuple[PathCommand, ...]:
    """Generate an open path through `points`.

    Returns:
        A move-to the first point followed by one line-to or curve-to per
        consecutive pair. Empty input yields no commands.
    """

    if not points:
        return ()
    first = points[0]
    return (PathCommand("M", (first.x, first.y)), *_segments(points, interpolation))


def area_path(
    points: Sequence[PathPoint],
    baseline: Baseline = 0.0,
    interpolation: Interpolation = LINEAR,
) -> tuple[PathCommand, ...]:
    """Generate a closed area outline between `points` and a baseline.

    The outline runs forward along the top edge (`point.y`), then backward
    along the baseline, then closes.

    Args:
        points: Top-edge points.
        baseline: A constant y, a sequence of y values aligned with `points`,
            or a callable returning the baseline y for a top point.
        interpolation: Interpolation used for both edges.

    Returns:
        Path commands; empty input yields no commands.
    """

    if not points:
        return ()

    baseline_ys = _resolve_baseline(points, baseline)
    bottom = [PathPoint(x=point.x, y=y0) for point, y0 in zip(reversed(points), reversed(baseline_ys))]

    top_start = points[0]
    return (
        PathCommand("M", (top_start.x, top_start.y)),
        *_segments(points, interpolation),
        PathCommand("L", (bottom[0].x, bottom[0].y)),
        *_segments(bottom, interpolation),
        PathCommand("Z"),
    )


def to_svg_path(commands: Sequence[PathCommand]) -> str:
    """Serialize path commands into an SVG `d` attribute string."""

    parts: list[str] = []
    for command in commands:
        if command.command == "A":
            rx, ry, rotation, large_arc, sweep, x, y = command.values
            args = ",".join(
                (
                    _format_number(rx),
                    _format_number(ry),
                    _format_number(rotation),
                    str(int(large_arc)),
                    str(int(sweep)),
                    _format_number(x),
                    _format_number(y),
                )
            )
        else:
            args = ",".join(_format_number(value) for value in command.values)
        parts.append(f"{command.command}{args}")
    return "".join(parts)


def _segments(points: Sequence[PathPoint], interpolation: Interpolation) -> list[PathCommand]:
    """Commands continuing a path from `points[0]` through the remaining points."""

    if len(points) < 2:
        return []
    if interpolation.mode == "linear" or len(points) == 2:
        return [PathCommand("L", (point.x, point.y)) for point in points[1:]]
    if interpolation.mode != "cardinal":
        raise ValueError(f"Unsupported interpolation mode: {interpolation.mode!r}")

    k = (1.0 - interpolation.tension) / 6.0
    last = len(points) - 1
    commands: list[PathCommand] = []
    for idx in range(last):
        before = points[idx - 1] if idx > 0 else points[idx]
        start = points[idx]
        end = points[idx + 1]
        after = points[idx + 2] if idx + 2 <= last else end
        commands.append(
            PathCommand(
                "C",
                (
                    start.x + k * (end.x - before.x),
                    start.y + k * (end.y - before.y),
                    end.x - k * (after.x - start.x),
                    end.y - k * (after.y - start.y),
                    end.x,
                    end.y,
                ),
            )
        )
    return commands


def _resolve_baseline(points: Sequence[PathPoint], baseline: Baseline) -> list[float]:
    if callable(baseline):
        return [float(baseline(point)) for point in points]
    if isinstance(baseline, (int, float)):
        return [float(baseline)] * len(points)
    values = [float(value) for value in baseline]
    if len(values) != len(points):
        raise ValueError(f"Baseline has {len(values)} values for {len(points)} points")
    return values


def _format_number(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text
