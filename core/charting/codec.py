"""Encoding helpers turning RenderedChart geometry into JSON payloads."""

from __future__ import annotations

from typing import Any

from layout.dto import ArcDescriptor, PathCommand, PathPoint, PositionedNode, Tick
from layout.paths import to_svg_path

from .render import RenderedChart
from .schema import ChartConfig


def encode_rendered_chart(rendered: RenderedChart) -> dict[str, Any]:
    """Encode a RenderedChart into a JSON-serializable dictionary.

    Args:
        rendered: Geometry produced by `render_chart`.

    Returns:
        Dict payload with only the sections relevant to the chart type, plus
        chart metadata and axes.
    """

    config = rendered.config
    payload: dict[str, Any] = {
        "chart": encode_chart_meta(config),
        "origin": _encode_point(rendered.origin),
    }

    chart_type = config.chart_type
    if chart_type == "scatter":
        payload["points"] = [
            {
                "x": point.x,
                "y": point.y,
                "radius": point.radius,
                "color": point.color,
                "day": point.record.day,
            }
            for point in rendered.points
        ]
    elif chart_type in ("line", "area", "stacked_area"):
        payload["paths"] = [
            {
                "key": path.key,
                "d": to_svg_path(path.commands),
                "commands": _encode_commands(path.commands),
                "color": path.color,
                "closed": path.closed,
            }
            for path in rendered.paths
        ]
    elif chart_type in ("bar", "horizontal_bar"):
        payload["bars"] = [
            {
                "x": bar.x,
                "y": bar.y,
                "width": bar.width,
                "height": bar.height,
                "category": bar.category,
                "value": bar.value,
                "color": bar.color,
            }
            for bar in rendered.bars
        ]
    elif chart_type == "pie":
        payload["slices"] = [
            {
                "label": item.label,
                "arc": _encode_arc(item.arc),
                "d": to_svg_path(item.commands),
                "centroid": _encode_point(item.centroid),
                "color": item.color,
            }
            for item in rendered.slices
        ]
    elif chart_type == "tree":
        payload["tree"] = _encode_node(rendered.tree) if rendered.tree is not None else None
        payload["nodes"] = [
            {
                "label": mark.node.label,
                "x": mark.node.x,
                "y": mark.node.y,
                "depth": mark.node.depth,
                "radius": mark.radius,
                "color": mark.color,
            }
            for mark in rendered.nodes
        ]
        payload["links"] = [
            {
                "source": _encode_point(PathPoint(link.source.x, link.source.y)),
                "target": _encode_point(PathPoint(link.target.x, link.target.y)),
                "source_label": link.source.label,
                "target_label": link.target.label,
            }
            for link in rendered.links
        ]

    if chart_type not in ("pie", "tree"):
        payload["axes"] = {
            "x": _encode_ticks(rendered.x_ticks),
            "y": _encode_ticks(rendered.y_ticks),
        }
    return payload


def encode_chart_meta(config: ChartConfig) -> dict[str, Any]:
    """Encode the presentation-relevant parts of a ChartConfig."""

    return {
        "id": config.id,
        "title": config.title,
        "description": config.description,
        "chart_type": config.chart_type,
        "width": config.output_width,
        "height": config.output_height,
        "margin": {
            "top": config.margin.top,
            "bottom": config.margin.bottom,
            "left": config.margin.left,
            "right": config.margin.right,
        },
    }


def _encode_point(point: PathPoint) -> dict[str, float]:
    return {"x": point.x, "y": point.y}


def _encode_ticks(ticks: tuple[Tick, ...]) -> list[dict[str, Any]]:
    return [{"position": tick.position, "label": tick.label} for tick in ticks]


def _encode_commands(commands: tuple[PathCommand, ...]) -> list[list[Any]]:
    return [[command.command, *command.values] for command in commands]


def _encode_arc(arc: ArcDescriptor) -> dict[str, Any]:
    return {
        "start_angle": arc.start_angle,
        "end_angle": arc.end_angle,
        "pad_angle": arc.pad_angle,
        "key": arc.entry.key,
        "value": arc.entry.value,
    }


def _encode_node(node: PositionedNode) -> dict[str, Any]:
    """Encode a positioned subtree, keeping node data alongside coordinates."""

    return {
        "label": node.label,
        "x": node.x,
        "y": node.y,
        "depth": node.depth,
        "data": dict(node.data),
        "children": [_encode_node(child) for child in node.children],
    }
