"""Render ChartConfigs into positioned geometry.

`render_chart` is a pure function of `(records, config)`: it rebuilds every
scale and layout from the records it is given and returns geometry only.
Drawing, diffing and hover handling belong to whatever consumes the result.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from layout.aggregations import group_reduce, mean_of, order_entries
from layout.dto import (
    AggregatedEntry,
    ArcDescriptor,
    PathCommand,
    PathPoint,
    PositionedNode,
    Record,
    Tick,
    TreeLink,
)
from layout.paths import Interpolation, area_path, line_path
from layout.pie import arc_geometry, centroid, pie
from layout.scales import BandScale, LinearScale, extent
from layout.stack import stack, stack_extent
from layout.ticks import ticks
from layout.tree import descendants, layout_tree, links

from .schema import ChartConfig, ChartType

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlotArea:
    """Pixel extents shared by the cartesian charts.

    Attributes:
        left: Left edge of the x range.
        right: Right edge of the x range.
        top: Top edge of the y range.
        bottom: Bottom edge of the y range (where the x axis is drawn).
        width: Output width minus horizontal margins.
        height: Output height minus vertical margins.
    """

    left: float
    right: float
    top: float
    bottom: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class PointMark:
    """A circle for point-based charts."""

    x: float
    y: float
    radius: float
    color: str | None
    record: Record


@dataclass(frozen=True, slots=True)
class BarMark:
    """A rectangle for bar charts (top-left corner plus size)."""

    x: float
    y: float
    width: float
    height: float
    category: str
    value: float
    color: str | None


@dataclass(frozen=True, slots=True)
class PathMark:
    """A line or area path."""

    key: str
    commands: tuple[PathCommand, ...]
    color: str | None
    closed: bool


@dataclass(frozen=True, slots=True)
class SliceMark:
    """A pie slice with its outline and label anchor."""

    arc: ArcDescriptor
    commands: tuple[PathCommand, ...]
    centroid: PathPoint
    label: str
    color: str | None


@dataclass(frozen=True, slots=True)
class NodeMark:
    """A positioned tree node drawn as a circle."""

    node: PositionedNode
    radius: float
    color: str | None


@dataclass(frozen=True, slots=True)
class RenderedChart:
    """Geometry produced for one ChartConfig.

    Attributes:
        config: The config that produced the geometry.
        origin: Translation applied to the plot group (pie center, tree offset).
        points: Point marks (scatter).
        bars: Rectangle marks (bar, horizontal bar).
        paths: Path marks (line, area, stacked area).
        slices: Pie slices.
        tree: Positioned tree root (tree), or None.
        nodes: Tree nodes in pre-order.
        links: Tree edges in pre-order.
        x_ticks: Bottom axis ticks.
        y_ticks: Left axis ticks.
    """

    config: ChartConfig
    origin: PathPoint = PathPoint(0.0, 0.0)
    points: tuple[PointMark, ...] = ()
    bars: tuple[BarMark, ...] = ()
    paths: tuple[PathMark, ...] = ()
    slices: tuple[SliceMark, ...] = ()
    tree: PositionedNode | None = None
    nodes: tuple[NodeMark, ...] = ()
    links: tuple[TreeLink, ...] = ()
    x_ticks: tuple[Tick, ...] = ()
    y_ticks: tuple[Tick, ...] = ()


def plot_area(config: ChartConfig) -> PlotArea:
    """Derive the cartesian plot extents from margins, output size and axis gutter."""

    margin = config.margin
    width = config.output_width - margin.left - margin.right
    height = config.output_height - margin.top - margin.bottom
    return PlotArea(
        left=margin.left,
        right=width,
        top=margin.top,
        bottom=height - margin.top - config.axis_gutter,
        width=width,
        height=height,
    )


def render_chart(*, config: ChartConfig, records: Iterable[Record]) -> RenderedChart:
    """Render a single chart from a config and already-filtered records.

    Args:
        config: ChartConfig to render.
        records: Parsed records (tree charts ignore them).

    Returns:
        RenderedChart geometry. Empty input yields empty marks, never an error.

    Raises:
        UnknownCategoryError: When `config.color_of` has no color for a category.
    """

    renderer = _RENDERERS.get(config.chart_type)
    if renderer is None:
        raise ValueError(f"Unsupported chart_type: {config.chart_type!r}")
    records = tuple(records)
    logger.debug("Rendering chart %s (%s) from %d records", config.id, config.chart_type, len(records))
    return renderer(config, records)


def render_charts(*, configs: Iterable[ChartConfig], records: Iterable[Record]) -> tuple[RenderedChart, ...]:
    """Render several charts from the same record set, in config order."""

    records = tuple(records)
    return tuple(render_chart(config=config, records=records) for config in configs)


def render_scatter(config: ChartConfig, records: Sequence[Record]) -> RenderedChart:
    """Scatter plot: one circle per record, radius from `radius_field`."""

    area = plot_area(config)
    x_scale, y_scale = _xy_scales(config, records, area, include_zero=True)
    points = tuple(
        PointMark(
            x=x_scale.map(getattr(record, config.x_field)),
            y=y_scale.map(getattr(record, config.y_field)),
            radius=float(getattr(record, config.radius_field)) if config.radius_field else 1.0,
            color=_color(config, record.day),
            record=record,
        )
        for record in records
    )
    return RenderedChart(
        config=config,
        points=points,
        x_ticks=ticks(x_scale, config.tick_count_hint),
        y_ticks=ticks(y_scale, config.tick_count_hint),
    )


def render_line(config: ChartConfig, records: Sequence[Record]) -> RenderedChart:
    """Line chart through every record, sorted by x before drawing."""

    area = plot_area(config)
    x_scale, y_scale = _xy_scales(config, records, area, include_zero=True)
    points = _sorted_points(config, records, x_scale, y_scale)
    paths: tuple[PathMark, ...] = ()
    if points:
        paths = (
            PathMark(
                key=config.y_field,
                commands=line_path(points, _interpolation(config)),
                color=_color(config, config.y_field),
                closed=False,
            ),
        )
    return RenderedChart(
        config=config,
        paths=paths,
        x_ticks=ticks(x_scale, config.tick_count_hint),
        y_ticks=ticks(y_scale, config.tick_count_hint),
    )


def render_area(config: ChartConfig, records: Sequence[Record]) -> RenderedChart:
    """Area chart filled down to the minimum y value, sorted by x before drawing."""

    area = plot_area(config)
    x_scale, y_scale = _xy_scales(config, records, area, include_zero=False)
    points = _sorted_points(config, records, x_scale, y_scale)
    paths: tuple[PathMark, ...] = ()
    if points:
        baseline = y_scale.map(y_scale.domain_low)
        paths = (
            PathMark(
                key=config.y_field,
                commands=area_path(points, baseline, _interpolation(config)),
                color=_color(config, config.y_field),
                closed=True,
            ),
        )
    return RenderedChart(
        config=config,
        paths=paths,
        x_ticks=ticks(x_scale, config.tick_count_hint),
        y_ticks=ticks(y_scale, config.tick_count_hint),
    )


def render_stacked_area(config: ChartConfig, records: Sequence[Record]) -> RenderedChart:
    """Stacked area of per-category means, one band per stack key.

    Categories are placed at their index along a linear x axis, so the path
    order is the category order rather than a sort by value.
    """

    area = plot_area(config)
    categories = _category_order(config, records)
    aggregated = {
        _stack_series_key(field): _averages(config, records, field) for field in config.stack_keys
    }
    key_order = [_stack_series_key(field) for field in config.stack_keys]
    series = stack(aggregated, key_order, categories=categories)

    x_scale = LinearScale(0.0, max(len(categories) - 0.5, 0.0), area.left, area.right)
    low, high = stack_extent(series)
    y_scale = LinearScale(min(low, 0.0), max(high, 0.0), area.bottom, area.top)

    paths: list[PathMark] = []
    for item in series:
        if not item.bands:
            continue
        points = [PathPoint(x_scale.map(idx), y_scale.map(band.top)) for idx, band in enumerate(item.bands)]
        baseline = [y_scale.map(band.baseline) for band in item.bands]
        paths.append(
            PathMark(
                key=item.key,
                commands=area_path(points, baseline, _interpolation(config)),
                color=_color(config, item.key),
                closed=True,
            )
        )

    x_ticks = tuple(Tick(position=x_scale.map(idx), label=category) for idx, category in enumerate(categories))
    return RenderedChart(
        config=config,
        paths=tuple(paths),
        x_ticks=x_ticks,
        y_ticks=ticks(y_scale, config.tick_count_hint),
    )


def render_bar(config: ChartConfig, records: Sequence[Record]) -> RenderedChart:
    """Vertical bars of the per-category mean of `value_field`."""

    area = plot_area(config)
    entries = _averages(config, records, config.value_field)
    x_scale = BandScale(tuple(entry.key for entry in entries), area.left, area.right, config.padding)
    y_scale = LinearScale(*extent((entry.value for entry in entries), include_zero=True), area.bottom, area.top)

    zero = y_scale.map(0.0)
    bars = []
    for entry in entries:
        y = y_scale.map(entry.value)
        bars.append(
            BarMark(
                x=x_scale.map(entry.key),
                y=min(y, zero),
                width=x_scale.bandwidth,
                height=abs(zero - y),
                category=entry.key,
                value=entry.value,
                color=_color(config, entry.key),
            )
        )
    return RenderedChart(
        config=config,
        bars=tuple(bars),
        x_ticks=ticks(x_scale),
        y_ticks=ticks(y_scale, config.tick_count_hint),
    )


def render_horizontal_bar(config: ChartConfig, records: Sequence[Record]) -> RenderedChart:
    """Horizontal bars; the first category sits at the bottom of the y axis."""

    area = plot_area(config)
    entries = _averages(config, records, config.value_field)
    x_scale = LinearScale(*extent((entry.value for entry in entries), include_zero=True), area.left, area.right)
    y_scale = BandScale(tuple(entry.key for entry in entries), area.bottom, area.top, config.padding)

    zero = x_scale.map(0.0)
    bars = []
    for entry in entries:
        x = x_scale.map(entry.value)
        bars.append(
            BarMark(
                x=min(x, zero),
                y=y_scale.map(entry.key),
                width=abs(x - zero),
                height=y_scale.bandwidth,
                category=entry.key,
                value=entry.value,
                color=_color(config, entry.key),
            )
        )
    return RenderedChart(
        config=config,
        bars=tuple(bars),
        x_ticks=ticks(x_scale, config.tick_count_hint),
        y_ticks=ticks(y_scale),
    )


def render_pie(config: ChartConfig, records: Sequence[Record]) -> RenderedChart:
    """Pie (or donut) of the per-category mean of `value_field`, centered in the plot."""

    area = plot_area(config)
    entries = _averages(config, records, config.value_field)
    arcs = pie(entries, pad_angle=config.pad_angle)
    slices = tuple(
        SliceMark(
            arc=arc,
            commands=arc_geometry(config.inner_radius, config.outer_radius, arc),
            centroid=centroid(config.inner_radius, config.outer_radius, arc),
            label=arc.entry.key,
            color=_color(config, arc.entry.key),
        )
        for arc in arcs
    )
    return RenderedChart(
        config=config,
        origin=PathPoint(area.width / 2, area.height / 2),
        slices=slices,
    )


def render_tree(config: ChartConfig, records: Sequence[Record]) -> RenderedChart:
    """Tidy tree of `config.tree`; records are not used."""

    root = layout_tree(config.tree, config.tree_width, config.tree_height)
    nodes = tuple(
        NodeMark(node=node, radius=config.node_radius, color=_color(config, node.label))
        for node in descendants(root)
    )
    return RenderedChart(
        config=config,
        origin=PathPoint(config.tree_offset_x, config.tree_offset_y),
        tree=root,
        nodes=nodes,
        links=links(root),
    )


_RENDERERS: dict[ChartType, Callable[[ChartConfig, Sequence[Record]], RenderedChart]] = {
    "scatter": render_scatter,
    "line": render_line,
    "area": render_area,
    "stacked_area": render_stacked_area,
    "bar": render_bar,
    "horizontal_bar": render_horizontal_bar,
    "pie": render_pie,
    "tree": render_tree,
}


def _xy_scales(
    config: ChartConfig,
    records: Sequence[Record],
    area: PlotArea,
    *,
    include_zero: bool,
) -> tuple[LinearScale, LinearScale]:
    x_low, x_high = extent((getattr(r, config.x_field) for r in records), include_zero=include_zero)
    y_low, y_high = extent((getattr(r, config.y_field) for r in records), include_zero=include_zero)
    return (
        LinearScale(x_low, x_high, area.left, area.right),
        LinearScale(y_low, y_high, area.bottom, area.top),
    )


def _sorted_points(
    config: ChartConfig,
    records: Sequence[Record],
    x_scale: LinearScale,
    y_scale: LinearScale,
) -> list[PathPoint]:
    ordered = sorted(records, key=lambda record: getattr(record, config.x_field))
    return [
        PathPoint(x_scale.map(getattr(record, config.x_field)), y_scale.map(getattr(record, config.y_field)))
        for record in ordered
    ]


def _averages(config: ChartConfig, records: Sequence[Record], field: str) -> tuple[AggregatedEntry, ...]:
    entries = group_reduce(records, lambda record: record.day, mean_of(lambda record: getattr(record, field)))
    return order_entries(entries, config.category_order)


def _category_order(config: ChartConfig, records: Sequence[Record]) -> tuple[str, ...]:
    counts = group_reduce(records, lambda record: record.day, len)
    return tuple(entry.key for entry in order_entries(counts, config.category_order))


def _stack_series_key(field: str) -> str:
    return f"avg_{field}"


def _interpolation(config: ChartConfig) -> Interpolation:
    return Interpolation(mode=config.interpolation, tension=config.tension)


def _color(config: ChartConfig, key: str) -> str | None:
    if config.color_of is None:
        return None
    return config.color_of(key)
