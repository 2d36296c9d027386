"""Schema types for declarative chart configuration.

Every chart is described by a ChartConfig instead of hard-coded rendering
logic. The renderer reads only what the config declares, so adding a chart is
a matter of adding a config.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from layout.dto import TreeNode
from layout.paths import InterpolationMode

ChartType = Literal[
    "scatter",
    "line",
    "area",
    "stacked_area",
    "bar",
    "horizontal_bar",
    "pie",
    "tree",
]

CHART_TYPES: tuple[ChartType, ...] = (
    "scatter",
    "line",
    "area",
    "stacked_area",
    "bar",
    "horizontal_bar",
    "pie",
    "tree",
)

NumericField = Literal["total_bill", "tip", "size"]


@dataclass(frozen=True, slots=True)
class Margin:
    """Pixel margins around the plot area."""

    top: float = 10
    bottom: float = 10
    left: float = 30
    right: float = 30


@dataclass(frozen=True, slots=True)
class ChartConfig:
    """Declarative chart definition.

    Args:
        id: Stable, unique identifier used by URLs and the CLI.
        title: Chart title.
        chart_type: The visual chart type.
        description: Optional longer description.
        margin: Margins subtracted from the output size to get the plot area.
        output_width: Total output width in pixels.
        output_height: Total output height in pixels.
        axis_gutter: Pixels reserved under the plot for the x axis.
        interpolation: Line/area interpolation mode.
        tension: Cardinal spline tension (0 = Catmull-Rom-like).
        color_of: Optional callable mapping a category (or stack key) to a color.
        inner_radius: Pie hole radius.
        outer_radius: Pie outer radius.
        pad_angle: Gap between pie slices, in radians.
        padding: Band scale padding in `[0, 1)`.
        tick_count_hint: Approximate tick count for linear axes.
        x_field: Record field on the x axis (scatter/line/area).
        y_field: Record field on the y axis (scatter/line/area).
        value_field: Record field averaged per category (bar/pie).
        radius_field: Record field used as the point radius (scatter).
        stack_keys: Record fields averaged per category and stacked, bottom first.
        category_order: Explicit category order; unlisted categories follow in
            first-seen order.
        tree: Hierarchy drawn by tree charts.
        tree_width: Horizontal extent of the tree layout.
        tree_height: Vertical extent of the tree layout.
        tree_offset_x: Horizontal translation of the tree drawing.
        tree_offset_y: Vertical translation of the tree drawing.
        node_radius: Radius of tree node circles.
    """

    id: str
    title: str
    chart_type: ChartType
    description: str | None = None
    margin: Margin = Margin()
    output_width: float = 800
    output_height: float = 600
    axis_gutter: float = 25
    interpolation: InterpolationMode = "linear"
    tension: float = 0.0
    color_of: Callable[[str], str] | None = None
    inner_radius: float = 0.0
    outer_radius: float = 0.0
    pad_angle: float = 0.0
    padding: float = 0.0
    tick_count_hint: int = 10
    x_field: NumericField = "total_bill"
    y_field: NumericField = "tip"
    value_field: NumericField = "total_bill"
    radius_field: NumericField | None = "size"
    stack_keys: tuple[NumericField, ...] = ()
    category_order: tuple[str, ...] = ()
    tree: TreeNode | None = None
    tree_width: float = 700
    tree_height: float = 600
    tree_offset_x: float = 0
    tree_offset_y: float = 50
    node_radius: float = 40
