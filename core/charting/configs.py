"""Built-in ChartConfig definitions for the tips dashboard."""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from layout.scales import OrdinalScale
from layout.tree import tree_from_mapping

from .schema import ChartConfig, Margin
from .validator import validate_chart_configs

DAY_ORDER: Final[tuple[str, ...]] = ("Thur", "Fri", "Sat", "Sun")

DAY_COLORS: Final[OrdinalScale[str]] = OrdinalScale.from_mapping(
    {"Thur": "red", "Fri": "blue", "Sat": "orange", "Sun": "pink"}
)

STACK_COLORS: Final[OrdinalScale[str]] = OrdinalScale.from_mapping(
    {"avg_total_bill": "blue", "avg_tip": "green"}
)

SAMPLE_TREE: Final = tree_from_mapping(
    {
        "name": "Root",
        "children": [
            {
                "name": "Branch 1",
                "children": [
                    {"name": "Leaf 1", "size": 10, "color": "red"},
                    {"name": "Leaf 2", "size": 20, "color": "blue"},
                ],
            },
            {
                "name": "Branch 2",
                "children": [
                    {"name": "Leaf 3", "size": 15, "color": "green"},
                    {
                        "name": "Leaf 4",
                        "size": 25,
                        "color": "purple",
                        "children": [{"name": "Subleaf", "size": 5, "color": "orange"}],
                    },
                ],
            },
        ],
    }
)


def constant_color(color: str) -> Callable[[str], str]:
    """Return a `color_of` callable that paints every category the same."""

    def color_of(_category: str) -> str:
        return color

    return color_of


_WIDE_MARGIN: Final[Margin] = Margin(top=50, bottom=10, left=30, right=30)


CHART_CONFIGS: Final[tuple[ChartConfig, ...]] = (
    ChartConfig(
        id="scatter",
        title="Scatter Plot: Total Bill vs Tips",
        chart_type="scatter",
        margin=Margin(top=10, bottom=10, left=30, right=30),
        color_of=constant_color("red"),
    ),
    ChartConfig(
        id="line",
        title="Line Chart: Total Bill vs Tips",
        chart_type="line",
        margin=_WIDE_MARGIN,
        interpolation="cardinal",
        color_of=constant_color("blue"),
    ),
    ChartConfig(
        id="area",
        title="Area Chart: Total Bill vs Tips",
        chart_type="area",
        margin=_WIDE_MARGIN,
        color_of=constant_color("yellow"),
    ),
    ChartConfig(
        id="stacked_area",
        title="Stacked Area Chart: Average Total Bill and Tip per Day",
        chart_type="stacked_area",
        margin=_WIDE_MARGIN,
        stack_keys=("total_bill", "tip"),
        category_order=DAY_ORDER,
        tick_count_hint=4,
        color_of=STACK_COLORS,
    ),
    ChartConfig(
        id="bar",
        title="Bar Chart: Average Total Bill per Day",
        chart_type="bar",
        margin=_WIDE_MARGIN,
        padding=0.2,
        color_of=constant_color("pink"),
    ),
    ChartConfig(
        id="horizontal_bar",
        title="Horizontal Bar Chart: Average Total Bill per Day",
        chart_type="horizontal_bar",
        margin=Margin(top=50, bottom=10, left=50, right=10),
        output_width=700,
        output_height=800,
        padding=0.2,
        color_of=constant_color("pink"),
    ),
    ChartConfig(
        id="pie",
        title="Pie Chart: Average Total Bill per Day",
        chart_type="pie",
        margin=_WIDE_MARGIN,
        inner_radius=50,
        outer_radius=200,
        color_of=DAY_COLORS,
    ),
    ChartConfig(
        id="tree",
        title="Tree Chart",
        chart_type="tree",
        output_width=800,
        output_height=700,
        tree=SAMPLE_TREE,
        color_of=constant_color("lime"),
    ),
)


_VALIDATION = validate_chart_configs(CHART_CONFIGS)
if not _VALIDATION.is_valid:
    joined = "\n".join(_VALIDATION.errors)
    raise ValueError(f"Invalid CHART_CONFIGS:\n{joined}")


CHART_CONFIG_BY_ID: Final[dict[str, ChartConfig]] = {config.id: config for config in CHART_CONFIGS}


def get_chart_config(chart_id: str) -> ChartConfig | None:
    """Return the built-in config for `chart_id`, or None when unknown."""

    return CHART_CONFIG_BY_ID.get(chart_id)
