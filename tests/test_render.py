"""Tests for rendering built-in charts into geometry."""

from __future__ import annotations

import math
from dataclasses import replace

import pytest

from core.charting.configs import CHART_CONFIG_BY_ID, CHART_CONFIGS
from core.charting.render import plot_area, render_chart, render_charts
from layout.dto import PathPoint, Record
from layout.errors import UnknownCategoryError

pytestmark = pytest.mark.unit


def test_plot_area_follows_margins_and_axis_gutter() -> None:
    """The y range stops above the x axis gutter; x runs from the left margin."""

    area = plot_area(CHART_CONFIG_BY_ID["bar"])

    assert (area.width, area.height) == (740, 540)
    assert (area.left, area.right) == (30, 740)
    assert (area.top, area.bottom) == (50, 465)


def test_scatter_maps_every_record_with_zero_based_scales(records: tuple[Record, ...]) -> None:
    """Points share scales that include zero; radius comes from party size."""

    rendered = render_chart(config=CHART_CONFIG_BY_ID["scatter"], records=records)

    assert len(rendered.points) == len(records)
    largest = rendered.points[3]
    assert (largest.x, largest.y) == pytest.approx((740.0, 10.0))
    assert largest.radius == 3.0
    assert {point.color for point in rendered.points} == {"red"}
    assert rendered.x_ticks[0].label == "0"
    assert rendered.origin == PathPoint(0.0, 0.0)


def test_line_is_drawn_in_x_order(records: tuple[Record, ...]) -> None:
    """The line starts at the smallest total bill, whatever the record order."""

    rendered = render_chart(config=CHART_CONFIG_BY_ID["line"], records=records)

    (path,) = rendered.paths
    assert path.commands[0].command == "M"
    assert path.commands[0].values[0] == pytest.approx(30 + 5 / 30 * 710)
    assert [command.command for command in path.commands[1:]] == ["C"] * 4
    assert path.closed is False
    assert path.color == "blue"


def test_area_fills_down_to_the_minimum_value(records: tuple[Record, ...]) -> None:
    """The simple area closes against the pixel position of the smallest y."""

    rendered = render_chart(config=CHART_CONFIG_BY_ID["area"], records=records)

    (path,) = rendered.paths
    bottom = plot_area(CHART_CONFIG_BY_ID["area"]).bottom
    assert path.closed is True
    assert path.commands[-1].command == "Z"
    assert path.commands[len(records)].values == pytest.approx((30 + 710.0, bottom))


def test_stacked_area_orders_days_and_stacks_tip_on_bill(records: tuple[Record, ...]) -> None:
    """Days follow the configured order and the tip series sits on the bill series."""

    rendered = render_chart(config=CHART_CONFIG_BY_ID["stacked_area"], records=records)

    assert [tick.label for tick in rendered.x_ticks] == ["Thur", "Sat", "Sun"]
    assert [path.key for path in rendered.paths] == ["avg_total_bill", "avg_tip"]
    assert [path.color for path in rendered.paths] == ["blue", "green"]

    bill, tip = rendered.paths
    bill_top = [value for command in bill.commands[:3] for value in command.values]
    tip_bottom = [value for command in reversed(tip.commands[3:6]) for value in command.values]
    assert tip_bottom == pytest.approx(bill_top)


def test_bar_heights_measure_category_means(records: tuple[Record, ...]) -> None:
    """Bars grow up from the zero line to the mean of each day."""

    rendered = render_chart(config=CHART_CONFIG_BY_ID["bar"], records=records)

    by_day = {bar.category: bar for bar in rendered.bars}
    assert [bar.category for bar in rendered.bars] == ["Sun", "Thur", "Sat"]
    assert by_day["Sun"].value == 15.0
    assert by_day["Sun"].y == pytest.approx(257.5)
    assert by_day["Sun"].height == pytest.approx(207.5)
    assert by_day["Sat"].y + by_day["Sat"].height == pytest.approx(465.0)
    assert by_day["Sun"].width == pytest.approx(710 / 3 * 0.8)
    assert [tick.label for tick in rendered.x_ticks] == ["Sun", "Thur", "Sat"]


def test_horizontal_bar_puts_first_category_at_the_bottom(records: tuple[Record, ...]) -> None:
    """The band axis runs upward, so the first day gets the lowest band."""

    rendered = render_chart(config=CHART_CONFIG_BY_ID["horizontal_bar"], records=records)

    by_day = {bar.category: bar for bar in rendered.bars}
    assert by_day["Sun"].y > by_day["Thur"].y > by_day["Sat"].y
    assert by_day["Sat"].x == pytest.approx(50.0)
    assert by_day["Sat"].width == pytest.approx(590.0)
    assert by_day["Sun"].height == pytest.approx(205.0 * 0.8)


def test_pie_slices_cover_the_circle_and_use_day_colors(records: tuple[Record, ...]) -> None:
    """Slices are proportional to the daily mean and centered in the plot."""

    rendered = render_chart(config=CHART_CONFIG_BY_ID["pie"], records=records)

    assert rendered.origin == PathPoint(370.0, 270.0)
    assert [item.label for item in rendered.slices] == ["Sun", "Thur", "Sat"]
    assert [item.color for item in rendered.slices] == ["pink", "red", "orange"]
    spans = [item.arc.end_angle - item.arc.start_angle for item in rendered.slices]
    assert sum(spans) == pytest.approx(2 * math.pi)
    assert spans[2] == pytest.approx(2 * math.pi * 30 / 55)
    assert rendered.x_ticks == rendered.y_ticks == ()


def test_tree_ignores_records_and_positions_the_sample_hierarchy() -> None:
    """The tree chart lays out its configured hierarchy with one link per child."""

    rendered = render_chart(config=CHART_CONFIG_BY_ID["tree"], records=())

    assert rendered.tree is not None
    assert rendered.tree.x == pytest.approx(350.0)
    assert len(rendered.nodes) == 8
    assert len(rendered.links) == 7
    assert [(link.source.label, link.target.label) for link in rendered.links][2:4] == [
        ("Branch 1", "Leaf 2"),
        ("Root", "Branch 2"),
    ]
    assert rendered.origin == PathPoint(0.0, 50.0)
    assert {mark.color for mark in rendered.nodes} == {"lime"}
    assert max(mark.node.y for mark in rendered.nodes) == pytest.approx(600.0)


@pytest.mark.parametrize("config", CHART_CONFIGS, ids=lambda config: config.id)
def test_empty_input_renders_without_marks(config) -> None:
    """No records means no data marks, never an error."""

    rendered = render_chart(config=config, records=())

    assert rendered.points == ()
    assert rendered.bars == ()
    assert rendered.paths == ()
    assert rendered.slices == ()


def test_rendering_is_idempotent(records: tuple[Record, ...]) -> None:
    """Rendering the same records twice yields identical geometry."""

    first = render_charts(configs=CHART_CONFIGS, records=records)
    second = render_charts(configs=CHART_CONFIGS, records=list(records))

    assert first == second


def test_unmapped_category_color_is_an_error(records: tuple[Record, ...]) -> None:
    """A day missing from the color scale surfaces as UnknownCategoryError."""

    extra = (*records, Record(total_bill=12.0, tip=2.0, size=2, day="Mon"))

    with pytest.raises(UnknownCategoryError) as excinfo:
        render_chart(config=CHART_CONFIG_BY_ID["pie"], records=extra)

    assert excinfo.value.key == "Mon"


def test_charts_without_colors_render_uncolored(records: tuple[Record, ...]) -> None:
    """color_of is optional."""

    config = replace(CHART_CONFIG_BY_ID["bar"], color_of=None)

    rendered = render_chart(config=config, records=records)

    assert {bar.color for bar in rendered.bars} == {None}
