"""Integration tests for the chart geometry endpoints."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from django.urls import reverse

pytestmark = pytest.mark.integration


@pytest.fixture
def dataset(settings, tips_csv: Path) -> Path:
    """Point the views at the small fixture dataset."""

    settings.TIPCHARTS_DATASET = tips_csv
    settings.TIPCHARTS_STRICT_RECORDS = False
    return tips_csv


def test_chart_index_lists_every_builtin_chart(client) -> None:
    """The index links each chart to its geometry endpoint."""

    response = client.get(reverse("core:chart_index"))

    assert response.status_code == 200
    charts = response.json()["charts"]
    assert len(charts) == 8
    assert charts[0] == {
        "id": "scatter",
        "title": "Scatter Plot: Total Bill vs Tips",
        "chart_type": "scatter",
        "url": "/charts/scatter/",
    }


def test_chart_geometry_renders_bars_from_dataset(client, dataset: Path) -> None:
    """Bar geometry averages the valid rows of the configured dataset."""

    response = client.get(reverse("core:chart_geometry", kwargs={"chart_id": "bar"}))

    assert response.status_code == 200
    bars = response.json()["bars"]
    assert [bar["category"] for bar in bars] == ["Sun", "Sat", "Thur"]
    assert bars[0]["value"] == pytest.approx((16.99 + 10.34) / 2)


def test_chart_geometry_applies_range_filter(client, dataset: Path) -> None:
    """Only records inside the inclusive total_bill range are rendered."""

    response = client.get(
        reverse("core:chart_geometry", kwargs={"chart_id": "scatter"}),
        {"min_total_bill": "15", "max_total_bill": "21"},
    )

    assert response.status_code == 200
    points = response.json()["points"]
    assert [point["day"] for point in points] == ["Sun", "Sat"]


@pytest.mark.parametrize(
    "params",
    [
        {"min_total_bill": "30", "max_total_bill": "10"},
        {"min_total_bill": "lots"},
    ],
)
def test_chart_geometry_rejects_invalid_filters(client, dataset: Path, params: dict[str, str]) -> None:
    """Malformed or inverted bounds are a client error."""

    response = client.get(reverse("core:chart_geometry", kwargs={"chart_id": "scatter"}), params)

    assert response.status_code == 400
    assert "errors" in response.json()


def test_chart_geometry_unknown_chart_is_404(client) -> None:
    """Unknown chart ids are not found."""

    response = client.get(reverse("core:chart_geometry", kwargs={"chart_id": "radar"}))

    assert response.status_code == 404


def test_chart_geometry_missing_dataset_is_503(client, settings, tmp_path: Path) -> None:
    """A missing dataset makes data charts unavailable but not the tree chart."""

    settings.TIPCHARTS_DATASET = tmp_path / "missing.csv"

    data_chart = client.get(reverse("core:chart_geometry", kwargs={"chart_id": "pie"}))
    tree_chart = client.get(reverse("core:chart_geometry", kwargs={"chart_id": "tree"}))

    assert data_chart.status_code == 503
    assert "not found" in data_chart.json()["error"]
    assert tree_chart.status_code == 200
    assert tree_chart.json()["tree"]["label"] == "Root"


def test_chart_geometry_strict_mode_reports_invalid_row(client, settings, dataset: Path) -> None:
    """Strict mode refuses datasets with invalid rows and names the line."""

    settings.TIPCHARTS_STRICT_RECORDS = True

    response = client.get(reverse("core:chart_geometry", kwargs={"chart_id": "line"}))

    assert response.status_code == 422
    assert response.json()["field"] == "total_bill"
    assert response.json()["line"] == 4


def test_chart_geometry_unmapped_color_is_a_server_error(
    client, settings, tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """A day missing from a chart's color scale is logged and reported."""

    path = tmp_path / "tips.csv"
    path.write_text("total_bill,tip,sex,smoker,day,time,size\n10,1,Male,No,Mon,Lunch,2\n", encoding="utf-8")
    settings.TIPCHARTS_DATASET = path
    caplog.set_level(logging.ERROR, logger="core.views")

    response = client.get(reverse("core:chart_geometry", kwargs={"chart_id": "pie"}))

    assert response.status_code == 500
    assert response.json()["key"] == "Mon"
    assert any("has no color for category" in message for message in caplog.messages)


def test_chart_geometry_only_accepts_get(client) -> None:
    """Geometry endpoints are read-only."""

    response = client.post(reverse("core:chart_geometry", kwargs={"chart_id": "tree"}))

    assert response.status_code == 405


def test_chart_geometry_undecodable_dataset_is_503(client, settings, tmp_path: Path) -> None:
    """A dataset that is not UTF-8 is reported as unavailable."""

    path = tmp_path / "tips.csv"
    path.write_bytes(b"total_bill,tip,sex,smoker,day,time,size\n10,1,Male,No,S\xff\xfeun,Lunch,2\n")
    settings.TIPCHARTS_DATASET = path

    response = client.get(reverse("core:chart_geometry", kwargs={"chart_id": "bar"}))

    assert response.status_code == 503
    assert "Could not read" in response.json()["error"]
