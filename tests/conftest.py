"""Pytest fixtures shared across the tipcharts test suite."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from layout.dto import Record

TIPS_HEADER = "total_bill,tip,sex,smoker,day,time,size"


@pytest.fixture
def records() -> tuple[Record, ...]:
    """Return a small, hand-checked record set spanning three days."""

    return (
        Record(total_bill=10.0, tip=1.0, size=2, day="Sun"),
        Record(total_bill=20.0, tip=3.0, size=4, day="Sun"),
        Record(total_bill=5.0, tip=1.0, size=1, day="Thur"),
        Record(total_bill=30.0, tip=5.0, size=3, day="Sat"),
        Record(total_bill=15.0, tip=2.0, size=2, day="Thur"),
    )


@pytest.fixture
def tips_csv(tmp_path: Path) -> Path:
    """Write a small tips CSV with one invalid row and return its path."""

    path = tmp_path / "tips.csv"
    path.write_text(
        "\n".join(
            [
                TIPS_HEADER,
                "16.99,1.01,Female,No,Sun,Dinner,2",
                "10.34,1.66,Male,No,Sun,Dinner,3",
                "not-a-number,3.5,Male,No,Sun,Dinner,3",
                "20.65,3.35,Male,No,Sat,Dinner,3",
                "27.2,4.0,Male,No,Thur,Lunch,4",
                "",
            ]
        ),
        encoding="utf-8",
    )
    return path


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no request/response cycle or file IO.
    - `integration`: tests touching Django views, commands, or the filesystem.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
