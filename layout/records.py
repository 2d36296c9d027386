"""Record parsing and filtering.

Raw rows arrive from an external loader as string mappings (one per CSV row).
Numeric fields must parse as finite numbers or the row is rejected with an
`InvalidRecordError`.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping

from .dto import Record, RecordBatch, RejectedRow
from .errors import InvalidRecordError

RECORD_FIELDS = ("total_bill", "tip", "size", "day")


def parse_record(row: Mapping[str, object], *, line: int | None = None) -> Record:
    """Parse a single raw row into a Record.

    Args:
        row: Mapping with `total_bill`, `tip`, `size` and `day` entries.
        line: Optional source line number used in error messages.

    Returns:
        The parsed Record.

    Raises:
        InvalidRecordError: When a field is missing or fails to parse.
    """

    total_bill = _parse_float(row, "total_bill", line=line)
    tip = _parse_float(row, "tip", line=line)
    size = _parse_int(row, "size", line=line)

    day_raw = row.get("day")
    day = str(day_raw).strip() if day_raw is not None else ""
    if not day:
        raise InvalidRecordError("day", day_raw, line=line)
    return Record(total_bill=total_bill, tip=tip, size=size, day=day)


def parse_records(rows: Iterable[Mapping[str, object]], *, first_line: int = 2) -> RecordBatch:
    """Parse raw rows, collecting invalid rows instead of raising.

    Args:
        rows: Raw row mappings in source order.
        first_line: Line number of the first row (2 when a header precedes it).

    Returns:
        RecordBatch with accepted records in input order and rejected rows.
    """

    return parse_numbered_records(enumerate(rows, start=first_line))


def parse_numbered_records(numbered_rows: Iterable[tuple[int | None, Mapping[str, object]]]) -> RecordBatch:
    """Parse `(line, row)` pairs, collecting invalid rows instead of raising.

    Loaders that know where each row sits in the source (a CSV reader skips
    blank lines, and quoted fields may span lines) pass that line here.
    """

    records: list[Record] = []
    rejected: list[RejectedRow] = []
    for line, row in numbered_rows:
        try:
            records.append(parse_record(row, line=line))
        except InvalidRecordError as exc:
            rejected.append(RejectedRow(line=line, error=exc))
    return RecordBatch(records=tuple(records), rejected=tuple(rejected))


def filter_records_by_range(
    records: Iterable[Record],
    *,
    field: str = "total_bill",
    low: float | None = None,
    high: float | None = None,
) -> tuple[Record, ...]:
    """Filter records by an inclusive numeric range on one field.

    Args:
        records: Parsed records.
        field: Numeric Record attribute to filter on.
        low: Optional lower bound (inclusive).
        high: Optional upper bound (inclusive).

    Returns:
        Records within the range, in input order.
    """

    if field not in ("total_bill", "tip", "size"):
        raise ValueError(f"Cannot range-filter on non-numeric field {field!r}")

    filtered: list[Record] = []
    for record in records:
        value = getattr(record, field)
        if low is not None and value < low:
            continue
        if high is not None and value > high:
            continue
        filtered.append(record)
    return tuple(filtered)


def _parse_float(row: Mapping[str, object], name: str, *, line: int | None) -> float:
    raw = row.get(name)
    if raw is None or isinstance(raw, bool) or "_" in str(raw):
        raise InvalidRecordError(name, raw, line=line)
    try:
        value = float(str(raw).strip())
    except ValueError:
        raise InvalidRecordError(name, raw, line=line) from None
    if not math.isfinite(value):
        raise InvalidRecordError(name, raw, line=line)
    return value


def _parse_int(row: Mapping[str, object], name: str, *, line: int | None) -> int:
    raw = row.get(name)
    if raw is None or isinstance(raw, bool) or "_" in str(raw):
        raise InvalidRecordError(name, raw, line=line)
    try:
        return int(str(raw).strip())
    except ValueError:
        raise InvalidRecordError(name, raw, line=line) from None
