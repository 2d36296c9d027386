"""Load the tips dataset from a CSV file.

The CSV must have a header row naming `total_bill`, `tip`, `size` and `day`.
Rows whose numeric fields do not parse are rejected; by default they are
dropped and logged, and in strict mode the first one aborts the load.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from layout.dto import RecordBatch
from layout.errors import InvalidRecordError
from layout.records import RECORD_FIELDS, parse_numbered_records

logger = logging.getLogger(__name__)


class DatasetError(Exception):
    """The dataset file is missing or structurally unusable."""


def load_dataset(path: str | Path, *, strict: bool = False) -> RecordBatch:
    """Read and parse the tips CSV.

    Args:
        path: CSV file path.
        strict: Raise on the first invalid row instead of dropping it.

    Returns:
        RecordBatch with accepted records and rejected rows.

    Raises:
        DatasetError: When the file is missing, unreadable or not UTF-8 CSV, or
            lacks required columns.
        InvalidRecordError: In strict mode, for the first invalid row.
    """

    csv_path = Path(path)
    try:
        with csv_path.open(newline="", encoding="utf-8-sig") as handle:
            reader = csv.DictReader(handle)
            missing = [name for name in RECORD_FIELDS if name not in (reader.fieldnames or ())]
            if missing:
                raise DatasetError(f"Dataset {csv_path} is missing columns: {missing}")
            batch = parse_numbered_records((reader.line_num, row) for row in reader)
    except FileNotFoundError as exc:
        raise DatasetError(f"Dataset not found: {csv_path}") from exc
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise DatasetError(f"Could not read dataset {csv_path}: {exc}") from exc

    for rejected in batch.rejected:
        if strict:
            raise rejected.error
        logger.warning("Dropping invalid row from %s: %s", csv_path, rejected.error)

    logger.info(
        "Loaded %d records from %s (%d rejected)",
        len(batch.records),
        csv_path,
        len(batch.rejected),
    )
    return batch


__all__ = ["DatasetError", "InvalidRecordError", "load_dataset"]
