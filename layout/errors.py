"""Error types raised by the layout engine.

Only data-shape and configuration problems are errors. Degenerate domains and
empty inputs are valid states and never raise.
"""

from __future__ import annotations


class LayoutError(Exception):
    """Base class for layout engine errors."""


class InvalidRecordError(LayoutError, ValueError):
    """A raw record field failed to parse as its declared type.

    Attributes:
        field: Name of the offending field.
        raw_value: The raw value as supplied by the loader.
        line: Optional 1-based source line (header is line 1).
    """

    def __init__(self, field: str, raw_value: object, *, line: int | None = None) -> None:
        self.field = field
        self.raw_value = raw_value
        self.line = line
        location = f" on line {line}" if line is not None else ""
        super().__init__(f"Invalid value for {field!r}{location}: {raw_value!r}")


class UnknownCategoryError(LayoutError, KeyError):
    """An ordinal scale or color lookup was queried with an unmapped key."""

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unknown category: {self.key!r}"
