"""DTO types produced and consumed by the layout engine.

DTOs are immutable value containers. Every layout step builds new values from
its inputs; nothing here is mutated after construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal


@dataclass(frozen=True, slots=True)
class Record:
    """One row of the tips dataset.

    Attributes:
        total_bill: Bill total in dollars.
        tip: Tip amount in dollars.
        size: Party size.
        day: Day-of-week category (e.g. "Thur", "Sun").
    """

    total_bill: float
    tip: float
    size: int
    day: str


@dataclass(frozen=True, slots=True)
class RejectedRow:
    """A raw row that failed record parsing, with the reason."""

    line: int | None
    error: Exception


@dataclass(frozen=True, slots=True)
class RecordBatch:
    """Parsed records plus the rows that were rejected.

    The batch surfaces invalid rows without deciding what to do with them;
    callers choose to drop them or abort.
    """

    records: tuple[Record, ...] = ()
    rejected: tuple[RejectedRow, ...] = ()


@dataclass(frozen=True, slots=True)
class AggregatedEntry:
    """One reduced value per distinct key."""

    key: str
    value: float


@dataclass(frozen=True, slots=True)
class StackBand:
    """A single category's band within a stacked series."""

    category: str
    baseline: float
    top: float


@dataclass(frozen=True, slots=True)
class StackedSeries:
    """All bands for one stack key, ordered by category."""

    key: str
    bands: tuple[StackBand, ...]


@dataclass(frozen=True, slots=True)
class ArcDescriptor:
    """A pie slice described by its angles (radians, clockwise from 12 o'clock)."""

    start_angle: float
    end_angle: float
    pad_angle: float
    entry: AggregatedEntry

    @property
    def mid_angle(self) -> float:
        return (self.start_angle + self.end_angle) / 2


@dataclass(frozen=True, slots=True)
class PathPoint:
    """A point in pixel space."""

    x: float
    y: float


PathCommandKind = Literal["M", "L", "C", "A", "Z"]


@dataclass(frozen=True, slots=True)
class PathCommand:
    """A drawable path command.

    `values` holds the SVG path arguments for the command:

    - `M`/`L`: (x, y)
    - `C`: (x1, y1, x2, y2, x, y)
    - `A`: (rx, ry, rotation, large_arc, sweep, x, y)
    - `Z`: ()
    """

    command: PathCommandKind
    values: tuple[float, ...] = ()


@dataclass(frozen=True, slots=True)
class TreeNode:
    """An input hierarchy node. A parent owns its children."""

    label: str
    children: tuple["TreeNode", ...] = ()
    data: dict[str, Any] = field(default_factory=dict, compare=False)


@dataclass(frozen=True, slots=True)
class PositionedNode:
    """A hierarchy node with layout coordinates attached."""

    label: str
    x: float
    y: float
    depth: int
    children: tuple["PositionedNode", ...] = ()
    data: dict[str, Any] = field(default_factory=dict, compare=False)


@dataclass(frozen=True, slots=True)
class Tick:
    """An axis tick at a pixel position."""

    position: float
    label: str


@dataclass(frozen=True, slots=True)
class TreeLink:
    """A parent-to-child edge between two positioned nodes."""

    source: PositionedNode
    target: PositionedNode
