"""Scales mapping data domains onto pixel ranges.

Three kinds are supported:

- `LinearScale` for continuous numeric domains,
- `BandScale` for ordered categories laid out as padded, equal-width bands,
- `OrdinalScale` for a 1:1 lookup from categories to caller-supplied values
  (typically colors).

Scales are immutable; derive a new one whenever the data changes.
"""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar

from .errors import UnknownCategoryError

T = TypeVar("T")


def extent(values: Iterable[float], *, include_zero: bool = False) -> tuple[float, float]:
    """Return the (min, max) of `values`.

    Args:
        values: Numeric values.
        include_zero: Whether to stretch the extent so it contains 0.

    Returns:
        `(low, high)`; `(0.0, 0.0)` when `values` is empty.
    """

    low = math.inf
    high = -math.inf
    for value in values:
        low = min(low, value)
        high = max(high, value)
    if low > high:
        return (0.0, 0.0)
    if include_zero:
        low = min(low, 0.0)
        high = max(high, 0.0)
    return (float(low), float(high))


@dataclass(frozen=True, slots=True)
class LinearScale:
    """Continuous scale: `map(v) = r0 + (v - d0) / (d1 - d0) * (r1 - r0)`.

    A degenerate domain (`domain_low == domain_high`, e.g. a single data point
    or no data) maps every input to `range_low`.
    """

    domain_low: float
    domain_high: float
    range_low: float
    range_high: float

    def __post_init__(self) -> None:
        if self.domain_low > self.domain_high:
            raise ValueError(
                f"domain_low must be <= domain_high (got {self.domain_low} > {self.domain_high})"
            )

    @property
    def is_degenerate(self) -> bool:
        return self.domain_high == self.domain_low

    def map(self, value: float) -> float:
        if self.is_degenerate:
            return self.range_low
        fraction = (value - self.domain_low) / (self.domain_high - self.domain_low)
        return self.range_low + fraction * (self.range_high - self.range_low)

    def invert(self, pixel: float) -> float:
        """Map a pixel coordinate back into the domain."""

        if self.is_degenerate or self.range_high == self.range_low:
            return self.domain_low
        fraction = (pixel - self.range_low) / (self.range_high - self.range_low)
        return self.domain_low + fraction * (self.domain_high - self.domain_low)


@dataclass(frozen=True, slots=True)
class BandScale:
    """Categorical scale splitting the range into `n` equal steps.

    Each step holds one band shrunk symmetrically by `padding`:
    `step = width / n`, `bandwidth = step * (1 - padding)` and the first band
    starts `step * padding / 2` in from the range edge.

    When `range_high < range_low` the range is reversed: the first category
    sits at the far (numerically largest) end, as for a y axis drawn upward.
    `map` always returns the band's numerically smaller edge.
    """

    domain: tuple[str, ...]
    range_low: float
    range_high: float
    padding: float = 0.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.padding < 1.0:
            raise ValueError(f"padding must be in [0, 1) (got {self.padding})")
        if len(set(self.domain)) != len(self.domain):
            raise ValueError("BandScale domain must not contain duplicates")

    @property
    def reversed(self) -> bool:
        return self.range_high < self.range_low

    @property
    def step(self) -> float:
        if not self.domain:
            return 0.0
        return abs(self.range_high - self.range_low) / len(self.domain)

    @property
    def bandwidth(self) -> float:
        return self.step * (1.0 - self.padding)

    def _slot(self, index: int) -> int:
        return len(self.domain) - 1 - index if self.reversed else index

    def map(self, category: str) -> float:
        try:
            index = self.domain.index(category)
        except ValueError:
            raise UnknownCategoryError(category) from None
        start = min(self.range_low, self.range_high)
        return start + self.step * self.padding / 2 + self._slot(index) * self.step

    def center(self, category: str) -> float:
        return self.map(category) + self.bandwidth / 2

    def invert(self, pixel: float) -> str | None:
        """Return the category whose step contains `pixel`, or None outside the range."""

        if not self.domain or self.step == 0:
            return None
        start = min(self.range_low, self.range_high)
        slot = math.floor((pixel - start) / self.step)
        if slot == len(self.domain) and pixel == max(self.range_low, self.range_high):
            slot -= 1
        if not 0 <= slot < len(self.domain):
            return None
        return self.domain[self._slot(slot)]


@dataclass(frozen=True, slots=True)
class OrdinalScale(Generic[T]):
    """1:1 lookup from domain entries to range values.

    Querying a value outside the domain is a configuration error and raises
    `UnknownCategoryError`; there is no silent default.
    """

    domain: tuple[Hashable, ...]
    range: tuple[T, ...]

    def __post_init__(self) -> None:
        if len(self.domain) != len(self.range):
            raise ValueError(
                f"OrdinalScale needs one range value per domain entry "
                f"({len(self.domain)} domain vs {len(self.range)} range)"
            )
        if len(set(self.domain)) != len(self.domain):
            raise ValueError("OrdinalScale domain must not contain duplicates")

    @classmethod
    def from_mapping(cls, mapping: Mapping[Hashable, T]) -> "OrdinalScale[T]":
        return cls(domain=tuple(mapping.keys()), range=tuple(mapping.values()))

    def map(self, value: Hashable) -> T:
        try:
            index = self.domain.index(value)
        except ValueError:
            raise UnknownCategoryError(value) from None
        return self.range[index]

    def __call__(self, value: Hashable) -> T:
        return self.map(value)
