"""Axis tick derivation.

Linear scales get "nice" round values (steps of 1, 2 or 5 times a power of
ten); band and ordinal scales get one tick per category.
"""

from __future__ import annotations

import math
from numbers import Real

from .dto import Tick
from .scales import BandScale, LinearScale, OrdinalScale

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


def nice_step(low: float, high: float, count: int) -> float:
    """Return a round step size giving roughly `count` intervals over `[low, high]`.

    Returns 0.0 when no step exists (empty span or non-positive count).
    """

    if count <= 0 or high <= low:
        return 0.0
    raw = (high - low) / count
    power = math.floor(math.log10(raw))
    error = raw / 10**power
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1
    return factor * 10.0**power


def linear_tick_values(low: float, high: float, count: int) -> tuple[float, ...]:
    """Return nice tick values inside `[low, high]`.

    A degenerate domain yields its single value; `count <= 0` yields nothing.
    """

    if count <= 0:
        return ()
    if high == low:
        return (low,)
    step = nice_step(low, high, count)
    if step <= 0:
        return ()
    # Work in integer multiples of the step to avoid accumulating float error.
    first = math.ceil(low / step - 1e-9)
    last = math.floor(high / step + 1e-9)
    return tuple(_clean(index * step) for index in range(first, last + 1))


def format_tick(value: float, step: float) -> str:
    """Format a tick label with just enough decimals for `step`."""

    if step <= 0:
        return f"{value:g}"
    decimals = max(0, -math.floor(math.log10(step)))
    text = f"{value:.{decimals}f}"
    zero = f"{0:.{decimals}f}"
    return zero if text.lstrip("-") == zero else text


def ticks(scale: LinearScale | BandScale | OrdinalScale, count_hint: int = 10) -> tuple[Tick, ...]:
    """Derive axis ticks for a scale.

    Args:
        scale: The scale the axis renders.
        count_hint: Approximate tick count for linear scales; ignored for
            categorical scales.

    Returns:
        Ticks with pixel positions and labels, ordered by domain value.

    Raises:
        TypeError: For an ordinal scale whose range values are not numeric.
    """

    if isinstance(scale, LinearScale):
        values = linear_tick_values(scale.domain_low, scale.domain_high, count_hint)
        step = nice_step(scale.domain_low, scale.domain_high, count_hint)
        return tuple(Tick(position=scale.map(value), label=format_tick(value, step)) for value in values)

    if isinstance(scale, BandScale):
        return tuple(Tick(position=scale.center(category), label=str(category)) for category in scale.domain)

    if isinstance(scale, OrdinalScale):
        result: list[Tick] = []
        for category in scale.domain:
            position = scale.map(category)
            if not isinstance(position, Real) or isinstance(position, bool):
                raise TypeError(f"Ordinal ticks need numeric range values (got {position!r})")
            result.append(Tick(position=float(position), label=str(category)))
        return tuple(result)

    raise TypeError(f"Unsupported scale type: {type(scale).__name__}")


def _clean(value: float) -> float:
    rounded = round(value, 12)
    return 0.0 if rounded == 0 else rounded
