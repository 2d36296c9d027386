"""Group-by-key reductions over records.

Downstream layouts (stack, pie, bar axes) rely on stable key ordering, so every
helper here preserves the first-seen order of keys in the input.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import TypeVar

from .dto import AggregatedEntry

R = TypeVar("R")


def group_records(records: Iterable[R], key_fn: Callable[[R], Hashable]) -> dict[Hashable, list[R]]:
    """Group records by key, preserving first-seen key order."""

    groups: dict[Hashable, list[R]] = {}
    for record in records:
        groups.setdefault(key_fn(record), []).append(record)
    return groups


def group_reduce(
    records: Iterable[R],
    key_fn: Callable[[R], Hashable],
    reduce_fn: Callable[[Sequence[R]], float],
) -> tuple[AggregatedEntry, ...]:
    """Reduce each group of records to one entry.

    Args:
        records: Input records in source order.
        key_fn: Callable extracting the grouping key from a record.
        reduce_fn: Callable reducing a non-empty group to a float.

    Returns:
        Exactly one AggregatedEntry per distinct key, ordered by the first
        occurrence of the key in `records`. Empty input yields `()`.
    """

    return tuple(
        AggregatedEntry(key=key, value=float(reduce_fn(group)))  # type: ignore[arg-type]
        for key, group in group_records(records, key_fn).items()
    )


def mean_of(value_getter: Callable[[R], float]) -> Callable[[Sequence[R]], float]:
    """Build a reducer returning the arithmetic mean of an extracted field."""

    def reduce(group: Sequence[R]) -> float:
        if not group:
            return 0.0
        return sum(value_getter(item) for item in group) / len(group)

    return reduce


def order_entries(
    entries: Iterable[AggregatedEntry],
    order: Sequence[str],
) -> tuple[AggregatedEntry, ...]:
    """Reorder entries by an explicit key order.

    Keys listed in `order` come first, in that order; keys not listed keep
    their relative input order after them. Listed keys with no entry are
    skipped.
    """

    entries = tuple(entries)
    rank = {key: idx for idx, key in enumerate(order)}
    indexed = list(enumerate(entries))
    indexed.sort(key=lambda pair: (rank.get(pair[1].key, len(rank)), pair[0]))
    return tuple(entry for _, entry in indexed)
