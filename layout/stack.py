"""Stack layout: cumulative bands for several aggregated series."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .dto import AggregatedEntry, StackBand, StackedSeries


def stack(
    aggregated_by_key: Mapping[str, Sequence[AggregatedEntry]],
    key_order: Sequence[str],
    *,
    categories: Sequence[str] | None = None,
) -> tuple[StackedSeries, ...]:
    """Stack per-category values for each key in `key_order`.

    Args:
        aggregated_by_key: For each stack key, its aggregated entries where
            `entry.key` is the category on the shared axis.
        key_order: Stacking order; the first key sits on the zero baseline.
        categories: Optional category order. Defaults to the first-seen order
            of categories across the keys in `key_order`.

    Returns:
        One StackedSeries per key in `key_order`, each covering every category.
        Band `i` of a category starts at the sum of keys `0..i-1` and ends at
        that baseline plus its own value. A key with no value for a category
        contributes 0 there (a zero-height band).
    """

    if len(set(key_order)) != len(key_order):
        raise ValueError("key_order must not contain duplicates")

    values_by_key: dict[str, dict[str, float]] = {}
    seen_categories: list[str] = []
    for key in key_order:
        values: dict[str, float] = {}
        for entry in aggregated_by_key.get(key, ()):
            values[entry.key] = entry.value
            if entry.key not in seen_categories:
                seen_categories.append(entry.key)
        values_by_key[key] = values

    ordered_categories = tuple(categories) if categories is not None else tuple(seen_categories)

    bands_by_key: dict[str, list[StackBand]] = {key: [] for key in key_order}
    for category in ordered_categories:
        baseline = 0.0
        for key in key_order:
            top = baseline + values_by_key[key].get(category, 0.0)
            bands_by_key[key].append(StackBand(category=category, baseline=baseline, top=top))
            baseline = top

    return tuple(StackedSeries(key=key, bands=tuple(bands_by_key[key])) for key in key_order)


def stack_extent(series: Sequence[StackedSeries]) -> tuple[float, float]:
    """Return the (min, max) over every band edge, or (0.0, 0.0) for no bands."""

    edges = [edge for item in series for band in item.bands for edge in (band.baseline, band.top)]
    if not edges:
        return (0.0, 0.0)
    return (min(edges), max(edges))
