"""Validation for ChartConfig definitions.

Configs decide pixel geometry, so validation is strict and fails fast: a
config that passes is guaranteed to render without configuration errors other
than unmapped categories in `color_of`, which can only be detected against
data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .schema import CHART_TYPES, ChartConfig

_NUMERIC_FIELDS = frozenset({"total_bill", "tip", "size"})
_CARTESIAN_TYPES = frozenset({"scatter", "line", "area", "stacked_area", "bar", "horizontal_bar"})


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of validating a chart config."""

    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


def validate_chart_config(config: ChartConfig) -> ValidationResult:
    """Validate a single ChartConfig.

    Args:
        config: ChartConfig to validate.

    Returns:
        ValidationResult containing errors and warnings.
    """

    errors: list[str] = []
    warnings: list[str] = []

    if not config.id.strip():
        errors.append("ChartConfig.id must be a non-empty string.")
    if not config.title.strip():
        errors.append(f"ChartConfig[{config.id}].title must be a non-empty string.")
    if config.chart_type not in CHART_TYPES:
        errors.append(f"ChartConfig[{config.id}].chart_type is not a supported value: {config.chart_type!r}.")

    if config.output_width <= 0 or config.output_height <= 0:
        errors.append(f"ChartConfig[{config.id}] output_width and output_height must be positive.")

    margin = config.margin
    if min(margin.top, margin.bottom, margin.left, margin.right) < 0:
        errors.append(f"ChartConfig[{config.id}].margin values must be >= 0.")

    if config.chart_type in _CARTESIAN_TYPES:
        _validate_plot_area(config, errors=errors)

    if not 0.0 <= config.padding < 1.0:
        errors.append(f"ChartConfig[{config.id}].padding must be in [0, 1) (got {config.padding!r}).")
    if config.tick_count_hint < 0:
        errors.append(f"ChartConfig[{config.id}].tick_count_hint must be >= 0.")
    if config.interpolation not in ("linear", "cardinal"):
        errors.append(
            f"ChartConfig[{config.id}].interpolation is not a supported value: {config.interpolation!r}."
        )
    if not 0.0 <= config.tension <= 1.0:
        warnings.append(
            f"ChartConfig[{config.id}].tension={config.tension!r} is outside [0, 1]; curves may overshoot."
        )

    for name in ("x_field", "y_field", "value_field"):
        value = getattr(config, name)
        if value not in _NUMERIC_FIELDS:
            errors.append(f"ChartConfig[{config.id}].{name} must be one of {sorted(_NUMERIC_FIELDS)}.")
    if config.radius_field is not None and config.radius_field not in _NUMERIC_FIELDS:
        errors.append(f"ChartConfig[{config.id}].radius_field must be one of {sorted(_NUMERIC_FIELDS)}.")

    if config.chart_type == "stacked_area":
        if not config.stack_keys:
            errors.append(f"ChartConfig[{config.id}] stacked_area charts must declare stack_keys.")
        if len(set(config.stack_keys)) != len(config.stack_keys):
            errors.append(f"ChartConfig[{config.id}].stack_keys must not contain duplicates.")
        unknown = [key for key in config.stack_keys if key not in _NUMERIC_FIELDS]
        if unknown:
            errors.append(f"ChartConfig[{config.id}].stack_keys references unknown fields: {unknown}.")
    elif config.stack_keys:
        warnings.append(f"ChartConfig[{config.id}].stack_keys is ignored for chart_type={config.chart_type!r}.")

    if len(set(config.category_order)) != len(config.category_order):
        errors.append(f"ChartConfig[{config.id}].category_order must not contain duplicates.")

    if config.chart_type == "pie":
        if config.inner_radius < 0 or config.outer_radius < 0:
            errors.append(f"ChartConfig[{config.id}] pie radii must be >= 0.")
        if config.inner_radius > config.outer_radius:
            errors.append(f"ChartConfig[{config.id}].inner_radius must be <= outer_radius.")
        if config.outer_radius == 0:
            warnings.append(f"ChartConfig[{config.id}].outer_radius is 0; slices will not be visible.")
        if config.pad_angle < 0:
            errors.append(f"ChartConfig[{config.id}].pad_angle must be >= 0.")

    if config.chart_type == "tree":
        if config.tree_width <= 0 or config.tree_height <= 0:
            errors.append(f"ChartConfig[{config.id}] tree_width and tree_height must be positive.")
        if config.node_radius < 0:
            errors.append(f"ChartConfig[{config.id}].node_radius must be >= 0.")
        if config.tree is None:
            warnings.append(f"ChartConfig[{config.id}] declares no tree; it renders empty.")

    return ValidationResult(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))


def validate_chart_configs(configs: Iterable[ChartConfig]) -> ValidationResult:
    """Validate a set of ChartConfigs and enforce unique ids."""

    errors: list[str] = []
    warnings: list[str] = []
    seen: set[str] = set()
    for config in configs:
        if config.id in seen:
            errors.append(f"Duplicate ChartConfig.id: {config.id!r}.")
        seen.add(config.id)
        result = validate_chart_config(config)
        errors.extend(result.errors)
        warnings.extend(result.warnings)
    return ValidationResult(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))


def _validate_plot_area(config: ChartConfig, *, errors: list[str]) -> None:
    """Ensure the margins leave a drawable plot area for cartesian charts."""

    margin = config.margin
    plot_width = config.output_width - margin.left - margin.right
    plot_height = config.output_height - margin.top - margin.bottom
    if plot_width <= margin.left:
        errors.append(f"ChartConfig[{config.id}] margins leave no horizontal plot area.")
    if plot_height - margin.top - config.axis_gutter <= margin.top:
        errors.append(f"ChartConfig[{config.id}] margins and axis_gutter leave no vertical plot area.")
    if config.axis_gutter < 0:
        errors.append(f"ChartConfig[{config.id}].axis_gutter must be >= 0.")
