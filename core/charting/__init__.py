"""Declarative chart configuration and rendering helpers.

Charts are driven by `ChartConfig` objects rather than bespoke view logic.
This package contains the schema, validation, built-in configs, rendering into
geometry and JSON encoding used by the views and the `render_chart` command.
"""
