"""Render a built-in chart from a CSV dataset and print its geometry as JSON."""

from __future__ import annotations

import json

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from core.charting.codec import encode_rendered_chart
from core.charting.configs import CHART_CONFIG_BY_ID
from core.charting.render import render_chart
from core.datasets import DatasetError, load_dataset
from layout.errors import InvalidRecordError, UnknownCategoryError
from layout.records import filter_records_by_range


class Command(BaseCommand):
    """Render one chart's geometry to stdout."""

    help = "Render a chart's geometry (points, paths, arcs or tree) from the tips dataset as JSON."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument("chart_id", choices=sorted(CHART_CONFIG_BY_ID), help="Built-in chart id.")
        parser.add_argument(
            "--dataset",
            default=None,
            help="CSV path (defaults to settings.TIPCHARTS_DATASET).",
        )
        parser.add_argument("--min-total-bill", type=float, default=None, help="Inclusive lower bound.")
        parser.add_argument("--max-total-bill", type=float, default=None, help="Inclusive upper bound.")
        parser.add_argument(
            "--strict",
            action="store_true",
            help="Abort on the first invalid row instead of dropping it.",
        )
        parser.add_argument("--indent", type=int, default=None, help="Pretty-print JSON with this indent.")

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        config = CHART_CONFIG_BY_ID[options["chart_id"]]
        low: float | None = options["min_total_bill"]
        high: float | None = options["max_total_bill"]
        if low is not None and high is not None and low > high:
            raise CommandError("--min-total-bill must be <= --max-total-bill.")

        records = ()
        if config.chart_type != "tree":
            dataset = options["dataset"] or settings.TIPCHARTS_DATASET
            strict = options["strict"] or settings.TIPCHARTS_STRICT_RECORDS
            try:
                batch = load_dataset(dataset, strict=strict)
            except (DatasetError, InvalidRecordError) as exc:
                raise CommandError(str(exc)) from exc
            if batch.rejected:
                self.stderr.write(f"Dropped {len(batch.rejected)} invalid row(s).")
            records = filter_records_by_range(batch.records, field="total_bill", low=low, high=high)

        try:
            rendered = render_chart(config=config, records=records)
        except UnknownCategoryError as exc:
            raise CommandError(f"Chart {config.id!r} has no color for category {exc.key!r}.") from exc

        self.stdout.write(json.dumps(encode_rendered_chart(rendered), indent=options["indent"]))
        return None
