"""JSON views serving chart geometry."""

from __future__ import annotations

import logging

from django.conf import settings
from django.http import Http404, HttpRequest, JsonResponse
from django.urls import reverse
from django.views.decorators.http import require_GET

from core.charting.codec import encode_rendered_chart
from core.charting.configs import CHART_CONFIGS, get_chart_config
from core.charting.render import render_chart
from core.datasets import DatasetError, load_dataset
from core.forms import RangeFilterForm
from layout.dto import Record
from layout.errors import InvalidRecordError, UnknownCategoryError
from layout.records import filter_records_by_range

logger = logging.getLogger(__name__)


@require_GET
def chart_index(request: HttpRequest) -> JsonResponse:
    """List the built-in charts and their geometry endpoints."""

    charts = [
        {
            "id": config.id,
            "title": config.title,
            "chart_type": config.chart_type,
            "url": reverse("core:chart_geometry", kwargs={"chart_id": config.id}),
        }
        for config in CHART_CONFIGS
    ]
    return JsonResponse({"charts": charts})


@require_GET
def chart_geometry(request: HttpRequest, chart_id: str) -> JsonResponse:
    """Return the geometry of one chart, optionally range-filtered on total_bill."""

    config = get_chart_config(chart_id)
    if config is None:
        raise Http404(f"Unknown chart: {chart_id}")

    form = RangeFilterForm(request.GET)
    if not form.is_valid():
        return JsonResponse({"errors": form.errors.get_json_data()}, status=400)

    records: tuple[Record, ...] = ()
    if config.chart_type != "tree":
        try:
            batch = load_dataset(settings.TIPCHARTS_DATASET, strict=settings.TIPCHARTS_STRICT_RECORDS)
        except DatasetError as exc:
            logger.warning("Dataset unavailable: %s", exc)
            return JsonResponse({"error": str(exc)}, status=503)
        except InvalidRecordError as exc:
            return JsonResponse({"error": str(exc), "field": exc.field, "line": exc.line}, status=422)
        records = filter_records_by_range(
            batch.records,
            field="total_bill",
            low=form.cleaned_data.get("min_total_bill"),
            high=form.cleaned_data.get("max_total_bill"),
        )

    try:
        rendered = render_chart(config=config, records=records)
    except UnknownCategoryError as exc:
        logger.error("Chart %s has no color for category %r", config.id, exc.key)
        return JsonResponse({"error": str(exc), "key": exc.key}, status=500)

    return JsonResponse(encode_rendered_chart(rendered))
