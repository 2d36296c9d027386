"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("charts/", views.chart_index, name="chart_index"),
    path("charts/<slug:chart_id>/", views.chart_geometry, name="chart_geometry"),
]
