"""Forms for chart request parameters.

Charts accept a single range filter on `total_bill`; everything else about a
chart comes from its ChartConfig.
"""

from __future__ import annotations

from django import forms


class RangeFilterForm(forms.Form):
    """Validate the optional inclusive `total_bill` range filter."""

    min_total_bill = forms.FloatField(required=False, label="Minimum total bill")
    max_total_bill = forms.FloatField(required=False, label="Maximum total bill")

    def clean(self) -> dict[str, object]:
        """Ensure the lower bound does not exceed the upper bound."""

        cleaned = super().clean() or {}
        low = cleaned.get("min_total_bill")
        high = cleaned.get("max_total_bill")
        if low is not None and high is not None and low > high:
            raise forms.ValidationError("min_total_bill must be <= max_total_bill.")
        return cleaned
