"""
Render-boundary formatting.

Results carry plain floats and None for "never pays back"; this is the only
place those become display strings.
"""

from __future__ import annotations

from typing import Optional

from bizplan.models.results import RoiMetrics


def format_currency(value: float, symbol: str = "€", decimals: int = 0) -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.{decimals}f}"


def format_percentage(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}%"


def format_payback(years: Optional[int], unit: str = "years") -> str:
    if years is None:
        return "Never"
    return f"{years} {unit}"


def format_roi(roi: RoiMetrics) -> str:
    if not roi.computable:
        return "N/A"
    return format_percentage(roi.roi_percentage)
