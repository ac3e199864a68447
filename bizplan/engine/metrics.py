"""ROI, payback and break-even figures."""

from __future__ import annotations

import math

from bizplan.models.results import PaybackRow, RoiMetrics


def _periods_to_recover(investment: float, per_period: float) -> int | None:
    """Whole periods needed to earn back the investment, None when that never happens."""
    if not per_period > 0:
        return None
    periods = investment / per_period
    # a vanishing profit overflows the quotient to inf
    if not math.isfinite(periods):
        return None
    return math.ceil(periods)


def compute_roi(investment: float, profit: float) -> RoiMetrics:
    """
    ROI for a single annual profit figure.

    With no investment there is nothing to return on: ROI is 0 and payback is
    undefined (None). A non-positive profit never pays back (None).
    """
    if investment <= 0:
        return RoiMetrics(investment=investment, annual_profit=profit)

    return RoiMetrics(
        roi_percentage=profit / investment * 100,
        payback_years=_periods_to_recover(investment, profit),
        break_even_month=_periods_to_recover(investment, profit / 12),
        investment=investment,
        annual_profit=profit,
    )


def payback_schedule(profit: float, investment: float, years: int = 10) -> list[PaybackRow]:
    """Cumulative profit and net position (after recovering the investment) per year."""
    rows = []
    for year in range(1, years + 1):
        cumulative = profit * year
        rows.append(
            PaybackRow(year=year, cumulative_profit=cumulative, net_position=cumulative - investment)
        )
    return rows
