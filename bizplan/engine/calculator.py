"""
Calculation Engine — turns (template, form values) into a full P&L.

``evaluate`` is a pure function of its inputs. ``calculate`` evaluates and
remembers the latest result per project-type id; that cache is the only
state the engine holds and it feeds the combined P&L and the cash flow.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from bizplan.engine.costs import investment_costs, operating_costs
from bizplan.engine.metrics import compute_roi
from bizplan.engine.revenue import get_revenue_strategy
from bizplan.engine.staffing import staffing_costs
from bizplan.engine.values import ValueReader
from bizplan.errors import UnknownProjectTypeError
from bizplan.models.results import (
    CalculationResult,
    CashFlowRow,
    CombinedAdjustments,
    CombinedResult,
    CombinedTotals,
    CostSummary,
    ProjectContribution,
    ResultBreakdown,
    RevenueSummary,
)
from bizplan.models.schemas import ProjectTypeSchema
from bizplan.registry.project_types import ProjectTypeRegistry

logger = logging.getLogger(__name__)


class CalculationEngine:
    """Evaluates templates and keeps the latest result per project type."""

    def __init__(self, registry: ProjectTypeRegistry | None = None):
        self.registry = registry if registry is not None else ProjectTypeRegistry()
        self._results: dict[str, CalculationResult] = {}

    # ── Single project ───────────────────────────────────

    def evaluate(
        self, schema: ProjectTypeSchema, values: Mapping[str, Any] | None = None
    ) -> CalculationResult:
        """Compute a result without touching the cache."""
        reader = ValueReader(schema, values)

        strategy = get_revenue_strategy(schema.id)
        annual_revenue, revenue_breakdown = strategy.compute(reader)
        revenue_breakdown = {"strategy": strategy.label, **revenue_breakdown}

        operating = operating_costs(reader)
        staffing = staffing_costs(reader)
        investment = investment_costs(reader)

        annual_costs = operating.total + staffing.total
        profit = annual_revenue - annual_costs

        return CalculationResult(
            type_id=schema.id,
            type_name=schema.name,
            revenue=RevenueSummary(
                annual=annual_revenue,
                monthly=annual_revenue / 12,
                daily=annual_revenue / 365,
            ),
            costs=CostSummary(
                annual=annual_costs,
                monthly=annual_costs / 12,
                operating=operating.total,
                staffing=staffing.total,
            ),
            investment=investment.total,
            profit=profit,
            monthly_profit=profit / 12,
            roi=compute_roi(investment.total, profit),
            breakdown=ResultBreakdown(
                revenue=revenue_breakdown,
                costs=operating,
                staffing=staffing,
                investment=investment,
            ),
        )

    def calculate(
        self, schema: Optional[ProjectTypeSchema], values: Mapping[str, Any] | None = None
    ) -> CalculationResult:
        """Evaluate and cache the result under the schema's id."""
        if schema is None:
            raise UnknownProjectTypeError(None)

        result = self.evaluate(schema, values)
        self._results[schema.id] = result
        logger.debug(
            f"Calculated '{schema.id}': revenue={result.revenue.annual:.2f} "
            f"costs={result.costs.annual:.2f} profit={result.profit:.2f}"
        )
        return result.model_copy(deep=True)

    def calculate_by_id(
        self, type_id: str, values: Mapping[str, Any] | None = None
    ) -> CalculationResult:
        return self.calculate(self.registry.get_project_type(type_id), values)

    def get_calculation(self, type_id: str) -> Optional[CalculationResult]:
        result = self._results.get(type_id)
        return result.model_copy(deep=True) if result is not None else None

    def forget(self, type_id: str) -> None:
        self._results.pop(type_id, None)

    def clear(self) -> None:
        self._results.clear()

    # ── Multiple projects ────────────────────────────────

    def _result_for(self, type_id: str) -> CalculationResult:
        cached = self._results.get(type_id)
        if cached is not None:
            return cached

        schema = self.registry.find_project_type(type_id)
        if schema is None:
            raise UnknownProjectTypeError(type_id)
        logger.warning(f"'{type_id}' has not been calculated yet, using template defaults")
        self.calculate(schema, {})
        return self._results[type_id]

    def calculate_combined(
        self,
        type_ids: Iterable[str],
        adjustments: CombinedAdjustments | None = None,
    ) -> CombinedResult:
        """Sum the latest results of several projects, with what-if multipliers."""
        adjustments = adjustments or CombinedAdjustments()
        combined = CombinedResult()
        totals = combined.totals

        for type_id in type_ids:
            result = self._result_for(type_id)
            revenue = result.revenue.annual * adjustments.revenue_multiplier
            costs = result.costs.annual * adjustments.cost_multiplier

            combined.projects.append(
                ProjectContribution(
                    type_id=type_id,
                    type_name=result.type_name,
                    revenue=revenue,
                    costs=costs,
                    profit=revenue - costs,
                    investment=result.investment,
                )
            )
            totals.revenue += revenue
            totals.costs += costs
            totals.investment += result.investment

        totals.profit = totals.revenue - totals.costs
        totals.roi = compute_roi(totals.investment, totals.profit)
        return combined

    def generate_cash_flow(
        self,
        type_ids: Iterable[str],
        months: int = 12,
        adjustments: CombinedAdjustments | None = None,
    ) -> list[CashFlowRow]:
        """Month-by-month cash position, spreading the combined P&L evenly."""
        totals: CombinedTotals = self.calculate_combined(type_ids, adjustments).totals
        inflow = totals.revenue / 12
        outflow = totals.costs / 12

        rows: list[CashFlowRow] = []
        opening = 0.0
        for month in range(1, months + 1):
            net_flow = inflow - outflow
            closing = opening + net_flow
            rows.append(
                CashFlowRow(
                    month=month,
                    opening=opening,
                    inflow=inflow,
                    outflow=outflow,
                    net_flow=net_flow,
                    closing=closing,
                )
            )
            opening = closing
        return rows
