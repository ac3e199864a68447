"""
Derived (never persisted as authoritative) calculation outputs.

"Never" payback / break-even is represented as ``None``; formatting it as
"Never" or "∞" is left to the render boundary.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


# ── Headline figures ─────────────────────────────────────


class RevenueSummary(BaseModel):
    annual: float = 0.0
    monthly: float = 0.0
    daily: float = 0.0


class CostSummary(BaseModel):
    annual: float = 0.0
    monthly: float = 0.0
    operating: float = 0.0
    staffing: float = 0.0


class RoiMetrics(BaseModel):
    """Return on investment; payback fields are None when the investment never pays back."""
    roi_percentage: float = 0.0
    payback_years: Optional[int] = None
    break_even_month: Optional[int] = None
    investment: float = 0.0
    annual_profit: float = 0.0

    @property
    def computable(self) -> bool:
        return self.investment > 0

    @property
    def pays_back(self) -> bool:
        return self.payback_years is not None


# ── Breakdowns ───────────────────────────────────────────


class CostItem(BaseModel):
    name: str
    value: float
    group: str
    per_event: bool = False


class CostBreakdown(BaseModel):
    items: dict[str, CostItem] = {}
    groups: dict[str, float] = {}
    total: float = 0.0


class StaffingRole(BaseModel):
    key: str
    name: str = ""
    count: float = 0.0
    salary: float = 0.0
    total_cost: float = 0.0
    group: str = "Staff"
    per_event: bool = False


class StaffingBreakdown(BaseModel):
    roles: dict[str, StaffingRole] = {}
    groups: dict[str, float] = {}
    adjustments: dict[str, float] = {}  # costs contributed by template hooks
    overridden: bool = False            # a hook replaced the role sum entirely
    total: float = 0.0


class InvestmentItem(BaseModel):
    name: str
    value: float
    group: str
    multiplier: float = 1.0


class InvestmentBreakdown(BaseModel):
    items: dict[str, InvestmentItem] = {}
    groups: dict[str, float] = {}
    total: float = 0.0


class ResultBreakdown(BaseModel):
    revenue: dict[str, Any] = {}
    costs: CostBreakdown = Field(default_factory=CostBreakdown)
    staffing: StaffingBreakdown = Field(default_factory=StaffingBreakdown)
    investment: InvestmentBreakdown = Field(default_factory=InvestmentBreakdown)


class CalculationResult(BaseModel):
    """Full P&L for one project type."""
    type_id: str
    type_name: str
    revenue: RevenueSummary
    costs: CostSummary
    investment: float = 0.0
    profit: float = 0.0
    monthly_profit: float = 0.0
    roi: RoiMetrics = Field(default_factory=RoiMetrics)
    breakdown: ResultBreakdown = Field(default_factory=ResultBreakdown)


# ── Multi-project aggregation ────────────────────────────


class CombinedAdjustments(BaseModel):
    """What-if multipliers applied to every project's revenue and costs."""
    revenue_multiplier: float = Field(default=1.0, ge=0)
    cost_multiplier: float = Field(default=1.0, ge=0)


class ProjectContribution(BaseModel):
    type_id: str
    type_name: str
    revenue: float
    costs: float
    profit: float
    investment: float


class CombinedTotals(BaseModel):
    revenue: float = 0.0
    costs: float = 0.0
    profit: float = 0.0
    investment: float = 0.0
    roi: RoiMetrics = Field(default_factory=RoiMetrics)


class CombinedResult(BaseModel):
    projects: list[ProjectContribution] = []
    totals: CombinedTotals = Field(default_factory=CombinedTotals)


class CashFlowRow(BaseModel):
    month: int
    opening: float
    inflow: float
    outflow: float
    net_flow: float
    closing: float


class PaybackRow(BaseModel):
    year: int
    cumulative_profit: float
    net_position: float  # cumulative profit minus the initial investment


class SensitivityImpact(BaseModel):
    """Profit swing caused by flexing one input (one tornado-chart bar)."""
    type_id: str
    field_id: str
    label: str
    base_value: float
    low_value: float
    high_value: float
    low_profit: float
    high_profit: float
    impact: float
