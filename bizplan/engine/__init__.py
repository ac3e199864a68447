"""Engine — value reading, revenue strategies, costs, ROI, CalculationEngine."""

from bizplan.engine.calculator import CalculationEngine
from bizplan.engine.metrics import compute_roi, payback_schedule
from bizplan.engine.revenue import REVENUE_STRATEGIES, RevenueStrategy, get_revenue_strategy
from bizplan.engine.sensitivity import key_variables, sensitivity_analysis
from bizplan.engine.values import ValueReader

__all__ = [
    "CalculationEngine",
    "compute_roi",
    "payback_schedule",
    "REVENUE_STRATEGIES",
    "RevenueStrategy",
    "get_revenue_strategy",
    "key_variables",
    "sensitivity_analysis",
    "ValueReader",
]
