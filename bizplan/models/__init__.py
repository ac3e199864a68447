"""Models — enums, template schemas, calculation results, session state."""

from .enums import FieldRole, FieldType, ProjectCategory, SelectionEvent
from .schemas import (
    BusinessTypeCategory,
    FieldSpec,
    ImportReport,
    ProjectTypeCategories,
    ProjectTypeSchema,
    SkippedTemplate,
)
from .results import (
    CalculationResult,
    CashFlowRow,
    CombinedAdjustments,
    CombinedResult,
    CombinedTotals,
    CostBreakdown,
    CostItem,
    CostSummary,
    InvestmentBreakdown,
    InvestmentItem,
    PaybackRow,
    ProjectContribution,
    ResultBreakdown,
    RevenueSummary,
    RoiMetrics,
    SensitivityImpact,
    StaffingBreakdown,
    StaffingRole,
)
from .state import Scenario, ScenarioDifference, SelectionSnapshot

__all__ = [
    "FieldRole",
    "FieldType",
    "ProjectCategory",
    "SelectionEvent",
    "BusinessTypeCategory",
    "FieldSpec",
    "ImportReport",
    "ProjectTypeCategories",
    "ProjectTypeSchema",
    "SkippedTemplate",
    "CalculationResult",
    "CashFlowRow",
    "CombinedAdjustments",
    "CombinedResult",
    "CombinedTotals",
    "CostBreakdown",
    "CostItem",
    "CostSummary",
    "InvestmentBreakdown",
    "InvestmentItem",
    "PaybackRow",
    "ProjectContribution",
    "ResultBreakdown",
    "RevenueSummary",
    "RoiMetrics",
    "SensitivityImpact",
    "StaffingBreakdown",
    "StaffingRole",
    "Scenario",
    "ScenarioDifference",
    "SelectionSnapshot",
]
