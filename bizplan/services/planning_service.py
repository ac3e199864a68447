"""
Planning Service — high-level facade over registry, engine, scenarios and
selection state.

Everything is wired explicitly by ``build_planning_service``; there are no
module-level singletons.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from bizplan.config import Settings, get_settings
from bizplan.engine.calculator import CalculationEngine
from bizplan.engine.metrics import payback_schedule
from bizplan.engine.sensitivity import sensitivity_analysis
from bizplan.models.results import (
    CalculationResult,
    CashFlowRow,
    CombinedAdjustments,
    CombinedResult,
    PaybackRow,
    SensitivityImpact,
)
from bizplan.models.state import Scenario, ScenarioDifference
from bizplan.persistence.kv_store import KeyValueStore, build_store
from bizplan.persistence.scenario_repository import ScenarioRepository
from bizplan.registry.project_types import ProjectTypeRegistry
from bizplan.services.selection_service import SelectionStateManager

logger = logging.getLogger(__name__)


class PlanningService:
    """Orchestrates calculations, scenarios and the current selection."""

    def __init__(
        self,
        settings: Settings,
        registry: ProjectTypeRegistry,
        engine: CalculationEngine,
        scenarios: ScenarioRepository,
        selection: SelectionStateManager,
    ):
        self.settings = settings
        self.registry = registry
        self.engine = engine
        self.scenarios = scenarios
        self.selection = selection
        self._values: dict[str, dict[str, Any]] = {}  # latest inputs per project type

    # ── Calculations ─────────────────────────────────────

    def calculate(self, type_id: str, values: Mapping[str, Any] | None = None) -> CalculationResult:
        result = self.engine.calculate_by_id(type_id, values)
        self._values[type_id] = dict(values or {})
        return result

    def values_for(self, type_id: str) -> dict[str, Any]:
        return dict(self._values.get(type_id, {}))

    def _target_ids(self, type_ids: Optional[Iterable[str]]) -> list[str]:
        return list(type_ids) if type_ids is not None else self.selection.selected_project_types

    def combined(
        self,
        type_ids: Optional[Iterable[str]] = None,
        adjustments: CombinedAdjustments | None = None,
    ) -> CombinedResult:
        """Combined P&L; defaults to the currently selected project types."""
        return self.engine.calculate_combined(self._target_ids(type_ids), adjustments)

    def cash_flow(
        self,
        type_ids: Optional[Iterable[str]] = None,
        months: Optional[int] = None,
        adjustments: CombinedAdjustments | None = None,
    ) -> list[CashFlowRow]:
        months = months if months is not None else self.settings.cash_flow_months
        return self.engine.generate_cash_flow(self._target_ids(type_ids), months, adjustments)

    def payback(self, type_id: str, years: Optional[int] = None) -> list[PaybackRow]:
        result = self.engine.get_calculation(type_id) or self.calculate(type_id)
        years = years if years is not None else self.settings.payback_horizon_years
        return payback_schedule(result.profit, result.investment, years)

    def sensitivity(
        self,
        type_id: str,
        values: Mapping[str, Any] | None = None,
        swing: Optional[float] = None,
    ) -> list[SensitivityImpact]:
        schema = self.registry.get_project_type(type_id)
        values = values if values is not None else self._values.get(type_id, {})
        swing = swing if swing is not None else self.settings.sensitivity_swing
        return sensitivity_analysis(self.engine, schema, values, swing)

    # ── Scenarios ────────────────────────────────────────

    def save_scenario(
        self,
        name: str,
        type_ids: Optional[Iterable[str]] = None,
        adjustments: CombinedAdjustments | None = None,
    ) -> Scenario:
        """Snapshot the latest inputs of the given (or selected) project types."""
        adjustments = adjustments or CombinedAdjustments()
        ids = self._target_ids(type_ids) or list(self._values)
        scenario = Scenario(
            name=name,
            values={tid: self.values_for(tid) for tid in ids},
            revenue_multiplier=adjustments.revenue_multiplier,
            cost_multiplier=adjustments.cost_multiplier,
        )
        return self.scenarios.save_scenario(scenario)

    def load_scenario(self, name: str) -> CombinedResult:
        """Recalculate every project type of a scenario and return its combined P&L."""
        scenario = self.scenarios.load_scenario(name)
        for type_id, values in scenario.values.items():
            self.calculate(type_id, values)
        logger.info(f"Loaded scenario '{name}'")
        return self.engine.calculate_combined(
            scenario.values,
            CombinedAdjustments(
                revenue_multiplier=scenario.revenue_multiplier,
                cost_multiplier=scenario.cost_multiplier,
            ),
        )

    def list_scenarios(self) -> list[Scenario]:
        return self.scenarios.list_scenarios()

    def delete_scenario(self, name: str) -> None:
        self.scenarios.delete_scenario(name)

    def compare_scenarios(self, left: str, right: str) -> list[ScenarioDifference]:
        return self.scenarios.diff_scenarios(left, right)


def build_planning_service(
    settings: Settings | None = None,
    store: KeyValueStore | None = None,
) -> PlanningService:
    """Wire a PlanningService against one key-value store."""
    settings = settings or get_settings()
    store = store if store is not None else build_store(settings)

    registry = ProjectTypeRegistry(store)
    return PlanningService(
        settings=settings,
        registry=registry,
        engine=CalculationEngine(registry),
        scenarios=ScenarioRepository(store),
        selection=SelectionStateManager(registry, store),
    )
