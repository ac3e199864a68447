"""
Scenario Repository — named snapshots of form values.

All scenarios live under the single ``scenarios`` key as a JSON list, most
recently saved last. Saving under an existing name replaces that entry.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional

from pydantic import ValidationError

from bizplan.errors import ScenarioNotFoundError
from bizplan.models.state import Scenario, ScenarioDifference
from bizplan.persistence.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

SCENARIOS_KEY = "scenarios"


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


class ScenarioRepository:
    """Save, list, load, delete and compare scenarios."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def _read_all(self) -> list[Scenario]:
        scenarios: list[Scenario] = []
        for raw in self._store.get(SCENARIOS_KEY, []) or []:
            try:
                scenarios.append(Scenario.model_validate(raw))
            except ValidationError as e:
                logger.warning(f"Skipping unreadable stored scenario: {e}")
        return scenarios

    def _write_all(self, scenarios: list[Scenario]) -> None:
        self._store.set(
            SCENARIOS_KEY,
            [s.model_dump(mode="json", by_alias=True) for s in scenarios],
        )

    def save_scenario(self, scenario: Scenario) -> Scenario:
        scenarios = [s for s in self._read_all() if s.name != scenario.name]
        scenarios.append(scenario)
        self._write_all(scenarios)
        logger.info(f"Saved scenario '{scenario.name}' ({len(scenario.values)} project types)")
        return scenario

    def list_scenarios(self) -> list[Scenario]:
        return self._read_all()

    def load_scenario(self, name: str) -> Scenario:
        for scenario in self._read_all():
            if scenario.name == name:
                return scenario
        raise ScenarioNotFoundError(f"No scenario named '{name}'")

    def delete_scenario(self, name: str) -> None:
        scenarios = self._read_all()
        remaining = [s for s in scenarios if s.name != name]
        if len(remaining) == len(scenarios):
            raise ScenarioNotFoundError(f"No scenario named '{name}'")
        self._write_all(remaining)
        logger.info(f"Deleted scenario '{name}'")

    def diff_scenarios(self, left_name: str, right_name: str) -> list[ScenarioDifference]:
        """
        List every input whose numeric value differs between two scenarios.
        A value missing on one side is reported as None on that side.
        """
        left = self.load_scenario(left_name)
        right = self.load_scenario(right_name)

        differences: list[ScenarioDifference] = []
        type_ids = list(dict.fromkeys([*left.values, *right.values]))
        for type_id in type_ids:
            left_bag = left.values.get(type_id, {})
            right_bag = right.values.get(type_id, {})
            for field_id in dict.fromkeys([*left_bag, *right_bag]):
                a = _as_number(left_bag.get(field_id))
                b = _as_number(right_bag.get(field_id))
                if a != b:
                    differences.append(
                        ScenarioDifference(type_id=type_id, field_id=field_id, left=a, right=b)
                    )
        return differences
