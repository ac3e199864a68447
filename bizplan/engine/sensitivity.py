"""
Sensitivity (tornado) analysis.

Each key variable is flexed down and up by ``swing`` while every other input
stays put. The profit spread between the two runs is the variable's impact.
Runs go through ``CalculationEngine.evaluate`` so the result cache is left
untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from bizplan.engine.calculator import CalculationEngine
from bizplan.engine.values import ValueReader
from bizplan.models.enums import FieldType
from bizplan.models.results import SensitivityImpact
from bizplan.models.schemas import ProjectTypeSchema

logger = logging.getLogger(__name__)

KEY_VARIABLE_MARKERS = ("Rate", "Fee", "Price", "Members", "Sal")

_NUMERIC_TYPES = (FieldType.NUMBER, FieldType.CURRENCY, FieldType.PERCENTAGE)


def key_variables(schema: ProjectTypeSchema) -> list[str]:
    """Numeric field ids that look like prices, rates, fees, memberships or salaries."""
    return [
        spec.id
        for _, spec in schema.iter_fields()
        if spec.type in _NUMERIC_TYPES
        and any(marker in spec.id for marker in KEY_VARIABLE_MARKERS)
    ]


def sensitivity_analysis(
    engine: CalculationEngine,
    schema: ProjectTypeSchema,
    values: Mapping[str, Any] | None = None,
    swing: float = 0.2,
    field_ids: Iterable[str] | None = None,
) -> list[SensitivityImpact]:
    """Impacts sorted from the most to the least influential variable."""
    base_values = dict(values or {})
    reader = ValueReader(schema, base_values)
    candidates = list(field_ids) if field_ids is not None else key_variables(schema)

    impacts: list[SensitivityImpact] = []
    for field_id in dict.fromkeys(candidates):
        spec = schema.find_field(field_id)
        if spec is None:
            logger.debug(f"Skipping unknown sensitivity field '{field_id}' for '{schema.id}'")
            continue

        base = reader.number(field_id)
        if base == 0:
            continue

        low = max(0.0, base * (1 - swing))
        high = base * (1 + swing)
        low_profit = engine.evaluate(schema, {**base_values, field_id: low}).profit
        high_profit = engine.evaluate(schema, {**base_values, field_id: high}).profit

        impacts.append(
            SensitivityImpact(
                type_id=schema.id,
                field_id=field_id,
                label=f"{schema.name} {spec.name}",
                base_value=base,
                low_value=low,
                high_value=high,
                low_profit=low_profit,
                high_profit=high_profit,
                impact=abs(high_profit - low_profit),
            )
        )

    impacts.sort(key=lambda i: i.impact, reverse=True)
    return impacts
