"""Operating cost and investment totals for one template."""

from __future__ import annotations

from bizplan.engine.values import ValueReader
from bizplan.models.enums import FieldType, ProjectCategory
from bizplan.models.results import CostBreakdown, CostItem, InvestmentBreakdown, InvestmentItem

EVENTS_FIELD = "eventsPerYear"


def events_per_year(reader: ValueReader) -> float | None:
    """Events per year when the template knows about events, else None."""
    # a declared count with no bag value scales by its default, like every other input
    if reader.available(EVENTS_FIELD):
        return reader.number(EVENTS_FIELD)
    return None


def operating_costs(reader: ValueReader) -> CostBreakdown:
    """Sum of currency operating fields; per-event costs scale with the event count."""
    events = events_per_year(reader)
    breakdown = CostBreakdown()

    for spec in reader.schema.fields_in(ProjectCategory.OPERATING):
        if spec.type != FieldType.CURRENCY:
            continue
        value = reader.number(spec.id)
        if spec.is_per_event and events is not None:
            value *= events

        group = spec.group or "Other"
        breakdown.items[spec.id] = CostItem(
            name=spec.name, value=value, group=group, per_event=spec.is_per_event
        )
        breakdown.groups[group] = breakdown.groups.get(group, 0.0) + value
        breakdown.total += value

    return breakdown


def investment_costs(reader: ValueReader) -> InvestmentBreakdown:
    """Sum of currency investment fields, per-unit fields multiplied by their count."""
    breakdown = InvestmentBreakdown()

    for spec in reader.schema.fields_in(ProjectCategory.INVESTMENT):
        if spec.type != FieldType.CURRENCY:
            continue
        multiplier = 1.0
        if spec.multiplier_field and reader.available(spec.multiplier_field):
            multiplier = reader.number(spec.multiplier_field)
        value = reader.number(spec.id) * multiplier

        group = spec.group or "Other"
        breakdown.items[spec.id] = InvestmentItem(
            name=spec.name, value=value, group=group, multiplier=multiplier
        )
        breakdown.groups[group] = breakdown.groups.get(group, 0.0) + value
        breakdown.total += value

    return breakdown
