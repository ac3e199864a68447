"""
Staffing costs.

Staffing fields are grouped into roles by their role key: a headcount field
and a rate field with the same key form one role costing count × rate. Flat
fields add their value as-is. Templates whose staffing is not headcount-based
(property management, one-off project teams) declare fields that activate a
hook; the hook prices those fields itself and they are left out of the roles.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from bizplan.engine.costs import events_per_year
from bizplan.engine.values import ValueReader
from bizplan.models.enums import FieldRole, FieldType, ProjectCategory
from bizplan.models.results import StaffingBreakdown, StaffingRole

logger = logging.getLogger(__name__)


# ── Hooks ────────────────────────────────────────────────


class StaffingHook(ABC):
    """Prices a set of staffing fields outside the count × rate role model."""

    triggers: tuple[str, ...] = ()
    handles: frozenset[str] = frozenset()
    group: str = "Staff"

    def applies(self, reader: ValueReader) -> bool:
        declared = {spec.id for spec in reader.schema.fields_in(ProjectCategory.STAFFING)}
        return any(field_id in declared for field_id in self.triggers)

    @abstractmethod
    def apply(self, reader: ValueReader, breakdown: StaffingBreakdown) -> None:
        """Add adjustments to ``breakdown`` and update its total."""


class PropertyManagementHook(StaffingHook):
    """Management fee as a share of collected rent, plus a monthly handyman budget."""

    triggers = ("managementFee", "handymanRate")
    handles = frozenset({"managementFee", "propertyManager", "handymanRate", "handymanHours"})
    group = "Property Management"

    def apply(self, reader: ValueReader, breakdown: StaffingBreakdown) -> None:
        management = 0.0
        if reader.flag("propertyManager"):
            collected_rent = reader.number("monthlyRent") * 12 * reader.percent("occupancyRate")
            management = collected_rent * reader.percent("managementFee")
        handyman = reader.number("handymanRate") * reader.number("handymanHours") * 12

        _add_adjustment(breakdown, "management_fee", management, self.group)
        _add_adjustment(breakdown, "handyman", handyman, self.group)
        breakdown.total += management + handyman


class CapexProjectHook(StaffingHook):
    """
    One-off project team billed by the hour plus ongoing staff.

    When the value bag carries ``projectManager`` the staffing total is
    exactly the project team cost and any regular roles are ignored.
    """

    triggers = ("pmRate", "techRate")
    handles = frozenset({"projectManager", "pmRate", "pmHours", "techRate", "techHours", "ongoingStaff"})
    group = "Project Team"

    def apply(self, reader: ValueReader, breakdown: StaffingBreakdown) -> None:
        pm = reader.number("pmRate") * reader.number("pmHours")
        tech = reader.number("techRate") * reader.number("techHours")
        ongoing = reader.number("ongoingStaff")

        _add_adjustment(breakdown, "project_manager", pm, self.group)
        _add_adjustment(breakdown, "technical_staff", tech, self.group)
        _add_adjustment(breakdown, "ongoing_staff", ongoing, self.group)

        if reader.has("projectManager"):
            breakdown.total = pm + tech + ongoing
            breakdown.overridden = True
        else:
            breakdown.total += pm + tech + ongoing


STAFFING_HOOKS: list[StaffingHook] = [PropertyManagementHook(), CapexProjectHook()]


def _add_adjustment(breakdown: StaffingBreakdown, key: str, amount: float, group: str) -> None:
    breakdown.adjustments[key] = amount
    breakdown.groups[group] = breakdown.groups.get(group, 0.0) + amount


# ── Roles ────────────────────────────────────────────────


def _collect_roles(reader: ValueReader, excluded: set[str]) -> dict[str, dict[str, Any]]:
    roles: dict[str, dict[str, Any]] = {}

    for spec in reader.schema.fields_in(ProjectCategory.STAFFING):
        role = spec.staffing_role
        if spec.id in excluded or role is None:
            continue

        entry = roles.setdefault(
            spec.staffing_role_key,
            {
                "name": "",
                "count": 0.0,
                "salary": 0.0,
                "flat": 0.0,
                "group": spec.group or "Staff",
                "per_event": False,
            },
        )
        entry["per_event"] = entry["per_event"] or spec.is_per_event

        if role == FieldRole.COUNT:
            if spec.type == FieldType.BOOLEAN:
                entry["count"] = 1.0 if reader.flag(spec.id) else 0.0
            else:
                entry["count"] = reader.number(spec.id)
            entry["name"] = spec.name
        elif role == FieldRole.RATE:
            entry["salary"] = reader.number(spec.id)
            if not entry["name"]:
                entry["name"] = spec.name.replace(" Salary", "")
        else:
            entry["flat"] += reader.number(spec.id)
            if not entry["name"]:
                entry["name"] = spec.name

    return roles


def staffing_costs(reader: ValueReader) -> StaffingBreakdown:
    hooks = [hook for hook in STAFFING_HOOKS if hook.applies(reader)]
    excluded: set[str] = set()
    for hook in hooks:
        excluded |= hook.handles

    events = events_per_year(reader)
    breakdown = StaffingBreakdown()

    for key, entry in _collect_roles(reader, excluded).items():
        cost = entry["count"] * entry["salary"] + entry["flat"]
        if entry["per_event"] and events is not None:
            cost *= events

        breakdown.roles[key] = StaffingRole(
            key=key,
            name=entry["name"],
            count=entry["count"],
            salary=entry["salary"],
            total_cost=cost,
            group=entry["group"],
            per_event=entry["per_event"],
        )
        breakdown.groups[entry["group"]] = breakdown.groups.get(entry["group"], 0.0) + cost
        breakdown.total += cost

    for hook in hooks:
        logger.debug(f"Applying {type(hook).__name__} to '{reader.schema.id}'")
        hook.apply(reader, breakdown)

    return breakdown
