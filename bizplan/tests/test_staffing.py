"""
Tests: Staffing roles, per-event scaling and staffing hooks.

Run with:
    pytest bizplan/tests/test_staffing.py -v
"""

import pytest

from bizplan.engine.calculator import CalculationEngine
from bizplan.engine.staffing import staffing_costs
from bizplan.engine.values import ValueReader
from bizplan.models.schemas import ProjectTypeSchema
from bizplan.registry.project_types import ProjectTypeRegistry


@pytest.fixture
def engine():
    return CalculationEngine(ProjectTypeRegistry())


def _staffing_schema(fields, **extra_categories):
    categories = {"investment": [], "revenue": [], "operating": [], "staffing": fields}
    categories.update(extra_categories)
    return ProjectTypeSchema.model_validate({"id": "team", "name": "Team", "categories": categories})


class TestRoles:
    def test_count_times_salary(self, engine):
        roles = engine.calculate_by_id("padel").breakdown.staffing.roles
        assert roles["ftMgr"].count == 1
        assert roles["ftMgr"].salary == 35_000
        assert roles["ftMgr"].total_cost == 35_000
        assert roles["ftMgr"].name == "Full-time Manager"

    def test_groups_sum_roles(self, engine):
        groups = engine.calculate_by_id("padel").breakdown.staffing.groups
        assert groups["Coaching"] == pytest.approx(37_000)
        assert sum(groups.values()) == pytest.approx(93_000)

    def test_explicit_role_key_pairs_plural_count(self, engine):
        staffing = engine.calculate_by_id("saas").breakdown.staffing
        assert staffing.roles["developer"].count == 2
        assert staffing.roles["developer"].total_cost == 120_000
        assert staffing.total == pytest.approx(165_000)

    def test_boolean_count(self):
        schema = _staffing_schema(
            [
                {"id": "nightGuard", "name": "Night Guard", "type": "boolean", "defaultValue": False},
                {"id": "nightGuardSalary", "name": "Night Guard Salary", "type": "currency", "defaultValue": 20_000},
            ]
        )
        assert staffing_costs(ValueReader(schema, {})).total == 0
        assert staffing_costs(ValueReader(schema, {"nightGuard": True})).total == 20_000

    def test_rate_without_count_costs_nothing(self):
        schema = _staffing_schema(
            [{"id": "cleanerSal", "name": "Cleaner Salary", "type": "currency", "defaultValue": 15_000}]
        )
        breakdown = staffing_costs(ValueReader(schema, {}))
        assert breakdown.roles["cleaner"].name == "Cleaner"
        assert breakdown.total == 0


class TestPerEvent:
    def test_conference_defaults(self, engine):
        staffing = engine.calculate_by_id("conference").breakdown.staffing
        assert staffing.roles["eventManager"].total_cost == 40_000
        assert staffing.roles["speakerFees"].total_cost == pytest.approx(3_000 * 12)
        assert staffing.roles["support"].total_cost == pytest.approx(3 * 800 * 12)
        assert staffing.total == pytest.approx(104_800)

    def test_event_count_scales_costs(self, engine):
        result = engine.calculate_by_id("conference", {"eventsPerYear": 6})
        assert result.costs.operating == pytest.approx(24_000 + 12_000 + 8_000 + 2_000 + 3_000)
        assert result.costs.staffing == pytest.approx(40_000 + 18_000 + 14_400)

    def test_no_scaling_without_event_count(self):
        schema = _staffing_schema(
            [
                {"id": "eventCrew", "name": "Event Crew", "type": "number", "defaultValue": 2},
                {"id": "eventCrewSal", "name": "Event Crew Salary", "type": "currency", "defaultValue": 500},
            ]
        )
        assert staffing_costs(ValueReader(schema, {})).total == 1_000
        assert staffing_costs(ValueReader(schema, {"eventsPerYear": 4})).total == 4_000


class TestPropertyManagementHook:
    def test_defaults(self, engine):
        staffing = engine.calculate_by_id("realestate").breakdown.staffing
        assert staffing.adjustments["management_fee"] == pytest.approx(1800 * 12 * 0.92 * 0.08)
        assert staffing.adjustments["handyman"] == pytest.approx(30 * 4 * 12)
        assert staffing.roles == {}
        assert staffing.total == pytest.approx(1589.76 + 1440)

    def test_no_manager_no_fee(self, engine):
        staffing = engine.calculate_by_id("realestate", {"propertyManager": False}).breakdown.staffing
        assert staffing.adjustments["management_fee"] == 0
        assert staffing.total == pytest.approx(1440)


class TestCapexProjectHook:
    def test_team_added_to_total(self, engine):
        staffing = engine.calculate_by_id("capex").breakdown.staffing
        assert staffing.adjustments == {
            "project_manager": 85 * 400,
            "technical_staff": 65 * 600,
            "ongoing_staff": 15_000,
        }
        assert staffing.total == pytest.approx(88_000)
        assert not staffing.overridden

    def test_project_manager_value_overrides_total(self):
        schema = _staffing_schema(
            [
                {"id": "analyst", "name": "Analyst", "type": "number", "defaultValue": 1},
                {"id": "analystSal", "name": "Analyst Salary", "type": "currency", "defaultValue": 50_000},
                {"id": "pmRate", "name": "PM Rate", "type": "currency", "defaultValue": 100},
                {"id": "pmHours", "name": "PM Hours", "type": "number", "defaultValue": 10},
            ]
        )
        without_flag = staffing_costs(ValueReader(schema, {}))
        assert without_flag.total == pytest.approx(51_000)

        with_flag = staffing_costs(ValueReader(schema, {"projectManager": True}))
        assert with_flag.overridden
        assert with_flag.total == pytest.approx(1_000)
