"""
Tests: Revenue strategies for every built-in template.

Run with:
    pytest bizplan/tests/test_revenue.py -v
"""

import pytest

from bizplan.engine.calculator import CalculationEngine
from bizplan.engine.revenue import REVENUE_STRATEGIES, GenericRevenue, get_revenue_strategy
from bizplan.registry.defaults import BUILTIN_PROJECT_TYPES
from bizplan.registry.project_types import ProjectTypeRegistry


@pytest.fixture
def engine():
    return CalculationEngine(ProjectTypeRegistry())


def _revenue(engine, type_id, values=None):
    return engine.calculate_by_id(type_id, values).revenue.annual


class TestDispatch:
    def test_every_strategy_has_a_template(self):
        assert set(REVENUE_STRATEGIES) <= set(BUILTIN_PROJECT_TYPES)

    def test_unknown_id_falls_back_to_generic(self):
        assert isinstance(get_revenue_strategy("my-custom"), GenericRevenue)

    def test_clone_of_builtin_uses_generic(self, engine):
        engine.registry.create_from_template("gym", "myGym", "My Gym")
        # No field id of the gym template mentions "revenue"
        assert _revenue(engine, "myGym") == 0


class TestDefaultRevenue:
    @pytest.mark.parametrize(
        "type_id, expected",
        [
            ("conference", 200 * 150 * 0.8 * 12 + 10_000),
            ("saas", (100 * 29 + 50 * 79 + 10 * 199) * 0.975 * 12),
            ("ecommerce", 75 * 500 * 12 * 0.92 * 0.40),
            ("consulting", 120 * 30 * 48 * 0.75),
            ("workshop", 20 * 350 * 10 * 0.75),
            ("fleet", 10 * 365 * 0.65 * 55),
            ("coupon", 120 * 6 * 0.25 * 45 * 0.25 * 12),
            ("realestate", 1800 * 12 * 0.92 * 1.015 + 1200),
            ("capex", 90_000 * 6 / 12 * 0.5),
            ("subscription", 400 * 35 * 12 * 0.97 + 9000),
            ("licensing", 8 * 250_000 * 0.05 + 10_000 * 3),
            ("partnership", 15 * 80_000 * 0.12),
            ("portfolio", 500_000 * 0.08),
            ("efficiency", 25_000 + 20 * 2 * 35 * 46),
            ("contract", (40 * 0.85 + 10) * 6000),
        ],
    )
    def test_default_revenue(self, engine, type_id, expected):
        assert _revenue(engine, type_id) == pytest.approx(expected)


class TestEventRevenue:
    def test_zero_events_leaves_sponsorship(self, engine):
        assert _revenue(engine, "conference", {"eventsPerYear": 0}) == pytest.approx(10_000)

    def test_full_occupancy(self, engine):
        revenue = _revenue(engine, "conference", {"occupancyRate": 100, "sponsorship": 0})
        assert revenue == pytest.approx(200 * 150 * 12)


class TestSubscriptionTiers:
    def test_churn_halved_over_the_year(self, engine):
        revenue = _revenue(
            engine, "saas", {"basicUsers": 100, "proUsers": 0, "enterpriseUsers": 0, "churnRate": 10}
        )
        assert revenue == pytest.approx(100 * 29 * 0.95 * 12)

    def test_breakdown_per_tier(self, engine):
        breakdown = engine.calculate_by_id("saas").breakdown.revenue
        assert set(breakdown["tiers"]) == {"basic", "pro", "enterprise"}


class TestCapexBenefits:
    def test_no_benefit_when_lead_time_fills_the_year(self, engine):
        assert _revenue(engine, "capex", {"implementationTime": 10, "rampUpPeriod": 2}) == 0

    def test_last_month_before_boundary(self, engine):
        revenue = _revenue(engine, "capex", {"implementationTime": 9, "rampUpPeriod": 2})
        assert revenue == pytest.approx(90_000 * 1 / 12 * 0.5)

    def test_no_ramp_means_full_benefit(self, engine):
        revenue = _revenue(engine, "capex", {"implementationTime": 6, "rampUpPeriod": 0})
        assert revenue == pytest.approx(45_000)


class TestRentals:
    def test_fleet_reads_vehicle_count_from_investment(self, engine):
        result = engine.calculate_by_id("fleet", {"vehicles": 20})
        assert result.revenue.annual == pytest.approx(20 * 365 * 0.65 * 55)
        assert result.investment == pytest.approx(20 * 25_000 + 15_000)

    def test_real_estate_half_increase(self, engine):
        revenue = _revenue(
            engine, "realestate", {"occupancyRate": 100, "rentIncrease": 10, "otherIncome": 0}
        )
        assert revenue == pytest.approx(1800 * 12 * 1.05)
