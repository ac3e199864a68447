"""
Revenue strategies — one formula per business template.

Each strategy turns a ValueReader into ``(annual_revenue, breakdown)``. The
breakdown is a JSON-ready dict whose shape is specific to the strategy.
Percentages are entered as 0-100 and read as fractions via ``reader.percent``.
Templates without a dedicated strategy fall back to GenericRevenue.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from bizplan.engine.values import ValueReader
from bizplan.models.enums import FieldType, ProjectCategory

logger = logging.getLogger(__name__)

RevenueOutcome = tuple[float, dict[str, Any]]


class RevenueStrategy(ABC):
    """Base class for a template's annual revenue formula."""

    label: str = ""

    @abstractmethod
    def compute(self, reader: ValueReader) -> RevenueOutcome:
        ...


# ── Booking / membership / events ────────────────────────


class TimeSlotRevenue(RevenueStrategy):
    """Court-style bookings split into peak and off-peak slots."""

    label = "time-slot rental"

    def _slot(self, reader: ValueReader, prefix: str, courts: float, days: float, weeks: float) -> dict[str, float]:
        hours = reader.number(f"{prefix}Hours")
        rate = reader.number(f"{prefix}Rate")
        utilization = reader.number(f"{prefix}Util")
        total_hours = hours * days * weeks
        utilized_hours = total_hours * utilization / 100
        return {
            "hours": hours,
            "rate": rate,
            "utilization": utilization,
            "total_hours": total_hours,
            "utilized_hours": utilized_hours,
            "revenue": utilized_hours * rate * courts,
        }

    def compute(self, reader: ValueReader) -> RevenueOutcome:
        courts = reader.number("courts", fallback=1)
        days = reader.number("days", fallback=7)
        weeks = reader.number("weeks", fallback=52)

        peak = self._slot(reader, "peak", courts, days, weeks)
        off_peak = self._slot(reader, "off", courts, days, weeks)
        annual = peak["revenue"] + off_peak["revenue"]
        return annual, {"courts": courts, "peak": peak, "off_peak": off_peak}


class MembershipRevenue(RevenueStrategy):
    """Weekly, monthly and annual memberships with an optional opening ramp-up."""

    label = "membership"

    def compute(self, reader: ValueReader) -> RevenueOutcome:
        tiers = {
            "weekly": ("weekMembers", "weekFee", 52),
            "monthly": ("monthMembers", "monthFee", 12),
            "annual": ("annualMembers", "annualFee", 1),
        }
        memberships: dict[str, dict[str, float]] = {}
        for tier, (members_id, fee_id, periods) in tiers.items():
            members = reader.number(members_id)
            fee = reader.number(fee_id)
            memberships[tier] = {
                "members": members,
                "fee": fee,
                "revenue": members * fee * periods,
            }
        base = sum(m["revenue"] for m in memberships.values())

        annual = base
        ramp: dict[str, Any] = {"applied": False}
        if reader.flag("rampUp"):
            duration = reader.number("rampDuration")
            effect = reader.number("rampEffect", fallback=100) / 100
            monthly_base = base / 12
            annual = sum(
                monthly_base * effect if month <= duration else monthly_base
                for month in range(1, 13)
            )
            ramp = {"applied": True, "duration": duration, "effect": effect, "shortfall": base - annual}

        return annual, {"memberships": memberships, "base": base, "ramp": ramp}


class EventRevenue(RevenueStrategy):
    label = "event tickets"

    def compute(self, reader: ValueReader) -> RevenueOutcome:
        capacity = reader.number("capacity")
        price = reader.number("ticketPrice")
        occupancy = reader.percent("occupancyRate")
        events = reader.number("eventsPerYear")
        sponsorship = reader.number("sponsorship")

        attendees_per_event = capacity * occupancy
        tickets = attendees_per_event * price * events
        return tickets + sponsorship, {
            "attendees_per_event": attendees_per_event,
            "events": events,
            "tickets": tickets,
            "sponsorship": sponsorship,
        }


# ── Subscriptions ────────────────────────────────────────


class TieredSubscriptionRevenue(RevenueStrategy):
    """Per-tier users × price, discounted by half the monthly churn over the year."""

    label = "subscription tiers"
    tiers = ("basic", "pro", "enterprise")

    def compute(self, reader: ValueReader) -> RevenueOutcome:
        retention = 1 - reader.percent("churnRate") / 2
        breakdown: dict[str, Any] = {"retention": retention, "tiers": {}}
        annual = 0.0
        for tier in self.tiers:
            users_id, price_id = f"{tier}Users", f"{tier}Price"
            if not (reader.available(users_id) or reader.available(price_id)):
                continue
            users = reader.number(users_id)
            price = reader.number(price_id)
            revenue = users * retention * price * 12
            breakdown["tiers"][tier] = {"users": users, "price": price, "revenue": revenue}
            annual += revenue
        return annual, breakdown


class ChurnSubscriptionRevenue(RevenueStrategy):
    label = "churn-adjusted subscription"

    def compute(self, reader: ValueReader) -> RevenueOutcome:
        subscribers = reader.number("subscribers")
        price = reader.number("monthlyPrice")
        retention = 1 - reader.percent("churnRate") / 2
        add_ons = reader.number("addOnRevenue")

        recurring = subscribers * price * 12 * retention
        return recurring + add_ons, {
            "subscribers": subscribers,
            "retention": retention,
            "recurring": recurring,
            "add_ons": add_ons,
        }


# ── Products and services ────────────────────────────────


class EcommerceRevenue(RevenueStrategy):
    """Gross profit on net sales after returns."""

    label = "e-commerce"

    def compute(self, reader: ValueReader) -> RevenueOutcome:
        gross_sales = reader.number("avgOrderValue") * reader.number("ordersPerMonth") * 12
        net_sales = gross_sales * (1 - reader.percent("returnRate"))
        annual = net_sales * reader.percent("grossMargin")
        return annual, {"gross_sales": gross_sales, "net_sales": net_sales, "gross_profit": annual}


class HourlyServiceRevenue(RevenueStrategy):
    label = "hourly service"

    def compute(self, reader: ValueReader) -> RevenueOutcome:
        scheduled_hours = reader.number("billableHours") * reader.number("weeksPerYear")
        billed_hours = scheduled_hours * reader.percent("utilizationRate")
        rate = reader.number("hourlyRate")
        return billed_hours * rate, {
            "scheduled_hours": scheduled_hours,
            "billed_hours": billed_hours,
            "rate": rate,
        }


class EducationRevenue(RevenueStrategy):
    label = "education"

    def compute(self, reader: ValueReader) -> RevenueOutcome:
        students_per_session = reader.number("studentCapacity") * reader.percent("occupancyRate")
        sessions = reader.number("sessionsPerYear")
        fee = reader.number("tuitionFee")
        return students_per_session * sessions * fee, {
            "students_per_session": students_per_session,
            "sessions": sessions,
            "enrollments": students_per_session * sessions,
        }


class LicensingRevenue(RevenueStrategy):
    label = "licensing royalty"

    def compute(self, reader: ValueReader) -> RevenueOutcome:
        royalties = (
            reader.number("licensees")
            * reader.number("salesPerLicensee")
            * reader.percent("royaltyRate")
        )
        upfront = reader.number("upfrontFee") * reader.number("newLicenses")
        return royalties + upfront, {"royalties": royalties, "upfront_fees": upfront}


class ContractRevenue(RevenueStrategy):
    label = "recurring contracts"

    def compute(self, reader: ValueReader) -> RevenueOutcome:
        renewed = reader.number("existingContracts") * reader.percent("renewalRate")
        new = reader.number("newContracts")
        value = reader.number("annualContractValue")
        return (renewed + new) * value, {
            "renewed_contracts": renewed,
            "new_contracts": new,
            "active_contracts": renewed + new,
        }


# ── Rentals ──────────────────────────────────────────────


class FleetRentalRevenue(RevenueStrategy):
    label = "fleet rental"

    def compute(self, reader: ValueReader) -> RevenueOutcome:
        vehicles = reader.number("vehicles")
        rented_days = vehicles * 365 * reader.percent("utilizationRate")
        return rented_days * reader.number("dailyRate"), {
            "vehicles": vehicles,
            "rented_days": rented_days,
        }


class RealEstateRevenue(RevenueStrategy):
    """Rent at occupancy; the annual increase lands mid-year so half of it counts."""

    label = "real estate"

    def compute(self, reader: ValueReader) -> RevenueOutcome:
        rent = reader.number("monthlyRent") * 12 * reader.percent("occupancyRate")
        rent *= 1 + reader.percent("rentIncrease") / 2
        other = reader.number("otherIncome")
        return rent + other, {"rent": rent, "other_income": other}


# ── Promotions / partnerships / capital ──────────────────


class CouponRevenue(RevenueStrategy):
    label = "coupon / promotion"

    def compute(self, reader: ValueReader) -> RevenueOutcome:
        redemptions = (
            reader.number("merchants")
            * reader.number("dealsPerMonth")
            * reader.percent("redemptionRate")
            * 12
        )
        redeemed_value = redemptions * reader.number("avgDealValue")
        commission = redeemed_value * reader.percent("commissionRate")
        return commission, {"redemptions": redemptions, "redeemed_value": redeemed_value}


class RevenueShareRevenue(RevenueStrategy):
    label = "revenue share"

    def compute(self, reader: ValueReader) -> RevenueOutcome:
        partner_revenue = reader.number("partners") * reader.number("revenuePerPartner")
        return partner_revenue * reader.percent("revenueShare"), {"partner_revenue": partner_revenue}


class PortfolioRevenue(RevenueStrategy):
    label = "investment returns"

    def compute(self, reader: ValueReader) -> RevenueOutcome:
        value = reader.number("portfolioValue")
        dividends = value * reader.percent("dividendYield")
        gains = value * reader.percent("capitalGains")
        return dividends + gains, {"dividends": dividends, "capital_gains": gains}


class EfficiencyRevenue(RevenueStrategy):
    """Direct savings plus the value of staff time recovered."""

    label = "operational efficiency"

    def compute(self, reader: ValueReader) -> RevenueOutcome:
        direct = reader.number("annualCostSavings")
        hours_saved = (
            reader.number("employeesAffected")
            * reader.number("hoursSavedPerWeek")
            * reader.number("weeksPerYear")
        )
        productivity = hours_saved * reader.number("hourlyCost")
        return direct + productivity, {
            "direct_savings": direct,
            "hours_saved": hours_saved,
            "productivity_value": productivity,
        }


class CapexBenefitRevenue(RevenueStrategy):
    """
    Benefits of an internal project in its first year.

    Nothing is realised while the project is being implemented or ramping
    up. Remaining months earn the pro-rated benefit, halved when there is a
    ramp-up phase.
    """

    label = "CapEx benefits"

    def compute(self, reader: ValueReader) -> RevenueOutcome:
        implementation = reader.number("implementationTime")
        ramp_up = reader.number("rampUpPeriod")
        benefit = reader.number("costSavings") + reader.number("revenueIncrease")

        lead_months = implementation + ramp_up
        if lead_months >= 12:
            return 0.0, {"lead_months": lead_months, "benefit_months": 0.0, "annual_benefit": benefit}

        benefit_months = 12 - lead_months
        ramp_factor = 0.5 if ramp_up > 0 else 1.0
        annual = benefit * benefit_months / 12 * ramp_factor
        return annual, {
            "lead_months": lead_months,
            "benefit_months": benefit_months,
            "ramp_factor": ramp_factor,
            "annual_benefit": benefit,
        }


# ── Fallback ─────────────────────────────────────────────


class GenericRevenue(RevenueStrategy):
    """Sum of every currency revenue field whose id mentions "revenue"."""

    label = "generic"

    def compute(self, reader: ValueReader) -> RevenueOutcome:
        streams: dict[str, float] = {}
        for spec in reader.schema.fields_in(ProjectCategory.REVENUE):
            if spec.type == FieldType.CURRENCY and "revenue" in spec.id.lower():
                streams[spec.id] = reader.number(spec.id)
        return sum(streams.values()), {"streams": streams}


REVENUE_STRATEGIES: dict[str, RevenueStrategy] = {
    "padel": TimeSlotRevenue(),
    "gym": MembershipRevenue(),
    "conference": EventRevenue(),
    "saas": TieredSubscriptionRevenue(),
    "ecommerce": EcommerceRevenue(),
    "consulting": HourlyServiceRevenue(),
    "workshop": EducationRevenue(),
    "fleet": FleetRentalRevenue(),
    "coupon": CouponRevenue(),
    "realestate": RealEstateRevenue(),
    "capex": CapexBenefitRevenue(),
    "subscription": ChurnSubscriptionRevenue(),
    "licensing": LicensingRevenue(),
    "partnership": RevenueShareRevenue(),
    "portfolio": PortfolioRevenue(),
    "efficiency": EfficiencyRevenue(),
    "contract": ContractRevenue(),
}

_GENERIC = GenericRevenue()


def get_revenue_strategy(type_id: str) -> RevenueStrategy:
    strategy = REVENUE_STRATEGIES.get(type_id)
    if strategy is None:
        logger.debug(f"No dedicated revenue strategy for '{type_id}', using generic")
        return _GENERIC
    return strategy
