"""
Business Plan Calculator — Main Entry Point

Calculate one or more templates from the command line:
    python -m bizplan padel gym
    python -m bizplan saas --values inputs.json --months 24

List templates or export the template configuration:
    python -m bizplan --list
    python -m bizplan --export templates.json

Or import and run programmatically:
    from bizplan.main import run
    combined = run(["padel"], {"padel": {"courts": 4}})
"""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from bizplan.config import get_settings
from bizplan.models.results import CalculationResult, CashFlowRow, CombinedResult
from bizplan.services.planning_service import PlanningService, build_planning_service
from bizplan.utils.formatting import format_currency, format_payback, format_roi
from bizplan.utils.logger import setup_logging

DEFAULT_TYPE_IDS = ["padel", "gym"]


def run(
    type_ids: Sequence[str],
    values: Mapping[str, Mapping[str, Any]] | None = None,
    months: Optional[int] = None,
    service: PlanningService | None = None,
) -> CombinedResult:
    """Calculate each template, log a per-project and combined summary, return the combined P&L."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)
    service = service or build_planning_service(settings)
    values = values or {}

    logger.info("=" * 60)
    logger.info(f"  {settings.app_name.upper()}")
    logger.info(f"  Projects: {', '.join(type_ids)} | Started: {datetime.now(timezone.utc).isoformat()}")
    logger.info("=" * 60)

    for type_id in type_ids:
        result = service.calculate(type_id, values.get(type_id))
        _print_project(result, settings.currency_symbol)

    combined = service.combined(type_ids)
    _print_combined(combined, settings.currency_symbol)
    _print_cash_flow(service.cash_flow(type_ids, months), settings.currency_symbol)
    return combined


def _print_project(result: CalculationResult, symbol: str) -> None:
    logger = logging.getLogger(__name__)

    logger.info("")
    logger.info("-" * 60)
    logger.info(f"  {result.type_name} ({result.type_id})")
    logger.info("-" * 60)
    logger.info(f"  Revenue:        {format_currency(result.revenue.annual, symbol)}")
    logger.info(f"  Operating:      {format_currency(result.costs.operating, symbol)}")
    logger.info(f"  Staffing:       {format_currency(result.costs.staffing, symbol)}")
    logger.info(f"  Profit:         {format_currency(result.profit, symbol)}")
    logger.info(f"  Investment:     {format_currency(result.investment, symbol)}")
    logger.info(f"  ROI:            {format_roi(result.roi)}")
    logger.info(f"  Payback:        {format_payback(result.roi.payback_years)}")
    logger.info(f"  Break-even:     {format_payback(result.roi.break_even_month, unit='months')}")


def _print_combined(combined: CombinedResult, symbol: str) -> None:
    logger = logging.getLogger(__name__)
    totals = combined.totals

    logger.info("")
    logger.info("=" * 60)
    logger.info(f"  COMBINED ({len(combined.projects)} projects)")
    logger.info("=" * 60)
    logger.info(f"  Revenue:        {format_currency(totals.revenue, symbol)}")
    logger.info(f"  Costs:          {format_currency(totals.costs, symbol)}")
    logger.info(f"  Profit:         {format_currency(totals.profit, symbol)}")
    logger.info(f"  Investment:     {format_currency(totals.investment, symbol)}")
    logger.info(f"  ROI:            {format_roi(totals.roi)}")
    logger.info(f"  Payback:        {format_payback(totals.roi.payback_years)}")


def _print_cash_flow(rows: list[CashFlowRow], symbol: str) -> None:
    logger = logging.getLogger(__name__)

    logger.info("")
    logger.info(f"  Cash flow ({len(rows)} months)")
    for row in rows:
        logger.info(
            f"    M{row.month:>2} | in {format_currency(row.inflow, symbol)} | "
            f"out {format_currency(row.outflow, symbol)} | "
            f"closing {format_currency(row.closing, symbol)}"
        )
    logger.info("")


def list_templates(service: PlanningService | None = None) -> None:
    setup_logging(get_settings().log_level)
    logger = logging.getLogger(__name__)
    service = service or build_planning_service()

    for business_type, schemas in service.registry.get_all_project_types_by_category().items():
        category = service.registry.get_business_type_category(business_type)
        logger.info(f"{category.name if category else business_type}:")
        for schema in schemas:
            origin = "built-in" if service.registry.is_builtin(schema.id) else "custom"
            logger.info(f"  {schema.id:<14} {schema.name} ({origin})")


def export_templates(destination: str, service: PlanningService | None = None) -> Path:
    setup_logging(get_settings().log_level)
    logger = logging.getLogger(__name__)
    service = service or build_planning_service()

    path = Path(destination)
    path.write_text(
        json.dumps(service.registry.export_configuration(), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    logger.info(f"Exported template configuration to {path}")
    return path


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="bizplan", description="Business plan P&L and ROI calculator")
    parser.add_argument("type_ids", nargs="*", help="project type ids to calculate")
    parser.add_argument("--values", metavar="FILE", help="JSON file mapping type id to form values")
    parser.add_argument("--months", type=int, default=None, help="cash flow horizon in months")
    parser.add_argument("--list", action="store_true", help="list available templates and exit")
    parser.add_argument("--export", metavar="FILE", help="export template configuration and exit")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    if args.list:
        list_templates()
        return 0
    if args.export:
        export_templates(args.export)
        return 0

    values = {}
    if args.values:
        values = json.loads(Path(args.values).read_text(encoding="utf-8"))
    run(args.type_ids or DEFAULT_TYPE_IDS, values, args.months)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
