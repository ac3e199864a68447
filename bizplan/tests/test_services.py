"""
Tests: Selection state, the planning facade, formatting and the CLI.

Run with:
    pytest bizplan/tests/test_services.py -v
"""

import json

import pytest

from bizplan.config import Settings
from bizplan.errors import ScenarioNotFoundError
from bizplan.main import main, run
from bizplan.models.enums import SelectionEvent
from bizplan.models.results import CombinedAdjustments, RoiMetrics
from bizplan.persistence.kv_store import InMemoryStore
from bizplan.registry.project_types import ProjectTypeRegistry
from bizplan.services.planning_service import build_planning_service
from bizplan.services.selection_service import SELECTION_KEY, SelectionStateManager
from bizplan.utils.formatting import format_currency, format_payback, format_percentage, format_roi


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def service(store):
    return build_planning_service(Settings(), store)


class TestSelectionState:
    def test_business_type_then_projects(self, store):
        selection = SelectionStateManager(ProjectTypeRegistry(), store)
        selection.set_business_type("member")
        assert [s.id for s in selection.available_project_types()] == ["gym", "saas", "subscription"]

        assert selection.add_project_type("gym")
        assert selection.add_project_type("saas")
        assert selection.active_project_type == "gym"
        assert selection.selected_project_types == ["gym", "saas"]

    def test_rejects_other_business_type(self, store):
        selection = SelectionStateManager(ProjectTypeRegistry(), store)
        selection.set_business_type("member")
        assert not selection.add_project_type("padel")
        assert not selection.add_project_type("unknown")
        assert selection.selected_project_types == []

    def test_changing_business_type_clears_projects(self, store):
        selection = SelectionStateManager(ProjectTypeRegistry(), store)
        selection.set_business_type("member")
        selection.add_project_type("gym")
        selection.set_business_type("booking")
        assert selection.selected_project_types == []
        assert selection.active_project_type is None

    def test_removing_active_project_moves_focus(self, store):
        selection = SelectionStateManager(ProjectTypeRegistry(), store)
        selection.set_business_type("member")
        selection.add_project_type("gym")
        selection.add_project_type("saas")
        selection.remove_project_type("gym")
        assert selection.active_project_type == "saas"
        selection.remove_project_type("saas")
        assert selection.active_project_type is None

    def test_active_must_be_selected(self, store):
        selection = SelectionStateManager(ProjectTypeRegistry(), store)
        selection.set_business_type("member")
        selection.add_project_type("gym")
        selection.set_active_project_type("saas")
        assert selection.active_project_type == "gym"

    def test_listeners(self, store):
        selection = SelectionStateManager(ProjectTypeRegistry(), store)
        events = []
        selection.add_listener(SelectionEvent.BUSINESS_TYPE_CHANGED, lambda p: events.append(("bt", p["new"])))
        selection.add_listener(
            SelectionEvent.PROJECT_TYPES_CHANGED, lambda p: events.append(("pt", p["action"]))
        )

        selection.set_business_type("member")
        selection.set_business_type("member")
        selection.add_project_type("gym")
        selection.clear_project_types()
        assert events == [("bt", "member"), ("pt", "added"), ("pt", "cleared")]

    def test_failing_listener_does_not_stop_others(self, store, caplog):
        selection = SelectionStateManager(ProjectTypeRegistry(), store)
        seen = []

        def broken(payload):
            raise RuntimeError("boom")

        selection.add_listener(SelectionEvent.BUSINESS_TYPE_CHANGED, broken)
        selection.add_listener(SelectionEvent.BUSINESS_TYPE_CHANGED, seen.append)
        selection.set_business_type("event")
        assert len(seen) == 1
        assert "boom" in caplog.text

    def test_remove_listener(self, store):
        selection = SelectionStateManager(ProjectTypeRegistry(), store)
        seen = []
        selection.add_listener(SelectionEvent.BUSINESS_TYPE_CHANGED, seen.append)
        selection.remove_listener(SelectionEvent.BUSINESS_TYPE_CHANGED, seen.append)
        selection.set_business_type("event")
        assert seen == []

    def test_persisted_and_restored(self, store):
        registry = ProjectTypeRegistry()
        selection = SelectionStateManager(registry, store)
        selection.set_business_type("member")
        selection.add_project_type("gym")

        raw = store.get(SELECTION_KEY)
        assert raw["selectedBusinessType"] == "member"
        assert raw["selectedProjectTypes"] == ["gym"]

        restored = SelectionStateManager(registry, store)
        assert restored.business_type == "member"
        assert restored.active_project_type == "gym"

    def test_reset(self, store):
        selection = SelectionStateManager(ProjectTypeRegistry(), store)
        selection.set_business_type("member")
        selection.add_project_type("gym")
        selection.reset()
        assert selection.snapshot().selected_business_type is None
        assert selection.selected_project_types == []


class TestPlanningService:
    def test_combined_defaults_to_selection(self, service):
        service.selection.set_business_type("booking")
        service.selection.add_project_type("padel")
        service.calculate("padel")
        combined = service.combined()
        assert [p.type_id for p in combined.projects] == ["padel"]
        assert combined.totals.profit == pytest.approx(27_414)

    def test_cash_flow_uses_configured_horizon(self, store):
        service = build_planning_service(Settings(cash_flow_months=6), store)
        service.calculate("gym")
        assert len(service.cash_flow(["gym"])) == 6
        assert len(service.cash_flow(["gym"], months=3)) == 3

    def test_payback_schedule(self, service):
        rows = service.payback("gym")
        assert len(rows) == 10
        assert rows[0].net_position == pytest.approx(42_000 - 49_000)

    def test_sensitivity_sorted_and_cache_untouched(self, service):
        impacts = service.sensitivity("padel")
        assert impacts == sorted(impacts, key=lambda i: i.impact, reverse=True)
        assert impacts[0].field_id == "peakRate"
        assert impacts[0].impact == pytest.approx(0.4 * 122_304)
        assert "addStaffSal" not in {i.field_id for i in impacts}
        assert service.engine.get_calculation("padel") is None

    def test_sensitivity_uses_latest_inputs(self, service):
        service.calculate("gym", {"weekFee": 0})
        field_ids = {i.field_id for i in service.sensitivity("gym")}
        assert "weekFee" not in field_ids
        assert "monthFee" in field_ids

    def test_scenarios(self, service):
        service.calculate("gym", {"weekFee": 20})
        service.save_scenario("base", ["gym"])
        service.calculate("gym", {"weekFee": 30})
        service.save_scenario("premium", ["gym"], CombinedAdjustments(revenue_multiplier=1.1))

        assert [s.name for s in service.list_scenarios()] == ["base", "premium"]
        diff = service.compare_scenarios("base", "premium")
        assert [(d.field_id, d.left, d.right) for d in diff] == [("weekFee", 20.0, 30.0)]

        combined = service.load_scenario("base")
        assert combined.totals.revenue == pytest.approx(85_800)
        assert service.values_for("gym") == {"weekFee": 20}

        service.delete_scenario("base")
        with pytest.raises(ScenarioNotFoundError):
            service.load_scenario("base")

    def test_registry_shares_store(self, store):
        first = build_planning_service(Settings(), store)
        first.registry.create_from_template("gym", "studio", "Studio")
        second = build_planning_service(Settings(), store)
        assert second.registry.find_project_type("studio") is not None


class TestFormatting:
    def test_currency(self):
        assert format_currency(141_414) == "€141,414"
        assert format_currency(-1_234.4, "$") == "-$1,234"

    def test_percentage(self):
        assert format_percentage(11.2352) == "11.2%"

    def test_never(self):
        assert format_payback(None) == "Never"
        assert format_payback(9) == "9 years"

    def test_roi_not_available_without_investment(self):
        assert format_roi(RoiMetrics()) == "N/A"
        assert format_roi(RoiMetrics(investment=100, roi_percentage=25)) == "25.0%"


class TestCli:
    def test_run_returns_combined(self, service):
        combined = run(["padel", "gym"], {"gym": {"rampUp": True}}, service=service)
        assert combined.totals.revenue == pytest.approx(141_414 + 72_930)

    def test_main_with_values_file(self, tmp_path):
        values = tmp_path / "values.json"
        values.write_text(json.dumps({"padel": {"courts": 2}}), encoding="utf-8")
        assert main(["padel", "--values", str(values), "--months", "3"]) == 0

    def test_export(self, tmp_path):
        destination = tmp_path / "templates.json"
        assert main(["--export", str(destination)]) == 0
        exported = json.loads(destination.read_text(encoding="utf-8"))
        assert "padel" in exported["default"]

    def test_list(self):
        assert main(["--list"]) == 0
