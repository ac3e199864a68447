"""
Tests: Project type registry, template schemas and field metadata.

Run with:
    pytest bizplan/tests/test_registry.py -v
"""

import pytest

from bizplan.errors import ReservedIdError, SchemaValidationError, UnknownProjectTypeError
from bizplan.models.enums import FieldRole, ProjectCategory
from bizplan.models.schemas import FieldSpec, ProjectTypeSchema
from bizplan.persistence.kv_store import InMemoryStore
from bizplan.registry.defaults import BUILTIN_PROJECT_TYPES
from bizplan.registry.project_types import CUSTOM_TYPES_KEY, ProjectTypeRegistry


def _template(type_id="coworking", name="Coworking Space", **overrides):
    raw = {
        "id": type_id,
        "name": name,
        "businessType": "booking",
        "categories": {
            "investment": [{"id": "fitOut", "name": "Fit-out", "type": "currency", "defaultValue": 20000}],
            "revenue": [{"id": "deskRevenue", "name": "Desk Revenue", "type": "currency", "defaultValue": 60000}],
            "operating": [{"id": "rent", "name": "Rent", "type": "currency", "defaultValue": 24000}],
            "staffing": [],
        },
    }
    raw.update(overrides)
    return raw


class TestBuiltins:
    def test_eighteen_templates(self):
        registry = ProjectTypeRegistry()
        assert len(registry.get_all_project_types()) == 18
        assert list(registry.get_all_project_types())[:2] == ["padel", "gym"]

    def test_field_ids_unique_across_categories(self):
        for schema in BUILTIN_PROJECT_TYPES.values():
            ids = [spec.id for _, spec in schema.iter_fields()]
            assert len(ids) == len(set(ids)), schema.id

    def test_business_types_are_catalogued(self):
        registry = ProjectTypeRegistry()
        catalog = registry.get_all_business_type_categories()
        assert len(catalog) == 9
        for schema in registry.get_all_project_types().values():
            assert schema.business_type in catalog

    def test_get_returns_copy(self):
        registry = ProjectTypeRegistry()
        schema = registry.get_project_type("padel")
        schema.name = "Changed"
        schema.categories.revenue.clear()
        fresh = registry.get_project_type("padel")
        assert fresh.name == "Padel Club"
        assert len(fresh.categories.revenue) == 8

    def test_unknown_id(self):
        registry = ProjectTypeRegistry()
        assert registry.find_project_type("nope") is None
        with pytest.raises(UnknownProjectTypeError, match="nope"):
            registry.get_project_type("nope")

    def test_by_business_type(self):
        registry = ProjectTypeRegistry()
        assert [s.id for s in registry.get_projects_by_business_type("rental")] == ["fleet", "realestate"]
        assert registry.get_projects_by_business_type("unknown") == []

    def test_grouped_by_category(self):
        grouped = ProjectTypeRegistry().get_all_project_types_by_category()
        assert [s.id for s in grouped["member"]] == ["gym", "saas", "subscription"]
        assert sum(len(v) for v in grouped.values()) == 18

    def test_business_type_lookup(self):
        registry = ProjectTypeRegistry()
        assert registry.get_business_type_category("booking").revenue_model == "time-based"
        assert registry.get_business_type_category("missing") is None


class TestCustomTemplates:
    def test_set_and_get(self):
        registry = ProjectTypeRegistry()
        stored = registry.set_project_type("coworking", _template())
        assert stored.name == "Coworking Space"
        assert not registry.is_builtin("coworking")
        assert list(registry.get_all_project_types())[-1] == "coworking"

    def test_reserved_id_rejected(self):
        registry = ProjectTypeRegistry()
        with pytest.raises(ReservedIdError):
            registry.set_project_type("gym", _template(type_id="gym"))
        assert registry.get_project_type("gym").name == "Gym/Fitness Center"

    def test_id_mismatch_rejected(self):
        registry = ProjectTypeRegistry()
        with pytest.raises(SchemaValidationError, match="does not match"):
            registry.set_project_type("other", _template())

    def test_missing_category_rejected(self):
        raw = _template()
        del raw["categories"]["staffing"]
        with pytest.raises(SchemaValidationError):
            ProjectTypeRegistry().set_project_type("coworking", raw)

    def test_duplicate_field_ids_rejected(self):
        raw = _template()
        raw["categories"]["operating"].append({"id": "rent", "name": "Rent again", "type": "currency"})
        with pytest.raises(SchemaValidationError, match="Duplicate field id"):
            ProjectTypeRegistry().set_project_type("coworking", raw)

    def test_mutated_instance_revalidated(self):
        schema = ProjectTypeSchema.model_validate(_template())
        schema.categories.operating.append(
            FieldSpec.model_validate({"id": "rent", "name": "Rent again", "type": "currency"})
        )
        registry = ProjectTypeRegistry()
        with pytest.raises(SchemaValidationError, match="Duplicate field id"):
            registry.set_project_type("coworking", schema)
        assert registry.find_project_type("coworking") is None

    def test_valid_instance_accepted(self):
        schema = ProjectTypeSchema.model_validate(_template(color="#00ff00"))
        stored = ProjectTypeRegistry().set_project_type("coworking", schema)
        assert stored is not schema
        assert stored.to_export_dict() == _template(color="#00ff00")

    def test_non_mapping_rejected(self):
        with pytest.raises(SchemaValidationError):
            ProjectTypeRegistry().set_project_type("coworking", ["not", "a", "schema"])

    def test_delete(self):
        registry = ProjectTypeRegistry()
        registry.set_project_type("coworking", _template())
        registry.delete_project_type("coworking")
        assert registry.find_project_type("coworking") is None

    def test_delete_builtin_or_unknown(self):
        registry = ProjectTypeRegistry()
        with pytest.raises(ReservedIdError):
            registry.delete_project_type("padel")
        with pytest.raises(UnknownProjectTypeError):
            registry.delete_project_type("coworking")

    def test_create_from_template(self):
        registry = ProjectTypeRegistry()
        clone = registry.create_from_template("padel", "padelNorth", "Padel North")

        assert clone.id == "padelNorth"
        assert clone.description == "Custom Padel North based on Padel Club"
        base = registry.get_project_type("padel")
        assert clone.categories == base.categories
        assert clone.business_type == "booking"

    def test_clone_of_unknown_base(self):
        with pytest.raises(UnknownProjectTypeError):
            ProjectTypeRegistry().create_from_template("nope", "x", "X")


class TestImportExport:
    def test_round_trip(self):
        source = ProjectTypeRegistry()
        source.set_project_type("coworking", _template())
        source.create_from_template("gym", "boutiqueGym", "Boutique Gym")
        exported = source.export_configuration()

        assert set(exported["default"]) == set(BUILTIN_PROJECT_TYPES)
        assert "exportDate" in exported

        target = ProjectTypeRegistry()
        report = target.import_configuration(exported)
        assert report.imported == ["coworking", "boutiqueGym"]
        assert report.skipped == []
        assert target.export_configuration()["custom"] == exported["custom"]

    def test_round_trip_keeps_unknown_keys(self):
        raw = _template(color="#ff0000")
        raw["categories"]["revenue"][0]["step"] = 50
        registry = ProjectTypeRegistry()
        registry.import_configuration({"custom": {"coworking": raw}})

        exported = registry.export_configuration()["custom"]["coworking"]
        assert exported == raw
        assert exported["color"] == "#ff0000"
        assert exported["categories"]["revenue"][0]["step"] == 50

    def test_export_echoes_only_given_keys(self):
        registry = ProjectTypeRegistry()
        registry.set_project_type("coworking", _template())
        exported = registry.export_configuration()["custom"]["coworking"]
        assert exported == _template()

    def test_invalid_entries_skipped(self):
        registry = ProjectTypeRegistry()
        registry.set_project_type("old", _template(type_id="old"))
        report = registry.import_configuration(
            {
                "custom": {
                    "coworking": _template(),
                    "gym": _template(type_id="gym"),
                    "wrongKey": _template(),
                    "broken": {"id": "broken", "name": "Broken"},
                }
            }
        )

        assert report.imported == ["coworking"]
        assert {s.id for s in report.skipped} == {"gym", "wrongKey", "broken"}
        # the previous custom set is replaced
        assert registry.find_project_type("old") is None
        assert registry.find_project_type("coworking") is not None

    def test_unreadable_payload_changes_nothing(self):
        registry = ProjectTypeRegistry()
        registry.set_project_type("coworking", _template())
        with pytest.raises(SchemaValidationError):
            registry.import_configuration({"default": {}})
        assert registry.find_project_type("coworking") is not None


class TestPersistence:
    def test_custom_templates_survive_restart(self):
        store = InMemoryStore()
        ProjectTypeRegistry(store).set_project_type("coworking", _template())

        reloaded = ProjectTypeRegistry(store)
        assert reloaded.get_project_type("coworking").name == "Coworking Space"

    def test_invalid_stored_entries_skipped(self):
        store = InMemoryStore(
            {
                CUSTOM_TYPES_KEY: {
                    "coworking": _template(),
                    "broken": {"id": "broken"},
                    "padel": _template(type_id="padel"),
                }
            }
        )
        registry = ProjectTypeRegistry(store)
        assert registry.find_project_type("coworking") is not None
        assert registry.find_project_type("broken") is None
        assert registry.get_project_type("padel").name == "Padel Club"

    def test_delete_is_persisted(self):
        store = InMemoryStore()
        registry = ProjectTypeRegistry(store)
        registry.set_project_type("coworking", _template())
        registry.delete_project_type("coworking")
        assert store.get(CUSTOM_TYPES_KEY) == {}


class TestFieldMetadata:
    def test_salary_suffix_is_rate(self):
        spec = FieldSpec.model_validate({"id": "ftMgrSal", "name": "Salary", "type": "currency"})
        assert spec.staffing_role == FieldRole.RATE
        assert spec.staffing_role_key == "ftMgr"

    def test_number_is_count(self):
        spec = FieldSpec.model_validate({"id": "ftMgr", "name": "Manager", "type": "number"})
        assert spec.staffing_role == FieldRole.COUNT
        assert spec.staffing_role_key == "ftMgr"

    def test_event_in_id_is_per_event(self):
        spec = FieldSpec.model_validate({"id": "perEventCatering", "name": "Catering", "type": "currency"})
        assert spec.is_per_event

    def test_legacy_court_multiplier(self):
        spec = FieldSpec.model_validate({"id": "courtCost", "name": "Court", "type": "currency"})
        assert spec.multiplier_field == "courts"

    def test_explicit_metadata_wins(self):
        spec = FieldSpec.model_validate(
            {
                "id": "eventManager",
                "name": "Event Manager",
                "type": "number",
                "perEvent": False,
                "role": "flat",
                "roleKey": "manager",
            }
        )
        assert not spec.is_per_event
        assert spec.staffing_role == FieldRole.FLAT
        assert spec.staffing_role_key == "manager"

    def test_resolved_metadata_not_exported(self):
        spec = FieldSpec.model_validate({"id": "ftMgrSal", "name": "Salary", "type": "currency"})
        assert spec.model_dump(by_alias=True, exclude_unset=True) == {
            "id": "ftMgrSal",
            "name": "Salary",
            "type": "currency",
        }

    def test_find_field_searches_revenue_first(self):
        schema = BUILTIN_PROJECT_TYPES["padel"]
        assert schema.find_field("courts").id == "courts"
        assert schema.find_field("peakRate") in schema.fields_in(ProjectCategory.REVENUE)
        assert schema.find_field("missing") is None
