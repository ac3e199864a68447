"""
Tests: Key-value stores and the scenario repository.

Run with:
    pytest bizplan/tests/test_persistence.py -v
"""

import json

import pytest

from bizplan.config import Settings
from bizplan.errors import ScenarioNotFoundError
from bizplan.models.state import Scenario
from bizplan.persistence.kv_store import InMemoryStore, JsonFileStore, build_store
from bizplan.persistence.scenario_repository import SCENARIOS_KEY, ScenarioRepository


class TestInMemoryStore:
    def test_get_set_delete(self):
        store = InMemoryStore()
        assert store.get("missing", "fallback") == "fallback"
        store.set("key", {"a": 1})
        assert store.get("key") == {"a": 1}
        assert store.keys() == ["key"]
        store.delete("key")
        assert store.get("key") is None

    def test_values_are_copied(self):
        store = InMemoryStore()
        value = {"items": [1, 2]}
        store.set("key", value)
        value["items"].append(3)
        store.get("key")["items"].append(4)
        assert store.get("key") == {"items": [1, 2]}


class TestJsonFileStore:
    def test_one_file_per_key(self, tmp_path):
        store = JsonFileStore(tmp_path)
        store.set("customProjectTypes", {"x": {"id": "x"}})
        path = tmp_path / "customProjectTypes.json"
        assert json.loads(path.read_text(encoding="utf-8")) == {"x": {"id": "x"}}
        assert store.keys() == ["customProjectTypes"]

    def test_survives_new_instance(self, tmp_path):
        JsonFileStore(tmp_path).set("scenarios", [{"name": "base"}])
        assert JsonFileStore(tmp_path).get("scenarios") == [{"name": "base"}]

    def test_corrupt_file_returns_default(self, tmp_path, caplog):
        (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
        assert JsonFileStore(tmp_path).get("broken", {}) == {}
        assert "Failed reading 'broken'" in caplog.text

    def test_unserializable_value_is_logged_not_raised(self, tmp_path, caplog):
        store = JsonFileStore(tmp_path)
        store.set("bad", {"value": object()})
        assert "Failed writing 'bad'" in caplog.text

    def test_delete_missing_key(self, tmp_path):
        JsonFileStore(tmp_path).delete("never-written")


class TestBuildStore:
    def test_memory(self):
        assert isinstance(build_store(Settings(storage_backend="memory")), InMemoryStore)

    def test_local(self, tmp_path):
        store = build_store(Settings(storage_backend="local", local_storage_path=str(tmp_path / "data")))
        assert isinstance(store, JsonFileStore)
        assert (tmp_path / "data").is_dir()

    def test_unknown_backend(self):
        with pytest.raises(NotImplementedError):
            build_store(Settings(storage_backend="s3"))


class TestScenarioRepository:
    def _repo(self):
        return ScenarioRepository(InMemoryStore())

    def test_save_and_load(self):
        repo = self._repo()
        repo.save_scenario(Scenario(name="base", values={"gym": {"weekFee": 20}}))
        loaded = repo.load_scenario("base")
        assert loaded.values == {"gym": {"weekFee": 20}}
        assert loaded.revenue_multiplier == 1.0

    def test_saving_same_name_replaces(self):
        repo = self._repo()
        repo.save_scenario(Scenario(name="base", values={"gym": {"weekFee": 20}}))
        repo.save_scenario(Scenario(name="base", values={"gym": {"weekFee": 25}}))
        scenarios = repo.list_scenarios()
        assert len(scenarios) == 1
        assert scenarios[0].values["gym"]["weekFee"] == 25

    def test_stored_with_aliases(self):
        store = InMemoryStore()
        ScenarioRepository(store).save_scenario(Scenario(name="base", cost_multiplier=0.9))
        raw = store.get(SCENARIOS_KEY)[0]
        assert raw["costMultiplier"] == 0.9
        assert "createdAt" in raw

    def test_missing_scenario(self):
        repo = self._repo()
        with pytest.raises(ScenarioNotFoundError):
            repo.load_scenario("nope")
        with pytest.raises(ScenarioNotFoundError):
            repo.delete_scenario("nope")

    def test_delete(self):
        repo = self._repo()
        repo.save_scenario(Scenario(name="a"))
        repo.save_scenario(Scenario(name="b"))
        repo.delete_scenario("a")
        assert [s.name for s in repo.list_scenarios()] == ["b"]

    def test_diff(self):
        repo = self._repo()
        repo.save_scenario(Scenario(name="low", values={"gym": {"weekFee": 20, "rampUp": False}}))
        repo.save_scenario(
            Scenario(
                name="high",
                values={"gym": {"weekFee": "25", "rampUp": False}, "padel": {"courts": 4}},
            )
        )
        diff = repo.diff_scenarios("low", "high")
        assert [(d.type_id, d.field_id, d.left, d.right) for d in diff] == [
            ("gym", "weekFee", 20.0, 25.0),
            ("padel", "courts", None, 4.0),
        ]

    def test_unreadable_entries_skipped(self):
        store = InMemoryStore({SCENARIOS_KEY: [{"name": ""}, {"name": "ok"}]})
        assert [s.name for s in ScenarioRepository(store).list_scenarios()] == ["ok"]
