"""Persistence — KeyValueStore backends, ScenarioRepository."""

from bizplan.persistence.kv_store import InMemoryStore, JsonFileStore, KeyValueStore, build_store
from bizplan.persistence.scenario_repository import SCENARIOS_KEY, ScenarioRepository

__all__ = [
    "InMemoryStore",
    "JsonFileStore",
    "KeyValueStore",
    "build_store",
    "SCENARIOS_KEY",
    "ScenarioRepository",
]
