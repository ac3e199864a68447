"""
Key-Value Store — flat persistence for templates, scenarios and selection.

Values are JSON-compatible objects. Writes are fire-and-forget: a failing
backend logs a warning and the in-process state stays authoritative.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from copy import deepcopy
from pathlib import Path
from typing import Any

from bizplan.config import Settings, get_settings

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """Minimal get/set/delete interface every backend implements."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        ...

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        ...

    @abstractmethod
    def keys(self) -> list[str]:
        ...


class InMemoryStore(KeyValueStore):
    """Dict-backed store. Values are deep-copied in and out."""

    def __init__(self, initial: dict[str, Any] | None = None):
        self._data: dict[str, Any] = deepcopy(initial) if initial else {}

    def get(self, key: str, default: Any = None) -> Any:
        if key not in self._data:
            return default
        return deepcopy(self._data[key])

    def set(self, key: str, value: Any) -> None:
        self._data[key] = deepcopy(value)
        logger.debug(f"Stored '{key}' in memory")

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data.keys())


class JsonFileStore(KeyValueStore):
    """One ``<key>.json`` file per key below a base directory."""

    def __init__(self, base_path: str | Path):
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.base_path / f"{key}.json"

    def get(self, key: str, default: Any = None) -> Any:
        path = self._path(key)
        if not path.exists():
            return default
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed reading '{key}' from {path}: {e}")
            return default

    def set(self, key: str, value: Any) -> None:
        path = self._path(key)
        try:
            path.write_text(json.dumps(value, indent=2, ensure_ascii=False), encoding="utf-8")
            logger.debug(f"Saved '{key}' to {path}")
        except (OSError, TypeError) as e:
            logger.warning(f"Failed writing '{key}' to {path}: {e}")

    def delete(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Failed deleting {path}: {e}")

    def keys(self) -> list[str]:
        return sorted(p.stem for p in self.base_path.glob("*.json") if p.is_file())


def build_store(settings: Settings | None = None) -> KeyValueStore:
    """Pick the backend named by ``settings.storage_backend``."""
    settings = settings or get_settings()
    backend = settings.storage_backend

    if backend == "local":
        logger.info(f"Using JSON file storage at {settings.local_storage_path}")
        return JsonFileStore(settings.local_storage_path)
    if backend == "memory":
        return InMemoryStore()

    raise NotImplementedError(f"Backend '{backend}' not implemented")
