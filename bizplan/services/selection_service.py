"""
Selection State — which business type, project types and focused project
the user is working with.

Changing the business type clears the project selection. The first project
added becomes the active one. Every change is persisted under
``selectionState`` and announced to listeners of the matching SelectionEvent.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from pydantic import ValidationError

from bizplan.models.enums import SelectionEvent
from bizplan.models.schemas import ProjectTypeSchema
from bizplan.models.state import SelectionSnapshot
from bizplan.persistence.kv_store import KeyValueStore
from bizplan.registry.project_types import ProjectTypeRegistry

logger = logging.getLogger(__name__)

SELECTION_KEY = "selectionState"

Listener = Callable[[dict[str, Any]], None]


class SelectionStateManager:
    """Tracks the current selection and notifies listeners of changes."""

    def __init__(self, registry: ProjectTypeRegistry, store: KeyValueStore | None = None):
        self.registry = registry
        self._store = store
        self._business_type: Optional[str] = None
        self._selected: list[str] = []
        self._active: Optional[str] = None
        self._listeners: dict[SelectionEvent, list[Listener]] = {e: [] for e in SelectionEvent}
        self._load()

    # ── Accessors ────────────────────────────────────────

    @property
    def business_type(self) -> Optional[str]:
        return self._business_type

    @property
    def selected_project_types(self) -> list[str]:
        return list(self._selected)

    @property
    def active_project_type(self) -> Optional[str]:
        return self._active

    def is_selected(self, type_id: str) -> bool:
        return type_id in self._selected

    def available_project_types(self) -> list[ProjectTypeSchema]:
        if not self._business_type:
            return []
        return self.registry.get_projects_by_business_type(self._business_type)

    def snapshot(self) -> SelectionSnapshot:
        return SelectionSnapshot(
            selected_business_type=self._business_type,
            selected_project_types=list(self._selected),
            active_project_type=self._active,
            timestamp=datetime.now(timezone.utc),
        )

    # ── Mutations ────────────────────────────────────────

    def set_business_type(self, business_type: Optional[str]) -> None:
        if business_type == self._business_type:
            return
        old = self._business_type
        self._business_type = business_type
        self._selected = []
        self._active = None

        self._save()
        self._notify(
            SelectionEvent.BUSINESS_TYPE_CHANGED,
            {
                "old": old,
                "new": business_type,
                "available_projects": [p.id for p in self.available_project_types()],
            },
        )
        logger.info(f"Business type changed: {old} -> {business_type}")

    def add_project_type(self, type_id: str) -> bool:
        """Select a project type of the current business type. Returns False when rejected."""
        if type_id in self._selected:
            return False

        schema = self.registry.find_project_type(type_id)
        if schema is None or schema.business_type != self._business_type:
            logger.warning(
                f"Project type '{type_id}' does not belong to business type '{self._business_type}'"
            )
            return False

        self._selected.append(type_id)
        if len(self._selected) == 1:
            self._active = type_id

        self._save()
        self._notify(
            SelectionEvent.PROJECT_TYPES_CHANGED,
            {"action": "added", "project_type": type_id, "selected_projects": list(self._selected)},
        )
        return True

    def remove_project_type(self, type_id: str) -> bool:
        if type_id not in self._selected:
            return False

        self._selected.remove(type_id)
        if self._active == type_id:
            self._active = self._selected[0] if self._selected else None

        self._save()
        self._notify(
            SelectionEvent.PROJECT_TYPES_CHANGED,
            {"action": "removed", "project_type": type_id, "selected_projects": list(self._selected)},
        )
        return True

    def set_active_project_type(self, type_id: str) -> None:
        """Focus one of the selected project types; ignored for unselected ids."""
        if type_id not in self._selected or type_id == self._active:
            return
        old = self._active
        self._active = type_id

        self._save()
        self._notify(SelectionEvent.ACTIVE_PROJECT_CHANGED, {"old": old, "new": type_id})

    def clear_project_types(self) -> None:
        if not self._selected:
            return
        self._selected = []
        self._active = None

        self._save()
        self._notify(
            SelectionEvent.PROJECT_TYPES_CHANGED, {"action": "cleared", "selected_projects": []}
        )

    def reset(self) -> None:
        self._business_type = None
        self._selected = []
        self._active = None

        self._save()
        self._notify(SelectionEvent.BUSINESS_TYPE_CHANGED, {"old": None, "new": None})
        self._notify(
            SelectionEvent.PROJECT_TYPES_CHANGED, {"action": "reset", "selected_projects": []}
        )
        self._notify(SelectionEvent.ACTIVE_PROJECT_CHANGED, {"old": None, "new": None})
        logger.info("Selection state reset")

    # ── Listeners ────────────────────────────────────────

    def add_listener(self, event: SelectionEvent, callback: Listener) -> None:
        self._listeners[SelectionEvent(event)].append(callback)

    def remove_listener(self, event: SelectionEvent, callback: Listener) -> None:
        listeners = self._listeners[SelectionEvent(event)]
        if callback in listeners:
            listeners.remove(callback)

    def _notify(self, event: SelectionEvent, payload: dict[str, Any]) -> None:
        for callback in list(self._listeners[event]):
            try:
                callback(payload)
            except Exception as e:
                logger.error(f"Selection listener for {event.value} failed: {e}")

    # ── Persistence ──────────────────────────────────────

    def _save(self) -> None:
        if self._store is None:
            return
        self._store.set(SELECTION_KEY, self.snapshot().model_dump(mode="json", by_alias=True))

    def _load(self) -> None:
        if self._store is None:
            return
        raw = self._store.get(SELECTION_KEY)
        if not raw:
            return
        try:
            saved = SelectionSnapshot.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"Ignoring unreadable selection state: {e}")
            return

        self._business_type = saved.selected_business_type
        self._selected = list(dict.fromkeys(saved.selected_project_types))
        self._active = saved.active_project_type
        logger.debug(f"Selection state loaded: {self._business_type} {self._selected}")
