"""
Project Type Registry — built-in and user-defined business templates.

Built-in templates are immutable. User templates are created by cloning a
template or importing a configuration, persisted under ``customProjectTypes``
and reloaded when the registry is constructed. Every accessor hands out deep
copies so callers can never mutate registry state in place.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import ValidationError

from bizplan.errors import ReservedIdError, SchemaValidationError, UnknownProjectTypeError
from bizplan.models.schemas import (
    BusinessTypeCategory,
    ImportReport,
    ProjectTypeSchema,
    SkippedTemplate,
)
from bizplan.persistence.kv_store import KeyValueStore
from bizplan.registry.defaults import BUILTIN_PROJECT_TYPES, BUSINESS_TYPE_CATEGORIES

logger = logging.getLogger(__name__)

CUSTOM_TYPES_KEY = "customProjectTypes"


def _parse_schema(raw: ProjectTypeSchema | Mapping[str, Any]) -> ProjectTypeSchema:
    """Validate a model or raw mapping into a private ProjectTypeSchema copy."""
    if isinstance(raw, ProjectTypeSchema):
        # instances may have been mutated after construction, so validate again
        raw = raw.model_dump(by_alias=True, exclude_unset=True)
    if not isinstance(raw, Mapping):
        raise SchemaValidationError(
            f"Project type must be an object, got {type(raw).__name__}"
        )
    try:
        return ProjectTypeSchema.model_validate(dict(raw))
    except ValidationError as e:
        raise SchemaValidationError(str(e)) from e


class ProjectTypeRegistry:
    """Owns every template the engine can calculate."""

    def __init__(self, store: KeyValueStore | None = None):
        self._store = store
        self._builtin: dict[str, ProjectTypeSchema] = dict(BUILTIN_PROJECT_TYPES)
        self._custom: dict[str, ProjectTypeSchema] = {}
        self._business_types: dict[str, BusinessTypeCategory] = dict(BUSINESS_TYPE_CATEGORIES)
        self._load_custom()

    # ── Lookups ──────────────────────────────────────────

    def is_builtin(self, type_id: str) -> bool:
        return type_id in self._builtin

    def find_project_type(self, type_id: str) -> Optional[ProjectTypeSchema]:
        """Deep copy of the template, or None when the id is unknown."""
        schema = self._builtin.get(type_id) or self._custom.get(type_id)
        return schema.model_copy(deep=True) if schema is not None else None

    def get_project_type(self, type_id: str) -> ProjectTypeSchema:
        schema = self.find_project_type(type_id)
        if schema is None:
            raise UnknownProjectTypeError(type_id)
        return schema

    def get_all_project_types(self) -> dict[str, ProjectTypeSchema]:
        """Built-ins first, then user templates."""
        merged = {tid: s.model_copy(deep=True) for tid, s in self._builtin.items()}
        for tid, schema in self._custom.items():
            merged.setdefault(tid, schema.model_copy(deep=True))
        return merged

    def get_projects_by_business_type(self, business_type: str) -> list[ProjectTypeSchema]:
        return [
            schema
            for schema in self.get_all_project_types().values()
            if schema.business_type == business_type
        ]

    def get_all_project_types_by_category(self) -> dict[str, list[ProjectTypeSchema]]:
        grouped: dict[str, list[ProjectTypeSchema]] = {}
        for schema in self.get_all_project_types().values():
            grouped.setdefault(schema.business_type or "hybrid", []).append(schema)
        return grouped

    def get_business_type_category(self, business_type: str) -> Optional[BusinessTypeCategory]:
        category = self._business_types.get(business_type)
        return category.model_copy(deep=True) if category is not None else None

    def get_all_business_type_categories(self) -> dict[str, BusinessTypeCategory]:
        return {bid: c.model_copy(deep=True) for bid, c in self._business_types.items()}

    # ── Mutations ────────────────────────────────────────

    def set_project_type(
        self, type_id: str, schema: ProjectTypeSchema | Mapping[str, Any]
    ) -> ProjectTypeSchema:
        """Register (or replace) a user template. Returns a copy of what was stored."""
        if self.is_builtin(type_id):
            raise ReservedIdError(f"'{type_id}' is a built-in project type and cannot be replaced")

        parsed = _parse_schema(schema)
        if parsed.id != type_id:
            raise SchemaValidationError(
                f"Schema id '{parsed.id}' does not match registration id '{type_id}'"
            )

        self._custom[type_id] = parsed
        self._persist()
        logger.info(f"Registered custom project type '{type_id}' ({parsed.name})")
        return parsed.model_copy(deep=True)

    def delete_project_type(self, type_id: str) -> None:
        if self.is_builtin(type_id):
            raise ReservedIdError(f"'{type_id}' is a built-in project type and cannot be deleted")
        if type_id not in self._custom:
            raise UnknownProjectTypeError(type_id)

        del self._custom[type_id]
        self._persist()
        logger.info(f"Deleted custom project type '{type_id}'")

    def create_from_template(self, base_id: str, new_id: str, new_name: str) -> ProjectTypeSchema:
        """Clone ``base_id`` into a new user template."""
        base = self.get_project_type(base_id)
        raw = base.to_export_dict()
        raw.update(
            id=new_id,
            name=new_name,
            description=f"Custom {new_name} based on {base.name}",
        )
        return self.set_project_type(new_id, raw)

    # ── Import / export ──────────────────────────────────

    def export_configuration(self) -> dict[str, Any]:
        return {
            "default": {tid: s.to_export_dict() for tid, s in self._builtin.items()},
            "custom": {tid: s.to_export_dict() for tid, s in self._custom.items()},
            "exportDate": datetime.now(timezone.utc).isoformat(),
        }

    def import_configuration(self, data: Mapping[str, Any]) -> ImportReport:
        """
        Replace all user templates with the valid entries of ``data["custom"]``.

        Invalid, reserved or id-mismatched entries are skipped and reported;
        nothing is changed unless the payload itself is readable.
        """
        if not isinstance(data, Mapping) or not isinstance(data.get("custom"), Mapping):
            raise SchemaValidationError("Configuration must contain a 'custom' object")

        report = ImportReport()
        accepted: dict[str, ProjectTypeSchema] = {}

        for key, raw in data["custom"].items():
            if self.is_builtin(key):
                report.skipped.append(SkippedTemplate(id=key, reason="reserved built-in id"))
                continue
            try:
                parsed = _parse_schema(raw)
            except SchemaValidationError as e:
                report.skipped.append(SkippedTemplate(id=key, reason=f"invalid schema: {e}"))
                continue
            if parsed.id != key:
                report.skipped.append(
                    SkippedTemplate(id=key, reason=f"id mismatch (schema id '{parsed.id}')")
                )
                continue
            accepted[key] = parsed
            report.imported.append(key)

        for skipped in report.skipped:
            logger.warning(f"Skipped imported project type '{skipped.id}': {skipped.reason}")

        self._custom = accepted
        self._persist()
        logger.info(
            f"Imported {len(report.imported)} custom project types "
            f"({len(report.skipped)} skipped)"
        )
        return report

    # ── Persistence ──────────────────────────────────────

    def _persist(self) -> None:
        if self._store is None:
            return
        self._store.set(
            CUSTOM_TYPES_KEY,
            {tid: s.to_export_dict() for tid, s in self._custom.items()},
        )

    def _load_custom(self) -> None:
        if self._store is None:
            return
        stored = self._store.get(CUSTOM_TYPES_KEY, {})
        if not isinstance(stored, Mapping):
            logger.warning(f"Ignoring malformed '{CUSTOM_TYPES_KEY}' entry in storage")
            return

        for key, raw in stored.items():
            if self.is_builtin(key):
                logger.warning(f"Ignoring stored project type '{key}': reserved built-in id")
                continue
            try:
                parsed = _parse_schema(raw)
            except SchemaValidationError as e:
                logger.warning(f"Ignoring invalid stored project type '{key}': {e}")
                continue
            if parsed.id != key:
                logger.warning(f"Ignoring stored project type '{key}': id mismatch")
                continue
            self._custom[key] = parsed

        if self._custom:
            logger.info(f"Loaded {len(self._custom)} custom project types from storage")
