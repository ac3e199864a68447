"""
Configuration schemas: the declarative description of a business template.

A ProjectTypeSchema owns four field lists (investment, revenue, operating,
staffing). Field metadata that older templates expressed through naming
conventions (``...Sal`` suffixes, ``event`` in the id, ``courtCost``) is
resolved once when a FieldSpec is built, so the engine only ever reads
explicit attributes.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

from .enums import FieldRole, FieldType, ProjectCategory

_RATE_SUFFIXES = ("Salary", "Sal", "Rate")

# Legacy per-unit investment fields and the count field that multiplies them
_LEGACY_UNIT_MULTIPLIERS = {"courtCost": "courts"}


def _strip_rate_suffix(field_id: str) -> str:
    for suffix in _RATE_SUFFIXES:
        if field_id.endswith(suffix) and len(field_id) > len(suffix):
            return field_id[: -len(suffix)]
    return field_id


# ── Field specification ──────────────────────────────────


class FieldSpec(BaseModel):
    """One configurable input of a template."""

    # unknown keys (e.g. "step") are kept so templates round-trip unchanged
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(min_length=1)
    name: str
    type: FieldType
    default_value: Any = Field(default=None, alias="defaultValue")
    min: Optional[float] = None
    max: Optional[float] = None
    unit: Optional[str] = None
    group: Optional[str] = None
    description: Optional[str] = None
    options: list[str] = []  # choices for select fields

    # Explicit calculation metadata (optional; derived from the id when absent)
    per_event: Optional[bool] = Field(default=None, alias="perEvent")
    role: Optional[FieldRole] = None
    role_key: Optional[str] = Field(default=None, alias="roleKey")
    unit_multiplier: Optional[str] = Field(default=None, alias="unitMultiplier")

    _resolved_per_event: bool = PrivateAttr(default=False)
    _resolved_role: Optional[FieldRole] = PrivateAttr(default=None)
    _resolved_role_key: str = PrivateAttr(default="")
    _resolved_unit_multiplier: Optional[str] = PrivateAttr(default=None)

    def model_post_init(self, __context: Any) -> None:
        fid = self.id

        if self.per_event is not None:
            self._resolved_per_event = self.per_event
        else:
            self._resolved_per_event = "event" in fid.lower()

        if self.role is not None:
            self._resolved_role = self.role
        elif fid.endswith(_RATE_SUFFIXES):
            self._resolved_role = FieldRole.RATE
        elif self.type in (FieldType.NUMBER, FieldType.BOOLEAN):
            self._resolved_role = FieldRole.COUNT
        else:
            self._resolved_role = None

        self._resolved_role_key = self.role_key or _strip_rate_suffix(fid)
        self._resolved_unit_multiplier = (
            self.unit_multiplier or _LEGACY_UNIT_MULTIPLIERS.get(fid)
        )

    # ── Resolved metadata ────────────────────────────────

    @property
    def is_per_event(self) -> bool:
        return self._resolved_per_event

    @property
    def staffing_role(self) -> Optional[FieldRole]:
        return self._resolved_role

    @property
    def staffing_role_key(self) -> str:
        return self._resolved_role_key

    @property
    def multiplier_field(self) -> Optional[str]:
        return self._resolved_unit_multiplier


# ── Template ─────────────────────────────────────────────


class ProjectTypeCategories(BaseModel):
    """The four field lists every template must declare (possibly empty)."""

    model_config = ConfigDict(extra="allow")

    investment: list[FieldSpec]
    revenue: list[FieldSpec]
    operating: list[FieldSpec]
    staffing: list[FieldSpec]

    @model_validator(mode="after")
    def _unique_ids_per_category(self) -> "ProjectTypeCategories":
        for category in ProjectCategory:
            seen: set[str] = set()
            for spec in getattr(self, category.value):
                if spec.id in seen:
                    raise ValueError(
                        f"Duplicate field id '{spec.id}' in {category.value} category"
                    )
                seen.add(spec.id)
        return self


# Named lookups search revenue drivers first, then the other categories
_LOOKUP_ORDER = (
    ProjectCategory.REVENUE,
    ProjectCategory.INVESTMENT,
    ProjectCategory.OPERATING,
    ProjectCategory.STAFFING,
)


class ProjectTypeSchema(BaseModel):
    """One business template (built-in or user-defined)."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str = ""
    icon: str = ""
    business_type: str = Field(default="hybrid", alias="businessType")
    categories: ProjectTypeCategories

    def fields_in(self, category: ProjectCategory) -> list[FieldSpec]:
        return getattr(self.categories, category.value)

    def iter_fields(self) -> Iterator[tuple[ProjectCategory, FieldSpec]]:
        for category in ProjectCategory:
            for spec in self.fields_in(category):
                yield category, spec

    def find_field(self, field_id: str) -> Optional[FieldSpec]:
        """First field with this id, searching revenue → investment → operating → staffing."""
        for category in _LOOKUP_ORDER:
            for spec in self.fields_in(category):
                if spec.id == field_id:
                    return spec
        return None

    def to_export_dict(self) -> dict[str, Any]:
        """JSON-ready dict in the interchange (camelCase) format, echoing only set keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


# ── Business type catalog ────────────────────────────────


class BusinessTypeCategory(BaseModel):
    """Describes a family of templates (booking, member, event, …)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str = ""
    examples: list[str] = []
    icon: str = ""
    key_metrics: list[str] = Field(default_factory=list, alias="keyMetrics")
    revenue_model: str = Field(default="", alias="revenueModel")
    characteristics: list[str] = []


# ── Import diagnostics ───────────────────────────────────


class SkippedTemplate(BaseModel):
    id: str
    reason: str


class ImportReport(BaseModel):
    """Outcome of importing a template configuration."""
    imported: list[str] = []
    skipped: list[SkippedTemplate] = []
