"""
Persisted session state: saved scenarios and the current selection.

Both are stored as JSON in the flat key-value store, so every model here
dumps cleanly with ``model_dump(mode="json", by_alias=True)``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Scenario(BaseModel):
    """A named snapshot of form values for one or more project types."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    values: dict[str, dict[str, Any]] = {}  # type_id -> value bag
    revenue_multiplier: float = Field(default=1.0, alias="revenueMultiplier")
    cost_multiplier: float = Field(default=1.0, alias="costMultiplier")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), alias="createdAt"
    )


class ScenarioDifference(BaseModel):
    """One numeric input that differs between two scenarios."""
    type_id: str
    field_id: str
    left: Optional[float] = None
    right: Optional[float] = None


class SelectionSnapshot(BaseModel):
    """Current business type, selected project types and the focused one."""

    model_config = ConfigDict(populate_by_name=True)

    selected_business_type: Optional[str] = Field(
        default=None, alias="selectedBusinessType"
    )
    selected_project_types: list[str] = Field(
        default_factory=list, alias="selectedProjectTypes"
    )
    active_project_type: Optional[str] = Field(default=None, alias="activeProjectType")
    timestamp: Optional[datetime] = None
