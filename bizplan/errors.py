"""
Error taxonomy for the planning core.

Configuration problems surface at registration time, unknown entities at
calculation time. Missing form values and degenerate financials are never
errors.
"""

from __future__ import annotations


class PlanningError(Exception):
    """Base class for every error raised by bizplan."""


class SchemaValidationError(PlanningError, ValueError):
    """A project-type schema is malformed or incomplete."""


class ReservedIdError(PlanningError, ValueError):
    """A user template tried to take over (or delete) a built-in id."""


class UnknownProjectTypeError(PlanningError, LookupError):
    """A project-type id is not known to the registry."""

    def __init__(self, type_id: str | None):
        self.type_id = type_id
        super().__init__(f"Unknown project type: {type_id}")


class ScenarioNotFoundError(PlanningError, LookupError):
    """No saved scenario matches the requested name."""
