"""Registry — built-in templates, business-type catalog, ProjectTypeRegistry."""

from bizplan.registry.defaults import BUILTIN_PROJECT_TYPES, BUSINESS_TYPE_CATEGORIES
from bizplan.registry.project_types import CUSTOM_TYPES_KEY, ProjectTypeRegistry

__all__ = [
    "BUILTIN_PROJECT_TYPES",
    "BUSINESS_TYPE_CATEGORIES",
    "CUSTOM_TYPES_KEY",
    "ProjectTypeRegistry",
]
