"""
Value reader — typed access to a bag of raw form values.

Lookup order for every field: the value in the bag when it parses to a
non-negative finite number, then the field's declared default, then the
caller's fallback. Missing or malformed input is never an error.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Optional

from bizplan.models.schemas import ProjectTypeSchema

_TRUE_STRINGS = {"true", "yes", "on", "1"}
_FALSE_STRINGS = {"false", "no", "off", "0", ""}


def parse_number(raw: Any) -> Optional[float]:
    """Non-negative finite float, or None when ``raw`` is not one."""
    if raw is None:
        return None
    if isinstance(raw, bool):
        return 1.0 if raw else 0.0
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        number = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number < 0:
        return None
    return number


def parse_flag(raw: Any) -> Optional[bool]:
    if raw is None:
        return None
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, (int, float)):
        return raw != 0
    if isinstance(raw, str):
        text = raw.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    return None


class ValueReader:
    """Reads fields of one schema out of one value bag."""

    def __init__(self, schema: ProjectTypeSchema, values: Mapping[str, Any] | None):
        self.schema = schema
        self.values: Mapping[str, Any] = values or {}

    def has(self, field_id: str) -> bool:
        """True when the bag carries an entry for this id (valid or not)."""
        return field_id in self.values

    def declares(self, field_id: str) -> bool:
        return self.schema.find_field(field_id) is not None

    def available(self, field_id: str) -> bool:
        return self.has(field_id) or self.declares(field_id)

    def number(self, field_id: str, fallback: float = 0.0) -> float:
        parsed = parse_number(self.values.get(field_id))
        if parsed is not None:
            return parsed

        spec = self.schema.find_field(field_id)
        if spec is not None:
            default = parse_number(spec.default_value)
            return default if default is not None else 0.0
        return fallback

    def percent(self, field_id: str, fallback: float = 0.0) -> float:
        """A 0-100 percentage field as a fraction."""
        return self.number(field_id, fallback) / 100

    def flag(self, field_id: str, fallback: bool = False) -> bool:
        parsed = parse_flag(self.values.get(field_id))
        if parsed is not None:
            return parsed

        spec = self.schema.find_field(field_id)
        if spec is not None:
            return bool(parse_flag(spec.default_value))
        return fallback
