from enum import Enum


class FieldType(str, Enum):
    NUMBER = "number"
    CURRENCY = "currency"
    PERCENTAGE = "percentage"
    BOOLEAN = "boolean"
    SELECT = "select"


class ProjectCategory(str, Enum):
    INVESTMENT = "investment"
    REVENUE = "revenue"
    OPERATING = "operating"
    STAFFING = "staffing"


class FieldRole(str, Enum):
    """Which part of a staffing role a field carries."""
    COUNT = "count"   # headcount (number or boolean)
    RATE = "rate"     # salary / rate per head
    FLAT = "flat"     # lump sum added as-is


class SelectionEvent(str, Enum):
    BUSINESS_TYPE_CHANGED = "businessTypeChanged"
    PROJECT_TYPES_CHANGED = "projectTypesChanged"
    ACTIVE_PROJECT_CHANGED = "activeProjectChanged"
