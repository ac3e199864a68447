from .logger import setup_logging
from .formatting import format_currency, format_payback, format_percentage, format_roi

__all__ = ["setup_logging", "format_currency", "format_payback", "format_percentage", "format_roi"]
