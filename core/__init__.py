"""
Core package — field schema, display configuration, logging setup and shared utilities.
No business logic lives here.
"""

from .schema import FORM_FIELDS, WORK_DAYS_PER_YEAR
from .config import AppConfig
from .utils import parse_number, digits_only, round_half_up, format_fixed, format_currency
from .logging_setup import setup_logging

__all__ = [
    "FORM_FIELDS",
    "WORK_DAYS_PER_YEAR",
    "AppConfig",
    "parse_number",
    "digits_only",
    "round_half_up",
    "format_fixed",
    "format_currency",
    "setup_logging",
]
