"""
Form inputs — raw field values, income sanitisation, validation.
"""

from .form import TimeCostForm, sanitize_income
from .validators import ValidationResult, collect_validation_errors, validate_inputs

__all__ = [
    "TimeCostForm",
    "sanitize_income",
    "ValidationResult",
    "collect_validation_errors",
    "validate_inputs",
]
