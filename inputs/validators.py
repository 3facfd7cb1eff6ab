"""
Input validation for the time cost form, run before anything is computed.

Checks, in order:
- Every field is filled in
- Yearly income is a positive number
- Daily hours are a number in (0, 24]
- Item price is a positive number

Only the first failure is shown to the user.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from core.schema import (
    EMPTY_FIELD_MESSAGES,
    FORM_FIELDS,
    INVALID_FIELD_MESSAGES,
    MAX_DAILY_HOURS,
)
from core.utils import is_number, parse_number


@dataclass
class ValidationResult:
    """Collects every failed rule for one set of form values."""
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def first_error(self) -> Optional[str]:
        return self.errors[0] if self.errors else None

    def summary(self) -> str:
        if not self.errors:
            return "✓ All checks passed."
        lines = [f"ERRORS ({len(self.errors)}):"]
        for e in self.errors:
            lines.append(f"  ✗ {e}")
        return "\n".join(lines)


def _in_domain(name: str, value: float) -> bool:
    if not is_number(value) or value <= 0:
        return False
    if name == "daily_hours":
        return value <= MAX_DAILY_HOURS
    return True


def collect_validation_errors(
    yearly_income: str,
    daily_hours: str,
    item_price: str,
) -> ValidationResult:
    """
    Run every rule against the raw strings and keep all failures, in rule order.
    Empty-field failures always come before numeric ones.
    """
    raw = dict(zip(FORM_FIELDS, (yearly_income, daily_hours, item_price)))
    result = ValidationResult()

    # --- Required fields ---
    for name in FORM_FIELDS:
        if not raw[name]:
            result.errors.append(EMPTY_FIELD_MESSAGES[name])

    # --- Numeric domains ---
    for name in FORM_FIELDS:
        if raw[name] and not _in_domain(name, parse_number(raw[name])):
            result.errors.append(INVALID_FIELD_MESSAGES[name])

    return result


def validate_inputs(yearly_income: str, daily_hours: str, item_price: str) -> Optional[str]:
    """Return the first validation message, or None when the values can be computed."""
    return collect_validation_errors(yearly_income, daily_hours, item_price).first_error
