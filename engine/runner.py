"""
Calculation runner — validates a submitted form and computes its time cost.

A rejected form never raises: the outcome carries the validation message and
no result, and the page shows the message instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from core.utils import parse_number
from inputs.form import TimeCostForm
from inputs.validators import collect_validation_errors

from .calculator import TimeCost, compute_time_cost

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationOutcome:
    """Either a result or the validation message that prevented one."""
    result: Optional[TimeCost] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run_calculation(form: TimeCostForm) -> CalculationOutcome:
    """
    Run one calculation for the current form values.

    Returns
    -------
    CalculationOutcome with `result` set when the form is valid, otherwise
    with `error` set to the first failed validation message.
    """
    validation = collect_validation_errors(form.yearly_income, form.daily_hours, form.item_price)
    if not validation.is_valid:
        logger.info("Rejected time cost form: %s", "; ".join(validation.errors))
        return CalculationOutcome(error=validation.first_error)

    result = compute_time_cost(
        parse_number(form.yearly_income),
        parse_number(form.daily_hours),
        parse_number(form.item_price),
        is_recurring=form.is_recurring,
    )
    logger.debug("Computed %s time cost", "recurring" if result.is_recurring else "one-time")
    return CalculationOutcome(result=result)
