"""
Time cost engine — hourly earnings math and the validate-then-compute runner.
"""

from .calculator import (
    OneTimeCost,
    RecurringCost,
    TimeCost,
    annual_working_hours,
    hourly_earnings,
    compute_time_cost,
)
from .runner import CalculationOutcome, run_calculation

__all__ = [
    "OneTimeCost",
    "RecurringCost",
    "TimeCost",
    "annual_working_hours",
    "hourly_earnings",
    "compute_time_cost",
    "CalculationOutcome",
    "run_calculation",
]
