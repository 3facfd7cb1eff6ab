"""
Time cost math — hourly earnings from income and projecting a price onto it.

All values stay at full float precision; rounding for display happens in
report/display.py.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from core.schema import MONTHS_PER_YEAR, WORK_DAYS_PER_YEAR


@dataclass(frozen=True)
class OneTimeCost:
    """Working time a single purchase is worth."""
    hours: float
    days: float
    hourly_rate: float

    is_recurring = False


@dataclass(frozen=True)
class RecurringCost:
    """
    Working time a monthly charge is worth, per month and over a year.

    yearly_hours is monthly_hours * 12 with no rounding in between.
    """
    monthly_hours: float
    monthly_days: float
    yearly_hours: float
    yearly_days: float
    hourly_rate: float

    is_recurring = True


TimeCost = Union[OneTimeCost, RecurringCost]


def annual_working_hours(daily_hours: float) -> float:
    """Hours worked in a year under the 5-day / 52-week calendar."""
    return daily_hours * WORK_DAYS_PER_YEAR


def hourly_earnings(yearly_income: float, daily_hours: float) -> float:
    return yearly_income / annual_working_hours(daily_hours)


def compute_time_cost(
    yearly_income: float,
    daily_hours: float,
    item_price: float,
    is_recurring: bool = False,
) -> TimeCost:
    """
    Convert a price into working hours and shifts.

    Parameters
    ----------
    yearly_income : float
        Annual net income, > 0
    daily_hours : float
        Hours in one working day (one shift), in (0, 24]
    item_price : float
        Price of the item, or the monthly charge when is_recurring
    is_recurring : bool
        Treat item_price as a monthly payment and also report the yearly total

    Inputs are expected to have passed inputs.validators.validate_inputs.
    """
    if daily_hours <= 0:
        raise ValueError("daily_hours must be positive.")
    if yearly_income <= 0:
        raise ValueError("yearly_income must be positive.")

    rate = hourly_earnings(yearly_income, daily_hours)
    # a denormal income underflows the rate to 0.0
    hours = item_price / rate if rate else math.inf

    if is_recurring:
        yearly = hours * MONTHS_PER_YEAR
        return RecurringCost(
            monthly_hours=hours,
            monthly_days=hours / daily_hours,
            yearly_hours=yearly,
            yearly_days=yearly / daily_hours,
            hourly_rate=rate,
        )

    return OneTimeCost(
        hours=hours,
        days=hours / daily_hours,
        hourly_rate=rate,
    )
