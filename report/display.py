"""
Display output — the time price tag as rounded strings, text lines and a table.

Rounding happens only here; engine results keep full precision.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import pandas as pd

from core.config import AppConfig
from core.utils import format_currency, format_fixed
from engine.calculator import OneTimeCost, RecurringCost, TimeCost


@dataclass(frozen=True)
class DisplayResult:
    """A calculation result rounded for the page."""
    is_recurring: bool
    hourly_rate: str
    daily_hours: str  # as typed by the user, shown in "shifts of N hours"

    # one-time
    hours: Optional[str] = None
    days: Optional[str] = None

    # recurring
    monthly_hours: Optional[str] = None
    monthly_days: Optional[str] = None
    yearly_hours: Optional[str] = None
    yearly_days: Optional[str] = None

    currency_symbol: str = "$"

    def hourly_earnings_line(self) -> str:
        rate = format_currency(self.hourly_rate, symbol=self.currency_symbol)
        return f"Your hourly earnings: {rate}/hour"

    def _job_line(self, hours: str, days: str) -> str:
        return f"{hours} hours on the job ({days} shifts of {self.daily_hours} hours)"

    def time_price_lines(self) -> List[str]:
        """The time price tag sentences, one per period."""
        if self.is_recurring:
            return [
                f"Monthly: {self._job_line(self.monthly_hours, self.monthly_days)}",
                f"Yearly: {self._job_line(self.yearly_hours, self.yearly_days)}",
            ]
        return [self._job_line(self.hours, self.days)]

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly breakdown table."""
        if self.is_recurring:
            rows = [
                {"Period": "Monthly", "Hours": self.monthly_hours, "Shifts": self.monthly_days},
                {"Period": "Yearly", "Hours": self.yearly_hours, "Shifts": self.yearly_days},
            ]
        else:
            rows = [{"Period": "One-time", "Hours": self.hours, "Shifts": self.days}]
        return pd.DataFrame(rows, columns=["Period", "Hours", "Shifts"])


def to_display(
    result: TimeCost,
    *,
    daily_hours: str,
    config: AppConfig = AppConfig(),
) -> DisplayResult:
    """
    Round a calculation result for display.

    Parameters
    ----------
    result : OneTimeCost or RecurringCost
        Output of engine.calculator.compute_time_cost()
    daily_hours : str
        The daily hours field as entered, echoed in the text lines
    config : AppConfig
        Decimal places for the rate and for hours/shifts
    """
    rate = format_fixed(result.hourly_rate, config.rate_decimals)

    def t(x: float) -> str:
        return format_fixed(x, config.time_decimals)

    if isinstance(result, RecurringCost):
        return DisplayResult(
            is_recurring=True,
            hourly_rate=rate,
            daily_hours=daily_hours,
            monthly_hours=t(result.monthly_hours),
            monthly_days=t(result.monthly_days),
            yearly_hours=t(result.yearly_hours),
            yearly_days=t(result.yearly_days),
            currency_symbol=config.currency_symbol,
        )
    if isinstance(result, OneTimeCost):
        return DisplayResult(
            is_recurring=False,
            hourly_rate=rate,
            daily_hours=daily_hours,
            hours=t(result.hours),
            days=t(result.days),
            currency_symbol=config.currency_symbol,
        )
    raise TypeError(f"Unsupported result type: {type(result).__name__}")
