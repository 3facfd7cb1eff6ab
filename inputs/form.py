from __future__ import annotations

from dataclasses import dataclass

from core.utils import digits_only


@dataclass(frozen=True)
class TimeCostForm:
    """Raw values exactly as the form fields hold them."""
    yearly_income: str = ""
    daily_hours: str = ""
    item_price: str = ""
    is_recurring: bool = False


def sanitize_income(raw: str) -> str:
    """
    The income field only keeps digits as it is typed ("50,000" -> "50000").
    Cents and separators are dropped, never interpreted.
    """
    return digits_only(raw)
