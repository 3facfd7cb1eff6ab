from __future__ import annotations

from typing import Tuple

# Fixed working-calendar assumption: 5-day workweek, 52 weeks per year.
WORK_DAYS_PER_WEEK: int = 5
WORK_WEEKS_PER_YEAR: int = 52
WORK_DAYS_PER_YEAR: int = WORK_DAYS_PER_WEEK * WORK_WEEKS_PER_YEAR

MONTHS_PER_YEAR: int = 12
MAX_DAILY_HOURS: float = 24.0

# Form field keys, in the order the validator checks them.
FORM_FIELDS: Tuple[str, ...] = (
    "yearly_income",
    "daily_hours",
    "item_price",
)

# Shown as the placeholder of an empty field and as its "missing" error.
EMPTY_FIELD_MESSAGES = {
    "yearly_income": "Enter your annual net income",
    "daily_hours": "What are your daily work hours?",
    "item_price": "Enter the price as a whole number, without cents",
}

INVALID_FIELD_MESSAGES = {
    "yearly_income": "Please enter a valid yearly income",
    "daily_hours": "Please enter valid daily hours (between 0 and 24)",
    "item_price": "Please enter a valid price",
}

FIELD_LABELS = {
    "yearly_income": "Annual Net Income",
    "daily_hours": "Daily Working Hours",
    "item_price": "Product/Service Price",
}
