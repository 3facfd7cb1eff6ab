"""
Time is Money — Streamlit page
==============================

Converts a price into the working time it costs:
  1. Annual net income and daily working hours give an hourly rate
  2. The price (or monthly charge) is divided by that rate
  3. Hours are also shown as shifts of the user's working day

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import AppConfig
from core.logging_setup import setup_logging
from core.schema import EMPTY_FIELD_MESSAGES, FIELD_LABELS

from inputs.form import TimeCostForm, sanitize_income

from engine.runner import run_calculation

from report.display import to_display

CONFIG = AppConfig()
RESULT_KEY = "time_cost_outcome"

setup_logging(CONFIG.log_level)


# ---------------------------------------------------------------------------
# Widget callbacks
# ---------------------------------------------------------------------------
def _sanitize_income_field() -> None:
    st.session_state["yearly_income"] = sanitize_income(st.session_state.get("yearly_income", ""))


def _text_field(name: str) -> str:
    return st.text_input(
        FIELD_LABELS[name],
        key=name,
        placeholder=EMPTY_FIELD_MESSAGES[name],
        on_change=_sanitize_income_field if name == "yearly_income" else None,
    )


def _escape_dollars(text: str) -> str:
    """Streamlit markdown reads $...$ as LaTeX."""
    return text.replace("$", "\\$")


# ═══════════════════════════════════════════════════════════════════════════
# PAGE CONFIG
# ═══════════════════════════════════════════════════════════════════════════
st.set_page_config(page_title="Time is Money Calculator", page_icon="⏳", layout="centered")
st.title("⏳ Time is Money Calculator")
st.caption("Discover the time price tag of your purchases before you reach for your wallet")

# ═══════════════════════════════════════════════════════════════════════════
# FORM
# ═══════════════════════════════════════════════════════════════════════════
yearly_income = _text_field("yearly_income")
daily_hours = _text_field("daily_hours")
item_price = _text_field("item_price")
is_recurring = st.checkbox("Recurring Monthly Payment", key="is_recurring")

if st.button("🕒 Show Me The Time Price Tag", key="calculate", type="primary"):
    form = TimeCostForm(
        yearly_income=yearly_income,
        daily_hours=daily_hours,
        item_price=item_price,
        is_recurring=is_recurring,
    )
    st.session_state[RESULT_KEY] = run_calculation(form)

# ═══════════════════════════════════════════════════════════════════════════
# RESULT
# ═══════════════════════════════════════════════════════════════════════════
outcome = st.session_state.get(RESULT_KEY)
if outcome is not None:
    if not outcome.ok:
        st.error(outcome.error)
    else:
        display = to_display(outcome.result, daily_hours=daily_hours, config=CONFIG)
        lines = [
            f"**{display.hourly_earnings_line()}**",
            "**The time price tag:** 🕒",
            *display.time_price_lines(),
        ]
        st.success(_escape_dollars("\n\n".join(lines)))
        st.dataframe(display.to_dataframe(), hide_index=True)
