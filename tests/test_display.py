import math

import pytest

from core.config import AppConfig
from engine.calculator import compute_time_cost
from report.display import to_display


def test_one_time_display():
    display = to_display(compute_time_cost(50000, 8, 100), daily_hours="8")

    assert display.hourly_rate == "24.04"
    assert display.hours == "4.2"
    assert display.days == "0.5"
    assert display.hourly_earnings_line() == "Your hourly earnings: $24.04/hour"
    assert display.time_price_lines() == ["4.2 hours on the job (0.5 shifts of 8 hours)"]


def test_recurring_display():
    display = to_display(compute_time_cost(50000, 8, 100, is_recurring=True), daily_hours="8")

    assert (display.monthly_hours, display.monthly_days) == ("4.2", "0.5")
    assert (display.yearly_hours, display.yearly_days) == ("49.9", "6.2")
    assert display.time_price_lines() == [
        "Monthly: 4.2 hours on the job (0.5 shifts of 8 hours)",
        "Yearly: 49.9 hours on the job (6.2 shifts of 8 hours)",
    ]


def test_daily_hours_are_echoed_as_typed():
    display = to_display(compute_time_cost(50000, 7.5, 100), daily_hours="7.50")
    assert display.time_price_lines()[0].endswith("shifts of 7.50 hours)")


def test_breakdown_table():
    one_time = to_display(compute_time_cost(50000, 8, 100), daily_hours="8").to_dataframe()
    recurring = to_display(
        compute_time_cost(50000, 8, 100, is_recurring=True), daily_hours="8"
    ).to_dataframe()

    assert list(one_time.columns) == ["Period", "Hours", "Shifts"]
    assert one_time.to_dict("records") == [{"Period": "One-time", "Hours": "4.2", "Shifts": "0.5"}]
    assert recurring["Period"].tolist() == ["Monthly", "Yearly"]
    assert recurring["Hours"].tolist() == ["4.2", "49.9"]


def test_precision_follows_config():
    config = AppConfig(rate_decimals=3, time_decimals=2, currency_symbol="€")
    display = to_display(compute_time_cost(50000, 8, 100), daily_hours="8", config=config)

    assert display.hourly_rate == "24.038"
    assert display.hours == "4.16"
    assert display.hourly_earnings_line() == "Your hourly earnings: €24.04/hour"


def test_unknown_result_type():
    with pytest.raises(TypeError):
        to_display(object(), daily_hours="8")


@pytest.mark.parametrize(
    "income, hours, price, rate_line, job_line",
    [
        (
            5e-324, 24, 1,
            "Your hourly earnings: $0.00/hour",
            "Infinity hours on the job (Infinity shifts of 24 hours)",
        ),
        (
            1, 5e-324, 1,
            "Your hourly earnings: $Infinity/hour",
            "0.0 hours on the job (0.0 shifts of 5e-324 hours)",
        ),
        (
            50000, 8, math.inf,
            "Your hourly earnings: $24.04/hour",
            "Infinity hours on the job (Infinity shifts of 8 hours)",
        ),
        (
            math.inf, 8, math.inf,
            "Your hourly earnings: $Infinity/hour",
            "NaN hours on the job (NaN shifts of 8 hours)",
        ),
    ],
)
def test_extreme_results_have_defined_display(income, hours, price, rate_line, job_line):
    display = to_display(compute_time_cost(income, hours, price), daily_hours=str(hours))

    assert display.hourly_earnings_line() == rate_line
    assert display.time_price_lines() == [job_line]


def test_underflowed_rate_recurring_display():
    display = to_display(compute_time_cost(5e-324, 24, 1, is_recurring=True), daily_hours="24")

    assert display.time_price_lines() == [
        "Monthly: Infinity hours on the job (Infinity shifts of 24 hours)",
        "Yearly: Infinity hours on the job (Infinity shifts of 24 hours)",
    ]


def test_huge_finite_rate_display():
    display = to_display(compute_time_cost(1e300, 24, 1), daily_hours="24")

    assert display.hours == "0.0"
    assert len(display.hourly_rate.split(".")[1]) == 2
