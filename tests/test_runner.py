import dataclasses
import logging

import pytest

from engine.calculator import OneTimeCost, RecurringCost
from engine.runner import run_calculation
from inputs.form import TimeCostForm


def test_valid_form_produces_result(sample_form):
    outcome = run_calculation(sample_form)

    assert outcome.ok
    assert outcome.error is None
    assert isinstance(outcome.result, OneTimeCost)


def test_recurring_flag_selects_recurring_result(sample_form):
    outcome = run_calculation(dataclasses.replace(sample_form, is_recurring=True))
    assert isinstance(outcome.result, RecurringCost)


def test_out_of_range_hours_produce_error_and_no_result(sample_form):
    outcome = run_calculation(dataclasses.replace(sample_form, daily_hours="25"))

    assert not outcome.ok
    assert outcome.result is None
    assert outcome.error == "Please enter valid daily hours (between 0 and 24)"


def test_empty_form_reports_first_missing_field():
    outcome = run_calculation(TimeCostForm())
    assert outcome.error == "Enter your annual net income"


def test_rejection_is_logged(sample_form, caplog):
    caplog.set_level(logging.INFO, logger="engine.runner")
    run_calculation(dataclasses.replace(sample_form, item_price="0"))
    assert "Rejected time cost form" in caplog.text
    assert "Please enter a valid price" in caplog.text


def test_income_is_not_logged(sample_form, caplog):
    caplog.set_level(logging.DEBUG, logger="engine.runner")
    run_calculation(sample_form)
    assert "Computed one-time time cost" in caplog.text
    assert "50000" not in caplog.text


@pytest.mark.parametrize("is_recurring", [False, True])
@pytest.mark.parametrize(
    "income, hours, price",
    [
        ("5e-324", "24", "1"),
        ("1", "5e-324", "1"),
        ("1e308", "0.001", "1"),
        ("50000", "8", "1e999"),
        ("Infinity", "8", "Infinity"),
        ("1e300", "24", "1"),
    ],
)
def test_extreme_inputs_compute_without_raising(income, hours, price, is_recurring):
    form = TimeCostForm(yearly_income=income, daily_hours=hours, item_price=price, is_recurring=is_recurring)
    outcome = run_calculation(form)

    assert outcome.ok
    assert outcome.result is not None
