"""Tests for the typed field / slider mirror"""

import pytest

from loan_emi.sync import InputSync, LoanField

FIELDS = [
    LoanField("loan_amount", "Loan Amount", 100000.0, 10000000.0, 10000.0, 1000000.0),
    LoanField("interest_rate", "Interest Rate", 1.0, 20.0, 0.1, 8.5),
    LoanField("loan_tenure", "Loan Tenure", 1.0, 30.0, 1.0, 20.0),
]


@pytest.fixture
def state():
    return {}


@pytest.fixture
def calls():
    return []


@pytest.fixture
def sync(state, calls):
    return InputSync(state, FIELDS, calls.append)


def test_seed_sets_defaults_and_calculates_once(sync, state, calls):
    sync.seed()

    assert state["loan_amount_field"] == 1000000.0
    assert state["loan_amount_slider"] == 1000000.0
    assert state["interest_rate_slider"] == 8.5
    assert calls == [{"loan_amount": 1000000.0, "interest_rate": 8.5, "loan_tenure": 20.0}]


def test_seed_keeps_existing_values(sync, state):
    state["loan_tenure_field"] = 5.0
    sync.seed()

    assert state["loan_tenure_field"] == 5.0


def test_field_change_mirrors_to_slider(sync, state, calls):
    sync.seed()
    calls.clear()

    state["loan_amount_field"] = 500000.0
    sync.from_field("loan_amount")

    assert state["loan_amount_slider"] == 500000.0
    assert len(calls) == 1
    assert calls[0]["loan_amount"] == 500000.0


def test_slider_change_mirrors_to_field(sync, state, calls):
    sync.seed()
    calls.clear()

    state["interest_rate_slider"] = 10.0
    sync.from_slider("interest_rate")

    assert state["interest_rate_field"] == 10.0
    assert len(calls) == 1
    assert calls[0]["interest_rate"] == 10.0


def test_slider_is_clamped_field_is_not(sync, state, calls):
    """Out-of-range typed values pin the slider to its bound"""
    sync.seed()

    state["loan_amount_field"] = 25000000.0
    sync.from_field("loan_amount")
    assert state["loan_amount_slider"] == 10000000.0
    assert state["loan_amount_field"] == 25000000.0

    state["loan_tenure_field"] = 0.0
    sync.from_field("loan_tenure")
    assert state["loan_tenure_slider"] == 1.0
    assert calls[-1]["loan_tenure"] == 0.0


def test_non_numeric_field_leaves_slider(sync, state, calls):
    sync.seed()
    calls.clear()

    state["interest_rate_field"] = None
    sync.from_field("interest_rate")

    assert state["interest_rate_slider"] == 8.5
    assert len(calls) == 1
    assert calls[0]["interest_rate"] is None


def test_clamp():
    field = FIELDS[1]
    assert field.clamp(0.5) == 1.0
    assert field.clamp(12.0) == 12.0
    assert field.clamp(40.0) == 20.0
