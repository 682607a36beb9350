"""Page-level tests driving the Streamlit script"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).resolve().parents[1] / "app.py")


@pytest.fixture
def at():
    app = AppTest.from_file(APP, default_timeout=30)
    app.run()
    assert not app.exception
    return app


def metrics(app):
    return {m.label: m.value for m in app.metric}


def test_initial_calculation(at):
    """Defaults are calculated on first load"""
    shown = metrics(at)

    assert shown["Monthly EMI"] == "₹8,678"
    assert shown["Principal Amount"] == "₹10,00,000"
    assert len(at.warning) == 0


def test_typed_value_moves_slider(at):
    at.number_input(key="loan_amount_field").set_value(500000.0).run()

    assert at.slider(key="loan_amount_slider").value == 500000.0
    assert metrics(at)["Principal Amount"] == "₹5,00,000"


def test_slider_moves_typed_value(at):
    at.slider(key="interest_rate_slider").set_value(10.0).run()

    assert at.number_input(key="interest_rate_field").value == 10.0


def test_short_loan_scenario(at):
    at.number_input(key="loan_amount_field").set_value(500000.0).run()
    at.slider(key="interest_rate_slider").set_value(10.0).run()
    at.number_input(key="loan_tenure_field").set_value(5.0).run()

    assert metrics(at)["Monthly EMI"] == "₹10,624"


def test_zero_input_keeps_previous_result(at):
    """A zero value shows a warning and leaves the last result on screen"""
    at.number_input(key="interest_rate_field").set_value(0.0).run()

    assert metrics(at)["Monthly EMI"] == "₹8,678"
    assert len(at.warning) == 1
    assert "Interest rate" in at.warning[0].value
