from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from pillar3.app import create_app
from pillar3.core.projection import SimulationInput


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app()
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def reference_input() -> SimulationInput:
    """30 -> 65 saver with both accounts funded, retiring until 85."""
    return SimulationInput(
        currentAge=30,
        retirementAge=65,
        lifeExpectancy=85,
        annualIncome=90000.0,
        currentSavingsA=10000.0,
        currentSavingsB=5000.0,
        monthlyContributionA=500.0,
        monthlyContributionB=250.0,
        expectedReturnA=2.5,
        expectedReturnB=4.0,
        inflationRate=1.5,
        targetMonthlyIncome=4000.0,
    )
