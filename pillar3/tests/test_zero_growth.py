from __future__ import annotations

from math import isclose

from pillar3.core.projection import SimulationInput, run_projection


def test_zero_contributions_and_returns_keep_capital_flat():
    """
    With no contributions and no returns, every accumulation year equals the opening balances.
    """
    sim = SimulationInput(
        currentAge=45,
        retirementAge=60,
        lifeExpectancy=80,
        currentSavingsA=12345.67,
        currentSavingsB=7654.33,
        expectedReturnA=0.0,
        expectedReturnB=0.0,
        inflationRate=2.0,
        targetMonthlyIncome=500.0,
    )

    rows = run_projection(sim, current_year=2025)
    accumulation = [row for row in rows if row.phase == "accumulation"]

    assert len(accumulation) == 16
    for row in accumulation:
        assert row.balanceA == 12345.67
        assert row.balanceB == 7654.33
        assert row.totalCapital == 12345.67 + 7654.33


def test_zero_growth_accumulates_contributions_only():
    sim = SimulationInput(
        currentAge=25,
        retirementAge=27,
        lifeExpectancy=28,
        currentSavingsA=1000.0,
        monthlyContributionA=100.0,
        monthlyContributionB=50.0,
    )

    rows = run_projection(sim, current_year=2025)

    expected_totals = [1000.0, 2800.0, 4600.0]  # 1000 start + two annual lumps of 1800
    for row, expected_total in zip(rows, expected_totals):
        assert isclose(row.totalCapital, expected_total, abs_tol=1e-9)
