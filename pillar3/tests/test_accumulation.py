from __future__ import annotations

from math import isclose

from pillar3.core.projection import SimulationInput, project_accumulation, run_projection, summarize


def closed_form_balance(opening: float, annual: float, rate: float, years: int) -> float:
    """Start-of-year lump contributions, then one compounding step per year."""
    growth = 1 + rate / 100
    if rate == 0:
        return opening + annual * years
    return opening * growth**years + annual * (growth ** (years + 1) - growth) / (growth - 1)


def test_golden_capital_at_retirement(reference_input: SimulationInput):
    """
    30 -> 65 with 10k/5k opening, 500/250 per month, 2.5 % / 4.0 %: 35 compounding years per account.
    """
    years = run_projection(reference_input, current_year=2025)
    summary = summarize(years, reference_input)

    expected_a = closed_form_balance(10000.0, 6000.0, 2.5, 35)
    expected_b = closed_form_balance(5000.0, 3000.0, 4.0, 35)

    last = [row for row in years if row.phase == "accumulation"][-1]
    assert last.age == 65
    assert isclose(last.balanceA, expected_a, rel_tol=1e-9)
    assert isclose(last.balanceB, expected_b, rel_tol=1e-9)
    assert isclose(summary.capitalAtRetirement, expected_a + expected_b, rel_tol=1e-9)
    # roughly CHF 611k
    assert 605_000 < summary.capitalAtRetirement < 617_000


def test_first_year_holds_opening_balances(reference_input: SimulationInput):
    rows = project_accumulation(reference_input, current_year=2025)

    assert rows[0].age == 30
    assert rows[0].calendarYear == 2025
    assert rows[0].balanceA == 10000.0
    assert rows[0].balanceB == 5000.0
    assert rows[0].totalCapital == 15000.0


def test_contribution_added_before_growth():
    """One step: (opening + 12 * monthly) * (1 + rate)."""
    sim = SimulationInput(
        currentAge=40,
        retirementAge=41,
        lifeExpectancy=41,
        currentSavingsA=1000.0,
        currentSavingsB=2000.0,
        monthlyContributionA=100.0,
        monthlyContributionB=50.0,
        expectedReturnA=10.0,
        expectedReturnB=5.0,
    )

    rows = project_accumulation(sim, current_year=2030)

    assert [row.age for row in rows] == [40, 41]
    assert [row.calendarYear for row in rows] == [2030, 2031]
    assert isclose(rows[1].balanceA, (1000.0 + 1200.0) * 1.10, rel_tol=1e-9)
    assert isclose(rows[1].balanceB, (2000.0 + 600.0) * 1.05, rel_tol=1e-9)
    assert isclose(rows[1].totalCapital, rows[1].balanceA + rows[1].balanceB, rel_tol=1e-9)


def test_accounts_compound_independently():
    """Changing B's return must leave A's series untouched."""
    base = dict(
        currentAge=30,
        retirementAge=40,
        lifeExpectancy=50,
        currentSavingsA=5000.0,
        currentSavingsB=5000.0,
        monthlyContributionA=200.0,
        monthlyContributionB=200.0,
        expectedReturnA=3.0,
        expectedReturnB=3.0,
    )
    low = project_accumulation(SimulationInput(**base), current_year=2025)
    high = project_accumulation(SimulationInput(**{**base, "expectedReturnB": 8.0}), current_year=2025)

    assert [row.balanceA for row in low] == [row.balanceA for row in high]
    assert high[-1].balanceB > low[-1].balanceB


def test_accumulation_is_non_decreasing(reference_input: SimulationInput):
    rows = project_accumulation(reference_input, current_year=2025)

    prev = 0.0
    for row in rows:
        assert row.totalCapital >= prev, "capital should not drop with non-negative inputs"
        assert row.withdrawal is None
        assert row.remainingCapitalRealTerms is None
        prev = row.totalCapital
