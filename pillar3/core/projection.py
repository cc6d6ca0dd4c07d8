from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict

# Straight-line depletion haircut for the sustainable income estimate.
SAFETY_FACTOR = 0.85
# Flat marginal rate used for the 3a deduction illustration, not a tax computation.
ILLUSTRATIVE_TAX_RATE = 0.25
MONTHS_PER_YEAR = 12


class SimulationInput(BaseModel):
    """Everything the engine needs for one projection.

    Rates are percentages (2.5 means 2.5 %). Amounts are CHF.
    Account A is the tax-advantaged 3a account, account B the unrestricted 3b one.
    """

    model_config = ConfigDict(frozen=True)

    currentAge: int
    retirementAge: int
    lifeExpectancy: int

    annualIncome: float = 0.0

    currentSavingsA: float = 0.0
    currentSavingsB: float = 0.0
    monthlyContributionA: float = 0.0
    monthlyContributionB: float = 0.0

    expectedReturnA: float = 0.0
    expectedReturnB: float = 0.0
    inflationRate: float = 0.0

    targetMonthlyIncome: float = 0.0


class ProjectionYear(BaseModel):
    model_config = ConfigDict(frozen=True)

    age: int
    calendarYear: int
    phase: Literal["accumulation", "decumulation"]

    # accumulation only
    balanceA: Optional[float] = None
    balanceB: Optional[float] = None
    totalCapital: Optional[float] = None

    # decumulation only
    withdrawal: Optional[float] = None
    remainingCapitalRealTerms: Optional[float] = None


class ProjectionSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    capitalAtRetirement: float
    estimatedMonthlyIncome: float
    # positive = shortfall against the target
    incomeGap: float
    annualTaxSaving: float


class ProjectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    years: List[ProjectionYear]
    summary: ProjectionSummary


def _growth_factor(rate_percent: float) -> float:
    return 1.0 + rate_percent / 100.0


def _base_year(current_year: Optional[int]) -> int:
    return current_year if current_year is not None else datetime.now().year


def project_accumulation(
    sim: SimulationInput,
    current_year: Optional[int] = None,
) -> List[ProjectionYear]:
    """
    Build the accumulation rows from currentAge..retirementAge (inclusive).

    Order of operations (per year after the first):
      1) Add twelve months of contribution to each account at START of year.
      2) Apply that account's growth for the year (annual compounding).
      3) Record both balances and their sum.

    The first row holds the opening balances untouched.
    """
    year0 = _base_year(current_year)

    annual_a = sim.monthlyContributionA * MONTHS_PER_YEAR
    annual_b = sim.monthlyContributionB * MONTHS_PER_YEAR
    growth_a = _growth_factor(sim.expectedReturnA)
    growth_b = _growth_factor(sim.expectedReturnB)

    bal_a = float(sim.currentSavingsA)
    bal_b = float(sim.currentSavingsB)

    rows: List[ProjectionYear] = []
    for step in range(0, sim.retirementAge - sim.currentAge + 1):
        if step > 0:
            bal_a = (bal_a + annual_a) * growth_a
            bal_b = (bal_b + annual_b) * growth_b

        rows.append(
            ProjectionYear(
                age=sim.currentAge + step,
                calendarYear=year0 + step,
                phase="accumulation",
                balanceA=bal_a,
                balanceB=bal_b,
                totalCapital=bal_a + bal_b,
            )
        )

    return rows


def project_decumulation(
    sim: SimulationInput,
    capital_at_retirement: float,
    current_year: Optional[int] = None,
) -> List[ProjectionYear]:
    """
    Draw the pooled capital down from retirementAge+1..lifeExpectancy.

    Conventions:
      - Accounts are no longer tracked separately; both grow at the average rate.
      - Withdrawal is the nominal target (targetMonthlyIncome * 12), taken at
        START of year, then growth is applied to what is left.
      - The reported figure is discounted by cumulative inflation since
        retirement and floored at zero. The running nominal capital is not
        floored, so an exhausted plan keeps reporting zero.
    """
    year0 = _base_year(current_year)
    offset = sim.retirementAge - sim.currentAge

    withdrawal = sim.targetMonthlyIncome * MONTHS_PER_YEAR
    avg_return = (sim.expectedReturnA + sim.expectedReturnB) / 2
    growth = _growth_factor(avg_return)
    inflation = _growth_factor(sim.inflationRate)

    capital = float(capital_at_retirement)

    rows: List[ProjectionYear] = []
    for y in range(1, sim.lifeExpectancy - sim.retirementAge + 1):
        capital = (capital - withdrawal) * growth
        discount = inflation ** y
        # a -100 % inflation rate leaves nothing to discount by
        real = capital / discount if discount != 0 else 0.0

        rows.append(
            ProjectionYear(
                age=sim.retirementAge + y,
                calendarYear=year0 + offset + y,
                phase="decumulation",
                withdrawal=withdrawal,
                remainingCapitalRealTerms=max(0.0, real),
            )
        )

    return rows


def run_projection(
    sim: SimulationInput,
    current_year: Optional[int] = None,
) -> List[ProjectionYear]:
    """Full year-indexed series: accumulation rows followed by decumulation rows."""
    year0 = _base_year(current_year)

    accumulation = project_accumulation(sim, current_year=year0)
    if accumulation:
        capital = accumulation[-1].totalCapital
    else:
        capital = sim.currentSavingsA + sim.currentSavingsB
    decumulation = project_decumulation(sim, capital, current_year=year0)

    return accumulation + decumulation


def summarize(years: List[ProjectionYear], sim: SimulationInput) -> ProjectionSummary:
    """
    Headline figures for a projection.

    estimatedMonthlyIncome is a straight-line depletion of the retirement capital
    over the retirement years with SAFETY_FACTOR applied. It is independent of the
    simulated decumulation rows, which withdraw at the *target* rate; the two are
    separate views and may disagree.
    """
    accumulation = [row for row in years if row.phase == "accumulation"]
    if accumulation:
        capital = accumulation[-1].totalCapital or 0.0
    else:
        capital = sim.currentSavingsA + sim.currentSavingsB

    retirement_years = sim.lifeExpectancy - sim.retirementAge
    if retirement_years > 0:
        monthly = capital / (retirement_years * MONTHS_PER_YEAR) * SAFETY_FACTOR
    else:
        monthly = 0.0

    # only 3a contributions are deductible
    tax_saving = sim.monthlyContributionA * MONTHS_PER_YEAR * ILLUSTRATIVE_TAX_RATE

    return ProjectionSummary(
        capitalAtRetirement=capital,
        estimatedMonthlyIncome=monthly,
        incomeGap=sim.targetMonthlyIncome - monthly,
        annualTaxSaving=tax_saving,
    )


def project(sim: SimulationInput, current_year: Optional[int] = None) -> ProjectionResult:
    years = run_projection(sim, current_year=current_year)
    return ProjectionResult(years=years, summary=summarize(years, sim))


__all__ = [
    "SAFETY_FACTOR",
    "ILLUSTRATIVE_TAX_RATE",
    "MONTHS_PER_YEAR",
    "SimulationInput",
    "ProjectionYear",
    "ProjectionSummary",
    "ProjectionResult",
    "project_accumulation",
    "project_decumulation",
    "run_projection",
    "summarize",
    "project",
]
