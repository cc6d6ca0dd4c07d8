from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pillar3.config import get_settings
from pillar3.core.projection import MONTHS_PER_YEAR, SimulationInput

Gender = Literal["male", "female"]
Lifestyle = Literal["basic", "moderate", "comfortable", "luxury"]
InvestmentProfile = Literal["conservative", "balanced", "dynamic"]


def _check_ages(current_age: int, retirement_age: int, life_expectancy: int) -> None:
    if retirement_age <= current_age:
        raise ValueError("retirementAge must be greater than currentAge")
    if life_expectancy <= retirement_age:
        raise ValueError("lifeExpectancy must be greater than retirementAge")


def _check_3a_cap(monthly_contribution_a: float) -> None:
    cap = get_settings().pillar_3a_annual_cap
    if monthly_contribution_a * MONTHS_PER_YEAR > cap:
        raise ValueError(f"annual 3a contribution exceeds the statutory cap of {cap:.0f}")


class PersonalInfo(BaseModel):
    model_config = ConfigDict(extra="forbid")

    currentAge: int = Field(ge=18, le=70)
    retirementAge: int = Field(ge=58, le=75)
    lifeExpectancy: int = Field(ge=60, le=110)
    gender: Gender

    @model_validator(mode="after")
    def ensure_ages(self) -> "PersonalInfo":
        _check_ages(self.currentAge, self.retirementAge, self.lifeExpectancy)
        return self


class IncomeAndSavings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    annualIncome: float = Field(ge=0)
    currentSavingsA: float = Field(default=0.0, ge=0)
    currentSavingsB: float = Field(default=0.0, ge=0)
    monthlyContributionA: float = Field(default=0.0, ge=0)
    monthlyContributionB: float = Field(default=0.0, ge=0)

    @model_validator(mode="after")
    def ensure_cap(self) -> "IncomeAndSavings":
        _check_3a_cap(self.monthlyContributionA)
        return self


class RetirementGoals(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # prefilled from the lifestyle when omitted
    targetMonthlyIncome: Optional[float] = Field(default=None, ge=1000, le=50000)
    targetLifestyle: Lifestyle


class ProjectionParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    investmentProfile: Optional[InvestmentProfile] = None
    # filled from the investment profile when omitted
    expectedReturnA: Optional[float] = Field(default=None, ge=-100, le=20)
    expectedReturnB: Optional[float] = Field(default=None, ge=-100, le=20)
    inflationRate: float = Field(ge=0, le=15)

    @model_validator(mode="after")
    def ensure_returns(self) -> "ProjectionParams":
        if self.investmentProfile is None and (
            self.expectedReturnA is None or self.expectedReturnB is None
        ):
            raise ValueError("expected returns are required when no investmentProfile is chosen")
        return self


class SimulationRequest(BaseModel):
    """Complete, validated input for one projection call."""

    model_config = ConfigDict(extra="forbid")

    currentAge: int = Field(ge=18, le=70)
    retirementAge: int = Field(ge=58, le=75)
    lifeExpectancy: int = Field(ge=60, le=110)

    annualIncome: float = Field(ge=0)
    currentSavingsA: float = Field(default=0.0, ge=0)
    currentSavingsB: float = Field(default=0.0, ge=0)
    monthlyContributionA: float = Field(default=0.0, ge=0)
    monthlyContributionB: float = Field(default=0.0, ge=0)

    expectedReturnA: float = Field(ge=-100, le=20)
    expectedReturnB: float = Field(ge=-100, le=20)
    inflationRate: float = Field(ge=0, le=15)

    targetMonthlyIncome: float = Field(ge=0, le=50000)

    # pins calendarYear for reproducible output
    currentYear: Optional[int] = Field(default=None, ge=1900, le=2200)

    @model_validator(mode="after")
    def ensure_validity(self) -> "SimulationRequest":
        _check_ages(self.currentAge, self.retirementAge, self.lifeExpectancy)
        _check_3a_cap(self.monthlyContributionA)
        return self

    def to_simulation_input(self) -> SimulationInput:
        return SimulationInput(**self.model_dump(exclude={"currentYear"}))
