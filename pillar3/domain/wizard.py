from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ConfigDict

from pillar3.core.projection import SimulationInput
from pillar3.domain.presets import recommended_monthly_income, returns_for_profile
from pillar3.models import (
    Gender,
    IncomeAndSavings,
    InvestmentProfile,
    Lifestyle,
    PersonalInfo,
    ProjectionParams,
    RetirementGoals,
    SimulationRequest,
)

logger = logging.getLogger(__name__)


class WizardError(ValueError):
    pass


class WizardStep(str, Enum):
    PERSONAL_INFO = "personal-info"
    INCOME_SAVINGS = "income-savings"
    RETIREMENT_GOALS = "retirement-goals"
    PROJECTION_PARAMS = "projection-params"
    RESULTS = "results"

    @property
    def label(self) -> str:
        return STEP_LABELS[self]

    @property
    def position(self) -> int:
        return STEPS.index(self)


STEPS = list(WizardStep)

STEP_LABELS: Dict[WizardStep, str] = {
    WizardStep.PERSONAL_INFO: "Informations personnelles",
    WizardStep.INCOME_SAVINGS: "Revenus et épargne",
    WizardStep.RETIREMENT_GOALS: "Objectifs de retraite",
    WizardStep.PROJECTION_PARAMS: "Paramètres de projection",
    WizardStep.RESULTS: "Résultats",
}

STEP_FORMS: Dict[WizardStep, Type[BaseModel]] = {
    WizardStep.PERSONAL_INFO: PersonalInfo,
    WizardStep.INCOME_SAVINGS: IncomeAndSavings,
    WizardStep.RETIREMENT_GOALS: RetirementGoals,
    WizardStep.PROJECTION_PARAMS: ProjectionParams,
}


class SimulationData(BaseModel):
    """Data collected across the wizard steps, starting from sensible defaults."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # personal info
    currentAge: int = 30
    retirementAge: int = 65
    lifeExpectancy: int = 85
    gender: Gender = "male"

    # income and savings
    annualIncome: float = 80000.0
    currentSavingsA: float = 0.0
    currentSavingsB: float = 0.0
    monthlyContributionA: float = 500.0
    monthlyContributionB: float = 250.0

    # retirement goals
    targetMonthlyIncome: float = 5000.0
    targetLifestyle: Lifestyle = "moderate"

    # projection params
    investmentProfile: Optional[InvestmentProfile] = "balanced"
    expectedReturnA: float = 3.5
    expectedReturnB: float = 3.5
    inflationRate: float = 1.5

    def to_request(self, current_year: Optional[int] = None) -> SimulationRequest:
        """Re-validate the whole record; raises pydantic.ValidationError."""
        fields = self.model_dump(
            exclude={"gender", "targetLifestyle", "investmentProfile"},
        )
        return SimulationRequest(**fields, currentYear=current_year)

    def to_simulation_input(self) -> SimulationInput:
        return self.to_request().to_simulation_input()


class WizardState(BaseModel):
    model_config = ConfigDict(frozen=True)

    step: WizardStep = WizardStep.PERSONAL_INFO
    data: SimulationData = SimulationData()

    @property
    def is_first(self) -> bool:
        return self.step.position == 0

    @property
    def is_last(self) -> bool:
        return self.step.position == len(STEPS) - 1


def progress(state: WizardState) -> float:
    """Fraction of the way through the wizard, 0.0 on the first step, 1.0 on results."""
    return state.step.position / (len(STEPS) - 1)


def next_step(state: WizardState) -> WizardState:
    index = min(state.step.position + 1, len(STEPS) - 1)
    return state.model_copy(update={"step": STEPS[index]})


def previous_step(state: WizardState) -> WizardState:
    index = max(state.step.position - 1, 0)
    return state.model_copy(update={"step": STEPS[index]})


def update_data(state: WizardState, **changes: Any) -> WizardState:
    """Return a new state whose data record has `changes` merged in."""
    data = SimulationData.model_validate({**state.data.model_dump(), **changes})
    return state.model_copy(update={"data": data})


def choose_lifestyle(state: WizardState, lifestyle: str) -> WizardState:
    """Select a lifestyle and prefill the matching monthly target."""
    target = recommended_monthly_income(state.data.annualIncome, lifestyle)
    return update_data(state, targetLifestyle=lifestyle, targetMonthlyIncome=target)


def choose_profile(state: WizardState, profile: str) -> WizardState:
    """Select an investment profile and apply its return to both accounts."""
    rate = returns_for_profile(profile)
    return update_data(
        state,
        investmentProfile=profile,
        expectedReturnA=rate,
        expectedReturnB=rate,
    )


def submit_step(state: WizardState, form: Dict[str, Any]) -> WizardState:
    """
    Validate the current step's form, merge it into the data record and move on.

    Raises pydantic.ValidationError for an invalid form and WizardError when the
    wizard is already on the results step.
    """
    form_model = STEP_FORMS.get(state.step)
    if form_model is None:
        raise WizardError(f"step '{state.step.value}' does not accept a form")

    validated = form_model.model_validate(form)
    changes = validated.model_dump(exclude_none=True)

    # presets first, so explicit values in the form win
    if isinstance(validated, RetirementGoals):
        state = choose_lifestyle(state, validated.targetLifestyle)
    elif isinstance(validated, ProjectionParams):
        if validated.investmentProfile is not None:
            state = choose_profile(state, validated.investmentProfile)
        else:
            changes["investmentProfile"] = None

    logger.debug("wizard step %s submitted", state.step.value)
    return next_step(update_data(state, **changes))
