"""Data contracts for the wizard transition endpoints."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from pillar3.domain.wizard import SimulationData, WizardState, WizardStep, progress


class WizardAdvanceRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    state: WizardState = Field(default_factory=WizardState)
    form: Dict[str, Any] = Field(default_factory=dict)


class WizardBackRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    state: WizardState = Field(default_factory=WizardState)


class WizardStateResponse(BaseModel):
    step: WizardStep
    title: str
    progress: float = Field(..., ge=0, le=1)
    isFirst: bool
    isLast: bool
    data: SimulationData

    @classmethod
    def from_state(cls, state: WizardState) -> "WizardStateResponse":
        return cls(
            step=state.step,
            title=state.step.label,
            progress=progress(state),
            isFirst=state.is_first,
            isLast=state.is_last,
            data=state.data,
        )
