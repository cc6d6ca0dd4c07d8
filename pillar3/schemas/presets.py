"""Data contracts for the presets endpoint."""

from typing import List

from pydantic import BaseModel, Field


class LifestyleOption(BaseModel):
    key: str
    label: str
    description: str
    replacementRatio: float
    recommendedMonthlyIncome: float = Field(..., ge=0)


class InvestmentProfileOption(BaseModel):
    key: str
    label: str
    description: str
    expectedReturn: float


class PresetsResponse(BaseModel):
    lifestyles: List[LifestyleOption]
    investmentProfiles: List[InvestmentProfileOption]
    pillar3aAnnualCap: float = Field(..., gt=0)
