"""Lifestyle targets and investment profiles offered by the wizard."""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict

from pillar3.core.projection import MONTHS_PER_YEAR


class LifestylePreset(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    description: str
    # share of current gross income to replace in retirement
    replacementRatio: float


class InvestmentProfilePreset(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    description: str
    expectedReturn: float


LIFESTYLES: Dict[str, LifestylePreset] = {
    preset.key: preset
    for preset in (
        LifestylePreset(
            key="basic",
            label="Basique",
            description="Couvre les besoins essentiels sans extra",
            replacementRatio=0.50,
        ),
        LifestylePreset(
            key="moderate",
            label="Modéré",
            description="Mode de vie confortable avec quelques loisirs",
            replacementRatio=0.70,
        ),
        LifestylePreset(
            key="comfortable",
            label="Confortable",
            description="Confort complet avec voyages et activités régulières",
            replacementRatio=0.85,
        ),
        LifestylePreset(
            key="luxury",
            label="Luxueux",
            description="Style de vie privilégié sans restrictions financières",
            replacementRatio=1.00,
        ),
    )
}

INVESTMENT_PROFILES: Dict[str, InvestmentProfilePreset] = {
    preset.key: preset
    for preset in (
        InvestmentProfilePreset(
            key="conservative",
            label="Conservateur",
            description="Privilégie la sécurité avec des rendements stables mais modérés",
            expectedReturn=2.0,
        ),
        InvestmentProfilePreset(
            key="balanced",
            label="Équilibré",
            description="Balance entre sécurité et performance",
            expectedReturn=3.5,
        ),
        InvestmentProfilePreset(
            key="dynamic",
            label="Dynamique",
            description="Vise des rendements plus élevés avec plus de risques",
            expectedReturn=5.0,
        ),
    )
}


def recommended_monthly_income(annual_income: float, lifestyle: str) -> float:
    """Monthly retirement income suggested for a lifestyle, from today's gross income.

    Raises KeyError for an unknown lifestyle.
    """
    return annual_income * LIFESTYLES[lifestyle].replacementRatio / MONTHS_PER_YEAR


def returns_for_profile(profile: str) -> float:
    return INVESTMENT_PROFILES[profile].expectedReturn


def list_presets(annual_income: float = 0.0) -> Dict[str, List[dict]]:
    """Presets as plain dicts; lifestyles carry the income suggestion when an income is given."""
    lifestyles = []
    for preset in LIFESTYLES.values():
        entry = preset.model_dump()
        entry["recommendedMonthlyIncome"] = recommended_monthly_income(annual_income, preset.key)
        lifestyles.append(entry)

    return {
        "lifestyles": lifestyles,
        "investmentProfiles": [preset.model_dump() for preset in INVESTMENT_PROFILES.values()],
    }
