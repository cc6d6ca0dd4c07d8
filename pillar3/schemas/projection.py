"""Data contracts for the projection endpoint."""

from typing import List

from pydantic import BaseModel, Field

from pillar3.core.projection import ProjectionSummary, ProjectionYear


class ProjectionResponse(BaseModel):
    """Year-by-year series plus the headline figures."""

    years: List[ProjectionYear] = Field(
        ...,
        description="Accumulation rows (currentAge..retirementAge) followed by decumulation rows.",
    )
    summary: ProjectionSummary
