"""Pydantic models for the resume vs. job description suitability response."""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictInt, StrictStr


class JobSuitabilityAnalysis(BaseModel):
    suitability_score: StrictInt = Field(ge=0, le=100, alias="suitabilityScore")
    summary: StrictStr
    matching_skills: list[StrictStr] = Field(alias="matchingSkills")
    missing_skills: list[StrictStr] = Field(alias="missingSkills")

    model_config = {"populate_by_name": True}
