"""Pydantic models for the headline analysis response."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, StrictStr


class HeadlineQuality(str, Enum):
    STRONG = "Strong"
    MEDIUM = "Medium"
    WEAK = "Weak"


class HeadlineAnalysis(BaseModel):
    quality: HeadlineQuality
    analysis: StrictStr
    suggestions: list[StrictStr]
    missing_skills: list[StrictStr] = Field(default_factory=list, alias="missingSkills")

    model_config = {"populate_by_name": True}
