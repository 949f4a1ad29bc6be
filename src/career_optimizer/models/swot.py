"""Pydantic models for the personal SWOT analysis response."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, StrictStr


class SwotCategory(str, Enum):
    STRENGTHS = "strengths"
    WEAKNESSES = "weaknesses"
    OPPORTUNITIES = "opportunities"
    THREATS = "threats"


class SwotRecommendations(BaseModel):
    """One actionable recommendation per category; all four are required."""

    strengths: StrictStr
    weaknesses: StrictStr
    opportunities: StrictStr
    threats: StrictStr

    def get(self, category: SwotCategory) -> str:
        return getattr(self, category.value)


class SwotAnalysis(BaseModel):
    strengths: list[StrictStr]
    weaknesses: list[StrictStr]
    opportunities: list[StrictStr]
    threats: list[StrictStr]
    recommendations: SwotRecommendations

    def items(self, category: SwotCategory) -> list[str]:
        return getattr(self, category.value)

    def recommendation(self, category: SwotCategory) -> str:
        return self.recommendations.get(category)
