"""Data models for the analysis results returned by the model."""

from career_optimizer.models.headline import HeadlineAnalysis, HeadlineQuality
from career_optimizer.models.suitability import JobSuitabilityAnalysis
from career_optimizer.models.swot import SwotAnalysis, SwotCategory, SwotRecommendations

__all__ = [
    "HeadlineAnalysis",
    "HeadlineQuality",
    "JobSuitabilityAnalysis",
    "SwotAnalysis",
    "SwotCategory",
    "SwotRecommendations",
]
