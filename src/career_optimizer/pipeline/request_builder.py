"""Prompt templates and response schemas for the three analysis kinds."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from career_optimizer.errors import ValidationError
from career_optimizer.models import HeadlineAnalysis, JobSuitabilityAnalysis, SwotAnalysis


class AnalysisKind(str, Enum):
    HEADLINE = "headline"
    SWOT = "swot"
    SUITABILITY = "suitability"

    @property
    def failure_message(self) -> str:
        return _FAILURE_MESSAGES[self]

    @property
    def result_model(self) -> type:
        return _RESULT_MODELS[self]


_FAILURE_MESSAGES = {
    AnalysisKind.HEADLINE: "Failed to analyze headline. Please try again.",
    AnalysisKind.SWOT: "Failed to generate SWOT analysis. Please try again.",
    AnalysisKind.SUITABILITY: "Failed to analyze job suitability. Please try again.",
}

_RESULT_MODELS = {
    AnalysisKind.HEADLINE: HeadlineAnalysis,
    AnalysisKind.SWOT: SwotAnalysis,
    AnalysisKind.SUITABILITY: JobSuitabilityAnalysis,
}

SYSTEM_TEMPLATE = """\
You are a career coach. Respond with a single JSON object and nothing else.
The object must conform to this JSON schema:

{schema}"""


@dataclass(frozen=True)
class AnalysisRequest:
    kind: AnalysisKind
    prompt: str
    schema: dict[str, Any]
    # Headline only: the job-description template was used
    with_job_description: bool = False

    @property
    def system(self) -> str:
        return SYSTEM_TEMPLATE.format(schema=json.dumps(self.schema, indent=2))


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------


def _string_list(description: str, **extra: Any) -> dict[str, Any]:
    return {"type": "array", "items": {"type": "string"}, "description": description, **extra}


def headline_schema(with_job_description: bool) -> dict[str, Any]:
    if with_job_description:
        missing_skills = _string_list(
            "A list of 2-3 critical keywords or skills from the job description that are "
            "missing from the headline. This should be an empty array if no critical "
            "skills are missing."
        )
    else:
        missing_skills = _string_list(
            "Always an empty array: no job description was provided.",
            maxItems=0,
        )
    return {
        "type": "object",
        "properties": {
            "quality": {
                "type": "string",
                "enum": ["Strong", "Medium", "Weak"],
                "description": "The overall quality of the headline.",
            },
            "analysis": {
                "type": "string",
                "description": (
                    "A summary of the headline's strengths and weaknesses, "
                    "considering the job description if provided."
                ),
            },
            "missingSkills": missing_skills,
            "suggestions": _string_list(
                "3 improved headline suggestions, tailored to the job description if provided."
            ),
        },
        "required": ["quality", "analysis", "missingSkills", "suggestions"],
    }


_SWOT_RECOMMENDATION_DESCRIPTIONS = {
    "strengths": "Actionable advice on how to leverage strengths.",
    "weaknesses": "Actionable advice on how to mitigate weaknesses.",
    "opportunities": "Actionable advice on how to seize opportunities.",
    "threats": "Actionable advice on how to navigate threats.",
}

SWOT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "strengths": _string_list("List of personal strengths derived from the user input."),
        "weaknesses": _string_list("List of personal weaknesses derived from the user input."),
        "opportunities": _string_list(
            "List of potential opportunities based on the user input and market trends."
        ),
        "threats": _string_list(
            "List of potential threats or challenges based on the user input."
        ),
        "recommendations": {
            "type": "object",
            "properties": {
                key: {"type": "string", "description": desc}
                for key, desc in _SWOT_RECOMMENDATION_DESCRIPTIONS.items()
            },
            "required": ["strengths", "weaknesses", "opportunities", "threats"],
        },
    },
    "required": ["strengths", "weaknesses", "opportunities", "threats", "recommendations"],
}

SUITABILITY_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "suitabilityScore": {
            "type": "integer",
            "minimum": 0,
            "maximum": 100,
            "description": (
                "A score from 0 to 100 indicating the match between the resume "
                "and job description."
            ),
        },
        "summary": {
            "type": "string",
            "description": (
                "A brief text summary explaining the score and the candidate's overall fit."
            ),
        },
        "matchingSkills": _string_list(
            "A list of key skills found in both the resume and the job description."
        ),
        "missingSkills": _string_list(
            "A list of key skills required by the job description but not found in the resume."
        ),
    },
    "required": ["suitabilityScore", "summary", "matchingSkills", "missingSkills"],
}


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

HEADLINE_PROMPT = (
    'Analyze the following LinkedIn headline: "{headline}". Evaluate its clarity, '
    "conciseness, professional tone, and use of relevant keywords. Provide an overall "
    "quality assessment ('Strong', 'Medium', 'Weak'), a brief summary of your analysis, "
    "and suggest 3 improved versions."
)

HEADLINE_WITH_JD_PROMPT = (
    'Analyze the following LinkedIn headline: "{headline}". Evaluate its clarity, '
    "conciseness, professional tone, and use of relevant keywords, specifically in the "
    'context of this job description: "{job_description}". Provide an overall quality '
    "assessment ('Strong', 'Medium', 'Weak'), a brief analysis of how well the headline "
    "aligns with the job description, identify 2-3 critical keywords or skills from the "
    "job description that are missing from the current headline, and suggest 3 improved "
    "versions that are highly tailored to the provided job description and incorporate "
    "some of the missing skills."
)

SWOT_PROMPT = (
    "Based on the following user-provided skills, goals, and personal traits, generate a "
    "personal SWOT analysis. Categorize each point into Strengths, Weaknesses, "
    "Opportunities, or Threats. For each of the four SWOT categories, also provide one "
    'actionable recommendation. User input: "{user_info}"'
)

SUITABILITY_PROMPT = """\
Analyze the provided resume text against the job description.
- Resume: "{resume_text}"
- Job Description: "{job_description}"

Determine a job suitability score from 0 to 100 representing how well the resume \
matches the job requirements. Provide a brief summary of the candidate's fit for the \
role. Identify a list of key skills from the job description that are present in the \
resume, and a separate list of key skills from the job description that are missing \
from the resume."""


def _require(inputs: dict[str, str], key: str) -> str:
    try:
        return inputs[key]
    except KeyError:
        raise ValidationError(f"Missing required input: {key}") from None


def build_request(kind: AnalysisKind, inputs: dict[str, str]) -> AnalysisRequest:
    """Build the prompt and response schema for one analysis.

    Inputs are embedded verbatim. Expected keys:
      headline: ``headline`` and optional ``job_description``
      swot: ``user_info``
      suitability: ``resume_text`` and ``job_description``
    """
    if kind is AnalysisKind.HEADLINE:
        headline = _require(inputs, "headline")
        job_description = inputs.get("job_description") or ""
        if job_description.strip():
            return AnalysisRequest(
                kind=kind,
                prompt=HEADLINE_WITH_JD_PROMPT.format(
                    headline=headline, job_description=job_description
                ),
                schema=headline_schema(with_job_description=True),
                with_job_description=True,
            )
        return AnalysisRequest(
            kind=kind,
            prompt=HEADLINE_PROMPT.format(headline=headline),
            schema=headline_schema(with_job_description=False),
        )

    if kind is AnalysisKind.SWOT:
        return AnalysisRequest(
            kind=kind,
            prompt=SWOT_PROMPT.format(user_info=_require(inputs, "user_info")),
            schema=SWOT_SCHEMA,
        )

    if kind is AnalysisKind.SUITABILITY:
        job_description = _require(inputs, "job_description")
        return AnalysisRequest(
            kind=kind,
            prompt=SUITABILITY_PROMPT.format(
                resume_text=_require(inputs, "resume_text"),
                job_description=job_description,
            ),
            schema=SUITABILITY_SCHEMA,
        )

    raise ValueError(f"Unknown analysis kind: {kind!r}")
