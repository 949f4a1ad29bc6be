"""Shared test fixtures."""

from __future__ import annotations

import io
from unittest.mock import AsyncMock

import pytest

from career_optimizer.clients.llm_client import LLMClient, LLMResponse
from career_optimizer.models import (
    HeadlineAnalysis,
    JobSuitabilityAnalysis,
    SwotAnalysis,
    SwotRecommendations,
)


def make_pdf(*pages: str) -> bytes:
    """Build a real PDF with one line of text per page."""
    import fitz  # pymupdf

    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


def make_docx(*paragraphs: str, table: list[list[str]] | None = None) -> bytes:
    """Build a real DOCX with the given paragraphs and an optional table."""
    from docx import Document

    doc = Document()
    for text in paragraphs:
        doc.add_paragraph(text)
    if table:
        t = doc.add_table(rows=len(table), cols=len(table[0]))
        for r, row in enumerate(table):
            for c, value in enumerate(row):
                t.cell(r, c).text = value
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


@pytest.fixture
def sample_jd_text() -> str:
    return """Senior Backend Engineer

Responsibilities:
- Design and build high-throughput REST APIs
- Own services running on Kubernetes

Requirements:
- 5+ years of Python or Go
- Experience with PostgreSQL and Redis
- Familiarity with Kafka is a plus
"""


@pytest.fixture
def sample_headline_data() -> dict:
    return {
        "quality": "Medium",
        "analysis": "Clear role, but no domain keywords.",
        "suggestions": [
            "Backend Engineer | Python & Kubernetes | Scaling APIs",
            "Python Backend Engineer building high-throughput services",
            "Senior Backend Engineer | Distributed Systems | Kafka",
        ],
        "missingSkills": ["Kubernetes", "Kafka"],
    }


@pytest.fixture
def sample_swot_data() -> dict:
    return {
        "strengths": ["Strong React and TypeScript skills"],
        "weaknesses": ["Procrastinates on documentation"],
        "opportunities": ["Growing demand for frontend leads"],
        "threats": ["Competitive senior job market"],
        "recommendations": {
            "strengths": "Mentor juniors on TypeScript.",
            "weaknesses": "Block an hour a week for docs.",
            "opportunities": "Volunteer to lead the next feature team.",
            "threats": "Build a public portfolio.",
        },
    }


@pytest.fixture
def sample_suitability_data() -> dict:
    return {
        "suitabilityScore": 72,
        "summary": "Solid Python background; lacks Kafka.",
        "matchingSkills": ["Python", "PostgreSQL"],
        "missingSkills": ["Kafka"],
    }


@pytest.fixture
def sample_headline(sample_headline_data) -> HeadlineAnalysis:
    return HeadlineAnalysis.model_validate(sample_headline_data)


@pytest.fixture
def sample_swot(sample_swot_data) -> SwotAnalysis:
    return SwotAnalysis.model_validate(sample_swot_data)


@pytest.fixture
def empty_swot() -> SwotAnalysis:
    return SwotAnalysis(
        strengths=[],
        weaknesses=[],
        opportunities=[],
        threats=[],
        recommendations=SwotRecommendations(
            strengths="", weaknesses="", opportunities="", threats=""
        ),
    )


@pytest.fixture
def sample_suitability(sample_suitability_data) -> JobSuitabilityAnalysis:
    return JobSuitabilityAnalysis.model_validate(sample_suitability_data)


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text="{}", input_tokens=100, output_tokens=50)
    )
    client.generate_json = AsyncMock(return_value={})
    return client


@pytest.fixture
def pdf_factory():
    return make_pdf


@pytest.fixture
def docx_factory():
    return make_docx
