"""View logic shared by the Streamlit panels.

Nothing here talks to Streamlit directly: panel state, display tables and
markdown builders are plain Python so they can be exercised in tests.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from career_optimizer.errors import CareerOptimizerError
from career_optimizer.models import (
    HeadlineAnalysis,
    HeadlineQuality,
    JobSuitabilityAnalysis,
    SwotAnalysis,
    SwotCategory,
)

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "An unknown error occurred."
NO_SWOT_ITEMS = "No items identified."
NO_MATCHING_SKILLS = "No direct skill matches found."
NO_MISSING_SKILLS = "No critical missing skills identified."

# Inline markup characters, including $ (LaTeX) and brackets (color directives)
_MARKDOWN_SPECIAL = re.compile(r"([\\`*_~\[\]$])")


# ---------------------------------------------------------------------------
# Panel state
# ---------------------------------------------------------------------------


class LoadingState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class PanelState:
    """In-memory state of one panel. The result is replaced, never merged."""

    status: LoadingState = LoadingState.IDLE
    result: Any = None
    error: str | None = None

    @property
    def is_loading(self) -> bool:
        return self.status is LoadingState.LOADING

    def begin(self) -> None:
        if self.is_loading:
            raise RuntimeError("An analysis is already in progress for this panel")
        self.status = LoadingState.LOADING
        self.result = None
        self.error = None

    def succeed(self, result: Any) -> None:
        self.status = LoadingState.SUCCESS
        self.result = result
        self.error = None

    def fail(self, message: str) -> None:
        self.status = LoadingState.ERROR
        self.result = None
        self.error = message


async def run_panel(state: PanelState, call: Callable[[], Awaitable[Any]]) -> None:
    """Drive one triggered analysis through loading to success or error.

    Known errors render their own message; anything else is logged and shown
    as a generic one-liner.
    """
    state.begin()
    try:
        result = await call()
    except CareerOptimizerError as e:
        logger.info("Panel call failed: %s", e.message)
        state.fail(e.message)
    except Exception:
        logger.exception("Unexpected error while running analysis")
        state.fail(UNKNOWN_ERROR)
    except BaseException:
        # Interrupted (cancelled or script stopped): leave the panel usable.
        state.fail(UNKNOWN_ERROR)
        raise
    else:
        state.succeed(result)


# ---------------------------------------------------------------------------
# Markdown
# ---------------------------------------------------------------------------


def escape_markdown(text: str) -> str:
    """Backslash-escape model text so Streamlit renders it literally."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


# ---------------------------------------------------------------------------
# Display tables
# ---------------------------------------------------------------------------

# Streamlit colored-text names
QUALITY_STYLES: dict[HeadlineQuality, str] = {
    HeadlineQuality.STRONG: "green",
    HeadlineQuality.MEDIUM: "orange",
    HeadlineQuality.WEAK: "red",
}


@dataclass(frozen=True)
class SwotDisplay:
    title: str
    recommendation_title: str
    color: str


SWOT_DISPLAY: dict[SwotCategory, SwotDisplay] = {
    SwotCategory.STRENGTHS: SwotDisplay("Strengths", "Leverage Strengths", "green"),
    SwotCategory.WEAKNESSES: SwotDisplay("Weaknesses", "Address Weaknesses", "orange"),
    SwotCategory.OPPORTUNITIES: SwotDisplay("Opportunities", "Seize Opportunities", "blue"),
    SwotCategory.THREATS: SwotDisplay("Threats", "Mitigate Threats", "red"),
}


class ScoreBand(str, Enum):
    LOW = "low"
    MID = "mid"
    HIGH = "high"

    @property
    def color(self) -> str:
        return {"low": "red", "mid": "orange", "high": "green"}[self.value]


def score_band(score: int) -> ScoreBand:
    """Bucket a suitability score: <50 low, 50-74 mid, >=75 high."""
    if score < 50:
        return ScoreBand.LOW
    if score < 75:
        return ScoreBand.MID
    return ScoreBand.HIGH


# ---------------------------------------------------------------------------
# Headline
# ---------------------------------------------------------------------------


def quality_badge(analysis: HeadlineAnalysis) -> str:
    color = QUALITY_STYLES[analysis.quality]
    return f":{color}[**{analysis.quality.value.upper()}**]"


def highlight_segments(text: str, keywords: list[str]) -> list[tuple[str, bool]]:
    """Split ``text`` into (segment, is_keyword) pairs.

    Matching is case-insensitive and prefers longer keywords, so
    "Software Engineer" wins over "Engineer".
    """
    keywords = [k for k in keywords if k]
    if not keywords:
        return [(text, False)]
    ordered = sorted(keywords, key=len, reverse=True)
    pattern = re.compile("(" + "|".join(re.escape(k) for k in ordered) + ")", re.IGNORECASE)
    lowered = {k.lower() for k in ordered}
    return [(part, part.lower() in lowered) for part in pattern.split(text) if part]


def highlight_markdown(text: str, keywords: list[str]) -> str:
    return "".join(
        f"**{escape_markdown(part)}**" if is_keyword else escape_markdown(part)
        for part, is_keyword in highlight_segments(text, keywords)
    )


# ---------------------------------------------------------------------------
# SWOT
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Quadrant:
    category: SwotCategory
    title: str
    color: str
    items: list[str]

    def to_markdown(self) -> str:
        header = f"#### :{self.color}[{self.title}]"
        if not self.items:
            return f"{header}\n_{NO_SWOT_ITEMS}_"
        return header + "\n" + "\n".join(f"- {escape_markdown(item)}" for item in self.items)


def swot_quadrants(analysis: SwotAnalysis) -> list[Quadrant]:
    """Always four quadrants, in S/W/O/T order, even when lists are empty."""
    return [
        Quadrant(
            category=category,
            title=SWOT_DISPLAY[category].title,
            color=SWOT_DISPLAY[category].color,
            items=list(analysis.items(category)),
        )
        for category in SwotCategory
    ]


def recommendation_cards(analysis: SwotAnalysis) -> list[tuple[SwotDisplay, str]]:
    """(display, text) for every category with a non-blank recommendation."""
    return [
        (SWOT_DISPLAY[category], analysis.recommendation(category))
        for category in SwotCategory
        if analysis.recommendation(category).strip()
    ]


# ---------------------------------------------------------------------------
# Suitability
# ---------------------------------------------------------------------------


def skill_tags(skills: list[str], color: str, empty_message: str) -> str:
    if not skills:
        return f"_{empty_message}_"
    return " ".join(f":{color}-background[{escape_markdown(skill)}]" for skill in skills)


def suitability_sections(analysis: JobSuitabilityAnalysis) -> dict[str, str]:
    return {
        "Matching Skills": skill_tags(analysis.matching_skills, "green", NO_MATCHING_SKILLS),
        "Missing Skills": skill_tags(analysis.missing_skills, "red", NO_MISSING_SKILLS),
    }
