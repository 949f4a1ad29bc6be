"""Streamlit Web UI for career-optimizer.

Three panels, each with its own session state:
  A) LinkedIn Headline Optimizer: headline (+ optional JD) → quality, analysis, suggestions
  B) Personal SWOT Analyzer: skills/goals/traits → SWOT matrix + recommendations
  C) Job Suitability Analyzer: PDF/DOCX resume + JD → score, matching/missing skills
"""

from __future__ import annotations

import asyncio
import logging
import os

logger = logging.getLogger(__name__)

import nest_asyncio
import streamlit as st
from dotenv import load_dotenv

load_dotenv()
nest_asyncio.apply()

# Streamlit Cloud: sync st.secrets → os.environ so the LLM client can read it
if "ANTHROPIC_API_KEY" not in os.environ:
    try:
        os.environ["ANTHROPIC_API_KEY"] = st.secrets["ANTHROPIC_API_KEY"]
    except Exception:
        pass

from career_optimizer.clients.llm_client import LLMClient
from career_optimizer.config import load_config, require_api_key
from career_optimizer.errors import ValidationError
from career_optimizer.parsers.document_parser import UploadedFile
from career_optimizer.pipeline.analyzer import Analyzer
from career_optimizer.presentation import (
    LoadingState,
    PanelState,
    escape_markdown,
    highlight_markdown,
    quality_badge,
    recommendation_cards,
    run_panel,
    score_band,
    skill_tags,
    suitability_sections,
    swot_quadrants,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

CONFIG = load_config()
# Read once at start-up; a missing key stops the app here.
API_KEY = require_api_key()

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Career Optimizer AI",
    page_icon=":sparkles:",
    layout="wide",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@st.cache_resource
def _get_analyzer() -> Analyzer:
    llm = LLMClient(
        api_key=API_KEY,
        timeout=CONFIG.llm.timeout,
    )
    return Analyzer(
        llm,
        model=CONFIG.llm.model,
        temperature=CONFIG.llm.temperature,
        max_tokens=CONFIG.llm.max_tokens,
    )


def _panel_state(key: str) -> PanelState:
    if key not in st.session_state:
        st.session_state[key] = PanelState()
    return st.session_state[key]


def _request(pending_key: str) -> None:
    """Button callback: mark the panel pending so the rerun disables the button."""
    st.session_state[pending_key] = True


def _run_pending(key: str, pending_key: str, call, spinner: str) -> None:
    if not st.session_state.get(pending_key):
        return
    state = _panel_state(key)
    try:
        with st.spinner(spinner):
            asyncio.run(run_panel(state, call))
    finally:
        st.session_state[pending_key] = False
    st.rerun()


def _show_error(state: PanelState) -> None:
    if state.status is LoadingState.ERROR and state.error:
        st.error(state.error)


def _to_uploaded_file(uploaded) -> UploadedFile | None:
    if uploaded is None:
        return None
    if uploaded.size > CONFIG.upload.max_file_bytes:
        raise ValidationError(
            f"Resume file exceeds {CONFIG.upload.max_file_mb}MB. Please upload a smaller file."
        )
    return UploadedFile(name=uploaded.name, content_type=uploaded.type or "", data=uploaded.getvalue())


# ---------------------------------------------------------------------------
# Panel A: Headline
# ---------------------------------------------------------------------------


def _headline_panel() -> None:
    st.header("LinkedIn Headline Optimizer")
    state = _panel_state("headline_state")
    pending = st.session_state.get("headline_pending", False)

    headline = st.text_input(
        "Enter your current headline:",
        placeholder="e.g., Software Engineer at Tech Corp",
        key="headline_input",
    )
    job_description = st.text_area(
        "Paste Job Description (Optional) - for tailored suggestions",
        height=160,
        placeholder="Paste the job description here to get headline suggestions tailored for the role...",
        key="headline_jd_input",
    )
    st.button(
        "Analyzing..." if pending else "Analyze Headline",
        type="primary",
        disabled=pending,
        on_click=_request,
        args=("headline_pending",),
        key="headline_button",
    )

    _run_pending(
        "headline_state",
        "headline_pending",
        lambda: _get_analyzer().analyze_headline(headline, job_description),
        "Analyzing headline...",
    )
    _show_error(state)

    if state.status is LoadingState.SUCCESS and state.result is not None:
        result = state.result
        st.divider()
        st.subheader("Analysis Result")
        st.markdown(f"Overall Quality: {quality_badge(result)}")
        st.info(escape_markdown(result.analysis))

        st.subheader("Suggested Headlines")
        if result.missing_skills:
            st.markdown(
                "**Keywords to add:** " + skill_tags(result.missing_skills, "blue", "")
            )
        for suggestion in result.suggestions:
            with st.container(border=True):
                st.markdown(highlight_markdown(suggestion, result.missing_skills))


# ---------------------------------------------------------------------------
# Panel B: SWOT
# ---------------------------------------------------------------------------


def _swot_panel() -> None:
    st.header("Personal SWOT Analyzer")
    state = _panel_state("swot_state")
    pending = st.session_state.get("swot_pending", False)

    user_info = st.text_area(
        "Enter your skills, goals, and traits:",
        height=160,
        placeholder=(
            "e.g., Proficient in React & TypeScript, want to move into a leadership role, "
            "sometimes I procrastinate on documentation..."
        ),
        key="swot_input",
    )
    st.button(
        "Generating..." if pending else "Generate SWOT",
        type="primary",
        disabled=pending,
        on_click=_request,
        args=("swot_pending",),
        key="swot_button",
    )

    if state.status is LoadingState.IDLE and not pending:
        st.caption(
            "Discover Your Strategic Self. List your skills, goals, and traits. The AI will "
            "generate a complete SWOT analysis to reveal your professional landscape."
        )

    _run_pending(
        "swot_state",
        "swot_pending",
        lambda: _get_analyzer().analyze_swot(user_info),
        "Generating SWOT analysis...",
    )
    _show_error(state)

    if state.status is LoadingState.SUCCESS and state.result is not None:
        quadrants = swot_quadrants(state.result)
        for row in (quadrants[:2], quadrants[2:]):
            cols = st.columns(2)
            for col, quadrant in zip(cols, row):
                with col, st.container(border=True):
                    st.markdown(quadrant.to_markdown())

        cards = recommendation_cards(state.result)
        if cards:
            st.subheader("Actionable Recommendations")
            cols = st.columns(2)
            for i, (display, text) in enumerate(cards):
                with cols[i % 2], st.container(border=True):
                    st.markdown(f"#### :{display.color}[{display.recommendation_title}]")
                    st.markdown(escape_markdown(text))


# ---------------------------------------------------------------------------
# Panel C: Job suitability
# ---------------------------------------------------------------------------


def _suitability_panel() -> None:
    st.header("Job Suitability Analyzer")
    state = _panel_state("suitability_state")
    pending = st.session_state.get("suitability_pending", False)

    col_resume, col_jd = st.columns(2)
    with col_resume:
        resume_upload = st.file_uploader(
            "Upload your resume:",
            type=["pdf", "docx"],
            help=f"PDF or DOCX ({CONFIG.upload.max_file_mb}MB or less)",
            key="suitability_resume",
        )
    with col_jd:
        job_description = st.text_area(
            "Paste the job description:",
            height=200,
            placeholder="Paste the job description here...",
            key="suitability_jd_input",
        )
    st.button(
        "Analyzing..." if pending else "Analyze Suitability",
        type="primary",
        disabled=pending or resume_upload is None,
        on_click=_request,
        args=("suitability_pending",),
        key="suitability_button",
    )

    async def _call():
        return await _get_analyzer().analyze_suitability(
            _to_uploaded_file(resume_upload), job_description
        )

    _run_pending("suitability_state", "suitability_pending", _call, "Analyzing suitability...")
    _show_error(state)

    if state.status is LoadingState.SUCCESS and state.result is not None:
        result = state.result
        band = score_band(result.suitability_score)
        st.divider()
        col_score, col_summary = st.columns([1, 3])
        with col_score:
            st.metric("Suitability", f"{result.suitability_score}%")
            st.progress(result.suitability_score / 100)
            st.markdown(f":{band.color}[**{band.value.upper()} MATCH**]")
        with col_summary:
            st.subheader("Analysis Summary")
            st.info(escape_markdown(result.summary))

        cols = st.columns(2)
        for col, (title, body) in zip(cols, suitability_sections(result).items()):
            with col:
                st.subheader(title)
                st.markdown(body)


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

st.title("Career Optimizer AI")
st.caption(
    "Harness the power of AI to refine your professional brand and uncover your unique "
    "career landscape."
)

left, right = st.columns(2)
with left:
    _headline_panel()
with right:
    _swot_panel()
st.divider()
_suitability_panel()
st.caption("Powered by AI. Designed for career growth.")
