"""Analysis client: sends a built request to the model and validates the result."""

from __future__ import annotations

import logging
from typing import Union

from pydantic import ValidationError as SchemaValidationError

from career_optimizer.clients.llm_client import DEFAULT_MODEL, LLMClient
from career_optimizer.errors import AnalysisFailed, MalformedResponse, ValidationError
from career_optimizer.models import HeadlineAnalysis, JobSuitabilityAnalysis, SwotAnalysis
from career_optimizer.parsers.document_parser import UploadedFile, extract_text
from career_optimizer.parsers.pdf_worker import PdfWorker
from career_optimizer.pipeline.request_builder import AnalysisKind, AnalysisRequest, build_request

logger = logging.getLogger(__name__)

AnalysisResult = Union[HeadlineAnalysis, SwotAnalysis, JobSuitabilityAnalysis]


class Analyzer:
    """One model call per analysis; no retries, no caching, no session state."""

    def __init__(
        self,
        llm: LLMClient,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.0,
        max_tokens: int = 4096,
        pdf_worker: PdfWorker | None = None,
    ):
        self.llm = llm
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.pdf_worker = pdf_worker

    async def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        """Run one analysis and return the validated, typed result.

        Raises:
            AnalysisFailed: transport error, API error or unparseable JSON.
            MalformedResponse: JSON that does not satisfy the kind's schema.
        """
        kind = request.kind
        logger.info("Running %s analysis", kind.value)
        try:
            data = await self.llm.generate_json(
                prompt=request.prompt,
                system=request.system,
                model=self.model,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except Exception as e:
            logger.error("%s analysis failed", kind.value, exc_info=True)
            raise AnalysisFailed(kind.failure_message) from e

        try:
            result = kind.result_model.model_validate(data)
        except SchemaValidationError as e:
            logger.error("%s response does not match schema: %s", kind.value, e)
            raise MalformedResponse(kind.failure_message) from e

        if kind is AnalysisKind.HEADLINE and not request.with_job_description:
            result = result.model_copy(update={"missing_skills": []})
        return result

    async def analyze_headline(self, headline: str, job_description: str = "") -> HeadlineAnalysis:
        if not headline.strip():
            raise ValidationError("Please enter a headline to analyze.")
        request = build_request(
            AnalysisKind.HEADLINE,
            {"headline": headline, "job_description": job_description},
        )
        return await self.analyze(request)

    async def analyze_swot(self, user_info: str) -> SwotAnalysis:
        if not user_info.strip():
            raise ValidationError("Please enter some information to generate a SWOT analysis.")
        return await self.analyze(build_request(AnalysisKind.SWOT, {"user_info": user_info}))

    async def analyze_suitability(
        self,
        resume_file: UploadedFile | None,
        job_description: str,
    ) -> JobSuitabilityAnalysis:
        """Extract the resume text, then score it against the job description."""
        if resume_file is None or not job_description.strip():
            raise ValidationError("Please upload your resume and paste the job description.")
        resume_text = await extract_text(resume_file, worker=self.pdf_worker)
        request = build_request(
            AnalysisKind.SUITABILITY,
            {"resume_text": resume_text, "job_description": job_description},
        )
        return await self.analyze(request)
