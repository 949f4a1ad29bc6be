"""Error taxonomy shared by the extractor, the analysis client and the panels.

Every error carries a single-line, user-facing message. The underlying cause
is chained with ``raise ... from`` and logged where it is caught.
"""

from __future__ import annotations


class CareerOptimizerError(Exception):
    """Base class for errors whose message can be shown to the user as-is."""

    default_message = "An unknown error occurred."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigError(CareerOptimizerError, RuntimeError):
    default_message = "ANTHROPIC_API_KEY is not set."


class ValidationError(CareerOptimizerError, ValueError):
    """Missing or invalid user input (empty headline, missing file, ...)."""

    default_message = "Please check your input and try again."


# Extraction


class UnsupportedFileType(CareerOptimizerError, ValueError):
    default_message = "Unsupported file type. Please upload a PDF or DOCX file."


class LibraryUnavailable(CareerOptimizerError, RuntimeError):
    default_message = (
        "PDF parsing library failed to load. Please refresh the page and try again."
    )


class DecodeError(CareerOptimizerError, ValueError):
    default_message = (
        "Could not read the uploaded file. Please check that it is a valid PDF or DOCX."
    )


# Model calls


class AnalysisFailed(CareerOptimizerError):
    default_message = "Failed to run the analysis. Please try again."


class MalformedResponse(AnalysisFailed):
    """The model returned JSON that does not satisfy the response schema."""
