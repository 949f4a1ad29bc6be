"""Extract plain text from uploaded resume files (PDF, DOCX)."""

from __future__ import annotations

import asyncio
import io
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from career_optimizer.errors import DecodeError, LibraryUnavailable, UnsupportedFileType
from career_optimizer.parsers.pdf_worker import PdfWorker, get_pdf_worker

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class DocumentKind(str, Enum):
    PDF = "pdf"
    DOCX = "docx"


_MEDIA_TYPES = {
    PDF_MEDIA_TYPE: DocumentKind.PDF,
    DOCX_MEDIA_TYPE: DocumentKind.DOCX,
}

_SUFFIXES = {
    ".pdf": DocumentKind.PDF,
    ".docx": DocumentKind.DOCX,
}


@dataclass(frozen=True)
class UploadedFile:
    """An uploaded file: original name, declared media type and raw bytes."""

    name: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


def classify_file(name: str, content_type: str | None) -> DocumentKind:
    """Classify by declared media type first, filename suffix second."""
    media_type = (content_type or "").split(";")[0].strip().lower()
    if media_type in _MEDIA_TYPES:
        return _MEDIA_TYPES[media_type]
    lower = name.lower()
    for suffix, kind in _SUFFIXES.items():
        if lower.endswith(suffix):
            return kind
    raise UnsupportedFileType()


async def extract_text(file: UploadedFile, worker: PdfWorker | None = None) -> str:
    """Extract plain text from an uploaded PDF or DOCX file.

    Raises:
        UnsupportedFileType: neither the media type nor the suffix is PDF/DOCX.
        LibraryUnavailable: the decoding library could not be loaded.
        DecodeError: the file is corrupt or unreadable.
    """
    kind = classify_file(file.name, file.content_type)
    logger.info("Extracting text from %s (%s, %d bytes)", file.name, kind.value, file.size)
    if kind is DocumentKind.PDF:
        return await _extract_pdf(file, worker or get_pdf_worker())
    return await _extract_docx(file)


async def _extract_pdf(file: UploadedFile, worker: PdfWorker) -> str:
    try:
        pages = await worker.run(_pdf_page_texts, file.data)
    except LibraryUnavailable:
        raise
    except Exception as e:
        logger.warning("Could not decode PDF %s", file.name, exc_info=True)
        raise DecodeError() from e
    return "\n".join(pages)


def _pdf_page_texts(fitz: Any, data: bytes) -> list[str]:
    """Return one string per page: the page's text runs joined by spaces."""
    doc = fitz.open(stream=data, filetype="pdf")
    try:
        pages = []
        for page in doc:
            runs = []
            for block in page.get_text("dict")["blocks"]:
                for line in block.get("lines", []):
                    for span in line["spans"]:
                        runs.append(span["text"])
            pages.append(" ".join(runs))
        return pages
    finally:
        doc.close()


async def _extract_docx(file: UploadedFile) -> str:
    try:
        from docx import Document
    except ImportError as e:
        logger.error("python-docx is not installed", exc_info=True)
        raise LibraryUnavailable("DOCX parsing library failed to load.") from e

    try:
        return await asyncio.to_thread(_docx_text, Document, file.data)
    except Exception as e:
        logger.warning("Could not decode DOCX %s", file.name, exc_info=True)
        raise DecodeError() from e


def _docx_text(document_cls: Any, data: bytes) -> str:
    """Raw visible text of body paragraphs and table cells, in document order."""
    doc = document_cls(io.BytesIO(data))
    lines: list[str] = []
    _collect_block_text(doc, lines)
    return "\n".join(line for line in lines if line.strip())


def _collect_block_text(container: Any, lines: list[str]) -> None:
    from docx.table import Table
    from docx.text.paragraph import Paragraph

    for item in container.iter_inner_content():
        if isinstance(item, Paragraph):
            lines.append(item.text)
        elif isinstance(item, Table):
            # A merged cell is reported once per grid column (and row) it spans.
            seen: set = set()
            for row in item.rows:
                for cell in row.cells:
                    if cell._tc in seen:
                        continue
                    seen.add(cell._tc)
                    _collect_block_text(cell, lines)
