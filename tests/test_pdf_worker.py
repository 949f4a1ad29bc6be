"""Tests for the one-time PDF engine initialization."""

from __future__ import annotations

import asyncio
import threading
import time

import pytest

from career_optimizer.errors import LibraryUnavailable
from career_optimizer.parsers.document_parser import PDF_MEDIA_TYPE, UploadedFile, extract_text
from career_optimizer.parsers.pdf_worker import PdfWorker, _load_engine, get_pdf_worker


class CountingLoader:
    def __init__(self, delay: float = 0.05):
        self.calls = 0
        self.delay = delay
        self._lock = threading.Lock()

    def __call__(self):
        with self._lock:
            self.calls += 1
        time.sleep(self.delay)
        return _load_engine()


class TestPdfWorker:
    async def test_overlapping_extractions_initialize_once(self, pdf_factory):
        loader = CountingLoader()
        worker = PdfWorker(loader=loader)
        a = UploadedFile(name="a.pdf", content_type=PDF_MEDIA_TYPE, data=pdf_factory("A"))
        b = UploadedFile(name="b.pdf", content_type=PDF_MEDIA_TYPE, data=pdf_factory("B"))

        results = await asyncio.gather(
            extract_text(a, worker=worker),
            extract_text(b, worker=worker),
        )

        assert results == ["A", "B"]
        assert loader.calls == 1

    async def test_sequential_extractions_initialize_once(self, pdf_factory):
        loader = CountingLoader(delay=0)
        worker = PdfWorker(loader=loader)
        file = UploadedFile(name="a.pdf", content_type=PDF_MEDIA_TYPE, data=pdf_factory("A"))
        for _ in range(3):
            await extract_text(file, worker=worker)
        assert loader.calls == 1

    async def test_engine_shared_across_event_loops(self):
        loader = CountingLoader(delay=0)
        worker = PdfWorker(loader=loader)
        first = await worker.engine()
        second = await asyncio.to_thread(asyncio.run, worker.engine())
        assert first is second
        assert loader.calls == 1

    async def test_failed_load_is_retried(self):
        attempts = []

        def flaky():
            attempts.append(1)
            if len(attempts) == 1:
                raise ImportError("engine missing")
            return "engine"

        worker = PdfWorker(loader=flaky)
        with pytest.raises(LibraryUnavailable):
            await worker.engine()
        assert await worker.engine() == "engine"
        assert len(attempts) == 2

    async def test_overlapping_callers_share_a_failure(self):
        calls = []

        def broken():
            calls.append(1)
            time.sleep(0.05)
            raise ImportError("engine missing")

        worker = PdfWorker(loader=broken)
        results = await asyncio.gather(worker.engine(), worker.engine(), return_exceptions=True)
        assert all(isinstance(r, LibraryUnavailable) for r in results)
        assert len(calls) == 1

    def test_default_worker_is_process_wide(self):
        assert get_pdf_worker() is get_pdf_worker()
