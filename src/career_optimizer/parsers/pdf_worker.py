"""Process-wide PDF decoding worker.

PDF decoding runs on a dedicated single-thread executor so the event loop
stays free while PyMuPDF works. Loading the engine is a one-shot
``concurrent.futures.Future``: the first caller submits the load, every other
caller (overlapping or later, on any event loop) awaits that same future.
A failed load is discarded so the next extraction can try again.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, TypeVar

from career_optimizer.errors import LibraryUnavailable

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _load_engine() -> Any:
    """Import PyMuPDF and apply its one-time global settings."""
    import fitz  # pymupdf

    # MuPDF prints repair warnings to stderr; failures still raise.
    fitz.TOOLS.mupdf_display_errors(False)
    logger.info("PDF engine loaded (PyMuPDF %s)", fitz.VersionBind)
    return fitz


class PdfWorker:
    def __init__(self, loader: Callable[[], Any] | None = None):
        self._loader = loader
        self._lock = threading.Lock()
        self._executor: ThreadPoolExecutor | None = None
        self._ready: Future | None = None

    def _start(self) -> Future:
        with self._lock:
            ready = self._ready
            if ready is None or ready.cancelled() or (ready.done() and ready.exception() is not None):
                if self._executor is None:
                    self._executor = ThreadPoolExecutor(
                        max_workers=1, thread_name_prefix="pdf-worker"
                    )
                loader = self._loader or _load_engine
                ready = self._ready = self._executor.submit(loader)
            return ready

    async def engine(self) -> Any:
        """Return the loaded engine, starting the one-time load if needed."""
        try:
            return await asyncio.wrap_future(self._start())
        except Exception as e:
            logger.error("PDF engine failed to load", exc_info=True)
            raise LibraryUnavailable() from e

    async def run(self, func: Callable[..., T], *args: Any) -> T:
        """Run ``func(engine, *args)`` on the worker thread."""
        engine = await self.engine()
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, func, engine, *args)


_default_worker: PdfWorker | None = None
_default_lock = threading.Lock()


def get_pdf_worker() -> PdfWorker:
    """Return the process-wide worker shared by all extractions."""
    global _default_worker
    with _default_lock:
        if _default_worker is None:
            _default_worker = PdfWorker()
        return _default_worker
