# src/report_kit/parsers/pdf_parser.py

import io
import logging
from pathlib import Path
from time import monotonic
from typing import Any, BinaryIO, cast

import pdfplumber

from report_kit.errors import ExtractionError
from report_kit.observability import names
from report_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import TextExtractor

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


class PdfTextExtractor(TextExtractor):
    """
    Best-effort PDF text extractor.
    - Uses page order
    - Pages are joined by a blank line, so page breaks read as paragraph breaks
    - Tables, columns and images are flattened to linear text
    """

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self.metrics_hook = metrics_hook

    def extract(self, source: bytes | str | Path | BinaryIO) -> str:
        start = monotonic()
        if isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(source)

        pages: list[str] = []
        try:
            # pdfplumber.open accepts path-like or buffer objects; cast to Any
            with pdfplumber.open(cast(Any, source)) as pdf:
                for page in pdf.pages:
                    pages.append((page.extract_text() or "").strip())
        except Exception as exc:
            logger.error("Failed to parse PDF: %s", exc)
            raise ExtractionError(f"Document is not a readable PDF: {exc}") from exc

        text = PAGE_SEPARATOR.join(page for page in pages if page)
        if not text.strip():
            raise ExtractionError("PDF contains no extractable text")

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PDF_EXTRACTION_DURATION, elapsed_ms)
        logger.info(
            "Extracted %d characters from %d pages in %.0fms",
            len(text),
            len(pages),
            elapsed_ms,
        )
        return text
