# src/report_kit/pipeline/orchestrator.py

"""Runs one report through fetch, extract, chunk, oracle, merge and persist.

Status moves Processing -> Completed on success and Processing -> Failed on
any fatal error. `process` never raises; callers poll the report record.
"""

import asyncio
import logging
from time import monotonic

from report_kit.chunking.chunking import chunk_text
from report_kit.errors import PersistenceError
from report_kit.extraction.oracle import ExtractionOracle
from report_kit.merging.merger import merge_records
from report_kit.observability import names
from report_kit.observability.base import MetricsHook, NoOpMetricsHook
from report_kit.parsers.base import TextExtractor
from report_kit.parsers.models import RawDocument
from report_kit.parsers.pdf_parser import PdfTextExtractor
from report_kit.records.models import FinalRecord
from report_kit.stores.base import BlobFetcher, LibraryStore, ReportStore, ResultStore
from report_kit.stores.types import ReportStatus

from .config import PipelineConfig

logger = logging.getLogger(__name__)


class ReportProcessor:
    """Pipeline entry point. Collaborators are injected, never global."""

    def __init__(
        self,
        *,
        report_store: ReportStore,
        library_store: LibraryStore,
        result_store: ResultStore,
        blob_fetcher: BlobFetcher,
        oracle: ExtractionOracle,
        text_extractor: TextExtractor | None = None,
        config: PipelineConfig = PipelineConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._report_store = report_store
        self._library_store = library_store
        self._result_store = result_store
        self._blob_fetcher = blob_fetcher
        self._oracle = oracle
        self._text_extractor = text_extractor or PdfTextExtractor(metrics_hook)
        self._config = config
        self.metrics_hook = metrics_hook

    async def process(self, report_id: str) -> bool:
        """Run the pipeline for one report.

        Returns:
            True if the report reached Completed, False if it ended Failed.
        """
        start = monotonic()
        logger.info("Processing report %s", report_id)
        try:
            await self.run(report_id)
        except Exception as exc:
            logger.exception("Error processing report %s", report_id)
            await self._mark_failed(report_id, exc)
            self.metrics_hook.increment(names.PIPELINE_RUNS_FAILED)
            return False
        finally:
            elapsed_ms = 1000 * (monotonic() - start)
            self.metrics_hook.record_latency(names.PIPELINE_RUN_DURATION, elapsed_ms)

        self.metrics_hook.increment(names.PIPELINE_RUNS_COMPLETED)
        logger.info("Report %s completed", report_id)
        return True

    async def run(self, report_id: str) -> FinalRecord:
        """Run the pipeline and return the stored record. Fatal errors propagate."""
        await self._report_store.update_status(report_id, ReportStatus.PROCESSING)

        report = await self._report_store.get_report(report_id)
        library = await self._library_store.get_library(report.library_id)
        library_name = library.name or self._config.default_library_name

        document = RawDocument(
            content=await self._blob_fetcher.fetch(report.source),
            source=report.source,
        )
        logger.debug("Fetched %d bytes for report %s", len(document), report_id)

        # pdf parsing is CPU-bound and synchronous
        text = await asyncio.to_thread(self._text_extractor.extract, document.content)

        chunks = chunk_text(
            text,
            max_tokens=self._config.max_chunk_tokens,
            chars_per_token=self._config.chars_per_token,
            metrics_hook=self.metrics_hook,
        )
        logger.info("Report %s split into %d chunks", report_id, len(chunks))

        partials = await self._oracle.extract_all(
            chunks, year=report.year, library_name=library_name
        )
        merged = merge_records(
            partials,
            findings_limit=self._config.findings_limit,
            metrics_hook=self.metrics_hook,
        )

        record = FinalRecord.from_sections(
            merged,
            report_id=report_id,
            library_name=library_name,
            year=report.year,
        )
        await self._persist(report_id, record)

        await self._report_store.update_status(report_id, ReportStatus.COMPLETED)
        return record

    async def _persist(self, report_id: str, record: FinalRecord) -> None:
        try:
            await self._result_store.save_result(report_id, record)
        except PersistenceError:
            raise
        except Exception as exc:
            raise PersistenceError(
                f"Could not store result for report '{report_id}': {exc}"
            ) from exc

    async def _mark_failed(self, report_id: str, exc: Exception) -> None:
        """Best-effort Failed write. Its own failure is logged, not raised."""
        message = str(exc) or type(exc).__name__
        try:
            await self._report_store.update_status(
                report_id, ReportStatus.FAILED, error_message=message
            )
        except Exception:
            logger.exception("Error updating status of report %s", report_id)
