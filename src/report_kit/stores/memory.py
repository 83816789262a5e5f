"""Dict-backed stores for tests and single-process runs."""

import logging
from datetime import datetime, timezone

from report_kit.errors import NotFoundError
from report_kit.records.models import FinalRecord

from .base import LibraryStore, ReportStore, ResultStore
from .types import LibraryRecord, ReportRecord, ReportStatus

logger = logging.getLogger(__name__)


class InMemoryReportStore(ReportStore, LibraryStore, ResultStore):
    """Implements the report, library and result stores over plain dicts."""

    def __init__(self) -> None:
        self.reports: dict[str, ReportRecord] = {}
        self.libraries: dict[str, LibraryRecord] = {}
        self.results: dict[str, FinalRecord] = {}
        self.status_history: dict[str, list[ReportStatus]] = {}

    def add_report(self, report: ReportRecord) -> None:
        self.reports[report.report_id] = report

    def add_library(self, library: LibraryRecord) -> None:
        self.libraries[library.library_id] = library

    async def get_report(self, report_id: str) -> ReportRecord:
        try:
            return self.reports[report_id]
        except KeyError:
            raise NotFoundError(f"Report '{report_id}' not found") from None

    async def update_status(
        self,
        report_id: str,
        status: ReportStatus,
        *,
        error_message: str | None = None,
    ) -> None:
        report = await self.get_report(report_id)
        self.reports[report_id] = ReportRecord(
            report_id=report.report_id,
            source=report.source,
            year=report.year,
            library_id=report.library_id,
            status=status,
            error_message=error_message,
            updated_at=datetime.now(timezone.utc),
        )
        self.status_history.setdefault(report_id, []).append(status)
        logger.debug("Report %s status -> %s", report_id, status.value)

    async def get_library(self, library_id: str) -> LibraryRecord:
        try:
            return self.libraries[library_id]
        except KeyError:
            raise NotFoundError(f"Library '{library_id}' not found") from None

    async def save_result(self, report_id: str, record: FinalRecord) -> None:
        self.results[report_id] = record

    async def get_result(self, report_id: str) -> FinalRecord:
        try:
            return self.results[report_id]
        except KeyError:
            raise NotFoundError(f"No result stored for report '{report_id}'") from None
