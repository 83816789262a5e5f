from typing import Protocol

from report_kit.records.models import FinalRecord

from .types import LibraryRecord, ReportRecord, ReportStatus


class ReportStore(Protocol):
    async def get_report(self, report_id: str) -> ReportRecord:
        """Raises NotFoundError if the report does not exist."""
        ...

    async def update_status(
        self,
        report_id: str,
        status: ReportStatus,
        *,
        error_message: str | None = None,
    ) -> None:
        """
        Set status, error message and last-updated time.
        Raises NotFoundError if the report does not exist.
        """
        ...


class LibraryStore(Protocol):
    async def get_library(self, library_id: str) -> LibraryRecord:
        """Raises NotFoundError if the library does not exist."""
        ...


class ResultStore(Protocol):
    async def save_result(self, report_id: str, record: FinalRecord) -> None:
        """
        Store the merged record, replacing any earlier one.
        Raises PersistenceError if the write fails.
        """
        ...

    async def get_result(self, report_id: str) -> FinalRecord:
        """Raises NotFoundError if no result was stored."""
        ...


class BlobFetcher(Protocol):
    async def fetch(self, source: str) -> bytes:
        """Raises FetchError if the bytes cannot be retrieved."""
        ...
