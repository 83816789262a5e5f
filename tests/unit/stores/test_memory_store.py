# tests/unit/stores/test_memory_store.py

import pytest

from report_kit.errors import NotFoundError
from report_kit.records.models import FinalRecord
from report_kit.stores import (
    InMemoryReportStore,
    LibraryRecord,
    ReportRecord,
    ReportStatus,
)


@pytest.fixture
def store() -> InMemoryReportStore:
    store = InMemoryReportStore()
    store.add_report(
        ReportRecord(report_id="r1", source="r1.pdf", year=2023, library_id="lib1")
    )
    store.add_library(LibraryRecord(library_id="lib1", name="Hillsboro Public Library"))
    return store


class TestInMemoryReportStore:
    @pytest.mark.asyncio
    async def test_get_report(self, store: InMemoryReportStore) -> None:
        report = await store.get_report("r1")

        assert report.status is ReportStatus.PENDING
        with pytest.raises(NotFoundError):
            await store.get_report("r2")

    @pytest.mark.asyncio
    async def test_update_status_keeps_history(self, store: InMemoryReportStore) -> None:
        await store.update_status("r1", ReportStatus.PROCESSING)
        await store.update_status("r1", ReportStatus.FAILED, error_message="boom")

        report = await store.get_report("r1")
        assert report.status is ReportStatus.FAILED
        assert report.error_message == "boom"
        assert report.updated_at is not None
        assert report.source == "r1.pdf"
        assert store.status_history["r1"] == [
            ReportStatus.PROCESSING,
            ReportStatus.FAILED,
        ]

    @pytest.mark.asyncio
    async def test_update_status_missing_report(self, store: InMemoryReportStore) -> None:
        with pytest.raises(NotFoundError):
            await store.update_status("r2", ReportStatus.PROCESSING)
        assert "r2" not in store.status_history

    @pytest.mark.asyncio
    async def test_libraries(self, store: InMemoryReportStore) -> None:
        assert (await store.get_library("lib1")).name == "Hillsboro Public Library"
        with pytest.raises(NotFoundError):
            await store.get_library("lib2")

    @pytest.mark.asyncio
    async def test_results(self, store: InMemoryReportStore) -> None:
        record = FinalRecord(report_id="r1", library_name="Hillsboro", year=2023)

        with pytest.raises(NotFoundError):
            await store.get_result("r1")
        await store.save_result("r1", record)

        assert await store.get_result("r1") is record
