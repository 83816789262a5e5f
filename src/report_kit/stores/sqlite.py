"""SQLite-backed report, library and result stores using apsw."""

import asyncio
import json
import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path
from time import monotonic
from typing import Any

import apsw

from report_kit.errors import NotFoundError, PersistenceError
from report_kit.observability import names
from report_kit.observability.base import MetricsHook, NoOpMetricsHook
from report_kit.records.models import FinalRecord

from .base import LibraryStore, ReportStore, ResultStore
from .types import LibraryRecord, ReportRecord, ReportStatus

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS libraries (
    library_id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    address TEXT NOT NULL DEFAULT '',
    city TEXT NOT NULL DEFAULT '',
    zipcode TEXT NOT NULL DEFAULT '',
    phone TEXT NOT NULL DEFAULT '',
    website TEXT NOT NULL DEFAULT '',
    email TEXT NOT NULL DEFAULT '',
    county TEXT NOT NULL DEFAULT ''
);
CREATE TABLE IF NOT EXISTS reports (
    report_id TEXT PRIMARY KEY,
    source TEXT NOT NULL,
    year INTEGER NOT NULL,
    library_id TEXT NOT NULL,
    status TEXT NOT NULL DEFAULT 'Pending',
    error_message TEXT,
    updated_at TEXT
);
CREATE TABLE IF NOT EXISTS report_results (
    report_id TEXT PRIMARY KEY,
    data TEXT NOT NULL,
    updated_at TEXT NOT NULL
);
"""

LIBRARY_COLUMNS = (
    "library_id",
    "name",
    "address",
    "city",
    "zipcode",
    "phone",
    "website",
    "email",
    "county",
)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class SQLiteReportStore(ReportStore, LibraryStore, ResultStore):
    """Report, library and result stores in one SQLite database.

    Each call runs in a worker thread via asyncio.to_thread. Results are
    stored as JSON documents using the dashboard's wire names.

    Example:
        >>> store = SQLiteReportStore(db_path="reports.db")
        >>> await store.add_library(LibraryRecord(library_id="lib1", name="Morristown"))
        >>> report = await store.get_report("r1")
    """

    def __init__(
        self,
        db_path: str | Path = ":memory:",
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        """
        Args:
            db_path: Path to SQLite database file. Use ":memory:" for in-memory database.
            metrics_hook: Hook for recording metrics.
        """
        self.metrics_hook = metrics_hook
        self._db_path = str(db_path)
        self._conn: apsw.Connection | None = None

    def _get_connection(self) -> apsw.Connection:
        """Get or create the SQLite connection (lazy initialization)."""
        if self._conn is None:
            self._conn = apsw.Connection(self._db_path)
            self._conn.execute(SCHEMA)
        return self._conn

    async def close(self) -> None:
        """Close the database connection."""
        if self._conn:
            await asyncio.to_thread(self._conn.close)
            self._conn = None

    async def _read(self, operation: str, fn: Any) -> Any:
        start = monotonic()
        result = await asyncio.to_thread(fn)
        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.SQLITE_READ_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.SQLITE_OPERATIONS_TOTAL, labels={"operation": operation}
        )
        return result

    async def _write(self, operation: str, fn: Any) -> Any:
        start = monotonic()
        result = await asyncio.to_thread(fn)
        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.SQLITE_WRITE_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.SQLITE_OPERATIONS_TOTAL, labels={"operation": operation}
        )
        return result

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------

    async def add_libraries(self, libraries: Iterable[LibraryRecord]) -> int:
        """Insert or replace library records. Returns the number written."""
        rows = [tuple(getattr(lib, col) for col in LIBRARY_COLUMNS) for lib in libraries]
        if not rows:
            return 0

        placeholders = ",".join("?" * len(LIBRARY_COLUMNS))

        def _insert() -> None:
            conn = self._get_connection()
            with conn:
                conn.executemany(
                    f"INSERT OR REPLACE INTO libraries({','.join(LIBRARY_COLUMNS)}) "
                    f"VALUES ({placeholders})",
                    rows,
                )

        await self._write("add_libraries", _insert)
        logger.info("Stored %d libraries", len(rows))
        return len(rows)

    async def add_library(self, library: LibraryRecord) -> None:
        await self.add_libraries([library])

    async def add_report(self, report: ReportRecord) -> None:
        def _insert() -> None:
            conn = self._get_connection()
            conn.execute(
                """
                INSERT OR REPLACE INTO reports(
                    report_id, source, year, library_id, status, error_message, updated_at
                )
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    report.report_id,
                    report.source,
                    report.year,
                    report.library_id,
                    report.status.value,
                    report.error_message,
                    report.updated_at.isoformat() if report.updated_at else _now(),
                ),
            )

        await self._write("add_report", _insert)

    # ------------------------------------------------------------------
    # ReportStore
    # ------------------------------------------------------------------

    async def get_report(self, report_id: str) -> ReportRecord:
        def _get() -> list[tuple]:
            conn = self._get_connection()
            return list(
                conn.execute(
                    """
                    SELECT report_id, source, year, library_id, status,
                           error_message, updated_at
                    FROM reports WHERE report_id = ?
                    """,
                    (report_id,),
                )
            )

        rows = await self._read("get_report", _get)
        if not rows:
            raise NotFoundError(f"Report '{report_id}' not found")

        rid, source, year, library_id, status, error_message, updated_at = rows[0]
        return ReportRecord(
            report_id=rid,
            source=source,
            year=int(year),
            library_id=library_id,
            status=ReportStatus(status),
            error_message=error_message,
            updated_at=datetime.fromisoformat(updated_at) if updated_at else None,
        )

    async def update_status(
        self,
        report_id: str,
        status: ReportStatus,
        *,
        error_message: str | None = None,
    ) -> None:
        def _update() -> int:
            conn = self._get_connection()
            conn.execute(
                """
                UPDATE reports
                SET status = ?, error_message = ?, updated_at = ?
                WHERE report_id = ?
                """,
                (status.value, error_message, _now(), report_id),
            )
            return conn.changes()

        changed = await self._write("update_status", _update)
        if not changed:
            raise NotFoundError(f"Report '{report_id}' not found")
        logger.debug("Report %s status -> %s", report_id, status.value)

    # ------------------------------------------------------------------
    # LibraryStore
    # ------------------------------------------------------------------

    async def get_library(self, library_id: str) -> LibraryRecord:
        def _get() -> list[tuple]:
            conn = self._get_connection()
            return list(
                conn.execute(
                    f"SELECT {','.join(LIBRARY_COLUMNS)} FROM libraries "
                    "WHERE library_id = ?",
                    (library_id,),
                )
            )

        rows = await self._read("get_library", _get)
        if not rows:
            raise NotFoundError(f"Library '{library_id}' not found")
        return LibraryRecord(**dict(zip(LIBRARY_COLUMNS, rows[0], strict=True)))

    # ------------------------------------------------------------------
    # ResultStore
    # ------------------------------------------------------------------

    async def save_result(self, report_id: str, record: FinalRecord) -> None:
        document = json.dumps(record.to_document())

        def _upsert() -> None:
            conn = self._get_connection()
            conn.execute(
                """
                INSERT INTO report_results(report_id, data, updated_at)
                VALUES (?, ?, ?)
                ON CONFLICT(report_id) DO UPDATE SET
                    data = excluded.data,
                    updated_at = excluded.updated_at
                """,
                (report_id, document, _now()),
            )

        try:
            await self._write("save_result", _upsert)
        except apsw.Error as exc:
            raise PersistenceError(
                f"Could not store result for report '{report_id}': {exc}"
            ) from exc

    async def get_result(self, report_id: str) -> FinalRecord:
        def _get() -> list[tuple]:
            conn = self._get_connection()
            return list(
                conn.execute(
                    "SELECT data FROM report_results WHERE report_id = ?",
                    (report_id,),
                )
            )

        rows = await self._read("get_result", _get)
        if not rows:
            raise NotFoundError(f"No result stored for report '{report_id}'")
        return FinalRecord.model_validate(json.loads(rows[0][0]))
