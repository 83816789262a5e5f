# src/report_kit/pipeline/dispatch.py

"""Fire-and-forget launching of pipeline runs, plus status polling."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime

from report_kit.stores.base import ReportStore
from report_kit.stores.types import ReportStatus

from .orchestrator import ReportProcessor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatusReport:
    """What a polling client sees for one report."""

    status: ReportStatus
    error_message: str | None
    updated_at: datetime | None

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "errorMessage": self.error_message,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }


async def get_report_status(report_store: ReportStore, report_id: str) -> StatusReport:
    """Raises NotFoundError if the report does not exist."""
    report = await report_store.get_report(report_id)
    return StatusReport(
        status=report.status,
        error_message=report.error_message,
        updated_at=report.updated_at,
    )


class ProcessingDispatcher:
    """Starts runs as detached tasks so the caller never waits on them.

    Holds a reference to each task until it finishes; asyncio only keeps
    weak references. There is no cancellation: `drain` waits for every
    outstanding run and is meant for process shutdown.
    """

    def __init__(self, processor: ReportProcessor) -> None:
        self._processor = processor
        self._tasks: set[asyncio.Task[bool]] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def start(self, report_id: str) -> asyncio.Task[bool]:
        task = asyncio.create_task(
            self._processor.process(report_id), name=f"process-report-{report_id}"
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        logger.info("Started background processing of report %s", report_id)
        return task

    async def drain(self) -> list[bool]:
        """Wait for all runs started so far and return their outcomes."""
        if not self._tasks:
            return []
        return list(await asyncio.gather(*self._tasks))
