from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ReportStatus(str, Enum):
    """Processing state of a report. COMPLETED and FAILED are terminal."""

    PENDING = "Pending"
    PROCESSING = "Processing"
    COMPLETED = "Completed"
    FAILED = "Failed"


@dataclass(frozen=True)
class ReportRecord:
    report_id: str
    source: str
    year: int
    library_id: str
    status: ReportStatus = ReportStatus.PENDING
    error_message: str | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class LibraryRecord:
    library_id: str
    name: str
    address: str = ""
    city: str = ""
    zipcode: str = ""
    phone: str = ""
    website: str = ""
    email: str = ""
    county: str = ""
