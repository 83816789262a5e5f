from .base import BlobFetcher, LibraryStore, ReportStore, ResultStore
from .blob import FileBlobFetcher, HttpBlobFetcher, RoutingBlobFetcher
from .library_csv import read_libraries_csv
from .memory import InMemoryReportStore
from .sqlite import SQLiteReportStore
from .types import LibraryRecord, ReportRecord, ReportStatus

__all__ = [
    "BlobFetcher",
    "FileBlobFetcher",
    "HttpBlobFetcher",
    "InMemoryReportStore",
    "LibraryRecord",
    "LibraryStore",
    "ReportRecord",
    "ReportStatus",
    "ReportStore",
    "ResultStore",
    "RoutingBlobFetcher",
    "SQLiteReportStore",
    "read_libraries_csv",
]
