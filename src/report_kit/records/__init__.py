from .models import (
    CategoryEntry,
    CategoryValue,
    CollectionOverview,
    FinalRecord,
    KeyFindings,
    LibraryOverview,
    PartialRecord,
    SessionAttendance,
    SummerReadingEntry,
    UsageStatistics,
)

__all__ = [
    "CategoryEntry",
    "CategoryValue",
    "CollectionOverview",
    "FinalRecord",
    "KeyFindings",
    "LibraryOverview",
    "PartialRecord",
    "SessionAttendance",
    "SummerReadingEntry",
    "UsageStatistics",
]
