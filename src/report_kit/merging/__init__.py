from .merger import (
    FINDINGS_LIMIT,
    merge_breakdown_section,
    merge_findings,
    merge_records,
    merge_scalar_section,
)

__all__ = [
    "FINDINGS_LIMIT",
    "merge_breakdown_section",
    "merge_findings",
    "merge_records",
    "merge_scalar_section",
]
