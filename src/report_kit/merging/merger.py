# src/report_kit/merging/merger.py

"""Deterministic merge of per-chunk extraction results.

Order matters: earlier chunks win for scalar groups, and breakdown entries
keep the order in which their names were first seen.
"""

import logging
from collections.abc import Sequence
from time import monotonic

from report_kit.observability import names
from report_kit.observability.base import MetricsHook, NoOpMetricsHook
from report_kit.records.models import CategoryEntry, KeyFindings, PartialRecord

logger = logging.getLogger(__name__)

FINDINGS_LIMIT = 5


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def merge_scalar_section(records: Sequence[PartialRecord], section: str):
    """First present version of the section wins, as a whole."""
    for record in records:
        value = getattr(record, section)
        if value is not None:
            return value
    return None


def merge_breakdown_section(
    records: Sequence[PartialRecord], section: str
) -> list[CategoryEntry] | None:
    """Sum numeric fields of same-named entries; append unseen names in order.

    Every numeric field is summed, including counts that do not really add
    up across chunks (e.g. summer reading `registered`).
    """
    merged: list[CategoryEntry] = []
    index_by_name: dict[str, int] = {}

    for record in records:
        for entry in getattr(record, section) or []:
            if entry.name not in index_by_name:
                index_by_name[entry.name] = len(merged)
                merged.append(entry.model_copy())
                continue

            position = index_by_name[entry.name]
            existing = merged[position]
            updates = {}
            for field_name, value in entry.numeric_fields().items():
                if _is_number(value):
                    updates[field_name] = (getattr(existing, field_name) or 0) + value
            if updates:
                merged[position] = existing.model_copy(update=updates)

    return merged or None


def _unique_in_order(values: list[str], limit: int) -> list[str]:
    # dict preserves insertion order; keys give exact-match dedup
    return list(dict.fromkeys(values))[:limit]


def merge_findings(
    records: Sequence[PartialRecord], limit: int = FINDINGS_LIMIT
) -> KeyFindings | None:
    """Union of strengths and of areas for development, each capped at `limit`."""
    findings = [r.key_findings for r in records if r.key_findings is not None]
    if not findings:
        return None

    strengths: list[str] = []
    areas: list[str] = []
    for item in findings:
        strengths.extend(item.strengths)
        areas.extend(item.areas_for_development)

    return KeyFindings(
        strengths=_unique_in_order(strengths, limit),
        areas_for_development=_unique_in_order(areas, limit),
    )


def merge_records(
    records: Sequence[PartialRecord],
    *,
    findings_limit: int = FINDINGS_LIMIT,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> PartialRecord:
    """Combine per-chunk records into one. Sections no chunk supplied stay absent."""
    start = monotonic()
    values: dict[str, object] = {}

    for section in PartialRecord.SCALAR_SECTIONS:
        values[section] = merge_scalar_section(records, section)
    for section in PartialRecord.BREAKDOWN_SECTIONS:
        values[section] = merge_breakdown_section(records, section)
    values[PartialRecord.FINDINGS_SECTION] = merge_findings(records, findings_limit)

    merged = PartialRecord(**values)

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.MERGE_DURATION, elapsed_ms)
    logger.info(
        "Merged %d partial records into sections: %s",
        len(records),
        ", ".join(merged.present_sections()) or "none",
    )
    return merged
