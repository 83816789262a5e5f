# src/report_kit/extraction/parsing.py

"""Locate and validate the JSON payload inside an oracle response.

Models wrap their JSON in prose or code fences despite being told not to,
so the payload is searched for rather than assumed to be the whole text.
"""

import json
import logging
from collections.abc import Iterator
from typing import Any

from pydantic import ValidationError

from report_kit.errors import ParseError
from report_kit.records.models import PartialRecord

logger = logging.getLogger(__name__)

_decoder = json.JSONDecoder()


def iter_json_objects(text: str) -> Iterator[dict[str, Any]]:
    """Yield every JSON object that decodes from a `{` in `text`, left to right.

    Objects nested inside an already decoded object are not yielded again.
    """
    position = text.find("{")
    while position != -1:
        try:
            obj, end = _decoder.raw_decode(text, position)
        except json.JSONDecodeError:
            position = text.find("{", position + 1)
            continue
        if isinstance(obj, dict):
            yield obj
        position = text.find("{", end)


def find_payload(text: str) -> dict[str, Any]:
    """Return the first JSON object that looks like a partial report.

    An object qualifies when it is empty or carries at least one known
    section name, so a stray inner object of a broken payload is never
    mistaken for the payload itself.

    Raises:
        ParseError: If no qualifying object exists.
    """
    sections = PartialRecord.section_aliases() | set(PartialRecord.section_names())
    for obj in iter_json_objects(text):
        if not obj or sections.intersection(obj):
            return obj
    raise ParseError("No JSON report payload found in oracle response")


def _section_value(payload: dict[str, Any], section: str) -> tuple[str, Any] | None:
    alias = PartialRecord.model_fields[section].alias or section
    for key in (alias, section):
        if key in payload:
            return key, payload[key]
    return None


def _validate_section(section: str, key: str, raw: Any) -> Any:
    return getattr(PartialRecord.model_validate({key: raw}), section)


def _valid_entries(section: str, key: str, raw: list[Any]) -> list[Any] | None:
    entries = []
    for item in raw:
        try:
            entries.extend(_validate_section(section, key, [item]))
        except ValidationError:
            logger.warning("Dropping invalid %s entry: %r", key, item)
    return entries or None


def parse_partial_record(text: str) -> PartialRecord:
    """Parse an oracle response into a PartialRecord.

    Sections are validated one at a time, so a section that does not fit
    the schema is dropped without losing the others. Within a breakdown
    only the offending entries are dropped (e.g. one without a `name`).
    Unreadable numbers such as "N/A" are read as absent by the schema.

    Raises:
        ParseError: If no payload is found.
    """
    payload = find_payload(text)
    values: dict[str, Any] = {}

    for section in PartialRecord.section_names():
        found = _section_value(payload, section)
        if found is None:
            continue
        key, raw = found
        try:
            values[section] = _validate_section(section, key, raw)
        except ValidationError as exc:
            if section in PartialRecord.BREAKDOWN_SECTIONS and isinstance(raw, list):
                values[section] = _valid_entries(section, key, raw)
            else:
                logger.warning(
                    "Dropping invalid %s section: %d validation error(s)",
                    key,
                    exc.error_count(),
                )

    return PartialRecord(**values)
