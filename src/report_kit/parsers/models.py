# src/report_kit/parsers/models.py

from dataclasses import dataclass


@dataclass(frozen=True)
class RawDocument:
    """Document bytes plus the reference they were fetched from.

    Lives only for the duration of one pipeline run.
    """

    content: bytes
    source: str

    def __len__(self) -> int:
        return len(self.content)
