# src/report_kit/parsers/base.py

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO


class TextExtractor(ABC):
    @abstractmethod
    def extract(self, source: bytes | str | Path | BinaryIO) -> str:
        """
        Extract the plain-text content of a document in reading order.

        Requirements:
        - Deterministic output for same input
        - Pure transform, no side effects
        - Raises ExtractionError when no text can be recovered
        """
        raise NotImplementedError
