from dataclasses import dataclass

from report_kit.chunking.chunking import DEFAULT_CHARS_PER_TOKEN, DEFAULT_MAX_TOKENS
from report_kit.merging.merger import FINDINGS_LIMIT


@dataclass(frozen=True)
class PipelineConfig:
    """Tunables for one report run.

    Immutable. Explicit. No magic defaults from environment.
    """

    # Stays well under the extraction model's context window.
    max_chunk_tokens: int = DEFAULT_MAX_TOKENS
    chars_per_token: int = DEFAULT_CHARS_PER_TOKEN
    findings_limit: int = FINDINGS_LIMIT
    default_library_name: str = "Unknown Library"

    def __post_init__(self) -> None:
        if self.max_chunk_tokens <= 0:
            raise ValueError("max_chunk_tokens must be > 0")
        if self.chars_per_token <= 0:
            raise ValueError("chars_per_token must be > 0")
        if self.findings_limit < 0:
            raise ValueError("findings_limit must be >= 0")
