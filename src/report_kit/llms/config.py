# src/report_kit/llms/config.py

from dataclasses import dataclass
from typing import Literal

Provider = Literal["openai", "anthropic"]

API_KEY_ENV_VARS: dict[str, str] = {
    "anthropic": "ANTHROPIC_API_KEY",
    "openai": "OPENAI_API_KEY",
}


@dataclass(frozen=True)
class LLMConfig:
    """Configuration for LLM clients.

    Immutable. Explicit. The only environment lookup is the provider's
    API key, when `api_key` is not given.
    """

    provider: Provider
    model: str
    api_key: str | None = None
    timeout: float = 120.0
    # Transport retries per call. 0 means exactly one attempt.
    max_retries: int = 0
