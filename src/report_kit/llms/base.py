# src/report_kit/llms/base.py

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Protocol

from report_kit.observability.base import MetricsHook


class Role(str, Enum):
    """Message role in a conversation."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """A single message in the conversation.

    Immutable. Stateless. Provider-agnostic.
    """

    role: Role
    content: str


@dataclass(frozen=True)
class Usage:
    """Token usage for a completion."""

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


@dataclass(frozen=True)
class LLMResponse:
    """Normalized LLM response.

    Provider details never leak outside the adapter.
    This is the only type callers ever see.
    """

    content: str | None
    finish_reason: Literal["stop", "length", "error"]
    usage: Usage
    latency_ms: float


class LLMClient(Protocol):
    """Protocol for LLM clients.

    Design principles:
    - Stateless: Every call receives full message list
    - Transport only: Retries, if any, only on network/rate-limit errors
    - No behavior: No loops, no prompt fixing, no "smart" retries
    - No leakage: Provider objects never escape the adapter
    """

    metrics_hook: MetricsHook

    async def complete(
        self,
        *,
        messages: list[Message],
        temperature: float = 0.0,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        """Single completion. Stateless. Full message list required.

        Args:
            messages: Complete conversation history. No internal state.
            temperature: Sampling temperature (0.0 = deterministic).
            max_tokens: Maximum tokens in response.

        Returns:
            Normalized LLMResponse. Provider details never leak.

        Raises:
            Provider-specific errors once the attempt budget is spent.

        Note:
            Never retries on "bad" model output - that's the caller's problem.
        """
        ...
