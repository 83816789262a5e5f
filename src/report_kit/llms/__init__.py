# src/report_kit/llms/__init__.py

"""LLM client layer for report_kit.

Provides a thin, stateless abstraction over LLM providers.

Design principles:
- Stateless: Every call receives full message list
- Transport only: Retries only on network/rate-limit errors, off by default
- No behavior: No loops, no prompt fixing, no "smart" retries
- No leakage: Provider objects never escape the adapter

Example:
    >>> from report_kit.llms import create_llm_client, LLMConfig, Message, Role
    >>>
    >>> config = LLMConfig(provider="anthropic", model="claude-sonnet-4-20250514")
    >>> client = create_llm_client(config)
    >>>
    >>> response = await client.complete(
    ...     messages=[Message(role=Role.USER, content="Hello!")]
    ... )
    >>> print(response.content)
"""

from .base import LLMClient, LLMResponse, Message, Role, Usage
from .config import LLMConfig
from .factory import create_llm_client, resolve_api_key

__all__ = [
    # Factory
    "create_llm_client",
    "resolve_api_key",
    # Protocol
    "LLMClient",
    # Config
    "LLMConfig",
    # Types
    "Message",
    "Role",
    "LLMResponse",
    "Usage",
]
