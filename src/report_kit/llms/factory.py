# src/report_kit/llms/factory.py

import os

from report_kit.errors import OracleError
from report_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import LLMClient
from .config import API_KEY_ENV_VARS, LLMConfig


def resolve_api_key(config: LLMConfig) -> str:
    """Return the configured API key, falling back to the provider's env var.

    Raises:
        OracleError: If no key is available. Nothing can be extracted without one.
    """
    if config.api_key:
        return config.api_key

    env_var = API_KEY_ENV_VARS[config.provider]
    api_key = os.environ.get(env_var)
    if not api_key:
        raise OracleError(
            f"No API key for provider '{config.provider}': set {env_var} "
            "or pass api_key in LLMConfig"
        )
    return api_key


def create_llm_client(
    config: LLMConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> LLMClient:
    """Create an LLM client from config.

    Args:
        config: LLM configuration specifying provider, model, etc.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Configured LLMClient implementation.

    Raises:
        ValueError: If provider is unknown.
        OracleError: If no API key can be resolved.

    Example:
        >>> config = LLMConfig(provider="anthropic", model="claude-sonnet-4-20250514")
        >>> client = create_llm_client(config)
        >>> response = await client.complete(messages=[...])
    """
    if config.provider not in API_KEY_ENV_VARS:
        raise ValueError(f"Unknown LLM provider: {config.provider}")

    api_key = resolve_api_key(config)

    if config.provider == "openai":
        from .openai import OpenAILLMClient

        return OpenAILLMClient(
            api_key=api_key,
            model=config.model,
            timeout=config.timeout,
            max_retries=config.max_retries,
            metrics_hook=metrics_hook,
        )

    from .anthropic import AnthropicLLMClient

    return AnthropicLLMClient(
        api_key=api_key,
        model=config.model,
        timeout=config.timeout,
        max_retries=config.max_retries,
        metrics_hook=metrics_hook,
    )
