"""Text generation providers.

Concrete backends are imported on first use so that a missing SDK or
credential only fails the request that needs it.
"""

import logging
from typing import Callable, Optional

from guide_pipeline.agents.providers.base import LLMProvider
from guide_pipeline.config import GeneratorConfig
from guide_pipeline.orchestrator.errors import ProviderConfigurationError

logger = logging.getLogger(__name__)


def _gemini() -> type:
    from guide_pipeline.agents.providers.gemini_provider import GeminiProvider
    return GeminiProvider


def _openai() -> type:
    from guide_pipeline.agents.providers.openai_provider import OpenAIProvider
    return OpenAIProvider


def _anthropic() -> type:
    from guide_pipeline.agents.providers.anthropic_provider import AnthropicProvider
    return AnthropicProvider


PROVIDERS: dict[str, Callable[[], type]] = {
    "gemini": _gemini,
    "openai": _openai,
    "anthropic": _anthropic,
}


def available_providers() -> list[str]:
    """List registered provider names."""
    return list(PROVIDERS)


def create_provider(config: Optional[GeneratorConfig] = None) -> LLMProvider:
    """
    Build the provider named in config.

    Raises:
        ProviderConfigurationError: unknown provider, SDK not installed,
            or credential missing
    """
    config = config or GeneratorConfig.from_env()
    loader = PROVIDERS.get(config.provider)
    if loader is None:
        raise ProviderConfigurationError(
            f"Unknown provider: {config.provider} "
            f"(expected one of: {', '.join(PROVIDERS)})",
            provider=config.provider,
        )

    try:
        provider_cls = loader()
    except ImportError as e:
        raise ProviderConfigurationError(
            f"SDK for provider '{config.provider}' is not installed: {e}",
            provider=config.provider,
        ) from e

    logger.info(f"Initializing provider: {config.provider} ({config.resolved_model})")
    return provider_cls(
        model=config.resolved_model,
        timeout=config.request_timeout,
        max_output_tokens=config.max_output_tokens,
        temperature=config.temperature,
    )


__all__ = ["LLMProvider", "PROVIDERS", "available_providers", "create_provider"]
