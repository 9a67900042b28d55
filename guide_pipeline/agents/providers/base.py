"""Abstract base class for text generation providers."""

from abc import ABC, abstractmethod

from guide_pipeline.config import PROVIDER_LABELS
from guide_pipeline.orchestrator.errors import ProviderConfigurationError


class LLMProvider(ABC):
    """Abstract base class for text generation providers."""

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """
        Generate text for a prompt.

        Args:
            prompt: Full instruction prompt, passed through verbatim

        Returns:
            Generated text

        Raises:
            ProviderConfigurationError: credential or SDK missing
            ProviderConnectionError: provider unreachable or timed out
            ProviderRejectedError: provider returned an error or no text
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name for logging (e.g., 'gemini', 'openai')."""
        pass

    @property
    def display_name(self) -> str:
        """Human-readable provider name for user-facing messages."""
        return PROVIDER_LABELS.get(self.name, self.name.capitalize())


def require_api_key(api_key, env_var: str, provider: str) -> str:
    """Return api_key or raise a configuration error naming env_var."""
    if not api_key:
        raise ProviderConfigurationError(
            f"{env_var} is not set",
            provider=provider,
            env_var=env_var,
        )
    return api_key
