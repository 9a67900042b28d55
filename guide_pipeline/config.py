# guide_pipeline/config.py
"""Configuration for guide generation."""

import os
from dataclasses import dataclass
from typing import Callable, Optional

DEFAULT_PROVIDER = "gemini"

# Provider name to default model
DEFAULT_MODELS = {
    "gemini": "gemini-2.0-flash",
    "openai": "gpt-4.1-mini",
    "anthropic": "claude-haiku-4-5-20251001",
}

PROVIDER_LABELS = {
    "gemini": "Gemini",
    "openai": "OpenAI",
    "anthropic": "Anthropic",
}


def _env_number(name: str, default, parse: Callable):
    """Parse a numeric environment variable, naming it on failure."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return parse(raw)
    except ValueError:
        # imported here: the orchestrator package imports this module
        from guide_pipeline.orchestrator.errors import ConfigurationError

        raise ConfigurationError(
            f"{name} must be a number, got '{raw}'", env_var=name
        ) from None


@dataclass
class GeneratorConfig:
    """Configuration for the guide generator."""

    provider: str = DEFAULT_PROVIDER
    model: Optional[str] = None  # None means the provider default

    # Per-request provider timeout (seconds)
    request_timeout: float = 120.0

    # Sampling
    max_output_tokens: int = 8192
    temperature: float = 0.7

    # Logging
    debug: bool = False
    enable_logging: bool = True

    @property
    def resolved_model(self) -> Optional[str]:
        """Model to request, falling back to the provider default."""
        return self.model or DEFAULT_MODELS.get(self.provider)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Create configuration from environment variables.

        Raises:
            ConfigurationError: a numeric variable does not parse
        """
        return cls(
            provider=os.environ.get("GUIDE_PROVIDER", DEFAULT_PROVIDER).lower().strip(),
            model=os.environ.get("GUIDE_MODEL") or None,
            request_timeout=_env_number("GUIDE_REQUEST_TIMEOUT_SECONDS", 120.0, float),
            max_output_tokens=_env_number("GUIDE_MAX_OUTPUT_TOKENS", 8192, int),
            temperature=_env_number("GUIDE_TEMPERATURE", 0.7, float),
            debug=os.environ.get("DEBUG", "false").lower() == "true",
            enable_logging=os.environ.get("ENABLE_LOGGING", "true").lower() == "true",
        )
