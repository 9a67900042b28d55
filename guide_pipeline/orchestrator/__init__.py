"""Guide generation orchestrator package."""

from guide_pipeline.orchestrator.orchestrator import (
    GuideGenerator,
    generate_copilot_instructions,
)
from guide_pipeline.orchestrator.errors import (
    ErrorKind,
    GuideError,
    ConfigurationError,
    GenerationError,
    ProviderError,
    ProviderConfigurationError,
    ProviderConnectionError,
    ProviderRejectedError,
)

__all__ = [
    "GuideGenerator",
    "generate_copilot_instructions",
    "ErrorKind",
    "GuideError",
    "ConfigurationError",
    "GenerationError",
    "ProviderError",
    "ProviderConfigurationError",
    "ProviderConnectionError",
    "ProviderRejectedError",
]
