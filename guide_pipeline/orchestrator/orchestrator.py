"""Guide Generator - coordinates classification, prompting and generation."""

import logging
import time
from datetime import date as date_type
from typing import TYPE_CHECKING, Optional

from guide_pipeline.agents.classifier import classify
from guide_pipeline.agents.classifier_types import GenerationRequest, GenerationResult
from guide_pipeline.agents.prompt_builder import assemble_document, build_prompt
from guide_pipeline.config import PROVIDER_LABELS, GeneratorConfig
from guide_pipeline.orchestrator.errors import (
    ConfigurationError,
    ErrorKind,
    GenerationError,
    GuideError,
    ProviderConfigurationError,
)
from guide_pipeline.orchestrator.logging import GuideLogger

if TYPE_CHECKING:
    from guide_pipeline.agents.providers.base import LLMProvider

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed to generate content with AI. Please try again later."


class GuideGenerator:
    """
    Generates VS Code development guides from a project purpose.

    Flow:
    1. Classify the purpose into a ProjectType
    2. Build header and provider prompt
    3. Call the provider (once, no retry)
    4. Wrap the provider output with header and footer

    The provider is created on first use unless one is injected.
    """

    def __init__(
        self,
        provider: Optional["LLMProvider"] = None,
        config: Optional[GeneratorConfig] = None,
        guide_logger: Optional[GuideLogger] = None,
    ):
        self.config = config
        self.provider = provider
        self.logger = guide_logger or GuideLogger()

        # Lazy initialization of the default provider
        self._provider_initialized = provider is not None

    def _get_provider(self) -> "LLMProvider":
        """Get or initialize the provider."""
        if not self._provider_initialized:
            from guide_pipeline.agents.providers import create_provider

            self.config = self.config or GeneratorConfig.from_env()
            self.provider = create_provider(self.config)
            self._provider_initialized = True
        return self.provider

    def _provider_name(self) -> str:
        """Provider name for logs, even if the provider failed to build."""
        if self.provider is not None:
            return self.provider.name
        if self.config is not None:
            return self.config.provider
        return "unknown"

    def _display_name(self) -> str:
        """Provider name for user-facing messages."""
        if self.provider is not None:
            return self.provider.display_name
        name = self._provider_name()
        return PROVIDER_LABELS.get(name, name.capitalize())

    async def generate_instructions(
        self,
        purpose: str,
        today: Optional[date_type] = None,
    ) -> GenerationResult:
        """
        Generate a guide document for a project purpose.

        Args:
            purpose: Free-text project description
            today: Generation date (defaults to the current date)

        Returns:
            GenerationResult with the full document

        Raises:
            GenerationError: any failure, with a user-facing message and
                the ErrorKind of the underlying cause
        """
        request = GenerationRequest(purpose, today or date_type.today())
        project_type = classify(request.purpose)
        spec = build_prompt(request.purpose, project_type, request.requested_at)

        self.logger.generation_started(request.purpose, project_type.value)
        started = time.monotonic()

        try:
            provider = self._get_provider()
            self.logger.provider_called(provider.name, len(spec.body_prompt))
            generated = await provider.generate(spec.body_prompt)
        except Exception as e:
            error = self._to_generation_error(e)
            self.logger.error(self._provider_name(), error.kind.value, str(error))
            raise error from e

        content = assemble_document(spec, generated)
        self.logger.generation_complete(
            provider.name, time.monotonic() - started, len(content)
        )
        return GenerationResult(
            content=content,
            project_type=project_type,
            provider=provider.name,
        )

    def _to_generation_error(self, error: Exception) -> GenerationError:
        """Translate a failure into a single user-facing error."""
        kind = error.kind if isinstance(error, GuideError) else ErrorKind.UNCLASSIFIED
        label = self._display_name()

        if kind == ErrorKind.CONFIGURATION_MISSING:
            env_var = getattr(error, "env_var", None)
            if isinstance(error, ConfigurationError):
                message = f"Invalid configuration: {error}. Fix {env_var} in your .env file."
            elif isinstance(error, ProviderConfigurationError) and env_var:
                message = f"{label} API key not found. Please define {env_var} in your .env file."
            else:
                message = f"{label} provider is not configured: {error}"
        elif kind == ErrorKind.CONNECTIVITY_FAILURE:
            message = f"Could not connect to {label} API. Please check your internet connection."
        elif str(error):
            message = f"Failed to generate content with AI: {error}"
        else:
            message = GENERIC_FAILURE

        logger.debug("Generation failure detail", exc_info=error)
        return GenerationError(message, kind)


async def generate_copilot_instructions(
    purpose: str,
    provider: Optional["LLMProvider"] = None,
) -> str:
    """Generate a guide and return only the document text."""
    result = await GuideGenerator(provider=provider).generate_instructions(purpose)
    return result.content
