"""Anthropic Claude provider."""

import os
from typing import Optional

import anthropic
from anthropic import AsyncAnthropic

from guide_pipeline.agents.providers.base import LLMProvider, require_api_key
from guide_pipeline.orchestrator.errors import (
    ProviderConnectionError,
    ProviderRejectedError,
)

API_KEY_ENV = "ANTHROPIC_API_KEY"


class AnthropicProvider(LLMProvider):
    """Anthropic Claude-based generation provider."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "claude-haiku-4-5-20251001",
        timeout: Optional[float] = None,
        max_output_tokens: int = 8192,
        temperature: float = 0.7,
    ):
        self.api_key = require_api_key(
            api_key or os.environ.get(API_KEY_ENV), API_KEY_ENV, self.name
        )
        self.model = model
        self.max_output_tokens = max_output_tokens
        self.temperature = temperature
        self._client = AsyncAnthropic(api_key=self.api_key, timeout=timeout, max_retries=0)

    @property
    def name(self) -> str:
        return "anthropic"

    async def generate(self, prompt: str) -> str:
        """Generate text using Anthropic Claude."""
        try:
            response = await self._client.messages.create(
                model=self.model,
                max_tokens=self.max_output_tokens,
                messages=[
                    {"role": "user", "content": prompt},
                ],
                system="You are a VS Code development expert. Answer in Markdown.",
                temperature=self.temperature,
            )
        except anthropic.APIConnectionError as e:
            raise ProviderConnectionError(str(e), provider=self.name) from e
        except anthropic.APIError as e:
            raise ProviderRejectedError(str(e), provider=self.name) from e

        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        ).strip()
        if not text:
            raise ProviderRejectedError("Anthropic returned an empty response", provider=self.name)
        return text
