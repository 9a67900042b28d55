"""OpenAI provider."""

import os
from typing import Optional

import openai
from openai import AsyncOpenAI

from guide_pipeline.agents.providers.base import LLMProvider, require_api_key
from guide_pipeline.orchestrator.errors import (
    ProviderConnectionError,
    ProviderRejectedError,
)

API_KEY_ENV = "OPENAI_API_KEY"


class OpenAIProvider(LLMProvider):
    """OpenAI-based generation provider."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gpt-4.1-mini",
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
        self._client = AsyncOpenAI(api_key=self.api_key, timeout=timeout, max_retries=0)

    @property
    def name(self) -> str:
        return "openai"

    async def generate(self, prompt: str) -> str:
        """Generate text using OpenAI chat completions."""
        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": "You are a VS Code development expert. Answer in Markdown."},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
                max_completion_tokens=self.max_output_tokens,
            )
        except openai.APIConnectionError as e:
            # includes APITimeoutError
            raise ProviderConnectionError(str(e), provider=self.name) from e
        except openai.APIError as e:
            raise ProviderRejectedError(str(e), provider=self.name) from e

        if not response.choices:
            raise ProviderRejectedError("OpenAI returned no choices", provider=self.name)
        text = (response.choices[0].message.content or "").strip()
        if not text:
            raise ProviderRejectedError("OpenAI returned an empty response", provider=self.name)
        return text
