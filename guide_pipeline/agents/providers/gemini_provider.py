"""Google Gemini provider."""

import asyncio
import os
from typing import Optional

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from guide_pipeline.agents.providers.base import LLMProvider, require_api_key
from guide_pipeline.orchestrator.errors import (
    ProviderConnectionError,
    ProviderRejectedError,
)

API_KEY_ENV = "GEMINI_API_KEY"


class GeminiProvider(LLMProvider):
    """Gemini-based generation provider."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gemini-2.0-flash",
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

        http_options = None
        if timeout:
            # google-genai takes milliseconds
            http_options = types.HttpOptions(timeout=int(timeout * 1000))
        self._client = genai.Client(api_key=self.api_key, http_options=http_options)

    @property
    def name(self) -> str:
        return "gemini"

    async def generate(self, prompt: str) -> str:
        """Generate text using Gemini."""
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=self.temperature,
                    max_output_tokens=self.max_output_tokens,
                ),
            )
        except genai_errors.APIError as e:
            raise ProviderRejectedError(str(e), provider=self.name) from e
        except (httpx.TransportError, OSError, asyncio.TimeoutError) as e:
            # httpx by default; aiohttp transports raise OSError subclasses
            raise ProviderConnectionError(str(e), provider=self.name) from e

        text = (response.text or "").strip()
        if not text:
            raise ProviderRejectedError("Gemini returned an empty response", provider=self.name)
        return text
