"""Shared test helpers."""

import asyncio

import pytest

from guide_pipeline.agents.providers.base import LLMProvider


class StubProvider(LLMProvider):
    """Provider that returns canned text or raises a canned error."""

    def __init__(self, response="## Setup\n\nInstall the recommended extensions.", error=None):
        self.response = response
        self.error = error
        self.prompts = []

    @property
    def name(self):
        return "stub"

    async def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


class BlockingProvider(LLMProvider):
    """Provider whose call never finishes until cancelled."""

    def __init__(self):
        self.started = asyncio.Event()
        self.cancelled = False

    @property
    def name(self):
        return "blocking"

    async def generate(self, prompt):
        self.started.set()
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.cancelled = True
            raise


@pytest.fixture
def stub_provider():
    return StubProvider()


@pytest.fixture
def no_api_keys(monkeypatch):
    for var in ("GEMINI_API_KEY", "OPENAI_API_KEY", "ANTHROPIC_API_KEY", "GUIDE_PROVIDER", "GUIDE_MODEL"):
        monkeypatch.delenv(var, raising=False)
