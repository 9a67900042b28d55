"""Tests for Gemini provider."""

import asyncio
import pytest
import httpx
from unittest.mock import AsyncMock, Mock, patch


def _provider(**kwargs):
    from guide_pipeline.agents.providers.gemini_provider import GeminiProvider

    return GeminiProvider(api_key="test-key", **kwargs)


def test_gemini_provider_has_correct_name():
    provider = _provider()
    assert provider.name == "gemini"
    assert provider.display_name == "Gemini"


def test_gemini_provider_default_model():
    provider = _provider()
    assert "gemini" in provider.model


def test_gemini_provider_reads_key_from_env(monkeypatch):
    from guide_pipeline.agents.providers.gemini_provider import GeminiProvider

    monkeypatch.setenv("GEMINI_API_KEY", "env-key")
    provider = GeminiProvider()

    assert provider.api_key == "env-key"


def test_gemini_provider_missing_key_fails_before_client(no_api_keys):
    from guide_pipeline.agents.providers.gemini_provider import GeminiProvider
    from guide_pipeline.orchestrator.errors import ProviderConfigurationError

    with patch("guide_pipeline.agents.providers.gemini_provider.genai") as mock_genai:
        with pytest.raises(ProviderConfigurationError) as exc_info:
            GeminiProvider()

    assert exc_info.value.env_var == "GEMINI_API_KEY"
    mock_genai.Client.assert_not_called()


@pytest.mark.asyncio
async def test_gemini_provider_returns_text():
    provider = _provider(temperature=0.2, max_output_tokens=1000)

    with patch.object(provider, "_client") as mock_client:
        mock_client.aio.models.generate_content = AsyncMock(return_value=Mock(text="  # Guide\n"))
        result = await provider.generate("prompt text")

    assert result == "# Guide"
    kwargs = mock_client.aio.models.generate_content.call_args.kwargs
    assert kwargs["contents"] == "prompt text"
    assert kwargs["model"] == provider.model
    assert kwargs["config"].temperature == 0.2
    assert kwargs["config"].max_output_tokens == 1000


@pytest.mark.asyncio
async def test_gemini_provider_empty_response_is_rejected():
    from guide_pipeline.orchestrator.errors import ProviderRejectedError

    provider = _provider()

    with patch.object(provider, "_client") as mock_client:
        mock_client.aio.models.generate_content = AsyncMock(return_value=Mock(text=None))
        with pytest.raises(ProviderRejectedError, match="empty"):
            await provider.generate("prompt")


@pytest.mark.asyncio
async def test_gemini_provider_maps_transport_errors():
    from guide_pipeline.orchestrator.errors import ProviderConnectionError

    provider = _provider()

    with patch.object(provider, "_client") as mock_client:
        mock_client.aio.models.generate_content = AsyncMock(
            side_effect=httpx.ConnectError("Name or service not known")
        )
        with pytest.raises(ProviderConnectionError):
            await provider.generate("prompt")


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [
    ConnectionResetError("Connection reset by peer"),
    OSError("Network is unreachable"),
    asyncio.TimeoutError(),
])
async def test_gemini_provider_maps_non_httpx_transport_errors(error):
    from guide_pipeline.orchestrator.errors import ErrorKind, ProviderConnectionError

    provider = _provider()

    with patch.object(provider, "_client") as mock_client:
        mock_client.aio.models.generate_content = AsyncMock(side_effect=error)
        with pytest.raises(ProviderConnectionError) as exc_info:
            await provider.generate("prompt")

    assert exc_info.value.kind == ErrorKind.CONNECTIVITY_FAILURE
    assert exc_info.value.__cause__ is error


@pytest.mark.asyncio
async def test_gemini_provider_maps_api_errors():
    from google.genai import errors as genai_errors
    from guide_pipeline.orchestrator.errors import ErrorKind, ProviderRejectedError

    provider = _provider()
    api_error = genai_errors.ClientError(
        429, {"error": {"code": 429, "message": "Quota exceeded", "status": "RESOURCE_EXHAUSTED"}}
    )

    with patch.object(provider, "_client") as mock_client:
        mock_client.aio.models.generate_content = AsyncMock(side_effect=api_error)
        with pytest.raises(ProviderRejectedError) as exc_info:
            await provider.generate("prompt")

    assert exc_info.value.kind == ErrorKind.PROVIDER_REJECTED
    assert exc_info.value.__cause__ is api_error
