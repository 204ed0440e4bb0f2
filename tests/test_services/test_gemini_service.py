"""
Tests for Gemini Service.

Tests the generateContent request contract and error mapping.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from review_your_code.config import Settings
from review_your_code.exceptions import ConfigurationError, GatewayError, MalformedResponse
from review_your_code.services.gemini_service import GeminiService


def gemini_body(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def _patched_client(mock_client: MagicMock, **post_kwargs) -> AsyncMock:
    post = AsyncMock(**post_kwargs)
    mock_client.return_value.__aenter__.return_value.post = post
    return post


class TestGeminiService:
    """Tests for GeminiService class."""

    def test_init(self):
        """Test GeminiService initialization."""
        service = GeminiService(api_key="test-key", model="gemini-test")

        assert service.is_configured is True
        assert service.endpoint == (
            "https://generativelanguage.googleapis.com/v1beta/models/gemini-test:generateContent"
        )

    def test_init_without_key(self):
        """Test initialization without a credential."""
        with patch(
            "review_your_code.services.gemini_service.read_gemini_api_key", return_value=""
        ):
            service = GeminiService()

        assert service.is_configured is False

    def test_init_with_placeholder_key(self):
        """Test the placeholder credential is not accepted."""
        assert GeminiService(api_key="your_gemini_api_key_here").is_configured is False

    def test_api_url_trailing_slash(self):
        """Test the base URL is normalized."""
        service = GeminiService(api_key="k", model="m", api_url="http://localhost:9000/v1/")
        assert service.endpoint == "http://localhost:9000/v1/models/m:generateContent"

    def test_generation_config(self):
        """Test fixed sampling parameters and the per-call token cap."""
        with patch("review_your_code.services.gemini_service.get_settings") as mock_settings:
            mock_settings.return_value = Settings(_env_file=None, gemini_api_key="k")
            service = GeminiService()

        assert service.generation_config(2048) == {
            "temperature": 0.7,
            "topK": 40,
            "topP": 0.95,
            "maxOutputTokens": 2048,
        }

    def test_generation_config_json_mode(self):
        """Test structured output mode adds the response MIME type."""
        with patch("review_your_code.services.gemini_service.get_settings") as mock_settings:
            mock_settings.return_value = Settings(
                _env_file=None, gemini_api_key="k", gemini_json_mode=True
            )
            service = GeminiService()

        assert service.generation_config(10)["responseMimeType"] == "application/json"

    def test_build_body(self):
        """Test the request body shape."""
        body = GeminiService(api_key="k").build_body("hello", 4096)

        assert body["contents"] == [{"parts": [{"text": "hello"}]}]
        assert body["generationConfig"]["maxOutputTokens"] == 4096

    @pytest.mark.asyncio
    async def test_generate_content_not_configured(self):
        """Test a missing credential fails before any request."""
        service = GeminiService(api_key="your_gemini_api_key_here")

        with patch("httpx.AsyncClient") as mock_client:
            with pytest.raises(ConfigurationError):
                await service.generate_content("prompt", 100)

        mock_client.assert_not_called()

    @pytest.mark.asyncio
    async def test_generate_content_success(self):
        """Test the reply text is returned and the request is shaped correctly."""
        service = GeminiService(api_key="test-key", model="gemini-test")

        with patch("httpx.AsyncClient") as mock_client:
            post = _patched_client(
                mock_client, return_value=httpx.Response(200, json=gemini_body("{\"a\": 1}"))
            )
            result = await service.generate_content("review this", 2048)

        assert result == '{"a": 1}'
        post.assert_awaited_once()
        args, kwargs = post.call_args
        assert args[0].endswith("/models/gemini-test:generateContent")
        assert kwargs["params"] == {"key": "test-key"}
        assert kwargs["json"]["contents"][0]["parts"][0]["text"] == "review this"
        assert kwargs["json"]["generationConfig"]["maxOutputTokens"] == 2048

    @pytest.mark.asyncio
    async def test_generate_content_http_error(self):
        """Test a non-success status raises GatewayError with status and body."""
        service = GeminiService(api_key="test-key")

        with patch("httpx.AsyncClient") as mock_client:
            _patched_client(
                mock_client, return_value=httpx.Response(429, text="quota exceeded")
            )
            with pytest.raises(GatewayError) as exc_info:
                await service.generate_content("prompt", 100)

        assert exc_info.value.status_code == 429
        assert exc_info.value.body == "quota exceeded"
        assert str(exc_info.value) == "Gemini API error: 429 - quota exceeded"

    @pytest.mark.asyncio
    async def test_generate_content_transport_error(self):
        """Test a transport failure raises GatewayError without a status."""
        service = GeminiService(api_key="test-key")

        with patch("httpx.AsyncClient") as mock_client:
            _patched_client(mock_client, side_effect=httpx.ConnectError("connection refused"))
            with pytest.raises(GatewayError) as exc_info:
                await service.generate_content("prompt", 100)

        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"candidates": []},
            {"candidates": [{}]},
            {"candidates": [{"finishReason": "SAFETY"}]},
            {"candidates": [{"content": {"parts": []}}]},
            {"candidates": [{"content": {"role": "model"}}]},
        ],
    )
    async def test_generate_content_malformed(self, body):
        """Test a missing content path raises MalformedResponse."""
        service = GeminiService(api_key="test-key")

        with patch("httpx.AsyncClient") as mock_client:
            _patched_client(mock_client, return_value=httpx.Response(200, json=body))
            with pytest.raises(MalformedResponse, match="Invalid response from Gemini API"):
                await service.generate_content("prompt", 100)

    @pytest.mark.asyncio
    async def test_generate_content_non_json_body(self):
        """Test a successful but non-JSON body raises MalformedResponse."""
        service = GeminiService(api_key="test-key")

        with patch("httpx.AsyncClient") as mock_client:
            _patched_client(mock_client, return_value=httpx.Response(200, text="<html>"))
            with pytest.raises(MalformedResponse):
                await service.generate_content("prompt", 100)

    @pytest.mark.asyncio
    async def test_single_attempt(self):
        """Test failures are not retried."""
        service = GeminiService(api_key="test-key")

        with patch("httpx.AsyncClient") as mock_client:
            post = _patched_client(mock_client, return_value=httpx.Response(500, text="boom"))
            with pytest.raises(GatewayError):
                await service.generate_content("prompt", 100)

        assert post.await_count == 1
