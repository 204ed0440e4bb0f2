"""
Gemini Service for ReviewYourCode.

Sends a prompt to the Gemini generateContent endpoint and returns the raw
reply text. One request per call: no retries, no caching.
"""

import logging
from typing import Any, Optional

import httpx

from review_your_code.config import (
    GEMINI_KEY_PLACEHOLDER,
    get_settings,
    read_gemini_api_key,
)
from review_your_code.exceptions import (
    ConfigurationError,
    GatewayError,
    MalformedResponse,
)


class GeminiService:
    """
    Gemini generative-language API client.

    The credential travels as the ``key`` query parameter; sampling
    parameters come from settings and only the output token cap varies
    per call.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        api_url: Optional[str] = None,
    ) -> None:
        """
        Initialize the Gemini Service.

        Args:
            api_key: Gemini API key. Read fresh from the environment if not provided.
            model: Model name. Uses settings if not provided.
            api_url: API base URL. Uses settings if not provided.
        """
        self._logger = logging.getLogger("review_your_code.gemini_service")
        settings = get_settings()

        self._api_key = api_key or read_gemini_api_key()
        self._model = model or settings.gemini_model
        self._api_url = (api_url or settings.gemini_api_url).rstrip("/")

        self._temperature = settings.gemini_temperature
        self._top_k = settings.gemini_top_k
        self._top_p = settings.gemini_top_p
        self._json_mode = settings.gemini_json_mode
        self._timeout = settings.gemini_timeout

    @property
    def is_configured(self) -> bool:
        """Check if a Gemini credential is available."""
        return bool(self._api_key and self._api_key != GEMINI_KEY_PLACEHOLDER)

    @property
    def endpoint(self) -> str:
        """The generateContent URL for the configured model."""
        return f"{self._api_url}/models/{self._model}:generateContent"

    def generation_config(self, max_output_tokens: int) -> dict[str, Any]:
        """
        Build the generationConfig block.

        Args:
            max_output_tokens: Output token cap for this call.

        Returns:
            Dictionary ready to embed in the request body.
        """
        config: dict[str, Any] = {
            "temperature": self._temperature,
            "topK": self._top_k,
            "topP": self._top_p,
            "maxOutputTokens": max_output_tokens,
        }
        if self._json_mode:
            config["responseMimeType"] = "application/json"
        return config

    def build_body(self, prompt: str, max_output_tokens: int) -> dict[str, Any]:
        """Build the JSON request body for a prompt."""
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": self.generation_config(max_output_tokens),
        }

    async def generate_content(self, prompt: str, max_output_tokens: int) -> str:
        """
        Send a prompt and return the model's reply text.

        Args:
            prompt: Prompt text.
            max_output_tokens: Output token cap for this call.

        Returns:
            Text found at ``candidates[0].content.parts[0].text``.

        Raises:
            ConfigurationError: If no credential is configured.
            GatewayError: On a non-success status or a transport failure.
            MalformedResponse: If the reply lacks the expected content path.
        """
        if not self.is_configured:
            raise ConfigurationError()

        self._logger.debug(
            f"Calling Gemini model {self._model} (maxOutputTokens={max_output_tokens})"
        )

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            try:
                response = await client.post(
                    self.endpoint,
                    params={"key": self._api_key},
                    headers={"Content-Type": "application/json"},
                    json=self.build_body(prompt, max_output_tokens),
                )
            except httpx.HTTPError as e:
                self._logger.error(f"Request to Gemini failed: {e}")
                raise GatewayError(None, str(e)) from e

        if not response.is_success:
            self._logger.error(f"Gemini API error: {response.status_code} {response.text}")
            raise GatewayError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            self._logger.error(f"Gemini returned a non-JSON body: {response.text}")
            raise MalformedResponse() from e

        return self._extract_text(data)

    def _extract_text(self, data: Any) -> str:
        """Pull candidates[0].content.parts[0].text out of a decoded reply."""
        candidates = data.get("candidates") if isinstance(data, dict) else None
        if not candidates or not isinstance(candidates, list):
            self._logger.error(f"Invalid Gemini response: {data}")
            raise MalformedResponse()

        content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
        if not content:
            self._logger.error(f"Invalid Gemini response: {data}")
            raise MalformedResponse()

        try:
            text = content["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            self._logger.error(f"Gemini response has no text part: {data}")
            raise MalformedResponse() from e

        if not isinstance(text, str):
            raise MalformedResponse()
        return text
