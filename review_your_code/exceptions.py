"""Exceptions raised along the prompt -> gateway -> extraction pipeline."""

from typing import Optional


class AssistantError(Exception):
    """Base exception for all pipeline errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(AssistantError):
    """Required input was empty."""


class ConfigurationError(AssistantError):
    """The Gemini credential is not configured."""

    def __init__(self, message: str = "GEMINI_API_KEY not configured") -> None:
        super().__init__(message)


class GatewayError(AssistantError):
    """Gemini answered with a non-success status, or could not be reached."""

    def __init__(self, status_code: Optional[int], body: str) -> None:
        self.status_code = status_code
        self.body = body
        if status_code is None:
            message = f"Gemini API error: {body}"
        else:
            message = f"Gemini API error: {status_code} - {body}"
        super().__init__(message)


class MalformedResponse(AssistantError):
    """Gemini answered successfully but candidates[0].content is missing."""

    def __init__(self, message: str = "Invalid response from Gemini API") -> None:
        super().__init__(message)


class ExtractionError(AssistantError):
    """No brace-delimited span was found in the model reply."""

    def __init__(self, message: str = "Could not extract JSON from AI response") -> None:
        super().__init__(message)


class ParseError(AssistantError):
    """The extracted span is not valid JSON."""


class SchemaError(AssistantError):
    """The parsed JSON does not match the expected result shape."""
