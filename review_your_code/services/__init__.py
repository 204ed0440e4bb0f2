"""
Services package for ReviewYourCode.

Contains the Gemini client and the request orchestration service.
"""

from review_your_code.services.assistant_service import AssistantService
from review_your_code.services.gemini_service import GeminiService

__all__ = [
    "AssistantService",
    "GeminiService",
]
