"""
Models package for ReviewYourCode.

Contains Pydantic models for data validation and serialization.
"""

from review_your_code.models.schemas import (
    AssistantOutcome,
    ErrorResponse,
    GenerationRequest,
    GenerationResult,
    Issue,
    IssueType,
    Language,
    Mode,
    ReviewRequest,
    ReviewResult,
    Severity,
)

__all__ = [
    "AssistantOutcome",
    "ErrorResponse",
    "GenerationRequest",
    "GenerationResult",
    "Issue",
    "IssueType",
    "Language",
    "Mode",
    "ReviewRequest",
    "ReviewResult",
    "Severity",
]
