"""
Response Extractor for ReviewYourCode.

Recovers the JSON object from a Gemini reply that may be wrapped in prose,
markdown fences or whitespace, then validates it against the result models.
"""

import json
import logging
from typing import Any, Optional, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from review_your_code.exceptions import ExtractionError, ParseError, SchemaError
from review_your_code.models.schemas import GenerationResult, ReviewResult

logger = logging.getLogger("review_your_code.response_extractor")

ResultT = TypeVar("ResultT", bound=BaseModel)


def find_json_span(text: str) -> Optional[str]:
    """
    Return the candidate JSON span of a reply.

    The span runs from the first ``{`` to the last ``}`` after it, or to the
    end of the text when no closing brace follows. Two separate objects in
    one reply come back as a single span, which only parses if that whole
    span is valid JSON.

    Args:
        text: Raw reply text.

    Returns:
        The span, or None when the text holds no ``{`` at all.
    """
    start = text.find("{")
    if start == -1:
        return None
    end = text.rfind("}")
    if end < start:
        return text[start:]
    return text[start : end + 1]


def extract_json(text: str) -> Any:
    """
    Parse the brace-delimited span of a model reply.

    Args:
        text: Raw reply text.

    Returns:
        The decoded JSON value.

    Raises:
        ExtractionError: If the text holds no ``{``.
        ParseError: If the span is not valid JSON.
    """
    span = find_json_span(text or "")
    if span is None:
        logger.error(f"Could not extract JSON from response: {text!r}")
        raise ExtractionError()

    try:
        return json.loads(span)
    except json.JSONDecodeError as e:
        logger.warning(f"Failed to parse JSON response: {e}")
        raise ParseError(f"Invalid JSON in AI response: {e}") from e


def _validate(payload: Any, model: type[ResultT]) -> ResultT:
    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or model.__name__}: {err['msg']}"
            for err in e.errors()
        )
        logger.warning(f"AI response does not match {model.__name__}: {problems}")
        raise SchemaError(f"AI response does not match {model.__name__}: {problems}") from e


def parse_review_result(text: str) -> ReviewResult:
    """Extract and validate a ReviewResult from a model reply."""
    return _validate(extract_json(text), ReviewResult)


def parse_generation_result(text: str) -> GenerationResult:
    """Extract and validate a GenerationResult from a model reply."""
    return _validate(extract_json(text), GenerationResult)
