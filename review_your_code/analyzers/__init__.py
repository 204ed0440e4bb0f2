"""
Analyzers package for ReviewYourCode.

Contains the prompt builder and the model response extractor.
"""

from review_your_code.analyzers.prompt_builder import (
    build_generation_prompt,
    build_prompt,
    build_review_prompt,
)
from review_your_code.analyzers.response_extractor import (
    extract_json,
    find_json_span,
    parse_generation_result,
    parse_review_result,
)

__all__ = [
    "build_generation_prompt",
    "build_prompt",
    "build_review_prompt",
    "extract_json",
    "find_json_span",
    "parse_generation_result",
    "parse_review_result",
]
