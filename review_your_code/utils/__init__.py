"""
Utilities package for ReviewYourCode.

Contains result formatting helpers.
"""

from review_your_code.utils.helpers import (
    code_stats,
    format_generation_markdown,
    format_review_markdown,
    issue_icon,
    score_color,
    score_label,
)

__all__ = [
    "code_stats",
    "format_generation_markdown",
    "format_review_markdown",
    "issue_icon",
    "score_color",
    "score_label",
]
