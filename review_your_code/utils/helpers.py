"""
Helper utilities for ReviewYourCode.

Formatting helpers used to render review and generation results.
"""

from review_your_code.models.schemas import (
    GenerationResult,
    Issue,
    IssueType,
    Language,
    ReviewResult,
)

ISSUE_ICONS = {
    IssueType.ERROR.value: "🔴",
    IssueType.WARNING.value: "🟡",
    IssueType.SUGGESTION.value: "🔵",
}
DEFAULT_ISSUE_ICON = "⚪"


def score_color(score: int) -> str:
    """
    Map a review score to a display color.

    Args:
        score: Overall score from 1 to 10.

    Returns:
        "green" for 8 and above, "yellow" for 6 and 7, otherwise "red".
    """
    if score >= 8:
        return "green"
    if score >= 6:
        return "yellow"
    return "red"


def score_label(score: int) -> str:
    """Map a review score to its verdict."""
    if score >= 8:
        return "Excellent"
    if score >= 6:
        return "Good"
    return "Needs Work"


def issue_icon(issue_type: IssueType | str) -> str:
    """Return the marker shown next to an issue of the given type."""
    value = issue_type.value if isinstance(issue_type, IssueType) else str(issue_type)
    return ISSUE_ICONS.get(value.lower(), DEFAULT_ISSUE_ICON)


def code_stats(code: str) -> tuple[int, int]:
    """
    Count characters and lines of an input box.

    Args:
        code: Text of the input.

    Returns:
        (characters, lines). An empty input counts as one line.
    """
    return len(code), len(code.split("\n"))


def format_issue_markdown(issue: Issue) -> str:
    """Format a single issue as a Markdown list item."""
    md = f"- {issue_icon(issue.kind)} **{issue.kind.value.upper()}** ({issue.severity.value})"
    if issue.line is not None:
        md += f" line {issue.line}"
    md += f": {issue.message}"
    return md


def format_review_markdown(result: ReviewResult) -> str:
    """
    Format a review as Markdown.

    Empty sections are left out.

    Args:
        result: The review to format.

    Returns:
        Markdown-formatted string.
    """
    score = result.overall_score
    parts = [
        f"### Overall Score: {score}/10 ({score_label(score)})",
        f"**Summary:** {result.summary}" if result.summary else "",
    ]

    if result.issues:
        parts.append("#### Issues Found")
        parts.extend(format_issue_markdown(issue) for issue in result.issues)

    if result.positive_points:
        parts.append("#### What's Good")
        parts.extend(f"- {point}" for point in result.positive_points)

    if result.suggestions:
        parts.append("#### Suggestions")
        parts.extend(f"- {suggestion}" for suggestion in result.suggestions)

    return "\n\n".join(part for part in parts if part) + "\n"


def format_generation_markdown(result: GenerationResult, language: Language | str) -> str:
    """
    Format generated code as Markdown.

    Args:
        result: The generation result.
        language: Language used to label the code fence.

    Returns:
        Markdown-formatted string.
    """
    tag = Language.parse(language).value
    parts = [f"```{tag}\n{result.code}\n```"]

    if result.explanation:
        parts.append(f"**Explanation:** {result.explanation}")

    if result.features:
        parts.append("#### Features")
        parts.extend(f"- {feature}" for feature in result.features)

    if result.usage_notes:
        parts.append("#### Usage Notes")
        parts.extend(f"- {note}" for note in result.usage_notes)

    return "\n\n".join(parts) + "\n"
