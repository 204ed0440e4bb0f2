"""
Prompt Builder for ReviewYourCode.

Builds the single instruction string sent to Gemini for a review or a
generation request. Every function here is pure: identical inputs always
produce identical prompts.
"""

from typing import Union

from review_your_code.models.schemas import (
    GenerationRequest,
    Language,
    ReviewRequest,
)

REVIEW_SCHEMA = """{
  "overall_score": (number from 1-10),
  "issues": [
    {
      "type": "error" | "warning" | "suggestion",
      "message": "detailed description of the issue",
      "line": number (optional, if you can identify specific line),
      "severity": "high" | "medium" | "low"
    }
  ],
  "suggestions": [
    "improvement suggestion 1",
    "improvement suggestion 2"
  ],
  "positive_points": [
    "what's good about the code",
    "positive aspects"
  ],
  "summary": "overall summary of the code quality and main points"
}"""

GENERATION_SCHEMA = """{
  "code": "the complete, working code that fulfills the user's request",
  "explanation": "detailed explanation of how the code works and what it does",
  "features": [
    "feature 1 implemented",
    "feature 2 implemented"
  ],
  "usage_notes": [
    "how to run or use the code",
    "any dependencies or requirements",
    "important notes about the implementation"
  ]
}"""

REVIEW_FOCUS = """Please focus on:
- Code quality and best practices
- Performance issues
- Security vulnerabilities
- Maintainability
- Readability
- Error handling
- Code structure and organization"""

JSON_ONLY = "Provide only the JSON response, no additional text."


def _language(language: Union[Language, str]) -> Language:
    return Language.parse(language)


def build_review_prompt(
    code: str,
    language: Union[Language, str],
    error_description: str = "",
) -> str:
    """
    Build the prompt for a code review.

    The code is embedded verbatim in a fenced block labeled with the
    language tag. A non-blank ``error_description`` adds a paragraph asking
    the model to diagnose that problem first.

    Args:
        code: The code to review. Must already be checked for emptiness.
        language: Language of the code.
        error_description: Problem the user reports, may be empty.

    Returns:
        The prompt text.
    """
    tag = _language(language).value

    prompt = (
        f"You are an expert code reviewer. Please analyze the following {tag} code "
        f"and provide a comprehensive review in JSON format with the following structure:"
        f"\n\n{REVIEW_SCHEMA}\n\n{REVIEW_FOCUS}"
    )

    problem = error_description.strip()
    if problem:
        prompt += f"""

IMPORTANT: The user reports this issue with the code:
"{problem}"

Prioritize diagnosing this specific problem. Explain its cause and include targeted suggestions that resolve it in your review."""

    prompt += f"""

Here's the code to review:

```{tag}
{code}
```

{JSON_ONLY}"""

    return prompt


def build_generation_prompt(
    description: str,
    language: Union[Language, str],
) -> str:
    """
    Build the prompt for generating code from a description.

    Args:
        description: What the user wants. Must already be checked for emptiness.
        language: Target language.

    Returns:
        The prompt text.
    """
    lang = _language(language)

    return f"""You are an expert {lang.label} programmer. The user wants you to generate {lang.value} code based on their description. Please provide a response in JSON format with the following structure:

{GENERATION_SCHEMA}

User's request: "{description.strip()}"

Please generate clean, well-commented, production-ready {lang.label} code that follows best practices. Make sure the code is complete, runnable and functional.

{JSON_ONLY}"""


def build_prompt(request: Union[ReviewRequest, GenerationRequest]) -> str:
    """Build the prompt matching the request type."""
    if isinstance(request, ReviewRequest):
        return build_review_prompt(
            request.code, request.language, request.error_description
        )
    return build_generation_prompt(request.description, request.language)
