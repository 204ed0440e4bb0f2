"""
Pydantic schemas for ReviewYourCode.

Defines the request and result models shared by the UI session and the
serverless review handler.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class Language(str, Enum):
    """Languages the assistant can review and generate."""

    CPP = "cpp"
    JAVA = "java"
    PYTHON = "python"
    JAVASCRIPT = "javascript"
    CSHARP = "csharp"
    GO = "go"
    RUST = "rust"
    TYPESCRIPT = "typescript"

    @property
    def label(self) -> str:
        """Human readable name shown in the language picker."""
        return LANGUAGE_LABELS[self]

    @classmethod
    def parse(cls, value: Any) -> "Language":
        """
        Resolve a language tag, accepting common aliases.

        Args:
            value: Tag such as "python", "py" or "C++".

        Returns:
            The matching Language.

        Raises:
            ValueError: If the tag is not supported.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Unsupported language: {value!r}")
        normalized = value.lower().strip()
        return cls(LANGUAGE_ALIASES.get(normalized, normalized))


LANGUAGE_LABELS = {
    Language.CPP: "C++",
    Language.JAVA: "Java",
    Language.PYTHON: "Python",
    Language.JAVASCRIPT: "JavaScript",
    Language.CSHARP: "C#",
    Language.GO: "Go",
    Language.RUST: "Rust",
    Language.TYPESCRIPT: "TypeScript",
}

LANGUAGE_ALIASES = {
    "c++": "cpp",
    "py": "python",
    "js": "javascript",
    "ts": "typescript",
    "c#": "csharp",
    "cs": "csharp",
    "golang": "go",
    "rs": "rust",
}


class Mode(str, Enum):
    """What the user asked the assistant to do."""

    REVIEW = "review"
    GENERATE = "generate"


class IssueType(str, Enum):
    """Kind of a review issue."""

    ERROR = "error"
    WARNING = "warning"
    SUGGESTION = "suggestion"


class Severity(str, Enum):
    """Severity levels for review issues."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Issue(BaseModel):
    """
    A single problem reported by the model.

    Attributes:
        kind: Issue kind, serialized as ``type``.
        message: Description of the issue.
        line: Optional 1-based line number.
        severity: Severity of the issue.
    """

    kind: IssueType = Field(..., alias="type", description="Issue kind")
    message: str = Field(..., description="Issue description")
    line: Optional[int] = Field(None, ge=1, description="Line number, if identified")
    severity: Severity = Field(..., description="Severity level")

    @field_validator("kind", "severity", mode="before")
    @classmethod
    def normalize_enum(cls, v: Any) -> Any:
        """Accept enum values in any case."""
        if isinstance(v, str):
            return v.lower().strip()
        return v

    class Config:
        """Pydantic model configuration."""

        populate_by_name = True
        json_schema_extra = {
            "example": {
                "type": "warning",
                "message": "Loop variable shadows the outer scope",
                "line": 12,
                "severity": "medium",
            }
        }


class ReviewResult(BaseModel):
    """
    Structured code review returned by the model.

    Attributes:
        overall_score: Score from 1 to 10.
        issues: Ordered list of issues.
        suggestions: Improvement suggestions.
        positive_points: What is good about the code.
        summary: Overall summary.
    """

    overall_score: int = Field(..., ge=1, le=10, description="Overall score (1-10)")
    issues: list[Issue] = Field(default_factory=list, description="Issues found")
    suggestions: list[str] = Field(default_factory=list, description="Improvement suggestions")
    positive_points: list[str] = Field(default_factory=list, description="Positive aspects")
    summary: str = Field(default="", description="Overall summary")

    @field_validator("overall_score", mode="before")
    @classmethod
    def round_score(cls, v: Any) -> Any:
        """Round fractional scores to the nearest integer."""
        if isinstance(v, float):
            return round(v)
        return v

    @field_validator("issues", "suggestions", "positive_points", mode="before")
    @classmethod
    def list_or_empty(cls, v: Any) -> Any:
        """Treat a null list as empty."""
        return [] if v is None else v

    @field_validator("summary", mode="before")
    @classmethod
    def summary_or_empty(cls, v: Any) -> Any:
        """Treat a null summary as empty."""
        return "" if v is None else v

    @property
    def high_count(self) -> int:
        """Count of high severity issues."""
        return sum(1 for i in self.issues if i.severity == Severity.HIGH)

    @property
    def issues_by_type(self) -> dict[str, list[Issue]]:
        """Group issues by kind."""
        result: dict[str, list[Issue]] = {t.value: [] for t in IssueType}
        for issue in self.issues:
            result[issue.kind.value].append(issue)
        return result

    class Config:
        """Pydantic model configuration."""

        json_schema_extra = {
            "example": {
                "overall_score": 7,
                "issues": [],
                "suggestions": ["Add type annotations"],
                "positive_points": ["Concise"],
                "summary": "Small, readable function.",
            }
        }


class GenerationResult(BaseModel):
    """
    Generated code returned by the model.

    Attributes:
        code: Complete source code.
        explanation: How the code works.
        features: Implemented features.
        usage_notes: How to run it, dependencies, caveats.
    """

    code: str = Field(..., description="Generated source code")
    explanation: str = Field(default="", description="Explanation of the code")
    features: list[str] = Field(default_factory=list, description="Implemented features")
    usage_notes: list[str] = Field(default_factory=list, description="Usage notes")

    @field_validator("features", "usage_notes", mode="before")
    @classmethod
    def list_or_empty(cls, v: Any) -> Any:
        """Treat a null list as empty."""
        return [] if v is None else v

    @field_validator("explanation", mode="before")
    @classmethod
    def explanation_or_empty(cls, v: Any) -> Any:
        """Treat a null explanation as empty."""
        return "" if v is None else v


class ReviewRequest(BaseModel):
    """
    A request to review a piece of code.

    Emptiness of ``code`` is checked by the assistant service, not here.
    """

    code: str = Field(default="", description="Code to review")
    language: Language = Field(default=Language.CPP, description="Programming language")
    error_description: str = Field(default="", description="Problem the user is seeing")

    @field_validator("language", mode="before")
    @classmethod
    def normalize_language(cls, v: Any) -> Language:
        """Normalize language identifier."""
        return Language.parse(v)

    class Config:
        """Pydantic model configuration."""

        frozen = True
        json_schema_extra = {
            "example": {
                "code": "function f(){return 1}",
                "language": "javascript",
                "error_description": "",
            }
        }


class GenerationRequest(BaseModel):
    """A request to generate code from a description."""

    description: str = Field(default="", description="What the code should do")
    language: Language = Field(default=Language.CPP, description="Programming language")

    @field_validator("language", mode="before")
    @classmethod
    def normalize_language(cls, v: Any) -> Language:
        """Normalize language identifier."""
        return Language.parse(v)

    class Config:
        """Pydantic model configuration."""

        frozen = True


class AssistantOutcome(BaseModel):
    """Exactly one of a review, a generated program, or an error message."""

    review: Optional[ReviewResult] = None
    generated_code: Optional[GenerationResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        """True when the action produced a result."""
        return self.error is None


class ErrorResponse(BaseModel):
    """Error body returned by the review handler on failure."""

    error: str = Field(..., description="Error summary")
    details: str = Field(..., description="Failure message")
