"""
Pytest fixtures for ReviewYourCode tests.

Provides reusable test fixtures, mocks, and sample data.
"""

import json
from typing import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from review_your_code.config import Settings, get_settings
from review_your_code.main import app
from review_your_code.models.schemas import Issue, IssueType, ReviewResult, Severity
from review_your_code.services.assistant_service import AssistantService
from review_your_code.services.gemini_service import GeminiService


SAMPLE_JS_CODE = "function f(){return 1}"

SAMPLE_CPP_CODE = '''
#include <iostream>

int main() {
    int* data = new int[10];
    for (int i = 0; i <= 10; i++) {
        data[i] = i;
    }
    std::cout << data[3] << std::endl;
    return 0;
}
'''

SAMPLE_REVIEW_REPLY = (
    "Here is the review:\n"
    '{"overall_score":7,"issues":[],"suggestions":["add types"],'
    '"positive_points":["concise"],"summary":"ok"}'
)

SAMPLE_REVIEW_PAYLOAD = {
    "overall_score": 4,
    "issues": [
        {
            "type": "error",
            "message": "Off-by-one write past the end of the buffer",
            "line": 6,
            "severity": "high",
        },
        {
            "type": "warning",
            "message": "Memory allocated with new[] is never freed",
            "severity": "medium",
        },
    ],
    "suggestions": ["Use std::vector<int>"],
    "positive_points": ["Small and readable"],
    "summary": "Buffer overflow and a leak.",
}

SAMPLE_GENERATION_PAYLOAD = {
    "code": "def add(a, b):\n    \"\"\"Add two numbers.\"\"\"\n    return a + b\n",
    "explanation": "A function returning the sum of its arguments.",
    "features": ["Addition"],
    "usage_notes": ["Call add(1, 2)"],
}


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Make every test read settings fresh."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_js_code() -> str:
    """Provide a one-line JavaScript snippet."""
    return SAMPLE_JS_CODE


@pytest.fixture
def sample_cpp_code() -> str:
    """Provide buggy C++ code."""
    return SAMPLE_CPP_CODE


@pytest.fixture
def sample_review_reply() -> str:
    """Provide a model reply with prose before the JSON."""
    return SAMPLE_REVIEW_REPLY


@pytest.fixture
def review_reply_json() -> str:
    """Provide a fenced JSON review reply."""
    return f"```json\n{json.dumps(SAMPLE_REVIEW_PAYLOAD, indent=2)}\n```"


@pytest.fixture
def generation_reply_json() -> str:
    """Provide a JSON generation reply."""
    return json.dumps(SAMPLE_GENERATION_PAYLOAD)


@pytest.fixture
def mock_settings() -> Settings:
    """Provide settings with a test credential."""
    return Settings(
        _env_file=None,
        gemini_api_key="test-api-key",
        log_level="DEBUG",
        debug=True,
    )


@pytest.fixture
def mock_gemini_service() -> MagicMock:
    """Provide a Gemini client whose generate_content is an AsyncMock."""
    service = MagicMock(spec=GeminiService)
    service.generate_content = AsyncMock(return_value=SAMPLE_REVIEW_REPLY)
    return service


@pytest.fixture
def assistant_service(mock_gemini_service) -> AssistantService:
    """Provide an assistant service bound to the mocked Gemini client."""
    return AssistantService(gemini_service=mock_gemini_service)


@pytest.fixture
def sample_review_result() -> ReviewResult:
    """Provide a sample review result."""
    return ReviewResult(
        overall_score=6,
        issues=[
            Issue(
                kind=IssueType.ERROR,
                message="Null pointer dereference",
                line=12,
                severity=Severity.HIGH,
            ),
            Issue(
                kind=IssueType.SUGGESTION,
                message="Extract a helper",
                severity=Severity.LOW,
            ),
        ],
        suggestions=["Check for null"],
        positive_points=["Clear names"],
        summary="Mostly fine.",
    )


@pytest.fixture
def test_client() -> Generator[TestClient, None, None]:
    """Provide a test client for the review handler."""
    with TestClient(app) as client:
        yield client
