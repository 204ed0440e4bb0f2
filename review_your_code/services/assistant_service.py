"""
Assistant Service for ReviewYourCode.

Runs one user action end to end: validate input, build the prompt, call
Gemini, extract the result. Any failure stops the remaining steps.
"""

import logging
from typing import Callable, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from review_your_code.analyzers.prompt_builder import (
    build_generation_prompt,
    build_review_prompt,
)
from review_your_code.analyzers.response_extractor import (
    parse_generation_result,
    parse_review_result,
)
from review_your_code.config import get_settings
from review_your_code.exceptions import AssistantError, GatewayError, ValidationError
from review_your_code.models.schemas import (
    AssistantOutcome,
    GenerationRequest,
    GenerationResult,
    Language,
    Mode,
    ReviewRequest,
    ReviewResult,
)
from review_your_code.services.gemini_service import GeminiService

EMPTY_CODE_MESSAGE = "Please enter some code to review"
EMPTY_REQUEST_MESSAGE = "Please describe what code you want to generate"


class AssistantService:
    """
    Orchestrates review and generation requests.

    The Gemini client is built per call unless one is injected, so the
    credential is read from configuration on every invocation.
    """

    def __init__(
        self,
        gemini_service: Optional[GeminiService] = None,
        gemini_factory: Callable[[], GeminiService] = GeminiService,
    ) -> None:
        """
        Initialize the Assistant Service.

        Args:
            gemini_service: Gemini client to reuse for every call.
            gemini_factory: Builds a client per call when none is injected.
        """
        self._logger = logging.getLogger("review_your_code.assistant_service")
        self._gemini_service = gemini_service
        self._gemini_factory = gemini_factory

    def _gateway(self) -> GeminiService:
        return self._gemini_service or self._gemini_factory()

    async def review_code(self, request: ReviewRequest) -> ReviewResult:
        """
        Review a code snippet.

        Args:
            request: Code, language and optional problem description.

        Returns:
            ReviewResult parsed from the model reply.

        Raises:
            ValidationError: If the code is blank.
            AssistantError: If any later step fails.
        """
        if not request.code.strip():
            raise ValidationError(EMPTY_CODE_MESSAGE)

        self._logger.info(f"Starting {request.language.value} code review")

        prompt = build_review_prompt(
            request.code, request.language, request.error_description
        )
        reply = await self._gateway().generate_content(
            prompt, get_settings().review_max_output_tokens
        )
        result = parse_review_result(reply)

        self._logger.info(
            f"Code review completed: {len(result.issues)} issues, "
            f"score: {result.overall_score}"
        )
        return result

    async def generate_code(self, request: GenerationRequest) -> GenerationResult:
        """
        Generate code from a description.

        Args:
            request: Description and target language.

        Returns:
            GenerationResult parsed from the model reply.

        Raises:
            ValidationError: If the description is blank.
            AssistantError: If any later step fails.
        """
        if not request.description.strip():
            raise ValidationError(EMPTY_REQUEST_MESSAGE)

        self._logger.info(f"Starting {request.language.value} code generation")

        prompt = build_generation_prompt(request.description, request.language)
        reply = await self._gateway().generate_content(
            prompt, get_settings().generate_max_output_tokens
        )
        result = parse_generation_result(reply)

        self._logger.info(f"Code generation completed: {len(result.features)} features")
        return result

    async def run(
        self,
        mode: Union[Mode, str],
        *,
        code: str = "",
        language: Union[Language, str] = Language.CPP,
        error_description: str = "",
        code_request: str = "",
    ) -> AssistantOutcome:
        """
        Run one UI action and return its outcome.

        Never raises: every failure becomes the outcome's ``error`` message.

        Args:
            mode: Review or generate.
            code: Code to review (review mode).
            language: Selected language.
            error_description: Optional problem description (review mode).
            code_request: Description of the code to generate (generate mode).

        Returns:
            AssistantOutcome with exactly one of review, generated_code or error.
        """
        try:
            mode = Mode(mode)
        except ValueError:
            return AssistantOutcome(error=f"Unsupported mode: {mode}")

        verb = "review" if mode == Mode.REVIEW else "generate"

        try:
            if mode == Mode.REVIEW:
                review = await self.review_code(
                    ReviewRequest(
                        code=code,
                        language=language,
                        error_description=error_description,
                    )
                )
                return AssistantOutcome(review=review)

            generated = await self.generate_code(
                GenerationRequest(description=code_request, language=language)
            )
            return AssistantOutcome(generated_code=generated)

        except ValidationError as e:
            return AssistantOutcome(error=e.message)
        except PydanticValidationError:
            return AssistantOutcome(error=f"Unsupported language: {language}")
        except GatewayError as e:
            self._logger.error(f"Code {verb} failed: {e}", exc_info=True)
            if e.status_code is None:
                return AssistantOutcome(error=f"Failed to {verb} code: {e.body}")
            return AssistantOutcome(error=f"Failed to {verb} code: {e.status_code}")
        except AssistantError as e:
            self._logger.error(f"Code {verb} failed: {e}", exc_info=True)
            return AssistantOutcome(error=e.message)
        except Exception as e:
            self._logger.error(f"Unexpected error during code {verb}: {e}", exc_info=True)
            gerund = "reviewing" if mode == Mode.REVIEW else "generating"
            return AssistantOutcome(error=f"An error occurred while {gerund} the code")
