"""
Interactive session state for the ReviewYourCode UI.

Holds the form fields and the single result-or-error of the last action,
independent of how the page is drawn.
"""

import logging
from typing import Optional

from review_your_code.models.schemas import (
    GenerationResult,
    Language,
    Mode,
    ReviewResult,
)
from review_your_code.services.assistant_service import AssistantService
from review_your_code.utils.helpers import code_stats


class AssistantSession:
    """
    Form state and submit logic for one user.

    At most one action runs at a time: submitting while a call is in flight
    is ignored.
    """

    def __init__(self, service: Optional[AssistantService] = None) -> None:
        self._logger = logging.getLogger("review_your_code.ui.session")
        self._service = service or AssistantService()

        self.mode: Mode = Mode.REVIEW
        self.language: Language = Language.CPP
        self.code: str = ""
        self.error_description: str = ""
        self.code_request: str = ""

        self.is_loading: bool = False
        self.review: Optional[ReviewResult] = None
        self.generated_code: Optional[GenerationResult] = None
        self.error: Optional[str] = None

    @property
    def primary_input(self) -> str:
        """The required input of the active mode."""
        return self.code if self.mode == Mode.REVIEW else self.code_request

    @property
    def can_submit(self) -> bool:
        """Whether the submit button is enabled."""
        return not self.is_loading and bool(self.primary_input.strip())

    @property
    def code_stats(self) -> tuple[int, int]:
        """Characters and lines in the code box."""
        return code_stats(self.code)

    @property
    def request_length(self) -> int:
        """Characters in the generation request box."""
        return len(self.code_request)

    @property
    def has_output(self) -> bool:
        """Whether a result or an error is being shown."""
        return any(x is not None for x in (self.review, self.generated_code, self.error))

    def switch_mode(self, mode: Mode | str) -> None:
        """Change mode and clear whatever the previous mode displayed."""
        self.mode = Mode(mode)
        self._clear_output()

    def dismiss_error(self) -> None:
        """Close the error panel."""
        self.error = None

    def _clear_output(self) -> None:
        self.error = None
        self.review = None
        self.generated_code = None

    async def submit(self) -> None:
        """Run the active mode's action and store its outcome."""
        if self.is_loading:
            self._logger.debug("Submit ignored: a request is already in flight")
            return

        self._clear_output()
        self.is_loading = True
        try:
            outcome = await self._service.run(
                self.mode,
                code=self.code,
                language=self.language,
                error_description=self.error_description,
                code_request=self.code_request,
            )
        finally:
            self.is_loading = False

        self.review = outcome.review
        self.generated_code = outcome.generated_code
        self.error = outcome.error
