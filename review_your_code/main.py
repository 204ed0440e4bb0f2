"""
Serverless review-code handler for ReviewYourCode.

A FastAPI application with a single catch-all route: POST a JSON body
``{"code": ..., "language": ...}`` and receive the ReviewResult as JSON.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from review_your_code import __version__
from review_your_code.config import get_settings, setup_logging
from review_your_code.exceptions import ValidationError
from review_your_code.models.schemas import ErrorResponse, Language, ReviewRequest
from review_your_code.services.assistant_service import AssistantService

setup_logging()
logger = logging.getLogger("review_your_code.main")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

assistant_service = AssistantService()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup and shutdown."""
    logger.info("Starting review-code handler...")
    logger.info(f"Gemini configured: {get_settings().is_gemini_configured}")

    yield

    logger.info("Shutting down review-code handler...")


app = FastAPI(
    title="ReviewYourCode review-code function",
    description="Reviews a code snippet with Gemini and returns a structured result.",
    version=__version__,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    lifespan=lifespan,
)


def _missing_input() -> PlainTextResponse:
    return PlainTextResponse(
        "Missing code or language",
        status_code=status.HTTP_400_BAD_REQUEST,
        headers=CORS_HEADERS,
    )


def _failure(exc: Exception) -> JSONResponse:
    logger.error(f"Error in review-code function: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error="Failed to review code", details=str(exc)).model_dump(),
        headers=CORS_HEADERS,
    )


@app.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
async def review_code(request: Request) -> Response:
    """
    Handle one review-code request.

    OPTIONS answers the CORS preflight, POST runs the review, every other
    method gets 405.
    """
    if request.method == "OPTIONS":
        return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)

    if request.method != "POST":
        return PlainTextResponse(
            "Method not allowed",
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            headers=CORS_HEADERS,
        )

    try:
        payload = await request.json()
        if not isinstance(payload, dict):
            raise ValueError("Request body must be a JSON object")

        code = payload.get("code")
        language = payload.get("language")
        if not code or not language or not isinstance(code, str):
            return _missing_input()

        try:
            review_request = ReviewRequest(code=code, language=Language.parse(language))
        except ValueError:
            return PlainTextResponse(
                "Unsupported language",
                status_code=status.HTTP_400_BAD_REQUEST,
                headers=CORS_HEADERS,
            )

        result = await assistant_service.review_code(review_request)

    except ValidationError:
        return _missing_input()
    except Exception as e:
        return _failure(e)

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=result.model_dump(mode="json", by_alias=True, exclude_none=True),
        headers=CORS_HEADERS,
    )


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "review_your_code.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
