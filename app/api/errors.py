"""Exception handlers mapping translation errors to HTTP responses.

Every handled failure is returned as an ``ErrorResponse`` envelope:

- ``KeyNotFoundError`` -> 404
- ``UnknownLanguageError``, ``MissingMasterValueError``,
  ``ConfigurationError``, ``TranslationClientNotConfiguredError`` and
  request validation failures -> 400
- any other ``TranslationsError`` -> 500
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from infrastructure.logging import get_module_logger
from infrastructure.models import ErrorResponse
from modules.translations.errors import (
    ConfigurationError,
    KeyNotFoundError,
    MissingMasterValueError,
    TranslationClientNotConfiguredError,
    TranslationsError,
    UnknownLanguageError,
)

logger = get_module_logger()

BAD_REQUEST_ERRORS = (
    UnknownLanguageError,
    MissingMasterValueError,
    ConfigurationError,
    TranslationClientNotConfiguredError,
)


def status_code_for(exc: TranslationsError) -> int:
    if isinstance(exc, KeyNotFoundError):
        return 404
    if isinstance(exc, BAD_REQUEST_ERRORS):
        return 400
    return 500


def error_response(status_code: int, error: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error.model_dump())


async def translations_error_handler(
    request: Request, exc: TranslationsError
) -> JSONResponse:
    status_code = status_code_for(exc)
    log = logger.error if status_code >= 500 else logger.warning
    log(
        "request_failed",
        path=request.url.path,
        status_code=status_code,
        error_code=exc.error_code,
        error=str(exc),
    )
    return error_response(
        status_code, ErrorResponse(error=str(exc), error_code=exc.error_code)
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning("request_validation_failed", path=request.url.path)
    return error_response(
        400,
        ErrorResponse(
            error="Invalid request",
            error_code="VALIDATION_ERROR",
            details={"errors": jsonable_encoder(exc.errors())},
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the translation error handlers on ``app``."""
    app.add_exception_handler(TranslationsError, translations_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
