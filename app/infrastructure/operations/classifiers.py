"""Error classifiers for upstream exceptions.

Converts exceptions raised by the OpenAI SDK into standardized
OperationResult objects so the translation workflow can log a failed batch
and move on.

Usage:
    from infrastructure.operations.classifiers import classify_openai_error

    try:
        reply = client.translate_batch(strings, "en", "es")
    except Exception as exc:
        result = classify_openai_error(exc)
"""

import openai

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

DEFAULT_RETRY_AFTER = 60


def _retry_after(exc: openai.APIStatusError) -> int:
    response = getattr(exc, "response", None)
    headers = getattr(response, "headers", None) or {}
    header_value = headers.get("retry-after")
    if header_value:
        try:
            return int(float(header_value))
        except (ValueError, TypeError):
            pass
    return DEFAULT_RETRY_AFTER


def classify_openai_error(exc: Exception) -> OperationResult:
    """Classify OpenAI SDK errors into OperationResult.

    Status Mapping:
    - Connection errors and timeouts → TRANSIENT_ERROR
    - 429 rate limiting → TRANSIENT_ERROR with retry_after
    - 401 / 403 → UNAUTHORIZED
    - 404 (unknown model) → NOT_FOUND
    - 5xx → TRANSIENT_ERROR
    - Other 4xx and unknown errors → PERMANENT_ERROR

    Args:
        exc: Exception raised while calling the translation model

    Returns:
        OperationResult with appropriate status, message and error_code
    """
    if isinstance(exc, openai.APITimeoutError):
        return OperationResult.transient_error(
            "OpenAI request timed out", error_code="TIMEOUT"
        )

    if isinstance(exc, openai.APIConnectionError):
        return OperationResult.transient_error(
            f"Connection error: {exc}", error_code="CONNECTION_ERROR"
        )

    if isinstance(exc, openai.APIStatusError):
        status_code = exc.status_code

        if status_code == 429:
            return OperationResult.transient_error(
                "OpenAI rate limited",
                error_code="RATE_LIMITED",
                retry_after=_retry_after(exc),
            )

        if status_code in (401, 403):
            return OperationResult.error(
                OperationStatus.UNAUTHORIZED,
                f"OpenAI rejected the credentials ({status_code})",
                error_code="UNAUTHORIZED",
            )

        if status_code == 404:
            return OperationResult.error(
                OperationStatus.NOT_FOUND,
                f"OpenAI resource not found: {exc}",
                error_code="NOT_FOUND",
            )

        if 500 <= status_code < 600:
            return OperationResult.transient_error(
                f"OpenAI server error ({status_code})", error_code="SERVER_ERROR"
            )

        return OperationResult.permanent_error(
            f"OpenAI client error ({status_code}): {exc}", error_code="HTTP_ERROR"
        )

    return OperationResult.permanent_error(
        f"Translation error: {type(exc).__name__}: {exc}",
        error_code="UNKNOWN_ERROR",
    )
