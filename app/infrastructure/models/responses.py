"""Standard API response wrappers for consistent response formatting.

Every API endpoint returns either an ``APIResponse`` envelope or, on
failure, an ``ErrorResponse``.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Generic API response wrapper.

    Attributes:
        success: Whether the operation succeeded
        data: Response payload (type variable, can be any type)
        message: Optional human-readable message
        error_code: Optional machine-readable error code

    Example:
        >>> response = APIResponse(success=True, data={"filesGenerated": 4})
        >>> response.model_dump_json()
        '{"success":true,"data":{"filesGenerated":4},...'
    """

    success: bool = Field(..., description="Whether the operation succeeded")
    data: T | None = Field(default=None, description="Response payload (type variable)")
    message: str | None = Field(
        default=None, description="Optional human-readable message"
    )
    error_code: str | None = Field(
        default=None, description="Optional machine-readable error code"
    )


class ErrorResponse(BaseModel):
    """Standard error response wrapper.

    Attributes:
        success: Always False for error responses
        error: Human-readable error message
        error_code: Machine-readable error code for error handling
        details: Optional additional error details (e.g., validation errors)

    Example:
        >>> error = ErrorResponse(
        ...     error='Translation key "app_title" not found',
        ...     error_code="KEY_NOT_FOUND",
        ... )
    """

    success: bool = Field(default=False, description="Always False for error responses")
    error: str = Field(..., description="Human-readable error message")
    error_code: str = Field(..., description="Machine-readable error code")
    details: dict[str, Any] | None = Field(
        default=None, description="Optional additional error details"
    )
