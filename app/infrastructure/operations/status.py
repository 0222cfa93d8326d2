"""Operation status enumeration.

Status codes for operation results, used to classify outcomes of calls to
upstream services (the AI translation client) so callers can decide whether
to retry, skip or report.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Retryable error (network, timeout, rate limit)
        PERMANENT_ERROR: Non-retryable error (bad request, unparseable reply)
        UNAUTHORIZED: Authentication or authorization failure
        NOT_FOUND: Resource not found (unknown model)
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
