"""Operation result types and status enums.

Standardized result types for upstream calls, including the status enum,
the result dataclass and the OpenAI error classifier.
"""

from infrastructure.operations.classifiers import classify_openai_error
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_openai_error",
]
