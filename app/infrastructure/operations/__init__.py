"""Operation result types and status enums.

Standardized result types for calls into external collaborators, plus the
classifier that maps mail transport exceptions onto them.
"""

from infrastructure.operations.classifiers import classify_smtp_error
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_smtp_error",
]
