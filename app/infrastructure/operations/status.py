"""Operation status enumeration.

Classifies the outcome of calls into external collaborators (mail
transport) so failures can be reported uniformly.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Failure that may clear up later (network, 4xx SMTP reply)
        PERMANENT_ERROR: Failure that will not clear up (rejected recipient, 5xx reply)
        UNAUTHORIZED: Credentials rejected by the remote side
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
