"""Error classifiers for mail transport exceptions.

Converts ``smtplib`` and socket exceptions into standardized
OperationResult objects so the notification dispatcher can log a single,
uniform diagnostic line regardless of where delivery failed.

Usage:
    from infrastructure.operations.classifiers import classify_smtp_error

    try:
        client.send_message(message)
    except (smtplib.SMTPException, OSError) as exc:
        return classify_smtp_error(exc)
"""

import smtplib
import socket
from typing import Optional

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus


def _reply_code(exc: Exception) -> Optional[int]:
    code = getattr(exc, "smtp_code", None)
    return code if isinstance(code, int) else None


def classify_smtp_error(exc: Exception) -> OperationResult:
    """Classify an SMTP delivery exception into an OperationResult.

    Mapping:
    - SMTPAuthenticationError: UNAUTHORIZED
    - SMTPRecipientsRefused / SMTPSenderRefused: PERMANENT_ERROR
    - SMTPServerDisconnected, SMTPConnectError, timeouts, OSError: TRANSIENT_ERROR
    - Other SMTPResponseException: 4xx is transient, 5xx is permanent
    - Other SMTPException: PERMANENT_ERROR
    - Anything else: PERMANENT_ERROR

    Args:
        exc: Exception raised while talking to the SMTP server.

    Returns:
        OperationResult describing the failure.
    """
    if isinstance(exc, smtplib.SMTPAuthenticationError):
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            f"SMTP authentication failed: {exc}",
            error_code="SMTP_AUTH_FAILED",
        )

    if isinstance(exc, smtplib.SMTPRecipientsRefused):
        refused = ", ".join(sorted(exc.recipients)) or "unknown"
        return OperationResult.permanent_error(
            f"SMTP server refused recipient(s): {refused}",
            error_code="SMTP_RECIPIENT_REFUSED",
        )

    if isinstance(exc, smtplib.SMTPSenderRefused):
        return OperationResult.permanent_error(
            f"SMTP server refused sender {exc.sender}",
            error_code="SMTP_SENDER_REFUSED",
        )

    if isinstance(exc, (smtplib.SMTPServerDisconnected, smtplib.SMTPConnectError)):
        return OperationResult.transient_error(
            f"SMTP connection error: {exc}",
            error_code="SMTP_CONNECTION_ERROR",
        )

    code = _reply_code(exc)
    if code is not None:
        if 400 <= code < 500:
            return OperationResult.transient_error(
                f"SMTP temporary failure ({code}): {exc}",
                error_code=f"SMTP_{code}",
            )
        return OperationResult.permanent_error(
            f"SMTP permanent failure ({code}): {exc}",
            error_code=f"SMTP_{code}",
        )

    # SMTPException subclasses OSError; keep protocol errors out of the
    # connection bucket below
    if isinstance(exc, smtplib.SMTPException):
        return OperationResult.permanent_error(
            f"SMTP error: {type(exc).__name__}: {exc}",
            error_code="SMTP_ERROR",
        )

    if isinstance(exc, (socket.timeout, OSError)):
        return OperationResult.transient_error(
            f"Connection error: {type(exc).__name__}: {exc}",
            error_code="CONNECTION_ERROR",
        )

    return OperationResult.permanent_error(
        f"Unexpected mail error: {type(exc).__name__}: {exc}",
        error_code="UNKNOWN_ERROR",
    )
