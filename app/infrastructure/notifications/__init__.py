"""Operator notification delivery.

Provides best-effort email delivery with failure isolation:
- Pydantic-validated request/recipient models
- Pluggable mail transports (SMTP by default)
- Failures logged to the event log, never raised

Usage:
    from infrastructure.notifications import (
        NotificationDispatcher,
        NotificationRequest,
        Recipient,
        SmtpMailTransport,
    )

    request = NotificationRequest(
        recipient=Recipient(email="admin@example.com"),
        subject="Self Registration with Keycloak",
        text_body="Hi Admin, ...",
    )
    result = dispatcher.dispatch(request, smtp_config=realm.smtp_config)
"""

from infrastructure.notifications.channels.base import MailTransport
from infrastructure.notifications.channels.email import SmtpMailTransport
from infrastructure.notifications.dispatcher import NotificationDispatcher
from infrastructure.notifications.models import (
    NotificationRequest,
    NotificationResult,
    NotificationStatus,
    Recipient,
)

__all__ = [
    "MailTransport",
    "NotificationDispatcher",
    "NotificationRequest",
    "NotificationResult",
    "NotificationStatus",
    "Recipient",
    "SmtpMailTransport",
]
