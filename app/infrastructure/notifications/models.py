"""Notification models.

Features compose the message, infrastructure delivers it. A
NotificationRequest is transient: it is built, handed to the dispatcher
and dropped.

Uses Pydantic BaseModel for:
- RFC 5322 compliant email validation (EmailStr)
- Runtime input validation
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, EmailStr, field_validator


class NotificationStatus(Enum):
    """Notification delivery status."""

    SENT = "sent"
    FAILED = "failed"


class Recipient(BaseModel):
    """Notification recipient.

    Attributes:
        email: Recipient address (validated with EmailStr)
        display_name: Optional name shown in the To header
    """

    email: EmailStr
    display_name: Optional[str] = None


class NotificationRequest(BaseModel):
    """A fully composed, ready-to-send email.

    Attributes:
        recipient: Who receives the message
        subject: Subject line
        text_body: Plain text body (required)
        html_body: HTML alternative body

    Example:
        request = NotificationRequest(
            recipient=Recipient(email="admin@example.com"),
            subject="Self Registration with Keycloak",
            text_body="Hi Admin, ...",
            html_body="<h3>Hi Admin,</h3>...",
        )
    """

    recipient: Recipient
    subject: str
    text_body: str
    html_body: Optional[str] = None

    @field_validator("text_body")
    @classmethod
    def validate_text_body(cls, v: str) -> str:
        """Ensure the plain text body is not empty."""
        if not v or not v.strip():
            raise ValueError("Notification body cannot be empty")
        return v


class NotificationResult(BaseModel):
    """Outcome of one delivery attempt.

    Attributes:
        request: The request that was sent
        transport: Transport name used (e.g. "smtp")
        status: SENT or FAILED
        message: Human-readable result message
        error_code: Machine error code for failures
    """

    request: NotificationRequest
    transport: str
    status: NotificationStatus
    message: str
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """Check if delivery was successful."""
        return self.status == NotificationStatus.SENT
