"""Realm and account models.

Normalized views of the identity platform's realms and user accounts, as
far as the event sink needs them: an identifier, an email address, an
enabled flag and the realm's outgoing mail configuration.
"""

from typing import Optional

from pydantic import BaseModel, Field


class SmtpConfig(BaseModel):
    """Outgoing mail server configuration of a realm."""

    host: str = Field(default="localhost", description="SMTP server host")
    port: int = Field(default=25, description="SMTP server port")
    from_address: str = Field(default="", description="Envelope/From address")
    from_display_name: Optional[str] = Field(
        default=None, description="Display name shown next to the From address"
    )
    reply_to: Optional[str] = Field(default=None, description="Reply-To address")
    ssl: bool = Field(default=False, description="Connect with implicit TLS")
    starttls: bool = Field(default=False, description="Upgrade with STARTTLS")
    auth: bool = Field(default=False, description="Authenticate with user/password")
    user: Optional[str] = None
    password: Optional[str] = None
    timeout_seconds: float = Field(default=10.0, description="Socket timeout")


class Realm(BaseModel):
    """Tenant boundary in the identity platform."""

    id: str = Field(..., description="Opaque realm identifier")
    name: str = Field(default="", description="Human-readable realm name")
    smtp_config: SmtpConfig = Field(default_factory=SmtpConfig)


class Account(BaseModel):
    """User account within a realm.

    Only ``email`` and ``enabled`` are read or written by the event sink;
    the other fields identify the account.
    """

    id: str = Field(..., description="Opaque user identifier")
    realm_id: str = Field(..., description="Realm the account belongs to")
    username: str = Field(default="", description="Login name")
    email: Optional[str] = Field(default=None, description="Account email address")
    enabled: bool = Field(default=True, description="Whether the account can log in")
