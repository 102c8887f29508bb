"""Mail transports."""

from infrastructure.notifications.channels.base import MailTransport
from infrastructure.notifications.channels.email import SmtpMailTransport

__all__ = ["MailTransport", "SmtpMailTransport"]
