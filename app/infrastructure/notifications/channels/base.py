"""Mail transport abstract base class."""

from abc import ABC, abstractmethod
from typing import Optional

from infrastructure.identity.models import SmtpConfig
from infrastructure.notifications.models import Recipient
from infrastructure.operations import OperationResult


class MailTransport(ABC):
    """Abstract base class for mail transports.

    A transport accepts a fully composed message and either delivers it or
    reports why it could not. Implementations must return an
    OperationResult with an error status rather than raising; the
    dispatcher still guards against transports that raise anyway.

    Example Implementation:
        class RecordingTransport(MailTransport):

            @property
            def transport_name(self) -> str:
                return "recording"

            def send(self, smtp_config, recipient, subject, text_body, html_body=None):
                self.sent.append((recipient.email, subject))
                return OperationResult.success(message="recorded")
    """

    @property
    @abstractmethod
    def transport_name(self) -> str:
        """Transport identifier used in results and logs."""

    @abstractmethod
    def send(
        self,
        smtp_config: SmtpConfig,
        recipient: Recipient,
        subject: str,
        text_body: str,
        html_body: Optional[str] = None,
    ) -> OperationResult:
        """Deliver one message.

        Args:
            smtp_config: Outgoing mail configuration of the realm
            recipient: Message recipient
            subject: Subject line
            text_body: Plain text body
            html_body: Optional HTML alternative

        Returns:
            OperationResult, SUCCESS when the server accepted the message
        """
