"""Best-effort notification dispatcher.

Hands a composed NotificationRequest to the mail transport and isolates
every failure: a failed delivery becomes one diagnostic line in the event
log and a FAILED NotificationResult, never an exception. There is no retry;
a failed notification is lost.

Usage Example:
    from infrastructure.events import EventLogSink
    from infrastructure.notifications import (
        NotificationDispatcher,
        SmtpMailTransport,
    )

    dispatcher = NotificationDispatcher(
        transport=SmtpMailTransport(),
        sink=EventLogSink(),
    )
    result = dispatcher.dispatch(request, smtp_config=realm.smtp_config)
"""

import structlog

from infrastructure.events.handlers.logging import EventLogSink
from infrastructure.identity.models import SmtpConfig
from infrastructure.notifications.channels.base import MailTransport
from infrastructure.notifications.models import (
    NotificationRequest,
    NotificationResult,
    NotificationStatus,
)
from infrastructure.operations import OperationResult

logger = structlog.get_logger()


class NotificationDispatcher:
    """Single-transport notification dispatcher.

    Attributes:
        transport: MailTransport used for delivery
        sink: Event log receiving one diagnostic line per failed delivery
    """

    def __init__(self, transport: MailTransport, sink: EventLogSink):
        self.transport = transport
        self.sink = sink

    def dispatch(
        self, request: NotificationRequest, smtp_config: SmtpConfig
    ) -> NotificationResult:
        """Send the request. Never raises.

        Args:
            request: Composed notification
            smtp_config: Outgoing mail configuration of the realm

        Returns:
            NotificationResult with SENT or FAILED status
        """
        try:
            outcome = self.transport.send(
                smtp_config,
                request.recipient,
                request.subject,
                request.text_body,
                request.html_body,
            )
        except Exception as e:
            outcome = OperationResult.permanent_error(
                f"{type(e).__name__}: {e}", error_code="TRANSPORT_EXCEPTION"
            )

        if outcome.is_success:
            logger.info(
                "notification_sent",
                recipient=request.recipient.email,
                subject=request.subject,
                transport=self.transport.transport_name,
            )
            return NotificationResult(
                request=request,
                transport=self.transport.transport_name,
                status=NotificationStatus.SENT,
                message=outcome.message,
            )

        self.sink.record_failure(
            f"could not send notification to {request.recipient.email}: "
            f"{outcome.message}",
            recipient=request.recipient.email,
            error_code=outcome.error_code,
            transport=self.transport.transport_name,
        )
        return NotificationResult(
            request=request,
            transport=self.transport.transport_name,
            status=NotificationStatus.FAILED,
            message=outcome.message,
            error_code=outcome.error_code,
        )
