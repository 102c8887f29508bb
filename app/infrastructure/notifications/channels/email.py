"""Email transport over SMTP."""

import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr, make_msgid
from typing import Optional

import structlog

from infrastructure.identity.models import SmtpConfig
from infrastructure.notifications.channels.base import MailTransport
from infrastructure.notifications.models import Recipient
from infrastructure.operations import OperationResult, classify_smtp_error

logger = structlog.get_logger()


class SmtpMailTransport(MailTransport):
    """Sends multipart (text + HTML) email through the realm's SMTP server.

    A new connection is opened per message; the server's own timeout
    (``SmtpConfig.timeout_seconds``) bounds every blocking call.
    """

    @property
    def transport_name(self) -> str:
        return "smtp"

    def send(
        self,
        smtp_config: SmtpConfig,
        recipient: Recipient,
        subject: str,
        text_body: str,
        html_body: Optional[str] = None,
    ) -> OperationResult:
        if not smtp_config.from_address:
            return OperationResult.permanent_error(
                "Realm SMTP configuration has no from address",
                error_code="SMTP_NOT_CONFIGURED",
            )

        message = self._build_message(
            smtp_config, recipient, subject, text_body, html_body
        )

        try:
            self._deliver(smtp_config, message)
        except (smtplib.SMTPException, OSError) as e:
            return classify_smtp_error(e)

        logger.info(
            "smtp_message_sent",
            recipient=recipient.email,
            subject=subject,
            host=smtp_config.host,
        )
        return OperationResult.success(
            message=f"Sent email to {recipient.email}",
            data={"message_id": message["Message-ID"]},
        )

    def _build_message(
        self,
        smtp_config: SmtpConfig,
        recipient: Recipient,
        subject: str,
        text_body: str,
        html_body: Optional[str],
    ) -> MIMEMultipart:
        message = MIMEMultipart("alternative")
        message["Subject"] = subject
        message["From"] = formataddr(
            (smtp_config.from_display_name or "", smtp_config.from_address)
        )
        message["To"] = formataddr((recipient.display_name or "", recipient.email))
        message["Message-ID"] = make_msgid()
        if smtp_config.reply_to:
            message["Reply-To"] = smtp_config.reply_to

        # Last part is the preferred one for multipart/alternative
        message.attach(MIMEText(text_body, "plain", "utf-8"))
        if html_body:
            message.attach(MIMEText(html_body, "html", "utf-8"))
        return message

    def _deliver(self, smtp_config: SmtpConfig, message: MIMEMultipart) -> None:
        smtp_class = smtplib.SMTP_SSL if smtp_config.ssl else smtplib.SMTP
        with smtp_class(
            smtp_config.host, smtp_config.port, timeout=smtp_config.timeout_seconds
        ) as client:
            if smtp_config.starttls and not smtp_config.ssl:
                client.starttls()
            if smtp_config.auth:
                client.login(smtp_config.user or "", smtp_config.password or "")
            client.send_message(message)
