"""Shared fixtures for the event sink test suite."""

from threading import Lock
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest
import structlog

from infrastructure.events import (
    AdminEvent,
    AuthDetails,
    EventLogSink,
    EventType,
    OperationType,
    UserEvent,
)
from infrastructure.identity import Account, InMemoryAccountStore, Realm, SmtpConfig
from infrastructure.notifications import MailTransport, Recipient
from infrastructure.operations import OperationResult


class RecordingSink(EventLogSink):
    """Event log that keeps lines in memory. Thread-safe."""

    def __init__(self):
        self._lock = Lock()
        self.lines: List[str] = []
        self.failures: List[Dict[str, Any]] = []

    def record(self, line: str) -> None:
        with self._lock:
            self.lines.append(line)

    def record_failure(self, message: str, **context: Any) -> None:
        with self._lock:
            self.failures.append({"message": message, **context})


class RecordingTransport(MailTransport):
    """Mail transport that records sends and returns a configurable outcome."""

    def __init__(self, outcome: Optional[OperationResult] = None):
        self._lock = Lock()
        self.outcome = outcome or OperationResult.success(message="Sent")
        self.sent: List[Dict[str, Any]] = []

    @property
    def transport_name(self) -> str:
        return "recording"

    def send(
        self,
        smtp_config: SmtpConfig,
        recipient: Recipient,
        subject: str,
        text_body: str,
        html_body: Optional[str] = None,
    ) -> OperationResult:
        with self._lock:
            self.sent.append(
                {
                    "smtp_config": smtp_config,
                    "recipient": recipient.email,
                    "subject": subject,
                    "text_body": text_body,
                    "html_body": html_body,
                }
            )
        return self.outcome


@pytest.fixture(autouse=True)
def clean_log_context():
    """Start and end every test with empty structlog context variables."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def user_event_factory():
    """Factory for creating UserEvent instances."""

    def _factory(
        type: EventType = EventType.LOGIN,
        realm_id: Optional[str] = "master",
        client_id: Optional[str] = "account",
        user_id: Optional[str] = "user-1",
        ip_address: Optional[str] = "10.0.0.1",
        error: Optional[str] = None,
        details: Optional[Dict[str, Optional[str]]] = None,
        id: Optional[str] = None,
    ):
        return UserEvent(
            type=type,
            realm_id=realm_id,
            client_id=client_id,
            user_id=user_id,
            ip_address=ip_address,
            error=error,
            details=details or {},
            id=id,
        )

    return _factory


@pytest.fixture
def admin_event_factory():
    """Factory for creating AdminEvent instances."""

    def _factory(
        operation_type: OperationType = OperationType.CREATE,
        realm_id: Optional[str] = "master",
        client_id: Optional[str] = "admin-cli",
        user_id: Optional[str] = "admin-1",
        ip_address: Optional[str] = "127.0.0.1",
        resource_path: Optional[str] = "users/user-1",
        error: Optional[str] = None,
        representation: Optional[str] = None,
    ):
        return AdminEvent(
            operation_type=operation_type,
            auth_details=AuthDetails(
                realm_id=realm_id,
                client_id=client_id,
                user_id=user_id,
                ip_address=ip_address,
            ),
            resource_path=resource_path,
            error=error,
            representation=representation,
        )

    return _factory


@pytest.fixture
def smtp_config():
    """Realm SMTP configuration pointing at a fake server."""
    return SmtpConfig(
        host="smtp.example.com",
        port=587,
        from_address="noreply@example.com",
        from_display_name="Identity Platform",
        starttls=True,
    )


@pytest.fixture
def account_store(smtp_config):
    """In-memory store with realm 'master' and one enabled account 'user-1'."""
    store = InMemoryAccountStore()
    store.add_realm(Realm(id="master", name="Master", smtp_config=smtp_config))
    store.add_account(
        Account(
            id="user-1",
            realm_id="master",
            username="new.user",
            email="new.user@example.com",
        )
    )
    return store


@pytest.fixture
def recording_sink():
    return RecordingSink()


@pytest.fixture
def recording_transport():
    return RecordingTransport()


@pytest.fixture
def mock_sink():
    """MagicMock event log sink."""
    return MagicMock(spec=EventLogSink)


@pytest.fixture
def mock_transport():
    """MagicMock mail transport returning success."""
    transport = MagicMock(spec=MailTransport)
    transport.transport_name = "smtp"
    transport.send.return_value = OperationResult.success(message="Sent")
    return transport
