"""Provider factory used by the host's plugin lifecycle.

The host calls ``init`` once at startup, ``create`` whenever it needs a
listener (typically once per session), and ``close`` at shutdown.

Usage:
    factory = EventListenerProviderFactory()
    factory.init()
    provider = factory.create(account_store, SmtpMailTransport())
    provider.on_user_event(event)
"""

from typing import Optional

from infrastructure.configuration import Settings
from infrastructure.events import EventLogSink
from infrastructure.identity import AccountStore
from infrastructure.logging import get_module_logger
from infrastructure.notifications import MailTransport, NotificationDispatcher
from infrastructure.services import get_settings
from modules.event_listener.filters import ExclusionConfiguration
from modules.event_listener.provider import EventListenerProvider
from modules.event_listener.registration import RegistrationReaction

logger = get_module_logger()

PROVIDER_ID = "sysout"


class EventListenerProviderFactory:
    """Builds EventListenerProvider instances from settings."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings
        self._exclusions: Optional[ExclusionConfiguration] = None

    def get_id(self) -> str:
        return PROVIDER_ID

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    def init(self) -> None:
        """Read the exclusion sets once; they stay fixed afterwards."""
        self._exclusions = ExclusionConfiguration.from_settings(self.settings.listener)
        logger.info(
            "event_listener_initialized",
            provider_id=PROVIDER_ID,
            excluded_events=sorted(e.value for e in self._exclusions.excluded_events),
            excluded_admin_operations=sorted(
                o.value for o in self._exclusions.excluded_admin_operations
            ),
        )

    def create(
        self,
        account_store: AccountStore,
        transport: MailTransport,
        sink: Optional[EventLogSink] = None,
    ) -> EventListenerProvider:
        """Create a provider wired to the given collaborators.

        Args:
            account_store: Realm/account lookup and mutation
            transport: Mail transport for operator notifications
            sink: Event log; a structlog-backed sink by default

        Returns:
            EventListenerProvider sharing this factory's exclusions
        """
        if self._exclusions is None:
            self.init()

        sink = sink or EventLogSink()
        registration = RegistrationReaction(
            account_store=account_store,
            dispatcher=NotificationDispatcher(transport=transport, sink=sink),
            operator_email=self.settings.notifications.OPERATOR_EMAIL,
            console_base_url=self.settings.notifications.ADMIN_CONSOLE_BASE_URL,
        )
        return EventListenerProvider(
            exclusions=self._exclusions,
            sink=sink,
            registration=registration,
        )

    def close(self) -> None:
        """Shut down the factory. Nothing to release."""
