"""Event listener entry points invoked by the host platform.

Each call is an independent unit of work: filter, render and record the
line, then (for REGISTER only) run the registration reaction. The provider
keeps no state between calls besides its immutable exclusion
configuration, so the host may call it from many threads at once.
"""

from typing import Optional

from infrastructure.events import AdminEvent, EventLogSink, EventType, UserEvent
from infrastructure.logging import bind_event_context, get_module_logger
from modules.event_listener.filters import ExclusionConfiguration
from modules.event_listener.registration import RegistrationReaction
from modules.event_listener.renderer import render

logger = get_module_logger()


class EventListenerProvider:
    """Event sink for user events and admin events.

    Args:
        exclusions: Event kinds and admin operations to drop
        sink: Event log receiving one line per processed event
        registration: Reaction run for REGISTER events; None disables it
    """

    def __init__(
        self,
        exclusions: ExclusionConfiguration,
        sink: EventLogSink,
        registration: Optional[RegistrationReaction] = None,
    ):
        self.exclusions = exclusions
        self.sink = sink
        self.registration = registration

    def on_user_event(self, event: UserEvent) -> None:
        if not self.exclusions.accepts_event(event.type):
            return

        with bind_event_context(
            correlation_id=event.id,
            event_kind=event.type.value,
            realm_id=event.realm_id,
        ):
            self.sink.record(render(event))

            if event.type is EventType.REGISTER and self.registration is not None:
                self._react_to_registration(event)

    def on_admin_event(
        self, event: AdminEvent, include_representation: bool = False
    ) -> None:
        """Record an admin event.

        ``include_representation`` is accepted for compatibility with the
        host's listener interface; the representation is never rendered.
        """
        if not self.exclusions.accepts_admin_operation(event.operation_type):
            return

        with bind_event_context(
            correlation_id=event.id,
            event_kind=event.operation_type.value,
            realm_id=event.auth_details.realm_id,
        ):
            self.sink.record(render(event))

    def close(self) -> None:
        """Release resources. The provider holds none."""

    def _react_to_registration(self, event: UserEvent) -> None:
        try:
            self.registration.react(event)
        except Exception as e:
            logger.exception(
                "registration_reaction_failed",
                user_id=event.user_id,
                error=str(e),
            )
