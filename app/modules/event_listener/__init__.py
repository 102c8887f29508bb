"""Identity event listener.

Receives user and admin events from the identity platform, drops the
kinds configured as excluded, writes one canonical line per remaining
event to the event log, and puts newly self-registered accounts behind an
operator approval gate (account disabled + operator emailed).

Usage:
    from modules.event_listener import EventListenerProviderFactory

    factory = EventListenerProviderFactory()
    factory.init()
    provider = factory.create(account_store, SmtpMailTransport())

    provider.on_user_event(UserEvent(type=EventType.LOGIN, realm_id="master"))
"""

from modules.event_listener.factory import PROVIDER_ID, EventListenerProviderFactory
from modules.event_listener.filters import ExclusionConfiguration, should_process
from modules.event_listener.provider import EventListenerProvider
from modules.event_listener.registration import (
    REGISTRATION_SUBJECT,
    RegistrationReaction,
    build_account_link,
    build_registration_notification,
)
from modules.event_listener.renderer import NULL_MARKER, render

__all__ = [
    "PROVIDER_ID",
    "NULL_MARKER",
    "REGISTRATION_SUBJECT",
    "EventListenerProvider",
    "EventListenerProviderFactory",
    "ExclusionConfiguration",
    "RegistrationReaction",
    "build_account_link",
    "build_registration_notification",
    "render",
    "should_process",
]
