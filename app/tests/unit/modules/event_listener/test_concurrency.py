"""Concurrent event handling through a single provider."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from infrastructure.events import EventType, OperationType
from infrastructure.identity import Account
from infrastructure.notifications import NotificationDispatcher
from modules.event_listener.filters import ExclusionConfiguration
from modules.event_listener.provider import EventListenerProvider
from modules.event_listener.registration import RegistrationReaction
from modules.event_listener.renderer import render

pytestmark = pytest.mark.unit

WORKERS = 8
REGISTRATIONS = 20


@pytest.fixture
def provider(account_store, recording_sink, recording_transport):
    for i in range(REGISTRATIONS):
        account_store.add_account(
            Account(
                id=f"new-{i}",
                realm_id="master",
                username=f"new{i}",
                email=f"new{i}@example.com",
            )
        )
    return EventListenerProvider(
        exclusions=ExclusionConfiguration(
            excluded_events=frozenset({EventType.CODE_TO_TOKEN}),
            excluded_admin_operations=frozenset({OperationType.ACTION}),
        ),
        sink=recording_sink,
        registration=RegistrationReaction(
            account_store=account_store,
            dispatcher=NotificationDispatcher(
                transport=recording_transport, sink=recording_sink
            ),
            operator_email="operator@example.com",
            console_base_url="https://idp.example.com/console/#/realms",
        ),
    )


def test_concurrent_events_each_produce_one_line(
    provider,
    account_store,
    recording_sink,
    recording_transport,
    user_event_factory,
    admin_event_factory,
):
    user_events = [
        user_event_factory(type=EventType.LOGIN, user_id=f"user-{i}", id=f"login-{i}")
        for i in range(50)
    ]
    user_events += [
        user_event_factory(type=EventType.CODE_TO_TOKEN, user_id=f"user-{i}")
        for i in range(50)
    ]
    user_events += [
        user_event_factory(type=EventType.REGISTER, user_id=f"new-{i}", id=f"reg-{i}")
        for i in range(REGISTRATIONS)
    ]
    admin_events = [
        admin_event_factory(operation_type=OperationType.UPDATE, resource_path=f"users/{i}")
        for i in range(30)
    ]
    admin_events += [
        admin_event_factory(operation_type=OperationType.ACTION) for _ in range(30)
    ]

    with ThreadPoolExecutor(max_workers=WORKERS) as executor:
        futures = [executor.submit(provider.on_user_event, e) for e in user_events]
        futures += [executor.submit(provider.on_admin_event, e) for e in admin_events]
        for future in futures:
            future.result()

    expected = [
        render(e) for e in user_events if e.type is not EventType.CODE_TO_TOKEN
    ] + [
        render(e) for e in admin_events if e.operation_type is not OperationType.ACTION
    ]
    assert sorted(recording_sink.lines) == sorted(expected)
    assert recording_sink.failures == []

    assert len(recording_transport.sent) == REGISTRATIONS
    for i in range(REGISTRATIONS):
        assert account_store.get_account("master", f"new-{i}").enabled is False
    assert account_store.get_account("master", "user-1").enabled is True
