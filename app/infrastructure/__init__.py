"""Infrastructure modules for the identity event sink.

Centralized infrastructure components:
- configuration: Settings management (Settings, EventListenerSettings, NotificationSettings)
- events: UserEvent / AdminEvent models and the event log sink
- identity: Realm / Account models and the AccountStore contract
- logging: Structured logging setup and event context binding
- notifications: Operator email delivery with failure isolation
- operations: Operation results and SMTP error classification
- services: Application-scoped providers (get_settings)
"""
