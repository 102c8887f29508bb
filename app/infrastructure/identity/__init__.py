"""Identity collaborators: realms, accounts and the account store.

Exports:
    AccountStore: Contract for realm/account lookup and mutation
    InMemoryAccountStore: Thread-safe dict-backed implementation
    Account, Realm, SmtpConfig: Models
"""

from infrastructure.identity.models import Account, Realm, SmtpConfig
from infrastructure.identity.store import AccountStore, InMemoryAccountStore

__all__ = [
    "Account",
    "AccountStore",
    "InMemoryAccountStore",
    "Realm",
    "SmtpConfig",
]
