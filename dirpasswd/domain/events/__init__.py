"""Domain Events.

All events are immutable and represent significant occurrences in a
password change.
"""

from .password_events import (
    BaseDomainEvent,
    PasswordChangedEvent,
    PasswordChangeFailedEvent,
)

__all__ = [
    "BaseDomainEvent",
    "PasswordChangedEvent",
    "PasswordChangeFailedEvent",
]
