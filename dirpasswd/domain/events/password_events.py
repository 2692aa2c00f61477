"""Password Change Domain Events.

These events represent significant occurrences in a password change that
other parts of the system may react to (audit logging, monitoring).
Events never carry secrets.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class BaseDomainEvent:
    """Base class for all domain events.

    Attributes:
        occurred_at: When the event occurred
        username: Account the event is about
        correlation_id: Optional correlation ID for tracking
    """

    occurred_at: datetime
    username: str
    correlation_id: Optional[str]

    def __post_init__(self):
        """Ensure occurred_at is timezone-aware."""
        if not self.occurred_at.tzinfo:
            object.__setattr__(self, 'occurred_at',
                               self.occurred_at.replace(tzinfo=timezone.utc))


@dataclass(frozen=True)
class PasswordChangedEvent(BaseDomainEvent):
    """Event published when a directory record's password was changed.

    Attributes:
        auth_name: Identity that authorized the change
        change_method: "self_service" or "elevated"
        node_location: Node the record lives in
    """

    auth_name: str
    change_method: str = "self_service"
    node_location: Optional[str] = None

    @classmethod
    def create(
        cls,
        username: str,
        auth_name: str,
        change_method: str = "self_service",
        node_location: Optional[str] = None,
        correlation_id: Optional[str] = None,
    ) -> 'PasswordChangedEvent':
        """Create password change event with current timestamp."""
        return cls(
            occurred_at=datetime.now(timezone.utc),
            username=username,
            correlation_id=correlation_id,
            auth_name=auth_name,
            change_method=change_method,
            node_location=node_location,
        )


@dataclass(frozen=True)
class PasswordChangeFailedEvent(BaseDomainEvent):
    """Event published when the directory rejected a password change.

    Attributes:
        auth_name: Identity that attempted to authorize the change
        change_method: "self_service" or "elevated"
        failure_reason: Description reported by the directory
    """

    auth_name: str
    change_method: str
    failure_reason: str

    @classmethod
    def create(
        cls,
        username: str,
        auth_name: str,
        change_method: str,
        failure_reason: str,
        correlation_id: Optional[str] = None,
    ) -> 'PasswordChangeFailedEvent':
        """Create failure event with current timestamp."""
        return cls(
            occurred_at=datetime.now(timezone.utc),
            username=username,
            correlation_id=correlation_id,
            auth_name=auth_name,
            change_method=change_method,
            failure_reason=failure_reason,
        )
