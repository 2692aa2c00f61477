"""Event Publisher Infrastructure Service.

This service provides the concrete implementation of the domain event
publishing interface. Events are written to the audit logger and kept in
memory for inspection.
"""

from typing import List

import structlog

from dirpasswd.domain.events.password_events import BaseDomainEvent
from dirpasswd.domain.interfaces.services import IEventPublisher

logger = structlog.get_logger(__name__)
audit_logger = structlog.get_logger("dirpasswd.audit")


class InMemoryEventPublisher(IEventPublisher):
    """In-memory event publisher that records events and logs them for audit."""

    def __init__(self):
        """Initialize event publisher with in-memory storage."""
        self._published_events: List[BaseDomainEvent] = []

        logger.debug("InMemoryEventPublisher initialized")

    def publish(self, event: BaseDomainEvent) -> None:
        """Publish a single domain event.

        Args:
            event: Domain event to publish
        """
        self._published_events.append(event)

        audit_logger.info(
            "Domain event published",
            event_type=type(event).__name__,
            correlation_id=event.correlation_id,
            occurred_at=event.occurred_at.isoformat(),
            change_method=getattr(event, "change_method", None),
        )

    def get_published_events(self) -> List[BaseDomainEvent]:
        """Get all published events (for testing/debugging).

        Returns:
            List of all published events
        """
        return self._published_events.copy()
