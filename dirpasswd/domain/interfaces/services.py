"""Cross-cutting service interfaces."""

from abc import ABC, abstractmethod

from dirpasswd.domain.events.password_events import BaseDomainEvent


class IEventPublisher(ABC):
    """Publishes domain events for audit trails."""

    @abstractmethod
    def publish(self, event: BaseDomainEvent) -> None:
        """Publish a single domain event."""
        raise NotImplementedError
