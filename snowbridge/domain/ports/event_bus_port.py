"""
Event Bus Port

Architectural Intent:
- Abstract interface for publishing adapter notifications
- Allows decoupling of the adapter from host observers
- Subscribers register by event class or by event name (ONLINE, OFFLINE)
"""

from typing import Protocol, Callable, Awaitable, Union, runtime_checkable
from snowbridge.domain.events.event_base import DomainEvent


@runtime_checkable
class EventBusPort(Protocol):
    async def publish(self, events: list[DomainEvent]) -> None: ...

    def subscribe(
        self,
        event_type: Union[type, str],
        handler: Callable[[DomainEvent], Awaitable[None]],
    ) -> None: ...
