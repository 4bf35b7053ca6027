"""
Event Bus Infrastructure

Architectural Intent:
- In-memory event bus delivering adapter notifications to host observers
- Supports async subscription handlers
- Handlers subscribe by event class or by event name (e.g. "ONLINE")
- A failing handler is logged and does not stop later handlers or the publisher
"""

import logging
from typing import Callable, Awaitable, Union
from snowbridge.domain.events.event_base import DomainEvent

logger = logging.getLogger(__name__)

Handler = Callable[[DomainEvent], Awaitable[None]]


class EventBus:
    def __init__(self) -> None:
        self._handlers: dict[Union[type, str], list[Handler]] = {}

    async def publish(self, events: list[DomainEvent]) -> None:
        for event in events:
            handlers = self._handlers.get(type(event), []) + self._handlers.get(
                event.event_name, []
            )
            if not handlers:
                logger.debug("No subscribers for %s", event.event_name)
            for handler in handlers:
                try:
                    await handler(event)
                except Exception:
                    logger.exception(
                        "Subscriber %r failed handling %s", handler, event.event_name
                    )

    def subscribe(self, event_type: Union[type, str], handler: Handler) -> None:
        if event_type not in self._handlers:
            self._handlers[event_type] = []
        self._handlers[event_type].append(handler)
