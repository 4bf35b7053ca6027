"""
Domain Events Package

Architectural Intent:
- Contains the adapter's notification events
- Events are the primary mechanism for reporting status to the host
"""

from snowbridge.domain.events.event_base import DomainEvent
from snowbridge.domain.events.adapter_events import (
    ONLINE,
    OFFLINE,
    AdapterStatusEvent,
    AdapterOnlineEvent,
    AdapterOfflineEvent,
)

__all__ = [
    "DomainEvent",
    "ONLINE",
    "OFFLINE",
    "AdapterStatusEvent",
    "AdapterOnlineEvent",
    "AdapterOfflineEvent",
]
