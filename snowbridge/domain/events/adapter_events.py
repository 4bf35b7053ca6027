"""
Adapter Status Events

ONLINE and OFFLINE are the two notifications the host listens for. Their
payload identifies the adapter instance that emitted them.
"""

from dataclasses import dataclass
from typing import Any

from snowbridge.domain.events.event_base import DomainEvent

ONLINE = "ONLINE"
OFFLINE = "OFFLINE"


@dataclass(frozen=True)
class AdapterStatusEvent(DomainEvent):
    @property
    def payload(self) -> dict[str, Any]:
        return {"id": self.aggregate_id}


@dataclass(frozen=True)
class AdapterOnlineEvent(AdapterStatusEvent):
    name = ONLINE


@dataclass(frozen=True)
class AdapterOfflineEvent(AdapterStatusEvent):
    name = OFFLINE
    reason: str = ""

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["reason"] = self.reason
        return data
