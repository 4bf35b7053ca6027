"""
Domain Events Module

Architectural Intent:
- Base class for notifications raised by the adapter
- Events are immutable and capture significant domain occurrences
- Events are dispatched to host observers via the event bus
"""

from dataclasses import dataclass, field
from datetime import datetime, UTC
from typing import Any, ClassVar


@dataclass(frozen=True)
class DomainEvent:
    name: ClassVar[str] = ""

    occurred_at: str = field(
        default_factory=lambda: datetime.now(UTC).isoformat(), init=False, repr=False
    )
    aggregate_id: str = ""

    @property
    def event_name(self) -> str:
        return self.name or self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        return {
            "aggregate_id": self.aggregate_id,
            "occurred_at": self.occurred_at,
            "event_type": self.event_name,
        }
