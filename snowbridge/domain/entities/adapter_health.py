"""
Adapter Health Module

Architectural Intent:
- AdapterHealth aggregate tracks the binary health signal of one adapter
- Every completed health check produces a transition and an event, even when
  the state does not change; observers rely on the repeated notification
- All state changes produce new instances, events are collected until published

Domain Events:
- AdapterOnlineEvent: Published when a health check succeeds
- AdapterOfflineEvent: Published when a health check fails for any reason
"""

from __future__ import annotations
from enum import Enum
from typing import Optional

from snowbridge.domain.events.adapter_events import (
    AdapterOnlineEvent,
    AdapterOfflineEvent,
)


class HealthState(Enum):
    ONLINE = "ONLINE"
    OFFLINE = "OFFLINE"


class AdapterHealth:
    __slots__ = (
        "_adapter_id",
        "_state",
        "_last_error",
        "_domain_events",
    )

    def __init__(
        self,
        adapter_id: str,
        state: Optional[HealthState] = None,
        last_error: Optional[str] = None,
        domain_events: tuple = (),
    ):
        self._adapter_id = adapter_id
        self._state = state
        self._last_error = last_error
        self._domain_events = domain_events

    @property
    def adapter_id(self) -> str:
        return self._adapter_id

    @property
    def state(self) -> Optional[HealthState]:
        """None until the first health check has completed."""
        return self._state

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    @property
    def domain_events(self) -> tuple:
        return self._domain_events

    @property
    def is_online(self) -> bool:
        return self._state is HealthState.ONLINE

    def mark_online(self) -> "AdapterHealth":
        return AdapterHealth(
            adapter_id=self._adapter_id,
            state=HealthState.ONLINE,
            last_error=None,
            domain_events=self._domain_events
            + (AdapterOnlineEvent(aggregate_id=self._adapter_id),),
        )

    def mark_offline(self, reason: str) -> "AdapterHealth":
        return AdapterHealth(
            adapter_id=self._adapter_id,
            state=HealthState.OFFLINE,
            last_error=reason,
            domain_events=self._domain_events
            + (AdapterOfflineEvent(aggregate_id=self._adapter_id, reason=reason),),
        )

    def clear_events(self) -> "AdapterHealth":
        return AdapterHealth(
            adapter_id=self._adapter_id,
            state=self._state,
            last_error=self._last_error,
        )

    def __repr__(self) -> str:
        state = self._state.value if self._state else "UNKNOWN"
        return f"AdapterHealth(adapter_id={self._adapter_id}, state={state})"
