"""
ServiceNow Change Request Adapter

Architectural Intent:
- Implements ChangeRequestPort for the ServiceNow change_request table
- Wraps ServiceNowConnector with a binary health state machine
- Publishes ONLINE/OFFLINE through an injected event bus (composition, not inheritance)
- Normalizes read and create results into NormalizedChangeRecord dicts

Design Decisions:
- Each public operation issues exactly one connector call
- Errors are forwarded unchanged; only successful payloads are reshaped
- Health checks are serialized per instance so concurrent connect() calls
  cannot interleave state writes and notifications
- Callbacks receive (data, error) after the operation has completed
"""

from __future__ import annotations
import asyncio
import inspect
import logging
from typing import Any, Mapping, Optional

from snowbridge.domain.entities.adapter_health import AdapterHealth, HealthState
from snowbridge.domain.entities.change_record import (
    normalize_list_response,
    normalize_single_response,
)
from snowbridge.domain.exceptions import ConfigurationError
from snowbridge.domain.ports.change_request_port import RecordCallback
from snowbridge.domain.ports.event_bus_port import EventBusPort
from snowbridge.domain.ports.http_transport_port import HttpResponse, HttpTransportPort
from snowbridge.domain.value_objects.connection_config import ConnectionConfig
from snowbridge.domain.value_objects.outcome import Outcome
from snowbridge.infrastructure.adapters.servicenow_connector import ServiceNowConnector
from snowbridge.infrastructure.telemetry.otel_exporter import OTELExporter

logger = logging.getLogger(__name__)


def _describe_error(error: Any) -> str:
    if isinstance(error, HttpResponse):
        return f"HTTP {error.status_code} from {error.method} request"
    return str(error)


class ServiceNowAdapter:
    """ServiceNow change request adapter."""

    def __init__(
        self,
        adapter_id: str,
        connector: ServiceNowConnector,
        event_bus: EventBusPort,
        log: Optional[logging.Logger] = None,
        telemetry: Optional[OTELExporter] = None,
    ) -> None:
        self._id = adapter_id
        self._connector = connector
        self._event_bus = event_bus
        self._log = log or logger
        self._telemetry = telemetry
        self._health = AdapterHealth(adapter_id)
        self._health_lock = asyncio.Lock()

    @classmethod
    def from_properties(
        cls,
        adapter_id: str,
        properties: Mapping[str, Any],
        transport: HttpTransportPort,
        event_bus: EventBusPort,
        **kwargs: Any,
    ) -> "ServiceNowAdapter":
        """Build an adapter from the host's adapter properties.

        Accepts ``{url, auth: {username, password}, serviceNowTable}`` as
        well as flat ``username``/``password``/``table`` keys.
        """
        auth = properties.get("auth") or {}
        url = properties.get("url", "")
        if not url:
            raise ConfigurationError(f"{adapter_id}: adapter properties require 'url'")
        config = ConnectionConfig(
            url=url,
            username=auth.get("username", properties.get("username", "")),
            password=auth.get("password", properties.get("password", "")),
            table=properties.get(
                "serviceNowTable", properties.get("table", "change_request")
            ),
        )
        legacy = bool(kwargs.pop("legacy_status_match", False))
        connector = ServiceNowConnector(config, transport, legacy_status_match=legacy)
        return cls(adapter_id, connector, event_bus, **kwargs)

    @property
    def id(self) -> str:
        return self._id

    @property
    def health(self) -> AdapterHealth:
        return self._health

    @property
    def state(self) -> Optional[HealthState]:
        return self._health.state

    async def connect(self, callback: Optional[RecordCallback] = None) -> tuple[Any, Any]:
        """Run a single health check; the host calls this after construction."""
        self._log.debug("%s: connect, running healthcheck", self._id)
        return await self.healthcheck(callback)

    async def healthcheck(
        self, callback: Optional[RecordCallback] = None
    ) -> tuple[Any, Any]:
        """Check that the instance answers and publish ONLINE or OFFLINE.

        The notification is published after every check, whether or not
        the state changed.
        """
        async with self._health_lock:
            data, error = await self.get_record()
            error_message = None
            if error is not None:
                error_message = f"{self._id}: ServiceNow: Instance is unavailable."
                self._log.error(
                    "%s: healthcheck failed: %s", self._id, _describe_error(error)
                )
                self._health = self._health.mark_offline(error_message)
                self._log.warning(error_message)
            else:
                self._health = self._health.mark_online()
                self._log.info("%s: ServiceNow: Instance is available.", self._id)
            await self._publish_health()

        return await self._respond(callback, data, error_message)

    async def get_record(
        self, callback: Optional[RecordCallback] = None
    ) -> tuple[Any, Any]:
        """Read one change request and normalize the ``result`` array."""
        outcome = await self._connector.get()
        self._record_request("GET", outcome)
        if not outcome.is_success:
            self._log.error(
                "%s: getRecord returned error: %s",
                self._id,
                _describe_error(outcome.error),
            )
            return await self._respond(callback, None, outcome.error)

        data = normalize_list_response(outcome.data)
        self._log.debug("%s: getRecord data: %r", self._id, data)
        return await self._respond(callback, data, None)

    async def post_record(
        self,
        callback: Optional[RecordCallback] = None,
        payload: Optional[dict[str, Any]] = None,
    ) -> tuple[Any, Any]:
        """Create one change request and normalize the returned record."""
        outcome = await self._connector.post(payload)
        self._record_request("POST", outcome)
        if not outcome.is_success:
            self._log.error(
                "%s: postRecord returned error: %s",
                self._id,
                _describe_error(outcome.error),
            )
            return await self._respond(callback, None, outcome.error)

        data = normalize_single_response(outcome.data)
        self._log.debug("%s: postRecord data: %r", self._id, data)
        return await self._respond(callback, data, None)

    async def _publish_health(self) -> None:
        events = list(self._health.domain_events)
        self._health = self._health.clear_events()
        for event in events:
            self._log.debug("%s: emitting %s", self._id, event.event_name)
        await self._event_bus.publish(events)
        if self._telemetry is not None and self._health.state is not None:
            self._telemetry.record_health_status(self._id, self._health.state.value)

    def _record_request(self, method: str, outcome: Outcome) -> None:
        if self._telemetry is not None:
            self._telemetry.record_request(self._id, method, type(outcome).__name__)

    @staticmethod
    async def _respond(
        callback: Optional[RecordCallback], data: Any, error: Any
    ) -> tuple[Any, Any]:
        if callback is not None:
            result = callback(data, error)
            if inspect.isawaitable(result):
                await result
        return data, error
