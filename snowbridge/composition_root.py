"""
Composition Root

Architectural Intent:
- Dependency injection composition root for snowbridge
- Single place where transport, connector, event bus and adapter are wired
- No adapter instantiation should occur outside this module (except tests)

Design Decisions:
- Uses a simple dataclass container instead of a DI framework
- Telemetry is created but only initialized by the caller (it is async)
"""

from dataclasses import dataclass
from typing import Optional

from snowbridge.infrastructure.adapters.httpx_transport import HttpxTransport
from snowbridge.infrastructure.adapters.servicenow_adapter import ServiceNowAdapter
from snowbridge.infrastructure.adapters.servicenow_connector import ServiceNowConnector
from snowbridge.infrastructure.config import SnowbridgeConfig, load_config
from snowbridge.infrastructure.event_bus import EventBus
from snowbridge.infrastructure.telemetry.otel_exporter import OTELConfig, OTELExporter


@dataclass
class SnowbridgeContainer:
    """DI container holding all wired dependencies."""

    config: SnowbridgeConfig
    transport: HttpxTransport
    connector: ServiceNowConnector
    event_bus: EventBus
    telemetry: OTELExporter
    adapter: ServiceNowAdapter


def create_container(config: Optional[SnowbridgeConfig] = None) -> SnowbridgeContainer:
    """Create and wire all dependencies."""
    config = config or load_config()

    transport = HttpxTransport(timeout=config.http.timeout)
    connector = ServiceNowConnector(
        config.servicenow.to_connection_config(),
        transport,
        legacy_status_match=config.servicenow.legacy_status_match,
    )
    event_bus = EventBus()
    telemetry = OTELExporter(
        OTELConfig(
            endpoint=config.telemetry.endpoint,
            insecure=config.telemetry.insecure,
        )
    )
    adapter = ServiceNowAdapter(
        config.adapter.id,
        connector,
        event_bus,
        telemetry=telemetry,
    )

    return SnowbridgeContainer(
        config=config,
        transport=transport,
        connector=connector,
        event_bus=event_bus,
        telemetry=telemetry,
        adapter=adapter,
    )
