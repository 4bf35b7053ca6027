"""
OpenTelemetry Exporter for snowbridge

Architectural Intent:
- Exports adapter health and request outcome metrics to OTLP-compatible backends
- Metrics are buffered locally in a bounded deque (oldest samples dropped);
  export only happens once initialized

Security:
- Endpoint defaults to empty string (must be explicitly configured)
- Non-localhost http:// endpoints rejected unless insecure=True
- Validation in __post_init__ prevents accidental plaintext export
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Any
from urllib.parse import urlparse
import logging
from collections import deque
from datetime import datetime, UTC

logger = logging.getLogger(__name__)

MAX_BUFFERED_METRICS = 1000


@dataclass
class OTELConfig:
    endpoint: str = ""
    service_name: str = "snowbridge"
    environment: str = "development"
    insecure: bool = False

    def __post_init__(self) -> None:
        if self.endpoint:
            parsed = urlparse(self.endpoint)
            is_localhost = parsed.hostname in ("localhost", "127.0.0.1", "::1")
            if parsed.scheme == "http" and not is_localhost and not self.insecure:
                raise ValueError(
                    f"Non-localhost HTTP endpoint '{self.endpoint}' requires "
                    "insecure=True or use https://. "
                    "Set insecure=True to explicitly allow plaintext export."
                )


class OTELExporter:
    """
    OpenTelemetry exporter for snowbridge adapters.

    Records:
    - snowbridge.adapter.health: 1.0 online, 0.0 offline
    - snowbridge.request.outcome: one sample per Table API call
    """

    def __init__(self, config: OTELConfig):
        self.config = config
        self._initialized = False
        self._metrics_buffer: deque[dict[str, Any]] = deque(maxlen=MAX_BUFFERED_METRICS)
        self._meter: Any = None
        self._gauges: dict[str, Any] = {}

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """Initialize the OpenTelemetry SDK and OTLP metric exporter."""
        if not self.config.endpoint:
            logger.info("OTEL endpoint not configured, telemetry disabled")
            return

        try:
            from opentelemetry import metrics
            from opentelemetry.sdk.metrics import MeterProvider
            from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
            from opentelemetry.sdk.resources import Resource, SERVICE_NAME
            from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import (
                OTLPMetricExporter,
            )

            resource = Resource(
                attributes={
                    SERVICE_NAME: self.config.service_name,
                    "environment": self.config.environment,
                }
            )
            metric_reader = PeriodicExportingMetricReader(
                OTLPMetricExporter(
                    endpoint=self.config.endpoint, insecure=self.config.insecure
                )
            )
            provider = MeterProvider(resource=resource, metric_readers=[metric_reader])
            metrics.set_meter_provider(provider)
            self._meter = metrics.get_meter(__name__)
            self._initialized = True

        except ImportError:
            logger.warning("OpenTelemetry SDK not installed, telemetry disabled")
            self._initialized = False

    def _get_gauge(self, name: str, unit: str = "") -> Any:
        if name not in self._gauges and self._meter:
            self._gauges[name] = self._meter.create_gauge(name, unit=unit)
        return self._gauges.get(name)

    def record_metric(
        self,
        name: str,
        value: float,
        unit: str = "",
        attributes: Optional[dict[str, str]] = None,
    ) -> None:
        """Record a metric value."""
        self._metrics_buffer.append(
            {
                "name": name,
                "value": value,
                "unit": unit,
                "attributes": attributes or {},
                "timestamp": datetime.now(UTC).isoformat(),
            }
        )

        if self._initialized:
            gauge = self._get_gauge(name, unit)
            if gauge:
                gauge.set(value, attributes=attributes or {})

    def record_health_status(self, adapter_id: str, state: str) -> None:
        self.record_metric(
            "snowbridge.adapter.health",
            1.0 if state == "ONLINE" else 0.0,
            attributes={"adapter_id": adapter_id, "state": state},
        )

    def record_request(self, adapter_id: str, method: str, outcome: str) -> None:
        self.record_metric(
            "snowbridge.request.outcome",
            1.0 if outcome == "Success" else 0.0,
            attributes={
                "adapter_id": adapter_id,
                "method": method,
                "outcome": outcome,
            },
        )

    async def export(self) -> None:
        """Flush the local buffer; the SDK reader exports on its own schedule."""
        if not self._initialized:
            return

        exported_count = len(self._metrics_buffer)
        self._metrics_buffer.clear()

        if exported_count:
            logger.debug("Flushed %d buffered metrics", exported_count)


async def create_exporter(
    endpoint: Optional[str] = None,
    service_name: str = "snowbridge",
    insecure: bool = False,
) -> OTELExporter:
    """Factory function to create OTEL exporter."""
    config = OTELConfig(
        endpoint=endpoint or "",
        service_name=service_name,
        insecure=insecure,
    )
    exporter = OTELExporter(config)
    await exporter.initialize()
    return exporter
