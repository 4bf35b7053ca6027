"""
snowbridge Telemetry Infrastructure

Architectural Intent:
- OpenTelemetry integration for adapter health and request metrics
"""

from snowbridge.infrastructure.telemetry.otel_exporter import (
    OTELExporter,
    OTELConfig,
    create_exporter,
)

__all__ = [
    "OTELExporter",
    "OTELConfig",
    "create_exporter",
]
