"""
Domain Ports Package

Architectural Intent:
- Contains port interfaces (abstract contracts) for external dependencies
- Ports define what the domain needs, adapters implement how
- Follows Hexagonal Architecture principles
"""

from snowbridge.domain.ports.http_transport_port import HttpTransportPort, HttpResponse
from snowbridge.domain.ports.event_bus_port import EventBusPort
from snowbridge.domain.ports.change_request_port import ChangeRequestPort, RecordCallback

__all__ = [
    "HttpTransportPort",
    "HttpResponse",
    "EventBusPort",
    "ChangeRequestPort",
    "RecordCallback",
]
