"""
HTTP Transport Port

Architectural Intent:
- Contract for the external HTTP capability used by the connector
- One call yields either a TransportFailure or a status/headers/body triple

Design Decisions:
- Uses Protocol for structural typing (no inheritance needed)
- TransportFailure is raised, not returned, when no response was obtained
- Timeouts and connection pooling belong to the implementation
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from snowbridge.domain.exceptions import TransportFailure


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)
    method: str = "GET"


@runtime_checkable
class HttpTransportPort(Protocol):
    """Port for issuing a single HTTP request."""

    async def request(
        self,
        method: str,
        base_url: str,
        uri: str,
        auth: tuple[str, str],
        json: Optional[Any] = None,
    ) -> HttpResponse:
        """Issue one request. Raises TransportFailure if no response arrives."""
        ...


__all__ = ["HttpResponse", "HttpTransportPort", "TransportFailure"]
