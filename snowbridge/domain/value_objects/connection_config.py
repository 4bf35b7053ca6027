"""
Connection Value Objects

Architectural Intent:
- ConnectionConfig holds the immutable parameters of one ServiceNow instance
- CallOptions describes a single Table API call and is discarded afterwards
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ConnectionConfig:
    """
    Value Object with the connection parameters of a ServiceNow table.
    """
    url: str
    username: str
    password: str
    table: str

    @property
    def auth(self) -> tuple[str, str]:
        return (self.username, self.password)

    def __repr__(self) -> str:
        return (
            f"ConnectionConfig(url={self.url!r}, username={self.username!r}, "
            f"password='***', table={self.table!r})"
        )


@dataclass(frozen=True)
class CallOptions:
    method: str
    table: str
    query: Optional[str] = None
    payload: Optional[dict[str, Any]] = None
