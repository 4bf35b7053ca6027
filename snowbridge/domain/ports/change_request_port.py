"""
Change Request Port

Architectural Intent:
- Host-facing contract of a change-request adapter
- Every operation follows the host's data-first (data, error) convention
- An optional callback receives the same pair once the operation completes

Design Decisions:
- Uses Protocol for structural typing (no inheritance needed)
- Only "read one" and "create one" are modeled
"""

from typing import Any, Awaitable, Callable, Optional, Protocol, Union, runtime_checkable

RecordCallback = Callable[[Any, Any], Union[None, Awaitable[None]]]


@runtime_checkable
class ChangeRequestPort(Protocol):
    """Port for change-request operations exposed to the host."""

    async def connect(self, callback: Optional[RecordCallback] = None) -> tuple[Any, Any]:
        """Run one health check and publish ONLINE or OFFLINE."""
        ...

    async def healthcheck(
        self, callback: Optional[RecordCallback] = None
    ) -> tuple[Any, Any]:
        ...

    async def get_record(
        self, callback: Optional[RecordCallback] = None
    ) -> tuple[Any, Any]:
        """Read one change request."""
        ...

    async def post_record(
        self,
        callback: Optional[RecordCallback] = None,
        payload: Optional[dict[str, Any]] = None,
    ) -> tuple[Any, Any]:
        """Create one change request."""
        ...
