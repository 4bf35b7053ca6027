"""
httpx HTTP Transport

Architectural Intent:
- Implements HttpTransportPort on top of httpx.AsyncClient
- Converts httpx request errors into TransportFailure
- Any HTTP status, including 4xx/5xx, is returned as an HttpResponse

Design Decisions:
- A shared client may be injected (tests use httpx.MockTransport); its own
  timeout settings apply and the timeout argument is ignored
- Without one, a single client with the configured timeout is created on
  first use and reused until aclose()
- The timeout lives here, not in the connector
"""

import logging
from typing import Any, Optional

import httpx

from snowbridge.domain.exceptions import TransportFailure
from snowbridge.domain.ports.http_transport_port import HttpResponse

logger = logging.getLogger(__name__)


class HttpxTransport:
    """HTTP capability backed by httpx."""

    def __init__(
        self,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._timeout = timeout
        self._client = client

    async def request(
        self,
        method: str,
        base_url: str,
        uri: str,
        auth: tuple[str, str],
        json: Optional[Any] = None,
    ) -> HttpResponse:
        url = base_url.rstrip("/") + uri
        headers = {"Accept": "application/json"}
        client = self._get_client()
        try:
            response = await client.request(
                method, url, auth=httpx.BasicAuth(*auth), json=json, headers=headers
            )
        except httpx.RequestError as e:
            logger.debug("%s %s failed: %s", method, url, e)
            raise TransportFailure(f"{method} {url} failed: {e}", cause=e) from e

        return HttpResponse(
            status_code=response.status_code,
            body=response.text,
            headers=dict(response.headers),
            method=method,
        )

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
