"""
ServiceNow Transport Connector

Architectural Intent:
- Turns a logical get/post against the configured table into one classified Outcome
- Owns the immutable ConnectionConfig and builds Table API URIs
- Depends only on HttpTransportPort for I/O

Design Decisions:
- Exactly one HTTP call per operation: no retry, no polling, no logging
- GET is limited to one record (sysparm_limit=1); no paging or filtering
- POST carries an optional JSON payload for the new record
"""

from typing import Any, Optional

from snowbridge.domain.exceptions import TransportFailure
from snowbridge.domain.ports.http_transport_port import HttpResponse, HttpTransportPort
from snowbridge.domain.value_objects.connection_config import CallOptions, ConnectionConfig
from snowbridge.domain.value_objects.outcome import Outcome, classify

TABLE_API_PATH = "/api/now/table/"
GET_QUERY = "sysparm_limit=1"


class ServiceNowConnector:
    """Connector for the ServiceNow Table API."""

    def __init__(
        self,
        config: ConnectionConfig,
        transport: HttpTransportPort,
        legacy_status_match: bool = False,
    ) -> None:
        self._config = config
        self._transport = transport
        self._legacy_status_match = legacy_status_match

    @property
    def config(self) -> ConnectionConfig:
        return self._config

    @staticmethod
    def construct_uri(table: str, query: Optional[str] = None) -> str:
        uri = TABLE_API_PATH + table
        if query:
            uri = uri + "?" + query
        return uri

    def classify(
        self,
        transport_error: Optional[TransportFailure],
        response: Optional[HttpResponse],
    ) -> Outcome:
        return classify(
            transport_error, response, legacy_status_match=self._legacy_status_match
        )

    async def dispatch(self, options: CallOptions) -> Outcome:
        uri = self.construct_uri(options.table, options.query)
        try:
            response = await self._transport.request(
                options.method,
                self._config.url,
                uri,
                self._config.auth,
                json=options.payload,
            )
        except TransportFailure as e:
            return self.classify(e, None)
        return self.classify(None, response)

    async def get(self) -> Outcome:
        return await self.dispatch(
            CallOptions(method="GET", table=self._config.table, query=GET_QUERY)
        )

    async def post(self, payload: Optional[dict[str, Any]] = None) -> Outcome:
        return await self.dispatch(
            CallOptions(method="POST", table=self._config.table, payload=payload)
        )
