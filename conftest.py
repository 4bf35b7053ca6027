"""Global test configuration.

Shared fakes for the HTTP capability and the ServiceNow Table API envelope.
"""

import json

import pytest

from snowbridge.domain.exceptions import TransportFailure
from snowbridge.domain.ports.http_transport_port import HttpResponse
from snowbridge.domain.value_objects.connection_config import ConnectionConfig

HIBERNATING_BODY = (
    "<html><head><title>Instance Hibernating page</title></head>"
    "<body>Your instance is hibernating.</body></html>"
)


class FakeTransport:
    """In-memory HttpTransportPort returning queued responses or failures."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = []

    def queue(self, result) -> None:
        self.results.append(result)

    async def request(self, method, base_url, uri, auth, json=None):
        self.calls.append(
            {"method": method, "base_url": base_url, "uri": uri, "auth": auth, "json": json}
        )
        result = self.results.pop(0)
        if isinstance(result, TransportFailure):
            raise result
        return result


def envelope(result, status_code=200, method="GET") -> HttpResponse:
    return HttpResponse(
        status_code=status_code,
        body=json.dumps({"result": result}),
        headers={"Content-Type": "application/json"},
        method=method,
    )


@pytest.fixture
def connection_config():
    return ConnectionConfig(
        url="https://dev12345.service-now.com",
        username="admin",
        password="secret",
        table="change_request",
    )


@pytest.fixture
def transport():
    return FakeTransport()
