"""
Outcome Value Objects

Architectural Intent:
- Classifies one completed HTTP exchange into exactly one Outcome variant
- Precedence is fixed: transport error > bad status > degraded service > success
- A hibernating ServiceNow instance answers with status 200 and an HTML
  placeholder page, so the degraded check must run before Success is assumed

Design Decisions:
- Variants are frozen dataclasses sharing the is_success/error/data surface
- Status matching defaults to a numeric 2xx range check; the legacy regex
  test against the status text is kept behind a flag for wire compatibility
"""

import re
from dataclasses import dataclass
from typing import Any, Optional, Union

from snowbridge.domain.ports.http_transport_port import HttpResponse, TransportFailure

HIBERNATION_MARKER = "Instance Hibernating page"
HTML_ROOT_TAG = "<html>"
HIBERNATING_MESSAGE = "Service Now instance is hibernating."

_LEGACY_STATUS_RE = re.compile(r"(2\d\d)")


@dataclass(frozen=True)
class Success:
    response: HttpResponse

    @property
    def is_success(self) -> bool:
        return True

    @property
    def data(self) -> HttpResponse:
        return self.response

    @property
    def error(self) -> None:
        return None


@dataclass(frozen=True)
class TransportError:
    failure: TransportFailure

    @property
    def is_success(self) -> bool:
        return False

    @property
    def data(self) -> None:
        return None

    @property
    def error(self) -> TransportFailure:
        return self.failure


@dataclass(frozen=True)
class BadStatus:
    response: HttpResponse

    @property
    def is_success(self) -> bool:
        return False

    @property
    def data(self) -> None:
        return None

    @property
    def error(self) -> HttpResponse:
        return self.response


@dataclass(frozen=True)
class ServiceDegraded:
    marker: str = HIBERNATING_MESSAGE

    @property
    def is_success(self) -> bool:
        return False

    @property
    def data(self) -> None:
        return None

    @property
    def error(self) -> str:
        return self.marker


Outcome = Union[Success, TransportError, BadStatus, ServiceDegraded]


def is_success_status(status_code: Any, legacy: bool = False) -> bool:
    """Return True when the status code belongs to the 2xx class.

    With ``legacy`` the original substring test is applied to the status
    text, which also accepts values such as ``1200``.
    """
    if legacy:
        return bool(_LEGACY_STATUS_RE.search(str(status_code)))
    try:
        return 200 <= int(status_code) <= 299
    except (TypeError, ValueError):
        return False


def is_hibernating(response: HttpResponse) -> bool:
    body = response.body or ""
    return (
        HIBERNATION_MARKER in body
        and HTML_ROOT_TAG in body
        and response.status_code == 200
    )


def classify(
    transport_error: Optional[TransportFailure],
    response: Optional[HttpResponse],
    legacy_status_match: bool = False,
) -> Outcome:
    """Classify a raw transport result. First matching rule wins."""
    if transport_error is not None:
        return TransportError(transport_error)
    if response is None:
        return TransportError(TransportFailure("No response received"))
    if not is_success_status(response.status_code, legacy=legacy_status_match):
        return BadStatus(response)
    if is_hibernating(response):
        return ServiceDegraded()
    return Success(response)
