"""
Change Record Normalization

Architectural Intent:
- Reshapes raw ServiceNow change_request rows into a small stable schema
- Only allow-listed fields survive; two of them are renamed
- Fields missing upstream are omitted, never filled with None

Design Decisions:
- Normalized records are new dicts; the raw row is left untouched
- Envelope helpers degrade gracefully: anything unexpected in the body
  hands the original response back instead of raising
"""

import json
import logging
from typing import Any, Mapping, TypedDict, Union

from snowbridge.domain.ports.http_transport_port import HttpResponse

logger = logging.getLogger(__name__)

FIELD_ALLOW_LIST = (
    "number",
    "active",
    "priority",
    "description",
    "work_start",
    "work_end",
    "sys_id",
)

FIELD_RENAMES = {
    "number": "change_ticket_number",
    "sys_id": "change_ticket_key",
}


class NormalizedChangeRecord(TypedDict, total=False):
    change_ticket_number: str
    active: Any
    priority: Any
    description: Any
    work_start: Any
    work_end: Any
    change_ticket_key: str


def normalize_record(raw: Mapping[str, Any]) -> NormalizedChangeRecord:
    """Keep the allow-listed fields of ``raw`` and rename number/sys_id."""
    record: dict[str, Any] = {}
    for key, value in raw.items():
        if key in FIELD_ALLOW_LIST:
            record[FIELD_RENAMES.get(key, key)] = value
    return NormalizedChangeRecord(**record)


def _parse_envelope(response: HttpResponse) -> Any:
    if not response.body:
        return None
    try:
        return json.loads(response.body)
    except (TypeError, ValueError, RecursionError) as e:
        logger.debug("Response body is not JSON, passing through: %s", e)
        return None


def normalize_list_response(
    response: HttpResponse,
) -> Union[list, HttpResponse]:
    """Normalize the ``result`` array of a Table API read.

    Returns the list of normalized records in upstream order, or the
    untouched response when ``result`` is missing, empty or not an array.
    """
    envelope = _parse_envelope(response)
    if not isinstance(envelope, dict):
        return response
    result = envelope.get("result")
    if not isinstance(result, list) or not result:
        return response
    return [
        normalize_record(item) if isinstance(item, Mapping) else item
        for item in result
    ]


def normalize_single_response(
    response: HttpResponse,
) -> Union[NormalizedChangeRecord, HttpResponse]:
    """Normalize the single ``result`` object of a Table API create."""
    envelope = _parse_envelope(response)
    if not isinstance(envelope, dict):
        return response
    result = envelope.get("result")
    if not isinstance(result, Mapping):
        return response
    return normalize_record(result)
