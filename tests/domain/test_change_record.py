"""Tests for change record normalization."""

import json

from conftest import envelope
from snowbridge.domain.entities.change_record import (
    normalize_list_response,
    normalize_record,
    normalize_single_response,
)
from snowbridge.domain.ports.http_transport_port import HttpResponse


class TestNormalizeRecord:
    def test_renames_and_drops(self):
        raw = {"number": "CHG1", "sys_id": "abc", "priority": "1", "extra": "drop-me"}
        assert normalize_record(raw) == {
            "change_ticket_number": "CHG1",
            "change_ticket_key": "abc",
            "priority": "1",
        }

    def test_full_allow_list(self):
        raw = {
            "number": "CHG0000001",
            "active": "true",
            "priority": "4",
            "description": "Patch web tier",
            "work_start": "2024-01-01 10:00:00",
            "work_end": "2024-01-01 12:00:00",
            "sys_id": "a9e30c7dc61122760116894de7bcc7bd",
            "assigned_to": "",
            "sys_updated_on": "2024-01-01 09:00:00",
        }
        record = normalize_record(raw)
        assert set(record) == {
            "change_ticket_number",
            "active",
            "priority",
            "description",
            "work_start",
            "work_end",
            "change_ticket_key",
        }
        assert record["description"] == "Patch web tier"

    def test_missing_fields_are_omitted(self):
        record = normalize_record({"description": "only this"})
        assert record == {"description": "only this"}
        assert "change_ticket_number" not in record

    def test_raw_is_not_mutated(self):
        raw = {"number": "CHG1", "extra": 1}
        normalize_record(raw)
        assert raw == {"number": "CHG1", "extra": 1}


class TestNormalizeListResponse:
    def test_preserves_order(self):
        response = envelope([{"number": "CHG1"}, {"number": "CHG2"}])
        assert normalize_list_response(response) == [
            {"change_ticket_number": "CHG1"},
            {"change_ticket_number": "CHG2"},
        ]

    def test_empty_result_passes_response_through(self):
        response = envelope([])
        assert normalize_list_response(response) is response

    def test_missing_result_passes_response_through(self):
        response = HttpResponse(status_code=200, body=json.dumps({"other": 1}))
        assert normalize_list_response(response) is response

    def test_non_object_body_passes_through(self):
        response = HttpResponse(status_code=200, body="[1, 2]")
        assert normalize_list_response(response) is response

    def test_null_body_passes_through(self):
        response = HttpResponse(status_code=200, body="null")
        assert normalize_list_response(response) is response

    def test_invalid_json_passes_through(self):
        response = HttpResponse(status_code=200, body="<html>oops</html>")
        assert normalize_list_response(response) is response

    def test_deeply_nested_result_passes_through(self):
        depth = 200000
        body = '{"result": ' + "[" * depth + "]" * depth + "}"
        response = HttpResponse(status_code=200, body=body)
        assert normalize_list_response(response) is response


class TestNormalizeSingleResponse:
    def test_single_record(self):
        response = envelope({"number": "CHG2", "sys_id": "xyz"}, status_code=201)
        assert normalize_single_response(response) == {
            "change_ticket_number": "CHG2",
            "change_ticket_key": "xyz",
        }

    def test_missing_result_passes_through(self):
        response = HttpResponse(status_code=201, body="{}")
        assert normalize_single_response(response) is response

    def test_empty_body_passes_through(self):
        response = HttpResponse(status_code=204, body="")
        assert normalize_single_response(response) is response

    def test_deeply_nested_body_passes_through(self):
        depth = 200000
        body = '{"result": ' + "[" * depth + "]" * depth + "}"
        response = HttpResponse(status_code=201, body=body)
        assert normalize_single_response(response) is response
