"""Tests for event decoding and stream reading."""

from __future__ import annotations

import io
import json

import pytest

from sensu_opsgenie.events.decoder import decode_event, read_event
from sensu_opsgenie.events.exceptions import InputReadError, MalformedInputError
from sensu_opsgenie.events.types import Check, Entity, MonitoringEvent
from sensu_opsgenie.events.validator import validate_event

_EVENT = {
    "timestamp": 1000,
    "entity": {"id": "web-01"},
    "check": {"name": "disk", "output": "disk full"},
}


class _BrokenStream(io.RawIOBase):
    def read(self, size: int = -1) -> bytes:
        raise OSError("broken pipe")


class TestDecodeEvent:
    def test_decodes_bytes(self) -> None:
        event = decode_event(json.dumps(_EVENT).encode())
        assert event.timestamp == 1000
        assert event.entity == Entity(id="web-01")
        assert event.check == Check(name="disk", output="disk full")

    def test_decodes_str(self) -> None:
        event = decode_event(json.dumps(_EVENT))
        assert event.entity is not None
        assert event.entity.id == "web-01"

    def test_extra_fields_ignored(self) -> None:
        payload = dict(_EVENT, metadata={"namespace": "default"}, id="abc")
        payload["check"] = dict(_EVENT["check"], interval=60, status=2)
        event = decode_event(json.dumps(payload))
        assert event.check is not None
        assert event.check.name == "disk"

    def test_missing_fields_take_defaults(self) -> None:
        event = decode_event(b"{}")
        assert event.timestamp == 0
        assert event.entity is None
        assert event.check is None

    def test_null_timestamp_reads_as_unset(self) -> None:
        event = decode_event(b'{"timestamp": null, "entity": {"id": "web-01"}}')
        assert event.timestamp == 0

    def test_check_output_optional(self) -> None:
        event = decode_event(b'{"timestamp":1,"entity":{"id":"db-02"},"check":{"name":"svc"}}')
        assert event.check is not None
        assert event.check.output == ""

    @pytest.mark.parametrize(
        "payload",
        [
            b"not json",
            b"",
            b"[]",
            b"null",
            b'{"timestamp": "soon"}',
            b'{"entity": "web-01"}',
            b'{"timestamp": "1000", "entity": {"id": "web-01"}, "check": {"name": "disk"}}',
            b'{"timestamp": true, "entity": {"id": "web-01"}, "check": {"name": "disk"}}',
            b'{"timestamp": 1000.0, "entity": {"id": "web-01"}, "check": {"name": "disk"}}',
            b'{"timestamp": 1, "entity": {"id": 7}, "check": {"name": "disk"}}',
        ],
    )
    def test_malformed_input(self, payload: bytes) -> None:
        with pytest.raises(MalformedInputError):
            decode_event(payload)

    def test_malformed_error_includes_payload(self) -> None:
        with pytest.raises(MalformedInputError) as exc_info:
            decode_event(b"{broken")
        assert "{broken" in str(exc_info.value)
        assert exc_info.value.payload == "{broken"


class TestRoundTrip:
    def test_encoded_event_decodes_and_validates(self) -> None:
        original = MonitoringEvent(
            timestamp=42,
            entity=Entity(id="web-01"),
            check=Check(name="disk", output="disk full"),
        )
        decoded = decode_event(original.model_dump_json())
        validate_event(decoded)
        assert decoded == original


class TestReadEvent:
    def test_reads_whole_stream(self) -> None:
        event = read_event(io.BytesIO(json.dumps(_EVENT).encode()))
        assert event.timestamp == 1000

    def test_read_failure_raises_input_read_error(self) -> None:
        with pytest.raises(InputReadError, match="broken pipe"):
            read_event(_BrokenStream())  # type: ignore[arg-type]
