"""Tests for validate_event — ordering and short-circuiting."""

from __future__ import annotations

import pytest

from sensu_opsgenie.events.exceptions import (
    EventValidationError,
    InvalidCheckError,
    InvalidEntityError,
    MissingCheckError,
    MissingEntityError,
    MissingTimestampError,
)
from sensu_opsgenie.events.types import Check, Entity, MonitoringEvent
from sensu_opsgenie.events.validator import validate_event


def _event(**kw: object) -> MonitoringEvent:
    defaults: dict[str, object] = {
        "timestamp": 1000,
        "entity": Entity(id="web-01"),
        "check": Check(name="disk", output="disk full"),
    }
    defaults.update(kw)
    return MonitoringEvent(**defaults)  # type: ignore[arg-type]


class TestValidateEvent:
    def test_valid_event_passes(self) -> None:
        validate_event(_event())

    @pytest.mark.parametrize("timestamp", [0, -1, -1000])
    def test_non_positive_timestamp(self, timestamp: int) -> None:
        with pytest.raises(MissingTimestampError):
            validate_event(_event(timestamp=timestamp))

    def test_missing_entity(self) -> None:
        with pytest.raises(MissingEntityError):
            validate_event(_event(entity=None))

    def test_missing_check(self) -> None:
        with pytest.raises(MissingCheckError):
            validate_event(_event(check=None))

    @pytest.mark.parametrize("entity_id", ["", "web 01", "web/01", "w\u00e9b-01"])
    def test_invalid_entity(self, entity_id: str) -> None:
        with pytest.raises(InvalidEntityError):
            validate_event(_event(entity=Entity(id=entity_id)))

    @pytest.mark.parametrize("name", ["", "disk check", "disk\n", "d\u00efsk"])
    def test_invalid_check(self, name: str) -> None:
        with pytest.raises(InvalidCheckError):
            validate_event(_event(check=Check(name=name)))

    def test_all_errors_are_validation_errors(self) -> None:
        with pytest.raises(EventValidationError):
            validate_event(_event(check=None))


class TestOrdering:
    def test_timestamp_checked_first(self) -> None:
        with pytest.raises(MissingTimestampError):
            validate_event(MonitoringEvent(timestamp=0))

    def test_entity_before_check(self) -> None:
        with pytest.raises(MissingEntityError):
            validate_event(_event(entity=None, check=None))

    def test_presence_before_validity(self) -> None:
        with pytest.raises(MissingCheckError):
            validate_event(_event(entity=Entity(id=""), check=None))

    def test_entity_validity_before_check_validity(self) -> None:
        with pytest.raises(InvalidEntityError):
            validate_event(_event(entity=Entity(id=""), check=Check(name="")))
