"""Monitoring event model, decoding and validation."""

from sensu_opsgenie.events.decoder import decode_event, read_event
from sensu_opsgenie.events.exceptions import (
    EventValidationError,
    InputReadError,
    InvalidCheckError,
    InvalidEntityError,
    MalformedInputError,
    MissingCheckError,
    MissingEntityError,
    MissingTimestampError,
)
from sensu_opsgenie.events.types import Check, Entity, MonitoringEvent
from sensu_opsgenie.events.validator import validate_event

__all__ = [
    "Check",
    "Entity",
    "EventValidationError",
    "InputReadError",
    "InvalidCheckError",
    "InvalidEntityError",
    "MalformedInputError",
    "MissingCheckError",
    "MissingEntityError",
    "MissingTimestampError",
    "MonitoringEvent",
    "decode_event",
    "read_event",
    "validate_event",
]
