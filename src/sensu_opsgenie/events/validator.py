"""Actionability checks run before any alert is built."""

from __future__ import annotations

from sensu_opsgenie.events.exceptions import (
    MissingCheckError,
    MissingEntityError,
    MissingTimestampError,
)
from sensu_opsgenie.events.types import MonitoringEvent


def validate_event(event: MonitoringEvent) -> None:
    """Raise on the first reason the event cannot be acted on.

    Order: timestamp, entity presence, check presence, entity validity,
    check validity.
    """
    if event.timestamp <= 0:
        raise MissingTimestampError("timestamp is missing or must be greater than zero")

    if event.entity is None:
        raise MissingEntityError("entity is missing from event")

    if event.check is None:
        raise MissingCheckError("check is missing from event")

    event.entity.ensure_valid()
    event.check.ensure_valid()
