"""Decode raw handler input into a MonitoringEvent."""

from __future__ import annotations

from typing import BinaryIO

import structlog
from pydantic import ValidationError

from sensu_opsgenie.events.exceptions import InputReadError, MalformedInputError
from sensu_opsgenie.events.types import MonitoringEvent

logger = structlog.get_logger(__name__)


def decode_event(data: bytes | str) -> MonitoringEvent:
    """Parse a single JSON event document.

    Raises:
        MalformedInputError: The payload is not a JSON object of the
            expected shape. The payload is kept on the exception.
    """
    try:
        event = MonitoringEvent.model_validate_json(data)
    except (ValidationError, ValueError) as exc:
        raise MalformedInputError(data) from exc

    logger.debug(
        "event_decoded",
        timestamp=event.timestamp,
        entity=event.entity.id if event.entity else None,
        check=event.check.name if event.check else None,
    )
    return event


def read_event(stream: BinaryIO) -> MonitoringEvent:
    """Read *stream* to EOF and decode its contents."""
    try:
        data = stream.read()
    except OSError as exc:
        raise InputReadError(f"failed to read stdin: {exc}") from exc
    return decode_event(data)
