"""Exceptions raised while reading, decoding and validating events."""

from __future__ import annotations

from sensu_opsgenie.core.exceptions import HandlerError


class InputReadError(HandlerError):
    """The input stream could not be read in full."""


class MalformedInputError(HandlerError):
    """The payload did not decode into a monitoring event."""

    def __init__(self, payload: bytes | str) -> None:
        if isinstance(payload, bytes):
            payload = payload.decode("utf-8", errors="replace")
        self.payload = payload
        super().__init__(f"failed to unmarshal stdin data: {payload}")


class EventValidationError(HandlerError):
    """The event is not actionable."""


class MissingTimestampError(EventValidationError):
    """Timestamp is absent or not positive."""


class MissingEntityError(EventValidationError):
    """The event carries no entity."""


class MissingCheckError(EventValidationError):
    """The event carries no check."""


class InvalidEntityError(EventValidationError):
    """The entity fails its own structural checks."""


class InvalidCheckError(EventValidationError):
    """The check fails its own structural checks."""
