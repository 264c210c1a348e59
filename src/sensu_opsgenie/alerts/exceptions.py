"""Exceptions for alert construction and the Opsgenie client."""

from __future__ import annotations

from sensu_opsgenie.core.exceptions import HandlerError


class InvalidPriorityError(HandlerError):
    """The supplied priority token is not one of 1 through 5."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"invalid priority {token!r}: options are 1 through 5")


class DispatchError(HandlerError):
    """The create-alert call failed. Carries the backend message unmodified."""


# ── Client-side errors (wrapped into DispatchError by the dispatcher) ──


class OpsgenieClientError(Exception):
    """Base exception for all Opsgenie client errors."""


class OpsgenieAuthError(OpsgenieClientError):
    """No API key has been set on the client."""


class OpsgenieConnectionError(OpsgenieClientError):
    """Failed to reach the Opsgenie API."""


class OpsgenieAPIError(OpsgenieClientError):
    """Opsgenie rejected the request."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"Opsgenie API error {status_code}: {message}")


class OpsgenieResponseError(OpsgenieClientError):
    """Opsgenie answered with a body that could not be understood."""
