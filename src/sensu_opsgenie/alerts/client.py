"""Opsgenie Alert API client — the create-alert capability the handler needs."""

from __future__ import annotations

import abc
from typing import Any

import httpx
import structlog
from pydantic import SecretStr

from sensu_opsgenie.alerts.exceptions import (
    OpsgenieAPIError,
    OpsgenieAuthError,
    OpsgenieConnectionError,
    OpsgenieResponseError,
)
from sensu_opsgenie.alerts.types import AlertRequest, CreateAlertResponse
from sensu_opsgenie.core.config import OpsgenieConfig

logger = structlog.get_logger(__name__)

_ALERTS_PATH = "/v2/alerts"


class AlertClient(abc.ABC):
    """Base class for alerting backends."""

    @abc.abstractmethod
    def set_credential(self, api_key: SecretStr | str) -> None:
        """Set the API key used to authenticate subsequent calls."""

    @abc.abstractmethod
    async def create_alert(self, request: AlertRequest) -> CreateAlertResponse:
        """Submit one create-alert request."""

    async def close(self) -> None:
        """Release resources (HTTP clients, etc.)."""


class OpsgenieClient(AlertClient):
    """Creates alerts through the Opsgenie REST API (``POST /v2/alerts``).

    Usage::

        client = OpsgenieClient(settings.opsgenie)
        client.set_credential(api_key)
        response = await client.create_alert(request)
        await client.close()

    Timeouts are enforced by the underlying httpx client.
    """

    def __init__(self, config: OpsgenieConfig | None = None) -> None:
        config = config or OpsgenieConfig()
        self._api_url = config.api_url.rstrip("/")
        self._timeout = config.timeout_secs
        self._api_key = config.api_key.get_secret_value()
        self._http: httpx.AsyncClient | None = None

    def set_credential(self, api_key: SecretStr | str) -> None:
        if isinstance(api_key, SecretStr):
            api_key = api_key.get_secret_value()
        self._api_key = api_key

    async def connect(self) -> None:
        """Create the httpx async client."""
        self._http = httpx.AsyncClient(timeout=httpx.Timeout(self._timeout))

    async def close(self) -> None:
        """Close the httpx async client."""
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def create_alert(self, request: AlertRequest) -> CreateAlertResponse:
        if not self._api_key:
            raise OpsgenieAuthError("Opsgenie API key is not set")
        if self._http is None:
            await self.connect()
        assert self._http is not None

        url = f"{self._api_url}{_ALERTS_PATH}"
        try:
            response = await self._http.post(
                url,
                json=request.to_payload(),
                headers={"Authorization": f"GenieKey {self._api_key}"},
            )
        except httpx.HTTPError as exc:
            raise OpsgenieConnectionError(f"Opsgenie request failed: {exc}") from exc

        if response.is_error:
            raise OpsgenieAPIError(response.status_code, _error_message(response))

        try:
            body: Any = response.json()
        except ValueError as exc:
            raise OpsgenieResponseError("Opsgenie returned invalid JSON") from exc

        if not isinstance(body, dict) or not body.get("requestId"):
            raise OpsgenieResponseError(f"Opsgenie response has no requestId: {body!r}")

        logger.debug(
            "opsgenie_alert_accepted",
            status=response.status_code,
            request_id=body["requestId"],
            took=body.get("took"),
        )
        return CreateAlertResponse(
            request_id=str(body["requestId"]),
            result=str(body.get("result", "")),
            took=float(body.get("took") or 0.0),
            raw=body,
        )


def _error_message(response: httpx.Response) -> str:
    """Best-effort error text: the JSON ``message`` field, else the raw body."""
    try:
        body = response.json()
    except ValueError:
        return response.text[:200] or response.reason_phrase
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text[:200]
