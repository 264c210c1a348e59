"""Alert dispatcher — one create-alert call per invocation, no retries."""

from __future__ import annotations

import structlog
from pydantic import SecretStr

from sensu_opsgenie.alerts.client import AlertClient
from sensu_opsgenie.alerts.exceptions import DispatchError
from sensu_opsgenie.alerts.types import AlertRequest

logger = structlog.get_logger(__name__)


class AlertDispatcher:
    """Sends an AlertRequest to the alerting backend.

    - The credential is set on the client immediately before the call.
    - Exactly one ``create_alert`` call is made.
    - Any client failure surfaces as DispatchError with the backend's
      message unchanged; the original exception is kept as ``__cause__``.
    """

    def __init__(self, client: AlertClient) -> None:
        self._client = client

    async def dispatch(self, request: AlertRequest, api_key: SecretStr | str) -> str:
        """Create the alert and return the backend-assigned request id."""
        self._client.set_credential(api_key)
        try:
            response = await self._client.create_alert(request)
        except Exception as exc:
            logger.error(
                "alert_dispatch_failed",
                alias=request.alias,
                entity=request.entity,
                error=str(exc),
            )
            raise DispatchError(str(exc)) from exc

        logger.info(
            "alert_dispatched",
            request_id=response.request_id,
            alias=request.alias,
            entity=request.entity,
            priority=request.priority.value,
        )
        return response.request_id
