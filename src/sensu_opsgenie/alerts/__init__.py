"""Alert construction and delivery to Opsgenie."""

from sensu_opsgenie.alerts.builder import build_alert_request
from sensu_opsgenie.alerts.client import AlertClient, OpsgenieClient
from sensu_opsgenie.alerts.dispatcher import AlertDispatcher
from sensu_opsgenie.alerts.exceptions import (
    DispatchError,
    InvalidPriorityError,
    OpsgenieAPIError,
    OpsgenieAuthError,
    OpsgenieClientError,
    OpsgenieConnectionError,
    OpsgenieResponseError,
)
from sensu_opsgenie.alerts.priority import resolve_policy_priority, resolve_priority
from sensu_opsgenie.alerts.types import AlertRequest, CreateAlertResponse

__all__ = [
    "AlertClient",
    "AlertDispatcher",
    "AlertRequest",
    "CreateAlertResponse",
    "DispatchError",
    "InvalidPriorityError",
    "OpsgenieAPIError",
    "OpsgenieAuthError",
    "OpsgenieClient",
    "OpsgenieClientError",
    "OpsgenieConnectionError",
    "OpsgenieResponseError",
    "build_alert_request",
    "resolve_policy_priority",
    "resolve_priority",
]
