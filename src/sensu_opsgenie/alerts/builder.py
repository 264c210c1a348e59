"""Pure functions that derive an AlertRequest from a validated event."""

from __future__ import annotations

from sensu_opsgenie.alerts.types import AlertRequest
from sensu_opsgenie.core.config import FixedConditionPolicy, GenericPolicy
from sensu_opsgenie.core.types import Priority
from sensu_opsgenie.events.types import Check, Entity, MonitoringEvent

DEFAULT_SOURCE = "Sensu"
DEFAULT_USER = "user@opsgenie.com"


# ── Policies ────────────────────────────────────────────────────


def _build_generic(
    entity: Entity,
    check: Check,
    policy: GenericPolicy,
) -> tuple[str, str, str, list[str]]:
    text = f"{check.output} on:{entity.id}"
    return text, text, text, list(policy.tags)


def _build_fixed_condition(
    entity: Entity,
    policy: FixedConditionPolicy,
) -> tuple[str, str, str, list[str]]:
    message = f"{policy.label} {entity.id} stopped"
    alias = f"{entity.id} stopped"
    description = f"The {policy.label} service on {entity.id} has stopped."
    return message, alias, description, list(policy.tags)


# ── Builder ─────────────────────────────────────────────────────


def build_alert_request(
    event: MonitoringEvent,
    priority: Priority,
    policy: GenericPolicy | FixedConditionPolicy | None = None,
    source: str = DEFAULT_SOURCE,
    user: str = DEFAULT_USER,
) -> AlertRequest:
    """Derive the create-alert request for *event*.

    The event must already have passed ``validate_event``. The alias is
    keyed off the entity id (and the check output for the generic policy)
    so Opsgenie can deduplicate repeated alerts for the same condition.
    """
    policy = policy or GenericPolicy()
    entity = event.entity
    check = event.check
    if entity is None or check is None:
        raise ValueError("build_alert_request requires a validated event")

    if isinstance(policy, FixedConditionPolicy):
        message, alias, description, tags = _build_fixed_condition(entity, policy)
    else:
        message, alias, description, tags = _build_generic(entity, check, policy)

    return AlertRequest(
        message=message,
        alias=alias,
        description=description,
        tags=tags,
        details={"check": check.name},
        entity=entity.id,
        source=source,
        priority=priority,
        user=user,
    )
