"""Map a user-supplied priority token onto the Opsgenie enumeration."""

from __future__ import annotations

from sensu_opsgenie.alerts.exceptions import InvalidPriorityError
from sensu_opsgenie.core.config import FixedConditionPolicy, GenericPolicy
from sensu_opsgenie.core.types import Priority

_TOKENS: dict[str, Priority] = {
    "1": Priority.P1,
    "2": Priority.P2,
    "3": Priority.P3,
    "4": Priority.P4,
    "5": Priority.P5,
}


def resolve_priority(token: str | None, default: Priority = Priority.P3) -> Priority:
    """Resolve *token* to a Priority.

    ``None`` means no priority was supplied and yields *default*. Any
    other value outside "1".."5", the empty string included, is rejected.

    Raises:
        InvalidPriorityError: The token is not recognised.
    """
    if token is None:
        return default
    try:
        return _TOKENS[token]
    except KeyError:
        raise InvalidPriorityError(token) from None


def resolve_policy_priority(
    policy: GenericPolicy | FixedConditionPolicy,
    default: Priority = Priority.P3,
) -> Priority:
    """Priority for an alert built under *policy*."""
    if isinstance(policy, FixedConditionPolicy):
        return policy.priority
    return resolve_priority(policy.priority, default)
