"""Read-only view of a Sensu event — only the fields the handler consumes."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, field_validator

from sensu_opsgenie.events.exceptions import InvalidCheckError, InvalidEntityError

# Sensu resource names: ASCII letters, digits, underscore, period and hyphen.
_NAME_RE = re.compile(r"[\w.\-]+", re.ASCII)


def _validate_name(name: str) -> str | None:
    if not name:
        return "name cannot be empty"
    if not _NAME_RE.fullmatch(name):
        return f"name must match {_NAME_RE.pattern}"
    return None


class Entity(BaseModel):
    """The monitored host or resource."""

    model_config = ConfigDict(frozen=True, strict=True)

    id: str = ""

    def ensure_valid(self) -> None:
        problem = _validate_name(self.id)
        if problem is not None:
            raise InvalidEntityError(f"entity id invalid: {problem}")


class Check(BaseModel):
    """The health probe that produced the event."""

    model_config = ConfigDict(frozen=True, strict=True)

    name: str = ""
    output: str = ""

    def ensure_valid(self) -> None:
        problem = _validate_name(self.name)
        if problem is not None:
            raise InvalidCheckError(f"check name invalid: {problem}")


class MonitoringEvent(BaseModel):
    """A single check result. Fields beyond these are ignored."""

    model_config = ConfigDict(frozen=True, strict=True)

    timestamp: int = 0
    entity: Entity | None = None
    check: Check | None = None

    @field_validator("timestamp", mode="before")
    @classmethod
    def _null_timestamp(cls, value: object) -> object:
        # JSON null reads as an unset timestamp.
        return 0 if value is None else value
