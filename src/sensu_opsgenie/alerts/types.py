"""Request and response types for the Opsgenie Alert API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from sensu_opsgenie.core.types import Priority


class AlertRequest(BaseModel):
    """Create-alert request, one per handler invocation."""

    model_config = ConfigDict(frozen=True)

    message: str
    alias: str
    description: str
    tags: list[str] = Field(default_factory=list)
    details: dict[str, str] = Field(default_factory=dict)
    entity: str
    source: str
    priority: Priority
    user: str

    def to_payload(self) -> dict[str, Any]:
        """JSON body for ``POST /v2/alerts``."""
        return self.model_dump(mode="json")


class CreateAlertResponse(BaseModel):
    """Accepted create-alert request. Opsgenie processes it asynchronously."""

    request_id: str
    result: str = ""
    took: float = 0.0
    raw: dict[str, Any] = Field(default_factory=dict)
