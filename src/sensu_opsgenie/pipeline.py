"""Handler pipeline — decode, validate, build and dispatch a single event."""

from __future__ import annotations

from enum import StrEnum
from typing import BinaryIO

import structlog

from sensu_opsgenie.alerts.builder import build_alert_request
from sensu_opsgenie.alerts.client import AlertClient
from sensu_opsgenie.alerts.dispatcher import AlertDispatcher
from sensu_opsgenie.alerts.priority import resolve_policy_priority
from sensu_opsgenie.core.config import Settings
from sensu_opsgenie.events.decoder import read_event
from sensu_opsgenie.events.validator import validate_event

logger = structlog.get_logger(__name__)


class PipelineStage(StrEnum):
    """Pipeline progress. FAILED and DONE are terminal."""

    START = "START"
    DECODED = "DECODED"
    VALIDATED = "VALIDATED"
    BUILT = "BUILT"
    DISPATCHED = "DISPATCHED"
    DONE = "DONE"
    FAILED = "FAILED"


class AlertPipeline:
    """Runs one event through the handler, strictly in order.

    There are no back-edges and no retries: the first failing stage moves
    the pipeline to FAILED and its exception propagates to the caller.
    """

    def __init__(self, settings: Settings, client: AlertClient) -> None:
        self._settings = settings
        self._dispatcher = AlertDispatcher(client)
        self._stage = PipelineStage.START

    @property
    def stage(self) -> PipelineStage:
        return self._stage

    async def run(self, stream: BinaryIO) -> str:
        """Process the event on *stream* and return the Opsgenie request id."""
        settings = self._settings
        try:
            event = read_event(stream)
            self._advance(PipelineStage.DECODED)

            validate_event(event)
            self._advance(PipelineStage.VALIDATED)

            priority = resolve_policy_priority(settings.policy, settings.default_priority)
            request = build_alert_request(
                event,
                priority,
                policy=settings.policy,
                source=settings.opsgenie.source,
                user=settings.opsgenie.user,
            )
            self._advance(PipelineStage.BUILT)

            request_id = await self._dispatcher.dispatch(request, settings.opsgenie.api_key)
            self._advance(PipelineStage.DISPATCHED)
        except Exception as exc:
            failed_at = self._stage
            self._stage = PipelineStage.FAILED
            logger.warning(
                "pipeline_failed",
                after_stage=failed_at.value,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise

        self._advance(PipelineStage.DONE)
        return request_id

    def _advance(self, stage: PipelineStage) -> None:
        self._stage = stage
        logger.debug("pipeline_stage", stage=stage.value)
