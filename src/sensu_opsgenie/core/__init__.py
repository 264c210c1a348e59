"""Core module — config, types, logging, base errors."""

from sensu_opsgenie.core.config import (
    AlertPolicy,
    FixedConditionPolicy,
    GenericPolicy,
    LoggingConfig,
    OpsgenieConfig,
    Settings,
    load_settings,
)
from sensu_opsgenie.core.exceptions import ConfigError, HandlerError, UsageError
from sensu_opsgenie.core.logging import setup_logging
from sensu_opsgenie.core.types import Priority

__all__ = [
    "AlertPolicy",
    "ConfigError",
    "FixedConditionPolicy",
    "GenericPolicy",
    "HandlerError",
    "LoggingConfig",
    "OpsgenieConfig",
    "Priority",
    "Settings",
    "UsageError",
    "load_settings",
    "setup_logging",
]
