"""Pydantic settings loaded from YAML configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Literal

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    ValidationError,
    field_validator,
)

from sensu_opsgenie.core.exceptions import ConfigError
from sensu_opsgenie.core.types import Priority

_DEFAULT_CONFIG_PATH = Path("config/settings.yaml")


class OpsgenieConfig(BaseModel):
    """Opsgenie Alert API configuration."""

    model_config = ConfigDict(frozen=True)

    api_url: str = "https://api.opsgenie.com"
    api_key: SecretStr = SecretStr("")
    timeout_secs: float = 10.0
    source: str = "Sensu"
    user: str = "user@opsgenie.com"


class GenericPolicy(BaseModel):
    """Alert fields derived from the check output; priority from the user."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["generic"] = "generic"
    priority: str | None = None
    tags: tuple[str, ...] = ("sensu",)

    @field_validator("priority", mode="before")
    @classmethod
    def _priority_token(cls, value: object) -> object:
        # YAML reads an unquoted `priority: 2` as an int.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class FixedConditionPolicy(BaseModel):
    """Alert fields for a single known condition: a stopped service."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed_condition"] = "fixed_condition"
    label: str = "SDL"
    tags: tuple[str, ...] = ("SDL", "stopped")
    priority: Priority = Priority.P3


AlertPolicy = Annotated[
    GenericPolicy | FixedConditionPolicy,
    Field(discriminator="kind"),
]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    format: str = "json"


class Settings(BaseModel):
    """Root settings container, built once at startup and never mutated."""

    model_config = ConfigDict(frozen=True)

    opsgenie: OpsgenieConfig = OpsgenieConfig()
    policy: AlertPolicy = GenericPolicy()
    default_priority: Priority = Priority.P3
    logging: LoggingConfig = LoggingConfig()

    def with_overrides(
        self,
        *,
        api_key: str | None = None,
        api_url: str | None = None,
        priority: str | None = None,
        variant: str | None = None,
    ) -> Settings:
        """Return a copy with command-line overrides applied.

        A priority token only applies to the generic policy; the
        fixed-condition policy keeps its own constant priority.
        """
        opsgenie = self.opsgenie
        if api_key is not None:
            opsgenie = opsgenie.model_copy(update={"api_key": SecretStr(api_key)})
        if api_url is not None:
            opsgenie = opsgenie.model_copy(update={"api_url": api_url})

        policy: GenericPolicy | FixedConditionPolicy = self.policy
        if variant is not None and variant != policy.kind:
            policy = GenericPolicy() if variant == "generic" else FixedConditionPolicy()
        if priority is not None and isinstance(policy, GenericPolicy):
            policy = policy.model_copy(update={"priority": priority})

        return self.model_copy(update={"opsgenie": opsgenie, "policy": policy})


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from a YAML file.

    Args:
        path: Path to YAML config. Defaults to config/settings.yaml.

    Returns:
        Parsed Settings instance. A missing or empty file yields defaults.

    Raises:
        ConfigError: The file is not valid YAML or does not match the schema.
    """
    config_path = Path(path) if path else _DEFAULT_CONFIG_PATH

    data: dict[str, Any] = {}
    if config_path.exists():
        try:
            with open(config_path) as f:
                raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"invalid YAML in {config_path}: {exc}") from exc
        if isinstance(raw, dict):
            data = raw

    try:
        return Settings(**data)
    except ValidationError as exc:
        raise ConfigError(f"invalid settings in {config_path}: {exc}") from exc
