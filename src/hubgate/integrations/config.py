"""Configuration models for GitHub integrations and the events module.

The configuration file is TOML::

    [[integrations.github]]
    host = "github.com"

    [[integrations.github.apps]]
    app_id = 12345
    webhook_secret = "..."

    [events.modules.github]
    webhook_secret = "..."

Secrets are held as ``SecretStr`` so they never show up in reprs or logs.
"""

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, SecretStr
from pydantic import ValidationError as PydanticValidationError

from hubgate.errors.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

FALLBACK_SECRET_KEY = "events.modules.github.webhook_secret"


class GithubAppConfig(BaseModel):
    """A GitHub App installed against one GitHub integration."""

    model_config = ConfigDict(extra="forbid")

    app_id: int | str
    webhook_secret: SecretStr | None = None
    private_key: SecretStr | None = None
    client_id: str | None = None
    client_secret: SecretStr | None = None
    allowed_installation_owners: list[str] | None = None


class GithubIntegrationConfig(BaseModel):
    """One GitHub host (github.com or an Enterprise Server instance)."""

    model_config = ConfigDict(extra="forbid")

    host: str = "github.com"
    api_base_url: str | None = None
    apps: list[GithubAppConfig] = Field(default_factory=list)


class IntegrationsConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    github: list[GithubIntegrationConfig] = Field(default_factory=list)


class GithubEventsModuleConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    webhook_secret: SecretStr | None = None


class EventsModulesConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    github: GithubEventsModuleConfig = Field(default_factory=GithubEventsModuleConfig)


class EventsConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    modules: EventsModulesConfig = Field(default_factory=EventsModulesConfig)


class HubGateConfig(BaseModel):
    """Root of the trust configuration."""

    model_config = ConfigDict(extra="forbid")

    integrations: IntegrationsConfig = Field(default_factory=IntegrationsConfig)
    events: EventsConfig = Field(default_factory=EventsConfig)

    def has(self, path: str) -> bool:
        """Return True if the dotted *path* was explicitly set in the source data.

        Defaults filled in by the models do not count as present.
        """
        node: BaseModel = self
        parts = path.split(".")
        for index, part in enumerate(parts):
            if part not in node.model_fields_set:
                return False
            value = getattr(node, part)
            if index == len(parts) - 1:
                return True
            if not isinstance(value, BaseModel):
                return False
            node = value
        return False

    def github_apps(self) -> list[GithubAppConfig]:
        """All apps across every configured GitHub integration, in config order."""
        return [app for integration in self.integrations.github for app in integration.apps]


def parse_config(raw: dict, fallback_secret: str | None = None) -> HubGateConfig:
    """Validate raw configuration data.

    A *fallback_secret* (typically from the environment) is merged in as an
    explicit ``events.modules.github.webhook_secret``, overriding the file.
    """
    data = dict(raw)
    if fallback_secret is not None:
        events = dict(data.get("events") or {})
        modules = dict(events.get("modules") or {})
        github = dict(modules.get("github") or {})
        github["webhook_secret"] = fallback_secret
        modules["github"] = github
        events["modules"] = modules
        data["events"] = events

    try:
        return HubGateConfig.model_validate(data)
    except PydanticValidationError as exc:
        raise ConfigurationError(
            "Invalid hubgate configuration",
            details=exc.errors(include_url=False, include_input=False),
        ) from exc


def load_config(path: str | Path, fallback_secret: str | None = None) -> HubGateConfig:
    """Load the TOML configuration file at *path*.

    A missing file yields an empty configuration; the resulting trust set will
    then only hold the fallback secret, if any.
    """
    config_path = Path(path)
    if not config_path.exists():
        logger.warning("Config file %s not found, using empty configuration", config_path)
        raw: dict = {}
    else:
        try:
            with open(config_path, "rb") as f:
                raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigurationError(f"Config file {config_path} is not valid TOML: {exc}") from exc

    return parse_config(raw, fallback_secret=fallback_secret)
