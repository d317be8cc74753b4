"""Collect the shared secrets a GitHub webhook signature may be checked against."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from hubgate.errors.exceptions import ConfigurationError
from hubgate.integrations.config import FALLBACK_SECRET_KEY, HubGateConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrustAnchor:
    """A webhook secret plus a non-secret label saying where it came from."""

    key: bytes = field(repr=False)
    source: str


@dataclass(frozen=True)
class TrustAnchorSet:
    """Immutable, ordered collection of trust anchors. May be empty."""

    anchors: tuple[TrustAnchor, ...] = ()

    def __iter__(self) -> Iterator[TrustAnchor]:
        return iter(self.anchors)

    def __len__(self) -> int:
        return len(self.anchors)

    def __bool__(self) -> bool:
        return bool(self.anchors)

    @classmethod
    def from_secrets(cls, *secrets: str | bytes) -> "TrustAnchorSet":
        """Build a set from bare secrets, labelled by position."""
        return cls(
            tuple(
                TrustAnchor(key=s.encode("utf-8") if isinstance(s, str) else s, source=f"secret:{i}")
                for i, s in enumerate(secrets)
            )
        )


def collect_trust_anchors(config: HubGateConfig) -> TrustAnchorSet:
    """Gather app webhook secrets and the fallback secret into a TrustAnchorSet.

    Every configured GitHub app must carry a webhook secret. The fallback secret
    is added when no apps are configured at all, or when it is set explicitly.
    """
    apps = config.github_apps()
    anchors: list[TrustAnchor] = []

    for app in apps:
        secret = app.webhook_secret.get_secret_value() if app.webhook_secret else ""
        if not secret:
            raise ConfigurationError(
                f"Missing required config value 'webhook_secret' for GitHub app {app.app_id}",
                details={"app_id": str(app.app_id)},
            )
        anchors.append(TrustAnchor(key=secret.encode("utf-8"), source=f"app:{app.app_id}"))

    fallback = config.events.modules.github.webhook_secret
    explicit_fallback = config.has(FALLBACK_SECRET_KEY)
    if explicit_fallback or not apps:
        value = fallback.get_secret_value() if fallback is not None else None
        if explicit_fallback and not value:
            raise ConfigurationError(
                f"Config value '{FALLBACK_SECRET_KEY}' must be a non-empty string"
            )
        if value:
            anchors.append(TrustAnchor(key=value.encode("utf-8"), source="fallback"))

    if not anchors:
        logger.warning(
            "No GitHub webhook secrets configured; every webhook request will be rejected"
        )
    else:
        logger.info(
            "Collected GitHub webhook trust anchors",
            extra={"app_secrets": len(apps), "fallback": any(a.source == "fallback" for a in anchors)},
        )

    return TrustAnchorSet(tuple(anchors))
