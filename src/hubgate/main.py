"""FastAPI application factory."""

import logging

from fastapi import FastAPI

from hubgate.config import Settings, settings as default_settings
from hubgate.events.publisher import EventPublisher, InMemoryEventPublisher
from hubgate.events.trust_anchors import collect_trust_anchors
from hubgate.events.validator import build_signature_validator
from hubgate.integrations.config import HubGateConfig, load_config
from hubgate.logging_config import configure_logging

# Configure logging at import time
configure_logging(log_level=default_settings.log_level, json_output=default_settings.json_logs)

logger = logging.getLogger(__name__)


def create_app(
    config: HubGateConfig | None = None,
    publisher: EventPublisher | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The GitHub validator is built here, so a bad trust configuration raises
    ``ConfigurationError`` and the server never starts.
    """
    settings = settings or default_settings
    if config is None:
        fallback = settings.github_webhook_secret
        config = load_config(
            settings.config_path,
            fallback_secret=fallback.get_secret_value() if fallback is not None else None,
        )

    anchors = collect_trust_anchors(config)

    app = FastAPI(
        title="hubgate",
        version="0.1.0",
        description="Signature-verifying ingress for GitHub webhooks.",
    )
    app.state.github_validator = build_signature_validator(anchors)
    app.state.trust_anchors_configured = bool(anchors)
    app.state.event_publisher = publisher or InMemoryEventPublisher(max_events=settings.event_buffer_size)
    app.state.max_body_bytes = settings.max_body_bytes

    from hubgate.api.middleware.trace_id import TraceIdMiddleware
    app.add_middleware(TraceIdMiddleware)

    from hubgate.errors.handlers import register_exception_handlers
    register_exception_handlers(app)

    from hubgate.api.router import api_router
    app.include_router(api_router)

    logger.info("hubgate app created (trust_anchors=%s)", "configured" if anchors else "empty")
    return app
