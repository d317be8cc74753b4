"""FastAPI dependency injection providers."""

from typing import Annotated

from fastapi import Depends, Request

from hubgate.events.publisher import EventPublisher
from hubgate.events.validator import RequestValidator


def get_github_validator(request: Request) -> RequestValidator:
    """Return the validator built at application start-up."""
    return request.app.state.github_validator


def get_event_publisher(request: Request) -> EventPublisher:
    return request.app.state.event_publisher


def get_trace_id(request: Request) -> str:
    """Extract trace_id from request state (set by middleware)."""
    return getattr(request.state, "trace_id", "unknown")


GithubValidator = Annotated[RequestValidator, Depends(get_github_validator)]
Publisher = Annotated[EventPublisher, Depends(get_event_publisher)]
TraceId = Annotated[str, Depends(get_trace_id)]
