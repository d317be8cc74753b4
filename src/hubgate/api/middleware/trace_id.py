"""Trace ID middleware for request/response propagation."""

import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from hubgate.logging_config import bind_delivery_context, clear_delivery_context


class TraceIdMiddleware(BaseHTTPMiddleware):
    """Use the GitHub delivery id (or X-Trace-Id) as trace id and echo it back."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        delivery_id = request.headers.get("x-github-delivery")
        trace_id = delivery_id or request.headers.get("x-trace-id") or f"trc_{uuid.uuid4().hex[:16]}"
        request.state.trace_id = trace_id

        bind_delivery_context(
            trace_id,
            delivery_id=delivery_id,
            event_name=request.headers.get("x-github-event"),
        )
        try:
            response = await call_next(request)
        finally:
            clear_delivery_context()
        response.headers["X-Trace-Id"] = trace_id
        return response
