"""FastAPI exception handlers producing ``{"message": ...}`` error bodies."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hubgate.errors.exceptions import HubGateError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI app."""

    @app.exception_handler(HubGateError)
    async def hubgate_error_handler(request: Request, exc: HubGateError):
        trace_id = getattr(request.state, "trace_id", "unknown")
        logger.warning(
            "request_failed",
            extra={
                "path": request.url.path,
                "method": request.method,
                "trace_id": trace_id,
                "code": exc.code,
                "reason": exc.message,
            },
        )
        content = {"message": exc.message, "code": exc.code}
        if exc.details:
            content["details"] = exc.details
        return JSONResponse(status_code=exc.status_code, content=content)
