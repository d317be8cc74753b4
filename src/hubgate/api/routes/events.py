"""HTTP ingress for GitHub webhooks.

Each request is checked by the GitHub signature validator before anything
else looks at it; only accepted requests reach the event publisher.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from hubgate.dependencies import GithubValidator, Publisher, TraceId
from hubgate.errors.exceptions import PayloadTooLargeError
from hubgate.events.publisher import EventParams
from hubgate.models.request import RecordingValidationContext, RequestDetails

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Events"])

GITHUB_TOPIC = "github"


def declared_encoding(content_type: str | None, default: str = "utf-8") -> str:
    """Return the ``charset`` parameter of a Content-Type header, if any."""
    if not content_type:
        return default
    for param in content_type.split(";")[1:]:
        name, _, value = param.strip().partition("=")
        if name.strip().lower() == "charset" and value.strip():
            return value.strip().strip('"')
    return default


async def _read_body(request: Request) -> bytes:
    limit = request.app.state.max_body_bytes
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        raise PayloadTooLargeError(limit)

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise PayloadTooLargeError(limit)
    return bytes(body)


@router.post("/events/http/github", status_code=202)
async def github_ingress(
    request: Request,
    validator: GithubValidator,
    publisher: Publisher,
    trace_id: TraceId,
):
    """Verify a GitHub webhook delivery and publish it on the ``github`` topic."""
    body = await _read_body(request)
    details = RequestDetails(
        headers=dict(request.headers),
        body=body,
        encoding=declared_encoding(request.headers.get("content-type")),
    )

    context = RecordingValidationContext()
    outcome = await validator(details, context)
    if context.rejection is not None:
        logger.warning("Webhook rejected", extra={"trace_id": trace_id, "outcome": str(outcome)})
        return JSONResponse(status_code=context.rejection.status, content=context.rejection.payload)

    metadata = {k: v for k, v in details.headers.items() if k.startswith("x-github-")}
    await publisher.publish(EventParams(topic=GITHUB_TOPIC, event_payload=body, metadata=metadata))
    return {"status": "accepted"}
