"""Send signed webhook deliveries, e.g. to smoke-test a deployed gate."""

import logging
import uuid

import httpx

from hubgate.events.signature import sign_payload

logger = logging.getLogger(__name__)


def build_headers(body: bytes, secret: str, event_name: str, delivery_id: str | None = None) -> dict[str, str]:
    """Headers GitHub sends with a webhook delivery, signature included."""
    return {
        "Content-Type": "application/json",
        "X-Hub-Signature-256": sign_payload(secret, body),
        "X-GitHub-Event": event_name,
        "X-GitHub-Delivery": delivery_id or str(uuid.uuid4()),
    }


async def deliver_signed_event(
    url: str,
    body: bytes,
    secret: str,
    event_name: str = "ping",
    delivery_id: str | None = None,
    max_retries: int = 3,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict:
    """POST a signed webhook body to *url*, retrying on 5xx and transport errors.

    Returns a delivery result dict (url, status, error).
    """
    headers = build_headers(body, secret, event_name, delivery_id)

    for attempt in range(max_retries):
        try:
            async with httpx.AsyncClient(timeout=10.0, transport=transport) as client:
                resp = await client.post(url, content=body, headers=headers)
                if resp.status_code < 300:
                    return {"url": url, "status": resp.status_code, "error": None}
                if resp.status_code >= 500 and attempt < max_retries - 1:
                    continue
                return {"url": url, "status": resp.status_code, "error": f"HTTP {resp.status_code}"}
        except httpx.HTTPError as exc:
            if attempt < max_retries - 1:
                continue
            logger.warning("Webhook delivery failed to %s: %s", url, exc)
            return {"url": url, "status": None, "error": str(exc)}

    return {"url": url, "status": None, "error": "max retries exceeded"}
