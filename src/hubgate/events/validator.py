"""GitHub webhook signature validation.

Validates that a request really comes from GitHub using the signature sent in
the ``x-hub-signature-256`` header, which is an HMAC-SHA256 of the raw body
keyed by a secret configured both at GitHub and here.

See https://docs.github.com/en/webhooks/using-webhooks/validating-webhook-deliveries
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from hubgate.events.signature import SIGNATURE_HEADER, verify_signature
from hubgate.events.trust_anchors import TrustAnchor, TrustAnchorSet, collect_trust_anchors
from hubgate.integrations.config import HubGateConfig
from hubgate.models.enums import ValidationOutcome
from hubgate.models.request import (
    RequestDetails,
    RequestRejectionDetails,
    RequestValidationContext,
)

logger = logging.getLogger(__name__)

RequestValidator = Callable[[RequestDetails, RequestValidationContext], Awaitable[ValidationOutcome]]


def missing_signature() -> RequestRejectionDetails:
    return RequestRejectionDetails(status=403, payload={"message": "missing signature"})


def invalid_signature() -> RequestRejectionDetails:
    return RequestRejectionDetails(status=403, payload={"message": "invalid signature"})


async def _anchor_matches(anchor: TrustAnchor, payload: str, signature: str) -> bool:
    try:
        return await asyncio.to_thread(verify_signature, anchor.key, payload, signature)
    except (TypeError, ValueError) as exc:
        logger.debug("Signature check failed for %s: %s", anchor.source, type(exc).__name__)
        return False


async def any_anchor_matches(anchors: TrustAnchorSet, payload: str, signature: str) -> bool:
    """Check every anchor concurrently; True as soon as one of them matches."""
    if not anchors:
        return False

    tasks = [asyncio.create_task(_anchor_matches(anchor, payload, signature)) for anchor in anchors]
    try:
        for next_result in asyncio.as_completed(tasks):
            if await next_result:
                return True
        return False
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()


def _decode_body(request: RequestDetails) -> str | None:
    try:
        return request.body.decode(request.encoding)
    except (LookupError, UnicodeError) as exc:
        logger.info("Webhook body cannot be decoded as %s: %s", request.encoding, type(exc).__name__)
        return None


def build_signature_validator(anchors: TrustAnchorSet) -> RequestValidator:
    """Return a validator bound to an explicit, immutable set of trust anchors."""

    async def validate(
        request: RequestDetails,
        context: RequestValidationContext,
    ) -> ValidationOutcome:
        signature = request.header(SIGNATURE_HEADER)
        if not signature:
            logger.info("Rejected webhook: missing signature")
            context.reject(missing_signature())
            return ValidationOutcome.MISSING_SIGNATURE

        payload = _decode_body(request)
        if payload is not None and await any_anchor_matches(anchors, payload, signature):
            return ValidationOutcome.ACCEPTED

        logger.info("Rejected webhook: invalid signature")
        context.reject(invalid_signature())
        return ValidationOutcome.INVALID_SIGNATURE

    return validate


def create_github_signature_validator(config: HubGateConfig) -> RequestValidator:
    """Build the GitHub webhook validator from configuration.

    Raises ``ConfigurationError`` straight away if an app has no webhook secret.
    """
    return build_signature_validator(collect_trust_anchors(config))
