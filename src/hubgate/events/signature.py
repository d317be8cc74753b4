"""HMAC-SHA256 webhook signatures in GitHub's ``X-Hub-Signature-256`` format."""

import hashlib
import hmac

SIGNATURE_HEADER = "x-hub-signature-256"
SIGNATURE_PREFIX = "sha256="


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


def sign_payload(secret: str | bytes, payload: str | bytes) -> str:
    """Compute ``sha256=<hex>`` over the payload, keyed by *secret*.

    Text payloads are signed as their UTF-8 encoding.
    """
    digest = hmac.new(_as_bytes(secret), _as_bytes(payload), hashlib.sha256).hexdigest()
    return SIGNATURE_PREFIX + digest


def verify_signature(secret: str | bytes, payload: str | bytes, signature: str) -> bool:
    """Check *signature* against the expected one in constant time.

    Raises ``ValueError`` for an empty secret and ``TypeError`` for a signature
    that is not an ASCII string; callers treat both as a non-match.
    """
    if not secret:
        raise ValueError("secret is required")
    if not isinstance(signature, str):
        raise TypeError("signature must be a string")
    expected = sign_payload(secret, payload)
    return hmac.compare_digest(expected, signature)
