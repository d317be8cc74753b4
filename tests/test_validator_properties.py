"""Property tests for the signature validator over arbitrary bodies and secrets."""

import asyncio

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from hubgate.events.signature import sign_payload
from hubgate.events.trust_anchors import TrustAnchorSet
from hubgate.events.validator import build_signature_validator
from hubgate.models.enums import ValidationOutcome
from hubgate.models.request import RecordingValidationContext, RequestDetails

pytestmark = pytest.mark.property

secret_text = st.text(
    alphabet=st.characters(min_codepoint=33, max_codepoint=126),
    min_size=1,
    max_size=32,
)
secret_sets = st.lists(secret_text, min_size=1, max_size=5)
bodies = st.text(max_size=512).map(lambda s: s.encode("utf-8"))


def _run(secrets: list[str], body: bytes, signature: str | None) -> ValidationOutcome:
    headers = {"x-hub-signature-256": signature} if signature is not None else {}
    validate = build_signature_validator(TrustAnchorSet.from_secrets(*secrets))
    return asyncio.run(validate(RequestDetails(headers=headers, body=body), RecordingValidationContext()))


@given(secrets=secret_sets, body=bodies, data=st.data())
@settings(max_examples=100, deadline=None)
def test_any_member_secret_is_accepted(secrets, body, data):
    signer = data.draw(st.sampled_from(secrets))
    assert _run(secrets, body, sign_payload(signer, body)) == ValidationOutcome.ACCEPTED


@given(secrets=secret_sets, body=bodies)
@settings(max_examples=50, deadline=None)
def test_missing_signature_always_rejected(secrets, body):
    assert _run(secrets, body, None) == ValidationOutcome.MISSING_SIGNATURE


@given(secrets=secret_sets, outsider=secret_text, body=bodies)
@settings(max_examples=100, deadline=None)
def test_outside_secret_always_rejected(secrets, outsider, body):
    secrets = [s for s in secrets if s != outsider] or ["fallback-" + outsider]
    assert _run(secrets, body, sign_payload(outsider, body)) == ValidationOutcome.INVALID_SIGNATURE


@given(secrets=secret_sets, body=bodies, data=st.data())
@settings(max_examples=50, deadline=None)
def test_outcome_independent_of_order(secrets, body, data):
    signer = data.draw(st.sampled_from(secrets + ["not-configured"]))
    signature = sign_payload(signer, body)
    shuffled = data.draw(st.permutations(secrets))
    assert _run(secrets, body, signature) == _run(list(shuffled), body, signature)


@given(body=bodies, secret=secret_text)
@settings(max_examples=50, deadline=None)
def test_empty_set_rejects_everything(body, secret):
    assert _run([], body, sign_payload(secret, body)) == ValidationOutcome.INVALID_SIGNATURE


@given(secret=secret_text, body=bodies.filter(len), data=st.data())
@settings(max_examples=100, deadline=None)
def test_single_byte_flip_rejected(secret, body, data):
    signature = sign_payload(secret, body)
    index = data.draw(st.integers(min_value=0, max_value=len(body) - 1))
    flip = data.draw(st.integers(min_value=1, max_value=255))
    tampered = bytearray(body)
    tampered[index] ^= flip
    assert _run([secret], bytes(tampered), signature) == ValidationOutcome.INVALID_SIGNATURE
