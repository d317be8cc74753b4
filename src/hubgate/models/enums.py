"""String enums shared across hubgate."""

from enum import StrEnum


class ValidationOutcome(StrEnum):
    ACCEPTED = "accepted"
    MISSING_SIGNATURE = "missing_signature"
    INVALID_SIGNATURE = "invalid_signature"
