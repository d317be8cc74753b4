"""Request and rejection value types passed between the ingress and validators."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class RequestDetails:
    """An inbound webhook request as received on the wire.

    ``body`` must be the exact bytes the sender signed; header keys are
    normalised to lower case so lookups are case-insensitive.
    """

    headers: Mapping[str, str]
    body: bytes
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        normalised = {str(k).lower(): v for k, v in self.headers.items()}
        object.__setattr__(self, "headers", normalised)

    def header(self, name: str) -> str | None:
        return self.headers.get(name.lower())


@dataclass(frozen=True)
class RequestRejectionDetails:
    status: int
    payload: dict[str, Any] = field(default_factory=dict)


class RequestValidationContext(Protocol):
    """Side channel a validator uses to short-circuit the request pipeline."""

    def reject(self, details: RequestRejectionDetails) -> None: ...


class RecordingValidationContext:
    """Validation context that remembers the rejection, if any."""

    def __init__(self) -> None:
        self.rejection: RequestRejectionDetails | None = None

    def reject(self, details: RequestRejectionDetails) -> None:
        self.rejection = details

    @property
    def rejected(self) -> bool:
        return self.rejection is not None
