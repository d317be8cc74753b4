"""Custom exception classes for hubgate."""


class HubGateError(Exception):
    """Base exception for hubgate."""

    def __init__(self, code: str, message: str, details=None, status_code: int = 500):
        self.code = code
        self.message = message
        self.details = details
        self.status_code = status_code
        super().__init__(message)


class ConfigurationError(HubGateError):
    """Trust material or service configuration is unusable.

    Raised while the validator or the app is being built. Never caught by the
    service itself: a broken configuration must stop the process from booting.
    """

    def __init__(self, message: str, details=None):
        super().__init__("CONFIGURATION_ERROR", message, details, status_code=500)


class PayloadTooLargeError(HubGateError):
    """Request body exceeds the configured ingress limit."""

    def __init__(self, limit: int):
        super().__init__(
            "PAYLOAD_TOO_LARGE",
            f"payload exceeds {limit} bytes",
            details={"limit": limit},
            status_code=413,
        )
