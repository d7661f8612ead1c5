"""Error types raised by counter infrastructure."""

from usage_meter.core.errors import UsageMeterError


class CounterUnavailableError(UsageMeterError):
    """Raised when a cumulative counter read fails outright."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to fetch network stats: {reason}", code="UNAVAILABLE")


class UnsupportedPlatformError(UsageMeterError):
    """Raised when the host lacks the capability for windowed summary queries."""

    def __init__(self) -> None:
        super().__init__(
            "Failed to query usage window: platform does not support windowed summaries",
            code="UNSUPPORTED_API",
        )


class IdentifierUnavailableError(UsageMeterError):
    """Raised when no subscriber/device identifier can be resolved for a windowed query."""

    def __init__(self) -> None:
        super().__init__(
            "Failed to query usage window: no subscriber identifier available",
            code="UNAVAILABLE",
        )


class QueryFailedError(UsageMeterError):
    """Raised when the underlying provider call fails or returns invalid data."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to query usage window: {reason}", code="UNAVAILABLE")
