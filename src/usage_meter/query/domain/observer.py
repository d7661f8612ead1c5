"""QueryObserver port — domain events emitted while handling requests."""

from typing import Protocol


class QueryObserver(Protocol):
    """Observer port for query domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def request_received(self, method: str) -> None: ...

    def request_completed(self, method: str, status: str, duration_ms: int) -> None: ...

    def request_failed(self, method: str, code: str, reason: str) -> None: ...

    def method_not_implemented(self, method: str) -> None: ...

    def request_malformed(self, reason: str) -> None: ...
