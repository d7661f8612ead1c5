"""Structlog implementation of the QueryObserver port."""

import structlog


class StructlogQueryObserver:
    """Delegates query domain events to structlog.

    Satisfies the QueryObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def request_received(self, method: str) -> None:
        self._log.debug("query.request_received", method=method)

    def request_completed(self, method: str, status: str, duration_ms: int) -> None:
        self._log.info(
            "query.request_completed",
            method=method,
            status=status,
            duration_ms=duration_ms,
        )

    def request_failed(self, method: str, code: str, reason: str) -> None:
        self._log.error("query.request_failed", method=method, code=code, reason=reason)

    def method_not_implemented(self, method: str) -> None:
        self._log.warning("query.method_not_implemented", method=method)

    def request_malformed(self, reason: str) -> None:
        self._log.warning("query.request_malformed", reason=reason)
