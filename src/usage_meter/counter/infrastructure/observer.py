"""Structlog implementation of the CounterObserver port."""

import structlog


class StructlogCounterObserver:
    """Delegates counter domain events to structlog.

    Satisfies the CounterObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def counter_values_invalid(
        self,
        mobile_rx_bytes: int,
        mobile_tx_bytes: int,
        total_rx_bytes: int,
        total_tx_bytes: int,
    ) -> None:
        self._log.warning(
            "counter.invalid_values",
            mobile_rx_bytes=mobile_rx_bytes,
            mobile_tx_bytes=mobile_tx_bytes,
            total_rx_bytes=total_rx_bytes,
            total_tx_bytes=total_tx_bytes,
            message="Invalid counter data. Returning default values.",
        )

    def counter_read_failed(self, reason: str) -> None:
        self._log.error("counter.read_failed", reason=reason)

    def window_unsupported(self) -> None:
        self._log.warning("counter.window_unsupported")

    def window_identifier_unavailable(self) -> None:
        self._log.warning("counter.window_identifier_unavailable")

    def window_query_failed(self, reason: str) -> None:
        self._log.error("counter.window_query_failed", reason=reason)
