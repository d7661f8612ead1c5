"""Observer port for the counter domain — defines events in domain language."""

from typing import Protocol


class CounterObserver(Protocol):
    def counter_values_invalid(
        self,
        mobile_rx_bytes: int,
        mobile_tx_bytes: int,
        total_rx_bytes: int,
        total_tx_bytes: int,
    ) -> None: ...

    def counter_read_failed(self, reason: str) -> None: ...

    def window_unsupported(self) -> None: ...

    def window_identifier_unavailable(self) -> None: ...

    def window_query_failed(self, reason: str) -> None: ...
