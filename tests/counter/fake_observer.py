"""FakeCounterObserver — records counter domain events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class InvalidValuesEvent:
    mobile_rx_bytes: int
    mobile_tx_bytes: int
    total_rx_bytes: int
    total_tx_bytes: int


class FakeCounterObserver:
    """Records all emitted counter events without mocking or patching."""

    def __init__(self) -> None:
        self.invalid_values: list[InvalidValuesEvent] = []
        self.read_failures: list[str] = []
        self.window_unsupported_count = 0
        self.window_identifier_unavailable_count = 0
        self.window_failures: list[str] = []

    def counter_values_invalid(
        self,
        mobile_rx_bytes: int,
        mobile_tx_bytes: int,
        total_rx_bytes: int,
        total_tx_bytes: int,
    ) -> None:
        self.invalid_values.append(
            InvalidValuesEvent(
                mobile_rx_bytes=mobile_rx_bytes,
                mobile_tx_bytes=mobile_tx_bytes,
                total_rx_bytes=total_rx_bytes,
                total_tx_bytes=total_tx_bytes,
            )
        )

    def counter_read_failed(self, reason: str) -> None:
        self.read_failures.append(reason)

    def window_unsupported(self) -> None:
        self.window_unsupported_count += 1

    def window_identifier_unavailable(self) -> None:
        self.window_identifier_unavailable_count += 1

    def window_query_failed(self, reason: str) -> None:
        self.window_failures.append(reason)
