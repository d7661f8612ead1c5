"""Provider ports consumed by a CounterSource — supplied by the host platform."""

from typing import Protocol

# Returned by a ByteCounterProvider read when the counter does not exist on
# this device.
UNSUPPORTED = -1


class ByteCounterProvider(Protocol):
    """Four independent cumulative counters. Any read may return a negative sentinel."""

    def mobile_rx_bytes(self) -> int: ...

    def mobile_tx_bytes(self) -> int: ...

    def total_rx_bytes(self) -> int: ...

    def total_tx_bytes(self) -> int: ...


class WindowedSummaryProvider(Protocol):
    """Aggregated (rx_bytes, tx_bytes) for one subscriber over [start_ms, end_ms)."""

    def query_summary(
        self, subscriber_id: str, start_ms: int, end_ms: int
    ) -> tuple[int, int]: ...


class IdentifierResolver(Protocol):
    """Resolves the device/subscriber identifier that scopes a windowed query."""

    def resolve(self) -> str | None: ...


class CapabilityCheck(Protocol):
    """Reports whether the host supports windowed summary queries."""

    def __call__(self) -> bool: ...
