"""UsageReport and WindowedUsageReport value objects."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class UsageReport:
    """Cumulative byte counters since boot. Never partially populated."""

    mobile_rx_bytes: int
    mobile_tx_bytes: int
    total_rx_bytes: int
    total_tx_bytes: int

    def __post_init__(self) -> None:
        for name, value in self._fields():
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

    @classmethod
    def zero(cls) -> "UsageReport":
        return cls(mobile_rx_bytes=0, mobile_tx_bytes=0, total_rx_bytes=0, total_tx_bytes=0)

    def to_channel(self) -> dict[str, Any]:
        """Return the report keyed the way channel callers expect."""
        return {
            "mobileRxBytes": self.mobile_rx_bytes,
            "mobileTxBytes": self.mobile_tx_bytes,
            "totalRxBytes": self.total_rx_bytes,
            "totalTxBytes": self.total_tx_bytes,
        }

    def _fields(self) -> list[tuple[str, int]]:
        return [
            ("mobile_rx_bytes", self.mobile_rx_bytes),
            ("mobile_tx_bytes", self.mobile_tx_bytes),
            ("total_rx_bytes", self.total_rx_bytes),
            ("total_tx_bytes", self.total_tx_bytes),
        ]


@dataclass(frozen=True)
class WindowedUsageReport:
    """Bytes received and transmitted over the half-open window [start_ms, end_ms)."""

    rx_bytes: int
    tx_bytes: int
    start_ms: int
    end_ms: int

    def __post_init__(self) -> None:
        if self.rx_bytes < 0 or self.tx_bytes < 0:
            raise ValueError("rx_bytes and tx_bytes must be >= 0")
        if self.start_ms < 0:
            raise ValueError("start_ms must be >= 0")
        if self.start_ms >= self.end_ms:
            raise ValueError("start_ms must be earlier than end_ms")

    @property
    def total_bytes(self) -> int:
        return self.rx_bytes + self.tx_bytes
