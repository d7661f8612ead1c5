"""PsutilByteCounterProvider — per-interface counters summed via psutil."""

import fnmatch

import psutil

from usage_meter.config.domain.counters import DEFAULT_MOBILE_INTERFACES
from usage_meter.counter.domain.provider import UNSUPPORTED

_LOOPBACK_INTERFACES = frozenset({"lo", "lo0"})


class PsutilByteCounterProvider:
    """Satisfies the ByteCounterProvider protocol using psutil.net_io_counters.

    Each read samples the interfaces independently. Mobile reads sum to 0 when
    no interface matches the mobile patterns; every read returns UNSUPPORTED
    when the host reports no interface besides loopback.
    """

    def __init__(self, mobile_interfaces: list[str] | None = None) -> None:
        self._mobile_patterns = (
            list(mobile_interfaces)
            if mobile_interfaces is not None
            else list(DEFAULT_MOBILE_INTERFACES)
        )

    def mobile_rx_bytes(self) -> int:
        return self._sum(field="bytes_recv", mobile_only=True)

    def mobile_tx_bytes(self) -> int:
        return self._sum(field="bytes_sent", mobile_only=True)

    def total_rx_bytes(self) -> int:
        return self._sum(field="bytes_recv", mobile_only=False)

    def total_tx_bytes(self) -> int:
        return self._sum(field="bytes_sent", mobile_only=False)

    def is_mobile(self, interface: str) -> bool:
        return any(fnmatch.fnmatch(interface, pattern) for pattern in self._mobile_patterns)

    def _sum(self, field: str, mobile_only: bool) -> int:
        per_nic = {
            name: counters
            for name, counters in psutil.net_io_counters(pernic=True).items()
            if name not in _LOOPBACK_INTERFACES
        }
        # No usable interface at all means the host exposes no counters.
        if not per_nic:
            return UNSUPPORTED
        return sum(
            getattr(counters, field)
            for name, counters in per_nic.items()
            if not mobile_only or self.is_mobile(name)
        )
