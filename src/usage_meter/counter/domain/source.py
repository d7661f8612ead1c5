"""CounterSource Protocol — structural interface for byte-counter readers."""

from typing import Protocol

from usage_meter.counter.domain.report import UsageReport, WindowedUsageReport


class CounterSource(Protocol):
    """Reads cumulative and windowed byte counters from the host platform.

    Implementations convert every provider fault into a UsageMeterError
    subclass; nothing else may escape.
    """

    def read_cumulative(self) -> UsageReport: ...

    def read_window(
        self, start_ms: int, end_ms: int, subscriber_id: str | None = None
    ) -> WindowedUsageReport: ...
