"""FakeCounterSource — in-memory CounterSource implementation for use in tests."""

import time
from dataclasses import dataclass

from usage_meter.counter.domain.report import UsageReport, WindowedUsageReport


@dataclass(frozen=True)
class WindowRead:
    start_ms: int
    end_ms: int
    subscriber_id: str | None


class FakeCounterSource:
    """Satisfies the CounterSource protocol.

    Returns ``report`` from read_cumulative and a window of ``rx_bytes`` /
    ``tx_bytes`` from read_window, unless the matching error is set.
    ``delay_seconds`` blocks every read to simulate a slow host call.
    """

    def __init__(
        self,
        report: UsageReport | None = None,
        rx_bytes: int = 0,
        tx_bytes: int = 0,
        cumulative_error: Exception | None = None,
        window_error: Exception | None = None,
        delay_seconds: float = 0.0,
    ) -> None:
        self._report = report if report is not None else UsageReport.zero()
        self._rx_bytes = rx_bytes
        self._tx_bytes = tx_bytes
        self._cumulative_error = cumulative_error
        self._window_error = window_error
        self._delay_seconds = delay_seconds
        self.window_reads: list[WindowRead] = []

    def read_cumulative(self) -> UsageReport:
        self._maybe_sleep()
        if self._cumulative_error is not None:
            raise self._cumulative_error
        return self._report

    def read_window(
        self, start_ms: int, end_ms: int, subscriber_id: str | None = None
    ) -> WindowedUsageReport:
        self._maybe_sleep()
        self.window_reads.append(
            WindowRead(start_ms=start_ms, end_ms=end_ms, subscriber_id=subscriber_id)
        )
        if self._window_error is not None:
            raise self._window_error
        return WindowedUsageReport(
            rx_bytes=self._rx_bytes,
            tx_bytes=self._tx_bytes,
            start_ms=start_ms,
            end_ms=end_ms,
        )

    def _maybe_sleep(self) -> None:
        if self._delay_seconds:
            time.sleep(self._delay_seconds)
