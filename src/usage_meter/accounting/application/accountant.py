"""UsageAccountant — assembles usage reports from a CounterSource."""

import time
from collections.abc import Callable
from datetime import timedelta

from usage_meter.counter.domain.report import UsageReport, WindowedUsageReport
from usage_meter.counter.domain.source import CounterSource

WINDOW = timedelta(hours=24)
_WINDOW_MS = int(WINDOW.total_seconds() * 1000)


def _wall_clock_ms() -> int:
    return time.time_ns() // 1_000_000


class UsageAccountant:
    """Reads a CounterSource and turns the result into reportable values.

    Every call reads the counters afresh and recomputes the window from the
    clock. The only state kept between calls is the previous window end: if
    the clock steps backwards the new window ends there instead, so window
    ends never decrease. No counter values are cached.
    """

    def __init__(
        self,
        source: CounterSource,
        clock_ms: Callable[[], int] = _wall_clock_ms,
    ) -> None:
        self._source = source
        self._clock_ms = clock_ms
        self._last_end_ms = 0

    def get_simple_report(self) -> UsageReport:
        return self._source.read_cumulative()

    def get_windowed_report(self) -> WindowedUsageReport:
        """Read the trailing 24-hour window ending now.

        Raises:
            UnsupportedPlatformError, IdentifierUnavailableError, QueryFailedError:
                propagated from the CounterSource.
        """
        # A wall clock stepping backwards must not move the window end earlier.
        end_ms = max(self._clock_ms(), self._last_end_ms)
        self._last_end_ms = end_ms
        return self._source.read_window(start_ms=end_ms - _WINDOW_MS, end_ms=end_ms)

    def get_windowed_total(self) -> int:
        return self.get_windowed_report().total_bytes
