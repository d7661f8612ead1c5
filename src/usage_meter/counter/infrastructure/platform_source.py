"""PlatformCounterSource — CounterSource over host provider ports."""

from usage_meter.counter.domain.observer import CounterObserver
from usage_meter.counter.domain.provider import (
    ByteCounterProvider,
    CapabilityCheck,
    IdentifierResolver,
    WindowedSummaryProvider,
)
from usage_meter.counter.domain.report import UsageReport, WindowedUsageReport
from usage_meter.counter.infrastructure.errors import (
    CounterUnavailableError,
    IdentifierUnavailableError,
    QueryFailedError,
    UnsupportedPlatformError,
)


class PlatformCounterSource:
    """Reads host counters and normalizes them into reports.

    Satisfies the CounterSource protocol structurally. Provider faults are
    converted here; negative cumulative values degrade the whole report to zero.
    """

    def __init__(
        self,
        counters: ByteCounterProvider,
        identifier_resolver: IdentifierResolver,
        supports_windowed: CapabilityCheck,
        observer: CounterObserver,
        windowed: WindowedSummaryProvider | None = None,
    ) -> None:
        self._counters = counters
        self._identifier_resolver = identifier_resolver
        self._supports_windowed = supports_windowed
        self._observer = observer
        self._windowed = windowed

    def read_cumulative(self) -> UsageReport:
        """Read all four counters and return a report, all-zero if any value is invalid.

        Raises:
            CounterUnavailableError: if any provider read raises.
        """
        try:
            mobile_rx = self._counters.mobile_rx_bytes()
            mobile_tx = self._counters.mobile_tx_bytes()
            total_rx = self._counters.total_rx_bytes()
            total_tx = self._counters.total_tx_bytes()
        except Exception as exc:
            self._observer.counter_read_failed(reason=str(exc))
            raise CounterUnavailableError(reason=str(exc)) from exc

        if min(mobile_rx, mobile_tx, total_rx, total_tx) < 0:
            self._observer.counter_values_invalid(
                mobile_rx_bytes=mobile_rx,
                mobile_tx_bytes=mobile_tx,
                total_rx_bytes=total_rx,
                total_tx_bytes=total_tx,
            )
            return UsageReport.zero()

        return UsageReport(
            mobile_rx_bytes=mobile_rx,
            mobile_tx_bytes=mobile_tx,
            total_rx_bytes=total_rx,
            total_tx_bytes=total_tx,
        )

    def read_window(
        self, start_ms: int, end_ms: int, subscriber_id: str | None = None
    ) -> WindowedUsageReport:
        """Query the windowed summary provider for [start_ms, end_ms).

        The capability check runs before anything else, so an unsupported host
        never reaches the provider.

        Raises:
            UnsupportedPlatformError: if the host lacks windowed summaries.
            IdentifierUnavailableError: if no subscriber id is given or resolvable.
            QueryFailedError: if the provider raises or returns invalid values.
        """
        if self._windowed is None or not self._supports_windowed():
            self._observer.window_unsupported()
            raise UnsupportedPlatformError()

        resolved_id = subscriber_id or self._identifier_resolver.resolve()
        if not resolved_id:
            self._observer.window_identifier_unavailable()
            raise IdentifierUnavailableError()

        try:
            rx_bytes, tx_bytes = self._windowed.query_summary(
                subscriber_id=resolved_id, start_ms=start_ms, end_ms=end_ms
            )
            return WindowedUsageReport(
                rx_bytes=rx_bytes, tx_bytes=tx_bytes, start_ms=start_ms, end_ms=end_ms
            )
        except Exception as exc:
            self._observer.window_query_failed(reason=str(exc))
            raise QueryFailedError(reason=str(exc)) from exc
