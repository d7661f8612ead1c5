"""Wires a QueryService from a MeterConfig and host adapters."""

from usage_meter.accounting.application.accountant import UsageAccountant
from usage_meter.config.domain.config import MeterConfig
from usage_meter.counter.domain.observer import CounterObserver
from usage_meter.counter.domain.provider import (
    ByteCounterProvider,
    WindowedSummaryProvider,
)
from usage_meter.counter.infrastructure.identifier import (
    ConfiguredIdentifierResolver,
    ProviderCapability,
)
from usage_meter.counter.infrastructure.platform_source import PlatformCounterSource
from usage_meter.counter.infrastructure.psutil_provider import PsutilByteCounterProvider
from usage_meter.permission.domain.gate import PermissionGate
from usage_meter.permission.domain.observer import PermissionObserver
from usage_meter.permission.infrastructure.access_gate import AccessPermissionGate
from usage_meter.query.application.service import QueryService
from usage_meter.query.domain.observer import QueryObserver


def create_query_service(
    config: MeterConfig,
    counter_observer: CounterObserver,
    permission_observer: PermissionObserver,
    query_observer: QueryObserver,
    counters: ByteCounterProvider | None = None,
    windowed: WindowedSummaryProvider | None = None,
    permission_gate: PermissionGate | None = None,
) -> QueryService:
    """Build a QueryService for *config*.

    Host adapters default to psutil counters and the file-access permission
    gate. Without a windowed provider the windowed query reports the platform
    as unsupported.
    """
    source = PlatformCounterSource(
        counters=counters
        or PsutilByteCounterProvider(mobile_interfaces=config.counters.mobile_interfaces),
        identifier_resolver=ConfiguredIdentifierResolver(
            subscriber_id=config.window.subscriber_id
        ),
        supports_windowed=ProviderCapability(windowed=windowed),
        observer=counter_observer,
        windowed=windowed,
    )
    gate = permission_gate or AccessPermissionGate(
        stats_path=config.permission.stats_path,
        settings_url=config.permission.settings_url,
        observer=permission_observer,
    )
    return QueryService(
        accountant=UsageAccountant(source=source),
        permission_gate=gate,
        observer=query_observer,
        network_stats_mode=config.service.network_stats_mode,
        timeout_seconds=config.service.query_timeout_ms / 1000,
    )
