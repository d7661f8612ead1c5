"""Identifier resolution and capability checks for windowed queries."""

from usage_meter.counter.domain.provider import WindowedSummaryProvider


class ConfiguredIdentifierResolver:
    """Resolves the subscriber id from configuration. Blank values count as absent."""

    def __init__(self, subscriber_id: str | None) -> None:
        self._subscriber_id = subscriber_id

    def resolve(self) -> str | None:
        if self._subscriber_id is None or not self._subscriber_id.strip():
            return None
        return self._subscriber_id.strip()


class ProviderCapability:
    """Capability check that passes only when a windowed provider is wired in."""

    def __init__(self, windowed: WindowedSummaryProvider | None) -> None:
        self._windowed = windowed

    def __call__(self) -> bool:
        return self._windowed is not None
