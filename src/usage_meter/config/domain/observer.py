"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, name: str, network_stats_mode: str) -> None: ...

    def config_windowed_without_subscriber_warning(self) -> None: ...
