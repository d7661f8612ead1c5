"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, network_stats_mode: str) -> None:
        self._log.info(
            "config.loaded", name=name, network_stats_mode=network_stats_mode
        )

    def config_windowed_without_subscriber_warning(self) -> None:
        self._log.warning(
            "config.windowed_without_subscriber_warning",
            message="Windowed mode without window.subscriber_id; getNetworkStats will fail"
            " unless the host resolves an identifier",
        )
