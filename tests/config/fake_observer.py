"""Fake ConfigObserver for use in tests — records events without mocking."""


class FakeConfigObserver:
    def __init__(self) -> None:
        self.loaded: list[dict[str, str]] = []
        self.windowed_warnings = 0

    def config_loaded(self, name: str, network_stats_mode: str) -> None:
        self.loaded.append({"name": name, "network_stats_mode": network_stats_mode})

    def config_windowed_without_subscriber_warning(self) -> None:
        self.windowed_warnings += 1
