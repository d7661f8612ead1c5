"""Fake PermissionObserver for use in tests — records events without mocking."""


class FakePermissionObserver:
    def __init__(self) -> None:
        self.checked: list[str] = []
        self.launched: list[str] = []
        self.failed: list[str] = []
        self.unconfigured_count = 0

    def permission_checked(self, state: str) -> None:
        self.checked.append(state)

    def permission_request_launched(self, url: str) -> None:
        self.launched.append(url)

    def permission_request_failed(self, reason: str) -> None:
        self.failed.append(reason)

    def permission_settings_unconfigured(self) -> None:
        self.unconfigured_count += 1
