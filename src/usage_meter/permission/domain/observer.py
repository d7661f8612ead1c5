"""Observer port for the permission domain."""

from typing import Protocol


class PermissionObserver(Protocol):
    def permission_checked(self, state: str) -> None: ...

    def permission_request_launched(self, url: str) -> None: ...

    def permission_request_failed(self, reason: str) -> None: ...

    def permission_settings_unconfigured(self) -> None: ...
