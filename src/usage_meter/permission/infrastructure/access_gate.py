"""AccessPermissionGate — usage permission backed by read access to the stats source."""

import os
import webbrowser
from pathlib import Path

from usage_meter.permission.domain.gate import PermissionState
from usage_meter.permission.domain.observer import PermissionObserver


class AccessPermissionGate:
    """Satisfies the PermissionGate protocol.

    Permission is granted when the process can read ``stats_path``. Requesting
    permission opens ``settings_url`` in the default browser; the outcome of
    the user's decision is only visible through a later has_usage_permission().
    """

    def __init__(
        self,
        stats_path: Path,
        settings_url: str | None,
        observer: PermissionObserver,
    ) -> None:
        self._stats_path = stats_path
        self._settings_url = settings_url
        self._observer = observer

    def has_usage_permission(self) -> bool:
        granted = os.access(self._stats_path, os.R_OK)
        self._observer.permission_checked(
            state=PermissionState.from_granted(granted).value
        )
        return granted

    def permission_state(self) -> PermissionState:
        return PermissionState.from_granted(self.has_usage_permission())

    def request_usage_permission(self) -> None:
        """Open the settings surface. Failures are logged, never raised."""
        if not self._settings_url:
            self._observer.permission_settings_unconfigured()
            return

        try:
            launched = webbrowser.open(self._settings_url)
        except Exception as exc:  # noqa: BLE001
            self._observer.permission_request_failed(reason=str(exc))
            return

        if not launched:
            self._observer.permission_request_failed(
                reason=f"no handler could open {self._settings_url}"
            )
            return

        self._observer.permission_request_launched(url=self._settings_url)
