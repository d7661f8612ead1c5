"""Structlog implementation of the PermissionObserver port."""

import structlog


class StructlogPermissionObserver:
    """Delegates permission domain events to structlog.

    Satisfies the PermissionObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def permission_checked(self, state: str) -> None:
        self._log.debug("permission.checked", state=state)

    def permission_request_launched(self, url: str) -> None:
        self._log.info("permission.request_launched", url=url)

    def permission_request_failed(self, reason: str) -> None:
        self._log.error(
            "permission.request_failed",
            reason=reason,
            message="Failed to open usage stats settings",
        )

    def permission_settings_unconfigured(self) -> None:
        self._log.warning(
            "permission.settings_unconfigured",
            message="No settings URL configured; permission request skipped",
        )
