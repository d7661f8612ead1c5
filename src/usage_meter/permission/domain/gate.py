"""PermissionGate Protocol and PermissionState."""

from enum import StrEnum
from typing import Protocol


class PermissionState(StrEnum):
    GRANTED = "granted"
    DENIED = "denied"

    @classmethod
    def from_granted(cls, granted: bool) -> "PermissionState":
        return cls.GRANTED if granted else cls.DENIED


class PermissionGate(Protocol):
    """Structural interface for usage-permission checks.

    has_usage_permission is evaluated fresh on every call: the grant can be
    revoked out-of-band at any time. request_usage_permission starts an
    out-of-process authorization flow, returns immediately, and never raises.
    """

    def has_usage_permission(self) -> bool: ...

    def request_usage_permission(self) -> None: ...
