"""Permission gate configuration model."""

from pathlib import Path

from pydantic import BaseModel


class PermissionConfig(BaseModel, frozen=True, extra="forbid"):
    stats_path: Path = Path("/proc/net/dev")
    settings_url: str | None = None
