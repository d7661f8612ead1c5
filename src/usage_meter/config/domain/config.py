"""Top-level MeterConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from usage_meter.config.domain.counters import CountersConfig, WindowConfig
from usage_meter.config.domain.permission import PermissionConfig
from usage_meter.config.domain.service import ServiceConfig


class MeterConfig(BaseModel, frozen=True, extra="forbid"):
    """Root configuration aggregate. Every section has usable defaults."""

    name: str = Field(default="usage-meter", min_length=1)
    service: ServiceConfig = ServiceConfig()
    counters: CountersConfig = CountersConfig()
    window: WindowConfig = WindowConfig()
    permission: PermissionConfig = PermissionConfig()
