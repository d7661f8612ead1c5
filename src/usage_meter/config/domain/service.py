"""Query service configuration model."""

from pydantic import BaseModel, Field

from usage_meter.query.domain.mode import NetworkStatsMode


class ServiceConfig(BaseModel, frozen=True, extra="forbid"):
    network_stats_mode: NetworkStatsMode = NetworkStatsMode.CUMULATIVE
    query_timeout_ms: int = Field(default=300, ge=1)
