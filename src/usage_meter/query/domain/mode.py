"""NetworkStatsMode — selects what getNetworkStats reports."""

from enum import StrEnum


class NetworkStatsMode(StrEnum):
    # Four cumulative counters; invalid values degrade to zeros.
    CUMULATIVE = "cumulative"
    # Trailing 24-hour rx+tx total; unsupported or failed queries are errors.
    WINDOWED = "windowed"
