"""Counter source configuration models."""

from pydantic import BaseModel, Field

DEFAULT_MOBILE_INTERFACES: list[str] = ["rmnet*", "wwan*", "ccmni*", "ppp*"]


class CountersConfig(BaseModel, frozen=True, extra="forbid"):
    # Glob patterns matched against interface names to select mobile interfaces.
    mobile_interfaces: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MOBILE_INTERFACES)
    )


class WindowConfig(BaseModel, frozen=True, extra="forbid"):
    subscriber_id: str | None = None
