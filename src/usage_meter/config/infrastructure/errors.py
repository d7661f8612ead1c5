"""Error types raised by config infrastructure."""

from pathlib import Path

from usage_meter.config.infrastructure.env_refs import UnsetReference
from usage_meter.core.errors import UsageMeterError


class MissingEnvVarsError(UsageMeterError):
    """Raised when one or more referenced environment variables are not set."""

    def __init__(self, unset: list[UnsetReference]) -> None:
        self.unset = unset
        self.missing_vars = list(dict.fromkeys(ref.name for ref in unset))
        var_list = ", ".join(str(ref) for ref in sorted(unset, key=lambda ref: ref.name))
        super().__init__(
            f"Failed to load config: missing environment variables: {var_list}"
        )


class ConfigValidationError(UsageMeterError):
    """Raised when the loaded config fails schema validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(UsageMeterError):
    """Raised when the config file cannot be opened, read or parsed."""

    def __init__(self, path: Path, reason: str = "file not found") -> None:
        super().__init__(f"Failed to load config: {reason}: {path}")
