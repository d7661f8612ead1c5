"""YAML config loader — parses, expands env references, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from usage_meter.config.domain.config import MeterConfig
from usage_meter.config.domain.observer import ConfigObserver
from usage_meter.config.infrastructure.env_refs import expand_env_refs
from usage_meter.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from usage_meter.query.domain.mode import NetworkStatsMode


class YamlConfigLoader:
    """Loads, expands, validates, and returns a MeterConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path | None) -> MeterConfig:
        """
        Load, expand env references, validate, and return a MeterConfig.

        With no path the defaults are returned. An empty file also yields the
        defaults.

        Raises:
            ConfigLoadError: if the file is missing or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} reference without a fallback is unset (all collected first).
            ConfigValidationError: if the schema is violated.
        """
        raw = {} if path is None else _parse_yaml(path=path)
        expansion = expand_env_refs(raw)
        if expansion.unset:
            raise MissingEnvVarsError(expansion.unset)
        cfg = _build_config(expanded=expansion.value)
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(
            name=cfg.name, network_stats_mode=cfg.service.network_stats_mode.value
        )
        return cfg


def _parse_yaml(path: Path) -> Any:
    if not path.is_file():
        raise ConfigLoadError(path=path)
    with path.open("r", encoding="utf-8") as fh:
        try:
            raw = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise ConfigLoadError(path=path, reason=f"invalid YAML ({exc})") from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigValidationError("top-level YAML value must be a mapping")
    return raw


def _build_config(expanded: Any) -> MeterConfig:
    try:
        return MeterConfig.model_validate(expanded)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(cfg: MeterConfig, observer: ConfigObserver) -> None:
    if (
        cfg.service.network_stats_mode == NetworkStatsMode.WINDOWED
        and not cfg.window.subscriber_id
    ):
        observer.config_windowed_without_subscriber_warning()
