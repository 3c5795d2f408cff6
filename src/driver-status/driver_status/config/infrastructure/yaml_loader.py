"""YAML config loader — parses, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from driver_status.config.domain.config import DemoConfig, default_config
from driver_status.config.domain.observer import ConfigObserver
from driver_status.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
)


class YamlConfigLoader:
    """Loads, validates, and returns a DemoConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path | None) -> DemoConfig:
        """
        Load and validate a DemoConfig; with no path, return the defaults.

        An empty file is treated as an empty mapping and so also yields the defaults.

        Raises:
            ConfigLoadError: if the file is missing, unreadable, not UTF-8, or not valid YAML.
            ConfigValidationError: if the schema is violated.
        """
        if path is None:
            self._observer.config_defaults_used()
            return default_config()

        raw = _parse_yaml(path=path)
        cfg = _build_config(raw=raw)
        self._observer.config_loaded(path=str(path), driver_name=cfg.driver.name)
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path, reason="file not found") from exc
    except OSError as exc:
        raise ConfigLoadError(path=path, reason=str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise ConfigLoadError(path=path, reason=f"not valid UTF-8: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason=f"invalid YAML: {exc}") from exc


def _build_config(raw: Any) -> DemoConfig:
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"top-level value must be a mapping, got {type(raw).__name__}"
        )
    try:
        return DemoConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
