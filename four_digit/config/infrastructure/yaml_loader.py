"""YAML config loader: parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from four_digit.config.domain.config import AppConfig
from four_digit.config.domain.observer import ConfigObserver
from four_digit.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from four_digit.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns an AppConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> AppConfig:
        """
        Load, interpolate, validate, and return an AppConfig from a YAML file.

        A relative ``storage.data_dir`` is resolved against the config file's
        directory.

        Raises:
            ConfigLoadError: if the file is missing or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the schema is violated.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        interpolated = interpolate(raw)
        cfg = _build_config(resolved=interpolated)
        cfg = _anchor_data_dir(cfg=cfg, config_dir=path.parent)
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(name=cfg.name, model=cfg.oracle.model)
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason="invalid YAML") from exc


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build_config(resolved: Any) -> AppConfig:
    if not isinstance(resolved, dict):
        raise ConfigValidationError("top-level YAML value must be a mapping")
    try:
        return AppConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _anchor_data_dir(cfg: AppConfig, config_dir: Path) -> AppConfig:
    data_dir = cfg.storage.data_dir
    if data_dir.is_absolute():
        return cfg
    storage = cfg.storage.model_copy(update={"data_dir": config_dir / data_dir})
    return cfg.model_copy(update={"storage": storage})


def _emit_warnings(cfg: AppConfig, observer: ConfigObserver) -> None:
    if not cfg.server.batch_secret:
        observer.config_batch_secret_missing()
