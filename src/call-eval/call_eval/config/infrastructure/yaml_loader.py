"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from call_eval.config.domain.config import CallEvalConfig
from call_eval.config.domain.observer import ConfigObserver
from call_eval.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from call_eval.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)

# Above this a judge stops favouring consistent scores.
MAX_CONSISTENT_TEMPERATURE = 0.5


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a CallEvalConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> CallEvalConfig:
        """
        Load, interpolate, validate, and return a CallEvalConfig from a YAML file.

        Raises:
            ConfigLoadError: if the file is missing or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the schema is violated.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        cfg = _build_config(interpolated=interpolate(raw))
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(name=cfg.name, path=str(path))
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason="invalid YAML") from exc

    if not isinstance(raw, dict):
        raise ConfigLoadError(path=path, reason="top level must be a mapping")
    return raw


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build_config(interpolated: Any) -> CallEvalConfig:
    try:
        return CallEvalConfig.model_validate(interpolated)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(cfg: CallEvalConfig, observer: ConfigObserver) -> None:
    judges = {
        "evaluation_judge": cfg.evaluation_judge,
        "tone_judge": cfg.tone_judge,
    }
    for judge_name, judge in judges.items():
        if judge.temperature > MAX_CONSISTENT_TEMPERATURE:
            observer.config_judge_temperature_warning(
                judge=judge_name, temperature=judge.temperature
            )
