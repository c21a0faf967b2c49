"""Configuration loading utilities for sqlgrid."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from . import paths
from .exceptions import ConfigurationError


@dataclass(frozen=True, slots=True)
class RenderSettings:
    """Table rendering defaults applied to every new renderer."""

    fetch_size: int
    max_rows: int
    show_too_many_rows_message: bool
    column_width_limit: int | None
    use_unicode_borders: bool
    add_outside_borders: bool
    line_break: str


@dataclass(frozen=True, slots=True)
class LogSettings:
    """SQL history log configuration."""

    directory: Path


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Top-level application configuration."""

    source_path: Path
    render: RenderSettings
    log: LogSettings


def _default_config(env: Mapping[str, str]) -> dict[str, Any]:
    return {
        "render": {
            "fetch_size": 50,
            "max_rows": 99,
            "show_too_many_rows_message": True,
            "column_width_limit": 30,
            "use_unicode_borders": False,
            "add_outside_borders": True,
            "line_break": os.linesep,
        },
        "log": {"directory": str(paths.default_log_dir(env=env))},
    }


ENV_OVERRIDE_SPEC: dict[str, tuple[str, type]] = {
    "render.fetch_size": ("SQLGRID_FETCH_SIZE", int),
    "render.max_rows": ("SQLGRID_MAX_ROWS", int),
    "render.show_too_many_rows_message": ("SQLGRID_SHOW_TOO_MANY_ROWS_MESSAGE", bool),
    "render.column_width_limit": ("SQLGRID_COLUMN_WIDTH_LIMIT", int),
    "render.use_unicode_borders": ("SQLGRID_USE_UNICODE_BORDERS", bool),
    "render.add_outside_borders": ("SQLGRID_ADD_OUTSIDE_BORDERS", bool),
    "log.directory": (paths.LOG_DIR_ENV, str),
}


def load_config(
    config_path: str | Path | None = None,
    env: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load configuration from defaults, YAML file, and env overrides."""
    env = dict(env or os.environ)
    resolved_config_path = _resolve_config_path(config_path, env)
    file_data = _load_yaml(resolved_config_path)
    defaults = _default_config(env)
    merged: dict[str, Any] = _deep_merge(defaults, file_data)
    merged = _apply_env_overrides(merged, env)
    return _build_config(merged, resolved_config_path)


def _resolve_config_path(config_path: str | Path | None, env: Mapping[str, str]) -> Path:
    if config_path:
        return paths.resolve_path(config_path)
    return paths.default_config_path(env=env)


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
        if not isinstance(data, MutableMapping):
            raise ConfigurationError(f"Config file at {path} must define a mapping root object.")
        return dict(data)


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _apply_env_overrides(config: dict[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    config_copy = _deep_merge(config, {})
    for dotted_key, (env_key, expected_type) in ENV_OVERRIDE_SPEC.items():
        if env_key not in env:
            continue
        raw_value = env[env_key]
        try:
            value = _coerce_env_value(raw_value, expected_type)
        except ValueError as exc:
            raise ConfigurationError(
                f"Environment override {env_key} has invalid value '{raw_value}': {exc}"
            ) from exc
        _assign_nested(config_copy, dotted_key.split("."), value)
    return config_copy


def _coerce_env_value(raw: str, expected_type: type) -> Any:
    cleaned = raw.strip()
    if expected_type is bool:
        lowered = cleaned.lower()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"0", "false", "no", "off"}:
            return False
        raise ValueError("expected boolean (true/false)")
    if expected_type is int:
        return int(cleaned)
    return cleaned


def _assign_nested(target: MutableMapping[str, Any], keys: list[str], value: Any) -> None:
    current = target
    for key in keys[:-1]:
        if key not in current or not isinstance(current[key], MutableMapping):
            current[key] = {}
        current = current[key]  # type: ignore[assignment]
    current[keys[-1]] = value


def _optional_limit(raw: Any) -> int | None:
    # Unset, zero and negative limits all mean "unlimited".
    if raw is None:
        return None
    value = int(raw)
    return value if value > 0 else None


def _non_negative(raw: Any) -> int:
    if raw is None:
        return 0
    return max(int(raw), 0)


def _build_config(data: Mapping[str, Any], source_path: Path) -> AppConfig:
    try:
        render_cfg = data["render"]
        render = RenderSettings(
            fetch_size=_non_negative(render_cfg["fetch_size"]),
            max_rows=_non_negative(render_cfg["max_rows"]),
            show_too_many_rows_message=bool(render_cfg["show_too_many_rows_message"]),
            column_width_limit=_optional_limit(render_cfg["column_width_limit"]),
            use_unicode_borders=bool(render_cfg["use_unicode_borders"]),
            add_outside_borders=bool(render_cfg["add_outside_borders"]),
            line_break=str(render_cfg["line_break"]),
        )
        log = LogSettings(directory=paths.resolve_path(data["log"]["directory"]))
    except (KeyError, TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid configuration structure: {exc}") from exc

    if not render.line_break:
        raise ConfigurationError("render.line_break must not be empty.")

    return AppConfig(source_path=source_path, render=render, log=log)
