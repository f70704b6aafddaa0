"""YAML configuration loading with environment and runtime overrides."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from clawmeta.config.models import ClawmetaConfig
from clawmeta.errors import ConfigLoadError, ConfigValidationError

ENV_PREFIX = "CLAWMETA_"


class YAMLConfigLoader:
    """Load clawmeta.yaml with deterministic path resolution."""

    DEFAULT_FILENAME = "clawmeta.yaml"
    ENV_PATH_VARIABLE = "CLAWMETA_CONFIG"

    @classmethod
    def resolve_path(cls, cli_path: str | None = None) -> Path:
        """Resolve config path by priority: env -> cli -> cwd default."""
        env_path = os.environ.get(cls.ENV_PATH_VARIABLE, "").strip()
        if env_path:
            return Path(env_path)
        if cli_path and cli_path.strip():
            return Path(cli_path.strip())
        return Path.cwd() / cls.DEFAULT_FILENAME

    @staticmethod
    def _read_text(target: Path) -> str:
        """Read the config as UTF-8 (BOM tolerated); unreadable files raise ConfigLoadError."""
        try:
            raw = target.read_bytes()
        except OSError as exc:
            raise ConfigLoadError(f"Cannot read config {target}: {exc.strerror or exc}") from exc
        try:
            return raw.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ConfigLoadError(f"Config {target} is not valid UTF-8 (byte {exc.start})") from exc

    @classmethod
    def load_dict(cls, path: str | Path | None = None) -> dict[str, Any]:
        """Load YAML into dict. Missing or empty file yields empty dict."""
        target = Path(path) if path is not None else cls.resolve_path()
        if not target.exists():
            return {}
        text = cls._read_text(target)
        if not text.strip():
            return {}
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            mark = getattr(exc, "problem_mark", None)
            if mark is not None:
                raise ConfigLoadError(
                    f"Invalid YAML at {target}:{mark.line + 1}:{mark.column + 1}"
                ) from exc
            raise ConfigLoadError(f"Invalid YAML at {target}") from exc
        except ValueError as exc:
            # Timestamp-looking scalars that are not real dates.
            raise ConfigLoadError(f"Invalid YAML value at {target}: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigLoadError(f"Config root must be mapping: {target}")
        return data


def _deep_merge(base: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(base)
    for key, value in updates.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _coerce_env_value(raw: str) -> Any:
    value = raw.strip()
    if value.startswith("[") or value.startswith("{"):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value
    if "," in value:
        return [part.strip() for part in value.split(",") if part.strip()]
    return value


def _collect_env_overrides(prefix: str = ENV_PREFIX) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for key, raw_value in os.environ.items():
        if not key.startswith(prefix) or key == YAMLConfigLoader.ENV_PATH_VARIABLE:
            continue
        path = [p.strip().lower() for p in key[len(prefix) :].split("__") if p.strip()]
        if len(path) < 2:
            continue
        cursor = overrides
        for part in path[:-1]:
            existing = cursor.get(part)
            if not isinstance(existing, dict):
                existing = {}
                cursor[part] = existing
            cursor = existing
        cursor[path[-1]] = _coerce_env_value(raw_value)
    return overrides


def load_config(
    path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> ClawmetaConfig:
    """Load configuration from defaults + YAML + env + runtime overrides.

    Later sources win. Raises ConfigLoadError for unreadable YAML and
    ConfigValidationError for values the models reject.
    """
    target = Path(path) if path is not None else YAMLConfigLoader.resolve_path()
    merged = YAMLConfigLoader.load_dict(target)
    merged = _deep_merge(merged, _collect_env_overrides())
    merged = _deep_merge(merged, overrides or {})
    try:
        return ClawmetaConfig.model_validate(merged)
    except ValidationError as exc:
        messages = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigValidationError(str(target), messages) from exc
