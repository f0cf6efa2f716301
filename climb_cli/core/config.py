"""Configuration loading and persistence."""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # Python 3.9-3.10
    import tomli as tomllib  # type: ignore[no-redef]

from climb_cli.core.constants import DEFAULT_LIMITS, DEFAULT_THRESHOLDS


class ConfigError(RuntimeError):
    """Raised when config file parsing fails."""


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def expand_path(path_str: str) -> Path:
    """Expand user/env vars and return absolute path."""
    return Path(os.path.expandvars(path_str)).expanduser().resolve()


def default_data_dir() -> Path:
    """Resolve XDG-style data directory with env override."""
    raw = os.getenv("CLIMB_DATA_DIR", "~/.local/share/climb-log")
    return expand_path(raw)


def default_config_path() -> Path:
    """Get default config file path."""
    raw = os.getenv("CLIMB_CONFIG_FILE", "~/.config/climb-log/config.toml")
    return expand_path(raw)


def _default_config() -> Dict[str, Any]:
    return {
        "climber": {
            "name": "",
            "climbing_days": None,
        },
        "collection": {
            "initial_capacity": 5,
        },
        "thresholds": dict(DEFAULT_THRESHOLDS),
        "limits": dict(DEFAULT_LIMITS),
        "report": {
            "default_path": str(default_data_dir() / "climbing_report.txt"),
        },
    }


DEFAULT_CONFIG: Dict[str, Any] = _default_config()


def _read_config(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    text = path.read_text()
    try:
        if suffix in {".toml", ""}:
            loaded = tomllib.loads(text)
        else:
            loaded = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc
    except Exception as exc:
        if suffix in {".toml", ""}:
            raise ConfigError(f"Invalid TOML in config file {path}: {exc}") from exc
        raise ConfigError(f"Failed to parse config file {path}: {exc}") from exc

    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file {path} must contain an object/table at the root")
    return loaded


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from disk, merged with defaults."""
    cfg_path = path or default_config_path()
    cfg = _default_config()
    if cfg_path.exists():
        cfg = _deep_merge(cfg, _read_config(cfg_path))
    return cfg


def _toml_literal(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    raise TypeError(f"Unsupported TOML value type: {type(value)!r}")


def _dict_to_toml(data: Dict[str, Any], prefix: Optional[str] = None) -> str:
    lines = []
    plain_keys = []
    nested_keys = []

    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, dict):
            nested_keys.append((key, value))
        else:
            plain_keys.append((key, value))

    if prefix is not None:
        lines.append(f"[{prefix}]")

    for key, value in plain_keys:
        lines.append(f"{key} = {_toml_literal(value)}")

    if plain_keys and nested_keys:
        lines.append("")

    for index, (key, value) in enumerate(nested_keys):
        table_name = key if prefix is None else f"{prefix}.{key}"
        lines.append(_dict_to_toml(value, prefix=table_name))
        if index != len(nested_keys) - 1:
            lines.append("")

    return "\n".join(lines)


def save_config(config: Dict[str, Any], path: Optional[Path] = None) -> Path:
    """Save configuration to disk as TOML (default) or JSON."""
    cfg_path = path or default_config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)

    if cfg_path.suffix.lower() == ".json":
        cfg_path.write_text(json.dumps(config, indent=2) + "\n")
        return cfg_path

    cfg_path.write_text(_dict_to_toml(config).strip() + "\n")
    return cfg_path


def resolve_report_path(config: Dict[str, Any], explicit: Optional[Path] = None) -> Path:
    """Resolve report file with CLI override first, then env, then config."""
    if explicit is not None:
        return explicit.expanduser().resolve()
    raw = os.getenv("CLIMB_REPORT_FILE") or config.get("report", {}).get("default_path")
    if not raw:
        raw = str(default_data_dir() / "climbing_report.txt")
    return expand_path(raw)


def resolve_initial_capacity(config: Dict[str, Any]) -> int:
    raw = config.get("collection", {}).get("initial_capacity", 5)
    try:
        capacity = int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"collection.initial_capacity must be an integer, got {raw!r}") from exc
    if capacity < 1:
        raise ConfigError(f"collection.initial_capacity must be >= 1, got {capacity}")
    return capacity


def resolve_limits(config: Dict[str, Any]) -> Dict[str, Any]:
    configured = config.get("limits", {})
    return {key: configured.get(key, default) for key, default in DEFAULT_LIMITS.items()}


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table, got {section!r}")
    return section


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Check the values a session depends on before any command runs."""
    for name in ("climber", "collection", "thresholds", "limits", "report"):
        _section(config, name)

    resolve_initial_capacity(config)

    for name in ("thresholds", "limits"):
        for key, value in _section(config, name).items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{name}.{key} must be a number, got {value!r}")

    climber = _section(config, "climber")
    if not isinstance(climber.get("name", ""), str):
        raise ConfigError(f"climber.name must be a string, got {climber['name']!r}")
    days = climber.get("climbing_days")
    if days is not None:
        if isinstance(days, bool) or not isinstance(days, int):
            raise ConfigError(f"climber.climbing_days must be an integer, got {days!r}")
        if days < 0:
            raise ConfigError(f"climber.climbing_days must be >= 0, got {days}")
    return config
