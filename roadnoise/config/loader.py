"""YAML config loader with runtime get/set."""

import json
from pathlib import Path
from typing import Any

import yaml

from roadnoise.config.schema import RoadNoiseConfig


def load_config(path: str | Path) -> RoadNoiseConfig:
    """Load and validate config from a YAML file.

    A missing or empty file yields the defaults.
    """
    path = Path(path)
    if not path.exists():
        return RoadNoiseConfig()
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return RoadNoiseConfig(**raw)


def save_config(config: RoadNoiseConfig, path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.safe_dump(json.loads(config.model_dump_json()), f, sort_keys=False)


def get_config_value(config: RoadNoiseConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'api.timeout_seconds'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: RoadNoiseConfig, dotted_key: str, value: Any) -> RoadNoiseConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new RoadNoiseConfig instance. Comma-separated strings are
    accepted for list values, e.g. 'reminders.hours=8,18'.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        if part not in target:
            raise KeyError(f"Config key not found: {dotted_key}")
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    old_value = target[parts[-1]]
    if isinstance(value, str):
        if isinstance(old_value, bool):
            value = value.lower() in ("1", "true", "yes", "on")
        elif isinstance(old_value, int):
            value = int(value)
        elif isinstance(old_value, float):
            value = float(value)
        elif isinstance(old_value, list):
            value = [int(v) for v in value.split(",") if v.strip()]
    target[parts[-1]] = value
    return RoadNoiseConfig(**data)
