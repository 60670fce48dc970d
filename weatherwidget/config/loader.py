"""YAML config loader with runtime get/set."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from weatherwidget.config.schema import WidgetConfig

logger = logging.getLogger(__name__)


def load_config(path: str | Path | None) -> WidgetConfig:
    """Load and validate config from a YAML file.

    A missing path or an empty file yields the defaults.
    """
    if path is None:
        return WidgetConfig()
    path = Path(path)
    if not path.exists():
        logger.info("Config %s not found, using defaults", path)
        return WidgetConfig()
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return WidgetConfig(**raw)


def save_config(config: WidgetConfig, path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(
            json.loads(config.model_dump_json()),
            f,
            default_flow_style=False,
            sort_keys=False,
        )


def get_config_value(config: WidgetConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'api.units'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: WidgetConfig, dotted_key: str, value: Any) -> WidgetConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new WidgetConfig instance.
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
    if isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return WidgetConfig(**data)
