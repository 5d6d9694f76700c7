"""
Settings loader.

Settings live in an optional YAML file. A missing or unreadable file
yields the defaults, so the library never requires one.
"""

import copy
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


DEFAULT_CONFIG: Dict[str, Any] = {
    "audit": {
        "enabled": False,
        "log_path": "data/attr_audit.jsonl",
    }
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        default = merged.get(key)
        if isinstance(default, dict):
            # empty or non-mapping sections keep the defaults
            if isinstance(value, dict):
                merged[key] = _merge(default, value)
        elif value is not None or key not in merged:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = "file_attrs.yaml") -> Dict[str, Any]:
    """
    Load settings from a YAML file.

    The settings may sit under a top-level ``file_attrs`` key or at the
    document root. Keys missing from the file take their default values.

    Args:
        config_path: Path to the YAML file, or None for defaults only

    Returns:
        Settings dictionary
    """
    if config_path is None:
        return copy.deepcopy(DEFAULT_CONFIG)

    path = Path(config_path)
    if not path.exists():
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        return copy.deepcopy(DEFAULT_CONFIG)

    if not isinstance(config, dict):
        return copy.deepcopy(DEFAULT_CONFIG)

    section = config.get("file_attrs", config) or {}
    if not isinstance(section, dict):
        return copy.deepcopy(DEFAULT_CONFIG)

    return _merge(DEFAULT_CONFIG, section)


def save_config(config: Dict[str, Any], config_path: str = "file_attrs.yaml") -> None:
    """Write settings back under the ``file_attrs`` key."""
    path = Path(config_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump({"file_attrs": config}, f, default_flow_style=False)
