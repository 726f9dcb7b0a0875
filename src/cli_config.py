"""Configuration file support for the CLI.

Settings come from, in order of precedence: command-line flags, a YAML (or
JSON) config file, then built-in defaults. The config file is located via
--config, the UNIFYVERSIONS_CONFIG environment variable, or
unifyversions.yml in the working directory.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

import yaml

from constants import Constants

logger = logging.getLogger(__name__)

# config key -> (args attribute, default)
SETTINGS = {
    "sort_props": ("SORT_PROPS", False),
    "check_collisions": ("CHECK_COLLISIONS", False),
    "error_on_warnings": ("ERROR_ON_WARNINGS", False),
    "log_level": ("LOG_LEVEL", None),
}


def find_config_file(explicit: Optional[str] = None) -> Optional[str]:
    """Return the config path to use, or None when there is none."""
    if explicit:
        return explicit
    env_path = os.environ.get(Constants.ENV_CONFIG)
    if env_path and env_path.strip():
        return env_path.strip()
    for name in Constants.DEFAULT_CONFIG_FILES:
        if os.path.isfile(name):
            return name
    return None


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load settings from a YAML/JSON file.

    A missing or malformed file is logged and treated as empty.

    Args:
        config_path: Path to YAML/JSON config file.

    Returns:
        Settings dict (possibly empty).
    """
    if not config_path:
        return {}

    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            if config_path.lower().endswith(".json"):
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
        logger.error("Failed to load config %s: %s", config_path, e)
        return {}

    if not isinstance(data, dict):
        if data is not None:
            logger.warning("Ignoring config %s: top level must be a mapping", config_path)
        return {}

    unknown = sorted(set(data) - set(SETTINGS))
    if unknown:
        logger.warning("Unknown config key(s) in %s: %s", config_path, ", ".join(unknown))
    return data


def apply_config_defaults(args, config: Dict[str, Any]) -> None:
    """Fill options not given on the command line from config, then defaults."""
    for key, (attr, default) in SETTINGS.items():
        if getattr(args, attr, None) is not None:
            continue
        value = config.get(key, default)
        if isinstance(default, bool):
            if not isinstance(value, bool):
                logger.warning("Ignoring config key %s: expected true or false, got %r", key, value)
                value = default
        elif isinstance(value, str):
            value = value.upper()
        setattr(args, attr, value)
