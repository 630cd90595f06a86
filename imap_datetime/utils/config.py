"""
Configuration Module

Loads settings from a YAML file and lets environment variables override them.
The merged configuration is cached after the first load.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILE_PATH = os.getenv("CONFIG_FILE_PATH", "config.yaml")

DEFAULT_SERVER_NAME = "IMAP Date-Time"
DEFAULT_LOG_LEVEL = "INFO"

_config_cache: Optional[Dict[str, Any]] = None


def load_yaml_config() -> Dict[str, Any]:
    """
    Load the YAML configuration file.

    Returns:
        Dict[str, Any]: The parsed file, or an empty dict if it does not exist.
    """
    config_path = Path(CONFIG_FILE_PATH)
    if not config_path.exists():
        return {}
    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def get_config() -> Dict[str, Any]:
    """
    Get the application configuration.

    Values come from the ``server`` section of the YAML file, overridden by
    MCP_SERVER_NAME, IMAP_DATETIME_LOG_LEVEL and IMAP_DATETIME_LOG_FILE.

    Returns:
        Dict[str, Any]: The configuration with keys server_name, log_level
        and log_file.
    """
    global _config_cache
    if _config_cache is not None:
        return _config_cache

    server_config = load_yaml_config().get("server", {}) or {}

    _config_cache = {
        "server_name": os.getenv("MCP_SERVER_NAME", server_config.get("name", DEFAULT_SERVER_NAME)),
        "log_level": os.getenv("IMAP_DATETIME_LOG_LEVEL", server_config.get("log_level", DEFAULT_LOG_LEVEL)),
        "log_file": os.getenv("IMAP_DATETIME_LOG_FILE", server_config.get("log_file")),
    }
    return _config_cache


def get_config_value(key: str, default: Any = None) -> Any:
    """Get a single configuration value, or ``default`` if it is not set."""
    return get_config().get(key, default)
