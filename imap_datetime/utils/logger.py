"""
Logger Utility Module

This module provides functions for setting up and configuring the application logger.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import yaml

from imap_datetime.utils.config import get_config_value


def get_log_level() -> str:
    """
    Get the log level from the configuration.

    Returns:
        str: The log level (INFO by default).
    """
    try:
        return get_config_value("log_level") or "INFO"
    except (OSError, yaml.YAMLError):
        return "INFO"


def get_log_file_path() -> Path:
    """
    Get the log file path from config or default.

    Returns:
        Path: The log file path.
    """
    try:
        log_path = get_config_value("log_file")
        if log_path:
            return Path(log_path).expanduser()
    except (OSError, yaml.YAMLError):
        pass
    # Default to ~/.imap-datetime/imap-datetime.log
    default_path = Path.home() / ".imap-datetime" / "imap-datetime.log"
    default_path.parent.mkdir(parents=True, exist_ok=True)
    return default_path


def setup_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Set up and configure a logger.

    Args:
        name (Optional[str], optional): The name of the logger. Defaults to None.

    Returns:
        logging.Logger: The configured logger.
    """
    logger = logging.getLogger(name or "imap_datetime")

    # Avoid adding duplicate handlers on repeated calls
    if logger.handlers:
        return logger

    log_level_str = str(get_log_level()).upper()
    log_level = getattr(logging, log_level_str, logging.INFO)
    logger.setLevel(log_level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # MCP stdio transport owns stdout, so the console handler writes to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    try:
        log_file = get_log_file_path()
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    except OSError:
        pass  # Silently fail if can't write to file

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        logging.Logger: The logger.
    """
    return logging.getLogger(name)
