"""
IMAP Date-Time Utilities Module

Provides configuration loading and logging setup.
"""

from imap_datetime.utils.config import get_config, get_config_value
from imap_datetime.utils.logger import get_logger, setup_logger

__all__ = [
    'get_config',
    'get_config_value',
    'get_logger',
    'setup_logger',
]
