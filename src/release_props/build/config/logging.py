"""
Centralized logging configuration.

bootstrap_logging() configures logging from a logging.ini file using
Python's native INI format, falling back to basicConfig when none is found.
The LOG_LEVEL environment variable overrides the configured level.
"""

import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Optional

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
DEFAULT_FORMAT = '%(levelname)s: %(name)s: %(message)s'


def _find_logging_config() -> Optional[Path]:
    """
    Find the logging configuration file.

    Looks for logging.ini in the current working directory, then config/.
    """
    for candidate in [Path('logging.ini'), Path('config/logging.ini')]:
        if candidate.exists():
            return candidate
    return None


def _env_log_level() -> Optional[str]:
    """Return LOG_LEVEL if it names a valid level."""
    value = os.environ.get('LOG_LEVEL', '').strip().upper()
    if not value:
        return None
    if value not in LOG_LEVELS:
        print(f"Warning: Invalid LOG_LEVEL '{value}', ignoring", file=sys.stderr)
        return None
    return value


def bootstrap_logging(debug: bool = False) -> None:
    """
    Bootstrap logging for the application.

    Args:
        debug: Force DEBUG level for the release_props loggers
    """
    config_path = _find_logging_config()

    if config_path is None:
        logging.basicConfig(level=logging.WARNING, format=DEFAULT_FORMAT, stream=sys.stderr)
    else:
        try:
            logging.config.fileConfig(str(config_path), disable_existing_loggers=False)
        except (OSError, ValueError, KeyError) as e:
            print(f"Warning: Failed to load logging config from {config_path}: {e}", file=sys.stderr)
            logging.basicConfig(level=logging.WARNING, format=DEFAULT_FORMAT, stream=sys.stderr)

    env_level = _env_log_level()
    if env_level:
        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, env_level))
        for handler in root_logger.handlers:
            if isinstance(handler, logging.StreamHandler):
                handler.setLevel(getattr(logging, env_level))

    if debug:
        logging.getLogger('release_props').setLevel(logging.DEBUG)
        for handler in logging.getLogger().handlers:
            handler.setLevel(logging.DEBUG)
        logging.getLogger(__name__).debug("Debug logging enabled")
