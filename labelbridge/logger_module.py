"""
Logging for LP-50 Label Bridge.

The ``LabelBridge`` logger prints to the console from import time on. The
rotating log file is attached by ``configure_file_logging`` once the entry
point knows the configured level.
"""

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from .core.paths import get_log_path

LOG_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5

logger = logging.getLogger('LabelBridge')
logger.setLevel(logging.DEBUG)
logger.propagate = False

detailed_formatter = logging.Formatter(
    '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

console_handler = logging.StreamHandler()
console_handler.setLevel(logging.INFO)
console_handler.setFormatter(logging.Formatter('%(levelname)s - %(message)s'))

if not logger.handlers:
    logger.addHandler(console_handler)

_file_handler: Optional[RotatingFileHandler] = None


def _parse_level(level_name: str) -> int:
    level = logging.getLevelName(str(level_name).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_file_logging(level_name: str = 'INFO', log_path: Optional[str] = None) -> RotatingFileHandler:
    """Write the log to a rotating file at the given level.

    Calling it again replaces the previous file handler.

    Args:
        level_name: Level name from config.json system.log_level (unknown names mean INFO)
        log_path: Log file (default: log.log in the base directory)

    Returns:
        RotatingFileHandler: The attached handler
    """
    global _file_handler

    if _file_handler is not None:
        logger.removeHandler(_file_handler)
        _file_handler.close()

    _file_handler = RotatingFileHandler(
        log_path or get_log_path(),
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding='utf-8',
        delay=True
    )
    _file_handler.setLevel(_parse_level(level_name))
    _file_handler.setFormatter(detailed_formatter)
    logger.addHandler(_file_handler)
    return _file_handler
