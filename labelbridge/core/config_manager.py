"""
Configuration management for LP-50 Label Bridge.

This module handles loading and validating the central config.json file.
"""

import copy
import json
import os
from typing import Dict, Any, Optional
import logging

from .paths import get_config_path

logger = logging.getLogger(__name__)


DEFAULT_CONFIG: Dict[str, Any] = {
    "printer": {
        "active": "lp50",
        "lp50": {
            "com_port": "COM5",
            "baud_rate": 9600,
            "read_timeout_ms": 10000,
            "write_timeout_ms": 10000,
            "newline": "\n",
            "poll_interval_ms": 5,
        },
    },
    "input": {
        "has_declared_count": False,
        "validate_prompt_count": False,
    },
    "system": {
        "log_level": "INFO",
        "demo_mode": False,
    },
}


def default_config() -> Dict[str, Any]:
    """Return a fresh copy of the built-in configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from config.json.

    Args:
        config_path: Optional path to config file (defaults to config.json in the base directory)

    Returns:
        dict: Configuration dictionary

    Raises:
        FileNotFoundError: If config file not found
        json.JSONDecodeError: If config file is invalid JSON
    """
    path = config_path or get_config_path()

    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)
        logger.info(f"Configuration loaded from {path}")
        return config
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in config file: {e}")
        raise


def get_printer_config(config: Dict[str, Any], printer_name: Optional[str] = None) -> Dict[str, Any]:
    """
    Get configuration for a specific printer driver.

    Args:
        config: Full configuration dictionary
        printer_name: Name of printer (defaults to active printer)

    Returns:
        dict: Printer-specific configuration

    Raises:
        KeyError: If printer not found in config
    """
    if printer_name is None:
        printer_name = config['printer']['active']

    if printer_name not in config['printer']:
        raise KeyError(f"Printer '{printer_name}' not found in config")

    return config['printer'][printer_name]


def validate_config(config: Dict[str, Any]) -> bool:
    """
    Validate configuration structure.

    Args:
        config: Configuration dictionary to validate

    Returns:
        bool: True if valid

    Raises:
        ValueError: If configuration is invalid
    """
    if 'printer' not in config:
        raise ValueError("Missing required config key: printer")

    if 'active' not in config['printer']:
        raise ValueError("Missing printer.active in config")

    active_printer = config['printer']['active']
    if active_printer not in config['printer']:
        raise ValueError(f"Active printer '{active_printer}' not found in config.printer")

    printer_config = config['printer'][active_printer]
    for key in ('read_timeout_ms', 'write_timeout_ms', 'baud_rate'):
        value = printer_config.get(key)
        if value is not None and (not isinstance(value, int) or isinstance(value, bool) or value <= 0):
            raise ValueError(f"printer.{active_printer}.{key} must be a positive integer")

    logger.info("Configuration validation passed")
    return True

