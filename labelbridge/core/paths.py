"""
Location of config.json and log.log.

Resolved on every call so that the installed console script picks up the
directory it is run from.
"""

import os
import sys

BASE_DIR_ENV = "LABELBRIDGE_BASE"


def get_base_dir() -> str:
    """
    Get the base directory for the application.

    Order: the LABELBRIDGE_BASE environment variable, the executable's
    directory when frozen (PyInstaller/Nuitka), else the current directory.

    Returns:
        str: Base directory path
    """
    env_base = os.environ.get(BASE_DIR_ENV, "").strip()
    if env_base:
        return env_base
    if getattr(sys, 'frozen', False):
        return os.path.dirname(sys.executable)
    return os.getcwd()


def get_config_path() -> str:
    """
    Get the path to the config file.

    Returns:
        str: Config file path
    """
    return os.path.join(get_base_dir(), 'config.json')


def get_log_path() -> str:
    return os.path.join(get_base_dir(), 'log.log')
