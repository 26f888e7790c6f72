"""
config.py

This module provides a singleton-based configuration manager that reads settings from a JSON file.

The `_Config` class loads the configuration only once and exposes the settings the search library
cares about: where logs go, how verbose they are, and whether search bounds are validated.
A missing file is normal (every setting has a default); a corrupted one is logged and ignored.

Usage Example:
    from boundary_search.configs import CONFIG

    print(CONFIG.LOG_DIR)          # Directory for log files
    print(CONFIG.LOG_LEVEL)        # Numeric logging level
    print(CONFIG.VALIDATE_BOUNDS)  # Whether reversed search bounds raise

File lookup:
    The path comes from the `BOUNDARY_SEARCH_CONFIG` environment variable and defaults to
    `boundary_search.json` in the working directory.

Logging:
    - Errors related to a corrupted config file are logged in `<log dir>/config/config.log`.
"""


import os
import json
import logging
from pathlib import Path
from ..loggers import LoggerManager

CONFIG_PATH_VARIABLE = "BOUNDARY_SEARCH_CONFIG"
LOG_DIR_VARIABLE = "BOUNDARY_SEARCH_LOG_DIR"
LOG_LEVEL_VARIABLE = "BOUNDARY_SEARCH_LOG_LEVEL"
DEFAULT_CONFIG_PATH = "boundary_search.json"

_logger = LoggerManager(Path(os.getenv(LOG_DIR_VARIABLE, "logs"), "config"), logging.WARNING).get_logger("config.log")

class _Config:
    """
    Singleton configuration manager that loads settings from a JSON file.

    This class implements lazy loading, meaning the configuration is only read from the file
    when it is first accessed. It ensures that the configuration is loaded only once per runtime
    (until `reload` is called).

    Attributes:
        _config (dict): A class-level cache for storing configuration values.

    Properties:
        LOG_DIR: Directory where log files are written.
        LOG_LEVEL: Numeric logging level for the search logger.
        VALIDATE_BOUNDS: Whether `binary_search` rejects a low bound above the high bound.
    """

    _config = None  # Lazy loading (only loads when needed)

    def _load_config(self):
        """
        Loads the configuration file only once.

        If the file is missing it silently defaults to an empty dictionary; if it is corrupted
        the error is logged first. A file whose top level is not a JSON object raises `ValueError`.
        """
        if _Config._config is not None:
            return

        path = Path(os.getenv(CONFIG_PATH_VARIABLE, DEFAULT_CONFIG_PATH))
        try:
            with path.open("r") as config_file:
                config = json.load(config_file)
        except FileNotFoundError:
            config = {}
        except json.JSONDecodeError as e:
            _logger.error(f"⚠️ Config file error in {path}: {e}")
            config = {}

        if not isinstance(config, dict):
            raise ValueError(f"🚨 Config file {path} must contain a JSON object, got {type(config).__name__}")

        _Config._config = config

    def _get(self, key, default=None):
        """
        Retrieves a configuration value from the loaded JSON file.

        Args:
            key (str): The configuration key to retrieve.
            default (optional): The default value to return if the key is missing.

        Returns:
            The value associated with `key`, or `default` if the key is not found.
        """
        self._load_config()
        return _Config._config.get(key, default)

    def reload(self):
        """Drops the cached configuration so the next access reads the file again."""
        _Config._config = None

    @property
    def LOG_DIR(self) -> str:
        """Returns the log directory, falling back to the `BOUNDARY_SEARCH_LOG_DIR` environment variable."""
        return self._get("log_dir", os.getenv(LOG_DIR_VARIABLE, "logs"))

    @property
    def LOG_LEVEL(self) -> int:
        """Returns the logging level as an int. Accepts level names ("DEBUG") or numbers."""
        level = self._get("log_level", os.getenv(LOG_LEVEL_VARIABLE, "WARNING"))
        if isinstance(level, bool):
            raise ValueError(f"🚨 Unknown log level: {level}")

        if isinstance(level, int):
            return level

        level = str(level).strip()
        if level.isdigit(): # environment variables are always strings
            return int(level)

        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"🚨 Unknown log level: {level}")
        return resolved

    @property
    def VALIDATE_BOUNDS(self) -> bool:
        """Returns whether search bounds are checked before searching."""
        return bool(self._get("validate_bounds", True))

# Create a singleton instance of the configuration
CONFIG = _Config()
