"""
Logging setup for vedur_weather.

Handlers are attached to the ``vedur_weather`` package logger, configured
from the ``logging`` section of ``config.yml`` the first time a logger is
requested.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from ..utils.config_loader import ConfigError, load_config
from ..utils.path_utils import get_project_root

PACKAGE_LOGGER = "vedur_weather"

_DEFAULTS: Dict[str, Any] = {
    "level": "WARNING",
    "file": "",
    "max_size_mb": 10,
    "backup_count": 5,
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}

_initialized = False


def setup_logging(config_path_override: Optional[str] = None) -> None:
    """
    Initialize package logging.

    Args:
        config_path_override: alternative config file path
    """
    global _initialized

    log_config = _load_log_config(config_path_override)
    level = getattr(logging, str(log_config["level"]).upper(), logging.WARNING)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    formatter = logging.Formatter(log_config["format"])

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    package_logger.addHandler(console_handler)

    if log_config["file"]:
        log_path = Path(log_config["file"])
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=int(log_config["max_size_mb"]) * 1024 * 1024,
            backupCount=int(log_config["backup_count"]),
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        package_logger.addHandler(file_handler)

    package_logger.propagate = False
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Return a named logger, initializing package logging on first use.

    Args:
        name: logger name, normally ``__name__``
    """
    global _initialized
    if not _initialized:
        try:
            setup_logging()
        except (ConfigError, OSError) as exc:
            logging.basicConfig(level=logging.WARNING)
            _initialized = True
            print(f"warning: logging setup failed: {exc}", file=sys.stderr)
    return logging.getLogger(name)


def _load_log_config(config_path_override: Optional[str] = None) -> Dict[str, Any]:
    """
    Read the ``logging`` section, filling in defaults.

    Raises:
        ConfigError: the config file could not be parsed
    """
    config = load_config(config_path_override)
    log_config = {**_DEFAULTS, **(config.get("logging", {}) or {})}

    log_file = log_config.get("file") or ""
    if log_file:
        log_path = Path(log_file)
        if not log_path.is_absolute():
            log_path = get_project_root() / log_path
        log_config["file"] = str(log_path)
    return log_config
