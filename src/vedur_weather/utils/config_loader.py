"""Configuration file loading."""

from pathlib import Path
from typing import Any, Dict

import yaml

from .path_utils import get_package_root

CONFIG_FILENAME = "config.yml"

DEFAULT_HTTP_TIMEOUT = 30


class ConfigError(Exception):
    """The configuration file exists but could not be read."""


def get_default_config_path() -> Path:
    """Return the canonical config file location."""
    return get_package_root() / CONFIG_FILENAME


def load_config(config_path: str | Path | None = None) -> Dict[str, Any]:
    """Load configuration data, tolerating a missing file.

    Logging is not available yet when this runs for the logger itself, so
    problems are reported by raising.
    """
    path = Path(config_path) if config_path is not None else get_default_config_path()

    try:
        with path.open("r", encoding="utf-8") as file:
            config = yaml.safe_load(file) or {}
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc

    if not isinstance(config, dict):
        raise ConfigError(f"{path} must contain a mapping at the top level")
    return config


def get_http_settings(config: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """Resolve the ``http`` section with defaults applied."""
    if config is None:
        config = load_config()

    http_config = config.get("http", {}) or {}
    timeout = http_config.get("timeout", DEFAULT_HTTP_TIMEOUT)
    return {
        "timeout": timeout if timeout else None,
        "user_agent": (http_config.get("user_agent") or "").strip() or None,
    }
