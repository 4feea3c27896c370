"""
Configuration management and singleton pattern.

This module provides the main configuration loading and management interface,
implementing a singleton pattern to ensure configuration is loaded only once.
"""

import logging
from pathlib import Path
from typing import Optional

from ..models.config import AppConfig
from ..validation import handle_config_error, ErrorSeverity
from .loader import load_main_config
from .validators import validate_app_config

logger = logging.getLogger(__name__)

# --- Global Singleton for Configuration ---

_CONFIG: Optional[AppConfig] = None

# Default location of config.toml, at the repository root. A missing default
# file means built-in defaults; a path set through set_config_path() must exist.
_DEFAULT_CONFIG_FILE_PATH = Path(__file__).parent.parent.parent.parent / "conf" / "config.toml"
_CONFIG_FILE_PATH = _DEFAULT_CONFIG_FILE_PATH


def set_config_path(config_path: Path) -> None:
    """
    Set a custom configuration file path.

    Clears the cached configuration so the next get_config() call loads
    from the new path.
    """
    global _CONFIG_FILE_PATH, _CONFIG
    _CONFIG_FILE_PATH = Path(config_path)
    _CONFIG = None
    logger.info(f"Configuration path set to: {config_path}")


def clear_config_cache() -> None:
    """
    Clear the cached configuration, forcing a reload on next access.
    """
    global _CONFIG
    _CONFIG = None
    logger.debug("Configuration cache cleared")


def reset_config_path() -> None:
    """Restore the default configuration path and clear the cache."""
    set_config_path(_DEFAULT_CONFIG_FILE_PATH)


def _load_config(config_path: Path) -> AppConfig:
    """
    Load and validate the application configuration.

    Raises:
        FileNotFoundError: If an explicitly configured file is missing
        ValidationError: If configuration validation fails
        tomllib.TOMLDecodeError: If the TOML file is malformed
    """
    if config_path == _DEFAULT_CONFIG_FILE_PATH and not config_path.exists():
        logger.info(f"No configuration file at {config_path}, using defaults")
        return AppConfig()

    try:
        config_data = load_main_config(config_path)
        app_config = validate_app_config(config_data)
        logger.info(
            f"Successfully loaded configuration (interval {app_config.monitor.interval_seconds}s, "
            f"region {app_config.pricing.default_region})"
        )
        return app_config

    except FileNotFoundError as e:
        handle_config_error(
            error=e,
            context="loading configuration file",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise
    except Exception as e:
        handle_config_error(
            error=e,
            context="processing configuration",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise


def get_config() -> AppConfig:
    """
    Get the global application configuration, loading it if necessary.

    Returns:
        The singleton AppConfig instance
    """
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = _load_config(_CONFIG_FILE_PATH)
    return _CONFIG


def is_config_loaded() -> bool:
    """Check if configuration has been loaded and cached."""
    return _CONFIG is not None


def get_config_info() -> dict:
    """
    Get information about the current configuration state.
    """
    return {
        "config_loaded": is_config_loaded(),
        "config_path": str(_CONFIG_FILE_PATH),
        "default_region": _CONFIG.pricing.default_region if _CONFIG else None,
    }
