"""
Configuration validation utilities.

Each `validate_*_config` function turns one raw TOML section into its
configuration dataclass, applying defaults for missing keys.
"""

import logging
from typing import Any, Dict

from ..models.config import AppConfig, GeneralConfig, MonitorConfig, PricingConfig
from ..pricing.regions import AwsRegion
from ..validation import (
    ValidationError,
    validate_enum_choice,
    validate_positive_float,
)

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def validate_general_config(general_data: Dict[str, Any]) -> GeneralConfig:
    """
    Validate the `[general]` section.

    Raises:
        ValidationError: If validation fails
    """
    log_level = validate_enum_choice(
        general_data.get("log_level", "INFO"),
        choices=LOG_LEVELS,
        field_name="general.log_level",
        case_sensitive=False,
    )
    return GeneralConfig(log_level=log_level)


def validate_monitor_config(monitor_data: Dict[str, Any]) -> MonitorConfig:
    """
    Validate the `[monitor]` section.

    The grace delay must be strictly longer than the sampling interval,
    otherwise stop() could return while a cycle is still sleeping.

    Raises:
        ValidationError: If validation fails
    """
    interval_seconds = validate_positive_float(
        monitor_data.get("interval_seconds", 0.1),
        min_value=0.001,  # 1ms minimum
        max_value=60.0,
        field_name="monitor.interval_seconds",
    )

    grace_delay_seconds = validate_positive_float(
        monitor_data.get("grace_delay_seconds", 0.15),
        min_value=0.001,
        max_value=120.0,
        field_name="monitor.grace_delay_seconds",
    )

    if grace_delay_seconds <= interval_seconds:
        raise ValidationError(
            f"monitor.grace_delay_seconds ({grace_delay_seconds}) must be greater "
            f"than monitor.interval_seconds ({interval_seconds})",
            field_name="monitor.grace_delay_seconds",
            value=grace_delay_seconds,
        )

    return MonitorConfig(
        interval_seconds=interval_seconds,
        grace_delay_seconds=grace_delay_seconds,
    )


def validate_pricing_config(pricing_data: Dict[str, Any]) -> PricingConfig:
    """
    Validate the `[pricing]` section.

    Raises:
        ValidationError: If the default region is unknown
    """
    default_region = validate_enum_choice(
        pricing_data.get("default_region", AwsRegion.US_EAST_1.value),
        choices=AwsRegion.identifiers(),
        field_name="pricing.default_region",
        case_sensitive=False,
    )
    return PricingConfig(default_region=default_region)


def validate_app_config(config_data: Dict[str, Any]) -> AppConfig:
    """Validate a complete parsed config.toml."""
    for section in ("general", "monitor", "pricing"):
        if not isinstance(config_data.get(section, {}), dict):
            raise ValidationError(
                f"[{section}] must be a table", field_name=section
            )

    return AppConfig(
        general=validate_general_config(config_data.get("general", {})),
        monitor=validate_monitor_config(config_data.get("monitor", {})),
        pricing=validate_pricing_config(config_data.get("pricing", {})),
    )
