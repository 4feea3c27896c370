"""
Configuration data models.

This module contains the configuration data structures loaded from
`config.toml`.
"""

from dataclasses import dataclass, field


@dataclass
class GeneralConfig:
    """
    General application settings, loaded from the `[general]` section.
    """

    # Root logging level for the CLI ("DEBUG", "INFO", ...).
    log_level: str = "INFO"


@dataclass
class MonitorConfig:
    """
    Sampling behavior, loaded from the `[monitor]` section.
    """

    # Pause between two sampling cycles, in seconds.
    interval_seconds: float = 0.1
    # How long stop() waits for the sampling worker; must exceed the interval.
    grace_delay_seconds: float = 0.15


@dataclass
class PricingConfig:
    """
    Cost estimation settings, loaded from the `[pricing]` section.
    """

    # Region identifier used when the CLI is not given --region.
    default_region: str = "us-east-1"


@dataclass
class AppConfig:
    """
    The root configuration object that aggregates all loaded settings.
    """

    general: GeneralConfig = field(default_factory=GeneralConfig)
    monitor: MonitorConfig = field(default_factory=MonitorConfig)
    pricing: PricingConfig = field(default_factory=PricingConfig)
