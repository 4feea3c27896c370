"""
Data models for the monitoring and cost estimation system.

Configuration Models:
- Logging, sampling and pricing settings loaded from TOML

Metrics Models:
- Point-in-time process and network readings
- The reduced ExecutionMetrics summary of one run

Cost Models:
- Per-shape cost estimates and the per-run CostReport
"""

from .config import AppConfig, GeneralConfig, MonitorConfig, PricingConfig
from .costs import CostReport, EksCost, FargateCost, LambdaCost
from .metrics import ExecutionMetrics, NetworkCounters, ProcessUsage

__all__ = [
    # Configuration
    "AppConfig",
    "GeneralConfig",
    "MonitorConfig",
    "PricingConfig",
    # Costs
    "CostReport",
    "EksCost",
    "FargateCost",
    "LambdaCost",
    # Metrics
    "ExecutionMetrics",
    "NetworkCounters",
    "ProcessUsage",
]
