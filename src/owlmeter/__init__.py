"""
owlmeter: run a program, measure it, and estimate its AWS cost.

The package is organized into specialized modules:
- config: TOML configuration loading and validation
- models: Data structures for metrics, costs and configuration
- validation: Input validation and error handling
- system: psutil-backed process and network readings
- monitoring: Background sampling and metrics aggregation
- pricing: Regional price table and cost estimation
- executor: Spawning and waiting on the monitored program
- cli: Command-line interface and run orchestration

Usage:
    From command line:
        owlmeter python3 script.py arg1

    Programmatically:
        from owlmeter import RunOrchestrator, AwsRegion
        result = RunOrchestrator(["python3", "script.py"]).run(AwsRegion.US_EAST_1)
"""

from .config import get_config, clear_config_cache, set_config_path
from .cli import main_cli, RunOrchestrator, RunResult

from .models import (
    AppConfig,
    CostReport,
    EksCost,
    ExecutionMetrics,
    FargateCost,
    LambdaCost,
)

from .monitoring import MonitorStateError, ProcessMonitor
from .pricing import AwsRegion, CostEstimator, RegionPricing, get_region_pricing
from .executor import ProcessExitError, RunError, SpawnError
from .validation import ValidationError

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    "get_config",
    "clear_config_cache",
    "set_config_path",
    "main_cli",
    "RunOrchestrator",
    "RunResult",
    # Models
    "AppConfig",
    "CostReport",
    "EksCost",
    "ExecutionMetrics",
    "FargateCost",
    "LambdaCost",
    # Monitoring
    "MonitorStateError",
    "ProcessMonitor",
    # Pricing
    "AwsRegion",
    "CostEstimator",
    "RegionPricing",
    "get_region_pricing",
    # Errors
    "ProcessExitError",
    "RunError",
    "SpawnError",
    "ValidationError",
]
