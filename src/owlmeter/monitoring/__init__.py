"""
Process monitoring for a single supervised run.

- process_monitor: the background sampling loop and its stop protocol
- aggregator: reduction of raw samples into ExecutionMetrics
"""

from .aggregator import BYTES_PER_MB, aggregate, average, bytes_to_mb, peak, saturating_delta
from .process_monitor import MonitorStateError, ProcessMonitor

__all__ = [
    "BYTES_PER_MB",
    "aggregate",
    "average",
    "bytes_to_mb",
    "peak",
    "saturating_delta",
    "MonitorStateError",
    "ProcessMonitor",
]
