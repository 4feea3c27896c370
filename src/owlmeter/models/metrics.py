"""
Execution metrics data models.

This module contains the records produced while supervising a single run:
the raw readings taken by the system sampler and the reduced
ExecutionMetrics summary handed to the cost estimator.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessUsage:
    """
    A point-in-time resource reading for one process.
    """

    # Instantaneous CPU usage; may exceed 100 on multi-core hosts.
    cpu_percent: float
    # Resident set size in bytes.
    memory_bytes: int


@dataclass(frozen=True)
class NetworkCounters:
    """
    Host-wide cumulative network byte counters summed over all interfaces.
    """

    bytes_sent: int
    bytes_received: int


@dataclass(frozen=True)
class ExecutionMetrics:
    """
    Summary of the resources consumed by one supervised run.

    Produced once by ProcessMonitor.finalize(). ``cpu_peak`` is never below
    ``cpu_avg`` when at least one sample was captured, and both are 0 when
    the process exited before the first sampling cycle.

    Network figures are host-wide deltas between the start and the end of
    the run, not scoped to the supervised process. Unrelated traffic on the
    same host during the run is included in them.
    """

    duration_ms: int
    cpu_avg: float
    cpu_peak: float
    memory_mb: float
    network_sent: int
    network_received: int
