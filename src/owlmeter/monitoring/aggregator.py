"""
Reduction of raw samples into ExecutionMetrics.
"""

import math
from typing import Sequence

from ..models.metrics import ExecutionMetrics, NetworkCounters

# Divisor applied to RSS bytes when reporting memory in megabytes.
BYTES_PER_MB = 1_024_000


def average(samples: Sequence[float]) -> float:
    """Arithmetic mean of ``samples``, 0.0 when there are none."""
    if not samples:
        return 0.0
    return math.fsum(samples) / len(samples)


def peak(samples: Sequence[float]) -> float:
    """Largest sample, seeded at 0.0."""
    return max(0.0, max(samples, default=0.0))


def bytes_to_mb(value: int) -> float:
    return value / BYTES_PER_MB


def saturating_delta(end: int, start: int) -> int:
    """``end - start``, or 0 if the counter went backwards (reset, wraparound)."""
    return end - start if end > start else 0


def aggregate(
    samples: Sequence[float],
    peak_memory_bytes: int,
    network_start: NetworkCounters,
    network_end: NetworkCounters,
    duration_ms: int,
) -> ExecutionMetrics:
    """
    Build the ExecutionMetrics of a run from its accumulated state.

    Args:
        samples: CPU percent readings in sampling order
        peak_memory_bytes: Largest RSS observed during the run
        network_start: Host counters captured when monitoring was set up
        network_end: Host counters captured at finalization
        duration_ms: Wall-clock run time of the supervised process
    """
    cpu_avg = average(samples)
    # Guard against float rounding in the mean exceeding the largest sample.
    cpu_peak = max(peak(samples), cpu_avg) if samples else 0.0

    return ExecutionMetrics(
        duration_ms=max(int(duration_ms), 0),
        cpu_avg=cpu_avg,
        cpu_peak=cpu_peak,
        memory_mb=bytes_to_mb(max(peak_memory_bytes, 0)),
        network_sent=saturating_delta(network_end.bytes_sent, network_start.bytes_sent),
        network_received=saturating_delta(
            network_end.bytes_received, network_start.bytes_received
        ),
    )
