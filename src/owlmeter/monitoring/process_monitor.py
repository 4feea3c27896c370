"""
Background resource sampling for one supervised process.

ProcessMonitor polls the system sampler from a daemon thread at a fixed
interval, accumulating CPU samples and the peak resident memory of the
target. The supervised process runs untouched; the monitor only observes it.

Stop protocol: stop() raises the stop flag while holding the state lock,
and the sampling loop re-checks the flag under the same lock before every
append. Once stop() returns no further sample is recorded, so finalize()
always reads a settled sequence.
"""

import logging
import threading
from typing import List, Optional

from ..models.metrics import ExecutionMetrics, NetworkCounters
from ..system.sampler import SystemSampler
from .aggregator import aggregate

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 0.1
DEFAULT_GRACE_DELAY = 0.15


class MonitorStateError(RuntimeError):
    """Raised when the monitor lifecycle is driven out of order."""


class ProcessMonitor:
    """
    Samples CPU and memory of a single process until told to stop.

    One instance covers one supervised run: construct it once the pid is
    known, start() it, stop() it after the process exits, then finalize().
    """

    def __init__(
        self,
        pid: int,
        sampler: Optional[SystemSampler] = None,
        interval: float = DEFAULT_INTERVAL,
        grace_delay: float = DEFAULT_GRACE_DELAY,
    ):
        """
        Initialize the monitor and capture the network baseline.

        Args:
            pid: Process ID of the target
            sampler: Source of system readings (a psutil SystemSampler by default)
            interval: Pause between sampling cycles, in seconds
            grace_delay: Upper bound on how long stop() blocks; should exceed
                         ``interval`` so an in-flight cycle can wind down
        """
        self.pid = pid
        self.sampler = sampler or SystemSampler()
        self.interval = interval
        self.grace_delay = grace_delay

        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._cpu_samples: List[float] = []
        self._memory_peak = 0
        self._stopped = False

        self.samples_taken = 0
        self.samples_missed = 0

        self.network_start: NetworkCounters = self.sampler.network_counters()
        logger.debug(f"ProcessMonitor for PID {pid} initialized")

    @property
    def is_monitoring(self) -> bool:
        return self._thread is not None and not self._stop_event.is_set()

    def start(self) -> None:
        """Launch the sampling thread and return immediately."""
        if self._thread is not None:
            logger.warning(f"ProcessMonitor for PID {self.pid} already started")
            return

        self.sampler.prime(self.pid)
        self._thread = threading.Thread(
            target=self._sampling_loop,
            name=f"ProcessMonitor-{self.pid}",
            daemon=True,
        )
        self._thread.start()
        logger.debug(f"ProcessMonitor for PID {self.pid} started")

    def stop(self) -> None:
        """
        Signal the sampling loop to stop and wait out the grace delay.

        Blocks for at most ``grace_delay`` seconds. After this returns no
        sample is appended, whether or not the thread has fully exited.
        """
        with self._lock:
            self._stop_event.set()
            self._stopped = True

        if self._thread is not None and self._thread.is_alive():
            self._thread.join(timeout=self.grace_delay)
            if self._thread.is_alive():
                logger.warning(
                    f"ProcessMonitor for PID {self.pid} still finishing a cycle "
                    f"after {self.grace_delay}s"
                )
        logger.debug(
            f"ProcessMonitor for PID {self.pid} stopped: "
            f"{self.samples_taken} samples, {self.samples_missed} misses"
        )

    def finalize(self, duration: float) -> ExecutionMetrics:
        """
        Reduce the accumulated samples into ExecutionMetrics.

        Args:
            duration: Wall-clock run time of the target, in seconds

        Raises:
            MonitorStateError: If called before stop()
        """
        with self._lock:
            if not self._stopped:
                raise MonitorStateError("finalize() called before stop()")
            samples = list(self._cpu_samples)
            memory_peak = self._memory_peak

        network_end = self.sampler.network_counters()
        return aggregate(
            samples=samples,
            peak_memory_bytes=memory_peak,
            network_start=self.network_start,
            network_end=network_end,
            duration_ms=int(duration * 1000),
        )

    def _sampling_loop(self) -> None:
        logger.debug(f"Sampling loop for PID {self.pid} started")
        try:
            # A full interval separates start()'s priming call from the
            # first reading; cpu_percent over a shorter window is unreliable.
            while not self._stop_event.wait(self.interval):
                self._sample_once()
        finally:
            logger.debug(f"Sampling loop for PID {self.pid} finished")

    def _sample_once(self) -> None:
        try:
            usage = self.sampler.process_usage(self.pid)
        except Exception as e:
            logger.warning(f"Error sampling process {self.pid}: {e}")
            usage = None

        with self._lock:
            if self._stop_event.is_set():
                return
            if usage is None:
                self.samples_missed += 1
                return
            self._cpu_samples.append(usage.cpu_percent)
            if usage.memory_bytes > self._memory_peak:
                self._memory_peak = usage.memory_bytes
            self.samples_taken += 1

    def sample_count(self) -> int:
        with self._lock:
            return len(self._cpu_samples)

