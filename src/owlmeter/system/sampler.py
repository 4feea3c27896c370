"""
Point-in-time system readings backed by psutil.

SystemSampler answers two questions for the process monitor: what a given
process is using right now (CPU percent and resident memory), and how many
bytes the host has sent and received so far.
"""

import logging
import threading
from typing import Dict, Optional

import psutil

from ..models.metrics import NetworkCounters, ProcessUsage

logger = logging.getLogger(__name__)


class SystemSampler:
    """
    Reads process and network counters through psutil.

    psutil computes ``cpu_percent(interval=None)`` relative to the previous
    call on the same Process object, so handles are cached per pid. The
    first reading for a pid is primed and discarded, and callers should let
    a full sampling interval pass before the next one.
    """

    def __init__(self) -> None:
        self._processes: Dict[int, psutil.Process] = {}
        self._lock = threading.Lock()

    def prime(self, pid: int) -> None:
        """Attach to ``pid`` and start its CPU measurement window."""
        self._get_process(pid)

    def process_usage(self, pid: int) -> Optional[ProcessUsage]:
        """
        Return the current CPU percent and RSS of ``pid``.

        Returns:
            The reading, or None once the process has exited, turned into a
            zombie or cannot be inspected.
        """
        try:
            proc = self._get_process(pid)
            if proc is None:
                return None
            with proc.oneshot():
                cpu_percent = float(proc.cpu_percent(interval=None))
                memory_bytes = int(proc.memory_info().rss)
            return ProcessUsage(cpu_percent=cpu_percent, memory_bytes=memory_bytes)
        except psutil.NoSuchProcess:
            # Includes ZombieProcess; expected around process exit.
            logger.debug(f"Process {pid} no longer resolvable")
            self._forget(pid)
            return None
        except psutil.AccessDenied:
            logger.debug(f"Access denied for process {pid}")
            return None

    def network_counters(self) -> NetworkCounters:
        """Return cumulative bytes sent/received summed over all interfaces."""
        counters = psutil.net_io_counters()
        if counters is None:
            # No network interfaces reported.
            return NetworkCounters(bytes_sent=0, bytes_received=0)
        return NetworkCounters(
            bytes_sent=int(counters.bytes_sent),
            bytes_received=int(counters.bytes_recv),
        )

    def _get_process(self, pid: int) -> Optional[psutil.Process]:
        with self._lock:
            proc = self._processes.get(pid)
            if proc is not None:
                return proc
            try:
                proc = psutil.Process(pid)
                proc.cpu_percent(interval=None)
            except psutil.NoSuchProcess:
                logger.debug(f"Process {pid} died before sampling")
                return None
            except psutil.AccessDenied:
                logger.debug(f"Access denied attaching to process {pid}")
                return None
            self._processes[pid] = proc
            return proc

    def _forget(self, pid: int) -> None:
        with self._lock:
            self._processes.pop(pid, None)
