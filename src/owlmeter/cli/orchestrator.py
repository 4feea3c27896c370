"""
Run orchestration for the CLI.

RunOrchestrator spawns the target program, drives a ProcessMonitor around
its lifetime and hands the resulting metrics to the cost estimator.
"""

import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Union

from ..config import get_config
from ..executor import ProcessExitError, TargetProcess
from ..models.config import MonitorConfig
from ..models.costs import CostReport
from ..models.metrics import ExecutionMetrics
from ..monitoring import ProcessMonitor
from ..pricing import AwsRegion, CostEstimator
from ..system import SystemSampler
from ..validation import validate_command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    """Metrics of a successful run and the cost estimates derived from them."""

    command: List[str]
    metrics: ExecutionMetrics
    costs: CostReport


class RunOrchestrator:
    """
    Executes one program under monitoring.

    Spawn failures and non-zero exits propagate as RunError subclasses;
    metrics gathered for a failed run are discarded.
    """

    def __init__(
        self,
        command: List[str],
        monitor_config: Optional[MonitorConfig] = None,
        sampler: Optional[SystemSampler] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            command: Executable followed by its arguments
            monitor_config: Sampling settings; read from get_config() when omitted
            sampler: System sampler shared with the monitor (psutil by default)
        """
        self.command = validate_command(command, field_name="command")
        self.monitor_config = monitor_config or get_config().monitor
        self.sampler = sampler or SystemSampler()

    def execute_and_monitor(self) -> ExecutionMetrics:
        """
        Run the program to completion while sampling it.

        Raises:
            SpawnError: If the program could not be started
            ProcessExitError: If the program exited unsuccessfully
        """
        target = TargetProcess(self.command)

        start = time.monotonic()
        pid = target.spawn()

        try:
            monitor = ProcessMonitor(
                pid,
                sampler=self.sampler,
                interval=self.monitor_config.interval_seconds,
                grace_delay=self.monitor_config.grace_delay_seconds,
            )
            monitor.start()
        except Exception:
            logger.error(f"Monitor setup failed for PID {pid}, terminating it")
            target.kill()
            raise

        try:
            return_code = target.wait()
            duration = time.monotonic() - start
        finally:
            monitor.stop()

        if return_code != 0:
            raise ProcessExitError(return_code)

        metrics = monitor.finalize(duration)
        logger.info(
            f"Collected {monitor.samples_taken} samples over {metrics.duration_ms} ms"
        )
        return metrics

    def run(self, region: Union[AwsRegion, str]) -> RunResult:
        """Execute the program and estimate its costs in ``region``."""
        estimator = CostEstimator(region)
        metrics = self.execute_and_monitor()
        return RunResult(
            command=list(self.command),
            metrics=metrics,
            costs=estimator.estimate_all(metrics),
        )
