"""
Integration tests that monitor real child processes end to end.

Each test starts the current Python interpreter as the program under
measurement, so no external tools are required.
"""

import json
import sys
import time
from unittest.mock import patch

import psutil
import pytest

from owlmeter.cli.main import main_cli
from owlmeter.cli.orchestrator import RunOrchestrator
from owlmeter.executor import ProcessExitError, SpawnError, TargetProcess
from owlmeter.models.config import MonitorConfig
from owlmeter.monitoring import ProcessMonitor
from owlmeter.pricing import AwsRegion

FAST_MONITOR = MonitorConfig(interval_seconds=0.02, grace_delay_seconds=0.05)

BUSY_SCRIPT = """
import time
data = bytearray(8 * 1024 * 1024)
deadline = time.monotonic() + 0.4
while time.monotonic() < deadline:
    sum(range(1000))
"""

SPIN_SCRIPT = """
import time
deadline = time.monotonic() + 0.8
while time.monotonic() < deadline:
    pass
"""

# One extra 10ms clock tick per core over a 100ms window.
CPU_PERCENT_TOLERANCE = 50.0


@pytest.mark.integration
class TestMonitoredRuns:
    """Test cases for RunOrchestrator against real processes."""

    def test_successful_run(self):
        """Test metrics and costs of a short busy program."""
        orchestrator = RunOrchestrator(
            [sys.executable, "-c", BUSY_SCRIPT], monitor_config=FAST_MONITOR
        )
        result = orchestrator.run(AwsRegion.EU_WEST_1)
        metrics = result.metrics

        assert metrics.duration_ms >= 400
        assert metrics.memory_mb > 0.0
        assert metrics.cpu_peak >= metrics.cpu_avg >= 0.0
        assert metrics.network_sent >= 0
        assert result.costs.region is AwsRegion.EU_WEST_1
        assert result.costs.lambda_cost.cost_per_execution > 0.0
        assert result.costs.eks_cost.cost_per_execution > result.costs.fargate_cost.cost_per_execution

    def test_cpu_bound_peak_is_physically_possible(self):
        """Test that a spinning program never reads above the host's core count."""
        ceiling = 100.0 * (psutil.cpu_count() or 1) + CPU_PERCENT_TOLERANCE
        orchestrator = RunOrchestrator(
            [sys.executable, "-c", SPIN_SCRIPT],
            monitor_config=MonitorConfig(interval_seconds=0.1, grace_delay_seconds=0.15),
        )

        for _ in range(3):
            metrics = orchestrator.execute_and_monitor()
            assert 0.0 <= metrics.cpu_avg <= metrics.cpu_peak <= ceiling

    def test_first_readings_of_spinning_process(self):
        """Test that readings taken soon after start() stay below the ceiling."""
        ceiling = 100.0 * (psutil.cpu_count() or 1) + CPU_PERCENT_TOLERANCE
        target = TargetProcess([sys.executable, "-c", "while True: pass"])
        pid = target.spawn()
        try:
            for _ in range(20):
                monitor = ProcessMonitor(pid, interval=0.05, grace_delay=0.1)
                monitor.start()
                time.sleep(0.07)
                monitor.stop()
                assert monitor.finalize(0.07).cpu_peak <= ceiling
        finally:
            target.kill()

    def test_very_short_process(self):
        """Test that a program exiting immediately still yields valid metrics."""
        orchestrator = RunOrchestrator([sys.executable, "-c", "pass"], monitor_config=FAST_MONITOR)
        metrics = orchestrator.execute_and_monitor()

        assert metrics.duration_ms >= 0
        assert metrics.cpu_avg >= 0.0
        assert metrics.cpu_peak >= metrics.cpu_avg
        assert metrics.memory_mb >= 0.0

    def test_missing_executable(self):
        """Test that an unknown executable raises SpawnError."""
        orchestrator = RunOrchestrator(
            ["owlmeter-test-no-such-program-xyz"], monitor_config=FAST_MONITOR
        )

        with pytest.raises(SpawnError) as exc_info:
            orchestrator.run(AwsRegion.US_EAST_1)

        assert exc_info.value.command == ["owlmeter-test-no-such-program-xyz"]

    def test_non_zero_exit(self):
        """Test that a failing program raises ProcessExitError with its code."""
        orchestrator = RunOrchestrator(
            [sys.executable, "-c", "import sys; sys.exit(3)"], monitor_config=FAST_MONITOR
        )

        with pytest.raises(ProcessExitError) as exc_info:
            orchestrator.run(AwsRegion.US_EAST_1)

        assert exc_info.value.return_code == 3
        assert "return code 3" in str(exc_info.value)

    def test_monitor_setup_failure_reaps_child(self, fake_sampler_factory):
        """Test that the child is killed and reaped when the monitor cannot start."""
        spawned = []

        class RecordingTarget(TargetProcess):
            def __init__(self, command):
                super().__init__(command)
                spawned.append(self)

        class BrokenNetworkSampler(fake_sampler_factory):
            def network_counters(self):
                raise OSError("network counters unavailable")

        orchestrator = RunOrchestrator(
            [sys.executable, "-c", "import time; time.sleep(30)"],
            monitor_config=FAST_MONITOR,
            sampler=BrokenNetworkSampler(),
        )

        with patch("owlmeter.cli.orchestrator.TargetProcess", RecordingTarget):
            with pytest.raises(OSError, match="network counters unavailable"):
                orchestrator.execute_and_monitor()

        assert len(spawned) == 1
        assert spawned[0].process.poll() is not None
        assert spawned[0].return_code is not None


@pytest.mark.integration
@pytest.mark.slow
class TestCliEndToEnd:
    """Test cases for main_cli() with real processes."""

    def test_json_output(self, capsys):
        """Test the JSON report of a real run."""
        main_cli(["--json", "--region", "sa-east-1", sys.executable, "-c", "print('hello')"])

        out = capsys.readouterr().out
        # The child's own output precedes the report on stdout.
        report_text = out[out.index("{"):]
        data = json.loads(report_text)
        assert data["costs"]["region"] == "sa-east-1"
        assert data["metrics"]["duration_ms"] >= 0

    def test_failing_program_exits_1(self):
        """Test that a failing program makes the CLI exit with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            main_cli([sys.executable, "-c", "raise SystemExit(2)"])

        assert exc_info.value.code == 1
